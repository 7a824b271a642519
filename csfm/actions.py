"""Confirmation-gated delete operations.

Nothing on disk is touched unless the confirmer answered yes. Failures are
reported through the notifier and never raised.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import DeleteError

logger = logging.getLogger("csfm.actions")


class DeleteStatus(Enum):
    DECLINED = "declined"
    DELETED = "deleted"
    FAILED = "failed"


@dataclass(frozen=True)
class DeleteOutcome:
    path: Path
    status: DeleteStatus
    error: DeleteError | None = None


def display_name(path: Path) -> str:
    """Final path component, falling back to the full path for roots."""
    return path.name or str(path)


class DeleteGate:
    """Wraps file and directory removal behind a yes/no confirmation."""

    def __init__(
        self,
        confirm: Callable[[str], bool],
        notify: Callable[[str], None],
        remove_file: Callable[[Path], None] = os.remove,
        remove_tree: Callable[[Path], None] = shutil.rmtree,
    ) -> None:
        self._confirm = confirm
        self._notify = notify
        self._remove_file = remove_file
        self._remove_tree = remove_tree

    def delete_file(self, path: Path) -> DeleteOutcome:
        return self._delete(
            Path(path),
            question=f"Delete '{display_name(Path(path))}'?",
            remove=self._remove_file,
            failure="Failed to delete",
        )

    def delete_dir(self, path: Path) -> DeleteOutcome:
        return self._delete(
            Path(path),
            question=f"Delete '{display_name(Path(path))}' and all contents?",
            remove=self._remove_directory,
            failure="Failed to delete dir",
        )

    def _remove_directory(self, path: Path) -> None:
        # A link listed as a directory is removed itself, never its target.
        if path.is_symlink():
            self._remove_file(path)
        else:
            self._remove_tree(path)

    def _delete(
        self,
        path: Path,
        *,
        question: str,
        remove: Callable[[Path], None],
        failure: str,
    ) -> DeleteOutcome:
        if not self._confirm(question):
            return DeleteOutcome(path=path, status=DeleteStatus.DECLINED)
        try:
            remove(path)
        except (OSError, ValueError) as exc:
            error = DeleteError(f"{failure}: {exc}")
            logger.warning("%s", error)
            self._notify(str(error))
            return DeleteOutcome(path=path, status=DeleteStatus.FAILED, error=error)
        logger.info("deleted %s", path)
        return DeleteOutcome(path=path, status=DeleteStatus.DELETED)


__all__ = [
    "DeleteGate",
    "DeleteOutcome",
    "DeleteStatus",
    "display_name",
]
