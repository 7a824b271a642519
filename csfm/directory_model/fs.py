"""Filesystem scanning for one directory level."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import DirectoryReadError
from .types import DirectoryEntry, ListingResult

logger = logging.getLogger("csfm.directory_model")

HIDDEN_PREFIX = "."


def is_hidden_name(name: str) -> bool:
    """Return whether ``name`` carries the hidden-file marker."""
    return name.startswith(HIDDEN_PREFIX)


def entry_sort_key(entry: DirectoryEntry) -> tuple[bool, str]:
    """Directories first, then case-sensitive codepoint order by name."""
    return (not entry.is_dir, entry.name)


def list_directory(path: Path | str, show_hidden: bool) -> ListingResult:
    """List the visible children of ``path`` in display order.

    Read failures (missing path, not a directory, permission denied) are
    returned as a failed ``ListingResult`` rather than raised. Entries whose
    type cannot be determined are listed as non-directories; symlinks to
    directories count as directories.
    """
    directory = Path(path)
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as scanned:
            for child in scanned:
                name = child.name
                if not name or name in (".", ".."):
                    continue
                if not show_hidden and is_hidden_name(name):
                    continue
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                entries.append(DirectoryEntry(path=Path(child.path), is_dir=is_dir))
    except (OSError, ValueError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        logger.warning("cannot read directory %s: %s", directory, reason)
        return ListingResult(
            path=directory,
            error=DirectoryReadError(f"Cannot open '{directory}': {reason}"),
        )

    entries.sort(key=entry_sort_key)
    return ListingResult(path=directory, entries=tuple(entries))


__all__ = [
    "HIDDEN_PREFIX",
    "is_hidden_name",
    "entry_sort_key",
    "list_directory",
]
