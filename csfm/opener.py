"""Hand files to the platform's default application.

The launcher is spawned detached; csfm never waits for it. Launch problems
come back as a ``LaunchError`` instead of raising.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

from .errors import LaunchError

logger = logging.getLogger("csfm.opener")


def default_open_command() -> list[str] | None:
    """Launcher argv prefix for this platform, ``None`` on Windows."""
    if os.name == "nt":
        return None
    if sys.platform == "darwin":
        return ["open"]
    return ["xdg-open"]


def launch_detached(target: Path) -> LaunchError | None:
    """Start the default application for ``target`` without waiting on it."""
    command = default_open_command()
    try:
        if command is None:
            os.startfile(str(target))  # type: ignore[attr-defined]
            return None
        if shutil.which(command[0]) is None:
            return LaunchError(f"Cannot open '{target}': {command[0]} not found")
        subprocess.Popen(
            [*command, str(target)],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except (OSError, ValueError) as exc:
        return LaunchError(f"Cannot open '{target}': {exc}")
    return None


class OpenDispatcher:
    """Routes open requests to a launcher and reports failures."""

    def __init__(
        self,
        notify: Callable[[str], None],
        launch: Callable[[Path], LaunchError | None] = launch_detached,
    ) -> None:
        self._notify = notify
        self._launch = launch

    def open(self, path: Path) -> LaunchError | None:
        target = Path(path)
        if not target.exists():
            error = LaunchError(f"Cannot open '{target}': no such file")
        else:
            error = self._launch(target)
        if error is not None:
            logger.warning("%s", error)
            self._notify(str(error))
            return error
        logger.info("opened %s", target)
        return None


__all__ = [
    "OpenDispatcher",
    "default_open_command",
    "launch_detached",
]
