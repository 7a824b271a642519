"""Confirmation and notification collaborators.

The desktop implementation shells out to ``zenity``; the terminal one
prompts on stdin/stderr. Both keep failures non-fatal: a confirmation that
cannot be shown counts as "no", a notification that cannot be shown is
only logged.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from collections.abc import Callable
from typing import TextIO

from .errors import ConfirmationUtilityError

logger = logging.getLogger("csfm.dialogs")

DIALOG_TITLE = "CsFM"
ZENITY = "zenity"


def zenity_available() -> bool:
    return shutil.which(ZENITY) is not None


class ZenityDialogs:
    """Blocking yes/no and error dialogs backed by the zenity utility."""

    def __init__(self, run: Callable[..., subprocess.CompletedProcess] = subprocess.run) -> None:
        self._run = run

    def _zenity(self, kind: str, text: str) -> subprocess.CompletedProcess:
        return self._run(
            [ZENITY, kind, f"--title={DIALOG_TITLE}", f"--text={text}"],
            capture_output=True,
            check=False,
        )

    def ask(self, question: str) -> bool:
        try:
            proc = self._zenity("--question", question)
        except (OSError, ValueError) as exc:
            error = ConfirmationUtilityError(f"Cannot show confirmation dialog: {exc}")
            logger.warning("%s", error)
            self.notify(f"Error: {error}")
            return False
        return proc.returncode == 0

    def notify(self, message: str) -> None:
        try:
            proc = self._zenity("--error", message)
        except (OSError, ValueError) as exc:
            logger.warning("cannot show notification %r: %s", message, exc)
            return
        if proc.returncode not in (0, 1):
            logger.warning("notification dialog exited with status %d", proc.returncode)


class TerminalDialogs:
    """Line-oriented dialogs for the interactive terminal front-end."""

    def __init__(
        self,
        read_line: Callable[[str], str] = input,
        stream: TextIO | None = None,
    ) -> None:
        self._read_line = read_line
        self._stream = stream

    def ask(self, question: str) -> bool:
        try:
            answer = self._read_line(f"{question} [y/N] ")
        except (EOFError, KeyboardInterrupt):
            return False
        return answer.strip().lower() in {"y", "yes"}

    def notify(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        try:
            stream.write(f"! {message}\n")
            stream.flush()
        except (OSError, ValueError) as exc:
            logger.warning("cannot write notification %r: %s", message, exc)


def default_dialogs() -> ZenityDialogs | TerminalDialogs:
    """Zenity when installed, terminal prompts otherwise."""
    if zenity_available():
        return ZenityDialogs()
    return TerminalDialogs()


__all__ = [
    "DIALOG_TITLE",
    "ZenityDialogs",
    "TerminalDialogs",
    "default_dialogs",
    "zenity_available",
]
