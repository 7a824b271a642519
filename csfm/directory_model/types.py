"""Domain datatypes for directory listings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..errors import DirectoryReadError


@dataclass(frozen=True)
class DirectoryEntry:
    """One listed child of a directory."""

    path: Path
    is_dir: bool

    @property
    def name(self) -> str:
        """Display name: the final path component."""
        return self.path.name


@dataclass(frozen=True)
class ListingResult:
    """Outcome of one directory scan.

    ``error`` is ``None`` on success, in which case ``entries`` may still be
    empty for a genuinely empty directory. On failure ``entries`` is always
    empty and ``error`` carries the reason.
    """

    path: Path
    entries: tuple[DirectoryEntry, ...] = ()
    error: DirectoryReadError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_empty(self) -> bool:
        return self.ok and not self.entries


__all__ = [
    "DirectoryEntry",
    "ListingResult",
]
