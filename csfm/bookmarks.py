"""Named shortcut locations sourced from configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Bookmark:
    """Sidebar shortcut to a filesystem path."""

    title: str
    target_path: str


class BookmarkRegistry:
    """Read-only view of configured bookmarks in file order."""

    def __init__(self, bookmarks: tuple[Bookmark, ...] | list[Bookmark] = ()) -> None:
        self._bookmarks = tuple(bookmarks)

    def list(self) -> tuple[Bookmark, ...]:
        return self._bookmarks

    def resolve(self, bookmark: Bookmark) -> Path:
        """Return the bookmark target verbatim; existence is not checked here."""
        return Path(bookmark.target_path)

    def find(self, title: str) -> Bookmark | None:
        """First bookmark whose title equals ``title``."""
        return next((bookmark for bookmark in self._bookmarks if bookmark.title == title), None)

    def __len__(self) -> int:
        return len(self._bookmarks)
