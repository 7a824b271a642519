"""User intents accepted by the reducer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..bookmarks import Bookmark


@dataclass(frozen=True)
class PathChanged:
    """Address field text edited; nothing is listed yet."""

    text: str


@dataclass(frozen=True)
class Submit:
    """Address field submitted."""


@dataclass(frozen=True)
class NavigateUp:
    pass


@dataclass(frozen=True)
class NavigateInto:
    path: Path


@dataclass(frozen=True)
class Open:
    path: Path


@dataclass(frozen=True)
class DeleteFile:
    path: Path


@dataclass(frozen=True)
class DeleteDir:
    path: Path


@dataclass(frozen=True)
class BookmarkSelected:
    bookmark: Bookmark


@dataclass(frozen=True)
class ToggleSidebar:
    pass


@dataclass(frozen=True)
class ToggleHidden:
    pass


@dataclass(frozen=True)
class ReloadConfig:
    pass


@dataclass(frozen=True)
class Refresh:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Noop:
    pass


Intent = (
    PathChanged
    | Submit
    | NavigateUp
    | NavigateInto
    | Open
    | DeleteFile
    | DeleteDir
    | BookmarkSelected
    | ToggleSidebar
    | ToggleHidden
    | ReloadConfig
    | Refresh
    | Quit
    | Noop
)
