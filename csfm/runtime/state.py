from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..bookmarks import BookmarkRegistry
from ..config import Configuration
from ..directory_model import DirectoryEntry
from ..navigation import PathNavigator


@dataclass
class AppState:
    config: Configuration
    navigator: PathNavigator
    bookmarks: BookmarkRegistry
    sidebar_visible: bool = True
    running: bool = True

    @property
    def current_path(self) -> Path:
        return self.navigator.current_path

    @property
    def listing(self) -> tuple[DirectoryEntry, ...]:
        return self.navigator.listing

    @property
    def path_text(self) -> str:
        return self.navigator.pending_path

    @property
    def show_hidden(self) -> bool:
        return self.navigator.show_hidden

    @property
    def theme_name(self) -> str:
        return self.config.theme_name
