"""TOML config loading for theme, hidden-file default, and bookmarks.

All access is defensive: a missing or malformed config falls back to
defaults and produces a warning string instead of an exception.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .bookmarks import Bookmark
from .errors import ConfigurationError

logger = logging.getLogger("csfm.config")

APP_NAME = "csfm"
CONFIG_FILENAME = "csfm.toml"
DEFAULT_THEME_NAME = "default"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LEGACY_CONFIG_PATH = Path.home() / ".config" / "csdesktop" / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class Configuration:
    """Startup preferences. Replaced wholesale on reload."""

    theme_name: str = DEFAULT_THEME_NAME
    show_hidden_files: bool = False
    bookmarks: tuple[Bookmark, ...] = ()


def _load_config_path() -> Path:
    """Return preferred config path, falling back to legacy location when needed."""
    if CONFIG_PATH.exists():
        return CONFIG_PATH
    if CONFIG_PATH == DEFAULT_CONFIG_PATH and LEGACY_CONFIG_PATH.exists():
        return LEGACY_CONFIG_PATH
    return CONFIG_PATH


def _theme_name(value: object) -> str:
    if not isinstance(value, str):
        return DEFAULT_THEME_NAME
    stripped = value.strip()
    return stripped if stripped else DEFAULT_THEME_NAME


def _bookmarks(value: object) -> tuple[Bookmark, ...]:
    """Parse ``sidebar_loc`` entries, dropping malformed ones individually."""
    if not isinstance(value, list):
        return ()
    bookmarks: list[Bookmark] = []
    for raw in value:
        if not isinstance(raw, dict):
            continue
        title = raw.get("title")
        path = raw.get("path")
        if not isinstance(title, str) or not title:
            continue
        if not isinstance(path, str) or not path:
            continue
        bookmarks.append(Bookmark(title=title, target_path=path))
    return tuple(bookmarks)


def parse_config(data: dict[str, object]) -> Configuration:
    """Build a ``Configuration`` from decoded TOML, defaulting invalid fields."""
    show_hidden = data.get("show_hidden_files")
    return Configuration(
        theme_name=_theme_name(data.get("theme")),
        show_hidden_files=show_hidden if isinstance(show_hidden, bool) else False,
        bookmarks=_bookmarks(data.get("sidebar_loc")),
    )


def load_configuration(path: Path | None = None) -> tuple[Configuration, ConfigurationError | None]:
    """Load config from ``path`` (or the default/legacy locations).

    Returns ``(config, error)``. ``error`` is ``None`` on success; otherwise
    ``config`` holds defaults.
    """
    config_path = path if path is not None else _load_config_path()
    try:
        text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        error = ConfigurationError(f"Config file not found: {config_path}, using defaults")
        logger.warning("%s", error)
        return Configuration(), error
    except (OSError, UnicodeDecodeError) as exc:
        error = ConfigurationError(f"Cannot read config {config_path}: {exc}")
        logger.warning("%s", error)
        return Configuration(), error

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        error = ConfigurationError(f"Malformed config {config_path}: {exc}")
        logger.warning("%s", error)
        return Configuration(), error
    return parse_config(data), None


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "LEGACY_CONFIG_PATH",
    "DEFAULT_THEME_NAME",
    "Configuration",
    "load_configuration",
    "parse_config",
]
