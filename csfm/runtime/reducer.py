"""Single-intent reducer over ``AppState``.

``update`` consumes one intent to completion. Filesystem listings go
through ``RuntimeServices.submit_listing`` when a background scheduler is
wired in, otherwise they run inline; either way results land through
``apply_listing_result`` so stale or failed reads never desynchronize the
address field from the displayed listing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..actions import DeleteGate
from ..bookmarks import BookmarkRegistry
from ..config import Configuration, load_configuration
from ..directory_model import ListingResult, list_directory
from ..errors import ConfigurationError, LaunchError
from ..navigation import ListingRequest, PathNavigator, parent_path
from ..opener import OpenDispatcher, launch_detached
from .intents import (
    BookmarkSelected,
    DeleteDir,
    DeleteFile,
    Intent,
    NavigateInto,
    NavigateUp,
    Noop,
    Open,
    PathChanged,
    Quit,
    Refresh,
    ReloadConfig,
    Submit,
    ToggleHidden,
    ToggleSidebar,
)
from .state import AppState

logger = logging.getLogger("csfm.runtime")


@dataclass(frozen=True)
class RuntimeServices:
    """Injected collaborators used by the reducer."""

    confirm: Callable[[str], bool]
    notify: Callable[[str], None]
    launch: Callable[[Path], LaunchError | None] = launch_detached
    lister: Callable[[Path, bool], ListingResult] = list_directory
    load_config: Callable[[], tuple[Configuration, ConfigurationError | None]] = load_configuration
    submit_listing: Callable[[ListingRequest], None] | None = None


def _report_config_error(error: ConfigurationError | None, services: RuntimeServices) -> None:
    if error is not None:
        services.notify(str(error))


def apply_listing_result(
    state: AppState,
    request: ListingRequest,
    result: ListingResult,
    services: RuntimeServices,
) -> bool | None:
    """Apply a finished listing and notify once when the read failed."""
    applied = state.navigator.apply_listing(request, result)
    if applied is False:
        services.notify(str(result.error))
    return applied


def _navigate(state: AppState, services: RuntimeServices, show_hidden: bool | None = None) -> None:
    request = state.navigator.request_navigation(show_hidden)
    if services.submit_listing is not None:
        services.submit_listing(request)
        return
    result = services.lister(request.target, request.show_hidden)
    apply_listing_result(state, request, result, services)


def _jump(
    state: AppState,
    target: Path | str,
    services: RuntimeServices,
    show_hidden: bool | None = None,
) -> None:
    state.navigator.set_path(str(target))
    _navigate(state, services, show_hidden)


def _reload_config(state: AppState, services: RuntimeServices) -> None:
    config, error = services.load_config()
    _report_config_error(error, services)
    state.config = config
    state.bookmarks = BookmarkRegistry(config.bookmarks)
    _jump(state, state.current_path, services, show_hidden=config.show_hidden_files)


def update(state: AppState, intent: Intent, services: RuntimeServices) -> None:
    """Apply ``intent`` to ``state``."""
    navigator = state.navigator
    if isinstance(intent, PathChanged):
        navigator.set_path(intent.text)
    elif isinstance(intent, Submit):
        _navigate(state, services)
    elif isinstance(intent, NavigateUp):
        _jump(state, parent_path(navigator.current_path), services)
    elif isinstance(intent, NavigateInto):
        _jump(state, intent.path, services)
    elif isinstance(intent, BookmarkSelected):
        _jump(state, state.bookmarks.resolve(intent.bookmark), services)
    elif isinstance(intent, Open):
        OpenDispatcher(services.notify, services.launch).open(intent.path)
    elif isinstance(intent, (DeleteFile, DeleteDir)):
        gate = DeleteGate(services.confirm, services.notify)
        if isinstance(intent, DeleteFile):
            gate.delete_file(intent.path)
        else:
            gate.delete_dir(intent.path)
        _jump(state, navigator.current_path, services)
    elif isinstance(intent, Refresh):
        _jump(state, navigator.current_path, services)
    elif isinstance(intent, ToggleSidebar):
        state.sidebar_visible = not state.sidebar_visible
    elif isinstance(intent, ToggleHidden):
        _jump(state, navigator.current_path, services, show_hidden=not navigator.show_hidden)
    elif isinstance(intent, ReloadConfig):
        _reload_config(state, services)
    elif isinstance(intent, Quit):
        state.running = False
    elif isinstance(intent, Noop):
        pass
    else:
        logger.warning("ignoring unknown intent %r", intent)


def bootstrap_state(services: RuntimeServices, start: Path | None = None) -> AppState:
    """Create initial ``AppState`` from config and the starting directory.

    The first listing always runs inline so the state is populated before
    the first render.
    """
    config, error = services.load_config()
    _report_config_error(error, services)
    navigator = PathNavigator(start, show_hidden=config.show_hidden_files)
    result = navigator.navigate(services.lister)
    if not result.ok:
        services.notify(str(result.error))
    return AppState(
        config=config,
        navigator=navigator,
        bookmarks=BookmarkRegistry(config.bookmarks),
    )


__all__ = [
    "RuntimeServices",
    "apply_listing_result",
    "bootstrap_state",
    "update",
]
