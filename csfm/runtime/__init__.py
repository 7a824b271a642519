"""Intent-driven runtime for the navigation core.

The presentation layer feeds ``Intent`` values into ``update`` one at a
time; directory listings may run on a background worker and are applied
back in issue order by ``apply_completed_listings``.
"""

from __future__ import annotations

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
from .listing_scheduler import ListingCompletion, ListingScheduler
from .loop import apply_completed_listings, run_intent_loop
from .reducer import RuntimeServices, apply_listing_result, bootstrap_state, update
from .state import AppState

__all__ = [
    "AppState",
    "BookmarkSelected",
    "DeleteDir",
    "DeleteFile",
    "Intent",
    "ListingCompletion",
    "ListingScheduler",
    "NavigateInto",
    "NavigateUp",
    "Noop",
    "Open",
    "PathChanged",
    "Quit",
    "Refresh",
    "ReloadConfig",
    "RuntimeServices",
    "Submit",
    "ToggleHidden",
    "ToggleSidebar",
    "apply_completed_listings",
    "apply_listing_result",
    "bootstrap_state",
    "run_intent_loop",
    "update",
]
