"""Intent processing loop.

Intents are handled strictly one at a time. Background listing results are
drained and applied between intents, in completion order; superseded ones
are dropped by the navigator.
"""

from __future__ import annotations

from collections.abc import Callable

from .intents import Intent, Noop
from .listing_scheduler import ListingScheduler
from .reducer import RuntimeServices, apply_listing_result, update
from .state import AppState


def apply_completed_listings(
    state: AppState,
    scheduler: ListingScheduler,
    services: RuntimeServices,
) -> int:
    """Apply every drained listing; return how many were committed or failed."""
    applied = 0
    for completion in scheduler.drain_results():
        if apply_listing_result(state, completion.request, completion.result, services) is not None:
            applied += 1
    return applied


def run_intent_loop(
    state: AppState,
    services: RuntimeServices,
    next_intent: Callable[[AppState], Intent | None],
    render: Callable[[AppState], None],
    scheduler: ListingScheduler | None = None,
    settle_seconds: float | None = 5.0,
) -> None:
    """Read, reduce, and render until ``Quit`` or input runs out.

    With a scheduler, each intent waits up to ``settle_seconds`` for its
    listing before rendering; a slower listing is applied on a later turn
    if it is still the latest request.
    """
    render(state)
    while state.running:
        intent = next_intent(state)
        if intent is None:
            break
        update(state, intent, services)
        if scheduler is not None:
            scheduler.wait_idle(settle_seconds)
            apply_completed_listings(state, scheduler, services)
        if state.running and not isinstance(intent, Noop):
            render(state)
