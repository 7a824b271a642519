"""Background worker for directory listings."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from queue import Empty, Queue

from ..directory_model import ListingResult, list_directory
from ..errors import DirectoryReadError
from ..navigation import ListingRequest


@dataclass(frozen=True)
class ListingCompletion:
    """Finished listing paired with the request that produced it."""

    request: ListingRequest
    result: ListingResult


class ListingScheduler:
    """Single-threaded latest-request-wins listing scheduler.

    Requests queued while the worker is busy collapse to the newest one.
    Results are handed back through ``drain_results`` in completion order;
    deciding whether a result is still wanted is the caller's job.
    """

    def __init__(self, lister: Callable[[Path, bool], ListingResult] = list_directory) -> None:
        self._lister = lister
        self._lock = threading.Lock()
        self._pending: ListingRequest | None = None
        self._running = False
        self._idle = threading.Event()
        self._idle.set()
        self._results: Queue[ListingCompletion] = Queue()

    def _worker(self) -> None:
        while True:
            with self._lock:
                request = self._pending
                self._pending = None
                if request is None:
                    self._running = False
                    self._idle.set()
                    return

            try:
                result = self._lister(request.target, request.show_hidden)
            except Exception as exc:
                result = ListingResult(
                    path=request.target,
                    error=DirectoryReadError(f"Cannot open '{request.target}': {exc}"),
                )
            self._results.put(ListingCompletion(request=request, result=result))

    def schedule(self, request: ListingRequest) -> None:
        """Queue or replace the pending listing request."""
        with self._lock:
            self._pending = request
            self._idle.clear()
            if self._running:
                return
            self._running = True

        worker = threading.Thread(
            target=self._worker,
            name="csfm-listing",
            daemon=True,
        )
        worker.start()

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until no request is pending or running."""
        return self._idle.wait(timeout)

    def drain_results(self) -> list[ListingCompletion]:
        """Drain all completed listings."""
        out: list[ListingCompletion] = []
        while True:
            try:
                out.append(self._results.get_nowait())
            except Empty:
                break
        return out


__all__ = [
    "ListingCompletion",
    "ListingScheduler",
]
