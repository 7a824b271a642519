"""Path navigation state: pending path text, committed path, and listing.

This module intentionally has no UI concerns.
A path only becomes current after its directory was read successfully.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .directory_model import DirectoryEntry, ListingResult, list_directory

logger = logging.getLogger("csfm.navigation")

Lister = Callable[[Path, bool], ListingResult]


def filesystem_root() -> Path:
    """Return the root of the filesystem holding the working directory."""
    try:
        anchor = Path.cwd().anchor
    except OSError:
        anchor = ""
    return Path(anchor or os.sep)


def starting_directory() -> Path:
    """Process working directory, or the filesystem root when unavailable."""
    try:
        return Path.cwd()
    except OSError:
        return filesystem_root()


def parent_path(path: Path) -> Path:
    """Parent of ``path``; the root is its own parent."""
    return path.parent


def target_for(raw: str) -> Path:
    """Absolute target for typed path text, relative to the process directory."""
    return Path(os.path.abspath(os.path.expanduser(raw)))


@dataclass(frozen=True)
class ListingRequest:
    """One issued listing for a navigation target."""

    request_id: int
    target: Path
    show_hidden: bool


class PathNavigator:
    """Owns ``current_path`` and the listing shown for it.

    ``pending_path`` is the raw, unvalidated text the user typed. It is
    turned into a ``ListingRequest`` by ``request_navigation`` and committed
    by ``apply_listing`` only when the matching read succeeded.
    """

    def __init__(self, start: Path | None = None, show_hidden: bool = False) -> None:
        self.current_path = start if start is not None else starting_directory()
        self.listing: tuple[DirectoryEntry, ...] = ()
        self.pending_path = str(self.current_path)
        self.show_hidden = show_hidden
        self._next_request_id = 1
        self.latest_request_id = 0

    def set_path(self, raw: str) -> None:
        self.pending_path = raw

    def request_navigation(self, show_hidden: bool | None = None) -> ListingRequest:
        """Issue a listing request for the pending path, superseding older ones.

        ``show_hidden`` overrides the active filter for this request only; it
        becomes the active filter once the listing is committed.
        """
        request = ListingRequest(
            request_id=self._next_request_id,
            target=target_for(self.pending_path),
            show_hidden=self.show_hidden if show_hidden is None else show_hidden,
        )
        self._next_request_id += 1
        self.latest_request_id = request.request_id
        return request

    def is_current_request(self, request: ListingRequest) -> bool:
        return request.request_id == self.latest_request_id and target_for(self.pending_path) == request.target

    def apply_listing(self, request: ListingRequest, result: ListingResult) -> bool | None:
        """Apply a finished listing.

        Returns ``None`` when the request was superseded and the result was
        dropped, ``True`` when the path was committed, and ``False`` when the
        read failed and the previous path/listing pair was kept.
        """
        if not self.is_current_request(request):
            logger.debug("dropping stale listing #%d for %s", request.request_id, request.target)
            return None
        if not result.ok:
            self.pending_path = str(self.current_path)
            return False
        self.current_path = request.target
        self.listing = result.entries
        self.show_hidden = request.show_hidden
        self.pending_path = str(self.current_path)
        logger.info("entered %s (%d entries)", self.current_path, len(self.listing))
        return True

    def navigate(self, lister: Lister = list_directory) -> ListingResult:
        """List the pending path synchronously and apply the outcome."""
        request = self.request_navigation()
        result = lister(request.target, request.show_hidden)
        self.apply_listing(request, result)
        return result

    def up(self, lister: Lister = list_directory) -> ListingResult:
        self.set_path(str(parent_path(self.current_path)))
        return self.navigate(lister)

    def jump_to(self, path: Path | str, lister: Lister = list_directory) -> ListingResult:
        self.set_path(str(path))
        return self.navigate(lister)
