"""Domain model for one-level directory listings.

This package contains non-UI listing primitives:
- entry value objects and the tagged listing outcome
- the filtered, ordered directory scan
"""

from __future__ import annotations

from .types import DirectoryEntry, ListingResult
from .fs import HIDDEN_PREFIX, entry_sort_key, is_hidden_name, list_directory

__all__ = [
    "DirectoryEntry",
    "ListingResult",
    "HIDDEN_PREFIX",
    "entry_sort_key",
    "is_hidden_name",
    "list_directory",
]
