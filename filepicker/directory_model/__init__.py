"""Domain model for one-directory listings.

This package contains non-UI listing primitives:
- entry and listing datatypes
- comparator policies for ordering entries
- display/selection filter helpers
- filesystem scanning into listings with an injected parent row
"""

from __future__ import annotations

from .types import Entry, Listing, ListingRow, absolute_path
from .ordering import EntryOrdering, by_name, directories_first, reversed_ordering, sort_entries
from .filters import EntryFilter, accepts, all_of, extension_filter, hidden_entries_filter
from .fs import list_directory, parent_directory, scan_children

__all__ = [
    "absolute_path",
    "Entry",
    "Listing",
    "ListingRow",
    "EntryOrdering",
    "by_name",
    "directories_first",
    "reversed_ordering",
    "sort_entries",
    "EntryFilter",
    "accepts",
    "all_of",
    "extension_filter",
    "hidden_entries_filter",
    "list_directory",
    "parent_directory",
    "scan_children",
]
