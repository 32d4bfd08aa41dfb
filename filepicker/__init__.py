"""Public package surface for filepicker.

Re-exports the picker core: listings, filters, navigation state, outcomes,
and directory stores. ``main`` runs the command-line host.
"""

from __future__ import annotations

from .config import PickerConfig
from .directory_model import (
    Entry,
    Listing,
    ListingRow,
    all_of,
    directories_first,
    extension_filter,
    hidden_entries_filter,
    list_directory,
)
from .navigation import (
    Completed,
    EmptyName,
    InvalidSelection,
    Navigated,
    NavigationState,
    NoFolder,
    PickerOutcome,
    PickerSession,
    Prompt,
    confirm_typed_name,
)
from .persistence import DirectoryStore, JsonDirectoryStore, MemoryDirectoryStore
from .selection import derive_base_name, validate


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Completed",
    "DirectoryStore",
    "EmptyName",
    "Entry",
    "InvalidSelection",
    "JsonDirectoryStore",
    "Listing",
    "ListingRow",
    "MemoryDirectoryStore",
    "Navigated",
    "NavigationState",
    "NoFolder",
    "PickerConfig",
    "PickerOutcome",
    "PickerSession",
    "Prompt",
    "all_of",
    "confirm_typed_name",
    "derive_base_name",
    "directories_first",
    "extension_filter",
    "hidden_entries_filter",
    "list_directory",
    "main",
    "validate",
]
