"""Entry predicates for display and selection filtering.

A filter of ``None`` accepts every entry. Helpers here build the common
filters hosts pass in and compose several into one.
"""

from __future__ import annotations

from collections.abc import Callable

from .types import Entry

EntryFilter = Callable[[Entry], bool]


def accepts(entry_filter: EntryFilter | None, entry: Entry) -> bool:
    """Return whether ``entry`` passes ``entry_filter`` (``None`` accepts all)."""
    if entry_filter is None:
        return True
    return bool(entry_filter(entry))


def _normalize_extension(extension: str) -> str:
    stripped = extension.strip().lower()
    if not stripped:
        raise ValueError("extension must not be empty")
    return stripped if stripped.startswith(".") else f".{stripped}"


def extension_filter(*extensions: str, include_directories: bool = True) -> EntryFilter:
    """Accept files whose name ends with one of ``extensions``.

    Matching is case-insensitive and extensions may be given with or without
    the leading dot. Directories pass when ``include_directories`` is set so
    a display filter keeps them navigable.
    """
    suffixes = tuple(_normalize_extension(extension) for extension in extensions)

    def matches(entry: Entry) -> bool:
        if entry.is_dir:
            return include_directories
        return entry.name.lower().endswith(suffixes)

    return matches


def hidden_entries_filter(show_hidden: bool) -> EntryFilter | None:
    """Return a filter dropping dot-names, or ``None`` when hidden entries show."""
    if show_hidden:
        return None

    def visible(entry: Entry) -> bool:
        return not entry.name.startswith(".")

    return visible


def all_of(*filters: EntryFilter | None) -> EntryFilter | None:
    """Compose filters so an entry must pass each of them.

    ``None`` members are skipped; composing nothing yields ``None``.
    """
    active = [entry_filter for entry_filter in filters if entry_filter is not None]
    if not active:
        return None
    if len(active) == 1:
        return active[0]

    def combined(entry: Entry) -> bool:
        return all(entry_filter(entry) for entry_filter in active)

    return combined


__all__ = [
    "EntryFilter",
    "accepts",
    "all_of",
    "extension_filter",
    "hidden_entries_filter",
]
