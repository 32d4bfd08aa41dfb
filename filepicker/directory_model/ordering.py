"""Comparator policies used to order directory listings."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key

from .types import Entry

EntryOrdering = Callable[[Entry, Entry], int]


def _compare_names(a: Entry, b: Entry) -> int:
    left = a.name.lower()
    right = b.name.lower()
    return (left > right) - (left < right)


def directories_first(a: Entry, b: Entry) -> int:
    """Order directories before files, then names case-insensitively."""
    if a.is_dir and not b.is_dir:
        return -1
    if b.is_dir and not a.is_dir:
        return 1
    return _compare_names(a, b)


def by_name(a: Entry, b: Entry) -> int:
    """Case-insensitive name order ignoring entry kind."""
    return _compare_names(a, b)


def reversed_ordering(ordering: EntryOrdering) -> EntryOrdering:
    """Return a comparator ranking entries opposite to ``ordering``."""

    def compare(a: Entry, b: Entry) -> int:
        return ordering(b, a)

    return compare


def sort_entries(entries: Iterable[Entry], ordering: EntryOrdering | None) -> list[Entry]:
    """Sort ``entries`` with ``ordering``; ``None`` keeps the incoming order.

    ``list.sort`` is stable, so comparator ties keep filesystem order.
    """
    out = list(entries)
    if ordering is not None:
        out.sort(key=cmp_to_key(ordering))
    return out


__all__ = [
    "EntryOrdering",
    "by_name",
    "directories_first",
    "reversed_ordering",
    "sort_entries",
]
