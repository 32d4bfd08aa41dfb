"""Filesystem scanning that turns one directory into a ``Listing``."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .filters import EntryFilter, accepts
from .ordering import EntryOrdering, directories_first, sort_entries
from .types import Entry, Listing, absolute_path

logger = logging.getLogger(__name__)


def parent_directory(directory: Path) -> Path | None:
    """Return the parent of ``directory`` or ``None`` at a filesystem root."""
    parent = directory.parent
    if parent == directory:
        return None
    return parent


def scan_children(directory: Path) -> tuple[list[Entry], OSError | None]:
    """Return immediate children of ``directory`` in filesystem order.

    Returns ``(children, scan_error)``; ``scan_error`` is set and children are
    empty when the directory is missing, unreadable, or not a directory.
    """
    children: list[Entry] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                children.append(Entry(path=directory / child.name, is_dir=is_dir))
    except OSError as exc:
        return [], exc
    return children, None


def list_directory(
    directory: Path | str,
    display_filter: EntryFilter | None = None,
    ordering: EntryOrdering | None = directories_first,
) -> Listing:
    """List ``directory`` filtered by ``display_filter`` and sorted by ``ordering``.

    Enumeration failures degrade to an empty listing. When a parent exists it
    is prepended as a directory entry and ``has_parent_row`` is set.
    """
    directory = absolute_path(directory)
    children, scan_error = scan_children(directory)
    if scan_error is not None:
        logger.debug("cannot list %s: %s", directory, scan_error)

    visible = [child for child in children if accepts(display_filter, child)]
    ordered = sort_entries(visible, ordering)

    parent = parent_directory(directory)
    if parent is None:
        return Listing(directory=directory, entries=tuple(ordered), has_parent_row=False)
    parent_entry = Entry(path=parent, is_dir=True)
    return Listing(directory=directory, entries=(parent_entry, *ordered), has_parent_row=True)


__all__ = [
    "list_directory",
    "parent_directory",
    "scan_children",
]
