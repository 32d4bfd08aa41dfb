"""Explicit picker configuration handed to ``NavigationState`` at construction."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from .directory_model import EntryFilter, EntryOrdering, directories_first


def default_root() -> Path:
    """Return the filesystem root of the current working directory."""
    return Path(os.path.abspath(os.sep))


@dataclass(frozen=True)
class PickerConfig:
    """Ordering, filters and the optional first-start prompt.

    ``ordering`` of ``None`` leaves entries in filesystem order; filters of
    ``None`` accept everything. ``default_root`` is where ``open`` falls back
    when the start directory is unusable.
    """

    ordering: EntryOrdering | None = directories_first
    display_filter: EntryFilter | None = None
    selection_filter: EntryFilter | None = None
    prompt_message: str | None = None
    default_root: Path = field(default_factory=default_root)

    def with_overrides(self, **changes: object) -> PickerConfig:
        return replace(self, **changes)


__all__ = [
    "PickerConfig",
    "default_root",
]
