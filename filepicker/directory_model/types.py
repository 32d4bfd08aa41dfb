"""Domain datatypes for directory entries and one-directory listings."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path


def absolute_path(path: Path | str) -> Path:
    """Return ``path`` made absolute with ``..`` segments collapsed, symlinks kept."""
    return Path(os.path.abspath(path))


@dataclass(frozen=True)
class Entry:
    """One filesystem path plus its directory/file kind."""

    path: Path
    is_dir: bool

    @classmethod
    def from_path(cls, path: Path | str) -> Entry:
        """Build an entry for ``path``, stat-ing it to derive the kind.

        Symlinks are followed so a link to a directory stays navigable. A path
        that cannot be stat-ed is treated as a file.
        """
        candidate = absolute_path(path)
        try:
            is_dir = candidate.is_dir()
        except OSError:
            is_dir = False
        return cls(path=candidate, is_dir=is_dir)

    @property
    def name(self) -> str:
        return self.path.name or self.path.anchor or str(self.path)

    @property
    def identity(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class ListingRow:
    """Host-facing render tuple for one listing position."""

    path: Path
    is_dir: bool
    is_parent_row: bool


@dataclass(frozen=True)
class Listing:
    """Ordered, filtered entries of exactly one directory.

    When ``has_parent_row`` is set, index 0 is the synthetic parent entry.
    """

    directory: Path
    entries: tuple[Entry, ...] = ()
    has_parent_row: bool = False

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> Entry:
        return self.entries[index]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    @property
    def children(self) -> tuple[Entry, ...]:
        """Real directory children, without the parent row."""
        return self.entries[1:] if self.has_parent_row else self.entries

    def is_parent_row(self, index: int) -> bool:
        return self.has_parent_row and index == 0

    def rows(self) -> list[ListingRow]:
        return [
            ListingRow(path=entry.path, is_dir=entry.is_dir, is_parent_row=self.is_parent_row(idx))
            for idx, entry in enumerate(self.entries)
        ]

    def find(self, name: str) -> int | None:
        """Return the index of the first real child called ``name``."""
        offset = 1 if self.has_parent_row else 0
        for idx, entry in enumerate(self.children):
            if entry.name == name:
                return idx + offset
        return None


__all__ = [
    "absolute_path",
    "Entry",
    "Listing",
    "ListingRow",
]
