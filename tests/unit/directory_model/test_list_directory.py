"""Tests for directory listings: ordering, filtering, and the parent row."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from filepicker.directory_model import (
    Entry,
    extension_filter,
    list_directory,
    parent_directory,
    reversed_ordering,
    directories_first,
)


def _populate(root: Path) -> None:
    (root / "zeta").mkdir()
    (root / "Alpha").mkdir()
    (root / "b.txt").write_text("b\n", encoding="utf-8")
    (root / "A.gpx").write_text("a\n", encoding="utf-8")
    (root / "c.GPX").write_text("c\n", encoding="utf-8")


class ListDirectoryTests(unittest.TestCase):
    def test_directories_come_first_then_names_case_insensitively(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _populate(root)

            listing = list_directory(root)

            self.assertEqual([entry.name for entry in listing.children], ["Alpha", "zeta", "A.gpx", "b.txt", "c.GPX"])
            kinds = [entry.is_dir for entry in listing.children]
            self.assertEqual(kinds, sorted(kinds, reverse=True))

    def test_parent_row_is_injected_at_index_zero(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _populate(root)

            listing = list_directory(root)

            self.assertTrue(listing.has_parent_row)
            self.assertTrue(listing.is_parent_row(0))
            self.assertFalse(listing.is_parent_row(1))
            self.assertEqual(listing[0], Entry(path=root.parent, is_dir=True))
            self.assertEqual(len(listing), len(listing.children) + 1)
            rows = listing.rows()
            self.assertTrue(rows[0].is_parent_row)
            self.assertTrue(rows[0].is_dir)
            self.assertFalse(any(row.is_parent_row for row in rows[1:]))

    def test_filesystem_root_has_no_parent_row(self) -> None:
        root = Path(os.path.abspath(os.sep))

        listing = list_directory(root)

        self.assertIsNone(parent_directory(root))
        self.assertFalse(listing.has_parent_row)
        self.assertEqual(listing.children, listing.entries)

    def test_listing_twice_yields_equal_sequences(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _populate(root)

            self.assertEqual(list_directory(root), list_directory(root))
            self.assertEqual(list_directory(root, ordering=None), list_directory(root, ordering=None))

    def test_missing_directory_degrades_to_empty_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp).resolve() / "vanished"

            listing = list_directory(missing)

            self.assertEqual(listing.children, ())
            self.assertEqual(listing.directory, missing)
            self.assertTrue(listing.has_parent_row)

    def test_file_path_degrades_to_empty_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "plain.txt"
            target.write_text("x\n", encoding="utf-8")

            self.assertEqual(list_directory(target).children, ())

    def test_display_filter_drops_rejected_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _populate(root)

            listing = list_directory(root, display_filter=extension_filter(".gpx"))

            self.assertEqual([entry.name for entry in listing.children], ["Alpha", "zeta", "A.gpx", "c.GPX"])

    def test_no_ordering_keeps_filesystem_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _populate(root)
            with os.scandir(root) as entries:
                expected = [entry.name for entry in entries]

            listing = list_directory(root, ordering=None)

            self.assertEqual([entry.name for entry in listing.children], expected)

    def test_custom_ordering_replaces_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _populate(root)

            listing = list_directory(root, ordering=reversed_ordering(directories_first))

            self.assertEqual([entry.name for entry in listing.children], ["c.GPX", "b.txt", "A.gpx", "zeta", "Alpha"])
            self.assertTrue(listing.is_parent_row(0))

    def test_find_returns_listing_index_of_named_child(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _populate(root)

            listing = list_directory(root)

            self.assertEqual(listing.find("Alpha"), 1)
            self.assertEqual(listing[listing.find("b.txt")].name, "b.txt")
            self.assertIsNone(listing.find("missing"))


if __name__ == "__main__":
    unittest.main()
