"""Tests for the background directory-listing scheduler."""

from __future__ import annotations

import tempfile
import threading
import time
import unittest
from pathlib import Path

from filepicker.config import PickerConfig
from filepicker.directory_model import Listing
from filepicker.listing_prefetch import ListingPrefetchScheduler
from filepicker.navigation import NavigationState


def _wait_for_results(
    scheduler: ListingPrefetchScheduler,
    *,
    expected_count: int,
    timeout_seconds: float = 2.0,
) -> list:
    deadline = time.monotonic() + timeout_seconds
    out: list = []
    while time.monotonic() < deadline:
        out.extend(scheduler.drain_results())
        if len(out) >= expected_count:
            break
        time.sleep(0.01)
    return out

class ListingPrefetchSchedulerTests(unittest.TestCase):
    def test_schedule_lists_directory_in_background(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.gpx").write_text("x\n", encoding="utf-8")
            scheduler = ListingPrefetchScheduler()

            request_id = scheduler.schedule(root)
            results = _wait_for_results(scheduler, expected_count=1)

            self.assertEqual(len(results), 1)
            self.assertEqual(results[0].request.request_id, request_id)
            self.assertEqual([entry.name for entry in results[0].listing.children], ["a.gpx"])

    def test_pending_request_is_replaced_by_newer_one(self) -> None:
        started = threading.Event()
        release = threading.Event()
        calls: list[Path] = []

        def slow_list(directory: Path, _display_filter, _ordering) -> Listing:
            calls.append(directory)
            if len(calls) == 1:
                started.set()
                release.wait(timeout=2.0)
            return Listing(directory=directory)

        scheduler = ListingPrefetchScheduler(list_directory_fn=slow_list)
        first_id = scheduler.schedule(Path("/first"))
        self.assertTrue(started.wait(timeout=2.0))
        scheduler.schedule(Path("/second"))
        third_id = scheduler.schedule(Path("/third"))
        release.set()

        results = _wait_for_results(scheduler, expected_count=2)

        self.assertEqual([result.request.request_id for result in results], [first_id, third_id])
        self.assertEqual(calls, [Path("/first").absolute(), Path("/third").absolute()])

    def test_failed_listing_produces_no_result(self) -> None:
        def broken_list(directory: Path, _display_filter, _ordering) -> Listing:
            raise RuntimeError("boom")

        scheduler = ListingPrefetchScheduler(list_directory_fn=broken_list)
        with self.assertLogs("filepicker.listing_prefetch", level="ERROR"):
            scheduler.schedule(Path("/anywhere"))
            time.sleep(0.5)

        self.assertEqual(scheduler.drain_results(), [])

    def test_navigation_state_accepts_only_latest_background_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "sub").mkdir()
            config = PickerConfig(default_root=root)
            state = NavigationState(config)
            scheduler = ListingPrefetchScheduler()

            stale_id = scheduler.schedule(root, config.display_filter, config.ordering, request_id=state.begin_listing(root))
            stale = _wait_for_results(scheduler, expected_count=1)[0]
            fresh_id = state.begin_listing(root / "sub")
            scheduler.schedule(root / "sub", config.display_filter, config.ordering, request_id=fresh_id)
            fresh = _wait_for_results(scheduler, expected_count=1)[0]

            self.assertFalse(state.accept_listing(stale_id, stale.listing))
            self.assertTrue(state.accept_listing(fresh.request.request_id, fresh.listing))
            self.assertEqual(state.listing.directory, root / "sub")

    def test_schedule_for_uses_state_request_ids_and_applies_newest_result(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "sub").mkdir()
            (root / "sub" / "inner.gpx").write_text("x\n", encoding="utf-8")
            state = NavigationState(PickerConfig(default_root=root))
            state.open(root)
            scheduler = ListingPrefetchScheduler()

            request_id = scheduler.schedule_for(state, root / "sub")
            self.assertEqual(state.directory, root)

            deadline = time.monotonic() + 2.0
            accepted = None
            while accepted is None and time.monotonic() < deadline:
                accepted = scheduler.apply_results(state)
                time.sleep(0.01)

            self.assertIsNotNone(accepted)
            self.assertIs(state.listing, accepted)
            self.assertEqual(state.directory, root / "sub")
            self.assertEqual([entry.name for entry in accepted.children], ["inner.gpx"])
            self.assertFalse(state.accept_listing(request_id - 1, accepted))

    def test_results_superseded_by_synchronous_listing_are_not_applied(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "sub").mkdir()
            state = NavigationState(PickerConfig(default_root=root))
            scheduler = ListingPrefetchScheduler()

            scheduler.schedule_for(state, root / "sub")
            results = _wait_for_results(scheduler, expected_count=1)
            state.open(root)

            self.assertEqual(len(results), 1)
            self.assertFalse(state.accept_listing(results[0].request.request_id, results[0].listing))
            self.assertIsNone(scheduler.apply_results(state))
            self.assertEqual(state.directory, root)


if __name__ == "__main__":
    unittest.main()
