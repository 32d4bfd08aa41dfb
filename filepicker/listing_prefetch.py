"""Background worker that lists directories off the interactive thread."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from queue import Empty, Queue

from .directory_model import EntryFilter, EntryOrdering, Listing, absolute_path, list_directory
from .navigation import NavigationState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListingRequest:
    """One directory-listing job."""

    request_id: int
    directory: Path
    display_filter: EntryFilter | None
    ordering: EntryOrdering | None


@dataclass(frozen=True)
class ListingResult:
    """Completed listing from the background worker."""

    request: ListingRequest
    listing: Listing


class ListingPrefetchScheduler:
    """Single-threaded latest-request-wins listing scheduler.

    Scheduling while a request is still pending replaces it. Hosts driving a
    ``NavigationState`` use ``schedule_for`` and ``apply_results`` so request
    ids come from the state and superseded results are discarded. Plain
    ``schedule`` numbers requests from its own counter and must not be mixed
    with state-issued ids.
    """

    def __init__(
        self,
        list_directory_fn: Callable[[Path, EntryFilter | None, EntryOrdering | None], Listing] = list_directory,
    ) -> None:
        self._list_directory = list_directory_fn
        self._lock = threading.Lock()
        self._pending: ListingRequest | None = None
        self._running = False
        self._next_request_id = 1
        self._results: Queue[ListingResult] = Queue()

    def _worker(self) -> None:
        while True:
            with self._lock:
                request = self._pending
                self._pending = None
                if request is None:
                    self._running = False
                    return

            try:
                listing = self._list_directory(request.directory, request.display_filter, request.ordering)
            except Exception:
                logger.exception("background listing of %s failed", request.directory)
                continue
            self._results.put(ListingResult(request=request, listing=listing))

    def schedule(
        self,
        directory: Path | str,
        display_filter: EntryFilter | None = None,
        ordering: EntryOrdering | None = None,
        *,
        request_id: int | None = None,
    ) -> int:
        """Queue or replace pending listing work and return its request id."""
        with self._lock:
            if request_id is None:
                request_id = self._next_request_id
            self._next_request_id = max(self._next_request_id, request_id) + 1
            self._pending = ListingRequest(
                request_id=request_id,
                directory=absolute_path(directory),
                display_filter=display_filter,
                ordering=ordering,
            )
            if self._running:
                return request_id
            self._running = True

        worker = threading.Thread(
            target=self._worker,
            name="filepicker-listing",
            daemon=True,
        )
        worker.start()
        return request_id

    def schedule_for(self, state: NavigationState, directory: Path | str | None = None) -> int:
        """List ``directory`` (default: current) for ``state`` in the background."""
        request_id = state.begin_listing(directory)
        target = state.pending_directory
        if target is None:
            raise RuntimeError("navigation state has no pending listing")
        return self.schedule(
            target,
            state.config.display_filter,
            state.config.ordering,
            request_id=request_id,
        )

    def apply_results(self, state: NavigationState) -> Listing | None:
        """Drain results into ``state``; return the listing it accepted, if any."""
        accepted: Listing | None = None
        for result in self.drain_results():
            if state.accept_listing(result.request.request_id, result.listing):
                accepted = result.listing
        return accepted

    def drain_results(self) -> list[ListingResult]:
        """Drain all completed listing results."""
        out: list[ListingResult] = []
        while True:
            try:
                out.append(self._results.get_nowait())
            except Empty:
                break
        return out


__all__ = [
    "ListingPrefetchScheduler",
    "ListingRequest",
    "ListingResult",
]
