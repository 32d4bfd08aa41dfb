"""Picker navigation state, session memory, and tagged outcomes.

``NavigationState`` is the only stateful piece of the picker core. Hosts
render its ``listing`` and route interactions through ``select_row`` or
``confirm_typed_name``; every interaction returns one of the outcome
dataclasses below instead of raising.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .config import PickerConfig
from .directory_model import Entry, Listing, absolute_path, list_directory
from .persistence import DirectoryStore
from .selection import derive_base_name, validate

logger = logging.getLogger(__name__)


@dataclass
class PickerSession:
    """Host-owned memory shared by successive picker instances."""

    last_file_name: str = ""


@dataclass(frozen=True)
class Navigated:
    """A directory was entered; re-render ``listing``."""

    listing: Listing


@dataclass(frozen=True)
class Completed:
    """A file was chosen or a save name confirmed."""

    selected_path: str
    tag: str | None
    file_name: str | None


@dataclass(frozen=True)
class InvalidSelection:
    """The chosen file was rejected by the selection filter."""

    path: str


@dataclass(frozen=True)
class EmptyName:
    """The typed file name was blank."""


@dataclass(frozen=True)
class NoFolder:
    """A typed name was confirmed without a current directory."""


@dataclass(frozen=True)
class Prompt:
    """One-off message to show when a picker first starts."""

    message: str


PickerOutcome = Navigated | Completed | InvalidSelection | EmptyName | NoFolder | Prompt


def usable_directory(path: Path | str | None) -> bool:
    """Return whether ``path`` names an existing, readable directory."""
    if path is None or not str(path).strip():
        return False
    try:
        candidate = Path(path)
        return candidate.is_dir() and os.access(candidate, os.R_OK)
    except (OSError, ValueError):
        return False


def confirm_typed_name(
    typed_name: str,
    directory: Path | str | None,
    tag: str | None = None,
) -> Completed | EmptyName | NoFolder:
    """Complete a save-as request for ``typed_name`` inside ``directory``.

    Blank names are rejected before the directory is checked.
    """
    trimmed = typed_name.strip()
    if not trimmed:
        return EmptyName()
    if directory is None:
        return NoFolder()
    return Completed(selected_path=str(absolute_path(directory)), tag=tag, file_name=trimmed)


class NavigationState:
    """Current directory, its listing, and the session's remembered name."""

    def __init__(
        self,
        config: PickerConfig | None = None,
        session: PickerSession | None = None,
        tag: str | None = None,
    ) -> None:
        self.config = config if config is not None else PickerConfig()
        self.session = session if session is not None else PickerSession()
        self.tag = tag
        self.directory: Path | None = None
        self.listing: Listing | None = None
        self._listing_request_id = 0
        self._pending_directory: Path | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def last_file_name(self) -> str:
        return self.session.last_file_name

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("navigation state is closed")

    def _list(self) -> Listing:
        if self.directory is None:
            raise RuntimeError("no current directory to list")
        self._listing_request_id += 1
        self._pending_directory = None
        self.listing = list_directory(
            self.directory,
            display_filter=self.config.display_filter,
            ordering=self.config.ordering,
        )
        return self.listing

    def open(self, initial_directory_hint: Path | str | None = None) -> Listing:
        """Enter ``initial_directory_hint``, or the default root when unusable."""
        self._ensure_open()
        if initial_directory_hint is not None and usable_directory(initial_directory_hint):
            self.directory = absolute_path(initial_directory_hint)
        else:
            if initial_directory_hint is not None:
                logger.debug(
                    "start directory %s unusable, falling back to %s",
                    initial_directory_hint,
                    self.config.default_root,
                )
            self.directory = absolute_path(self.config.default_root)
        return self._list()

    def prompt(self, first_start: bool) -> Prompt | None:
        """Return the configured prompt on a picker's first start."""
        if not first_start or self.config.prompt_message is None:
            return None
        return Prompt(message=self.config.prompt_message)

    def refresh(self) -> Listing:
        """Re-list the current directory, opening the default root if unset."""
        self._ensure_open()
        if self.directory is None:
            return self.open(None)
        return self._list()

    def navigate_into(self, entry: Entry) -> Navigated:
        """Make ``entry`` the current directory and list it."""
        self._ensure_open()
        if not entry.is_dir:
            raise ValueError(f"cannot navigate into non-directory: {entry.path}")
        self.directory = absolute_path(entry.path)
        return Navigated(listing=self._list())

    def choose_file(self, entry: Entry) -> Completed | InvalidSelection:
        """Validate a chosen file; on success remember its base name."""
        self._ensure_open()
        if entry.is_dir:
            raise ValueError(f"cannot choose a directory as a file: {entry.path}")
        selected_path = str(absolute_path(entry.path))
        if not validate(entry, self.config.selection_filter):
            return InvalidSelection(path=selected_path)
        file_name = derive_base_name(selected_path)
        self.session.last_file_name = file_name
        return Completed(selected_path=selected_path, tag=self.tag, file_name=file_name)

    def select_row(self, index: int) -> Navigated | Completed | InvalidSelection:
        """Route a click on listing row ``index`` to navigation or selection.

        The parent row always navigates.
        """
        self._ensure_open()
        if self.listing is None:
            raise RuntimeError("no listing to select from; call open() first")
        entry = self.listing[index]
        if self.listing.is_parent_row(index) or entry.is_dir:
            return self.navigate_into(entry)
        return self.choose_file(entry)

    def confirm_typed_name(self, typed_name: str) -> Completed | EmptyName | NoFolder:
        """Complete a save-as request for ``typed_name`` in the current directory."""
        self._ensure_open()
        outcome = confirm_typed_name(typed_name, self.directory, self.tag)
        if isinstance(outcome, Completed):
            self.session.last_file_name = typed_name
        return outcome

    def begin_listing(self, directory: Path | str | None = None) -> int:
        """Start an off-thread listing and return its request id.

        Targets ``directory`` when given, else the current directory. The
        current directory and listing stay untouched until ``accept_listing``
        installs the result. Any earlier outstanding request is superseded.
        """
        self._ensure_open()
        if directory is not None:
            target = absolute_path(directory)
        elif self.directory is not None:
            target = self.directory
        else:
            target = absolute_path(self.config.default_root)
        self._pending_directory = target
        self._listing_request_id += 1
        return self._listing_request_id

    @property
    def pending_directory(self) -> Path | None:
        """Directory of the outstanding off-thread listing, if any."""
        return self._pending_directory

    def accept_listing(self, request_id: int, listing: Listing) -> bool:
        """Install ``listing`` only when it answers the newest request.

        On acceptance the requested directory becomes current.
        """
        if self._closed or request_id != self._listing_request_id:
            return False
        if self._pending_directory is None or listing.directory != self._pending_directory:
            return False
        self.directory = self._pending_directory
        self._pending_directory = None
        self.listing = listing
        return True

    def pause(self, store: DirectoryStore) -> None:
        """Persist the current directory (or clear the store when unset)."""
        store.save(str(self.directory) if self.directory is not None else None)

    def resume(self, store: DirectoryStore) -> Listing:
        """Reopen the stored directory, falling back to the default root."""
        return self.open(store.load())

    def close(self) -> None:
        """Forget the remembered file name; the state is unusable afterwards."""
        self.session.last_file_name = ""
        self.listing = None
        self._closed = True


__all__ = [
    "Completed",
    "EmptyName",
    "InvalidSelection",
    "Navigated",
    "NavigationState",
    "NoFolder",
    "PickerOutcome",
    "PickerSession",
    "Prompt",
    "confirm_typed_name",
    "usable_directory",
]
