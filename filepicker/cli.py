"""Command-line front door for filepicker.

Opens a directory (or the last stored one), prints its listing, and applies
one optional selection or save-as action. Serves as a reference host for the
picker core: every outcome is turned into output and an exit status here.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from .config import PickerConfig
from .directory_model import Listing, all_of, extension_filter, hidden_entries_filter
from .listing_prefetch import ListingPrefetchScheduler
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
)
from .persistence import JsonDirectoryStore

PARENT_ROW_LABEL = "../"
BACKGROUND_LISTING_TIMEOUT_SECONDS = 5.0


def format_listing(listing: Listing) -> str:
    """Render a listing as one row per line with a directory-title header."""
    out = [f"{listing.directory}"]
    for row in listing.rows():
        if row.is_parent_row:
            out.append(f"  {PARENT_ROW_LABEL}")
        elif row.is_dir:
            out.append(f"  {row.path.name}/")
        else:
            out.append(f"  {row.path.name}")
    return "\n".join(out) + "\n"


def describe_outcome(outcome: PickerOutcome) -> tuple[str, int]:
    """Return ``(message, exit_status)`` for one picker outcome."""
    if isinstance(outcome, Navigated):
        return format_listing(outcome.listing), 0
    if isinstance(outcome, Completed):
        parts = [outcome.selected_path]
        if outcome.file_name is not None:
            parts.append(f"name={outcome.file_name}")
        if outcome.tag is not None:
            parts.append(f"tag={outcome.tag}")
        return "\t".join(parts) + "\n", 0
    if isinstance(outcome, InvalidSelection):
        return f"Invalid file: {outcome.path}\n", 1
    if isinstance(outcome, EmptyName):
        return "No file name given.\n", 1
    if isinstance(outcome, NoFolder):
        return "No folder selected.\n", 1
    if isinstance(outcome, Prompt):
        return f"{outcome.message}\n", 0
    raise TypeError(f"unknown picker outcome: {outcome!r}")


def refresh_in_background(
    state: NavigationState,
    timeout_seconds: float = BACKGROUND_LISTING_TIMEOUT_SECONDS,
) -> Listing:
    """Re-list the current directory off-thread, waiting for the result.

    Falls back to a synchronous refresh when the worker does not answer in
    time.
    """
    scheduler = ListingPrefetchScheduler()
    scheduler.schedule_for(state)
    deadline = time.monotonic() + timeout_seconds
    while time.monotonic() < deadline:
        listing = scheduler.apply_results(state)
        if listing is not None:
            return listing
        time.sleep(0.01)
    return state.refresh()


def build_config(args: argparse.Namespace) -> PickerConfig:
    """Translate CLI flags into an explicit ``PickerConfig``."""
    extensions = list(args.ext or [])
    display_filter = all_of(
        hidden_entries_filter(args.show_hidden),
        extension_filter(*extensions) if extensions else None,
    )
    selection_filter = extension_filter(*extensions, include_directories=False) if extensions else None
    config = PickerConfig(
        display_filter=display_filter,
        selection_filter=selection_filter,
        prompt_message=args.prompt,
    )
    if args.unordered:
        config = config.with_overrides(ordering=None)
    return config


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse a directory and pick or name a file.")
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory to open. Defaults to the last visited directory.",
    )
    parser.add_argument(
        "--ext",
        action="append",
        metavar="EXT",
        help="Only show and accept files with this extension (repeatable).",
    )
    parser.add_argument("--show-hidden", action="store_true", help="Show dot-files and dot-directories.")
    parser.add_argument("--unordered", action="store_true", help="Keep filesystem order instead of sorting.")
    action = parser.add_mutually_exclusive_group()
    action.add_argument("--select", metavar="NAME", help="Click the entry called NAME ('..' for the parent row).")
    action.add_argument("--save-as", metavar="NAME", help="Confirm NAME as a new file in the current directory.")
    parser.add_argument("--tag", default=None, help="Tag echoed back with completed selections.")
    parser.add_argument("--prompt", default=None, help="Message shown before the listing.")
    parser.add_argument("--state-file", type=Path, default=None, help="JSON file storing the last directory.")
    parser.add_argument("--background", action="store_true", help="List the directory on a worker thread.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments, run one picker interaction, and return exit status.

    The current directory is written back to the state file before exit, and
    the picker session is closed.
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    store = JsonDirectoryStore(args.state_file)
    state = NavigationState(build_config(args), PickerSession(), tag=args.tag)
    listing = state.open(args.directory) if args.directory is not None else state.resume(store)
    if args.background:
        listing = refresh_in_background(state)

    prompt = state.prompt(first_start=True)
    if prompt is not None:
        sys.stdout.write(describe_outcome(prompt)[0])
    sys.stdout.write(format_listing(listing))

    status = 0
    outcome: PickerOutcome | None = None
    if args.select is not None:
        index = 0 if args.select == ".." and listing.has_parent_row else listing.find(args.select)
        if index is None:
            sys.stderr.write(f"No entry named {args.select!r} in {listing.directory}\n")
            status = 2
        else:
            outcome = state.select_row(index)
    elif args.save_as is not None:
        outcome = state.confirm_typed_name(args.save_as)

    if outcome is not None:
        message, status = describe_outcome(outcome)
        stream = sys.stdout if status == 0 else sys.stderr
        stream.write(message)

    state.pause(store)
    state.close()
    return status


if __name__ == "__main__":
    raise SystemExit(main())
