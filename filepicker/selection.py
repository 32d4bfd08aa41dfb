"""Selection checks for chosen files plus remembered-name derivation."""

from __future__ import annotations

from .directory_model import Entry, EntryFilter


def validate(entry: Entry, selection_filter: EntryFilter | None) -> bool:
    """Return whether ``entry`` is an acceptable file choice.

    Directories are never valid selections; clicks on them navigate instead.
    Without a filter every file is valid.
    """
    if entry.is_dir:
        return False
    if selection_filter is None:
        return True
    return bool(selection_filter(entry))


def derive_base_name(path: str) -> str:
    """Return the file name of ``path`` without its last extension.

    Both ``/`` and ``\\`` separate path components (``/`` is checked first).
    Only the final ``.`` suffix is removed: ``x.y.z`` becomes ``x.y``.
    """
    file_name = path
    for separator in ("/", "\\"):
        idx = path.rfind(separator)
        if idx != -1:
            file_name = path[idx + 1 :]
            break

    dot = file_name.rfind(".")
    if dot != -1:
        file_name = file_name[:dot]
    return file_name


__all__ = [
    "derive_base_name",
    "validate",
]
