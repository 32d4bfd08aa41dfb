"""Stores for the last-visited picker directory.

Only the current directory is persisted; the remembered file name lives in
``PickerSession`` memory. Every ``save`` replaces the stored document, so
saving ``None`` leaves nothing for a later ``load``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "filepicker"
STATE_FILENAME = "picker_state.json"
DEFAULT_STATE_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / STATE_FILENAME
CURRENT_DIRECTORY_KEY = "current_directory"


class DirectoryStore(Protocol):
    """Load/save contract for the current-directory path."""

    def load(self) -> str | None: ...

    def save(self, current_directory: str | None) -> None: ...


def _coerce_directory(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    return value if value.strip() else None


class JsonDirectoryStore:
    """JSON-file store located under the per-user config directory."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else DEFAULT_STATE_PATH

    def load(self) -> str | None:
        """Return the stored directory, or ``None`` when unset or unreadable.

        Missing, malformed, or non-object documents all load as unset.
        """
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            logger.debug("ignoring unreadable picker state %s: %s", self.path, exc)
            return None
        if not isinstance(data, dict):
            return None
        return _coerce_directory(data.get(CURRENT_DIRECTORY_KEY))

    def save(self, current_directory: str | None) -> None:
        """Replace the stored document with ``current_directory``.

        Write failures are logged and ignored so pausing never fails.
        """
        data: dict[str, object] = {}
        if current_directory is not None:
            data[CURRENT_DIRECTORY_KEY] = str(current_directory)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            logger.warning("could not save picker state to %s: %s", self.path, exc)


class MemoryDirectoryStore:
    """In-process store with the same replace-on-save semantics."""

    def __init__(self, current_directory: str | None = None) -> None:
        self._current_directory = current_directory

    def load(self) -> str | None:
        return self._current_directory

    def save(self, current_directory: str | None) -> None:
        self._current_directory = None
        if current_directory is not None:
            self._current_directory = str(current_directory)


__all__ = [
    "APP_NAME",
    "CURRENT_DIRECTORY_KEY",
    "DEFAULT_STATE_PATH",
    "DirectoryStore",
    "JsonDirectoryStore",
    "MemoryDirectoryStore",
]
