"""Authored playlist persistence keyed by playlist id (no UI)."""

import json
import logging
import os
from typing import Any

log = logging.getLogger(__name__)

DEFAULT_KEY = "default-playlist"


class PlaylistStore:
    """Load/save/delete authored playlist documents by key in one JSON file."""

    def __init__(self, settings_dir: str = ""):
        self._dir = settings_dir or os.path.join(os.path.expanduser("~"), ".playlist_player")
        self._path = os.path.join(self._dir, "playlists.json")
        self._data: dict[str, dict[str, Any]] = {}
        self.reload()

    @property
    def path(self) -> str:
        return self._path

    def reload(self) -> None:
        if not os.path.isfile(self._path):
            self._data = {}
            return
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
            self._data = data if isinstance(data, dict) else {}
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not read %s: %s", self._path, e)
            self._data = {}

    def _write(self) -> None:
        try:
            os.makedirs(self._dir, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, default=str)
        except OSError as e:
            log.warning("Could not write %s: %s", self._path, e)

    def load(self, key: str) -> dict[str, Any] | None:
        return self._data.get(key)

    def save(self, key: str, data: dict[str, Any]) -> None:
        self._data[key] = data
        self._write()
        log.info("Saved playlist %r", key)

    def delete(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._write()

    def has(self, key: str) -> bool:
        return key in self._data

    def keys(self) -> list[str]:
        return sorted(self._data)
