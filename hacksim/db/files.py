"""Filesystem key-value store: one file per key under a directory."""

from __future__ import annotations

import re
from pathlib import Path

_UNSAFE = re.compile(r"[^A-Za-z0-9_.-]+")


class FileKeyValueStore:
    """
    Stores each key as ``<directory>/<key>.json``.

    Keys are sanitized so they cannot escape the directory.
    """

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        safe = _UNSAFE.sub("-", key).strip(".-") or "save"
        return self.directory / f"{safe}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def contains(self, key: str) -> bool:
        return self._path(key).exists()
