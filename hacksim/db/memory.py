"""
In-memory key-value store for testing.

Keeps values in a dictionary, making tests fast and isolated from the
filesystem.
"""

from __future__ import annotations


class InMemoryKeyValueStore:
    """In-memory implementation of KeyValueStore."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        """Get the value stored under a key, or None."""
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value under a key."""
        self._values[key] = value

    def remove(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        self._values.pop(key, None)

    def contains(self, key: str) -> bool:
        """Check whether a key is present."""
        return key in self._values
