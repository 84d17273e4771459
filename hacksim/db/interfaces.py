"""
Storage interface definitions for HackSim.

Snapshots are opaque strings to the store, keyed by save slot.
Implementations can keep them in memory (tests) or on disk.
"""

from __future__ import annotations

from typing import Protocol


class KeyValueStore(Protocol):
    """Interface for a minimal string key-value store."""

    def get(self, key: str) -> str | None:
        """Get the value stored under a key, or None."""
        ...

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value under a key."""
        ...

    def remove(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        ...

    def contains(self, key: str) -> bool:
        """Check whether a key is present."""
        ...
