"""
Storage layer for HackSim.

Provides a key-value store interface plus implementations:
- InMemoryKeyValueStore: For testing (no filesystem access)
- FileKeyValueStore: JSON files on disk
"""

from __future__ import annotations

from hacksim.db.files import FileKeyValueStore
from hacksim.db.interfaces import KeyValueStore
from hacksim.db.memory import InMemoryKeyValueStore
from hacksim.db.saves import (
    DEFAULT_SAVE_SLOT,
    delete_save,
    get_save_info,
    has_save,
    load_game,
    save_game,
)

__all__ = [
    # Protocol interface
    "KeyValueStore",
    # Implementations
    "FileKeyValueStore",
    "InMemoryKeyValueStore",
    # Snapshots
    "DEFAULT_SAVE_SLOT",
    "delete_save",
    "get_save_info",
    "has_save",
    "load_game",
    "save_game",
]
