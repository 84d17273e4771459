"""
Save and load session snapshots.

Failures are logged and reported through the return value; a broken
save file never takes the game down with it.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from hacksim.db.interfaces import KeyValueStore
from hacksim.models.save import SaveData, SaveInfo

logger = logging.getLogger(__name__)

DEFAULT_SAVE_SLOT = "hacksim_save"


def save_game(store: KeyValueStore, data: SaveData, slot: str = DEFAULT_SAVE_SLOT) -> bool:
    """Serialize a snapshot into the store."""
    try:
        store.set(slot, data.model_dump_json())
    except OSError as e:
        logger.error("Failed to save game to slot %r: %s", slot, e)
        return False
    logger.info("Game saved to slot %r", slot)
    return True


def load_game(store: KeyValueStore, slot: str = DEFAULT_SAVE_SLOT) -> SaveData | None:
    """
    Read a snapshot back.

    Returns None if the slot is empty, unreadable, or missing the player
    or version.
    """
    try:
        raw = store.get(slot)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read save slot %r: %s", slot, e)
        return None

    if not raw:
        return None

    try:
        data = SaveData.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Rejected corrupt save in slot %r: %s", slot, e)
        return None

    if not data.version:
        logger.warning("Rejected save in slot %r: no version tag", slot)
        return None

    return data


def delete_save(store: KeyValueStore, slot: str = DEFAULT_SAVE_SLOT) -> bool:
    try:
        store.remove(slot)
    except OSError as e:
        logger.error("Failed to delete save slot %r: %s", slot, e)
        return False
    return True


def has_save(store: KeyValueStore, slot: str = DEFAULT_SAVE_SLOT) -> bool:
    try:
        return store.contains(slot)
    except OSError as e:
        logger.error("Failed to check save slot %r: %s", slot, e)
        return False


def get_save_info(store: KeyValueStore, slot: str = DEFAULT_SAVE_SLOT) -> SaveInfo | None:
    """Summarize a stored snapshot without restoring it."""
    data = load_game(store, slot)
    if data is None:
        return None
    return SaveInfo(
        timestamp=data.timestamp,
        version=data.version,
        player_level=data.player.level,
        play_time=data.play_time,
    )
