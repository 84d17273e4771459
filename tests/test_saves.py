"""
Tests for the key-value stores and session snapshots.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from hacksim.db import (
    DEFAULT_SAVE_SLOT,
    FileKeyValueStore,
    InMemoryKeyValueStore,
    delete_save,
    get_save_info,
    has_save,
    load_game,
    save_game,
)
from hacksim.models.mission import MissionStatus, create_mission
from hacksim.models.player import create_player
from hacksim.models.save import SaveData


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path: Path):
    """Each test runs against both store implementations."""
    if request.param == "memory":
        return InMemoryKeyValueStore()
    return FileKeyValueStore(tmp_path / "saves")


@pytest.fixture
def snapshot() -> SaveData:
    player = create_player("neo")
    player.level = 3
    player.credits = 2400
    active = create_mission("Port Scan", "p", "10.0.0.9", difficulty=2)
    active.status = MissionStatus.ACTIVE
    done = create_mission("Simple Recon", "s", "192.168.1.4")
    done.status = MissionStatus.COMPLETED
    return SaveData(
        player=player,
        available_missions=[create_mission("Server Breach", "b", "172.16.0.2")],
        active_mission=active,
        completed_missions=[done],
        play_time=125,
        version="0.1.0",
    )


class BrokenStore:
    """Store whose every operation fails like a full or read-only disk."""

    def get(self, key: str) -> str | None:
        raise OSError("disk on fire")

    def set(self, key: str, value: str) -> None:
        raise OSError("disk on fire")

    def remove(self, key: str) -> None:
        raise OSError("disk on fire")

    def contains(self, key: str) -> bool:
        raise OSError("disk on fire")


class TestKeyValueStores:
    def test_set_get_remove(self, store):
        assert store.get("k") is None
        assert not store.contains("k")

        store.set("k", "v1")
        store.set("k", "v2")
        assert store.get("k") == "v2"
        assert store.contains("k")

        store.remove("k")
        assert store.get("k") is None

    def test_remove_missing_key(self, store):
        store.remove("never-set")

    def test_file_store_keys_cannot_escape_directory(self, tmp_path: Path):
        directory = tmp_path / "saves"
        store = FileKeyValueStore(directory)

        store.set("../../evil", "x")

        assert store.get("../../evil") == "x"
        assert [p.parent for p in tmp_path.rglob("*.json")] == [directory]


class TestSaveGame:
    """Tests for saving and loading snapshots."""

    def test_round_trip(self, store, snapshot: SaveData):
        assert save_game(store, snapshot) is True

        loaded = load_game(store)

        assert loaded == snapshot
        assert loaded.active_mission.status == MissionStatus.ACTIVE
        assert loaded.player.credits == 2400

    def test_load_empty_slot(self, store):
        assert load_game(store) is None
        assert not has_save(store)

    def test_slots_are_independent(self, store, snapshot: SaveData):
        save_game(store, snapshot, slot="slot-a")

        assert has_save(store, "slot-a")
        assert not has_save(store, DEFAULT_SAVE_SLOT)

    def test_corrupt_data_rejected(self, store):
        store.set(DEFAULT_SAVE_SLOT, "{not json")
        assert load_game(store) is None

    def test_missing_player_rejected(self, store):
        store.set(DEFAULT_SAVE_SLOT, '{"version": "0.1.0"}')
        assert load_game(store) is None

    def test_empty_version_rejected(self, store, snapshot: SaveData):
        snapshot.version = ""
        store.set(DEFAULT_SAVE_SLOT, snapshot.model_dump_json())

        assert load_game(store) is None
        assert get_save_info(store) is None

    def test_delete(self, store, snapshot: SaveData):
        save_game(store, snapshot)

        assert delete_save(store) is True
        assert not has_save(store)
        assert load_game(store) is None

    def test_save_info(self, store, snapshot: SaveData):
        save_game(store, snapshot)

        info = get_save_info(store)

        assert info is not None
        assert info.version == "0.1.0"
        assert info.player_level == 3
        assert info.play_time == 125
        assert info.timestamp == snapshot.timestamp


class TestStorageFailures:
    def test_failures_are_reported_not_raised(self, snapshot: SaveData):
        store = BrokenStore()

        assert save_game(store, snapshot) is False
        assert load_game(store) is None
        assert delete_save(store) is False
        assert has_save(store) is False

    def test_undecodable_save_file_is_rejected(self, tmp_path: Path):
        directory = tmp_path / "saves"
        directory.mkdir()
        (directory / f"{DEFAULT_SAVE_SLOT}.json").write_bytes(b"\xff\xfe{not json")
        store = FileKeyValueStore(directory)

        assert load_game(store) is None
        assert get_save_info(store) is None
