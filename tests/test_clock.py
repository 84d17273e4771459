"""
Tests for play-time tracking.
"""

from __future__ import annotations

import pytest

from hacksim.services.clock import GameClock, format_play_time


class FakeTime:
    """Hand-driven time source."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()


@pytest.fixture
def clock(fake_time: FakeTime) -> GameClock:
    return GameClock(time_source=fake_time)


class TestFormatPlayTime:
    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(0, "0s"), (59, "59s"), (61, "1m 1s"), (3600, "1h 0m 0s"), (3725, "1h 2m 5s")],
    )
    def test_format(self, seconds: int, expected: str):
        assert format_play_time(seconds) == expected


class TestGameClock:
    """Tests for GameClock."""

    def test_starts_uninitialized(self, clock: GameClock):
        assert not clock.initialized
        assert not clock.running
        assert clock.play_time == 0

    def test_accumulates_while_running(self, clock: GameClock, fake_time: FakeTime):
        clock.initialize()
        fake_time.now += 42.7

        assert clock.initialized
        assert clock.running
        assert clock.play_time == 42

    def test_pause_stops_accumulating(self, clock: GameClock, fake_time: FakeTime):
        clock.initialize()
        fake_time.now += 10
        clock.pause()
        fake_time.now += 100

        assert not clock.running
        assert clock.play_time == 10

        clock.start()
        fake_time.now += 5
        assert clock.play_time == 15

    def test_initialize_resumes_saved_time(self, clock: GameClock, fake_time: FakeTime):
        clock.initialize(play_time=3600)
        fake_time.now += 60

        assert clock.play_time == 3660
        assert clock.formatted_play_time == "1h 1m 0s"

    def test_reset(self, clock: GameClock, fake_time: FakeTime):
        clock.initialize(play_time=50)
        clock.reset()

        assert clock.play_time == 0
        assert not clock.initialized
        assert not clock.running
