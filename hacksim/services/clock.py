"""Play-time tracking for a game session."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field


def format_play_time(seconds: int) -> str:
    """Format seconds as '1h 2m 3s', dropping leading zero units."""
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


@dataclass
class GameClock:
    """
    Accumulates play time while the game is running.

    Time is measured with ``time_source`` (monotonic by default), so
    tests can drive it by hand.
    """

    time_source: Callable[[], float] = time.monotonic
    initialized: bool = False
    running: bool = False
    _elapsed: float = field(default=0.0, init=False)
    _started_at: float | None = field(default=None, init=False)

    @property
    def play_time(self) -> int:
        """Whole seconds played so far."""
        elapsed = self._elapsed
        if self._started_at is not None:
            elapsed += self.time_source() - self._started_at
        return int(elapsed)

    @property
    def formatted_play_time(self) -> str:
        return format_play_time(self.play_time)

    def initialize(self, play_time: int = 0) -> None:
        """Start a session, optionally resuming from saved play time."""
        self._elapsed = float(play_time)
        self._started_at = None
        self.initialized = True
        self.start()

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = self.time_source()
        self.running = True

    def pause(self) -> None:
        if self._started_at is not None:
            self._elapsed += self.time_source() - self._started_at
            self._started_at = None
        self.running = False

    def reset(self) -> None:
        self._elapsed = 0.0
        self._started_at = None
        self.initialized = False
        self.running = False
