"""
Game session state for HackSim.

A GameSession is the explicit state object every command handler
receives: both stores, the registry, the random source, the clock and
the terminal's progress sink. Sessions share nothing, so several games
can run side by side.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from hacksim import __version__
from hacksim.db.interfaces import KeyValueStore
from hacksim.db.memory import InMemoryKeyValueStore
from hacksim.engine.models import EngineConfig
from hacksim.engine.registry import CommandRegistry
from hacksim.models.save import SaveData
from hacksim.services.clock import GameClock
from hacksim.services.mission import MissionService
from hacksim.services.player import PlayerService

logger = logging.getLogger(__name__)

OutputSink = Callable[[str], None]
Sleeper = Callable[[float], Awaitable[None]]


@dataclass
class GameSession:
    """Current state of one player's game."""

    config: EngineConfig
    rng: random.Random
    players: PlayerService
    missions: MissionService
    registry: CommandRegistry = field(default_factory=CommandRegistry)
    clock: GameClock = field(default_factory=GameClock)
    store: KeyValueStore = field(default_factory=InMemoryKeyValueStore)
    output: OutputSink | None = None
    """Receives progress lines while a command is still running."""
    sleeper: Sleeper = asyncio.sleep
    running: bool = True

    def emit(self, text: str) -> None:
        """Send an intermediate progress line to the terminal."""
        if self.output is not None:
            self.output(text)

    async def sleep(self, milliseconds: int) -> None:
        """Simulated network latency, scaled by the config."""
        seconds = milliseconds / 1000 * self.config.delay_scale
        if seconds > 0:
            await self.sleeper(seconds)

    def new_game(self) -> None:
        """Reset player and missions and offer a first batch of missions."""
        self.players.reset(self.config.player_name)
        self.missions.reset()
        self.missions.generate_missions(self.players.player.level)
        self.clock.initialize()
        logger.info("New game started for %s", self.players.player.name)

    def snapshot(self) -> SaveData:
        """Export the session as a save snapshot."""
        return SaveData(
            player=self.players.player.model_copy(deep=True),
            available_missions=[m.model_copy(deep=True) for m in self.missions.available],
            active_mission=(
                self.missions.active.model_copy(deep=True) if self.missions.active else None
            ),
            completed_missions=[m.model_copy(deep=True) for m in self.missions.completed],
            play_time=self.clock.play_time,
            timestamp=datetime.now(UTC),
            version=__version__,
        )

    def restore(self, data: SaveData) -> None:
        """Import a snapshot, replacing the player and every mission collection."""
        self.players.restore(data.player.model_copy(deep=True))
        self.missions.restore(
            [m.model_copy(deep=True) for m in data.available_missions],
            data.active_mission.model_copy(deep=True) if data.active_mission else None,
            [m.model_copy(deep=True) for m in data.completed_missions],
        )
        self.clock.initialize(data.play_time)
