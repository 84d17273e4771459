"""
Service layer for HackSim.

Services hold session state and apply the game rules to it.
"""

from __future__ import annotations

from hacksim.services.clock import GameClock, format_play_time
from hacksim.services.mission import (
    AcceptOutcome,
    MissionGenerator,
    MissionService,
)
from hacksim.services.player import PlayerService, exp_required_for_level

__all__ = [
    "AcceptOutcome",
    "GameClock",
    "MissionGenerator",
    "MissionService",
    "PlayerService",
    "exp_required_for_level",
    "format_play_time",
]
