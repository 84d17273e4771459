"""
Core Data Models for HackSim.

Players and missions are independent aggregates; the hack command is the
only place rewards flow from one to the other.
"""

from hacksim.models.command import (
    CommandDefinition,
    CommandHandler,
    ValidationResult,
    ValidationRule,
)
from hacksim.models.mission import (
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    MISSION_ID_LENGTH,
    Mission,
    MissionReward,
    MissionStatus,
    create_mission,
    difficulty_stars,
    new_mission_id,
)
from hacksim.models.player import Player, create_player
from hacksim.models.save import SaveData, SaveInfo

__all__ = [
    # Commands
    "CommandDefinition",
    "CommandHandler",
    "ValidationResult",
    "ValidationRule",
    # Missions
    "MAX_DIFFICULTY",
    "MIN_DIFFICULTY",
    "MISSION_ID_LENGTH",
    "Mission",
    "MissionReward",
    "MissionStatus",
    "create_mission",
    "difficulty_stars",
    "new_mission_id",
    # Player
    "Player",
    "create_player",
    # Snapshots
    "SaveData",
    "SaveInfo",
]
