"""
Mission Service for HackSim.

Generates randomized missions for the player's level and owns the
mission lifecycle: available -> active -> completed, with abandonment
moving an active mission back to the available list.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum

from hacksim.models.mission import (
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    Mission,
    MissionReward,
    MissionStatus,
    create_mission,
)
from hacksim.skills.network import random_address

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

MISSIONS_PER_LEVEL = 3
MAX_DIFFICULTY_ABOVE_LEVEL = 2  # Missions can be up to 2 tiers above the player

BASE_REWARD_EXP = 100
BASE_REWARD_CREDITS = 200

# Flavor pools, indexed by difficulty - 1
_TITLES: list[list[str]] = [
    ["Simple Recon", "Basic Infiltration", "Data Collection"],
    ["Server Breach", "Password Crack", "Port Scan"],
    ["Network Intrusion", "Database Hack", "System Exploit"],
    ["Corporate Espionage", "Advanced Penetration", "Security Bypass"],
    ["Master Heist", "Legendary Hack", "Ultimate Breach"],
]

_DESCRIPTIONS: list[list[str]] = [
    [
        "A simple reconnaissance mission.",
        "Map a small office network and report back.",
    ],
    [
        "Breach a basic server and extract data.",
        "Crack a weak admin password and pull the logs.",
    ],
    [
        "Penetrate a network and steal sensitive information.",
        "Slip past an intrusion detection system and dump a database.",
    ],
    [
        "Execute a sophisticated attack on a corporate system.",
        "Bypass layered defenses guarding a corporate vault.",
    ],
    [
        "An impossible mission requiring elite skills.",
        "Break into a hardened core that nobody has touched before.",
    ],
]


def _check_difficulty(difficulty: int) -> None:
    if not MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY:
        raise ValueError(
            f"Difficulty must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}, got {difficulty}"
        )


class AcceptOutcome(str, Enum):
    """Why an accept request succeeded or failed."""

    ACCEPTED = "accepted"
    NOT_FOUND = "not_found"
    ALREADY_ACTIVE = "already_active"


# =============================================================================
# Generation
# =============================================================================


@dataclass
class MissionGenerator:
    """
    Produces mission content.

    Everything random goes through ``rng`` so a seeded generator gives
    reproducible missions. Difficulty arguments must be in 1-5; anything
    else raises ValueError.
    """

    rng: random.Random = field(default_factory=random.Random)

    def generate_random_target(self) -> str:
        """Pick a target address in one of the common private ranges."""
        return random_address(self.rng)

    def generate_title(self, difficulty: int) -> str:
        """Pick a title from the pool for this difficulty tier."""
        _check_difficulty(difficulty)
        return self.rng.choice(_TITLES[difficulty - 1])

    def generate_description(self, difficulty: int) -> str:
        """Pick a description from the pool for this difficulty tier."""
        _check_difficulty(difficulty)
        return self.rng.choice(_DESCRIPTIONS[difficulty - 1])

    def generate_reward(self, difficulty: int) -> MissionReward:
        """Reward doubles with each difficulty tier. No randomness."""
        _check_difficulty(difficulty)
        multiplier = 2 ** (difficulty - 1)
        return MissionReward(
            exp=BASE_REWARD_EXP * multiplier,
            credits=BASE_REWARD_CREDITS * multiplier,
        )

    def generate_mission(self, difficulty: int) -> Mission:
        """Compose a complete, available mission."""
        return create_mission(
            title=self.generate_title(difficulty),
            description=self.generate_description(difficulty),
            target=self.generate_random_target(),
            difficulty=difficulty,
            reward=self.generate_reward(difficulty),
        )

    def generate_mission_batch(self, player_level: int) -> list[Mission]:
        """
        Generate the missions offered to a player.

        Higher levels see more missions, and harder ones: the difficulty
        ceiling is the player's level plus two, capped at 5.
        """
        count = MISSIONS_PER_LEVEL + player_level // 2
        ceiling = min(MAX_DIFFICULTY, player_level + MAX_DIFFICULTY_ABOVE_LEVEL)

        return [
            self.generate_mission(self.rng.randint(MIN_DIFFICULTY, ceiling))
            for _ in range(count)
        ]


# =============================================================================
# Lifecycle
# =============================================================================


@dataclass
class MissionService:
    """
    Holds the available, active and completed missions.

    Only one mission may be active at a time; accepting another while
    one is active is refused until the current one is completed or
    abandoned.
    """

    generator: MissionGenerator = field(default_factory=MissionGenerator)
    available: list[Mission] = field(default_factory=list)
    active: Mission | None = None
    completed: list[Mission] = field(default_factory=list)

    @property
    def all_missions(self) -> list[Mission]:
        """Every mission known to the session."""
        return [*self.available, *([self.active] if self.active else []), *self.completed]

    def generate_missions(self, player_level: int) -> list[Mission]:
        """Replace the available missions with a fresh batch."""
        self.available = self.generator.generate_mission_batch(player_level)
        logger.debug(
            "Generated %d missions for level %d", len(self.available), player_level
        )
        return self.available

    def find_mission(self, mission_id: str) -> Mission | None:
        """Look a mission up in any collection."""
        for mission in self.all_missions:
            if mission.id == mission_id:
                return mission
        return None

    def get_available_by_index(self, index: int) -> Mission | None:
        """Resolve a 1-based position in the available list."""
        if 1 <= index <= len(self.available):
            return self.available[index - 1]
        return None

    def accept_mission_result(self, mission_id: str) -> AcceptOutcome:
        """
        Accept a mission and report why it did or did not work.

        Nothing is mutated unless the outcome is ACCEPTED.
        """
        if self.active is not None:
            return AcceptOutcome.ALREADY_ACTIVE

        for position, mission in enumerate(self.available):
            if mission.id == mission_id:
                break
        else:
            return AcceptOutcome.NOT_FOUND

        mission = self.available.pop(position)
        mission.status = MissionStatus.ACTIVE
        self.active = mission
        logger.info("Mission accepted: %s (%s)", mission.title, mission.target)
        return AcceptOutcome.ACCEPTED

    def accept_mission(self, mission_id: str) -> bool:
        """Accept a mission. Returns False if it was refused."""
        return self.accept_mission_result(mission_id) is AcceptOutcome.ACCEPTED

    def complete_mission(self) -> MissionReward | None:
        """
        Complete the active mission.

        Returns its reward, or None when there is no active mission.
        """
        mission = self.active
        if mission is None:
            return None

        mission.status = MissionStatus.COMPLETED
        self.completed.append(mission)
        self.active = None
        logger.info("Mission completed: %s", mission.title)
        return mission.reward

    def abandon_mission(self) -> Mission | None:
        """Put the active mission back on the available list."""
        mission = self.active
        if mission is None:
            return None

        mission.status = MissionStatus.AVAILABLE
        self.available.append(mission)
        self.active = None
        logger.info("Mission abandoned: %s", mission.title)
        return mission

    def reset(self) -> None:
        """Forget every mission."""
        self.available = []
        self.active = None
        self.completed = []

    def restore(
        self,
        available: list[Mission],
        active: Mission | None,
        completed: list[Mission],
    ) -> None:
        """
        Replace all collections, e.g. from a snapshot.

        Statuses are rewritten to match the collection each mission is
        placed in.
        """
        for mission in available:
            mission.status = MissionStatus.AVAILABLE
        for mission in completed:
            mission.status = MissionStatus.COMPLETED
        if active is not None:
            active.status = MissionStatus.ACTIVE

        self.available = list(available)
        self.active = active
        self.completed = list(completed)
