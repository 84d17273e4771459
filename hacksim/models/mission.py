"""
Mission models for HackSim.

Defines the mission record, its reward, and the lifecycle status
a mission moves through (available -> active -> completed).
"""

from __future__ import annotations

import secrets
import string
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5

MISSION_ID_LENGTH = 21
_ID_ALPHABET = string.ascii_letters + string.digits + "_-"


class MissionStatus(str, Enum):
    """Where a mission sits in its lifecycle."""

    AVAILABLE = "available"  # Listed by the missions command, can be accepted
    ACTIVE = "active"  # Accepted; at most one at a time
    COMPLETED = "completed"  # Target hacked, reward paid out


def new_mission_id() -> str:
    """Generate a fresh, URL-safe mission identifier."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(MISSION_ID_LENGTH))


class MissionReward(BaseModel):
    """Rewards paid out when a mission is completed."""

    exp: int = 0
    """Experience points awarded."""

    credits: int = 0
    """Credits awarded."""


class Mission(BaseModel):
    """
    A single contract against a simulated network node.

    The status field must always agree with the collection the mission
    is stored in; MissionService owns every transition.
    """

    id: str = Field(default_factory=new_mission_id)
    title: str
    description: str
    target: str
    """Dotted-quad address of the node to hack."""

    difficulty: Annotated[int, Field(ge=MIN_DIFFICULTY, le=MAX_DIFFICULTY)] = 1
    """1 = simple recon, 5 = legendary."""

    reward: MissionReward = Field(default_factory=MissionReward)
    status: MissionStatus = MissionStatus.AVAILABLE

    @property
    def short_id(self) -> str:
        """First eight characters of the id, for listings."""
        return self.id[:8]

    @property
    def stars(self) -> str:
        """Difficulty rendered as a five-star rating."""
        return difficulty_stars(self.difficulty)


def difficulty_stars(difficulty: int) -> str:
    """Render a difficulty as filled and hollow stars."""
    return "★" * difficulty + "☆" * (MAX_DIFFICULTY - difficulty)


def create_mission(
    title: str,
    description: str,
    target: str,
    *,
    difficulty: int = 1,
    reward: MissionReward | None = None,
    mission_id: str | None = None,
) -> Mission:
    """
    Factory function to create an available mission.

    Args:
        title: Display name for the mission
        description: Flavor text shown in listings
        target: Address the player has to hack
        difficulty: 1-5 difficulty rating
        reward: Reward paid on completion
        mission_id: Explicit id (a fresh one is generated otherwise)

    Returns:
        A new Mission in AVAILABLE status
    """
    return Mission(
        id=mission_id or new_mission_id(),
        title=title,
        description=description,
        target=target,
        difficulty=difficulty,
        reward=reward or MissionReward(),
    )
