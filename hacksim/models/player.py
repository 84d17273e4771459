"""
Player model for HackSim.
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# Initial values for a fresh player
INITIAL_LEVEL = 1
INITIAL_EXP = 0
INITIAL_CREDITS = 1000
INITIAL_REPUTATION = 0
DEFAULT_PLAYER_NAME = "Anonymous"


class Player(BaseModel):
    """
    The hacker behind the terminal.

    exp is always kept below the requirement for the current level;
    PlayerService normalizes it after every grant.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str = DEFAULT_PLAYER_NAME
    level: Annotated[int, Field(ge=1)] = INITIAL_LEVEL
    exp: Annotated[int, Field(ge=0)] = INITIAL_EXP
    credits: int = INITIAL_CREDITS
    reputation: int = INITIAL_REPUTATION


def create_player(name: str = DEFAULT_PLAYER_NAME) -> Player:
    """Create a player with the starting stats."""
    return Player(name=name)
