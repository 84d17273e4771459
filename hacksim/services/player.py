"""Player progression service: experience, levels, credits and reputation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from hacksim.models.player import DEFAULT_PLAYER_NAME, Player, create_player

logger = logging.getLogger(__name__)

BASE_EXP_REQUIREMENT = 100
EXP_MULTIPLIER = 1.5


def exp_required_for_level(level: int) -> int:
    """Experience needed to advance from ``level`` to the next one."""
    return math.floor(BASE_EXP_REQUIREMENT * EXP_MULTIPLIER ** (level - 1))


@dataclass
class PlayerService:
    """Owns the player record and applies progression rules to it."""

    player: Player = field(default_factory=create_player)

    @property
    def exp_to_next_level(self) -> int:
        return exp_required_for_level(self.player.level)

    @property
    def level_progress(self) -> int:
        """Progress through the current level, 0-100."""
        return min(100, math.floor(self.player.exp / self.exp_to_next_level * 100))

    def add_exp(self, amount: int) -> int:
        """
        Grant experience, levelling up as many times as it pays for.

        Non-positive amounts are ignored. Returns the number of levels gained.
        """
        if amount <= 0:
            return 0

        old_level = self.player.level
        self.player.exp += amount

        while self.player.exp >= exp_required_for_level(self.player.level):
            self.player.exp -= exp_required_for_level(self.player.level)
            self.player.level += 1

        gained = self.player.level - old_level
        if gained:
            logger.info("Level up! %s is now level %d", self.player.name, self.player.level)
        return gained

    def add_credits(self, amount: int) -> None:
        self.player.credits += amount

    def add_reputation(self, amount: int) -> None:
        self.player.reputation += amount

    def spend_credits(self, amount: int) -> bool:
        """Deduct credits if the player can afford it."""
        if self.player.credits < amount:
            return False
        self.player.credits -= amount
        return True

    def rename(self, name: str) -> None:
        self.player.name = name

    def reset(self, name: str = DEFAULT_PLAYER_NAME) -> None:
        """Start over with a brand new player."""
        self.player = create_player(name)

    def restore(self, player: Player) -> None:
        self.player = player
