"""
Session snapshot model.

The snapshot is an opaque blob as far as storage is concerned; it only
has to round-trip the player and the three mission collections.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from hacksim.models.mission import Mission
from hacksim.models.player import Player


class SaveData(BaseModel):
    """Everything needed to resume a session."""

    player: Player
    available_missions: list[Mission] = Field(default_factory=list)
    active_mission: Mission | None = None
    completed_missions: list[Mission] = Field(default_factory=list)
    play_time: int = 0
    """Seconds played, as tracked by the game clock."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    version: str


class SaveInfo(BaseModel):
    """Summary of a stored snapshot, for display before loading."""

    timestamp: datetime
    version: str
    player_level: int
    play_time: int
