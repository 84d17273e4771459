"""
Engine Data Models for HackSim.

- EngineConfig: runtime settings for a session
- CommandResult: what the engine hands back for one line of input
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from hacksim.models.command import CLEAR_SENTINEL
from hacksim.models.player import DEFAULT_PLAYER_NAME

__all__ = ["CLEAR_SENTINEL", "CommandResult", "EngineConfig"]


class EngineConfig(BaseModel):
    """
    Engine configuration.

    Environment overrides (see ``from_env``):
        HACKSIM_PLAYER_NAME: Display name for a new player
        HACKSIM_DELAY_SCALE: Multiplier for simulated latency (0 disables it)
        HACKSIM_SEED: Seed for the random source
        HACKSIM_SAVE_PATH: Directory save files are written to
    """

    player_name: str = DEFAULT_PLAYER_NAME
    delay_scale: float = Field(default=1.0, ge=0.0)
    seed: int | None = None
    save_path: str = ".hacksim"
    save_slot: str = "hacksim_save"

    @classmethod
    def from_env(cls, **overrides: object) -> EngineConfig:
        """Build a config from HACKSIM_* environment variables."""
        values: dict[str, object] = {}

        if os.getenv("HACKSIM_PLAYER_NAME"):
            values["player_name"] = os.getenv("HACKSIM_PLAYER_NAME")

        if os.getenv("HACKSIM_DELAY_SCALE"):
            values["delay_scale"] = float(os.getenv("HACKSIM_DELAY_SCALE", "1.0"))

        if os.getenv("HACKSIM_SEED"):
            values["seed"] = int(os.getenv("HACKSIM_SEED", "0"))

        if os.getenv("HACKSIM_SAVE_PATH"):
            values["save_path"] = os.getenv("HACKSIM_SAVE_PATH")

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)


class CommandResult(BaseModel):
    """Result of executing one line of input."""

    output: str = Field(description="Text to display")
    command: str | None = Field(default=None, description="Resolved primary command name")
    clear_screen: bool = Field(default=False, description="Terminal should clear instead")
    error: str | None = None
