"""
Core Engine for HackSim.

The engine owns:
- Command registry (names and aliases to handlers, argument validation)
- Game session (stores, clock, random source, progress output)
- Dispatch (one line of input to one command result)
"""

from __future__ import annotations

from hacksim.engine.game import HackSimEngine, create_session, parse_command
from hacksim.engine.models import CLEAR_SENTINEL, CommandResult, EngineConfig
from hacksim.engine.registry import CommandRegistry
from hacksim.engine.session import GameSession

__all__ = [
    # Game
    "HackSimEngine",
    "create_session",
    "parse_command",
    # Models
    "CLEAR_SENTINEL",
    "CommandResult",
    "EngineConfig",
    # Registry
    "CommandRegistry",
    # Session
    "GameSession",
]
