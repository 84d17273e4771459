"""
Terminal commands for HackSim.

Every handler is ``async def handler(session, args) -> str``.
"""

from __future__ import annotations

from hacksim.commands.basic import BASIC_COMMANDS, HELP_TABLE
from hacksim.commands.hack import HACK_COMMANDS
from hacksim.commands.mission import MISSION_COMMANDS
from hacksim.models.command import CommandDefinition


def default_commands() -> list[CommandDefinition]:
    """All built-in commands, in help order."""
    return [*BASIC_COMMANDS, *HACK_COMMANDS, *MISSION_COMMANDS]


__all__ = [
    "BASIC_COMMANDS",
    "HACK_COMMANDS",
    "HELP_TABLE",
    "MISSION_COMMANDS",
    "default_commands",
]
