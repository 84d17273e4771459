"""
Basic commands: help, clear, info, game, version, save and load.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hacksim import GAME_NAME, __version__
from hacksim.commands.panels import field, panel, title
from hacksim.db.saves import load_game, save_game
from hacksim.models.command import CLEAR_SENTINEL, CommandDefinition, ValidationRule

if TYPE_CHECKING:
    from hacksim.engine.session import GameSession

logger = logging.getLogger(__name__)

# Help is served from this fixed table rather than the live registry
HELP_TABLE: dict[str, list[tuple[str, str, str]]] = {
    "Basic Commands": [
        ("help", "help [command]", "Show this help message"),
        ("clear", "clear", "Clear the terminal"),
        ("info", "info", "Show player information"),
        ("game", "game", "Show game information"),
        ("version", "version", "Show version information"),
        ("save", "save", "Save your progress"),
        ("load", "load", "Load your saved progress"),
    ],
    "Hacking Commands": [
        ("scan", "scan <IP>", "Scan a target IP address"),
        ("connect", "connect <IP>", "Connect to a target system"),
        ("hack", "hack <IP>", "Hack a target system"),
    ],
    "Mission Commands": [
        ("missions", "missions", "Show available missions"),
        ("accept", "accept <ID|index>", "Accept a mission by ID or index"),
        ("abandon", "abandon", "Abandon the current mission"),
        ("status", "status", "Show current mission status"),
    ],
}


def _find_help_entry(name: str) -> tuple[str, str, str] | None:
    for entries in HELP_TABLE.values():
        for entry in entries:
            if entry[0] == name:
                return entry
    return None


async def help_(session: GameSession, args: list[str]) -> str:
    """List commands by category, or describe one command."""
    if args:
        entry = _find_help_entry(args[0])
        if entry is None:
            return f"No help available for '{args[0]}'. Type 'help' to list commands."
        name, usage, description = entry
        return f"{name} - {description}\n\nUsage: {usage}"

    lines = ["Available Commands:"]
    for category, entries in HELP_TABLE.items():
        lines.append(f"  {category}:")
        for _, usage, description in entries:
            lines.append(f"    {usage:<18} - {description}")
        lines.append("")
    lines.append("Use 'help <command>' for more information about a command")
    return "\n".join(lines)


async def clear(session: GameSession, args: list[str]) -> str:
    return CLEAR_SENTINEL


async def info(session: GameSession, args: list[str]) -> str:
    """Show the player's progression."""
    players = session.players
    player = players.player
    return panel(
        [title("Player info")],
        [
            field("Name", player.name, key_width=12),
            field("Level", player.level, key_width=12),
            field(
                "EXP",
                f"{player.exp}/{players.exp_to_next_level} ({players.level_progress}%)",
                key_width=12,
            ),
            field("Credits", player.credits, key_width=12),
            field("Reputation", player.reputation, key_width=12),
        ],
    )


async def game(session: GameSession, args: list[str]) -> str:
    clock = session.clock
    return panel(
        [f"  {GAME_NAME}", f"  Version {__version__}"],
        [
            field("Status", "Running" if clock.running else "Paused", key_width=13),
            field("Initialized", "Yes" if clock.initialized else "No", key_width=13),
            field("Play Time", clock.formatted_play_time, key_width=13),
        ],
    )


async def version(session: GameSession, args: list[str]) -> str:
    return f"{GAME_NAME} v{__version__}\n\nA terminal hacking simulator."


async def save(session: GameSession, args: list[str]) -> str:
    if not save_game(session.store, session.snapshot(), session.config.save_slot):
        return "Error: Failed to save game."
    return "Game saved."


async def load(session: GameSession, args: list[str]) -> str:
    data = load_game(session.store, session.config.save_slot)
    if data is None:
        return "No saved game found."

    session.restore(data)
    logger.info("Game loaded from slot %r", session.config.save_slot)
    player = session.players.player
    return (
        f"Game loaded. Welcome back, {player.name} "
        f"(level {player.level}, {player.credits} credits)."
    )


BASIC_COMMANDS: list[CommandDefinition] = [
    CommandDefinition(
        name="help",
        description="Show available commands",
        usage="help [command]",
        handler=help_,
        validation=ValidationRule(max_args=1),
    ),
    CommandDefinition(
        name="clear",
        description="Clear the terminal screen",
        usage="clear",
        handler=clear,
        aliases=("cls",),
    ),
    CommandDefinition(
        name="info",
        description="Show player information",
        usage="info",
        handler=info,
    ),
    CommandDefinition(
        name="game",
        description="Show game information",
        usage="game",
        handler=game,
    ),
    CommandDefinition(
        name="version",
        description="Show version information",
        usage="version",
        handler=version,
    ),
    CommandDefinition(
        name="save",
        description="Save your progress",
        usage="save",
        handler=save,
    ),
    CommandDefinition(
        name="load",
        description="Load your saved progress",
        usage="load",
        handler=load,
    ),
]
