"""
Game Engine for HackSim.

The dispatch layer between the terminal and the command handlers.
Parses a line of input, resolves the command, validates its arguments
and runs the handler against the session.
"""

from __future__ import annotations

import asyncio
import logging
import random

from hacksim.commands import default_commands
from hacksim.db.interfaces import KeyValueStore
from hacksim.db.memory import InMemoryKeyValueStore
from hacksim.engine.models import CLEAR_SENTINEL, CommandResult, EngineConfig
from hacksim.engine.registry import CommandRegistry
from hacksim.engine.session import GameSession, OutputSink, Sleeper
from hacksim.services.clock import GameClock
from hacksim.services.mission import MissionGenerator, MissionService
from hacksim.services.player import PlayerService

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "Error: Command failed unexpectedly."


def create_session(
    config: EngineConfig | None = None,
    *,
    store: KeyValueStore | None = None,
    output: OutputSink | None = None,
    sleeper: Sleeper | None = None,
) -> GameSession:
    """
    Build a session with every built-in command registered.

    The session is not started; call ``new_game()`` or restore a save.
    """
    config = config or EngineConfig()
    rng = random.Random(config.seed)

    registry = CommandRegistry()
    registry.register_all(default_commands())

    session = GameSession(
        config=config,
        rng=rng,
        players=PlayerService(),
        missions=MissionService(generator=MissionGenerator(rng=rng)),
        registry=registry,
        clock=GameClock(),
        store=store if store is not None else InMemoryKeyValueStore(),
        output=output,
    )
    if sleeper is not None:
        session.sleeper = sleeper
    session.players.rename(config.player_name)
    return session


def parse_command(text: str) -> tuple[str, list[str]]:
    """Split a line into the command token and its arguments."""
    parts = text.split()
    if not parts:
        return "", []
    return parts[0], parts[1:]


class HackSimEngine:
    """
    Runs terminal input against a game session.

    Commands run one at a time: a second ``execute`` waits for the first
    to finish, including its simulated delays.
    """

    def __init__(self, session: GameSession | None = None) -> None:
        self.session = session or create_session()
        self._lock = asyncio.Lock()

    @property
    def registry(self) -> CommandRegistry:
        return self.session.registry

    def new_game(self) -> None:
        self.session.new_game()

    async def execute(self, line: str) -> CommandResult:
        """
        Execute one line of input.

        Args:
            line: Raw text typed at the prompt

        Returns:
            CommandResult with the text to display
        """
        name, args = parse_command(line.strip())
        if not name:
            return CommandResult(output="")

        command = self.registry.get(name)
        if command is None:
            return CommandResult(
                output=f"Command not found: {name}. Type 'help' for available commands.",
                error="not_found",
            )

        validation = self.registry.validate_command(command, args)
        if not validation.valid:
            return CommandResult(
                output=validation.message or f"Error: Invalid arguments. Usage: {command.usage}",
                command=command.name,
                error="invalid_arguments",
            )

        async with self._lock:
            try:
                output = await command.handler(self.session, args)
            except Exception:
                logger.exception("Command %r failed", command.name)
                return CommandResult(
                    output=UNEXPECTED_ERROR,
                    command=command.name,
                    error="internal",
                )

        if output == CLEAR_SENTINEL:
            return CommandResult(output="", command=command.name, clear_screen=True)
        return CommandResult(output=output, command=command.name)

