"""
Interactive REPL for HackSim.

Provides a terminal prompt for playing the game.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass

from hacksim import GAME_NAME, __version__
from hacksim.db.files import FileKeyValueStore
from hacksim.db.saves import get_save_info
from hacksim.engine import EngineConfig, HackSimEngine, create_session
from hacksim.engine.models import CommandResult

EXIT_COMMANDS = frozenset({"exit", "quit"})


@dataclass
class TerminalState:
    """Current state of the terminal."""

    engine: HackSimEngine
    running: bool = True
    prompt: str = "root@hacksim:~$ "


class HackSimREPL:
    """
    Interactive REPL for playing HackSim.

    Reads lines, hands them to the engine and prints the results.
    Progress lines from long-running commands are printed as they happen.
    """

    def __init__(
        self,
        config: EngineConfig,
        *,
        printer: Callable[[str], None] = print,
    ) -> None:
        self.config = config
        self.printer = printer

    def _print_banner(self) -> None:
        banner = r"""
  _   _            _    ____  _
 | | | | __ _  ___| | _/ ___|(_)_ __ ___
 | |_| |/ _` |/ __| |/ /\___ \| | '_ ` _ \
 |  _  | (_| | (__|   <  ___) | | | | | | |
 |_| |_|\__,_|\___|_|\_\|____/|_|_| |_| |_|
"""
        self.printer(banner)
        self.printer(f"{GAME_NAME} v{__version__}")
        self.printer("Type 'help' for commands, 'exit' to quit.\n")

    def _clear_screen(self) -> None:
        os.system("cls" if os.name == "nt" else "clear")

    def _display(self, result: CommandResult) -> None:
        if result.clear_screen:
            self._clear_screen()
            return
        if result.output:
            self.printer("")
            self.printer(result.output)
            self.printer("")

    def create_engine(self) -> HackSimEngine:
        session = create_session(
            self.config,
            store=FileKeyValueStore(self.config.save_path),
            output=self.printer,
        )
        return HackSimEngine(session)

    async def run(self, *, load: bool = False) -> None:
        """Run the interactive REPL."""
        engine = self.create_engine()
        state = TerminalState(engine=engine)

        engine.new_game()
        self._print_banner()

        if load:
            info = get_save_info(engine.session.store, self.config.save_slot)
            if info is not None:
                self.printer(
                    f"Found save from {info.timestamp:%Y-%m-%d %H:%M} "
                    f"(level {info.player_level}, v{info.version})."
                )
                self._display(await engine.execute("load"))
            else:
                self.printer("No saved game found. Starting a new game.\n")

        self.printer(f"Welcome, {engine.session.players.player.name}!")
        self.printer("Type 'missions' to see available jobs.\n")

        # Main loop
        while state.running:
            try:
                user_input = input(state.prompt).strip()

                if not user_input:
                    continue

                if user_input in EXIT_COMMANDS:
                    state.running = False
                    continue

                self._display(await engine.execute(user_input))

            except KeyboardInterrupt:
                self.printer("\n")
                state.running = False
            except EOFError:
                self.printer("\n")
                state.running = False

        engine.session.clock.pause()
        self.printer("Connection closed.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="HackSim terminal hacking simulator")
    parser.add_argument("--name", default=None, help="Player name")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--delay-scale",
        type=float,
        default=None,
        help="Multiplier for simulated delays (0 disables them)",
    )
    parser.add_argument("--save-path", default=None, help="Directory for save files")
    parser.add_argument(
        "--load",
        action="store_true",
        help="Resume from the saved game if there is one",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level",
    )
    return parser


def run_game(config: EngineConfig, *, load: bool = False) -> None:
    """
    Run the HackSim game.

    Args:
        config: Engine configuration
        load: Resume from the saved game if one exists
    """
    repl = HackSimREPL(config)
    asyncio.run(repl.run(load=load))


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = EngineConfig.from_env(
        player_name=args.name,
        seed=args.seed,
        delay_scale=args.delay_scale,
        save_path=args.save_path,
    )
    run_game(config, load=args.load)


if __name__ == "__main__":
    main()
