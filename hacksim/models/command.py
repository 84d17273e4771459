"""
Command definitions for HackSim.

A command is a name, its aliases, help text, an async handler and an
optional argument validation rule.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from hacksim.engine.session import GameSession


# Output value telling the terminal to clear the screen instead of printing
CLEAR_SENTINEL = "__CLEAR__"


class ValidationResult(BaseModel):
    """Outcome of validating a command's arguments."""

    valid: bool
    message: str | None = None


CommandHandler = Callable[["GameSession", list[str]], Awaitable[str]]
ArgumentValidator = Callable[[list[str]], ValidationResult]


@dataclass(frozen=True)
class ValidationRule:
    """
    Argument rules for a command.

    Count bounds are always checked before the custom validator, and a
    failing bound short-circuits it.
    """

    min_args: int | None = None
    max_args: int | None = None
    validate: ArgumentValidator | None = None

    def __post_init__(self) -> None:
        for bound in (self.min_args, self.max_args):
            if bound is not None and bound < 0:
                raise ValueError(f"Argument bounds must be non-negative, got {bound}")
        if (
            self.min_args is not None
            and self.max_args is not None
            and self.min_args > self.max_args
        ):
            raise ValueError(
                f"min_args ({self.min_args}) cannot exceed max_args ({self.max_args})"
            )


@dataclass
class CommandDefinition:
    """A terminal command."""

    name: str
    description: str
    usage: str
    handler: CommandHandler
    aliases: tuple[str, ...] = field(default_factory=tuple)
    category: str = "Basic"
    validation: ValidationRule | None = None
