"""
Command registry for HackSim.

Maps command names and aliases to command definitions and checks
arguments against each command's validation rule.
"""

from __future__ import annotations

from hacksim.models.command import CommandDefinition, ValidationResult


class CommandRegistry:
    """
    Name/alias -> command lookup table.

    Every alias is its own key: registering overwrites only the keys the
    new command claims, and unregistering removes only the key given.
    Lookups are exact and case-sensitive.
    """

    def __init__(self) -> None:
        self._commands: dict[str, CommandDefinition] = {}

    def register(self, command: CommandDefinition) -> None:
        """Register a command under its name and every alias."""
        self._commands[command.name] = command
        for alias in command.aliases:
            self._commands[alias] = command

    def register_all(self, commands: list[CommandDefinition]) -> None:
        for command in commands:
            self.register(command)

    def get(self, name: str) -> CommandDefinition | None:
        return self._commands.get(name)

    def has(self, name: str) -> bool:
        return name in self._commands

    def get_all_names(self) -> set[str]:
        """Every registered key, names and aliases alike."""
        return set(self._commands)

    def get_all_commands(self) -> list[CommandDefinition]:
        """Distinct commands, one per primary name, in registration order."""
        unique: dict[str, CommandDefinition] = {}
        for command in self._commands.values():
            unique.setdefault(command.name, command)
        return list(unique.values())

    def unregister(self, name: str) -> bool:
        """Remove a single key. Returns False if it was not registered."""
        return self._commands.pop(name, None) is not None

    def clear(self) -> None:
        self._commands.clear()

    def validate_command(self, command: CommandDefinition, args: list[str]) -> ValidationResult:
        """
        Check arguments against a command's validation rule.

        Count bounds run first; the custom validator only sees argument
        lists that are within bounds.
        """
        rule = command.validation
        if rule is None:
            return ValidationResult(valid=True)

        if rule.min_args is not None and len(args) < rule.min_args:
            return ValidationResult(
                valid=False,
                message=(
                    f"Error: {command.name} requires at least {rule.min_args} "
                    f"argument(s). Usage: {command.usage}"
                ),
            )

        if rule.max_args is not None and len(args) > rule.max_args:
            return ValidationResult(
                valid=False,
                message=(
                    f"Error: {command.name} accepts at most {rule.max_args} "
                    f"argument(s). Usage: {command.usage}"
                ),
            )

        if rule.validate is not None:
            return rule.validate(args)

        return ValidationResult(valid=True)
