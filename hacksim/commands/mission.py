"""
Mission commands: missions, accept, abandon and status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hacksim.commands.panels import field, panel, title
from hacksim.models.command import CommandDefinition, ValidationRule
from hacksim.models.mission import Mission
from hacksim.services.mission import AcceptOutcome

if TYPE_CHECKING:
    from hacksim.engine.session import GameSession


def _listing_row(label: str, mission: Mission) -> str:
    return f" [{label}] {mission.short_id} - {mission.title:<22} {mission.stars}"


async def missions(session: GameSession, args: list[str]) -> str:
    """List the active mission followed by every available one."""
    store = session.missions
    if not store.available and store.active is None:
        return "No missions available. Try again later."

    rows: list[str] = []
    if store.active is not None:
        rows.append(_listing_row("ACTIVE", store.active))
    for index, mission in enumerate(store.available, 1):
        rows.append(_listing_row(f"{index:>2}", mission))

    return (
        panel([title("Available missions")], rows)
        + '\n\nUse "accept <ID|index>" to accept a mission.'
    )


def _resolve_mission_id(session: GameSession, identifier: str) -> str:
    """Treat in-range integers as 1-based positions, anything else as an id."""
    if not (identifier.isascii() and identifier.isdigit()):
        return identifier

    mission = session.missions.get_available_by_index(int(identifier))
    return mission.id if mission is not None else identifier


async def accept(session: GameSession, args: list[str]) -> str:
    """Accept a mission by id or by its position in the missions list."""
    if not args:
        return (
            "Error: Mission ID or index required\nUsage: accept <ID|index>\n\n"
            'Use "missions" to see available missions.'
        )

    identifier = args[0]
    mission_id = _resolve_mission_id(session, identifier)
    mission = session.missions.find_mission(mission_id)

    outcome = session.missions.accept_mission_result(mission_id)
    if outcome is AcceptOutcome.ALREADY_ACTIVE:
        active = session.missions.active
        active_title = active.title if active else "unknown"
        return (
            f'Error: You already have an active mission: "{active_title}".\n'
            'Complete it, or use "abandon" to drop it first.'
        )
    if outcome is AcceptOutcome.NOT_FOUND or mission is None:
        return (
            f'Error: Mission "{identifier}" not found.\n\n'
            'Use "missions" to see available missions.'
        )

    return panel(
        [title("Mission accepted")],
        [
            field("Title", mission.title, key_width=10),
            field("Target", mission.target, key_width=10),
            field(
                "Reward",
                f"{mission.reward.exp} EXP, {mission.reward.credits} Credits",
                key_width=10,
            ),
            "",
            "  Use 'status' to view mission objectives.",
        ],
    )


async def abandon(session: GameSession, args: list[str]) -> str:
    """Drop the active mission back onto the available list."""
    mission = session.missions.abandon_mission()
    if mission is None:
        return "Error: No active mission to abandon."
    return f'Mission abandoned: "{mission.title}".\nIt is back on the missions list.'


async def status(session: GameSession, args: list[str]) -> str:
    """
    Show the active mission.

    The objective checklist is cosmetic: progress is not tracked, so the
    boxes are always unchecked.
    """
    active = session.missions.active
    if active is None:
        return 'No active mission. Use "missions" to see available missions.'

    return panel(
        [title("Current mission")],
        [
            field("Title", active.title, key_width=13),
            field("Target", active.target, key_width=13),
            field("Difficulty", active.stars, key_width=13),
        ],
        [
            "  OBJECTIVES:",
            f"  [ ] Scan target ({active.target})",
            "  [ ] Connect to target",
            "  [ ] Hack target",
        ],
    )


MISSION_COMMANDS: list[CommandDefinition] = [
    CommandDefinition(
        name="missions",
        description="Show available missions",
        usage="missions",
        handler=missions,
        aliases=("quest", "tasks"),
        category="Mission",
    ),
    CommandDefinition(
        name="accept",
        description="Accept a mission by ID or index",
        usage="accept <ID|index>",
        handler=accept,
        category="Mission",
        validation=ValidationRule(min_args=1, max_args=1),
    ),
    CommandDefinition(
        name="abandon",
        description="Abandon the current mission",
        usage="abandon",
        handler=abandon,
        category="Mission",
    ),
    CommandDefinition(
        name="status",
        description="Show current mission status",
        usage="status",
        handler=status,
        category="Mission",
    ),
]
