"""
Hacking commands: scan, connect and hack.

All three take a single target address. Scans and connections are
informational; only a successful hack against the active mission's
target changes any state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hacksim.commands.panels import field, meter, panel, title
from hacksim.models.command import CommandDefinition, ValidationResult, ValidationRule
from hacksim.skills.network import is_private_address, is_valid_address, scan_target

if TYPE_CHECKING:
    from hacksim.engine.session import GameSession

logger = logging.getLogger(__name__)

# Simulated latency, in milliseconds, with the progress line shown after each wait
SCAN_STEPS: list[tuple[int, str | None]] = [
    (1000, "Initializing scan..."),
    (500, "Scanning ports..."),
    (800, "Analyzing services..."),
    (500, "Detecting security measures..."),
    (300, None),
]

CONNECT_STEPS: list[tuple[int, str | None]] = [
    (800, "Establishing connection..."),
    (600, "Handshake..."),
    (400, "Authenticating..."),
    (300, None),
]

HACK_STEPS: list[tuple[int, str | None]] = [
    (1000, "Initializing attack sequence..."),
    (600, "Scanning for vulnerabilities..."),
    (800, "Exploiting vulnerabilities..."),
    (500, "Bypassing firewall..."),
    (700, "Escalating privileges..."),
    (600, "Extracting data..."),
    (800, "Covering tracks..."),
    (400, None),
]

REPUTATION_PER_HACK = 1


def address_error(args: list[str], usage: str) -> str | None:
    """Return an error message if the target argument is missing or malformed."""
    if not args:
        return f"Error: Target IP required\nUsage: {usage}"
    if not is_valid_address(args[0]):
        return f"Error: Invalid IP address format: {args[0]}"
    return None


def _validate_address(args: list[str]) -> ValidationResult:
    if not is_valid_address(args[0]):
        return ValidationResult(valid=False, message=f"Error: Invalid IP address format: {args[0]}")
    return ValidationResult(valid=True)


ADDRESS_RULE = ValidationRule(min_args=1, max_args=1, validate=_validate_address)


async def _run_steps(session: GameSession, steps: list[tuple[int, str | None]]) -> None:
    for delay_ms, message in steps:
        await session.sleep(delay_ms)
        if message:
            session.emit(message)


async def scan(session: GameSession, args: list[str]) -> str:
    """Probe a target for open ports and its security rating."""
    error = address_error(args, "scan <IP>")
    if error:
        return error

    target = args[0]
    await _run_steps(session, SCAN_STEPS)
    result = scan_target(target, session.rng)

    ports = [
        f"  Port {port:<6} - {service}"
        for port, service in zip(result.ports, result.services)
    ]
    return panel(
        [title(f"Scan results for: {target}")],
        [
            field("Target Name", result.name),
            field("Target IP", target),
            field("Network", "Private" if is_private_address(target) else "Public"),
            field("Security Level", f"{meter(result.security)} ({result.security}/5)"),
        ],
        ["  OPEN PORTS:", *ports],
    )


async def connect(session: GameSession, args: list[str]) -> str:
    """Open a connection. Only the active mission's target lets you in."""
    error = address_error(args, "connect <IP>")
    if error:
        return error

    target = args[0]
    await _run_steps(session, CONNECT_STEPS)

    active = session.missions.active
    if active is not None and active.target == target:
        session.emit("Connection established!")
        latency = session.rng.randint(10, 59)
        return panel(
            [title(f"Connected to: {target}")],
            [
                field("Status", "Connected"),
                field("Connection Type", "Secure"),
                field("Latency", f"{latency}ms"),
                "",
                f"  Use 'hack {target}' to initiate the attack.",
            ],
        )

    session.emit("Access denied!")
    return panel(
        [title("Connection failed")],
        [
            field("Target", target),
            field("Error", "Access denied - Authorization required"),
            "",
            "  This target is not part of your current mission.",
        ],
    )


async def hack(session: GameSession, args: list[str]) -> str:
    """Attack the active mission's target and collect the reward."""
    error = address_error(args, "hack <IP>")
    if error:
        return error

    target = args[0]
    active = session.missions.active
    if active is None:
        return 'Error: No active mission. Use "missions" to see available missions.'
    if active.target != target:
        return f"Error: Target {target} is not your current mission target."

    await _run_steps(session, HACK_STEPS)
    session.emit("Attack successful!")

    reward = session.missions.complete_mission()
    if reward is None:
        logger.error("Active mission vanished while hacking %s", target)
        return "Error: Failed to complete mission."

    players = session.players
    levels_gained = players.add_exp(reward.exp)
    players.add_credits(reward.credits)
    players.add_reputation(REPUTATION_PER_HACK)

    if not session.missions.available:
        session.missions.generate_missions(players.player.level)

    data_mb = session.rng.randint(50, 149)
    seconds = session.rng.uniform(2, 7)
    output = panel(
        [title("Attack successful")],
        [
            field("Target", target),
            field("Data Extracted", f"{data_mb} MB"),
            field("Time Taken", f"{seconds:.2f}s"),
        ],
        [
            "  REWARDS:",
            field("EXP", reward.exp),
            field("Credits", reward.credits),
            field("Reputation", f"+{REPUTATION_PER_HACK}"),
        ],
    )

    if levels_gained:
        output += f"\n\nLEVEL UP! You are now level {players.player.level}."
    else:
        output += f"\n\nMission completed! You are now level {players.player.level}."
    return output


HACK_COMMANDS: list[CommandDefinition] = [
    CommandDefinition(
        name="scan",
        description="Scan a target IP address",
        usage="scan <IP>",
        handler=scan,
        category="Hacking",
        validation=ADDRESS_RULE,
    ),
    CommandDefinition(
        name="connect",
        description="Connect to a target system",
        usage="connect <IP>",
        handler=connect,
        category="Hacking",
        validation=ADDRESS_RULE,
    ),
    CommandDefinition(
        name="hack",
        description="Hack a target system",
        usage="hack <IP>",
        handler=hack,
        category="Hacking",
        validation=ADDRESS_RULE,
    ),
]
