"""
Network Skill.

Address validation and the randomized results of probing a simulated
node. Nothing here touches a real network.
"""

from __future__ import annotations

import random
import re

from pydantic import BaseModel, Field

# Address ranges mission targets are drawn from
COMMON_RANGES = ["192.168.1.", "10.0.0.", "172.16.0."]

COMMON_PORTS = [21, 22, 23, 80, 443, 3306, 5432]

PORT_SERVICES: dict[int, str] = {
    21: "FTP",
    22: "SSH",
    23: "Telnet",
    80: "HTTP",
    443: "HTTPS",
    3306: "MySQL",
    5432: "PostgreSQL",
}

SERVER_NAMES = [
    "Corporate Server",
    "Database Server",
    "Web Server",
    "Mail Server",
    "File Server",
    "Backup Server",
    "Development Server",
    "Production Server",
]

MIN_PORT_COUNT = 1
MAX_PORT_COUNT = 5
MIN_SECURITY = 1
MAX_SECURITY = 5

_DOTTED_QUAD = re.compile(r"(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})", re.ASCII)


class ScanResult(BaseModel):
    """What a scan reveals about a node. Never persisted."""

    name: str
    ports: list[int]
    services: list[str]
    security: int = Field(ge=MIN_SECURITY, le=MAX_SECURITY)


def parse_address(address: str) -> tuple[int, int, int, int] | None:
    """
    Parse a dotted-quad address into its octets.

    Returns None if the syntax is wrong or any octet exceeds 255.
    """
    match = _DOTTED_QUAD.fullmatch(address)
    if not match:
        return None

    octets = tuple(int(part) for part in match.groups())
    if any(octet > 255 for octet in octets):
        return None
    return octets  # type: ignore[return-value]


def is_valid_address(address: str) -> bool:
    """
    Check an address against the reserved-range aware policy.

    Rejects:
    - 0.0.0.0/8 (this network)
    - 127.0.0.0/8 (loopback)
    - 169.254.0.0/16 (link local)
    - 192.0.2.0/24, 198.51.100.0/24, 203.0.113.0/24 (TEST-NET 1-3)
    - 224.0.0.0/4 (multicast) and everything above, including broadcast
    """
    octets = parse_address(address)
    if octets is None:
        return False

    first, second, third, _ = octets

    if first == 0 or first == 127:
        return False
    if first == 169 and second == 254:
        return False
    if (first, second, third) in ((192, 0, 2), (198, 51, 100), (203, 0, 113)):
        return False
    if first >= 224:
        return False

    return True


def is_private_address(address: str) -> bool:
    """Check whether an address falls in an RFC 1918 private range."""
    octets = parse_address(address)
    if octets is None:
        return False

    first, second, _, _ = octets
    if first == 10:
        return True
    if first == 172 and 16 <= second <= 31:
        return True
    return first == 192 and second == 168


def random_address(rng: random.Random) -> str:
    """Pick a mission target: a common private range plus a host in 1-254."""
    prefix = rng.choice(COMMON_RANGES)
    return f"{prefix}{rng.randint(1, 254)}"


def scan_target(address: str, rng: random.Random) -> ScanResult:
    """
    Probe a node.

    The address only labels the result; every call rolls fresh ports,
    services and security rating.
    """
    port_count = rng.randint(MIN_PORT_COUNT, MAX_PORT_COUNT)
    ports = rng.sample(COMMON_PORTS, min(port_count, len(COMMON_PORTS)))
    services = [PORT_SERVICES.get(port, "Unknown") for port in ports]

    return ScanResult(
        name=rng.choice(SERVER_NAMES),
        ports=ports,
        services=services,
        security=rng.randint(MIN_SECURITY, MAX_SECURITY),
    )
