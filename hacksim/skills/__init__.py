"""
Skills for HackSim.

Skills are stateless mechanics: pure functions of their inputs and an
injected random source.
"""

from hacksim.skills.network import (
    COMMON_PORTS,
    COMMON_RANGES,
    PORT_SERVICES,
    SERVER_NAMES,
    ScanResult,
    is_private_address,
    is_valid_address,
    parse_address,
    random_address,
    scan_target,
)

__all__ = [
    "COMMON_PORTS",
    "COMMON_RANGES",
    "PORT_SERVICES",
    "SERVER_NAMES",
    "ScanResult",
    "is_private_address",
    "is_valid_address",
    "parse_address",
    "random_address",
    "scan_target",
]
