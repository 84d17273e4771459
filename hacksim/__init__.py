"""
HackSim - a terminal hacking simulator.

Players scan, connect to and hack simulated network nodes to complete
missions, earning experience, credits and reputation along the way.
"""

from __future__ import annotations

GAME_NAME = "HackSim"
__version__ = "0.1.0"
