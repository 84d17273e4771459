"""Box-drawing helpers for terminal panels. Pure string formatting."""

from __future__ import annotations

PANEL_WIDTH = 60
_INNER = PANEL_WIDTH - 2


def _fit(line: str, width: int = _INNER) -> str:
    if len(line) > width:
        return line[: width - 3] + "..."
    return line.ljust(width)


def panel(*sections: list[str]) -> str:
    """
    Draw sections of lines inside a double-line box.

    Sections are separated by a horizontal rule; over-long lines are
    truncated so the right border stays aligned.
    """
    lines = ["╔" + "═" * _INNER + "╗"]
    for index, section in enumerate(sections):
        if index:
            lines.append("╠" + "═" * _INNER + "╣")
        lines.extend("║" + _fit(line) + "║" for line in section)
    lines.append("╚" + "═" * _INNER + "╝")
    return "\n".join(lines)


def title(text: str) -> str:
    return f"  {text.upper()}"


def field(key: str, value: object, key_width: int = 16) -> str:
    """A '  Key:   value' row with the values aligned."""
    return f"  {key + ':':<{key_width}}{value}"


def meter(value: int, maximum: int = 5) -> str:
    """Render a 1-5 rating as a filled bar."""
    return "█" * value + "░" * (maximum - value)
