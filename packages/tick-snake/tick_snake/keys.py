"""Input adapter - raw key names to direction intents and control actions.

Accepts browser-style names (``"ArrowUp"``) as well as pygame's
``pygame.key.name`` output (``"up"``, ``"return"``). Matching ignores case.
"""
from __future__ import annotations

from tick_snake.types import Direction

PAUSE = "pause"
START = "start"

_DIRECTION_KEYS: dict[str, Direction] = {
    "arrowup": Direction.UP,
    "up": Direction.UP,
    "w": Direction.UP,
    "arrowdown": Direction.DOWN,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
}

_ACTION_KEYS: dict[str, str] = {
    " ": PAUSE,
    "space": PAUSE,
    "enter": START,
    "return": START,
}


def map_key_to_direction(key: str) -> Direction | None:
    """Return the direction for *key*, or None for any other key."""
    return _DIRECTION_KEYS.get(key.lower())


def map_key_to_action(key: str) -> str | None:
    """Return ``"pause"`` or ``"start"`` for control keys, else None."""
    return _ACTION_KEYS.get(key.lower())
