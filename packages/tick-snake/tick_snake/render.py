"""Plain-text board rendering."""
from __future__ import annotations

from tick_snake.session import GameSession

HEAD = "@"
BODY = "o"
FOOD = "*"
EMPTY = "."


def render_ascii(session: GameSession) -> str:
    """Draw *session* as one line per grid row, top row first."""
    size = session.grid_size
    rows = [[EMPTY] * size for _ in range(size)]
    if session.food is not None:
        rows[session.food.y][session.food.x] = FOOD
    for seg in session.snake[1:]:
        rows[seg.y][seg.x] = BODY
    rows[session.head.y][session.head.x] = HEAD
    return "\n".join("".join(row) for row in rows)
