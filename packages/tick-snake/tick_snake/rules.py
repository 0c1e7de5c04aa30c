"""Pure movement, collision, growth and progression rules."""
from __future__ import annotations

import random
from typing import Sequence

from tick_snake.types import Direction, Position

# Rejection-sampling attempts before falling back to a free-cell scan.
_MAX_FOOD_ATTEMPTS = 64


def advance_head(head: Position, direction: Direction) -> Position:
    dx, dy = direction.delta
    return Position(head.x + dx, head.y + dy)


def is_wall_collision(pos: Position, grid_size: int) -> bool:
    return not (0 <= pos.x < grid_size and 0 <= pos.y < grid_size)


def is_self_collision(new_head: Position, body: Sequence[Position]) -> bool:
    """True if *new_head* lands on any segment of *body*.

    *body* is the snake before the new head is prepended, so the head never
    trivially matches itself.
    """
    return new_head in body


def is_food_collision(head: Position, food: Position | None) -> bool:
    return food is not None and head == food


def is_valid_direction_change(candidate: Direction, current: Direction) -> bool:
    """Reject only the exact opposite of the applied direction."""
    return candidate is not current.opposite


def grow_or_move(
    snake: Sequence[Position], new_head: Position, ate_food: bool,
) -> tuple[Position, ...]:
    """Return a new snake with *new_head* prepended.

    The tail is dropped unless *ate_food*. The input is never mutated.
    """
    if ate_food:
        return (new_head, *snake)
    return (new_head, *snake[:-1])


def place_food(
    snake: Sequence[Position], grid_size: int, rng: random.Random,
) -> Position | None:
    """Pick a uniformly random free cell, or None if the grid is full.

    Samples blindly a bounded number of times, then scans for free cells so
    the call terminates however crowded the grid is.
    """
    occupied = set(snake)
    capacity = grid_size * grid_size
    if len(occupied) >= capacity:
        return None

    for _ in range(_MAX_FOOD_ATTEMPTS):
        pos = Position(rng.randrange(grid_size), rng.randrange(grid_size))
        if pos not in occupied:
            return pos

    free = [
        Position(x, y)
        for y in range(grid_size)
        for x in range(grid_size)
        if Position(x, y) not in occupied
    ]
    return rng.choice(free)


def next_speed(current: int, min_speed: int = 80, step: int = 2) -> int:
    """Speed after one food: *step* faster, clamped at *min_speed*."""
    if current > min_speed:
        return max(current - step, min_speed)
    return current
