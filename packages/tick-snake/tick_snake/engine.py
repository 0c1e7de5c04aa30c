"""Tick engine - the single per-tick state transition."""
from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass

from tick_snake.rules import (
    advance_head,
    grow_or_move,
    is_food_collision,
    is_self_collision,
    is_valid_direction_change,
    is_wall_collision,
    next_speed,
    place_food,
)
from tick_snake.session import GameSession
from tick_snake.types import Direction, Status

WALL = "wall"
SELF = "self"


@dataclass(frozen=True, slots=True)
class TickOutcome:
    """Result of one tick: the next session plus the effects it implies.

    ``speed_changed`` tells the driving scheduler to re-read
    ``session.speed``. ``collision`` is ``"wall"`` or ``"self"`` on the tick
    that ends the game, otherwise None.
    """

    session: GameSession
    ate_food: bool = False
    speed_changed: bool = False
    collision: str | None = None


def steer(session: GameSession, candidate: Direction) -> GameSession:
    """Store *candidate* as the pending direction if it is a legal turn.

    Legality is judged against the applied direction, never the pending one,
    so two presses between ticks cannot reverse the snake. A later legal
    press overwrites an earlier one.
    """
    if session.status is Status.OVER:
        return session
    if not is_valid_direction_change(candidate, session.direction):
        return session
    if candidate is session.pending_direction:
        return session
    return dataclasses.replace(session, pending_direction=candidate)


def tick(session: GameSession, rng: random.Random) -> TickOutcome:
    if session.status is not Status.RUNNING:
        return TickOutcome(session)

    config = session.config
    direction = session.pending_direction
    new_head = advance_head(session.head, direction)

    collision = None
    if is_wall_collision(new_head, config.grid_size):
        collision = WALL
    elif is_self_collision(new_head, session.snake):
        collision = SELF
    if collision is not None:
        over = dataclasses.replace(
            session, direction=direction, status=Status.OVER,
        )
        return TickOutcome(over, collision=collision)

    ate_food = is_food_collision(new_head, session.food)
    snake = grow_or_move(session.snake, new_head, ate_food)
    if not ate_food:
        moved = dataclasses.replace(session, snake=snake, direction=direction)
        return TickOutcome(moved)

    speed = next_speed(session.speed, config.min_speed, config.speed_step)
    fed = dataclasses.replace(
        session,
        snake=snake,
        direction=direction,
        food=place_food(snake, config.grid_size, rng),
        score=session.score + config.food_score,
        speed=speed,
    )
    return TickOutcome(fed, ate_food=True, speed_changed=speed != session.speed)
