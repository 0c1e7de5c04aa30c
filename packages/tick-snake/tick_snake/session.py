"""GameSession value and lifecycle transitions."""
from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass

from tick_snake.config import SnakeConfig, validate_config
from tick_snake.rules import place_food
from tick_snake.types import Direction, Position, Status


@dataclass(frozen=True, slots=True)
class GameSession:
    """Complete state of one game. Never mutated; transitions return copies.

    ``direction`` is the direction applied on the last tick and
    ``pending_direction`` the latest accepted intent, committed on the next
    tick.
    """

    config: SnakeConfig
    snake: tuple[Position, ...]  # head first
    food: Position | None
    direction: Direction
    pending_direction: Direction
    score: int
    speed: int
    status: Status

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def grid_size(self) -> int:
        return self.config.grid_size

    @property
    def is_over(self) -> bool:
        return self.status is Status.OVER


# Lifecycle edges: (current status, action) -> next status.
# Ticking into OVER is handled by the engine; OVER has no outgoing edges.
_TRANSITIONS: dict[tuple[Status, str], Status] = {
    (Status.READY, "begin"): Status.RUNNING,
    (Status.RUNNING, "pause"): Status.PAUSED,
    (Status.PAUSED, "resume"): Status.RUNNING,
}


def new_session(
    config: SnakeConfig | None = None, rng: random.Random | None = None,
) -> GameSession:
    """Build a fresh session in READY. Raises ConfigError on a bad config."""
    if config is None:
        config = SnakeConfig()
    if rng is None:
        rng = random.Random()
    snake = validate_config(config)
    return GameSession(
        config=config,
        snake=snake,
        food=place_food(snake, config.grid_size, rng),
        direction=config.initial_direction,
        pending_direction=config.initial_direction,
        score=0,
        speed=config.initial_speed,
        status=Status.READY,
    )


def start_session(
    config: SnakeConfig | None = None, rng: random.Random | None = None,
) -> GameSession:
    """Build a fresh session already RUNNING. Used for start and restart."""
    return begin(new_session(config, rng))


def transition(session: GameSession, action: str) -> GameSession:
    """Apply a lifecycle action. Actions with no edge leave *session* as is."""
    target = _TRANSITIONS.get((session.status, action))
    if target is None:
        return session
    return dataclasses.replace(session, status=target)


def begin(session: GameSession) -> GameSession:
    return transition(session, "begin")


def pause(session: GameSession) -> GameSession:
    return transition(session, "pause")


def resume(session: GameSession) -> GameSession:
    return transition(session, "resume")


def toggle_pause(session: GameSession) -> GameSession:
    if session.status is Status.PAUSED:
        return resume(session)
    return pause(session)
