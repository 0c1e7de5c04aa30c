"""SnakeGame - owns the session between ticks and reports tick effects."""
from __future__ import annotations

import logging
import os
import random

from tick_snake.config import SnakeConfig
from tick_snake.engine import TickOutcome, steer, tick
from tick_snake.session import (
    GameSession,
    new_session,
    pause,
    resume,
    start_session,
    toggle_pause,
)
from tick_snake.signals import Signal, SignalBus
from tick_snake.types import Direction, Status

logger = logging.getLogger(__name__)


class SnakeGame:
    def __init__(
        self,
        config: SnakeConfig | None = None,
        seed: int | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._config = config if config is not None else SnakeConfig()
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        self._bus = bus if bus is not None else SignalBus()
        self._session = new_session(self._config, self._rng)

    @property
    def config(self) -> SnakeConfig:
        return self._config

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def status(self) -> Status:
        return self._session.status

    @property
    def score(self) -> int:
        return self._session.score

    @property
    def speed(self) -> int:
        return self._session.speed

    @property
    def is_over(self) -> bool:
        return self._session.is_over

    def start(self) -> GameSession:
        """Discard the current session and begin a fresh RUNNING one."""
        self._session = start_session(self._config, self._rng)
        logger.debug("game started (seed=%d)", self._seed)
        return self._session

    def steer(self, direction: Direction) -> None:
        self._session = steer(self._session, direction)

    def pause(self) -> None:
        self._session = pause(self._session)

    def resume(self) -> None:
        self._session = resume(self._session)

    def toggle_pause(self) -> None:
        self._session = toggle_pause(self._session)

    def step(self) -> TickOutcome:
        outcome = tick(self._session, self._rng)
        self._session = outcome.session
        session = outcome.session

        if outcome.ate_food:
            self._bus.publish(Signal.FOOD_EATEN, score=session.score)
        if outcome.speed_changed:
            self._bus.publish(Signal.SPEED_CHANGED, speed=session.speed)
        if outcome.collision is not None:
            logger.info(
                "game over: %s collision, score %d",
                outcome.collision, session.score,
            )
            self._bus.publish(
                Signal.GAME_OVER, score=session.score, reason=outcome.collision,
            )
        self._bus.flush()
        return outcome
