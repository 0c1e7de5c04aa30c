"""Scheduler - turns elapsed time into ticks at the game's current speed."""
from __future__ import annotations

from tick_snake.game import SnakeGame
from tick_snake.types import Status


class Scheduler:
    """Fixed-step accumulator whose step length follows ``game.speed``.

    The interval is re-read after every tick, so a speed change takes effect
    from the next tick on. Time that passes while the game is not RUNNING is
    dropped rather than replayed.
    """

    def __init__(self, game: SnakeGame) -> None:
        self._game = game
        self._accumulator = 0.0
        self._tick_number = 0

    @property
    def interval(self) -> float:
        """Current tick interval in seconds."""
        return self._game.speed / 1000.0

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self, dt: float) -> int:
        """Feed *dt* seconds of wall time. Returns the number of ticks fired."""
        if dt < 0:
            raise ValueError("dt must be non-negative")
        if self._game.status is not Status.RUNNING:
            self._accumulator = 0.0
            return 0

        self._accumulator += dt
        fired = 0
        while self._accumulator >= self.interval:
            self._accumulator -= self.interval
            self._game.step()
            self._tick_number += 1
            fired += 1
            if self._game.status is not Status.RUNNING:
                self._accumulator = 0.0
                break
        return fired

    def reset(self) -> None:
        self._accumulator = 0.0
        self._tick_number = 0
