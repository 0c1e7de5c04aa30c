"""Tick effects published by SnakeGame, dispatched once the tick completes."""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable


class Signal(str, Enum):
    FOOD_EATEN = "food_eaten"  # score
    SPEED_CHANGED = "speed_changed"  # speed
    GAME_OVER = "game_over"  # score, reason


_Handler = Callable[[Signal, dict[str, Any]], None]


class SignalBus:
    """Collects a tick's signals and hands them to subscribers on ``flush``.

    Signals published by a handler during ``flush`` are held for the next
    flush, so one tick's effects never interleave with the next.
    """

    def __init__(self) -> None:
        self._subscribers: dict[Signal, list[_Handler]] = {s: [] for s in Signal}
        self._queue: list[tuple[Signal, dict[str, Any]]] = []

    def subscribe(self, signal: Signal, handler: _Handler) -> None:
        self._subscribers[Signal(signal)].append(handler)

    def publish(self, signal: Signal, **data: Any) -> None:
        self._queue.append((Signal(signal), data))

    def flush(self) -> None:
        batch, self._queue = self._queue, []
        for signal, data in batch:
            for handler in self._subscribers[signal]:
                handler(signal, data)
