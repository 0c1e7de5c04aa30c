"""HighScoreStore - persistence adapter for the best score."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from tick_snake.signals import Signal, SignalBus

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Keeps the best score seen, optionally backed by a JSON file.

    The file holds ``{"high_score": N}``. A missing file reads as 0; an
    unreadable one is logged and also reads as 0. Without a path the store
    lives in memory only.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._high_score = self.load()

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def path(self) -> Path | None:
        return self._path

    def load(self) -> int:
        if self._path is None or not self._path.exists():
            return 0
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            value = int(data["high_score"])
        except (OSError, ValueError, OverflowError, KeyError, TypeError) as exc:
            logger.warning("ignoring unreadable high score file %s: %s", self._path, exc)
            return 0
        return max(value, 0)

    def record(self, score: int) -> bool:
        """Store *score* if it beats the current best. Returns True if stored."""
        if score <= self._high_score:
            return False
        self._high_score = score
        if self._path is not None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps({"high_score": score}), encoding="utf-8",
            )
            logger.debug("new high score %d written to %s", score, self._path)
        return True

    def subscribe(self, bus: SignalBus) -> None:
        """Record scores carried by ``food_eaten`` and ``game_over`` signals."""
        bus.subscribe(Signal.FOOD_EATEN, self._on_score)
        bus.subscribe(Signal.GAME_OVER, self._on_score)

    def _on_score(self, signal: Signal, data: dict[str, Any]) -> None:
        self.record(data["score"])
