"""tick-snake - Grid snake game rules driven one tick at a time."""
from __future__ import annotations

from tick_snake.config import GRID_SIZE, SnakeConfig, initial_snake, validate_config
from tick_snake.engine import TickOutcome, steer, tick
from tick_snake.game import SnakeGame
from tick_snake.highscore import HighScoreStore
from tick_snake.keys import map_key_to_action, map_key_to_direction
from tick_snake.render import render_ascii
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
from tick_snake.scheduler import Scheduler
from tick_snake.session import (
    GameSession,
    begin,
    new_session,
    pause,
    resume,
    start_session,
    toggle_pause,
)
from tick_snake.signals import Signal, SignalBus
from tick_snake.types import ConfigError, Direction, Position, Status

__all__ = [
    "GRID_SIZE",
    "ConfigError",
    "Direction",
    "GameSession",
    "HighScoreStore",
    "Position",
    "Scheduler",
    "Signal",
    "SignalBus",
    "SnakeConfig",
    "SnakeGame",
    "Status",
    "TickOutcome",
    "advance_head",
    "begin",
    "grow_or_move",
    "initial_snake",
    "is_food_collision",
    "is_self_collision",
    "is_valid_direction_change",
    "is_wall_collision",
    "map_key_to_action",
    "map_key_to_direction",
    "new_session",
    "next_speed",
    "pause",
    "place_food",
    "render_ascii",
    "resume",
    "start_session",
    "steer",
    "tick",
    "toggle_pause",
    "validate_config",
]
