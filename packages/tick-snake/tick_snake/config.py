"""Game configuration dataclass and validation."""
from __future__ import annotations

from dataclasses import dataclass

from tick_snake.types import ConfigError, Direction, Position

GRID_SIZE = 20


@dataclass(frozen=True)
class SnakeConfig:
    """Immutable configuration for one game.

    Attributes:
        grid_size: Width and height of the square grid, in cells.
        initial_speed: Starting tick interval in milliseconds.
        min_speed: Floor for the tick interval; speed never drops past it.
        speed_step: Milliseconds removed from the interval per food eaten.
        food_score: Points awarded per food eaten.
        snake_length: Length of the spawned snake when ``snake`` is None.
        initial_direction: Direction applied on the first tick.
        snake: Explicit starting segments, head first. Derived when None.
    """

    grid_size: int = GRID_SIZE
    initial_speed: int = 150
    min_speed: int = 80
    speed_step: int = 2
    food_score: int = 10
    snake_length: int = 3
    initial_direction: Direction = Direction.RIGHT
    snake: tuple[Position, ...] | None = None


def initial_snake(config: SnakeConfig) -> tuple[Position, ...]:
    """Return the spawn segments for *config*, head first.

    Without an explicit ``snake`` the spawn is a horizontal line facing right,
    head at ``(max(length - 1, grid_size // 4), grid_size // 2)``.
    """
    if config.snake is not None:
        return tuple(config.snake)
    length = config.snake_length
    head_x = max(length - 1, config.grid_size // 4)
    y = config.grid_size // 2
    return tuple(Position(head_x - i, y) for i in range(length))


def validate_config(config: SnakeConfig) -> tuple[Position, ...]:
    """Check *config* and return its spawn segments. Raises ConfigError."""
    size = config.grid_size
    if size <= 0:
        raise ConfigError(f"grid_size must be positive, got {size}")
    if config.initial_speed <= 0:
        raise ConfigError(
            f"initial_speed must be positive, got {config.initial_speed}"
        )
    if config.min_speed <= 0:
        raise ConfigError(f"min_speed must be positive, got {config.min_speed}")
    if config.initial_speed < config.min_speed:
        raise ConfigError(
            f"initial_speed {config.initial_speed} is below "
            f"min_speed {config.min_speed}"
        )
    if config.speed_step < 0:
        raise ConfigError(f"speed_step must be >= 0, got {config.speed_step}")
    if config.food_score < 0:
        raise ConfigError(f"food_score must be >= 0, got {config.food_score}")
    if config.snake is None and config.snake_length < 1:
        raise ConfigError(
            f"snake_length must be >= 1, got {config.snake_length}"
        )

    snake = initial_snake(config)
    if not snake:
        raise ConfigError("snake must have at least one segment")
    if len(snake) > size * size:
        raise ConfigError(
            f"snake of length {len(snake)} does not fit a {size}x{size} grid"
        )
    for seg in snake:
        if not (0 <= seg.x < size and 0 <= seg.y < size):
            raise ConfigError(
                f"({seg.x}, {seg.y}) out of bounds for {size}x{size} grid"
            )
    if len(set(snake)) != len(snake):
        raise ConfigError("snake segments must not overlap")
    return snake
