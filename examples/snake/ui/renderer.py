"""Board, snake and food rendering."""
from __future__ import annotations

import math

import pygame

from tick_snake import Direction, GameSession
from ui.constants import (
    COLOR_BG, COLOR_BODY, COLOR_BODY_TAIL, COLOR_EYE, COLOR_FOOD,
    COLOR_FOOD_CORE, COLOR_GRID, COLOR_HEAD,
)


def draw_board(surface: pygame.Surface, grid_size: int, tile_size: int) -> None:
    """Draw the background and faint grid lines."""
    grid_px = grid_size * tile_size
    pygame.draw.rect(surface, COLOR_BG, (0, 0, grid_px, grid_px))
    for i in range(grid_size + 1):
        pygame.draw.line(surface, COLOR_GRID, (i * tile_size, 0), (i * tile_size, grid_px))
        pygame.draw.line(surface, COLOR_GRID, (0, i * tile_size), (grid_px, i * tile_size))


def _blend(a: tuple[int, int, int], b: tuple[int, int, int], t: float) -> tuple[int, int, int]:
    return (
        int(a[0] + (b[0] - a[0]) * t),
        int(a[1] + (b[1] - a[1]) * t),
        int(a[2] + (b[2] - a[2]) * t),
    )


def draw_snake(surface: pygame.Surface, session: GameSession, tile_size: int) -> None:
    """Draw body segments fading toward the tail, then the head with eyes."""
    n = len(session.snake)
    for i, seg in reversed(list(enumerate(session.snake))):
        rect = pygame.Rect(seg.x * tile_size + 1, seg.y * tile_size + 1, tile_size - 2, tile_size - 2)
        if i == 0:
            color = COLOR_HEAD
        else:
            color = _blend(COLOR_BODY, COLOR_BODY_TAIL, i / n)
        pygame.draw.rect(surface, color, rect, border_radius=4)

    _draw_eyes(surface, session, tile_size)


def _draw_eyes(surface: pygame.Surface, session: GameSession, tile_size: int) -> None:
    head = session.head
    x0, y0 = head.x * tile_size, head.y * tile_size
    near = tile_size // 4
    far = tile_size - near
    eye_r = max(1, tile_size // 6)

    # Eyes sit on the leading edge of the head.
    offsets = {
        Direction.RIGHT: ((far, near), (far, far)),
        Direction.LEFT: ((near, near), (near, far)),
        Direction.UP: ((near, near), (far, near)),
        Direction.DOWN: ((near, far), (far, far)),
    }
    for dx, dy in offsets[session.direction]:
        pygame.draw.circle(surface, COLOR_EYE, (x0 + dx, y0 + dy), eye_r)


def draw_food(surface: pygame.Surface, session: GameSession, tile_size: int, now_ms: int) -> None:
    """Draw the food as a pulsing circle."""
    food = session.food
    if food is None:
        return
    pulse = math.sin(now_ms / 200) * 2 + 2
    center = (food.x * tile_size + tile_size // 2, food.y * tile_size + tile_size // 2)
    radius = max(2, int(tile_size / 2 - 2 + pulse / 2))
    pygame.draw.circle(surface, COLOR_FOOD, center, radius)
    pygame.draw.circle(surface, COLOR_FOOD_CORE, center, max(1, radius // 2))
