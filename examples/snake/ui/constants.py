"""Layout, color, and rendering constants."""
from __future__ import annotations

# Layout
CANVAS_PX = 400
HUD_H = 48
FPS = 60


def compute_layout(grid_size: int) -> dict[str, int]:
    """Fit the grid into CANVAS_PX and size the window around it."""
    tile_size = max(8, CANVAS_PX // grid_size)
    grid_px = tile_size * grid_size
    return {
        "tile_size": tile_size,
        "grid_px": grid_px,
        "screen_w": grid_px,
        "screen_h": grid_px + HUD_H,
    }


# Board colors
COLOR_BG = (26, 26, 46)
COLOR_GRID = (36, 52, 62)
COLOR_HEAD = (110, 231, 183)
COLOR_BODY = (78, 204, 163)
COLOR_BODY_TAIL = (50, 150, 120)
COLOR_EYE = (26, 26, 46)
COLOR_FOOD = (233, 69, 96)
COLOR_FOOD_CORE = (255, 107, 107)

# UI colors
COLOR_HUD_BG = (22, 33, 62)
COLOR_TEXT = (220, 220, 220)
COLOR_ACCENT = (78, 204, 163)
COLOR_ALERT = (233, 69, 96)
