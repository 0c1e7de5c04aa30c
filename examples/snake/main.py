"""Snake — tick-snake pygame demo.

Controls:
  Arrows / WASD  Steer
  Space          Pause / Resume
  Enter          Start / Restart
  Escape         Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_snake import (
    HighScoreStore,
    Scheduler,
    SnakeConfig,
    SnakeGame,
    Status,
    map_key_to_action,
    map_key_to_direction,
)
from ui.constants import COLOR_BG, FPS, compute_layout
from ui.hud import draw_game_over_overlay, draw_hud, draw_pause_overlay, draw_ready_overlay
from ui.renderer import draw_board, draw_food, draw_snake


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Snake — tick-snake pygame demo")
    p.add_argument("--grid-size", type=int, default=20, help="Grid width/height (8-40, default: 20)")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--high-score", type=str, default="snake_high_score.json",
                   metavar="FILE", help="High score file (default: snake_high_score.json)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log game events")
    args = p.parse_args()
    args.grid_size = max(8, min(40, args.grid_size))
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    layout = compute_layout(args.grid_size)
    tile_size = layout["tile_size"]
    grid_px = layout["grid_px"]

    game = SnakeGame(SnakeConfig(grid_size=args.grid_size), seed=args.seed)
    store = HighScoreStore(args.high_score)
    store.subscribe(game.bus)
    scheduler = Scheduler(game)

    pygame.init()
    screen = pygame.display.set_mode((layout["screen_w"], layout["screen_h"]))
    pygame.display.set_caption("Snake — tick-snake demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    continue
                key = pygame.key.name(event.key)
                direction = map_key_to_direction(key)
                if direction is not None:
                    game.steer(direction)
                    continue
                action = map_key_to_action(key)
                if action == "pause":
                    game.toggle_pause()
                elif action == "start" and game.status in (Status.READY, Status.OVER):
                    game.start()
                    scheduler.reset()

        # --- Tick at the game's current speed ---
        scheduler.advance(dt)

        # --- Render ---
        screen.fill(COLOR_BG)
        session = game.session
        draw_board(screen, args.grid_size, tile_size)
        draw_food(screen, session, tile_size, pygame.time.get_ticks())
        draw_snake(screen, session, tile_size)

        if session.status is Status.READY:
            draw_ready_overlay(screen, font, grid_px)
        elif session.status is Status.PAUSED:
            draw_pause_overlay(screen, font, grid_px)
        elif session.is_over:
            draw_game_over_overlay(screen, font, session.score, grid_px)

        draw_hud(screen, font, session, store.high_score, scheduler.tick_number, grid_px)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
