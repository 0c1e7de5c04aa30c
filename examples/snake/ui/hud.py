"""HUD strip and board overlays."""
from __future__ import annotations

import pygame

from tick_snake import GameSession
from ui.constants import COLOR_ACCENT, COLOR_ALERT, COLOR_HUD_BG, COLOR_TEXT, HUD_H


def draw_hud(
    surface: pygame.Surface,
    font: pygame.font.Font,
    session: GameSession,
    high_score: int,
    tick_number: int,
    grid_px: int,
) -> None:
    """Draw score, best score, speed and tick count below the board."""
    pygame.draw.rect(surface, COLOR_HUD_BG, (0, grid_px, grid_px, HUD_H))
    lines = [
        f"Score: {session.score}   Best: {high_score}   "
        f"Speed: {session.speed}ms   Tick: {tick_number}",
        "Arrows/WASD=Move  Space=Pause  Enter=Start  Esc=Quit",
    ]
    for i, line in enumerate(lines):
        text = font.render(line, True, COLOR_TEXT)
        surface.blit(text, (8, grid_px + 6 + i * 18))


def _overlay(surface: pygame.Surface, grid_px: int, alpha: int) -> None:
    shade = pygame.Surface((grid_px, grid_px), pygame.SRCALPHA)
    shade.fill((0, 0, 0, alpha))
    surface.blit(shade, (0, 0))


def _centered(surface: pygame.Surface, text: pygame.Surface, grid_px: int, dy: int) -> None:
    rect = text.get_rect(center=(grid_px // 2, grid_px // 2 + dy))
    surface.blit(text, rect)


def draw_ready_overlay(surface: pygame.Surface, font: pygame.font.Font, grid_px: int) -> None:
    _overlay(surface, grid_px, 150)
    big = pygame.font.SysFont("monospace", 32, bold=True)
    _centered(surface, big.render("SNAKE", True, COLOR_ACCENT), grid_px, -20)
    _centered(surface, font.render("Press Enter to start", True, COLOR_TEXT), grid_px, 20)


def draw_pause_overlay(surface: pygame.Surface, font: pygame.font.Font, grid_px: int) -> None:
    _overlay(surface, grid_px, 180)
    big = pygame.font.SysFont("monospace", 32, bold=True)
    _centered(surface, big.render("PAUSED", True, COLOR_ACCENT), grid_px, 0)
    _centered(surface, font.render("Space to resume", True, COLOR_TEXT), grid_px, 30)


def draw_game_over_overlay(
    surface: pygame.Surface, font: pygame.font.Font, score: int, grid_px: int,
) -> None:
    _overlay(surface, grid_px, 200)
    big = pygame.font.SysFont("monospace", 32, bold=True)
    _centered(surface, big.render("GAME OVER", True, COLOR_ALERT), grid_px, -30)
    _centered(surface, font.render(f"Score: {score}", True, COLOR_TEXT), grid_px, 10)
    _centered(surface, font.render("Press Enter to play again", True, COLOR_ACCENT), grid_px, 40)
