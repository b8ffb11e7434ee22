"""Sidebar panel - score, level, lives, multipliers and wave info."""
from __future__ import annotations

import pygame

from ui.constants import (
    COLOR_BAR_BG,
    COLOR_DIVIDER,
    COLOR_LIFE,
    COLOR_SHIELD_RING,
    COLOR_SIDEBAR_BG,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    GRID_W,
    SIDEBAR_W,
    hex_to_rgb,
)
from wave_runner import Snapshot


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    snap: Snapshot,
    shield_left_ms: float | None,
    shield_total_ms: float,
) -> None:
    x0 = GRID_W
    h = surface.get_height()
    pygame.draw.rect(surface, COLOR_SIDEBAR_BG, (x0, 0, SIDEBAR_W, h))
    pygame.draw.line(surface, COLOR_DIVIDER, (x0, 0), (x0, h))

    pad = x0 + 10
    y = 10

    _draw_text(surface, font, f"Score: {snap.score}", pad, y, COLOR_TEXT)
    y += 18
    _draw_text(surface, font, f"Best:  {snap.high_score}", pad, y, COLOR_TEXT_DIM)
    y += 26

    _draw_text(surface, font, f"Level: {snap.level}", pad, y, COLOR_TEXT)
    y += 18
    _draw_text(surface, font, f"Combo: {snap.combo}", pad, y, COLOR_TEXT)
    y += 18
    _draw_text(surface, font, f"Mult:  x{snap.points_multiplier:g}", pad, y, COLOR_TEXT)
    y += 26

    _draw_text(surface, font, "Lives:", pad, y, COLOR_TEXT)
    for i in range(snap.lives):
        pygame.draw.circle(surface, COLOR_LIFE, (pad + 70 + i * 18, y + 7), 6)
    y += 26

    pygame.draw.line(surface, COLOR_DIVIDER, (pad, y), (x0 + SIDEBAR_W - 10, y))
    y += 10

    _draw_text(surface, font, f"Pattern:    {snap.pattern.value}", pad, y, COLOR_TEXT)
    y += 18
    _draw_text(surface, font, f"Direction:  {snap.direction_label}", pad, y, COLOR_TEXT)
    y += 18
    _draw_text(surface, font, f"Speed:      {snap.speed_percent}%", pad, y, COLOR_TEXT)
    y += 18
    _draw_text(surface, font, f"Difficulty: x{snap.difficulty:g}", pad, y, COLOR_TEXT)
    y += 18
    _draw_text(surface, font, "Color:", pad, y, COLOR_TEXT)
    pygame.draw.rect(surface, hex_to_rgb(snap.color), (pad + 96, y + 1, 40, 12))
    y += 26

    pygame.draw.line(surface, COLOR_DIVIDER, (pad, y), (x0 + SIDEBAR_W - 10, y))
    y += 10

    if snap.power_up_active:
        _draw_text(surface, font, "SHIELD", pad, y, COLOR_SHIELD_RING)
        y += 16
        if shield_left_ms is not None:
            _draw_bar(surface, pad, y, SIDEBAR_W - 20, 8,
                      shield_left_ms / shield_total_ms, COLOR_SHIELD_RING)
        y += 16
    else:
        _draw_text(surface, font, "Shield: off", pad, y, COLOR_TEXT_DIM)
        y += 32

    y += 6
    for line in ("[Space] start / pause", "[R] reset", "[Esc] quit"):
        _draw_text(surface, font, line, pad, y, COLOR_TEXT_DIM)
        y += 16


def _draw_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    x: int,
    y: int,
    color: tuple[int, int, int],
) -> None:
    rendered = font.render(text, True, color)
    surface.blit(rendered, (x, y))


def _draw_bar(
    surface: pygame.Surface,
    x: int, y: int, w: int, h: int,
    fraction: float,
    color: tuple[int, int, int],
) -> None:
    fraction = max(0.0, min(1.0, fraction))
    pygame.draw.rect(surface, COLOR_BAR_BG, (x, y, w, h))
    if fraction > 0:
        pygame.draw.rect(surface, color, (x, y, int(w * fraction), h))
