"""Board rendering - lit wave cells and the target."""
from __future__ import annotations

import pygame

from ui.constants import (
    CELL_GAP,
    CELL_SIZE,
    COLOR_CELL_OFF,
    COLOR_SHIELD_RING,
    COLOR_TARGET,
    COLOR_TARGET_DIM,
    hex_to_rgb,
)
from wave_runner import Snapshot


def draw_board(surface: pygame.Surface, snap: Snapshot) -> None:
    """Draw every cell, lit ones in the current palette color."""
    lit_color = hex_to_rgb(snap.color)
    for row in range(snap.rows):
        for col in range(snap.cols):
            color = lit_color if snap.is_lit(row, col) else COLOR_CELL_OFF
            pygame.draw.rect(surface, color, _cell_rect(row, col), border_radius=4)


def draw_target(surface: pygame.Surface, snap: Snapshot, blink_on: bool) -> None:
    """Outline the target; solid when the wave covers it, dim otherwise."""
    if snap.target is None:
        return
    row, col = snap.target.row, snap.target.col
    rect = _cell_rect(row, col)
    color = COLOR_TARGET if snap.is_lit(row, col) else COLOR_TARGET_DIM
    width = 3 if blink_on else 2
    pygame.draw.rect(surface, color, rect, width=width, border_radius=4)
    if snap.power_up_active:
        pygame.draw.rect(surface, COLOR_SHIELD_RING, rect.inflate(6, 6), width=2, border_radius=6)


def _cell_rect(row: int, col: int) -> pygame.Rect:
    return pygame.Rect(
        col * CELL_SIZE + CELL_GAP // 2,
        row * CELL_SIZE + CELL_GAP // 2,
        CELL_SIZE - CELL_GAP,
        CELL_SIZE - CELL_GAP,
    )
