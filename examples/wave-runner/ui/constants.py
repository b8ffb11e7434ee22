"""Layout, color, and rendering constants."""
from __future__ import annotations

from wave_grid import COLS, ROWS

# Layout
CELL_SIZE = 32
CELL_GAP = 2
GRID_W = COLS * CELL_SIZE
GRID_H = ROWS * CELL_SIZE
SIDEBAR_W = 220
LOG_H = 90
SCREEN_W = GRID_W + SIDEBAR_W
SCREEN_H = GRID_H + LOG_H
FPS = 60

# Board colors
COLOR_CELL_OFF = (30, 30, 42)
COLOR_TARGET = (255, 255, 255)
COLOR_TARGET_DIM = (150, 150, 160)
COLOR_SHIELD_RING = (90, 200, 255)

# UI colors
COLOR_BG = (20, 20, 30)
COLOR_SIDEBAR_BG = (25, 25, 35)
COLOR_LOG_BG = (18, 18, 25)
COLOR_DIVIDER = (50, 50, 60)
COLOR_TEXT = (200, 200, 200)
COLOR_TEXT_DIM = (130, 130, 140)
COLOR_LIFE = (220, 60, 80)
COLOR_BAR_BG = (40, 40, 50)

# Event log colors
LOG_COLORS: dict[str, tuple[int, int, int]] = {
    "hit": (100, 220, 100),
    "miss": (220, 60, 60),
    "expired": (220, 140, 60),
    "level_up": (255, 215, 0),
    "pattern": (180, 120, 255),
    "shield": (90, 200, 255),
    "game_over": (255, 80, 80),
    "default": (170, 170, 170),
}


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """'#RRGGBB' -> (r, g, b)."""
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def cell_at(mx: int, my: int) -> tuple[int, int] | None:
    """Map a mouse position to (row, col), or None outside the board."""
    if not (0 <= mx < GRID_W and 0 <= my < GRID_H):
        return None
    return my // CELL_SIZE, mx // CELL_SIZE
