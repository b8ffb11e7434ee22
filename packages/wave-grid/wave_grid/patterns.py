"""Wave patterns - turn a sweep position into the lit cells of one tick.

Every pattern paints into a freshly zeroed grid, so nothing carries over
between ticks. Column indices use Python modulo, which means the mirrored
formulas wrap around the edge instead of producing negative indices.

ZIGZAG and CHAOS shift each row by a fractional offset before flooring.
Writes that land outside the grid after flooring are skipped.
"""
from __future__ import annotations

import math
import random
from enum import Enum
from typing import Callable

from wave_grid.grid import COLS, ROWS, GridState

WAVE_WIDTH = 6
ZIGZAG_FREQUENCY = 0.5
ZIGZAG_AMPLITUDE = 3.0
CHAOS_SPREAD = 2.0


class WavePattern(str, Enum):
    NORMAL = "normal"
    SPLIT = "split"
    ZIGZAG = "zigzag"
    CHAOS = "chaos"


_Painter = Callable[[GridState, int, int, int, random.Random], None]


def _paint_normal(grid: GridState, position: int, direction: int, width: int,
                  rng: random.Random) -> None:
    cols = grid.cols
    for row in range(grid.rows):
        for j in range(width):
            if direction == 1:
                col = (position + j) % cols
            else:
                col = ((cols - 1) - (position + j)) % cols
            grid.light(row, col)


def _paint_split(grid: GridState, position: int, direction: int, width: int,
                 rng: random.Random) -> None:
    cols = grid.cols
    for row in range(grid.rows):
        for j in range(width):
            grid.light(row, (position + j) % cols)
            grid.light(row, ((cols - 1) - (position + j)) % cols)


def _paint_offset_rows(grid: GridState, position: int, width: int,
                       offsets: list[float]) -> None:
    cols = grid.cols
    for row, offset in enumerate(offsets):
        for j in range(width):
            col = math.floor((position + j + offset + cols) % cols)
            if 0 <= col < cols:
                grid.light(row, col)


def _paint_zigzag(grid: GridState, position: int, direction: int, width: int,
                  rng: random.Random) -> None:
    offsets = [
        math.sin(row * ZIGZAG_FREQUENCY) * ZIGZAG_AMPLITUDE
        for row in range(grid.rows)
    ]
    _paint_offset_rows(grid, position, width, offsets)


def _paint_chaos(grid: GridState, position: int, direction: int, width: int,
                 rng: random.Random) -> None:
    # One fresh draw per row per call; never reproducible without a seeded rng.
    offsets = [
        rng.random() * (2 * CHAOS_SPREAD) - CHAOS_SPREAD
        for _ in range(grid.rows)
    ]
    _paint_offset_rows(grid, position, width, offsets)


_PAINTERS: dict[WavePattern, _Painter] = {
    WavePattern.NORMAL: _paint_normal,
    WavePattern.SPLIT: _paint_split,
    WavePattern.ZIGZAG: _paint_zigzag,
    WavePattern.CHAOS: _paint_chaos,
}


def generate(
    position: int,
    pattern: WavePattern,
    direction: int = 1,
    rows: int = ROWS,
    cols: int = COLS,
    wave_width: int = WAVE_WIDTH,
    rng: random.Random | None = None,
) -> GridState:
    """Build the grid for one wave tick.

    ``direction`` is +1 or -1 and only affects NORMAL. ``rng`` is only
    consumed by CHAOS; an unseeded generator is created when omitted.
    """
    if direction not in (1, -1):
        raise ValueError(f"direction must be +1 or -1, got {direction}")
    if wave_width < 0:
        raise ValueError(f"wave_width must not be negative, got {wave_width}")
    grid = GridState(rows, cols)
    painter = _PAINTERS[WavePattern(pattern)]
    painter(grid, position, direction, wave_width, rng if rng is not None else random.Random())
    return grid
