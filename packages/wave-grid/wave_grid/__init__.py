"""wave-grid - Grid model and wave pattern generation."""
from __future__ import annotations

from wave_grid.grid import COLS, ROWS, GridState
from wave_grid.patterns import WAVE_WIDTH, WavePattern, generate
from wave_grid.sweep import Sweep

__all__ = [
    "ROWS",
    "COLS",
    "WAVE_WIDTH",
    "GridState",
    "WavePattern",
    "Sweep",
    "generate",
]
