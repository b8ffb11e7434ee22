"""Sweep - the scalar position that drives the wave across the columns."""
from __future__ import annotations

from dataclasses import dataclass

from wave_grid.grid import COLS


@dataclass
class Sweep:
    """Position in [0, cols) plus a direction that flips on every wrap."""

    cols: int = COLS
    position: int = 0
    direction: int = 1

    def __post_init__(self) -> None:
        if self.cols <= 0:
            raise ValueError(f"cols must be positive, got {self.cols}")
        if self.direction not in (1, -1):
            raise ValueError(f"direction must be +1 or -1, got {self.direction}")
        self.position %= self.cols

    def advance(self) -> bool:
        """Step one column. Returns True when the position wrapped to 0."""
        self.position = (self.position + 1) % self.cols
        if self.position == 0:
            self.direction = -self.direction
            return True
        return False

    def reset(self) -> None:
        self.position = 0
        self.direction = 1
