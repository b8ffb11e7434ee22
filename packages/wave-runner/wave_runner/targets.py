"""Target cell lifecycle."""
from __future__ import annotations

import random
from dataclasses import dataclass

from wave_grid import COLS, ROWS


@dataclass(frozen=True, slots=True)
class TargetCell:
    row: int
    col: int


class TargetManager:
    """Owns the single active target.

    Spawns are uniform over the whole grid and may repeat the previous
    coordinates.
    """

    def __init__(self, rng: random.Random, rows: int = ROWS, cols: int = COLS) -> None:
        self._rng = rng
        self._rows = rows
        self._cols = cols
        self._current: TargetCell | None = None
        self._spawned = 0

    @property
    def current(self) -> TargetCell | None:
        return self._current

    @property
    def spawned(self) -> int:
        return self._spawned

    def spawn(self) -> TargetCell:
        row = self._rng.randrange(self._rows)
        col = self._rng.randrange(self._cols)
        self._current = TargetCell(row, col)
        self._spawned += 1
        return self._current

    def matches(self, row: int, col: int) -> bool:
        return self._current is not None and (row, col) == (self._current.row, self._current.col)

    def clear(self) -> None:
        self._current = None
