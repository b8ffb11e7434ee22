"""GridState - boolean lit/unlit matrix rebuilt every wave tick."""
from __future__ import annotations

ROWS = 15
COLS = 20


class GridState:
    def __init__(self, rows: int = ROWS, cols: int = COLS) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid must be at least 1x1, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._cells = [[False] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: list[list[bool]] | tuple[tuple[bool, ...], ...]) -> GridState:
        grid = cls(len(rows), len(rows[0]) if rows else 0)
        for r, row in enumerate(rows):
            for c, lit in enumerate(row):
                if lit:
                    grid.light(r, c)
        return grid

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def light(self, row: int, col: int) -> bool:
        """Mark a cell lit. Out-of-range writes are skipped, not raised."""
        if not self.in_bounds(row, col):
            return False
        self._cells[row][col] = True
        return True

    def is_lit(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            return False
        return self._cells[row][col]

    def lit_columns(self, row: int) -> set[int]:
        return {c for c, lit in enumerate(self._cells[row]) if lit}

    def lit_count(self) -> int:
        return sum(sum(row) for row in self._cells)

    def lit_cells(self) -> list[tuple[int, int]]:
        return [
            (r, c)
            for r, row in enumerate(self._cells)
            for c, lit in enumerate(row)
            if lit
        ]

    def to_rows(self) -> tuple[tuple[bool, ...], ...]:
        """Immutable copy for render snapshots."""
        return tuple(tuple(row) for row in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridState):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"GridState({self._rows}x{self._cols}, lit={self.lit_count()})"
