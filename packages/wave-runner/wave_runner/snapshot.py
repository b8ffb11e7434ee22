"""Render model handed to the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wave_grid import WavePattern

from wave_runner.phases import GamePhase
from wave_runner.targets import TargetCell


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs for one frame. Never mutated after creation."""

    grid: tuple[tuple[bool, ...], ...]
    target: TargetCell | None
    score: int
    high_score: int
    level: int
    combo: int
    lives: int
    game_over: bool
    pattern: WavePattern
    speed_ms: float
    difficulty: float
    direction: int
    power_up_active: bool
    phase: GamePhase
    color_index: int
    color: str
    points_multiplier: float
    speed_percent: int

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def is_lit(self, row: int, col: int) -> bool:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            return False
        return self.grid[row][col]

    def is_target(self, row: int, col: int) -> bool:
        return self.target is not None and (self.target.row, self.target.col) == (row, col)

    @property
    def direction_label(self) -> str:
        return "Right" if self.direction == 1 else "Left"

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form (lists, str enums, no dataclasses)."""
        return {
            "grid": [list(row) for row in self.grid],
            "target": None if self.target is None else [self.target.row, self.target.col],
            "score": self.score,
            "high_score": self.high_score,
            "level": self.level,
            "combo": self.combo,
            "lives": self.lives,
            "game_over": self.game_over,
            "pattern": self.pattern.value,
            "speed_ms": self.speed_ms,
            "difficulty": self.difficulty,
            "direction": self.direction,
            "power_up_active": self.power_up_active,
            "phase": self.phase.value,
            "color_index": self.color_index,
            "color": self.color,
            "points_multiplier": self.points_multiplier,
            "speed_percent": self.speed_percent,
        }
