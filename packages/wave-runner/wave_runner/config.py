"""Game tuning configuration."""
from __future__ import annotations

from dataclasses import dataclass

PALETTE: tuple[str, ...] = (
    "#8A2BE2",
    "#FF1493",
    "#4169E1",
    "#32CD32",
    "#FFD700",
)


@dataclass(frozen=True)
class GameConfig:
    """Immutable tuning knobs for one game engine.

    Grid size and wave width live in ``wave_grid`` as module constants.

    Attributes:
        initial_lives: Lives at the start of every run.
        initial_speed_ms: Wave tick interval at level 1.
        min_speed_ms: Floor for the wave tick interval.
        speed_factor: Interval multiplier applied on difficulty level-ups.
        difficulty_step: Added to the difficulty multiplier on difficulty level-ups.
        max_difficulty: Cap for the difficulty multiplier.
        base_points: Points for a hit before multipliers.
        max_combo_multiplier: Cap for the combo multiplier.
        points_per_level: Level ``n`` ends once score reaches ``n * points_per_level``.
        difficulty_every_levels: Levels divisible by this raise difficulty and speed.
        pattern_every_levels: Levels divisible by this roll a new wave pattern.
        color_interval_ms: Palette cycle period.
        target_timeout_ms: Target lifetime at difficulty 1.0; divided by difficulty.
        power_up_roll_ms: Period of the shield roll.
        power_up_chance: Probability that a roll activates the shield.
        shield_ms: How long the shield stays up.
    """

    initial_lives: int = 3
    initial_speed_ms: float = 100.0
    min_speed_ms: float = 50.0
    speed_factor: float = 0.9
    difficulty_step: float = 0.5
    max_difficulty: float = 3.0
    base_points: int = 100
    max_combo_multiplier: int = 5
    points_per_level: int = 1000
    difficulty_every_levels: int = 3
    pattern_every_levels: int = 5
    color_interval_ms: float = 1500.0
    target_timeout_ms: float = 3000.0
    power_up_roll_ms: float = 15000.0
    power_up_chance: float = 0.1
    shield_ms: float = 5000.0

    def __post_init__(self) -> None:
        if self.initial_lives <= 0:
            raise ValueError("initial_lives must be positive")
        if not 0 < self.min_speed_ms <= self.initial_speed_ms:
            raise ValueError("need 0 < min_speed_ms <= initial_speed_ms")
        for name in ("color_interval_ms", "target_timeout_ms", "power_up_roll_ms", "shield_ms"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.max_difficulty < 1.0:
            raise ValueError("max_difficulty must be at least 1.0")
        if not 0.0 <= self.power_up_chance <= 1.0:
            raise ValueError("power_up_chance must be within [0, 1]")
        if self.difficulty_every_levels <= 0 or self.pattern_every_levels <= 0:
            raise ValueError("level cadences must be positive")
