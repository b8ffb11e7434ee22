"""wave-runner - Reflex arcade engine: a sweeping wave, one target, a shrinking margin."""
from __future__ import annotations

from loguru import logger

from wave_runner.config import PALETTE, GameConfig
from wave_runner.engine import Outcome, WaveRunner
from wave_runner.phases import GamePhase, PhaseEvent, PhaseMachine
from wave_runner.progression import (
    Hit,
    LevelUp,
    Miss,
    ProgressionState,
    RunOverError,
    level_up,
    points_multiplier,
    register_expiry,
    register_hit,
    register_miss,
    restart,
)
from wave_runner.snapshot import Snapshot
from wave_runner.targets import TargetCell, TargetManager

# Library default: silent until the application opts in with logger.enable("wave_runner").
logger.disable("wave_runner")

__all__ = [
    "WaveRunner",
    "Outcome",
    "GameConfig",
    "PALETTE",
    "GamePhase",
    "PhaseEvent",
    "PhaseMachine",
    "ProgressionState",
    "Hit",
    "Miss",
    "LevelUp",
    "RunOverError",
    "register_hit",
    "register_miss",
    "register_expiry",
    "level_up",
    "restart",
    "points_multiplier",
    "Snapshot",
    "TargetCell",
    "TargetManager",
]
