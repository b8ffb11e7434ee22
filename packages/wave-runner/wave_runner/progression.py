"""Score, combo, level, lives and difficulty progression.

All progression lives in one ``ProgressionState``. Each game event has
exactly one transition function that applies the whole event at once and
returns a frozen record describing what changed:

- ``register_hit``    scores a hit and levels up at most once
- ``register_miss``   a click on anything but a lit target
- ``register_expiry`` a target that timed out without being hit
- ``level_up``        difficulty, speed and pattern changes
- ``restart``         back to level 1, keeping the high score

Lives never go below zero; the event that takes the last life flips
``game_over`` and folds the score into ``high_score``. Every transition
refuses to run once the game is over.
"""
from __future__ import annotations

import random
from dataclasses import dataclass

from wave_grid import WavePattern

from wave_runner.config import GameConfig


class RunOverError(RuntimeError):
    """Raised when a transition is applied after the run has ended."""


@dataclass
class ProgressionState:
    score: int = 0
    high_score: int = 0
    combo: int = 0
    level: int = 1
    lives: int = 3
    difficulty: float = 1.0
    speed_ms: float = 100.0
    pattern: WavePattern = WavePattern.NORMAL
    shield: bool = False
    game_over: bool = False

    @classmethod
    def fresh(cls, config: GameConfig, high_score: int = 0) -> ProgressionState:
        return cls(
            high_score=high_score,
            lives=config.initial_lives,
            speed_ms=config.initial_speed_ms,
        )


@dataclass(frozen=True)
class LevelUp:
    level: int
    difficulty: float
    speed_ms: float
    pattern: WavePattern
    difficulty_changed: bool
    pattern_changed: bool


@dataclass(frozen=True)
class Hit:
    points: int
    score: int
    combo: int
    level_up: LevelUp | None


@dataclass(frozen=True)
class Miss:
    expired: bool
    life_lost: bool
    lives: int
    game_over: bool


def combo_multiplier(state: ProgressionState, config: GameConfig) -> int:
    return min(state.combo + 1, config.max_combo_multiplier)


def points_multiplier(state: ProgressionState, config: GameConfig) -> float:
    """Multiplier the next hit would score with (shown in the sidebar)."""
    return combo_multiplier(state, config) * state.level * state.difficulty


def _ensure_running(state: ProgressionState) -> None:
    if state.game_over:
        raise RunOverError("the run is over; restart before applying events")


def _lose_life(state: ProgressionState) -> bool:
    state.combo = 0
    state.lives = max(state.lives - 1, 0)
    if state.lives <= 0 and not state.game_over:
        state.game_over = True
        state.high_score = max(state.high_score, state.score)
    return state.game_over


def level_up(state: ProgressionState, config: GameConfig, rng: random.Random) -> LevelUp:
    _ensure_running(state)
    state.level += 1
    difficulty_changed = state.level % config.difficulty_every_levels == 0
    if difficulty_changed:
        state.difficulty = min(state.difficulty + config.difficulty_step, config.max_difficulty)
        state.speed_ms = max(state.speed_ms * config.speed_factor, config.min_speed_ms)
    pattern_changed = state.level % config.pattern_every_levels == 0
    if pattern_changed:
        # Any pattern, including the current one.
        state.pattern = rng.choice(list(WavePattern))
    return LevelUp(
        level=state.level,
        difficulty=state.difficulty,
        speed_ms=state.speed_ms,
        pattern=state.pattern,
        difficulty_changed=difficulty_changed,
        pattern_changed=pattern_changed,
    )


def register_hit(state: ProgressionState, config: GameConfig, rng: random.Random) -> Hit:
    _ensure_running(state)
    points = round(config.base_points * points_multiplier(state, config))
    state.score += points
    state.combo += 1
    leveled = None
    # One threshold check per hit, even if the points cross several.
    if state.score >= state.level * config.points_per_level:
        leveled = level_up(state, config, rng)
    return Hit(points=points, score=state.score, combo=state.combo, level_up=leveled)


def register_miss(state: ProgressionState) -> Miss:
    _ensure_running(state)
    state.combo = 0
    if state.shield:
        return Miss(expired=False, life_lost=False, lives=state.lives, game_over=False)
    over = _lose_life(state)
    return Miss(expired=False, life_lost=True, lives=state.lives, game_over=over)


def register_expiry(state: ProgressionState) -> Miss | None:
    """Timed-out target. Returns None when the shield absorbs it."""
    _ensure_running(state)
    if state.shield:
        return None
    over = _lose_life(state)
    return Miss(expired=True, life_lost=True, lives=state.lives, game_over=over)


def restart(state: ProgressionState, config: GameConfig) -> None:
    fresh = ProgressionState.fresh(config, high_score=state.high_score)
    for name, value in vars(fresh).items():
        setattr(state, name, value)
