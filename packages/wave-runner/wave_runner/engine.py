"""WaveRunner - the game engine: timers, input resolution, render snapshots."""
from __future__ import annotations

import dataclasses
import os
import random
from enum import Enum
from typing import Any, Callable

from loguru import logger
from wave_grid import COLS, ROWS, WAVE_WIDTH, GridState, Sweep, generate
from wave_tick import FireContext, Scheduler, SignalBus

from wave_runner.config import PALETTE, GameConfig
from wave_runner.phases import GamePhase, PhaseEvent, PhaseMachine
from wave_runner.progression import (
    Hit,
    LevelUp,
    Miss,
    ProgressionState,
    points_multiplier,
    register_expiry,
    register_hit,
    register_miss,
    restart,
)
from wave_runner.snapshot import Snapshot
from wave_runner.targets import TargetCell, TargetManager

# Scheduler activity names.
WAVE = "wave"
COLOR = "color"
EXPIRY = "expiry"
POWER_UP = "power_up"
SHIELD_END = "shield_end"

PERIODIC_ACTIVITIES = (WAVE, COLOR, EXPIRY, POWER_UP)


class Outcome(str, Enum):
    HIT = "hit"
    MISS = "miss"
    IGNORED = "ignored"


class WaveRunner:
    """Owns one game: progression, sweep, grid, target and the timers driving them.

    Time only moves through ``advance(ms)``. While the phase is RUNNING four
    periodic activities are armed on the scheduler (wave, color, expiry,
    power_up); leaving RUNNING cancels them and entering it arms them again.
    The shield one-shot keeps running through a pause and is cancelled by
    reset and game over.

    Signals published on ``bus`` (delivered at the end of every inbound call
    and every ``advance``): ``frame`` (``snapshot=``), ``phase``, ``hit``,
    ``miss``, ``expired``, ``level_up``, ``pattern_changed``, ``shield``,
    ``game_over``.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        seed: int | None = None,
        rng: random.Random | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._config = config if config is not None else GameConfig()
        if rng is None:
            if seed is None:
                seed = int.from_bytes(os.urandom(8), "big")
            rng = random.Random(seed)
        self._seed = seed
        self._rng = rng
        self._scheduler = scheduler if scheduler is not None else Scheduler()
        self._bus = SignalBus()

        self._state = ProgressionState.fresh(self._config)
        self._sweep = Sweep(COLS)
        self._grid = GridState(ROWS, COLS)
        self._targets = TargetManager(self._rng, ROWS, COLS)
        self._color_index = 0
        self._phases = PhaseMachine(on_transition=self._on_phase_change)

    # --- Read-only views ---

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def seed(self) -> int | None:
        """Seed of the internal RNG, or None when an rng was injected."""
        return self._seed

    @property
    def phase(self) -> GamePhase:
        return self._phases.state

    @property
    def state(self) -> ProgressionState:
        """Copy of the progression state."""
        return dataclasses.replace(self._state)

    @property
    def target(self) -> TargetCell | None:
        return self._targets.current

    @property
    def sweep(self) -> Sweep:
        return dataclasses.replace(self._sweep)

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def bus(self) -> SignalBus:
        return self._bus

    def subscribe(
        self, signal_name: str, handler: Callable[[str, dict[str, Any]], None]
    ) -> Callable[[], None]:
        return self._bus.subscribe(signal_name, handler)

    # --- Inbound ---

    def start(self) -> bool:
        """Begin a run from idle, or resume from pause."""
        return self._apply(PhaseEvent.START)

    def pause(self) -> bool:
        return self._apply(PhaseEvent.PAUSE)

    def toggle(self) -> bool:
        if self._phases.running:
            return self.pause()
        return self.start()

    def reset(self) -> None:
        """Full reinitialization into a fresh running game. Keeps the high score."""
        self._apply(PhaseEvent.RESET)

    def click(self, row: int, col: int) -> Outcome:
        if not self._phases.running or self._targets.current is None:
            return Outcome.IGNORED
        target = self._targets.current
        if self._targets.matches(row, col) and self._grid.is_lit(row, col):
            self._on_hit(register_hit(self._state, self._config, self._rng), target)
            outcome = Outcome.HIT
        else:
            self._on_miss(register_miss(self._state), target, row, col)
            outcome = Outcome.MISS
        self._publish_frame()
        self._bus.flush()
        return outcome

    def advance(self, ms: float) -> int:
        """Let `ms` milliseconds pass. Returns how many timer callbacks fired."""
        fired = self._scheduler.advance(ms)
        self._bus.flush()
        return fired

    def snapshot(self) -> Snapshot:
        st = self._state
        cfg = self._config
        return Snapshot(
            grid=self._grid.to_rows(),
            target=self._targets.current,
            score=st.score,
            high_score=st.high_score,
            level=st.level,
            combo=st.combo,
            lives=st.lives,
            game_over=st.game_over,
            pattern=st.pattern,
            speed_ms=st.speed_ms,
            difficulty=st.difficulty,
            direction=self._sweep.direction,
            power_up_active=st.shield,
            phase=self._phases.state,
            color_index=self._color_index,
            color=PALETTE[self._color_index],
            points_multiplier=points_multiplier(st, cfg),
            speed_percent=round(100 - (st.speed_ms - cfg.min_speed_ms) / 1.5),
        )

    # --- Phase handling ---

    def _apply(self, event: PhaseEvent) -> bool:
        changed = self._phases.fire(event)
        if changed:
            self._publish_frame()
        self._bus.flush()
        return changed

    def _on_phase_change(self, old: GamePhase, new: GamePhase, event: PhaseEvent) -> None:
        logger.info("phase {} -> {} on {}", old.value, new.value, event.value)
        if event is PhaseEvent.RESET:
            self._reinitialize()
        if new is GamePhase.RUNNING:
            self._respawn()
            self._arm_timers()
        else:
            self._disarm_timers()
        if new is GamePhase.GAME_OVER:
            self._end_shield()
            self._targets.clear()
        self._bus.publish("phase", old=old, new=new, event=event)

    def _reinitialize(self) -> None:
        self._scheduler.cancel(SHIELD_END)
        restart(self._state, self._config)
        self._sweep.reset()
        self._grid = GridState(ROWS, COLS)
        self._targets.clear()
        self._color_index = 0

    # --- Timers ---

    def _arm_timers(self) -> None:
        self._arm_wave()
        self._scheduler.every(COLOR, self._config.color_interval_ms, self._on_color_tick)
        self._arm_expiry()
        self._scheduler.every(POWER_UP, self._config.power_up_roll_ms, self._on_power_up_roll)

    def _arm_wave(self) -> None:
        self._scheduler.every(WAVE, self._state.speed_ms, self._on_wave_tick)

    def _arm_expiry(self) -> None:
        timeout = self._config.target_timeout_ms / self._state.difficulty
        self._scheduler.every(EXPIRY, timeout, self._on_expiry_tick)

    def _disarm_timers(self) -> None:
        for name in PERIODIC_ACTIVITIES:
            self._scheduler.cancel(name)

    def _on_wave_tick(self, ctx: FireContext) -> None:
        self._grid = generate(
            self._sweep.position,
            self._state.pattern,
            self._sweep.direction,
            ROWS,
            COLS,
            WAVE_WIDTH,
            rng=self._rng,
        )
        self._sweep.advance()
        self._publish_frame()

    def _on_color_tick(self, ctx: FireContext) -> None:
        self._color_index = (self._color_index + 1) % len(PALETTE)

    def _on_expiry_tick(self, ctx: FireContext) -> None:
        target = self._targets.current
        if target is None:
            return
        miss = register_expiry(self._state)
        if miss is None:
            return
        logger.debug("target ({}, {}) expired, lives={}", target.row, target.col, miss.lives)
        self._bus.publish("expired", target=target, lives=miss.lives)
        self._after_life_event(miss)
        self._publish_frame()

    def _on_power_up_roll(self, ctx: FireContext) -> None:
        if self._rng.random() >= self._config.power_up_chance:
            return
        self._state.shield = True
        self._scheduler.after(SHIELD_END, self._config.shield_ms, self._on_shield_end)
        logger.info("shield up for {} ms", self._config.shield_ms)
        self._bus.publish("shield", active=True)

    def _on_shield_end(self, ctx: FireContext) -> None:
        self._state.shield = False
        logger.info("shield down")
        self._bus.publish("shield", active=False)

    def _end_shield(self) -> None:
        if self._scheduler.cancel(SHIELD_END) or self._state.shield:
            self._state.shield = False
            self._bus.publish("shield", active=False)

    # --- Event outcomes ---

    def _respawn(self) -> None:
        self._targets.spawn()
        # Each target gets the full timeout.
        self._arm_expiry()

    def _on_hit(self, hit: Hit, target: TargetCell) -> None:
        logger.debug("hit ({}, {}) for {} points, combo {}", target.row, target.col, hit.points, hit.combo)
        self._bus.publish("hit", target=target, points=hit.points, score=hit.score, combo=hit.combo)
        if hit.level_up is not None:
            self._on_level_up(hit.level_up)
        self._respawn()

    def _on_level_up(self, lvl: LevelUp) -> None:
        logger.info(
            "level {} (difficulty {:.1f}, speed {:.1f} ms)", lvl.level, lvl.difficulty, lvl.speed_ms
        )
        self._bus.publish("level_up", level=lvl.level, difficulty=lvl.difficulty, speed_ms=lvl.speed_ms)
        if lvl.difficulty_changed:
            self._arm_wave()
            self._arm_expiry()
        if lvl.pattern_changed:
            logger.info("wave pattern is now {}", lvl.pattern.value)
            self._bus.publish("pattern_changed", pattern=lvl.pattern)

    def _on_miss(self, miss: Miss, target: TargetCell, row: int, col: int) -> None:
        logger.debug("miss at ({}, {}), target was ({}, {})", row, col, target.row, target.col)
        self._bus.publish("miss", row=row, col=col, target=target, life_lost=miss.life_lost, lives=miss.lives)
        self._after_life_event(miss)

    def _after_life_event(self, miss: Miss) -> None:
        if miss.game_over:
            st = self._state
            logger.info("game over: score {} (best {})", st.score, st.high_score)
            self._bus.publish("game_over", score=st.score, high_score=st.high_score)
            self._phases.fire(PhaseEvent.LIVES_EXHAUSTED)
        else:
            self._respawn()

    def _publish_frame(self) -> None:
        self._bus.publish("frame", snapshot=self.snapshot())
