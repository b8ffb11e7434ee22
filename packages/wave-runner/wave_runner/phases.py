"""Play-state machine: idle, running, paused, game over."""
from __future__ import annotations

from enum import Enum
from typing import Callable


class GamePhase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class PhaseEvent(str, Enum):
    START = "start"
    PAUSE = "pause"
    RESET = "reset"
    LIVES_EXHAUSTED = "lives_exhausted"


TRANSITIONS: dict[GamePhase, dict[PhaseEvent, GamePhase]] = {
    GamePhase.IDLE: {
        PhaseEvent.START: GamePhase.RUNNING,
        PhaseEvent.RESET: GamePhase.RUNNING,
    },
    GamePhase.RUNNING: {
        PhaseEvent.PAUSE: GamePhase.PAUSED,
        PhaseEvent.LIVES_EXHAUSTED: GamePhase.GAME_OVER,
        PhaseEvent.RESET: GamePhase.RUNNING,
    },
    GamePhase.PAUSED: {
        PhaseEvent.START: GamePhase.RUNNING,
        PhaseEvent.RESET: GamePhase.RUNNING,
    },
    # Only an explicit reset leaves game over.
    GamePhase.GAME_OVER: {
        PhaseEvent.RESET: GamePhase.RUNNING,
    },
}

_Listener = Callable[[GamePhase, GamePhase, PhaseEvent], None]


class PhaseMachine:
    """Applies PhaseEvents against TRANSITIONS.

    ``on_transition(old, new, event)`` runs after every accepted event,
    including self-transitions such as RUNNING --reset--> RUNNING.
    """

    def __init__(
        self,
        state: GamePhase = GamePhase.IDLE,
        on_transition: _Listener | None = None,
    ) -> None:
        self._state = state
        self._on_transition = on_transition

    @property
    def state(self) -> GamePhase:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is GamePhase.RUNNING

    def can(self, event: PhaseEvent) -> bool:
        return event in TRANSITIONS[self._state]

    def fire(self, event: PhaseEvent) -> bool:
        """Apply `event`. Returns False when the current phase rejects it."""
        target = TRANSITIONS[self._state].get(event)
        if target is None:
            return False
        old = self._state
        self._state = target
        if self._on_transition is not None:
            self._on_transition(old, target, event)
        return True
