"""Tests for the play-state machine."""
from __future__ import annotations

import pytest

from wave_runner import GamePhase, PhaseEvent, PhaseMachine


def test_starts_idle():
    assert PhaseMachine().state is GamePhase.IDLE


@pytest.mark.parametrize(
    "start, event, expected",
    [
        (GamePhase.IDLE, PhaseEvent.START, GamePhase.RUNNING),
        (GamePhase.IDLE, PhaseEvent.RESET, GamePhase.RUNNING),
        (GamePhase.RUNNING, PhaseEvent.PAUSE, GamePhase.PAUSED),
        (GamePhase.PAUSED, PhaseEvent.START, GamePhase.RUNNING),
        (GamePhase.PAUSED, PhaseEvent.RESET, GamePhase.RUNNING),
        (GamePhase.RUNNING, PhaseEvent.LIVES_EXHAUSTED, GamePhase.GAME_OVER),
        (GamePhase.RUNNING, PhaseEvent.RESET, GamePhase.RUNNING),
        (GamePhase.GAME_OVER, PhaseEvent.RESET, GamePhase.RUNNING),
    ],
)
def test_accepted_transitions(start, event, expected):
    machine = PhaseMachine(start)
    assert machine.fire(event) is True
    assert machine.state is expected


@pytest.mark.parametrize(
    "start, event",
    [
        (GamePhase.IDLE, PhaseEvent.PAUSE),
        (GamePhase.PAUSED, PhaseEvent.PAUSE),
        (GamePhase.RUNNING, PhaseEvent.START),
        (GamePhase.GAME_OVER, PhaseEvent.START),
        (GamePhase.GAME_OVER, PhaseEvent.PAUSE),
        (GamePhase.PAUSED, PhaseEvent.LIVES_EXHAUSTED),
    ],
)
def test_rejected_transitions(start, event):
    """Rejected events leave the phase alone and skip the listener."""
    seen = []
    machine = PhaseMachine(start, on_transition=lambda *args: seen.append(args))
    assert machine.can(event) is False
    assert machine.fire(event) is False
    assert machine.state is start
    assert seen == []


def test_listener_receives_old_new_event():
    seen = []
    machine = PhaseMachine(on_transition=lambda old, new, event: seen.append((old, new, event)))
    machine.fire(PhaseEvent.START)
    machine.fire(PhaseEvent.PAUSE)
    assert seen == [
        (GamePhase.IDLE, GamePhase.RUNNING, PhaseEvent.START),
        (GamePhase.RUNNING, GamePhase.PAUSED, PhaseEvent.PAUSE),
    ]


def test_running_flag():
    machine = PhaseMachine()
    assert not machine.running
    machine.fire(PhaseEvent.START)
    assert machine.running
