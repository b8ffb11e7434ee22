"""Tests for the Snapshot render model."""
from __future__ import annotations

import dataclasses

import pytest
from wave_grid import WavePattern

from wave_runner import GamePhase, Snapshot, TargetCell


def _snap(**overrides) -> Snapshot:
    fields = dict(
        grid=((True, False, False), (False, False, True)),
        target=TargetCell(1, 2),
        score=300,
        high_score=900,
        level=2,
        combo=1,
        lives=3,
        game_over=False,
        pattern=WavePattern.SPLIT,
        speed_ms=100.0,
        difficulty=1.0,
        direction=-1,
        power_up_active=False,
        phase=GamePhase.RUNNING,
        color_index=2,
        color="#4169E1",
        points_multiplier=4.0,
        speed_percent=67,
    )
    fields.update(overrides)
    return Snapshot(**fields)


def test_dimensions():
    snap = _snap()
    assert (snap.rows, snap.cols) == (2, 3)


def test_is_lit_out_of_range_is_false():
    snap = _snap()
    assert snap.is_lit(0, 0)
    assert not snap.is_lit(0, 1)
    assert not snap.is_lit(-1, 0)
    assert not snap.is_lit(0, 3)


def test_is_target():
    snap = _snap()
    assert snap.is_target(1, 2)
    assert not snap.is_target(0, 0)
    assert not _snap(target=None).is_target(1, 2)


@pytest.mark.parametrize("direction, label", [(1, "Right"), (-1, "Left")])
def test_direction_label(direction, label):
    assert _snap(direction=direction).direction_label == label


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        _snap().score = 1  # type: ignore[misc]


def test_to_dict():
    data = _snap().to_dict()
    assert data["grid"] == [[True, False, False], [False, False, True]]
    assert data["target"] == [1, 2]
    assert data["pattern"] == "split"
    assert data["phase"] == "running"
    assert data["color"] == "#4169E1"
    assert _snap(target=None).to_dict()["target"] is None
