"""Tests for GameConfig defaults and validation."""
import dataclasses

import pytest

from wave_runner import PALETTE, GameConfig


def test_defaults():
    cfg = GameConfig()
    assert cfg.initial_lives == 3
    assert cfg.initial_speed_ms == 100.0
    assert cfg.min_speed_ms == 50.0
    assert cfg.max_difficulty == 3.0
    assert cfg.color_interval_ms == 1500.0
    assert cfg.target_timeout_ms == 3000.0
    assert cfg.power_up_roll_ms == 15000.0
    assert cfg.power_up_chance == 0.1
    assert cfg.shield_ms == 5000.0


def test_frozen():
    cfg = GameConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.initial_lives = 9  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"initial_lives": 0},
        {"min_speed_ms": 0},
        {"min_speed_ms": 200.0},
        {"target_timeout_ms": 0},
        {"shield_ms": -1},
        {"power_up_chance": 1.5},
        {"max_difficulty": 0.5},
        {"pattern_every_levels": 0},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_palette_has_five_colors():
    assert len(PALETTE) == 5
    assert all(c.startswith("#") and len(c) == 7 for c in PALETTE)
