"""Tests for the wave pattern generator."""
from __future__ import annotations

import math
import random

import pytest
from wave_grid import COLS, ROWS, WAVE_WIDTH, WavePattern, generate


def _mirror(cols: set[int], width: int = COLS) -> set[int]:
    return {width - 1 - c for c in cols}


class TestShape:
    @pytest.mark.parametrize("pattern", list(WavePattern))
    def test_grid_dimensions(self, pattern: WavePattern) -> None:
        grid = generate(7, pattern, 1, rng=random.Random(1))
        rows = grid.to_rows()
        assert len(rows) == ROWS
        assert all(len(row) == COLS for row in rows)

    @pytest.mark.parametrize("position", range(COLS))
    def test_normal_lights_wave_width_per_row(self, position: int) -> None:
        grid = generate(position, WavePattern.NORMAL, 1)
        for row in range(ROWS):
            assert len(grid.lit_columns(row)) == WAVE_WIDTH

    def test_narrow_grid_overlaps_onto_itself(self) -> None:
        """When cols < wave_width the band wraps onto itself."""
        grid = generate(0, WavePattern.NORMAL, 1, rows=1, cols=4)
        assert grid.lit_columns(0) == {0, 1, 2, 3}

    def test_fresh_grid_every_call(self) -> None:
        """No lit cells carry over from a previous position."""
        first = generate(0, WavePattern.NORMAL, 1)
        second = generate(10, WavePattern.NORMAL, 1)
        assert first.lit_columns(0) & second.lit_columns(0) == set()


class TestNormal:
    @pytest.mark.parametrize("position", [0, 9, COLS - 1])
    def test_forward_band(self, position: int) -> None:
        grid = generate(position, WavePattern.NORMAL, 1)
        expected = {(position + j) % COLS for j in range(WAVE_WIDTH)}
        for row in range(ROWS):
            assert grid.lit_columns(row) == expected

    @pytest.mark.parametrize("position", [0, 9, COLS - 1])
    def test_reverse_is_mirror_of_forward(self, position: int) -> None:
        forward = generate(position, WavePattern.NORMAL, 1)
        reverse = generate(position, WavePattern.NORMAL, -1)
        for row in range(ROWS):
            assert reverse.lit_columns(row) == _mirror(forward.lit_columns(row))

    def test_reverse_at_zero(self) -> None:
        grid = generate(0, WavePattern.NORMAL, -1)
        assert grid.lit_columns(0) == {19, 18, 17, 16, 15, 14}

    def test_reverse_wraps_past_left_edge(self) -> None:
        grid = generate(COLS - 1, WavePattern.NORMAL, -1)
        assert grid.lit_columns(0) == {0, 19, 18, 17, 16, 15}

    def test_invalid_direction(self) -> None:
        with pytest.raises(ValueError):
            generate(0, WavePattern.NORMAL, 0)


class TestSplit:
    @pytest.mark.parametrize("position", range(COLS))
    def test_symmetric_under_reflection(self, position: int) -> None:
        grid = generate(position, WavePattern.SPLIT, 1)
        for row in range(ROWS):
            lit = grid.lit_columns(row)
            assert lit == _mirror(lit)
            assert WAVE_WIDTH <= len(lit) <= 2 * WAVE_WIDTH

    def test_ignores_direction(self) -> None:
        assert generate(4, WavePattern.SPLIT, 1) == generate(4, WavePattern.SPLIT, -1)

    def test_two_bands_at_zero(self) -> None:
        grid = generate(0, WavePattern.SPLIT, 1)
        assert grid.lit_columns(0) == {0, 1, 2, 3, 4, 5, 14, 15, 16, 17, 18, 19}


class TestZigzag:
    def test_deterministic(self) -> None:
        assert generate(3, WavePattern.ZIGZAG, 1) == generate(3, WavePattern.ZIGZAG, 1)

    def test_row_offsets_follow_sine(self) -> None:
        grid = generate(0, WavePattern.ZIGZAG, 1)
        for row in range(ROWS):
            offset = math.sin(row * 0.5) * 3
            expected = {
                math.floor((j + offset + COLS) % COLS) for j in range(WAVE_WIDTH)
            }
            assert grid.lit_columns(row) == expected

    def test_known_rows(self) -> None:
        grid = generate(0, WavePattern.ZIGZAG, 1)
        assert grid.lit_columns(0) == {0, 1, 2, 3, 4, 5}
        assert grid.lit_columns(1) == {1, 2, 3, 4, 5, 6}
        assert grid.lit_columns(7) == {18, 19, 0, 1, 2, 3}

    def test_ignores_direction(self) -> None:
        assert generate(8, WavePattern.ZIGZAG, 1) == generate(8, WavePattern.ZIGZAG, -1)


class TestChaos:
    def test_seeded_rng_reproducible(self) -> None:
        a = generate(5, WavePattern.CHAOS, 1, rng=random.Random(42))
        b = generate(5, WavePattern.CHAOS, 1, rng=random.Random(42))
        assert a == b

    def test_rows_stay_near_position(self) -> None:
        """Each row is a width-6 band shifted by at most two columns."""
        rng = random.Random(7)
        position = 10
        window = {(position + k) % COLS for k in range(-2, WAVE_WIDTH + 2)}
        for _ in range(20):
            grid = generate(position, WavePattern.CHAOS, 1, rng=rng)
            for row in range(ROWS):
                lit = grid.lit_columns(row)
                assert len(lit) == WAVE_WIDTH
                assert lit <= window

    def test_draws_one_value_per_row(self) -> None:
        rng = random.Random(3)
        generate(0, WavePattern.CHAOS, 1, rng=rng)
        reference = random.Random(3)
        for _ in range(ROWS):
            reference.random()
        assert rng.random() == reference.random()
