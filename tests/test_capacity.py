"""Tests for the capacity model and envelope metrics."""

import pytest

from stack_configurator.generators.capacity import (
    compute_capacity,
    compute_envelope,
    round_half_away,
    snap_height,
)
from stack_configurator.models import (
    MODULE_WIDTH,
    NORTH_DEPTH,
    SOUTH_DEPTH,
    STAIR_DEPTH,
    STAIR_WIDTH,
    ProjectParameters,
)


class TestRoundHalfAway:
    def test_ties_round_up_for_positive(self):
        assert round_half_away(2.5) == 3
        assert round_half_away(0.5) == 1

    def test_ties_round_down_for_negative(self):
        assert round_half_away(-2.5) == -3

    def test_not_bankers_rounding(self):
        # round(2.5) == 2 in Python
        assert round_half_away(2.5) != round(2.5)

    def test_nearest(self):
        assert round_half_away(2.49) == 2
        assert round_half_away(12.9998) == 13


class TestComputeCapacity:
    def test_reference_envelope(self):
        cap = compute_capacity(width=49.2, height=10, floor_height=3.175)
        assert cap.floor_count == 3
        assert cap.single_side_modules == 13
        assert cap.per_floor_capacity == 25
        assert cap.total_residential_modules == 75

    def test_one_slot_reserved_per_floor(self):
        cap = compute_capacity(width=5 * MODULE_WIDTH, height=6.35, floor_height=3.175)
        assert cap.single_side_modules == 5
        assert cap.floor_count == 2
        assert cap.per_floor_capacity == 9
        assert cap.total_residential_modules == 18

    def test_clamped_to_one(self):
        cap = compute_capacity(width=0.5, height=1.0, floor_height=3.784)
        assert cap.single_side_modules == 1
        assert cap.floor_count == 1
        assert cap.per_floor_capacity == 1
        assert cap.total_residential_modules == 1

    def test_taller_floors_fewer_floors(self):
        low = compute_capacity(width=49.2, height=20, floor_height=3.175)
        high = compute_capacity(width=49.2, height=20, floor_height=3.784)
        assert low.floor_count == 6
        assert high.floor_count == 5


class TestEnvelope:
    def test_default_project(self):
        env = compute_envelope(ProjectParameters())
        width = 13 * MODULE_WIDTH
        depth = SOUTH_DEPTH + NORTH_DEPTH
        footprint = width * depth + 2 * STAIR_WIDTH * STAIR_DEPTH
        assert env.width == pytest.approx(width)
        assert env.depth == pytest.approx(depth)
        assert env.height == pytest.approx(3 * 3.175)
        assert env.floor_count == 3
        assert env.modules_per_floor == 26
        assert env.total_modules == 78
        assert env.footprint_area == pytest.approx(footprint)
        assert env.total_area == pytest.approx(footprint * 3)

    def test_without_stairs(self):
        env = compute_envelope(ProjectParameters(include_stairs=False))
        assert env.footprint_area == pytest.approx(
            13 * MODULE_WIDTH * (SOUTH_DEPTH + NORTH_DEPTH)
        )

    def test_width_snaps_to_modules(self):
        env = compute_envelope(ProjectParameters(width=50.0))
        assert env.width == pytest.approx(13 * MODULE_WIDTH)


class TestSnapHeight:
    def test_snaps_to_whole_floors(self):
        assert snap_height(10, 3.175) == pytest.approx(9.525)

    def test_at_least_one_floor(self):
        assert snap_height(1.0, 3.784) == pytest.approx(3.784)
