"""Tests for the floor bin-packer."""

import logging

import pytest

from stack_configurator.generators.packing import first_fit, gap_fill, pack_floors
from stack_configurator.generators.quota import compute_quotas, expand_quotas
from stack_configurator.models import SuiteType

STUDIO = SuiteType.STUDIO
ONE = SuiteType.ONE_BED
TWO = SuiteType.TWO_BED
THREE = SuiteType.THREE_BED


def _modules(floor: list[SuiteType]) -> int:
    return sum(s.module_count for s in floor)


class TestFirstFit:
    def test_sorted_largest_first(self):
        floors, capacity = first_fit([STUDIO, THREE, ONE], 1, 9)
        assert floors == [[THREE, ONE, STUDIO]]
        assert capacity == [2]

    def test_fills_floors_in_order(self):
        floors, capacity = first_fit([THREE] * 18, 3, 25)
        assert [len(f) for f in floors] == [6, 6, 6]
        assert capacity == [1, 1, 1]

    def test_fallback_overdraws_first_floor_with_space(self):
        floors, capacity = first_fit([TWO, TWO], 1, 4)
        assert floors == [[TWO, TWO]]
        assert capacity == [-2]

    def test_fallback_skips_full_floors(self):
        floors, capacity = first_fit([TWO, TWO, TWO], 2, 4)
        # 3 + 3 leave 1 per floor; the third two-bed lands on floor 0
        assert floors == [[TWO, TWO], [TWO]]
        assert capacity == [-2, 1]

    def test_drops_when_no_capacity(self, caplog):
        with caplog.at_level(logging.WARNING):
            floors, capacity = first_fit([STUDIO] * 3, 1, 2)
        assert floors == [[STUDIO, STUDIO]]
        assert capacity == [0]
        assert "dropped" in caplog.text


class TestGapFill:
    def test_cascade_largest_first(self):
        floors = gap_fill([[]], [9])
        assert floors == [[THREE, THREE, STUDIO]]

    def test_each_remainder(self):
        floors = gap_fill([[], [], [], []], [1, 2, 3, 7])
        assert floors == [[STUDIO], [ONE], [TWO], [THREE, TWO]]

    def test_capacity_consumed(self):
        capacity = [5, 0]
        gap_fill([[], []], capacity)
        assert capacity == [0, 0]

    def test_overdrawn_floor_untouched(self):
        floors = gap_fill([[TWO, TWO]], [-2])
        assert floors == [[TWO, TWO]]


class TestPackFloors:
    def test_all_studios_no_gap_fill(self):
        floors = pack_floors([STUDIO] * 75, 3, 25)
        assert [len(f) for f in floors] == [25, 25, 25]
        assert all(s is STUDIO for f in floors for s in f)

    def test_all_three_bed_gap_filled_with_studios(self):
        floors = pack_floors([THREE] * 18, 3, 25)
        for floor in floors:
            assert floor == [THREE] * 6 + [STUDIO]
            assert _modules(floor) == 25

    def test_empty_request_fully_gap_filled(self):
        floors = pack_floors([], 2, 9)
        assert floors == [[THREE, THREE, STUDIO], [THREE, THREE, STUDIO]]

    @pytest.mark.parametrize("mix", [
        {STUDIO: 100},
        {THREE: 100},
        {STUDIO: 25, ONE: 25, TWO: 25, THREE: 25},
        {THREE: 40, TWO: 30, ONE: 20, STUDIO: 10},
        {},
    ])
    def test_every_floor_exactly_full(self, mix):
        quotas = compute_quotas(mix, 75)
        floors = pack_floors(expand_quotas(quotas), 3, 25)
        assert [_modules(f) for f in floors] == [25, 25, 25]

    def test_all_two_bed_overdraws_ground_floor(self):
        quotas = compute_quotas({TWO: 100}, 75)
        assert quotas[TWO] == 25
        floors = pack_floors(expand_quotas(quotas), 3, 25)
        assert [_modules(f) for f in floors] == [27, 24 + 1, 24 + 1]
