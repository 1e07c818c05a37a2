"""Tests for floor presentation ordering."""

from stack_configurator.generators.ordering import floor_score, sort_floors
from stack_configurator.generators.placement import place_floor
from stack_configurator.models import SuiteType

STUDIO = SuiteType.STUDIO
ONE = SuiteType.ONE_BED
THREE = SuiteType.THREE_BED


class TestFloorScore:
    def test_counts_placed_modules(self):
        plan = place_floor([ONE, ONE, ONE, ONE, STUDIO], 5)
        assert floor_score(plan) == 9

    def test_elevator_not_counted(self):
        assert floor_score(place_floor([], 5)) == 0

    def test_dropped_suites_not_counted(self):
        plan = place_floor([THREE, THREE, STUDIO], 5)
        assert floor_score(plan) == 5


class TestSortFloors:
    def test_ascending_and_stable(self):
        full_a = place_floor([ONE, ONE, ONE, ONE, STUDIO], 5, floor_index=0)
        sparse = place_floor([THREE, THREE, STUDIO], 5, floor_index=1)
        full_b = place_floor([STUDIO] * 9, 5, floor_index=2)
        ordered = sort_floors([full_a, sparse, full_b])
        assert [p.index for p in ordered] == [1, 0, 2]

    def test_empty(self):
        assert sort_floors([]) == []
