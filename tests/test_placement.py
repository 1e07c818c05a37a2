"""Tests for intra-floor placement."""

import logging

import pytest

from stack_configurator.generators.placement import make_instance_id, place_floor
from stack_configurator.models import CoreModule, Row, SuiteInstance, SuiteType

STUDIO = SuiteType.STUDIO
ONE = SuiteType.ONE_BED
TWO = SuiteType.TWO_BED
THREE = SuiteType.THREE_BED


def _types(row) -> list[str | None]:
    """Row as suite-type values; 'E' for the elevator."""
    out = []
    for slot in row:
        if slot is None:
            out.append(None)
        elif isinstance(slot, CoreModule):
            out.append("E")
        else:
            out.append(slot.suite_type.value)
    return out


def _assert_instances_contiguous(plan):
    for row in Row:
        slots = plan.row(row)
        for suite in plan.suites():
            if suite.row is not row:
                continue
            run = slots[suite.start:suite.end]
            assert all(s == suite for s in run)
            others = [i for i, s in enumerate(slots)
                      if isinstance(s, SuiteInstance) and s.instance_id == suite.instance_id]
            assert others == list(range(suite.start, suite.end))


class TestElevator:
    @pytest.mark.parametrize("n", [1, 2, 5, 6, 13])
    def test_elevator_in_south_middle(self, n):
        plan = place_floor([], n)
        assert isinstance(plan.south[n // 2], CoreModule)
        assert plan.south[n // 2].instance_id == "elevator-core"
        assert not any(isinstance(s, CoreModule) for s in plan.north)
        assert sum(isinstance(s, CoreModule) for s in plan.south) == 1

    def test_single_module_rows(self):
        plan = place_floor([STUDIO], 1)
        assert _types(plan.north) == ["studio"]
        assert _types(plan.south) == ["E"]


class TestLargeSuitePass:
    def test_first_suite_goes_north_left(self):
        plan = place_floor([ONE], 5)
        assert _types(plan.north) == ["one-bed", "one-bed", None, None, None]

    def test_tie_break_order(self):
        # Four one-beds + a studio fill a 5-module floor exactly:
        # north-left, north-left, south-left, south-right, then the studio
        plan = place_floor([ONE, ONE, ONE, ONE, STUDIO], 5)
        assert _types(plan.north) == ["one-bed"] * 4 + ["studio"]
        assert _types(plan.south) == ["one-bed", "one-bed", "E", "one-bed", "one-bed"]
        assert plan.dropped == ()
        assert plan.empty_modules == 0

    def test_right_cursor_places_at_row_end(self):
        plan = place_floor([THREE, TWO, TWO, TWO], 7)
        assert _types(plan.north) == ["three-bed"] * 4 + ["two-bed"] * 3
        assert _types(plan.south) == ["two-bed"] * 3 + ["E"] + ["two-bed"] * 3
        right = plan.south[4]
        assert right.start == 4
        assert right.instance_id == "two-bed-0-south-4"

    def test_largest_first_regardless_of_input_order(self):
        plan = place_floor([ONE, THREE], 5)
        assert plan.north[0].suite_type is THREE
        assert plan.north[0].start == 0

    def test_never_covers_elevator(self):
        plan = place_floor([THREE, THREE, THREE], 6)
        assert isinstance(plan.south[3], CoreModule)
        _assert_instances_contiguous(plan)
        assert plan.dropped == (THREE, THREE)


class TestSmallSuitePass:
    def test_all_studios_fill_floor(self):
        plan = place_floor([STUDIO] * 25, 13)
        assert plan.occupied_modules == 25
        assert plan.empty_modules == 0
        assert len(plan.suites()) == 25
        assert plan.north[12].instance_id == "studio-0-north-12"

    def test_leaves_placeholders_when_pool_empty(self):
        plan = place_floor([STUDIO, STUDIO], 3)
        assert _types(plan.north) == ["studio", "studio", None]
        assert _types(plan.south) == [None, "E", None]


class TestDemotion:
    def test_demoted_suite_dropped_when_no_run(self, caplog):
        # The second three-bed faces only two disjoint 2-slot gaps
        with caplog.at_level(logging.WARNING):
            plan = place_floor([THREE, THREE, STUDIO], 5, floor_index=2)
        assert _types(plan.north) == ["three-bed"] * 4 + ["studio"]
        assert _types(plan.south) == [None, None, "E", None, None]
        assert plan.dropped == (THREE,)
        assert plan.occupied_modules == 5
        assert "dropped" in caplog.text

    def test_full_three_bed_floor(self):
        plan = place_floor([THREE] * 6 + [STUDIO], 13)
        assert _types(plan.north) == ["three-bed"] * 12 + ["studio"]
        assert _types(plan.south) == (
            ["three-bed"] * 4 + [None, None, "E", None, None] + ["three-bed"] * 4
        )
        assert plan.dropped == (THREE,)
        assert len(plan.suites()) == 6


class TestInstanceIds:
    def test_deterministic(self):
        a = place_floor([THREE, TWO, ONE, STUDIO], 7, floor_index=1)
        b = place_floor([THREE, TWO, ONE, STUDIO], 7, floor_index=1)
        assert a == b

    def test_format(self):
        assert make_instance_id(TWO, 3, Row.SOUTH, 4) == "two-bed-3-south-4"

    def test_floor_index_in_id(self):
        plan = place_floor([ONE], 5, floor_index=4)
        assert plan.index == 4
        assert plan.north[0].instance_id == "one-bed-4-north-0"

    def test_one_id_per_suite(self):
        plan = place_floor([THREE, TWO, ONE, ONE, STUDIO], 7)
        ids = {s.instance_id for s in plan.north + plan.south
               if isinstance(s, SuiteInstance)}
        assert len(ids) == len(plan.suites()) == 5
