"""Intra-floor placement.

Arranges one floor's suites into the two module rows around the elevator,
which sits permanently in the middle slot of the south row:

```
 north  | 0 | 1 | 2 | 3 | 4 | 5 | 6 |    corridor side
        ---------- corridor ---------
 south  | 0 | 1 | 2 | E | 4 | 5 | 6 |
```

Large suites (2+ modules) are placed first, from the row ends inward,
using four cursors: north-left, south-left, north-right, south-right.
For each suite the cursor with the longest empty run wins; ties go to
the first cursor in that order. A suite no cursor can take is demoted to
the small-suite pass, which scans both rows left to right and fills
every empty run with the first pooled suite that fits.

Suites still unplaced after both passes are dropped from the floor and
reported in ``FloorPlan.dropped``.
"""

from __future__ import annotations

import logging
from enum import Enum

from stack_configurator.models.layout import (
    CoreModule,
    FloorPlan,
    ModuleSlot,
    SuiteInstance,
    elevator_index,
)
from stack_configurator.models.suites import Row, SuiteType

logger = logging.getLogger(__name__)


class Edge(str, Enum):
    LEFT = "left"
    RIGHT = "right"


# Evaluation order is also the tie-break order
CURSOR_ORDER: tuple[tuple[Row, Edge], ...] = (
    (Row.NORTH, Edge.LEFT),
    (Row.SOUTH, Edge.LEFT),
    (Row.NORTH, Edge.RIGHT),
    (Row.SOUTH, Edge.RIGHT),
)


def make_instance_id(
    suite_type: SuiteType, floor_index: int, row: Row, start: int
) -> str:
    """Deterministic suite instance id, unique within a building."""
    return f"{suite_type.value}-{floor_index}-{row.value}-{start}"


class _FloorGrid:
    """Mutable working state while a floor is being placed."""

    def __init__(self, single_side_modules: int, floor_index: int):
        self.size = single_side_modules
        self.floor_index = floor_index
        self.rows: dict[Row, list[ModuleSlot]] = {
            Row.NORTH: [None] * single_side_modules,
            Row.SOUTH: [None] * single_side_modules,
        }
        self.rows[Row.SOUTH][elevator_index(single_side_modules)] = CoreModule()
        self.cursors: dict[tuple[Row, Edge], int] = {}
        for row in Row:
            self.cursors[(row, Edge.LEFT)] = 0
            self.cursors[(row, Edge.RIGHT)] = single_side_modules - 1

    def span(self, row: Row, edge: Edge) -> int:
        """Consecutive empty slots from a cursor toward the far end of the row."""
        pos = self.cursors[(row, edge)]
        step = 1 if edge is Edge.LEFT else -1
        slots = self.rows[row]
        count = 0
        while 0 <= pos < self.size and slots[pos] is None:
            count += 1
            pos += step
        return count

    def run_fits(self, row: Row, start: int, length: int) -> bool:
        """Whether ``length`` slots from ``start`` are in bounds and empty."""
        if start < 0 or start + length > self.size:
            return False
        return all(slot is None for slot in self.rows[row][start:start + length])

    def place(self, suite_type: SuiteType, row: Row, start: int) -> SuiteInstance:
        instance = SuiteInstance(
            instance_id=make_instance_id(suite_type, self.floor_index, row, start),
            suite_type=suite_type,
            row=row,
            start=start,
        )
        for i in range(start, start + suite_type.module_count):
            self.rows[row][i] = instance
        return instance

    def place_at_cursor(self, suite_type: SuiteType, row: Row, edge: Edge) -> None:
        cursor = self.cursors[(row, edge)]
        count = suite_type.module_count
        if edge is Edge.LEFT:
            self.place(suite_type, row, cursor)
            self.cursors[(row, edge)] = cursor + count
        else:
            self.place(suite_type, row, cursor - count + 1)
            self.cursors[(row, edge)] = cursor - count

    def best_cursor(self, suite_type: SuiteType) -> tuple[Row, Edge] | None:
        """Cursor with the longest empty run that can take the suite."""
        best: tuple[Row, Edge] | None = None
        best_span = -1
        for row, edge in CURSOR_ORDER:
            span = self.span(row, edge)
            if span >= suite_type.module_count and span > best_span:
                best, best_span = (row, edge), span
        return best


def place_large_suites(
    grid: _FloorGrid, suites: list[SuiteType]
) -> list[SuiteType]:
    """Place multi-module suites from the row ends inward.

    Returns the suites that no cursor could take (demoted).
    """
    demoted: list[SuiteType] = []
    for suite_type in sorted(suites, key=lambda s: s.module_count, reverse=True):
        spot = grid.best_cursor(suite_type)
        if spot is None:
            logger.debug(
                "Floor %d: demoting %s, no edge run of %d modules",
                grid.floor_index, suite_type.value, suite_type.module_count,
            )
            demoted.append(suite_type)
            continue
        grid.place_at_cursor(suite_type, *spot)
    return demoted


def place_small_suites(
    grid: _FloorGrid, suites: list[SuiteType]
) -> list[SuiteType]:
    """Fill remaining empty runs left to right, north row first.

    Returns the suites that found no fitting run.
    """
    pool = sorted(suites, key=lambda s: s.module_count, reverse=True)
    for row in (Row.NORTH, Row.SOUTH):
        i = 0
        while i < grid.size:
            if grid.rows[row][i] is not None:
                i += 1
                continue
            match = next(
                (k for k, s in enumerate(pool) if grid.run_fits(row, i, s.module_count)),
                None,
            )
            if match is None:
                i += 1
                continue
            suite_type = pool.pop(match)
            grid.place(suite_type, row, i)
            i += suite_type.module_count
    return pool


def place_floor(
    suites: list[SuiteType],
    single_side_modules: int,
    floor_index: int = 0,
) -> FloorPlan:
    """Arrange one floor's suites into row positions.

    Args:
        suites: Suites assigned to this floor by the bin-packer.
        single_side_modules: Slots per row.
        floor_index: Physical floor index, used in instance ids.

    Returns:
        Immutable FloorPlan. Suites that could not be positioned are listed
        in ``dropped`` instead of the rows.
    """
    grid = _FloorGrid(single_side_modules, floor_index)

    large = [s for s in suites if s.module_count > 1]
    small = [s for s in suites if s.module_count == 1]

    demoted = place_large_suites(grid, large)
    dropped = place_small_suites(grid, small + demoted)

    for suite_type in dropped:
        logger.warning(
            "Floor %d: %s suite (%d modules) has no contiguous run, dropped",
            floor_index, suite_type.value, suite_type.module_count,
        )

    return FloorPlan(
        index=floor_index,
        north=tuple(grid.rows[Row.NORTH]),
        south=tuple(grid.rows[Row.SOUTH]),
        dropped=tuple(dropped),
    )
