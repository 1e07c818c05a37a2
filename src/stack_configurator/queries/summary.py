"""Layout summary: desired vs. actual suite mix.

Walks every slot of every floor and aggregates residential suites per
type (distinct instances, modules, area). Area is module width times the
row depth, so the same suite is smaller on the corridor side. Elevator
and stair rows are derived from the floor count, not from slots.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from stack_configurator.models.layout import BuildingLayout, SuiteInstance
from stack_configurator.models.project import SuiteMixRequest
from stack_configurator.models.suites import (
    ELEVATOR_INFO,
    MODULE_WIDTH,
    PRIORITY_ORDER,
    SOUTH_DEPTH,
    STAIR_DEPTH,
    STAIR_INFO,
    STAIR_WIDTH,
    SuiteDescriptor,
    SuiteType,
)


@dataclass
class SummaryRow:
    """One line of the comparison table."""

    id: str
    name: str
    count: int
    module_total: int
    total_area: float
    desired_percentage: float | None = None  # None for core rows
    actual_percentage: float | None = None
    codes: str = ""
    color: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "count": self.count,
            "module_total": self.module_total,
            "desired_percentage": self.desired_percentage,
            "actual_percentage": (
                None if self.actual_percentage is None
                else round(self.actual_percentage, 1)
            ),
            "total_area_m2": round(self.total_area, 1),
            "codes": self.codes,
        }


@dataclass
class LayoutSummary:
    """Comparison table for a building layout."""

    suites: list[SummaryRow] = field(default_factory=list)
    elevator: SummaryRow | None = None
    stair: SummaryRow | None = None
    total: SummaryRow | None = None

    def get(self, suite_type: SuiteType) -> SummaryRow:
        return next(r for r in self.suites if r.id == suite_type.value)

    def rows(self) -> list[SummaryRow]:
        """All rows in display order."""
        extra = [r for r in (self.elevator, self.stair, self.total) if r is not None]
        return [*self.suites, *extra]

    def to_dict(self) -> dict:
        return {
            "suites": [r.to_dict() for r in self.suites],
            "elevator": self.elevator.to_dict() if self.elevator else None,
            "stair": self.stair.to_dict() if self.stair else None,
            "total": self.total.to_dict() if self.total else None,
        }


def _codes_label(descriptor: SuiteDescriptor) -> str:
    return (
        f"{descriptor.codes.no_corridor} (No Corridor) / "
        f"{descriptor.codes.corridor} (Corridor)"
    )


def summarize_layout(
    layout: BuildingLayout,
    mix: SuiteMixRequest | Mapping[SuiteType, float],
    include_stairs: bool = True,
) -> LayoutSummary:
    """Aggregate a layout into per-type counts, areas and percentages.

    Args:
        layout: Completed building layout.
        mix: Desired percentages, for the comparison column.
        include_stairs: Add the two external stairwells.

    Returns:
        LayoutSummary with one row per suite type (ascending module
        count, including types with no placed suites), the elevator row,
        the stair row when enabled, and the total row.
    """
    desired = mix.percentages() if isinstance(mix, SuiteMixRequest) else dict(mix)

    instances: dict[SuiteType, set[str]] = {t: set() for t in SuiteType}
    modules: dict[SuiteType, int] = {t: 0 for t in SuiteType}
    areas: dict[SuiteType, float] = {t: 0.0 for t in SuiteType}

    for floor in layout.floors:
        for slot in (*floor.north, *floor.south):
            if not isinstance(slot, SuiteInstance):
                continue
            instances[slot.suite_type].add(slot.instance_id)
            modules[slot.suite_type] += 1
            areas[slot.suite_type] += MODULE_WIDTH * slot.row.depth

    total_suites = sum(len(ids) for ids in instances.values())

    summary = LayoutSummary()
    for suite_type in reversed(PRIORITY_ORDER):
        info = suite_type.descriptor
        count = len(instances[suite_type])
        summary.suites.append(SummaryRow(
            id=info.id,
            name=info.name,
            count=count,
            module_total=modules[suite_type],
            total_area=areas[suite_type],
            desired_percentage=desired.get(suite_type, 0.0),
            actual_percentage=(count / total_suites * 100) if total_suites else 0.0,
            codes=_codes_label(info),
            color=info.color,
        ))

    module_total = sum(modules.values())
    total_area = sum(areas.values())
    floors = layout.floor_count

    if floors > 0:
        summary.elevator = SummaryRow(
            id=ELEVATOR_INFO.id,
            name=ELEVATOR_INFO.name,
            count=1,
            module_total=floors,
            total_area=floors * MODULE_WIDTH * SOUTH_DEPTH,
            codes=ELEVATOR_INFO.codes.corridor,
            color=ELEVATOR_INFO.color,
        )
        module_total += summary.elevator.module_total
        total_area += summary.elevator.total_area

        if include_stairs:
            summary.stair = SummaryRow(
                id=STAIR_INFO.id,
                name=STAIR_INFO.name,
                count=2,
                module_total=2 * floors,
                total_area=2 * floors * STAIR_WIDTH * STAIR_DEPTH,
                codes=STAIR_INFO.codes.no_corridor,
                color=STAIR_INFO.color,
            )
            module_total += summary.stair.module_total
            total_area += summary.stair.total_area

    summary.total = SummaryRow(
        id="total",
        name="Total",
        count=total_suites,
        module_total=module_total,
        total_area=total_area,
        actual_percentage=100.0,
    )
    return summary
