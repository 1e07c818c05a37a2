"""Floor presentation order.

Floors are shown sparsest first. The score is the number of residential
modules actually placed on a floor; core elements do not count. The order
is cosmetic and says nothing about stacking: use ``FloorPlan.index`` for
the physical floor.
"""

from __future__ import annotations

from collections.abc import Iterable

from stack_configurator.models.layout import FloorPlan


def floor_score(plan: FloorPlan) -> int:
    """Density score: sum of module counts of placed suites."""
    return sum(suite.module_count for suite in plan.suites())


def sort_floors(plans: Iterable[FloorPlan]) -> list[FloorPlan]:
    """Stable ascending sort by density score."""
    return sorted(plans, key=floor_score)
