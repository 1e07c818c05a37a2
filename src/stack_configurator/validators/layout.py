"""Layout validation.

Checks the invariants a generated layout should satisfy and reports the
known placement shortfalls. The generators never raise for these; this
module is the explicit channel for them.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass

from stack_configurator.models.layout import (
    BuildingLayout,
    CoreModule,
    FloorPlan,
    SuiteInstance,
    elevator_index,
)
from stack_configurator.models.suites import Row


@dataclass
class ValidationError:
    """A single validation issue."""

    severity: str  # "error" | "warning"
    element_type: str
    element_id: str
    message: str


def validate_floor(plan: FloorPlan) -> list[ValidationError]:
    """Validate one floor plan."""
    errors: list[ValidationError] = []
    floor_id = f"floor-{plan.index}"
    n = plan.single_side_modules

    if len(plan.south) != n:
        errors.append(ValidationError(
            severity="error",
            element_type="FloorPlan",
            element_id=floor_id,
            message=f"Row lengths differ (north {n}, south {len(plan.south)})",
        ))
        return errors

    # Elevator must sit in the middle of the south row, nowhere else
    mid = elevator_index(n)
    if not isinstance(plan.south[mid], CoreModule):
        occupant = plan.south[mid]
        what = occupant.instance_id if occupant is not None else "nothing"
        errors.append(ValidationError(
            severity="error",
            element_type="Elevator",
            element_id=floor_id,
            message=f"Elevator slot south[{mid}] holds {what}",
        ))
    for row in Row:
        for i, slot in enumerate(plan.row(row)):
            if isinstance(slot, CoreModule) and (row is Row.NORTH or i != mid):
                errors.append(ValidationError(
                    severity="error",
                    element_type="Elevator",
                    element_id=floor_id,
                    message=f"Unexpected core module at {row.value}[{i}]",
                ))

    # Every suite instance: one row, contiguous, exactly module_count slots
    positions: dict[str, list[tuple[Row, int]]] = defaultdict(list)
    instances: dict[str, SuiteInstance] = {}
    for row in Row:
        for i, slot in enumerate(plan.row(row)):
            if isinstance(slot, SuiteInstance):
                positions[slot.instance_id].append((row, i))
                instances[slot.instance_id] = slot

    for instance_id, slots in positions.items():
        suite = instances[instance_id]
        rows = {r for r, _ in slots}
        indices = sorted(i for _, i in slots)
        if len(rows) > 1:
            errors.append(ValidationError(
                severity="error",
                element_type="Suite",
                element_id=instance_id,
                message="Suite spans both rows",
            ))
        elif indices != list(range(indices[0], indices[0] + len(indices))):
            errors.append(ValidationError(
                severity="error",
                element_type="Suite",
                element_id=instance_id,
                message=f"Suite slots are not contiguous: {indices}",
            ))
        if len(slots) != suite.module_count:
            errors.append(ValidationError(
                severity="error",
                element_type="Suite",
                element_id=instance_id,
                message=(
                    f"Suite occupies {len(slots)} slots, "
                    f"{suite.suite_type.value} needs {suite.module_count}"
                ),
            ))

    if plan.dropped:
        dropped = ", ".join(s.value for s in plan.dropped)
        errors.append(ValidationError(
            severity="warning",
            element_type="FloorPlan",
            element_id=floor_id,
            message=f"Suites dropped, no contiguous run left: {dropped}",
        ))

    if plan.empty_modules:
        errors.append(ValidationError(
            severity="warning",
            element_type="FloorPlan",
            element_id=floor_id,
            message=(
                f"{plan.empty_modules} of {2 * n - 1} residential slots empty"
            ),
        ))

    return errors


def validate_layout(layout: BuildingLayout) -> list[ValidationError]:
    """Validate every floor plus building-level consistency."""
    errors: list[ValidationError] = []

    indices = [f.index for f in layout.floors]
    if sorted(indices) != list(range(len(indices))):
        errors.append(ValidationError(
            severity="error",
            element_type="BuildingLayout",
            element_id="layout",
            message=f"Floor indices are not 0..{len(indices) - 1}: {indices}",
        ))

    for plan in layout.floors:
        if plan.single_side_modules != layout.single_side_modules:
            errors.append(ValidationError(
                severity="error",
                element_type="FloorPlan",
                element_id=f"floor-{plan.index}",
                message=(
                    f"Floor has {plan.single_side_modules} modules per row, "
                    f"layout expects {layout.single_side_modules}"
                ),
            ))
            continue
        errors.extend(validate_floor(plan))

    return errors
