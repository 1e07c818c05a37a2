"""Layout models: placed suites, floor plans and the building layout.

All layout models are frozen. A BuildingLayout is built completely by the
generators and then handed out as an immutable snapshot; consumers never
see a partially populated layout.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from stack_configurator.models.suites import (
    ELEVATOR_INFO,
    Row,
    SuiteDescriptor,
    SuiteType,
)

ELEVATOR_ID = "elevator-core"


class SuiteInstance(BaseModel):
    """A suite placed on a floor.

    Occupies ``module_count`` contiguous slots of one row, starting at
    ``start``. Every slot of the run references the same instance.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["suite"] = "suite"
    instance_id: str
    suite_type: SuiteType
    row: Row
    start: int = Field(ge=0)

    @property
    def module_count(self) -> int:
        return self.suite_type.module_count

    @property
    def end(self) -> int:
        """Exclusive end slot index."""
        return self.start + self.module_count

    @property
    def is_corridor_side(self) -> bool:
        return self.row is Row.NORTH

    @property
    def descriptor(self) -> SuiteDescriptor:
        return self.suite_type.descriptor

    @property
    def unit_code(self) -> str:
        """Unit code for this suite's row position."""
        return self.descriptor.codes.for_row(self.row)


class CoreModule(BaseModel):
    """A fixed core element occupying one slot (the elevator)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["elevator"] = "elevator"
    instance_id: str = ELEVATOR_ID

    @property
    def descriptor(self) -> SuiteDescriptor:
        return ELEVATOR_INFO


ModuleSlot = Optional[
    Annotated[Union[SuiteInstance, CoreModule], Field(discriminator="kind")]
]


def elevator_index(single_side_modules: int) -> int:
    """Slot index of the elevator in the south row."""
    return single_side_modules // 2


class FloorPlan(BaseModel):
    """Suite assignment for one floor.

    ``index`` is the physical floor index (0 = ground floor). Layouts are
    ordered for presentation, so callers needing stacking order use it.
    ``dropped`` lists suites assigned to this floor that could not be
    positioned in either row.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(default=0, ge=0)
    north: tuple[ModuleSlot, ...]
    south: tuple[ModuleSlot, ...]
    dropped: tuple[SuiteType, ...] = ()

    @property
    def single_side_modules(self) -> int:
        return len(self.north)

    def row(self, row: Row) -> tuple[ModuleSlot, ...]:
        return self.north if row is Row.NORTH else self.south

    def suites(self) -> list[SuiteInstance]:
        """Distinct placed suites, north row first, left to right."""
        seen: set[str] = set()
        result: list[SuiteInstance] = []
        for slot in (*self.north, *self.south):
            if isinstance(slot, SuiteInstance) and slot.instance_id not in seen:
                seen.add(slot.instance_id)
                result.append(slot)
        return result

    @property
    def occupied_modules(self) -> int:
        """Slots holding a residential suite."""
        return sum(
            1 for slot in (*self.north, *self.south)
            if isinstance(slot, SuiteInstance)
        )

    @property
    def empty_modules(self) -> int:
        return sum(1 for slot in (*self.north, *self.south) if slot is None)


class BuildingLayout(BaseModel):
    """All floor plans for one configuration, in presentation order."""

    model_config = ConfigDict(frozen=True)

    single_side_modules: int = Field(ge=1)
    floors: tuple[FloorPlan, ...] = ()

    @property
    def floor_count(self) -> int:
        return len(self.floors)

    def physical_order(self) -> list[FloorPlan]:
        """Floors in stacking order (ground floor first)."""
        return sorted(self.floors, key=lambda f: f.index)

    def get_floor(self, index: int) -> FloorPlan | None:
        """Find a floor by physical index."""
        return next((f for f in self.floors if f.index == index), None)

    def suite_count(self) -> int:
        return sum(len(f.suites()) for f in self.floors)
