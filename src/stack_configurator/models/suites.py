"""Suite catalog: the closed set of residential unit types.

Each suite type is a tagged variant (SuiteType) backed by one read-only
descriptor table (SUITE_CATALOG). Placed suites only carry the variant,
never a copy of the descriptor.

Dimensions are metric (meters):
- MODULE_WIDTH: fixed structural module width (12' 5")
- NORTH_DEPTH: corridor-side row depth
- SOUTH_DEPTH: non-corridor row depth (the deeper side)
- STAIR_WIDTH / STAIR_DEPTH: footprint of one external stairwell (10' x 25')
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

MODULE_WIDTH = 3.7846
NORTH_DEPTH = 9.4488
SOUTH_DEPTH = 11.0998
STAIR_WIDTH = 3.048
STAIR_DEPTH = 7.62

# Selectable floor-to-floor heights
FLOOR_HEIGHTS: tuple[float, ...] = (3.175, 3.479, 3.784)
MAX_HEIGHT = 40.0
MAX_WIDTH = 20 * MODULE_WIDTH


class SuiteType(str, Enum):
    """Residential suite variants."""

    STUDIO = "studio"
    ONE_BED = "one-bed"
    TWO_BED = "two-bed"
    THREE_BED = "three-bed"

    @property
    def descriptor(self) -> SuiteDescriptor:
        return SUITE_CATALOG[self]

    @property
    def module_count(self) -> int:
        return SUITE_CATALOG[self].module_count


class Row(str, Enum):
    """The two module rows of a floor, split by the corridor."""

    NORTH = "north"  # corridor side
    SOUTH = "south"

    @property
    def depth(self) -> float:
        """Module depth of this row (m)."""
        return NORTH_DEPTH if self is Row.NORTH else SOUTH_DEPTH


class UnitCodes(BaseModel):
    """Prefabricated unit codes for a suite, by row position."""

    model_config = ConfigDict(frozen=True)

    no_corridor: str
    corridor: str

    def for_row(self, row: Row) -> str:
        return self.corridor if row is Row.NORTH else self.no_corridor


class SuiteDescriptor(BaseModel):
    """Read-only catalog entry for a suite or core element."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    module_count: int = Field(default=1, ge=1, le=4)
    color: str = Field(description="Display color, hex")
    codes: UnitCodes


SUITE_CATALOG: dict[SuiteType, SuiteDescriptor] = {
    SuiteType.STUDIO: SuiteDescriptor(
        id="studio", name="Studio", module_count=1, color="#006F37",
        codes=UnitCodes(no_corridor="U01", corridor="U02"),
    ),
    SuiteType.ONE_BED: SuiteDescriptor(
        id="one-bed", name="1 Bedroom", module_count=2, color="#ABD268",
        codes=UnitCodes(no_corridor="U03+U07", corridor="U05+U08"),
    ),
    SuiteType.TWO_BED: SuiteDescriptor(
        id="two-bed", name="2 Bedroom", module_count=3, color="#69BA7F",
        codes=UnitCodes(no_corridor="U04+U07+U09", corridor="U06+U08+U10"),
    ),
    SuiteType.THREE_BED: SuiteDescriptor(
        id="three-bed", name="3 Bedroom", module_count=4, color="#D0FFDD",
        codes=UnitCodes(
            no_corridor="U07+U09+U11+U13", corridor="U08+U10+U12+U14",
        ),
    ),
}

ELEVATOR_INFO = SuiteDescriptor(
    id="elevator", name="Elevator", module_count=1, color="#FF7518",
    codes=UnitCodes(no_corridor="N/A", corridor="U16"),
)

STAIR_INFO = SuiteDescriptor(
    id="stair", name="Stair", color="#FFC885",
    codes=UnitCodes(no_corridor="U18", corridor="U18"),
)

# Allocation priority: largest suites first
PRIORITY_ORDER: tuple[SuiteType, ...] = (
    SuiteType.THREE_BED,
    SuiteType.TWO_BED,
    SuiteType.ONE_BED,
    SuiteType.STUDIO,
)


def largest_fitting(capacity: int) -> SuiteType | None:
    """Largest suite type whose module count fits in ``capacity``."""
    return next(
        (t for t in PRIORITY_ORDER if t.module_count <= capacity), None
    )
