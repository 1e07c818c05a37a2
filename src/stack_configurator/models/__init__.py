"""Configuration and layout data models."""

from stack_configurator.models.suites import (
    ELEVATOR_INFO,
    FLOOR_HEIGHTS,
    MAX_HEIGHT,
    MAX_WIDTH,
    MODULE_WIDTH,
    NORTH_DEPTH,
    PRIORITY_ORDER,
    SOUTH_DEPTH,
    STAIR_DEPTH,
    STAIR_INFO,
    STAIR_WIDTH,
    SUITE_CATALOG,
    Row,
    SuiteDescriptor,
    SuiteType,
    UnitCodes,
)
from stack_configurator.models.project import (
    Project,
    ProjectParameters,
    SuiteMixRequest,
)
from stack_configurator.models.layout import (
    ELEVATOR_ID,
    BuildingLayout,
    CoreModule,
    FloorPlan,
    ModuleSlot,
    SuiteInstance,
    elevator_index,
)

__all__ = [
    "ELEVATOR_INFO",
    "FLOOR_HEIGHTS",
    "MAX_HEIGHT",
    "MAX_WIDTH",
    "MODULE_WIDTH",
    "NORTH_DEPTH",
    "PRIORITY_ORDER",
    "SOUTH_DEPTH",
    "STAIR_DEPTH",
    "STAIR_INFO",
    "STAIR_WIDTH",
    "SUITE_CATALOG",
    "Row",
    "SuiteDescriptor",
    "SuiteType",
    "UnitCodes",
    "Project",
    "ProjectParameters",
    "SuiteMixRequest",
    "ELEVATOR_ID",
    "BuildingLayout",
    "CoreModule",
    "FloorPlan",
    "ModuleSlot",
    "SuiteInstance",
    "elevator_index",
]
