"""Capacity model.

Derives the discrete counts the placement engine works with from the
continuous envelope inputs:
- modules per row (single side)
- floor count
- residential capacity per floor (one slot is reserved for the elevator)

All rounding is half away from zero, so 12.5 modules becomes 13 on every
platform. Python's built-in round() is banker's rounding and is not used.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from stack_configurator.models.project import ProjectParameters
from stack_configurator.models.suites import (
    MODULE_WIDTH,
    NORTH_DEPTH,
    SOUTH_DEPTH,
    STAIR_DEPTH,
    STAIR_WIDTH,
)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class Capacity:
    """Discrete building capacity."""

    single_side_modules: int
    floor_count: int

    @property
    def per_floor_capacity(self) -> int:
        """Residential slots per floor (both rows minus the elevator)."""
        return self.single_side_modules * 2 - 1

    @property
    def total_residential_modules(self) -> int:
        return self.per_floor_capacity * self.floor_count


def compute_capacity(
    width: float,
    height: float,
    floor_height: float,
    module_width: float = MODULE_WIDTH,
) -> Capacity:
    """Compute building capacity from envelope dimensions.

    Derived counts are clamped to a minimum of 1; inputs are assumed to be
    positive numbers.

    Args:
        width: Building width along the rows (m).
        height: Overall building height (m).
        floor_height: Floor-to-floor height (m).
        module_width: Structural module width (m).

    Returns:
        Capacity with modules per row and floor count.
    """
    return Capacity(
        single_side_modules=max(1, round_half_away(width / module_width)),
        floor_count=max(1, round_half_away(height / floor_height)),
    )


@dataclass(frozen=True)
class EnvelopeMetrics:
    """Actual (module-snapped) envelope dimensions and areas."""

    width: float
    depth: float
    height: float
    floor_count: int
    modules_per_floor: int
    total_modules: int
    footprint_area: float
    total_area: float


def compute_envelope(params: ProjectParameters) -> EnvelopeMetrics:
    """Snap the requested envelope to whole modules and floors.

    The footprint includes the two external stairwells when enabled.
    """
    capacity = compute_capacity(params.width, params.height, params.floor_height)
    n = capacity.single_side_modules
    floors = capacity.floor_count

    width = n * MODULE_WIDTH
    depth = SOUTH_DEPTH + NORTH_DEPTH
    footprint = width * depth
    if params.include_stairs:
        footprint += 2 * (STAIR_WIDTH * STAIR_DEPTH)

    return EnvelopeMetrics(
        width=width,
        depth=depth,
        height=floors * params.floor_height,
        floor_count=floors,
        modules_per_floor=n * 2,
        total_modules=n * 2 * floors,
        footprint_area=footprint,
        total_area=footprint * floors,
    )


def snap_height(height: float, floor_height: float) -> float:
    """Snap a building height to a whole number of floors."""
    floors = max(1, round_half_away(height / floor_height))
    return floors * floor_height
