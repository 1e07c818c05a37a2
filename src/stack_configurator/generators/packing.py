"""Floor bin-packer.

Assigns suites to floors before any position is chosen:
1. Sort suites largest first (stable, so ties keep catalog priority)
2. First fit: first floor with enough remaining capacity
3. Fallback: first floor with any capacity left, even if too small
   (that floor is then overdrawn and the placer will drop something)
4. Gap-fill: top up every floor with the largest suite that fits until
   its capacity is exactly used

A greedy heuristic, not an optimal packer.
"""

from __future__ import annotations

import logging

from stack_configurator.models.suites import SuiteType, largest_fitting

logger = logging.getLogger(__name__)


def first_fit(
    suites: list[SuiteType],
    floor_count: int,
    per_floor_capacity: int,
) -> tuple[list[list[SuiteType]], list[int]]:
    """First-fit-descending assignment of suites to floors.

    Returns:
        (per-floor suite lists, remaining capacity per floor). Remaining
        capacity can be negative when the fallback overdraws a floor.
    """
    floors: list[list[SuiteType]] = [[] for _ in range(floor_count)]
    capacity = [per_floor_capacity] * floor_count

    ordered = sorted(suites, key=lambda s: s.module_count, reverse=True)
    for suite in ordered:
        target = next(
            (i for i in range(floor_count) if capacity[i] >= suite.module_count),
            None,
        )
        if target is None:
            target = next((i for i in range(floor_count) if capacity[i] > 0), None)
            if target is not None:
                logger.debug(
                    "Overdrawing floor %d with %s (capacity %d)",
                    target, suite.value, capacity[target],
                )
        if target is None:
            logger.warning("No capacity left for %s suite, dropped", suite.value)
            continue
        floors[target].append(suite)
        capacity[target] -= suite.module_count

    return floors, capacity


def gap_fill(
    floors: list[list[SuiteType]],
    capacity: list[int],
) -> list[list[SuiteType]]:
    """Fill leftover floor capacity with the largest suites that fit.

    Mutates ``floors`` and ``capacity``; overdrawn floors stay negative.
    """
    for i, remaining in enumerate(capacity):
        while remaining > 0:
            filler = largest_fitting(remaining)
            floors[i].append(filler)
            remaining -= filler.module_count
        capacity[i] = remaining
    return floors


def pack_floors(
    suites: list[SuiteType],
    floor_count: int,
    per_floor_capacity: int,
) -> list[list[SuiteType]]:
    """Assign suites to floors and fill every floor completely.

    Args:
        suites: Requested suites (one entry per suite).
        floor_count: Number of floors.
        per_floor_capacity: Residential modules per floor.

    Returns:
        One suite list per floor, in physical floor order. Lists are typed
        but not yet positioned.
    """
    floors, capacity = first_fit(suites, floor_count, per_floor_capacity)
    requested = sum(len(f) for f in floors)
    gap_fill(floors, capacity)
    filled = sum(len(f) for f in floors) - requested
    if filled:
        logger.info("Gap-fill added %d suites across %d floors", filled, floor_count)
    return floors
