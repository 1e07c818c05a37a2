"""Suite quota calculator.

Converts percentage targets into whole suite counts. Every type's target
is taken against the nominal residential total, not against what earlier
(larger) types left over, and counts are always rounded down. The quotas
may therefore undershoot the total; gap-fill in the bin-packer absorbs the
difference.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from stack_configurator.models.suites import PRIORITY_ORDER, SuiteType


def compute_quotas(
    percentages: Mapping[SuiteType, float],
    total_residential_modules: int,
) -> dict[SuiteType, int]:
    """Number of suites of each type to request.

    Args:
        percentages: Desired share of residential modules per type (0-100).
            Missing types count as 0%.
        total_residential_modules: Residential capacity of the building.

    Returns:
        Suite counts keyed by type, in priority order (largest first).
    """
    quotas: dict[SuiteType, int] = {}
    for suite_type in PRIORITY_ORDER:
        pct = percentages.get(suite_type, 0.0)
        target_modules = total_residential_modules * (pct / 100)
        quotas[suite_type] = math.floor(target_modules / suite_type.module_count)
    return quotas


def expand_quotas(quotas: Mapping[SuiteType, int]) -> list[SuiteType]:
    """Flatten quotas into one entry per suite, in priority order."""
    suites: list[SuiteType] = []
    for suite_type in PRIORITY_ORDER:
        suites.extend([suite_type] * quotas.get(suite_type, 0))
    return suites


def quota_modules(quotas: Mapping[SuiteType, int]) -> int:
    """Total modules consumed by a set of quotas."""
    return sum(t.module_count * n for t, n in quotas.items())
