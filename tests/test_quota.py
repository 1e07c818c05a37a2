"""Tests for the suite quota calculator."""

import pytest

from stack_configurator.generators.quota import (
    compute_quotas,
    expand_quotas,
    quota_modules,
)
from stack_configurator.models import PRIORITY_ORDER, SuiteType


class TestComputeQuotas:
    def test_all_studios(self):
        quotas = compute_quotas({SuiteType.STUDIO: 100}, 75)
        assert quotas == {
            SuiteType.THREE_BED: 0,
            SuiteType.TWO_BED: 0,
            SuiteType.ONE_BED: 0,
            SuiteType.STUDIO: 75,
        }

    def test_all_three_bed_rounds_down(self):
        quotas = compute_quotas({SuiteType.THREE_BED: 100}, 75)
        assert quotas[SuiteType.THREE_BED] == 18
        assert quota_modules(quotas) == 72

    def test_even_mix_undershoots(self):
        pct = {t: 25 for t in SuiteType}
        quotas = compute_quotas(pct, 75)
        assert quotas[SuiteType.THREE_BED] == 4   # 18.75 / 4
        assert quotas[SuiteType.TWO_BED] == 6     # 18.75 / 3
        assert quotas[SuiteType.ONE_BED] == 9     # 18.75 / 2
        assert quotas[SuiteType.STUDIO] == 18
        assert quota_modules(quotas) == 70

    def test_targets_use_nominal_total(self):
        # Each type is computed against the full total, not a remainder
        quotas = compute_quotas(
            {SuiteType.THREE_BED: 100, SuiteType.STUDIO: 100}, 75
        )
        assert quotas[SuiteType.THREE_BED] == 18
        assert quotas[SuiteType.STUDIO] == 75

    def test_missing_types_are_zero(self):
        quotas = compute_quotas({}, 75)
        assert all(n == 0 for n in quotas.values())

    def test_priority_order(self):
        quotas = compute_quotas({SuiteType.STUDIO: 50}, 10)
        assert list(quotas) == list(PRIORITY_ORDER)

    @pytest.mark.parametrize("suite_type", list(SuiteType))
    def test_monotonic_in_own_percentage(self, suite_type):
        others = {t: 10.0 for t in SuiteType if t != suite_type}
        previous = -1
        for pct in range(0, 101, 5):
            quotas = compute_quotas({**others, suite_type: pct}, 75)
            assert quotas[suite_type] >= previous
            previous = quotas[suite_type]


class TestExpandQuotas:
    def test_priority_order_largest_first(self):
        suites = expand_quotas({
            SuiteType.STUDIO: 2,
            SuiteType.ONE_BED: 1,
            SuiteType.THREE_BED: 1,
        })
        assert suites == [
            SuiteType.THREE_BED,
            SuiteType.ONE_BED,
            SuiteType.STUDIO,
            SuiteType.STUDIO,
        ]

    def test_empty(self):
        assert expand_quotas({}) == []
