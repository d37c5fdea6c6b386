# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for AlternativeInvestmentComparator.
"""

import pytest

from landvest.analysis import AlternativeInvestmentComparator
from landvest.core.primitives import (
    BenchmarkAsset,
    ComparisonVerdictEnum,
    MarketSettings,
)


@pytest.fixture
def comparator() -> AlternativeInvestmentComparator:
    return AlternativeInvestmentComparator()


class TestFutureValues:
    def test_benchmarks_compound(self, comparator):
        comparison = comparator.compare(2_500_000.0, 121_083.0, 5)
        by_key = {b.key: b for b in comparison.benchmarks}
        assert by_key["stock"].future_value == pytest.approx(2_500_000 * 1.09**5)
        assert by_key["bank"].future_value == pytest.approx(2_500_000 * 1.045**5)
        assert by_key["bank"].profit == pytest.approx(
            by_key["bank"].future_value - 2_500_000
        )

    def test_land_future_value_is_principal_plus_profit(self, comparator):
        comparison = comparator.compare(2_500_000.0, 121_083.0, 5)
        assert comparison.land.future_value == pytest.approx(2_621_083.0)
        assert comparison.land.profit == pytest.approx(121_083.0)

    def test_zero_rate_identity(self):
        comparator = AlternativeInvestmentComparator(
            settings=MarketSettings(
                benchmark_assets=(
                    BenchmarkAsset(key="cash", label="Cash", annual_rate=0.0),
                )
            )
        )
        for years in (1, 5, 12.5):
            assert comparator.future_value(777_777.0, 0.0, years) == pytest.approx(
                777_777.0
            )
        comparison = comparator.compare(777_777.0, 0.0, 10)
        assert comparison.benchmarks[0].future_value == pytest.approx(777_777.0)

    def test_real_returns(self, comparator):
        comparison = comparator.compare(1_000_000.0, 0.0, 5)
        assert comparison.land.real_return == pytest.approx(1 / 1.03 - 1)
        stock = next(b for b in comparison.benchmarks if b.key == "stock")
        assert stock.real_return == pytest.approx(1.09 / 1.03 - 1)
        assert stock.real_return_percent == 6

    def test_land_advantage(self, comparator):
        comparison = comparator.compare(1_000_000.0, 600_000.0, 5)
        for b in comparison.benchmarks:
            assert b.land_advantage == pytest.approx(600_000.0 - b.profit)


class TestVerdict:
    def test_underperforms_all(self, comparator):
        comparison = comparator.compare(2_500_000.0, 121_083.0, 5)
        assert comparison.verdict is ComparisonVerdictEnum.UNDERPERFORMS_ALL
        assert comparison.outperformed == []

    def test_outperforms_lower_only(self, comparator):
        # Bank: ~246k profit, stock: ~539k profit on 1M over 5 years
        comparison = comparator.compare(1_000_000.0, 400_000.0, 5)
        assert comparison.verdict is ComparisonVerdictEnum.OUTPERFORMS_LOWER
        assert comparison.outperformed == ["bank"]

    def test_outperforms_all(self, comparator):
        comparison = comparator.compare(1_000_000.0, 1_000_000.0, 5)
        assert comparison.verdict is ComparisonVerdictEnum.OUTPERFORMS_ALL

    def test_tie_does_not_count_as_outperforming(self):
        comparator = AlternativeInvestmentComparator(
            settings=MarketSettings(
                benchmark_assets=(
                    BenchmarkAsset(key="cash", label="Cash", annual_rate=0.0),
                )
            )
        )
        comparison = comparator.compare(1_000.0, 0.0, 3)
        assert comparison.verdict is ComparisonVerdictEnum.UNDERPERFORMS_ALL


class TestGuards:
    @pytest.mark.parametrize("principal, years", [(0.0, 5), (-100.0, 5), (1_000.0, 0)])
    def test_no_comparison(self, comparator, principal, years):
        assert comparator.compare(principal, 100.0, years) is None

    def test_total_loss_is_minus_one_hundred_percent(self, comparator):
        comparison = comparator.compare(1_000_000.0, -2_000_000.0, 5)
        assert comparison.land.annual_rate == -1.0
        assert comparison.land.real_return == pytest.approx(-1.0)
        assert comparison.land.real_return_percent == -100
