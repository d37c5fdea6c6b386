# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Alternative investment comparison.

Answers "what if the same money had gone into an index fund or a deposit
instead?". Each benchmark asset is compounded at its configured rate for the
holding period and set against the land outcome (principal + net profit).
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from pydantic import Field

from ..core.calculations import FinancialCalculations
from ..core.primitives import ComparisonVerdictEnum, MarketSettings, Model

logger = logging.getLogger(__name__)

LAND_KEY = "land"


class AssetOutcome(Model):
    """
    Outcome of investing the principal in one asset for the holding period.

    Attributes:
        key: Asset identifier ("land" for the parcel itself)
        label: Display name
        annual_rate: Nominal annual rate as a decimal (land: its net CAGR)
        future_value: Value at the end of the holding period
        profit: future_value - principal
        real_return: Annual return after inflation, as a decimal
        real_return_percent: Real return as a whole-number percentage
        land_advantage: Land profit minus this asset's profit (0 for land)
    """

    key: str
    label: str
    annual_rate: float
    future_value: float
    profit: float
    real_return: float
    real_return_percent: int
    land_advantage: float = 0.0


class AlternativeComparison(Model):
    principal: float
    years: float
    inflation_rate: float
    land: AssetOutcome
    benchmarks: Tuple[AssetOutcome, ...]
    verdict: ComparisonVerdictEnum

    @property
    def outperformed(self) -> List[str]:
        """Keys of benchmarks the land strictly beats on future value."""
        return [
            b.key for b in self.benchmarks if self.land.future_value > b.future_value
        ]


class AlternativeInvestmentComparator(Model):
    settings: MarketSettings = Field(default_factory=MarketSettings)

    def future_value(self, principal: float, annual_rate: float, years: float) -> float:
        return FinancialCalculations.future_value(principal, annual_rate, years)

    def compare(
        self, principal: float, net_profit: float, years: float
    ) -> Optional[AlternativeComparison]:
        """
        Compare the land outcome with every configured benchmark asset.

        Args:
            principal: Amount invested (the purchase price)
            net_profit: Land net profit after all costs
            years: Holding period

        Returns:
            AlternativeComparison, or None when principal or years is not positive.
        """
        if principal <= 0 or years <= 0:
            logger.debug(
                f"Skipping alternative comparison (principal={principal}, years={years})"
            )
            return None

        inflation = self.settings.inflation_rate
        land_value = principal + net_profit
        land_rate = FinancialCalculations.compound_annual_growth_rate(
            principal, land_value, years
        )
        land_real = FinancialCalculations.real_rate(land_rate, inflation)
        land = AssetOutcome(
            key=LAND_KEY,
            label="This parcel",
            annual_rate=land_rate,
            future_value=land_value,
            profit=net_profit,
            real_return=land_real,
            real_return_percent=FinancialCalculations.round_percent(land_real),
        )

        benchmarks = []
        for asset in self.settings.benchmark_assets:
            value = self.future_value(principal, asset.annual_rate, years)
            real = FinancialCalculations.real_rate(asset.annual_rate, inflation)
            benchmarks.append(
                AssetOutcome(
                    key=asset.key,
                    label=asset.label,
                    annual_rate=asset.annual_rate,
                    future_value=value,
                    profit=value - principal,
                    real_return=real,
                    real_return_percent=FinancialCalculations.round_percent(real),
                    land_advantage=net_profit - (value - principal),
                )
            )

        return AlternativeComparison(
            principal=principal,
            years=years,
            inflation_rate=inflation,
            land=land,
            benchmarks=tuple(benchmarks),
            verdict=self._verdict(land, benchmarks),
        )

    @staticmethod
    def _verdict(
        land: AssetOutcome, benchmarks: List[AssetOutcome]
    ) -> ComparisonVerdictEnum:
        beaten = [b for b in benchmarks if land.future_value > b.future_value]
        if len(beaten) == len(benchmarks):
            return ComparisonVerdictEnum.OUTPERFORMS_ALL
        if beaten:
            return ComparisonVerdictEnum.OUTPERFORMS_LOWER
        return ComparisonVerdictEnum.UNDERPERFORMS_ALL
