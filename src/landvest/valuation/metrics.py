# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Return Metrics - ROI, CAGR and inflation-adjusted returns

Headline (gross) returns compare the projected value with the purchase price.
Net returns use the profit left after entry, holding and exit costs, and the
real return deflates the net CAGR by the configured inflation rate.
"""

from __future__ import annotations

from pydantic import Field

from ..core.calculations import FinancialCalculations
from ..core.primitives import FloatBetween0And1, Model


class ReturnMetrics(Model):
    """
    Return figures for one holding horizon.

    Decimal rates are kept unrounded for further math; the `*_percent` fields
    are whole-number percentages for display.

    Attributes:
        holding_years: Horizon the rates are annualised over
        roi_percent: Total gross ROI over the whole horizon
        cagr: Gross compound annual growth rate
        net_cagr: Annual growth of purchase price + net profit
        real_cagr: Net CAGR deflated by inflation
    """

    holding_years: float
    roi_percent: int
    cagr: float
    cagr_percent: int
    net_cagr: float
    net_cagr_percent: int
    real_cagr: float
    real_cagr_percent: int


class ReturnMetricsCalculator(Model):
    inflation_rate: FloatBetween0And1 = Field(default=0.03)

    @staticmethod
    def roi_percent(purchase_price: float, projected_value: float) -> int:
        """Total ROI as a whole-number percentage; 0 when the price is not positive."""
        ratio = FinancialCalculations.safe_ratio(
            projected_value - purchase_price, purchase_price
        )
        return FinancialCalculations.round_percent(ratio)

    def calculate(
        self,
        purchase_price: float,
        projected_value: float,
        net_profit: float,
        holding_years: float,
    ) -> ReturnMetrics:
        """
        Calculate gross, net and real returns.

        Net CAGR is computed on max(0, purchase_price + net_profit): a loss
        larger than the purchase price is reported as a -100% annual rate
        rather than an undefined power of a negative base.
        """
        cagr = FinancialCalculations.compound_annual_growth_rate(
            purchase_price, projected_value, holding_years
        )
        net_cagr = FinancialCalculations.compound_annual_growth_rate(
            purchase_price, purchase_price + net_profit, holding_years
        )
        real_cagr = FinancialCalculations.real_rate(net_cagr, self.inflation_rate)
        return ReturnMetrics(
            holding_years=holding_years,
            roi_percent=self.roi_percent(purchase_price, projected_value),
            cagr=cagr,
            cagr_percent=FinancialCalculations.round_percent(cagr),
            net_cagr=net_cagr,
            net_cagr_percent=FinancialCalculations.round_percent(net_cagr),
            real_cagr=real_cagr,
            real_cagr_percent=FinancialCalculations.round_percent(real_cagr),
        )
