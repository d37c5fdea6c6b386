# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Holding-period sensitivity.

Re-runs the profit and return calculations for a fixed list of alternative
holding periods, keeping the projected sale value constant. Longer holds
spread the same appreciation over more years and accumulate more carrying
cost, so annualised returns fall as the horizon grows.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import Field

from ..core.primitives import Model, SensitivitySettings
from ..costs import ExitCostCalculator, HoldingCosts, TransactionCosts
from ..debt import FinancingAmortizer
from ..valuation import ReturnMetrics, ReturnMetricsCalculator
from .inputs import InvestmentInput


class SensitivityRow(Model):
    """
    Results for one candidate holding period.

    Attributes:
        years: Candidate holding period
        holding_costs: Cash holding costs over the period
        net_profit: Net profit after entry, holding and exit costs
        returns: Gross, net and real CAGR over the period
        net_with_financing: Net profit after loan interest; None without financing
        is_selected: Display marker, True for the input's own holding period
    """

    years: float
    holding_costs: float
    net_profit: float
    returns: ReturnMetrics
    net_with_financing: Optional[float] = None
    is_selected: bool = False


class SensitivityAnalyzer(Model):
    exit_calculator: ExitCostCalculator = Field(default_factory=ExitCostCalculator)
    metrics_calculator: ReturnMetricsCalculator = Field(
        default_factory=ReturnMetricsCalculator
    )
    settings: SensitivitySettings = Field(default_factory=SensitivitySettings)

    def analyze(
        self,
        investment: InvestmentInput,
        projected_value: float,
        transaction: TransactionCosts,
        holding: HoldingCosts,
    ) -> Tuple[SensitivityRow, ...]:
        return tuple(
            self.row(investment, years, projected_value, transaction, holding)
            for years in self.settings.holding_years
        )

    def row(
        self,
        investment: InvestmentInput,
        years: float,
        projected_value: float,
        transaction: TransactionCosts,
        holding: HoldingCosts,
    ) -> SensitivityRow:
        price = investment.purchase_price
        net_profit = self.exit_calculator.net_profit(
            price, projected_value, transaction, holding, years
        )
        returns = self.metrics_calculator.calculate(
            price, projected_value, net_profit, years
        )

        net_with_financing = None
        if investment.financing is not None:
            terms = investment.financing
            # Loan is assumed repaid on sale: amortize over the shorter horizon.
            loan = FinancingAmortizer(
                principal=terms.loan_amount(price),
                annual_rate_percent=terms.interest_rate_pct,
                years=min(terms.loan_years, years),
            )
            net_with_financing = net_profit - loan.summary.total_interest

        return SensitivityRow(
            years=years,
            holding_costs=holding.cash_costs(years),
            net_profit=net_profit,
            returns=returns,
            net_with_financing=net_with_financing,
            is_selected=years == investment.holding_years,
        )
