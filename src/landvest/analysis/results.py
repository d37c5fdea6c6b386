# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calculation result snapshot.

A `CalculationResult` is a value: it is built fresh by `compute` for every
input, never mutated, and has no identity beyond its contents.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from ..core.primitives import Model, ZoningStageEnum
from ..costs import ExitCosts, HoldingCosts, TransactionCosts
from ..valuation import BreakEvenResult, ReturnMetrics
from .alternatives import AlternativeComparison
from .inputs import InvestmentInput
from .sensitivity import SensitivityRow


class StageValue(Model):
    """Parcel value at one zoning stage on the path from current to target."""

    stage: ZoningStageEnum
    label: str
    price_per_sqm: float
    value: float
    is_current: bool = False
    is_target: bool = False


class FinancingSummary(Model):
    """
    Acquisition loan figures for the input's financing terms.

    For a loan with positive principal, rate and term,
    total_loan_payments = monthly_payment * loan_years * 12 and
    total_interest = total_loan_payments - loan_amount. Otherwise every
    repayment figure is zero.
    """

    down_payment: float
    loan_amount: float
    interest_rate_pct: float
    loan_years: float
    monthly_payment: float
    total_loan_payments: float
    total_interest: float


class CalculationResult(Model):
    """
    Every figure derived from one `InvestmentInput` and `CostModel`.

    Monetary values are in the input currency and unrounded; `*_percent`
    fields are whole-number percentages.

    `true_roi_percent` is net profit over the total investment (purchase,
    entry and holding costs). The safety margin is how far the break-even
    price sits below the projected value; it is None when break-even is not
    below the projection.
    """

    inputs: InvestmentInput

    # Valuation
    current_price_per_sqm: float
    target_price_per_sqm: float
    projected_value: float
    roi_percent: int
    stages: Tuple[StageValue, ...]

    # Cost waterfall
    transaction: TransactionCosts
    holding: HoldingCosts
    total_holding_costs: float
    exit: ExitCosts
    net_profit: float

    # Returns
    returns: ReturnMetrics
    true_roi_percent: int
    break_even: BreakEvenResult
    safety_margin: Optional[float] = None
    safety_margin_percent: Optional[int] = None

    # Financing, sensitivity and benchmarks
    financing: Optional[FinancingSummary] = None
    sensitivity: Tuple[SensitivityRow, ...] = ()
    alternatives: Optional[AlternativeComparison] = None

    @property
    def holding_years(self) -> float:
        return self.inputs.holding_years

    @property
    def gross_profit(self) -> float:
        return self.projected_value - self.inputs.purchase_price

    @property
    def total_investment(self) -> float:
        """Purchase price plus entry costs plus cash holding costs."""
        return self.transaction.total_with_purchase + self.total_holding_costs

    def to_dict(self) -> Dict[str, Any]:
        """JSON-compatible representation for rendering or report generation."""
        return self.model_dump(mode="json")
