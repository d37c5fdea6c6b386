# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Investment Return Analysis API

Single public entry point of the engine. `compute` is pure: the same input and
cost model always produce an equal result, and nothing is cached or shared
between calls.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from ..core.calculations import FinancialCalculations
from ..core.cost_model import CostModel
from ..costs import (
    ExitCostCalculator,
    HoldingCostCalculator,
    TransactionCostCalculator,
)
from ..debt import FinancingAmortizer
from ..valuation import BreakEvenSolver, ReturnMetricsCalculator
from .alternatives import AlternativeInvestmentComparator
from .inputs import InvestmentInput
from .results import CalculationResult, FinancingSummary, StageValue
from .sensitivity import SensitivityAnalyzer

logger = logging.getLogger(__name__)


def compute(
    investment: Union[InvestmentInput, Mapping[str, Any]],
    cost_model: Optional[CostModel] = None,
) -> Optional[CalculationResult]:
    """
    Run the full return analysis for one parcel.

    Workflow:
      1) Validate the input against the zoning ladder
      2) Project the sale value from the target stage benchmark
      3) Entry, holding and exit costs, then net profit
      4) Return metrics and break-even price
      5) Financing summary, holding-period sensitivity, alternative assets

    Args:
        investment: Input model, or a mapping of primitive values with
            snake_case or camelCase keys.
        cost_model: Rates, fees and benchmarks; the standard regime when omitted.

    Returns:
        CalculationResult, or None when the input is insufficient: a
        non-positive price, area or holding period, an unknown zoning stage,
        a target stage that does not come after the current one, or figures
        too large to represent as floats.
    """
    cost_model = cost_model or CostModel()

    if not isinstance(investment, InvestmentInput):
        try:
            investment = InvestmentInput.model_validate(investment)
        except ValidationError as e:
            logger.debug(f"Rejected investment input: {e}")
            return None

    errors = investment.validation_errors(cost_model.zoning)
    if errors:
        logger.debug(f"Rejected investment input: {'; '.join(errors)}")
        return None

    price = investment.purchase_price
    area = investment.plot_area_sqm
    years = investment.holding_years
    zoning = cost_model.zoning

    # Step 1: Valuation from the benchmark ladder
    target_price_per_sqm = zoning.price_per_sqm(investment.target_zoning)
    projected_value = target_price_per_sqm * area
    path = zoning.path(investment.current_zoning, investment.target_zoning)
    stages = tuple(
        StageValue(
            stage=benchmark.stage,
            label=benchmark.label,
            price_per_sqm=benchmark.price_per_sqm,
            value=benchmark.price_per_sqm * area,
            is_current=i == 0,
            is_target=i == len(path) - 1,
        )
        for i, benchmark in enumerate(path)
    )

    # Step 2: Cost waterfall
    exit_calculator = ExitCostCalculator(settings=cost_model.exit)
    transaction = TransactionCostCalculator(settings=cost_model.transaction).calculate(
        price
    )
    holding = HoldingCostCalculator(settings=cost_model.holding).calculate(
        price, area, investment.current_zoning
    )
    exit_costs = exit_calculator.calculate(price, projected_value)
    net_profit = exit_calculator.net_profit(
        price, projected_value, transaction, holding, years
    )
    total_holding_costs = holding.cash_costs(years)
    if not all(
        math.isfinite(value)
        for value in (projected_value, transaction.total_with_purchase, net_profit)
    ):
        logger.debug(
            f"Rejected investment input: projected value {projected_value} or "
            f"costs overflow the float range"
        )
        return None

    # Step 3: Returns and break-even
    metrics_calculator = ReturnMetricsCalculator(
        inflation_rate=cost_model.market.inflation_rate
    )
    returns = metrics_calculator.calculate(price, projected_value, net_profit, years)
    break_even = BreakEvenSolver(
        exit_calculator=exit_calculator, settings=cost_model.solver
    ).solve(price, area, transaction, holding, years)
    total_investment = transaction.total_with_purchase + total_holding_costs
    true_roi_percent = FinancialCalculations.round_percent(
        FinancialCalculations.safe_ratio(net_profit, total_investment)
    )
    safety_margin = None
    safety_margin_percent = None
    if break_even.price < projected_value:
        safety_margin = projected_value - break_even.price
        safety_margin_percent = FinancialCalculations.round_percent(
            1 - break_even.price / projected_value
        )

    # Step 4: Financing
    financing = None
    if investment.financing is not None:
        terms = investment.financing
        loan = FinancingAmortizer(
            principal=terms.loan_amount(price),
            annual_rate_percent=terms.interest_rate_pct,
            years=terms.loan_years,
        ).summary
        financing = FinancingSummary(
            down_payment=price - loan.principal,
            loan_amount=loan.principal,
            interest_rate_pct=terms.interest_rate_pct,
            loan_years=terms.loan_years,
            monthly_payment=loan.monthly_payment,
            total_loan_payments=loan.total_payments,
            total_interest=loan.total_interest,
        )

    # Step 5: Sensitivity and alternatives
    sensitivity = SensitivityAnalyzer(
        exit_calculator=exit_calculator,
        metrics_calculator=metrics_calculator,
        settings=cost_model.sensitivity,
    ).analyze(investment, projected_value, transaction, holding)
    alternatives = AlternativeInvestmentComparator(settings=cost_model.market).compare(
        price, net_profit, years
    )

    result = CalculationResult(
        inputs=investment,
        current_price_per_sqm=FinancialCalculations.safe_ratio(price, area),
        target_price_per_sqm=target_price_per_sqm,
        projected_value=projected_value,
        roi_percent=returns.roi_percent,
        stages=stages,
        transaction=transaction,
        holding=holding,
        total_holding_costs=total_holding_costs,
        exit=exit_costs,
        net_profit=net_profit,
        returns=returns,
        true_roi_percent=true_roi_percent,
        break_even=break_even,
        safety_margin=safety_margin,
        safety_margin_percent=safety_margin_percent,
        financing=financing,
        sensitivity=sensitivity,
        alternatives=alternatives,
    )
    logger.debug(
        f"Computed {investment.current_zoning.value} -> {investment.target_zoning.value}: "
        f"projected {projected_value:,.0f}, net profit {net_profit:,.0f}"
    )
    return result
