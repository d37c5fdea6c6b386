# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Landvest testing.

Provides the reference scenario (2.5M purchase of 1,000 sqm of agricultural
land rezoned to a building permit over five years) and helpers for building
inputs without repeating every field.
"""

from __future__ import annotations

from typing import Optional

import pytest

from landvest import (
    CalculationResult,
    CostModel,
    FinancingTerms,
    InvestmentInput,
    ZoningStageEnum,
    compute,
)


def create_investment(
    purchase_price: float = 2_500_000.0,
    plot_area_sqm: float = 1_000.0,
    current_zoning: ZoningStageEnum = ZoningStageEnum.AGRICULTURAL,
    target_zoning: ZoningStageEnum = ZoningStageEnum.BUILDING_PERMIT,
    holding_years: float = 5.0,
    financing: Optional[FinancingTerms] = None,
) -> InvestmentInput:
    """
    Create an investment input for testing.

    Example:
        >>> create_investment(holding_years=7).holding_years
        7.0
    """
    return InvestmentInput(
        purchase_price=purchase_price,
        plot_area_sqm=plot_area_sqm,
        current_zoning=current_zoning,
        target_zoning=target_zoning,
        holding_years=holding_years,
        financing=financing,
    )


@pytest.fixture
def cost_model() -> CostModel:
    """Standard cost regime."""
    return CostModel()


@pytest.fixture
def scenario_input() -> InvestmentInput:
    """Reference scenario without financing."""
    return create_investment()


@pytest.fixture
def financed_input() -> InvestmentInput:
    """Reference scenario with 30% down, 4.5% over 15 years."""
    return create_investment(
        financing=FinancingTerms(
            down_payment_pct=30.0, interest_rate_pct=4.5, loan_years=15
        )
    )


@pytest.fixture
def scenario_result(
    scenario_input: InvestmentInput, cost_model: CostModel
) -> CalculationResult:
    result = compute(scenario_input, cost_model)
    assert result is not None
    return result


@pytest.fixture
def financed_result(
    financed_input: InvestmentInput, cost_model: CostModel
) -> CalculationResult:
    result = compute(financed_input, cost_model)
    assert result is not None
    return result


@pytest.fixture
def make_investment():
    """Factory fixture exposing `create_investment` to tests."""
    return create_investment
