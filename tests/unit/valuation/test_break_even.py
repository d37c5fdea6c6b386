# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for the break-even sale price solver.
"""

import logging
import math

import pytest

from landvest.core.primitives import (
    HoldingCostSettings,
    SolverSettings,
    ZoningStageEnum,
)
from landvest.costs import (
    ExitCostCalculator,
    HoldingCostCalculator,
    TransactionCostCalculator,
)
from landvest.valuation import BreakEvenSolver


def solve(price, area, zoning=ZoningStageEnum.AGRICULTURAL, years=5, **solver_kwargs):
    transaction = TransactionCostCalculator().calculate(price)
    holding_settings = solver_kwargs.pop("holding_settings", HoldingCostSettings())
    holding = HoldingCostCalculator(settings=holding_settings).calculate(
        price, area, zoning
    )
    solver = BreakEvenSolver(settings=SolverSettings(**solver_kwargs))
    return solver.solve(price, area, transaction, holding, years), transaction, holding


class TestReferenceScenario:
    def test_closed_form_match(self):
        result, _, _ = solve(2_500_000.0, 1_000.0)
        # Above the purchase price net = 0.365 * gain - 243,917
        expected = 2_500_000.0 + 243_917.0 / 0.365
        assert result.converged
        assert result.price == pytest.approx(expected, abs=100)
        assert result.price_per_sqm == pytest.approx(result.price / 1_000.0)

    def test_below_projected_value(self):
        result, _, _ = solve(2_500_000.0, 1_000.0)
        assert result.price < 3_500_000.0

    def test_above_sunk_costs(self):
        result, transaction, holding = solve(2_500_000.0, 1_000.0)
        assert result.price > transaction.total_with_purchase + holding.cash_costs(5)


class TestConvergence:
    @pytest.mark.parametrize("price", [50_000.0, 750_000.0, 2_500_000.0, 40_000_000.0])
    @pytest.mark.parametrize("area", [100.0, 1_000.0, 25_000.0])
    @pytest.mark.parametrize(
        "zoning", [ZoningStageEnum.AGRICULTURAL, ZoningStageEnum.DEVELOPER_TENDER]
    )
    def test_net_profit_zero_within_tolerance(self, price, area, zoning):
        result, transaction, holding = solve(price, area, zoning)
        net = ExitCostCalculator().net_profit(
            price, result.price, transaction, holding, 5
        )
        assert result.converged
        assert abs(net) <= 100
        assert result.residual == pytest.approx(net)

    @pytest.mark.parametrize(
        "price, area", [(1.0, 1_000.0), (5.0, 1_000.0), (1_000.0, 1_000_000.0)]
    )
    def test_fixed_costs_dominate_cheap_parcel(self, price, area):
        result, transaction, holding = solve(price, area)
        assert result.converged
        assert abs(result.residual) <= 100
        # Fees and holding costs alone exceed ten times the price
        assert result.price > 10 * price
        assert result.price > transaction.total_with_purchase + holding.cash_costs(5)

    def test_bracket_expands_for_heavy_holding_costs(self):
        result, _, _ = solve(
            100_000.0,
            10_000.0,
            years=15,
            holding_settings=HoldingCostSettings(management_fee_per_sqm=50.0),
        )
        assert result.converged
        assert result.price > 10 * 100_000.0


class TestLowConfidence:
    def test_iteration_cap_returns_flagged_estimate(self, caplog):
        with caplog.at_level(logging.WARNING, logger="landvest.valuation.break_even"):
            result, _, _ = solve(2_500_000.0, 1_000.0, max_iterations=2, tolerance=1.0)
        assert not result.converged
        assert result.price > 2_500_000.0
        assert "Break-even search stopped" in caplog.text

    def test_extreme_magnitudes_return_finite_estimate(self):
        result, _, _ = solve(1e308, 1e305)
        assert math.isfinite(result.price)
        assert result.price > 1e308

    def test_no_costs_breaks_even_at_purchase_price(self):
        from landvest.core.primitives import ExitCostSettings, TransactionCostSettings
        from landvest.costs import HoldingCosts

        transaction = TransactionCostCalculator(
            settings=TransactionCostSettings(
                purchase_tax_rate=0, legal_fee_rate=0, appraisal_fee=0, registration_fee=0
            )
        ).calculate(1_000_000.0)
        holding = HoldingCosts(
            levy_per_sqm=0,
            annual_levy=0,
            management=0,
            opportunity_cost=0,
            total_annual_cash=0,
            total_annual_with_opportunity=0,
        )
        solver = BreakEvenSolver(
            exit_calculator=ExitCostCalculator(
                settings=ExitCostSettings(agent_commission_rate=0.0)
            )
        )
        result = solver.solve(1_000_000.0, 500.0, transaction, holding, 5)
        assert result.converged
        assert result.price == 1_000_000.0
