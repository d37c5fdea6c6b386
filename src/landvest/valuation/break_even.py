# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Break-even sale price solver.

Exit costs depend on the sale price (levy and tax on the gain, commission on
the price), so the price at which net profit is zero has no closed form. Net
profit is continuous and strictly increasing in the sale price as long as the
combined marginal exit rate is below 100%, which `ExitCostSettings`
enforces. Above the purchase price net profit rises by at least
(1 - marginal rate) per unit of sale price, so the shortfall at the purchase
price bounds how far above it the root can lie. The solver brackets the root
with that bound and bisects.
"""

from __future__ import annotations

import logging
import sys

from pydantic import Field
from scipy.optimize import bisect

from ..core.calculations import FinancialCalculations
from ..core.primitives import Model, SolverSettings
from ..costs import ExitCostCalculator, HoldingCosts, TransactionCosts

logger = logging.getLogger(__name__)


class BreakEvenResult(Model):
    """
    Minimum sale price yielding zero net profit.

    Attributes:
        price: Break-even sale price
        price_per_sqm: Break-even price per sqm (0 when the area is not positive)
        converged: False when the estimate did not meet the solver tolerance;
            the price is then a low-confidence best estimate
        iterations: Bisection iterations used
        residual: Net profit at `price`
    """

    price: float
    price_per_sqm: float
    converged: bool
    iterations: int = 0
    residual: float = 0.0


class BreakEvenSolver(Model):
    exit_calculator: ExitCostCalculator = Field(default_factory=ExitCostCalculator)
    settings: SolverSettings = Field(default_factory=SolverSettings)

    def solve(
        self,
        purchase_price: float,
        plot_area_sqm: float,
        transaction: TransactionCosts,
        holding: HoldingCosts,
        holding_years: float,
    ) -> BreakEvenResult:
        """
        Find the break-even sale price.

        Never raises: when the root cannot be bracketed or the iteration cap
        is reached, the best estimate is returned with `converged=False`.
        """

        def net_profit(sale_price: float) -> float:
            return self.exit_calculator.net_profit(
                purchase_price, sale_price, transaction, holding, holding_years
            )

        def result(price: float, converged: bool, iterations: int) -> BreakEvenResult:
            return BreakEvenResult(
                price=price,
                price_per_sqm=FinancialCalculations.safe_ratio(price, plot_area_sqm),
                converged=converged,
                iterations=iterations,
                residual=net_profit(price),
            )

        if purchase_price <= 0:
            return result(0.0, converged=False, iterations=0)

        lower = purchase_price
        shortfall = -net_profit(lower)
        if shortfall <= 0:
            # No costs at all: selling at cost already breaks even.
            return result(lower, converged=True, iterations=0)

        marginal = self.exit_calculator.settings.marginal_rate
        upper = max(
            purchase_price * self.settings.upper_bound_multiple,
            purchase_price + 2 * shortfall / (1 - marginal),
        )
        upper = min(upper, sys.float_info.max)
        expansions = 0
        while net_profit(upper) < 0:
            if (
                expansions >= self.settings.max_bracket_expansions
                or upper >= sys.float_info.max
            ):
                logger.warning(
                    f"Break-even not bracketed below {upper:,.0f} "
                    f"after {expansions} expansions; returning low-confidence estimate"
                )
                return result(upper, converged=False, iterations=0)
            lower = upper
            upper = min(upper * 2, sys.float_info.max)
            expansions += 1

        price, info = bisect(
            net_profit,
            lower,
            upper,
            xtol=self.settings.tolerance,
            maxiter=self.settings.max_iterations,
            full_output=True,
            disp=False,
        )
        converged = (
            bool(info.converged) and abs(net_profit(price)) <= self.settings.tolerance
        )
        if not converged:
            logger.warning(
                f"Break-even search stopped after {info.iterations} iterations "
                f"at {price:,.0f} (residual {net_profit(price):,.0f})"
            )
        else:
            logger.debug(
                f"Break-even price {price:,.0f} found in {info.iterations} iterations"
            )
        return result(price, converged=converged, iterations=int(info.iterations))
