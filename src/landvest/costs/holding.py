# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Annual carrying costs of holding a parcel."""

from __future__ import annotations

from pydantic import Field

from ..core.primitives import HoldingCostSettings, Model, ZoningStageEnum


class HoldingCosts(Model):
    """
    Annual holding costs for one parcel.

    Two totals are exposed and must not be mixed up:

    - `total_annual_cash` is money actually paid each year (levy and
      management) and is the only figure used in profit calculations.
    - `total_annual_with_opportunity` adds the notional return forgone on the
      purchase price. It is informational only.
    """

    levy_per_sqm: float
    annual_levy: float
    management: float
    opportunity_cost: float
    total_annual_cash: float
    total_annual_with_opportunity: float

    def cash_costs(self, years: float) -> float:
        """Cash holding costs over `years` (0 for a non-positive horizon)."""
        return self.total_annual_cash * max(0.0, years)


class HoldingCostCalculator(Model):
    settings: HoldingCostSettings = Field(default_factory=HoldingCostSettings)

    def calculate(
        self,
        purchase_price: float,
        plot_area_sqm: float,
        zoning_stage: ZoningStageEnum,
    ) -> HoldingCosts:
        """
        Calculate annual holding costs.

        The levy is assessed on the zoning stage the parcel is held at, i.e.
        the current stage, not the target.
        """
        levy_per_sqm = self.settings.levy_rate(zoning_stage)
        annual_levy = levy_per_sqm * plot_area_sqm
        management = self.settings.management_fee_per_sqm * plot_area_sqm
        opportunity_cost = purchase_price * self.settings.opportunity_cost_rate
        total_annual_cash = annual_levy + management
        return HoldingCosts(
            levy_per_sqm=levy_per_sqm,
            annual_levy=annual_levy,
            management=management,
            opportunity_cost=opportunity_cost,
            total_annual_cash=total_annual_cash,
            total_annual_with_opportunity=total_annual_cash + opportunity_cost,
        )
