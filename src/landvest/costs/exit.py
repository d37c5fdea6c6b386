# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sale-side costs and net profit.

The gain on sale is taxed in two layers: the betterment levy takes a share of
the gross gain, and capital gains tax applies to what remains. The agent
commission is charged on the full sale price, whether or not there is a gain.
"""

from __future__ import annotations

from pydantic import Field

from ..core.primitives import ExitCostSettings, Model
from .holding import HoldingCosts
from .transaction import TransactionCosts


class ExitCosts(Model):
    """
    Exit cost breakdown for a single sale price.

    Attributes:
        sale_price: Sale (or projected) price these costs apply to
        gross_gain: Sale minus purchase, clamped at zero
        betterment_levy: Levy on the gross gain
        taxable_gain: Gross gain after the betterment levy
        capital_gains_tax: Tax on the taxable gain
        agent_commission: Broker commission on the sale price
        total_exit: Levy + tax + commission
    """

    sale_price: float
    gross_gain: float
    betterment_levy: float
    taxable_gain: float
    capital_gains_tax: float
    agent_commission: float
    total_exit: float


class ExitCostCalculator(Model):
    settings: ExitCostSettings = Field(default_factory=ExitCostSettings)

    def calculate(self, purchase_price: float, sale_price: float) -> ExitCosts:
        # A loss is never taxed: clamp before any levy or tax applies.
        gross_gain = max(0.0, sale_price - purchase_price)
        betterment_levy = gross_gain * self.settings.betterment_levy_rate
        taxable_gain = gross_gain - betterment_levy
        capital_gains_tax = taxable_gain * self.settings.capital_gains_rate
        agent_commission = sale_price * self.settings.agent_commission_rate
        return ExitCosts(
            sale_price=sale_price,
            gross_gain=gross_gain,
            betterment_levy=betterment_levy,
            taxable_gain=taxable_gain,
            capital_gains_tax=capital_gains_tax,
            agent_commission=agent_commission,
            total_exit=betterment_levy + capital_gains_tax + agent_commission,
        )

    def net_profit(
        self,
        purchase_price: float,
        sale_price: float,
        transaction: TransactionCosts,
        holding: HoldingCosts,
        holding_years: float,
    ) -> float:
        """
        Net profit of buying at `purchase_price` and selling at `sale_price`.

        Raw losses are passed through unclamped; only the taxes are clamped.

        Args:
            purchase_price: Price paid for the parcel
            sale_price: Sale (or projected) price
            transaction: Entry costs for the purchase
            holding: Annual holding costs
            holding_years: Years the parcel is held

        Returns:
            (sale - purchase) - exit costs - entry costs - cash holding costs
        """
        exit_costs = self.calculate(purchase_price, sale_price)
        return (
            (sale_price - purchase_price)
            - exit_costs.total_exit
            - transaction.total
            - holding.cash_costs(holding_years)
        )
