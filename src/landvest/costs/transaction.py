# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Entry-side transaction costs."""

from __future__ import annotations

from pydantic import Field

from ..core.primitives import Model, TransactionCostSettings


class TransactionCosts(Model):
    """
    Costs paid on top of the purchase price at closing.

    Attributes:
        purchase_tax: Purchase tax on the price
        legal_fees: Attorney fees
        appraisal_fee: Flat appraiser fee
        registration_fee: Flat land registry fee
        total: Sum of all entry costs, excluding the price itself
        total_with_purchase: Price plus all entry costs
    """

    purchase_tax: float
    legal_fees: float
    appraisal_fee: float
    registration_fee: float
    total: float
    total_with_purchase: float


class TransactionCostCalculator(Model):
    """Linear entry-cost calculator; percentages scale with the price, fees are flat."""

    settings: TransactionCostSettings = Field(default_factory=TransactionCostSettings)

    def calculate(self, purchase_price: float) -> TransactionCosts:
        purchase_tax = purchase_price * self.settings.purchase_tax_rate
        legal_fees = purchase_price * self.settings.legal_fee_rate
        appraisal_fee = self.settings.appraisal_fee
        registration_fee = self.settings.registration_fee
        total = purchase_tax + legal_fees + appraisal_fee + registration_fee
        return TransactionCosts(
            purchase_tax=purchase_tax,
            legal_fees=legal_fees,
            appraisal_fee=appraisal_fee,
            registration_fee=registration_fee,
            total=total,
            total_with_purchase=purchase_price + total,
        )
