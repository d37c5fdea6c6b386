# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Landvest Costs Module

Entry (transaction), carrying (holding) and sale (exit) cost calculators.
"""

from .exit import ExitCostCalculator, ExitCosts
from .holding import HoldingCostCalculator, HoldingCosts
from .transaction import TransactionCostCalculator, TransactionCosts

__all__ = [
    "ExitCostCalculator",
    "ExitCosts",
    "HoldingCostCalculator",
    "HoldingCosts",
    "TransactionCostCalculator",
    "TransactionCosts",
]
