# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Landvest Debt Module

Fixed-rate loan amortization used to price acquisition financing.
"""

from .amortization import FinancingAmortizer, LoanSummary

__all__ = [
    "FinancingAmortizer",
    "LoanSummary",
]
