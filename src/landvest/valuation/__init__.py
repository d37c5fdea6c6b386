# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Landvest Valuation Module

Return metrics (ROI, CAGR, net and real CAGR) and the break-even sale price
solver.
"""

from .break_even import BreakEvenResult, BreakEvenSolver
from .metrics import ReturnMetrics, ReturnMetricsCalculator

__all__ = [
    "BreakEvenResult",
    "BreakEvenSolver",
    "ReturnMetrics",
    "ReturnMetricsCalculator",
]
