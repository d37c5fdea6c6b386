# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Landvest Reporting Module

Pandas DataFrame views of a CalculationResult:
    result = compute(investment)
    waterfall = CostWaterfallReport(result).generate()
    sensitivity = SensitivityReport(result).generate()
"""

from .base import BaseReport
from .tables import AlternativesReport, CostWaterfallReport, SensitivityReport

__all__ = [
    "AlternativesReport",
    "BaseReport",
    "CostWaterfallReport",
    "SensitivityReport",
]
