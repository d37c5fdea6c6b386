# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Landvest Core

Primitives, the zoning benchmark ladder, shared financial math and the
injected cost model.
"""

from .calculations import FinancialCalculations
from .cost_model import CostModel
from .zoning import ZoningBenchmark, ZoningBenchmarkTable

__all__ = [
    "CostModel",
    "FinancialCalculations",
    "ZoningBenchmark",
    "ZoningBenchmarkTable",
]
