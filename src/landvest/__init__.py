# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Landvest - Land Parcel Investment Return Engine

Pure, stateless return analysis for land bought ahead of rezoning: projected
appreciation from a zoning benchmark ladder, entry/holding/exit cost
waterfall, CAGR and inflation-adjusted returns, break-even sale price,
holding-period sensitivity, loan amortization and a comparison against
alternative assets.

Example Usage:
    ```python
    from landvest import CostModel, InvestmentInput, compute

    result = compute(
        InvestmentInput(
            purchase_price=2_500_000,
            plot_area_sqm=1_000,
            current_zoning="AGRICULTURAL",
            target_zoning="BUILDING_PERMIT",
            holding_years=5,
        ),
        CostModel(),
    )
    if result is not None:
        print(result.roi_percent, result.break_even.price)
    ```
"""

import logging

from .analysis import (
    CalculationResult,
    FinancingTerms,
    InvestmentInput,
    compute,
)
from .core import CostModel, ZoningBenchmark, ZoningBenchmarkTable
from .core.primitives import ZoningStageEnum

# Libraries leave handler configuration to the application.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalculationResult",
    "CostModel",
    "FinancingTerms",
    "InvestmentInput",
    "ZoningBenchmark",
    "ZoningBenchmarkTable",
    "ZoningStageEnum",
    "compute",
]
