# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Landvest Analysis Module

Engine entry point (`compute`), inputs, holding-period sensitivity, the
alternative investment comparison and the result snapshot.
"""

from .alternatives import (
    AlternativeComparison,
    AlternativeInvestmentComparator,
    AssetOutcome,
)
from .api import compute
from .inputs import FinancingTerms, InvestmentInput
from .results import CalculationResult, FinancingSummary, StageValue
from .sensitivity import SensitivityAnalyzer, SensitivityRow

__all__ = [
    # Entry point
    "compute",
    # Inputs
    "FinancingTerms",
    "InvestmentInput",
    # Results
    "CalculationResult",
    "FinancingSummary",
    "StageValue",
    # Components
    "AlternativeComparison",
    "AlternativeInvestmentComparator",
    "AssetOutcome",
    "SensitivityAnalyzer",
    "SensitivityRow",
]
