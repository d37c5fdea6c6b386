# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Landvest Core Primitives

Base model, constrained types, enumerations and rate settings shared by every
calculator in the engine.
"""

from .enums import ComparisonVerdictEnum, ZoningStageEnum
from .model import Model
from .settings import (
    BenchmarkAsset,
    ExitCostSettings,
    HoldingCostSettings,
    MarketSettings,
    SensitivitySettings,
    SolverSettings,
    TransactionCostSettings,
)
from .types import (
    FloatBetween0And1,
    PositiveFloat,
    PositiveInt,
    StrictlyPositiveFloat,
    StrictlyPositiveInt,
)

__all__ = [
    # Core model
    "Model",
    # Enums
    "ComparisonVerdictEnum",
    "ZoningStageEnum",
    # Settings
    "BenchmarkAsset",
    "ExitCostSettings",
    "HoldingCostSettings",
    "MarketSettings",
    "SensitivitySettings",
    "SolverSettings",
    "TransactionCostSettings",
    # Types
    "FloatBetween0And1",
    "PositiveFloat",
    "PositiveInt",
    "StrictlyPositiveFloat",
    "StrictlyPositiveInt",
]
