# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cost model: the complete, injected configuration of the return engine.
"""

from __future__ import annotations

from pydantic import Field

from .primitives import (
    ExitCostSettings,
    HoldingCostSettings,
    MarketSettings,
    Model,
    SensitivitySettings,
    SolverSettings,
    TransactionCostSettings,
)
from .zoning import ZoningBenchmarkTable


class CostModel(Model):
    """
    Every rate, fee and benchmark the engine needs, grouped by concern.

    `CostModel()` is the standard regime. Alternative regimes are built with
    `model_copy(update=...)` or by passing replacement settings:

        >>> flat_tax = CostModel(
        ...     exit=ExitCostSettings(betterment_levy_rate=0.0, capital_gains_rate=0.25)
        ... )
    """

    zoning: ZoningBenchmarkTable = Field(default_factory=ZoningBenchmarkTable)
    transaction: TransactionCostSettings = Field(
        default_factory=TransactionCostSettings
    )
    holding: HoldingCostSettings = Field(default_factory=HoldingCostSettings)
    exit: ExitCostSettings = Field(default_factory=ExitCostSettings)
    market: MarketSettings = Field(default_factory=MarketSettings)
    solver: SolverSettings = Field(default_factory=SolverSettings)
    sensitivity: SensitivitySettings = Field(default_factory=SensitivitySettings)
