# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rate and fee settings for the cost, return and solver calculations.

Every default below describes the standard regime. Alternative tax regimes
are expressed by building new settings objects, never by mutating these.
"""

from __future__ import annotations

from typing import Dict, Tuple

from pydantic import Field, model_validator

from .enums import ZoningStageEnum
from .model import Model
from .types import (
    FloatBetween0And1,
    PositiveFloat,
    StrictlyPositiveFloat,
    StrictlyPositiveInt,
)


class TransactionCostSettings(Model):
    """Entry-side costs paid on purchase."""

    purchase_tax_rate: FloatBetween0And1 = Field(
        default=0.06, description="Purchase tax as a decimal of the price."
    )
    legal_fee_rate: FloatBetween0And1 = Field(
        default=0.0175, description="Attorney fees as a decimal of the price."
    )
    appraisal_fee: PositiveFloat = Field(
        default=5_000.0, description="Flat appraiser fee."
    )
    registration_fee: PositiveFloat = Field(
        default=167.0, description="Flat land registry fee."
    )


def _default_levy_per_sqm() -> Dict[ZoningStageEnum, float]:
    advanced = {
        ZoningStageEnum.DETAILED_PLAN_APPROVED,
        ZoningStageEnum.DEVELOPER_TENDER,
        ZoningStageEnum.BUILDING_PERMIT,
    }
    return {stage: (5.0 if stage in advanced else 2.5) for stage in ZoningStageEnum}


class HoldingCostSettings(Model):
    """
    Annual carrying costs of an undeveloped parcel.

    The municipal levy depends on the zoning stage: land with an approved
    detailed plan is assessed at a higher per-sqm rate. Stages missing from
    `levy_per_sqm` fall back to `default_levy_per_sqm`.
    """

    levy_per_sqm: Dict[ZoningStageEnum, PositiveFloat] = Field(
        default_factory=_default_levy_per_sqm,
        description="Annual municipal levy per sqm, by zoning stage.",
    )
    default_levy_per_sqm: PositiveFloat = 2.5
    management_fee_per_sqm: PositiveFloat = Field(
        default=1.5, description="Annual management and upkeep per sqm."
    )
    opportunity_cost_rate: FloatBetween0And1 = Field(
        default=0.08,
        description="Notional annual return forgone on the purchase price.",
    )

    def levy_rate(self, stage: ZoningStageEnum) -> float:
        return self.levy_per_sqm.get(stage, self.default_levy_per_sqm)


class ExitCostSettings(Model):
    """Sale-side taxes and fees."""

    betterment_levy_rate: FloatBetween0And1 = Field(
        default=0.5, description="Levy on the gross gain from rezoning."
    )
    capital_gains_rate: FloatBetween0And1 = Field(
        default=0.25,
        description="Tax on the gain remaining after the betterment levy.",
    )
    agent_commission_rate: FloatBetween0And1 = Field(
        default=0.01, description="Broker commission as a decimal of sale price."
    )

    @property
    def marginal_rate(self) -> float:
        """Exit cost of one more unit of sale price above the purchase price."""
        return (
            self.betterment_levy_rate
            + (1 - self.betterment_levy_rate) * self.capital_gains_rate
            + self.agent_commission_rate
        )

    @model_validator(mode="after")
    def _validate_marginal_rate(self) -> "ExitCostSettings":
        # Break-even search needs sale proceeds to grow with the sale price.
        marginal = self.marginal_rate
        if marginal >= 1:
            raise ValueError(
                f"Combined marginal exit rate {marginal:.2%} must be below 100%"
            )
        return self


class BenchmarkAsset(Model):
    """Reference asset class the land investment is compared against."""

    key: str
    label: str
    annual_rate: PositiveFloat = Field(
        ..., description="Expected nominal annual return as a decimal."
    )


def _default_benchmark_assets() -> Tuple[BenchmarkAsset, ...]:
    return (
        BenchmarkAsset(key="stock", label="Equity index", annual_rate=0.09),
        BenchmarkAsset(key="bank", label="Bank deposit", annual_rate=0.045),
    )


class MarketSettings(Model):
    """Macro assumptions: inflation and alternative asset returns."""

    inflation_rate: FloatBetween0And1 = Field(
        default=0.03, description="Assumed annual CPI inflation."
    )
    benchmark_assets: Tuple[BenchmarkAsset, ...] = Field(
        default_factory=_default_benchmark_assets, min_length=1
    )

    @model_validator(mode="after")
    def _validate_unique_keys(self) -> "MarketSettings":
        keys = [asset.key for asset in self.benchmark_assets]
        if len(set(keys)) != len(keys):
            raise ValueError("Benchmark asset keys must be unique")
        return self


class SolverSettings(Model):
    """Controls for the break-even price search."""

    tolerance: StrictlyPositiveFloat = Field(
        default=100.0,
        description="Accepted absolute net profit at the solution, in currency units.",
    )
    max_iterations: StrictlyPositiveInt = 100
    upper_bound_multiple: float = Field(
        default=10.0,
        gt=1,
        description="Minimum search ceiling as a multiple of the purchase price.",
    )
    max_bracket_expansions: StrictlyPositiveInt = Field(
        default=10,
        description="Times the ceiling may double when it does not bracket the root.",
    )


class SensitivitySettings(Model):
    """Alternative holding periods evaluated in the sensitivity table."""

    holding_years: Tuple[StrictlyPositiveFloat, ...] = Field(
        default=(3, 5, 7, 10, 15), min_length=1
    )
