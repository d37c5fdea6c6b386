# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Zoning benchmark ladder.

Ordered list of zoning stages, each carrying the benchmark market price per
square metre for land at that stage. The order of the table defines the
planning pipeline: a parcel appreciates by moving to a later entry.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import Field, model_validator

from .primitives import Model, StrictlyPositiveFloat, ZoningStageEnum


class ZoningBenchmark(Model):
    """
    Benchmark price for one zoning stage.

    Attributes:
        stage: Zoning stage this benchmark applies to
        price_per_sqm: Market price per square metre at this stage
        label: Human readable name of the stage
    """

    stage: ZoningStageEnum
    price_per_sqm: StrictlyPositiveFloat
    label: str = ""


def _default_benchmarks() -> Tuple[ZoningBenchmark, ...]:
    return (
        ZoningBenchmark(
            stage=ZoningStageEnum.AGRICULTURAL,
            price_per_sqm=500.0,
            label="Agricultural land",
        ),
        ZoningBenchmark(
            stage=ZoningStageEnum.MASTER_PLAN_DEPOSIT,
            price_per_sqm=800.0,
            label="Master plan deposited",
        ),
        ZoningBenchmark(
            stage=ZoningStageEnum.MASTER_PLAN_APPROVED,
            price_per_sqm=1_100.0,
            label="Master plan approved",
        ),
        ZoningBenchmark(
            stage=ZoningStageEnum.DETAILED_PLAN_PREP,
            price_per_sqm=1_500.0,
            label="Detailed plan in preparation",
        ),
        ZoningBenchmark(
            stage=ZoningStageEnum.DETAILED_PLAN_DEPOSIT,
            price_per_sqm=1_900.0,
            label="Detailed plan deposited",
        ),
        ZoningBenchmark(
            stage=ZoningStageEnum.DETAILED_PLAN_APPROVED,
            price_per_sqm=2_400.0,
            label="Detailed plan approved",
        ),
        ZoningBenchmark(
            stage=ZoningStageEnum.DEVELOPER_TENDER,
            price_per_sqm=3_000.0,
            label="Developer tender",
        ),
        ZoningBenchmark(
            stage=ZoningStageEnum.BUILDING_PERMIT,
            price_per_sqm=3_500.0,
            label="Building permit",
        ),
    )


class ZoningBenchmarkTable(Model):
    """
    Ordered zoning ladder with benchmark prices.

    The table is validated on construction: stages must be unique and the
    benchmark price may not fall as a parcel advances through the pipeline.

    Example:
        >>> table = ZoningBenchmarkTable()
        >>> table.index_of(ZoningStageEnum.AGRICULTURAL)
        0
        >>> table.price_per_sqm(ZoningStageEnum.BUILDING_PERMIT)
        3500.0
    """

    benchmarks: Tuple[ZoningBenchmark, ...] = Field(
        default_factory=_default_benchmarks,
        min_length=1,
        description="Stages in pipeline order, earliest first.",
    )

    @model_validator(mode="after")
    def _validate_ladder(self) -> "ZoningBenchmarkTable":
        stages = [b.stage for b in self.benchmarks]
        if len(set(stages)) != len(stages):
            raise ValueError("Zoning benchmark table contains duplicate stages")
        for earlier, later in zip(self.benchmarks, self.benchmarks[1:]):
            if later.price_per_sqm < earlier.price_per_sqm:
                raise ValueError(
                    f"Benchmark price for {later.stage.value} ({later.price_per_sqm}) "
                    f"is below {earlier.stage.value} ({earlier.price_per_sqm})"
                )
        return self

    @property
    def stages(self) -> List[ZoningStageEnum]:
        return [b.stage for b in self.benchmarks]

    def index_of(self, stage: ZoningStageEnum) -> Optional[int]:
        """Position of `stage` in the ladder, or None when it is not listed."""
        for idx, benchmark in enumerate(self.benchmarks):
            if benchmark.stage == stage:
                return idx
        return None

    def get(self, stage: ZoningStageEnum) -> Optional[ZoningBenchmark]:
        idx = self.index_of(stage)
        return None if idx is None else self.benchmarks[idx]

    def price_per_sqm(self, stage: ZoningStageEnum) -> Optional[float]:
        benchmark = self.get(stage)
        return None if benchmark is None else benchmark.price_per_sqm

    def is_advancement(
        self, current: ZoningStageEnum, target: ZoningStageEnum
    ) -> bool:
        """True when both stages are listed and target comes strictly later."""
        current_idx = self.index_of(current)
        target_idx = self.index_of(target)
        if current_idx is None or target_idx is None:
            return False
        return target_idx > current_idx

    def path(
        self, current: ZoningStageEnum, target: ZoningStageEnum
    ) -> Tuple[ZoningBenchmark, ...]:
        """
        Benchmarks from `current` to `target`, both inclusive.

        Returns an empty tuple when the pair is not a valid advancement.
        """
        if not self.is_advancement(current, target):
            return ()
        return self.benchmarks[self.index_of(current) : self.index_of(target) + 1]
