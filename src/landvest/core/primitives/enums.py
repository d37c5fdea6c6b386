# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class ZoningStageEnum(str, Enum):
    """
    Steps of the land-use planning pipeline, from raw agricultural land to a
    parcel with a building permit.

    Declaration order matches the default benchmark ladder. The authoritative
    ordering used by the engine is the order of the configured
    `ZoningBenchmarkTable`, so alternative ladders can be tested without
    touching this enum.
    """

    AGRICULTURAL = "AGRICULTURAL"
    MASTER_PLAN_DEPOSIT = "MASTER_PLAN_DEPOSIT"
    MASTER_PLAN_APPROVED = "MASTER_PLAN_APPROVED"
    DETAILED_PLAN_PREP = "DETAILED_PLAN_PREP"
    DETAILED_PLAN_DEPOSIT = "DETAILED_PLAN_DEPOSIT"
    DETAILED_PLAN_APPROVED = "DETAILED_PLAN_APPROVED"
    DEVELOPER_TENDER = "DEVELOPER_TENDER"
    BUILDING_PERMIT = "BUILDING_PERMIT"


class ComparisonVerdictEnum(str, Enum):
    """
    Ordinal outcome of comparing the land investment against benchmark assets.

    Attributes:
        OUTPERFORMS_ALL: Land future value exceeds every benchmark
        OUTPERFORMS_LOWER: Land beats at least the weakest benchmark, not all
        UNDERPERFORMS_ALL: Land does not beat any benchmark
    """

    OUTPERFORMS_ALL = "Outperforms All"
    OUTPERFORMS_LOWER = "Outperforms Lower"
    UNDERPERFORMS_ALL = "Underperforms All"
