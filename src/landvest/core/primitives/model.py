# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models for configuration, inputs and result snapshots. Every
    calculation builds new instances; nothing is mutated after construction.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",  # Catches typos in configuration keys immediately
    )
