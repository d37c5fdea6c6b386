# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for Landvest components.

Each calculator is tested in isolation against hand-computed figures.
"""
