# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Integration tests for Landvest.

End-to-end checks of `compute` against hand-calculated scenarios.
"""
