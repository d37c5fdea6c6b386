# Landvest Test Suite
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Landvest test suite, organized into unit and integration test categories.
"""
