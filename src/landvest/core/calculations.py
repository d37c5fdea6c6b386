# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculation functions.

Contains static methods for the compounding and ratio math used across the
engine. These functions are pure and guard every denominator, so callers can
rely on them never raising for degenerate inputs.
"""

import math
import sys

from pyxirr import fv


class FinancialCalculations:
    """
    Pure mathematical functions for return calculations.

    Rates are decimals (0.07 for 7%); percentages are whole numbers produced
    by `round_percent`.
    """

    @staticmethod
    def safe_ratio(numerator: float, denominator: float) -> float:
        """Return numerator / denominator, or 0.0 when denominator <= 0."""
        if denominator <= 0:
            return 0.0
        return numerator / denominator

    @staticmethod
    def round_half_up(value: float) -> int:
        """
        Round to the nearest integer with halves rounded up.

        Python's built-in `round` rounds halves to even, which would make
        2.5% and 3.5% both display as an even number.

        Infinite values saturate at +/-sys.maxsize and NaN rounds to 0.
        """
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return sys.maxsize if value > 0 else -sys.maxsize
        return int(math.floor(value + 0.5))

    @staticmethod
    def round_percent(rate: float) -> int:
        """Convert a decimal rate to a whole-number percentage."""
        return FinancialCalculations.round_half_up(rate * 100)

    @staticmethod
    def compound_annual_growth_rate(
        start_value: float, end_value: float, years: float
    ) -> float:
        """
        Calculate CAGR between two values.

        Args:
            start_value: Value at the start of the period (must be > 0)
            end_value: Value at the end of the period
            years: Length of the period in years (must be > 0)

        Returns:
            CAGR as decimal. 0.0 when start_value or years is not positive.
            A non-positive end value is a total loss and returns -1.0 instead
            of raising a fractional power of a negative number. Growth too
            fast to represent as a float over a very short period returns inf.

        Example:
            >>> round(FinancialCalculations.compound_annual_growth_rate(100.0, 121.0, 2), 4)
            0.1
        """
        if start_value <= 0 or years <= 0:
            return 0.0
        ratio = max(0.0, end_value) / start_value
        if ratio == 0:
            return -1.0
        try:
            return ratio ** (1.0 / years) - 1.0
        except OverflowError:
            return math.inf

    @staticmethod
    def real_rate(nominal_rate: float, inflation_rate: float) -> float:
        """Fisher adjustment of a nominal decimal rate for inflation."""
        return (1.0 + nominal_rate) / (1.0 + inflation_rate) - 1.0

    @staticmethod
    def future_value(principal: float, annual_rate: float, years: float) -> float:
        """
        Compound `principal` at `annual_rate` for `years`, no interim flows.

        Uses PyXIRR's `fv`, which returns the value with the opposite sign of
        the present value; the sign is flipped back so a positive principal
        gives a positive future value. PyXIRR returns None when the result
        overflows a float; that is reported as an infinite value.
        """
        value = fv(annual_rate, years, 0.0, principal)
        if value is None:
            return math.copysign(math.inf, principal)
        return -value
