# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base reporting class.

Reports turn a finished `CalculationResult` into tabular data for a rendering
or print layer. They only reshape figures, never calculate new ones.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..analysis.results import CalculationResult


class BaseReport(ABC):
    """Abstract base class for all result reports."""

    def __init__(self, result: "CalculationResult"):
        """
        Initialize report with a calculation result.

        Args:
            result: CalculationResult returned by `landvest.compute`
        """
        # Import at runtime to avoid circular dependencies
        from ..analysis.results import CalculationResult  # noqa: PLC0415

        if not isinstance(result, CalculationResult):
            raise TypeError("BaseReport requires a CalculationResult object")
        self._result = result

    @abstractmethod
    def generate(self, **kwargs) -> Any:
        """Transform the result into the report's output format."""
