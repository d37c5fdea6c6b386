# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Engine inputs.

`InvestmentInput` is built from primitive values only, so it can be shared as
a URL query string and reconstructed to reproduce an analysis exactly.
Numeric fields are deliberately unconstrained: out-of-range values make the
engine return no result instead of failing at construction time.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import parse_qsl, urlencode

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from ..core.primitives import Model, ZoningStageEnum
from ..core.zoning import ZoningBenchmarkTable

logger = logging.getLogger(__name__)

DEFAULT_CURRENT_ZONING = ZoningStageEnum.AGRICULTURAL
DEFAULT_TARGET_ZONING = ZoningStageEnum.BUILDING_PERMIT
DEFAULT_HOLDING_YEARS = 5.0
DEFAULT_DOWN_PAYMENT_PCT = 30.0
DEFAULT_INTEREST_RATE_PCT = 4.5
DEFAULT_LOAN_YEARS = 15.0


class FinancingTerms(Model):
    """
    Acquisition loan terms, all in percent or years.

    Attributes:
        down_payment_pct: Equity share of the purchase price (30 for 30%)
        interest_rate_pct: Nominal annual interest rate (4.5 for 4.5%)
        loan_years: Loan term in years
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    down_payment_pct: float = DEFAULT_DOWN_PAYMENT_PCT
    interest_rate_pct: float = DEFAULT_INTEREST_RATE_PCT
    loan_years: float = DEFAULT_LOAN_YEARS

    def down_payment(self, purchase_price: float) -> float:
        return purchase_price * self.down_payment_pct / 100

    def loan_amount(self, purchase_price: float) -> float:
        return max(0.0, purchase_price - self.down_payment(purchase_price))


class InvestmentInput(Model):
    """
    Everything the engine needs to know about one parcel purchase.

    Accepts both snake_case and camelCase keys, so the payload produced by a
    JavaScript client (`purchasePrice`, `plotAreaSqm`, ...) validates as is.
    A zoning stage of None stands for a stage that could not be recognised
    and always fails `validation_errors`.

    Example:
        >>> InvestmentInput.model_validate(
        ...     {"purchasePrice": 2_500_000, "plotAreaSqm": 1_000,
        ...      "currentZoning": "AGRICULTURAL", "targetZoning": "BUILDING_PERMIT"}
        ... ).holding_years
        5.0
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    purchase_price: float
    plot_area_sqm: float
    current_zoning: Optional[ZoningStageEnum] = DEFAULT_CURRENT_ZONING
    target_zoning: Optional[ZoningStageEnum] = DEFAULT_TARGET_ZONING
    holding_years: float = DEFAULT_HOLDING_YEARS
    financing: Optional[FinancingTerms] = None

    def validation_errors(self, zoning: ZoningBenchmarkTable) -> List[str]:
        """
        Reasons this input cannot be analysed against `zoning`.

        An empty list means the input is valid.
        """
        errors = []
        for name in ("purchase_price", "plot_area_sqm", "holding_years"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                errors.append(f"{name} must be a positive number, got {value}")
        for name in ("current_zoning", "target_zoning"):
            stage = getattr(self, name)
            if stage is None:
                errors.append(f"{name} is not a known zoning stage")
            elif zoning.index_of(stage) is None:
                errors.append(f"{name} {stage.value} is not in the benchmark table")
        if not errors and not zoning.is_advancement(
            self.current_zoning, self.target_zoning
        ):
            errors.append(
                f"target_zoning {self.target_zoning.value} does not come after "
                f"current_zoning {self.current_zoning.value}"
            )
        if self.financing is not None:
            for name in ("down_payment_pct", "interest_rate_pct", "loan_years"):
                if not math.isfinite(getattr(self.financing, name)):
                    errors.append(f"financing.{name} must be a finite number")
        return errors

    # ==========================================================================
    # URL QUERY ROUND TRIP
    # ==========================================================================

    def to_query(self) -> str:
        """
        Encode as a URL query string.

        Values equal to their defaults are left out to keep shared links short.
        """
        params: Dict[str, Any] = {
            "price": _format_number(self.purchase_price),
            "size": _format_number(self.plot_area_sqm),
        }
        if self.current_zoning != DEFAULT_CURRENT_ZONING:
            params["zoning"] = self.current_zoning.value if self.current_zoning else ""
        if self.target_zoning != DEFAULT_TARGET_ZONING:
            params["target"] = self.target_zoning.value if self.target_zoning else ""
        if self.holding_years != DEFAULT_HOLDING_YEARS:
            params["years"] = _format_number(self.holding_years)
        if self.financing is not None:
            params["fin"] = "1"
            if self.financing.down_payment_pct != DEFAULT_DOWN_PAYMENT_PCT:
                params["dp"] = _format_number(self.financing.down_payment_pct)
            if self.financing.interest_rate_pct != DEFAULT_INTEREST_RATE_PCT:
                params["rate"] = _format_number(self.financing.interest_rate_pct)
            if self.financing.loan_years != DEFAULT_LOAN_YEARS:
                params["loan"] = _format_number(self.financing.loan_years)
        return urlencode(params)

    @classmethod
    def from_query(cls, query: Union[str, Mapping[str, str]]) -> "InvestmentInput":
        """
        Rebuild an input from `to_query` output (a leading '?' is accepted).

        Parsing is lenient: missing values take their defaults, unparsable
        numbers become 0 and unknown zoning stages become None, so a tampered
        link yields an input that fails `validation_errors` rather than an
        exception.
        """
        if isinstance(query, str):
            params = dict(parse_qsl(query.lstrip("?"), keep_blank_values=True))
        else:
            params = dict(query)

        financing = None
        if any(key in params for key in ("fin", "dp", "rate", "loan")):
            financing = FinancingTerms(
                down_payment_pct=_parse_float(params.get("dp"), DEFAULT_DOWN_PAYMENT_PCT),
                interest_rate_pct=_parse_float(
                    params.get("rate"), DEFAULT_INTEREST_RATE_PCT
                ),
                loan_years=_parse_float(params.get("loan"), DEFAULT_LOAN_YEARS),
            )

        return cls(
            purchase_price=_parse_float(params.get("price"), 0.0),
            plot_area_sqm=_parse_float(params.get("size"), 0.0),
            current_zoning=_parse_zoning(params.get("zoning"), DEFAULT_CURRENT_ZONING),
            target_zoning=_parse_zoning(params.get("target"), DEFAULT_TARGET_ZONING),
            holding_years=_parse_float(params.get("years"), DEFAULT_HOLDING_YEARS),
            financing=financing,
        )


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def _parse_float(value: Optional[str], default: float) -> float:
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        logger.debug(f"Ignoring unparsable number {value!r} in query")
        return 0.0


def _parse_zoning(
    value: Optional[str], default: ZoningStageEnum
) -> Optional[ZoningStageEnum]:
    if value is None:
        return default
    try:
        return ZoningStageEnum(value.upper())
    except ValueError:
        logger.debug(f"Unknown zoning stage {value!r} in query")
        return None
