# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for InvestmentInput validation and the URL query round trip.
"""

import math

import pytest
from pydantic import ValidationError

from landvest.analysis import FinancingTerms, InvestmentInput
from landvest.core import ZoningBenchmark, ZoningBenchmarkTable
from landvest.core.primitives import ZoningStageEnum


@pytest.fixture
def table() -> ZoningBenchmarkTable:
    return ZoningBenchmarkTable()


class TestConstruction:
    def test_camel_case_payload(self):
        investment = InvestmentInput.model_validate(
            {
                "purchasePrice": 2_500_000,
                "plotAreaSqm": 1_000,
                "currentZoning": "AGRICULTURAL",
                "targetZoning": "BUILDING_PERMIT",
                "holdingYears": 5,
                "financing": {
                    "downPaymentPct": 25,
                    "interestRatePct": 5,
                    "loanYears": 10,
                },
            }
        )
        assert investment.purchase_price == 2_500_000.0
        assert investment.financing.down_payment_pct == 25.0

    def test_defaults(self):
        investment = InvestmentInput(purchase_price=1.0, plot_area_sqm=1.0)
        assert investment.current_zoning is ZoningStageEnum.AGRICULTURAL
        assert investment.target_zoning is ZoningStageEnum.BUILDING_PERMIT
        assert investment.holding_years == 5.0
        assert investment.financing is None

    def test_non_positive_values_construct(self):
        investment = InvestmentInput(purchase_price=0, plot_area_sqm=-5)
        assert investment.purchase_price == 0

    def test_unknown_zoning_rejected(self):
        with pytest.raises(ValidationError):
            InvestmentInput(purchase_price=1, plot_area_sqm=1, current_zoning="SWAMP")

    def test_immutable(self):
        investment = InvestmentInput(purchase_price=1, plot_area_sqm=1)
        with pytest.raises(ValidationError):
            investment.purchase_price = 2


class TestValidationErrors:
    def test_valid_input_has_no_errors(self, make_investment, table):
        assert make_investment().validation_errors(table) == []

    @pytest.mark.parametrize(
        "field", ["purchase_price", "plot_area_sqm", "holding_years"]
    )
    @pytest.mark.parametrize("value", [0.0, -1.0, math.nan, math.inf])
    def test_bad_numbers(self, make_investment, table, field, value):
        errors = make_investment(**{field: value}).validation_errors(table)
        assert any(field in e for e in errors)

    def test_same_stage_is_not_an_advancement(self, make_investment, table):
        investment = make_investment(
            current_zoning=ZoningStageEnum.DEVELOPER_TENDER,
            target_zoning=ZoningStageEnum.DEVELOPER_TENDER,
        )
        assert investment.validation_errors(table)

    def test_stage_missing_from_table(self, make_investment):
        table = ZoningBenchmarkTable(
            benchmarks=(
                ZoningBenchmark(
                    stage=ZoningStageEnum.AGRICULTURAL, price_per_sqm=100
                ),
                ZoningBenchmark(
                    stage=ZoningStageEnum.DEVELOPER_TENDER, price_per_sqm=900
                ),
            )
        )
        errors = make_investment().validation_errors(table)
        assert errors == ["target_zoning BUILDING_PERMIT is not in the benchmark table"]


class TestFinancingTerms:
    def test_split(self):
        terms = FinancingTerms(
            down_payment_pct=30, interest_rate_pct=4.5, loan_years=15
        )
        assert terms.down_payment(2_500_000) == pytest.approx(750_000)
        assert terms.loan_amount(2_500_000) == pytest.approx(1_750_000)

    def test_full_cash_purchase_has_no_loan(self):
        assert FinancingTerms(down_payment_pct=120).loan_amount(1_000_000) == 0.0


class TestQueryRoundTrip:
    def test_defaults_are_omitted(self, make_investment):
        assert make_investment().to_query() == "price=2500000&size=1000"

    def test_round_trip_with_financing(self, make_investment):
        investment = make_investment(
            purchase_price=1_234_567.5,
            current_zoning=ZoningStageEnum.MASTER_PLAN_APPROVED,
            target_zoning=ZoningStageEnum.DEVELOPER_TENDER,
            holding_years=7,
            financing=FinancingTerms(down_payment_pct=40, loan_years=20),
        )
        query = investment.to_query()
        assert "fin=1" in query
        assert "rate=" not in query
        assert InvestmentInput.from_query(query) == investment

    def test_round_trip_default_financing(self, make_investment):
        investment = make_investment(financing=FinancingTerms())
        assert InvestmentInput.from_query("?" + investment.to_query()) == investment

    def test_mapping_input(self):
        investment = InvestmentInput.from_query(
            {"price": "900000", "size": "450", "zoning": "detailed_plan_prep"}
        )
        assert investment.current_zoning is ZoningStageEnum.DETAILED_PLAN_PREP
        assert investment.plot_area_sqm == 450.0

    def test_tampered_values_do_not_raise(self, table):
        investment = InvestmentInput.from_query("price=abc&size=100&zoning=NOPE")
        assert investment.purchase_price == 0.0
        assert investment.current_zoning is None
        assert investment.validation_errors(table)

    def test_unknown_zoning_is_rejected_not_replaced(self, table):
        investment = InvestmentInput.from_query(
            "price=2500000&size=1000&target=SKYSCRAPER"
        )
        assert investment.current_zoning is ZoningStageEnum.AGRICULTURAL
        assert investment.target_zoning is None
        assert investment.validation_errors(table) == [
            "target_zoning is not a known zoning stage"
        ]

    def test_unknown_zoning_survives_round_trip(self):
        investment = InvestmentInput.from_query("price=1&size=1&zoning=NOPE")
        assert investment.to_query() == "price=1&size=1&zoning="
        assert InvestmentInput.from_query(investment.to_query()) == investment
