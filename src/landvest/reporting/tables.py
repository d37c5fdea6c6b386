# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular reports over a calculation result.

- CostWaterfallReport: projected value stepped down to net profit
- SensitivityReport: one row per candidate holding period
- AlternativesReport: land against each benchmark asset
"""

from __future__ import annotations

import pandas as pd

from .base import BaseReport


class CostWaterfallReport(BaseReport):
    """
    Profit waterfall from projected sale value to net profit.

    Costs are negative amounts, so the `Amount` column sums to the net profit.
    """

    def generate(self) -> pd.DataFrame:
        r = self._result
        rows = [
            ("Projected Value", r.projected_value),
            ("Purchase Price", -r.inputs.purchase_price),
            ("Purchase Tax", -r.transaction.purchase_tax),
            ("Legal Fees", -r.transaction.legal_fees),
            ("Appraisal Fee", -r.transaction.appraisal_fee),
            ("Registration Fee", -r.transaction.registration_fee),
            ("Holding Costs", -r.total_holding_costs),
            ("Betterment Levy", -r.exit.betterment_levy),
            ("Capital Gains Tax", -r.exit.capital_gains_tax),
            ("Agent Commission", -r.exit.agent_commission),
        ]
        df = pd.DataFrame(rows, columns=["Line Item", "Amount"]).set_index("Line Item")
        df["Running Total"] = df["Amount"].cumsum()
        return df


class SensitivityReport(BaseReport):
    def generate(self) -> pd.DataFrame:
        records = [
            {
                "Years": row.years,
                "CAGR %": row.returns.cagr_percent,
                "Net CAGR %": row.returns.net_cagr_percent,
                "Real CAGR %": row.returns.real_cagr_percent,
                "Holding Costs": row.holding_costs,
                "Net Profit": row.net_profit,
                "Net With Financing": row.net_with_financing,
                "Selected": row.is_selected,
            }
            for row in self._result.sensitivity
        ]
        return pd.DataFrame.from_records(records).set_index("Years")


class AlternativesReport(BaseReport):
    """Land outcome and benchmark assets side by side; empty when no comparison."""

    columns = [
        "Asset",
        "Annual Rate",
        "Future Value",
        "Profit",
        "Real Return %",
        "Land Advantage",
    ]

    def generate(self) -> pd.DataFrame:
        comparison = self._result.alternatives
        if comparison is None:
            return pd.DataFrame(columns=self.columns).set_index("Asset")
        outcomes = (comparison.land, *comparison.benchmarks)
        records = [
            {
                "Asset": outcome.label,
                "Annual Rate": outcome.annual_rate,
                "Future Value": outcome.future_value,
                "Profit": outcome.profit,
                "Real Return %": outcome.real_return_percent,
                "Land Advantage": outcome.land_advantage,
            }
            for outcome in outcomes
        ]
        return pd.DataFrame.from_records(records, columns=self.columns).set_index(
            "Asset"
        )
