# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Loan amortization calculations"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np
import pandas as pd
from pydantic import Field
from pyxirr import pmt

from ..core.primitives import Model


class LoanSummary(Model):
    """
    Totals of a fixed-rate, fully amortizing loan.

    A loan with a non-positive principal, rate or term, or a term too long to
    count in months, is reported as no loan: every figure is zero.
    """

    principal: float
    annual_rate_percent: float
    years: float
    number_of_payments: int
    monthly_payment: float
    total_payments: float
    total_interest: float

    @property
    def has_loan(self) -> bool:
        return self.number_of_payments > 0


class FinancingAmortizer(Model):
    """
    Standard fixed-rate annuity loan.

    Monthly payment follows the annuity formula
    P * r * (1 + r)^n / ((1 + r)^n - 1) with r = rate / 100 / 12 and
    n = years * 12, computed with PyXIRR's `pmt`.

    Attributes:
        principal: Loan amount
        annual_rate_percent: Nominal annual interest rate in percent (4.5 for 4.5%)
        years: Loan term in years

    Examples:
        >>> loan = FinancingAmortizer(principal=1_750_000, annual_rate_percent=4.5, years=15)
        >>> summary = loan.summary
        >>> schedule, totals = loan.amortization_schedule
    """

    principal: float
    annual_rate_percent: float
    years: float = Field(..., description="Loan term in years")

    @property
    def number_of_payments(self) -> int:
        if self.principal <= 0 or self.annual_rate_percent <= 0 or self.years <= 0:
            return 0
        periods = self.years * 12
        if not math.isfinite(periods):
            return 0
        return int(round(periods))

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 100 / 12

    @property
    def monthly_payment(self) -> float:
        n = self.number_of_payments
        if n == 0:
            return 0.0
        payment = pmt(self.monthly_rate, n, self.principal)
        if payment is None:
            # (1 + r)^n overflows; the annuity payment tends to interest only
            return self.principal * self.monthly_rate
        return -payment

    @property
    def summary(self) -> LoanSummary:
        n = self.number_of_payments
        monthly_payment = self.monthly_payment
        total_payments = monthly_payment * n
        return LoanSummary(
            principal=self.principal,
            annual_rate_percent=self.annual_rate_percent,
            years=self.years,
            number_of_payments=n,
            monthly_payment=monthly_payment,
            total_payments=total_payments,
            total_interest=total_payments - self.principal if n else 0.0,
        )

    @property
    def amortization_schedule(self) -> Tuple[pd.DataFrame, pd.Series]:
        """
        Generate the month-by-month amortization schedule.

        Returns:
            Tuple containing:
            - DataFrame indexed by payment period (1..n) with columns:
                - Begin Balance, Payment, Interest, Principal, End Balance
            - Series with summary statistics:
                - Total Payments, Total Principal Paid, Total Interest Paid,
                  Monthly Payment, Number of Payments
            The DataFrame is empty when there is no loan.
        """
        n = self.number_of_payments
        payment = self.monthly_payment
        rate = self.monthly_rate

        payments = np.full(n, payment)
        interest_paid = np.zeros(n)
        principal_paid = np.zeros(n)
        balances = np.zeros(n + 1)
        if n:
            balances[0] = self.principal

        for i in range(n):
            interest_paid[i] = balances[i] * rate
            principal_paid[i] = payment - interest_paid[i]
            balances[i + 1] = balances[i] - principal_paid[i]

        # Final balance is zero up to floating point noise
        if n:
            balances[-1] = 0.0

        df = pd.DataFrame(
            {
                "Begin Balance": balances[:-1],
                "Payment": payments,
                "Interest": interest_paid,
                "Principal": principal_paid,
                "End Balance": balances[1:],
            },
            index=pd.RangeIndex(1, n + 1, name="Period"),
        )

        summary = pd.Series(
            {
                "Total Payments": df["Payment"].sum(),
                "Total Principal Paid": df["Principal"].sum(),
                "Total Interest Paid": df["Interest"].sum(),
                "Monthly Payment": payment,
                "Number of Payments": n,
            }
        )
        return df, summary
