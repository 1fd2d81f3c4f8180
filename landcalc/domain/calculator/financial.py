"""Financial calculation functions.

Fixed-rate mortgage payments, financing plans and amortization schedules.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
import numpy_financial as npf

from landcalc.domain.models import FinancingPlan, MortgagePayment

from .common import as_amount, round_currency


def annuity_payment(principal: float, monthly_rate: float, months: int) -> float:
    """Unrounded level payment repaying ``principal`` over ``months``.

    Falls back to straight-line repayment when ``1 + r`` rounds to 1.0,
    and to the interest-only limit ``principal * r`` when the term is so
    long that ``(1 + r) ** n`` overflows.
    """
    if principal <= 0 or months <= 0:
        return 0.0
    if 1 + monthly_rate == 1.0:
        return principal / months
    with np.errstate(over="ignore", invalid="ignore"):
        payment = float(-npf.pmt(monthly_rate, months, principal))
    if not math.isfinite(payment):
        return principal * monthly_rate
    return payment


def calculate_monthly_payment(
    principal: float,
    annual_rate_pct: float,
    years: float,
) -> int:
    """Calculate the monthly payment of a fixed-rate mortgage.

    payment = P * r(1+r)^n / ((1+r)^n - 1), with r the monthly rate and n
    the number of monthly installments.

    Args:
        principal: Loan amount
        annual_rate_pct: Annual interest rate as percentage (e.g., 4.5 for 4.5%)
        years: Loan term in years

    Returns:
        Monthly payment rounded to the currency unit, 0 for degenerate input
    """
    principal = as_amount(principal)
    annual_rate_pct = as_amount(annual_rate_pct)
    years = as_amount(years)
    if principal <= 0 or annual_rate_pct <= 0 or years <= 0:
        return 0

    months = int(round(years * 12))
    monthly_rate = annual_rate_pct / 100.0 / 12.0
    return round_currency(annuity_payment(principal, monthly_rate, months))


def calculate_mortgage(
    principal: float,
    annual_rate_pct: float,
    years: float,
) -> MortgagePayment:
    """Monthly payment plus lifetime totals of a fixed-rate mortgage.

    total_payments = monthly_payment * months and
    total_interest = total_payments - principal.
    """
    principal = max(0.0, as_amount(principal))
    return MortgagePayment(
        principal=principal,
        annual_rate_pct=as_amount(annual_rate_pct),
        years=max(0.0, as_amount(years)),
        monthly_payment=calculate_monthly_payment(principal, annual_rate_pct, years),
    )


def calculate_financing(
    price: float,
    down_payment_pct: float = 30.0,
    annual_rate_pct: float = 4.5,
    years: float = 15,
) -> FinancingPlan | None:
    """Split a purchase into down payment and mortgage.

    Args:
        price: Purchase price
        down_payment_pct: Share paid in cash, percent (0-100)
        annual_rate_pct: Annual interest rate %
        years: Loan term in years

    Returns:
        FinancingPlan, or None when price <= 0
    """
    price = as_amount(price)
    if price <= 0:
        return None

    pct = min(100.0, max(0.0, as_amount(down_payment_pct)))
    down_payment = round_currency(price * pct / 100.0)
    loan_amount = price - down_payment

    return FinancingPlan(
        price=price,
        down_payment_pct=pct,
        down_payment=down_payment,
        loan_amount=loan_amount,
        mortgage=calculate_mortgage(loan_amount, annual_rate_pct, years),
    )


def generate_amortization_schedule(
    principal: float,
    annual_rate_pct: float,
    years: float,
) -> dict[str, Any]:
    """Generate full loan amortization schedule.

    Args:
        principal: Loan amount
        annual_rate_pct: Annual interest rate %
        years: Loan term in years

    Returns:
        Dict with keys:
        - month: List of month numbers
        - opening_balance: List of start balances
        - interest: List of interest payments
        - principal: List of principal payments
        - payment: List of total payments
        - closing_balance: List of end balances
        - monthly_payment: Level monthly payment (unrounded)
        - months: Number of months
    """
    principal = as_amount(principal)
    rate = max(0.0, as_amount(annual_rate_pct))
    months = int(round(max(0.0, as_amount(years)) * 12))

    if principal <= 0 or months <= 0:
        return {
            "month": [],
            "opening_balance": [],
            "interest": [],
            "principal": [],
            "payment": [],
            "closing_balance": [],
            "monthly_payment": 0.0,
            "months": 0,
        }

    monthly_rate = rate / 100.0 / 12.0
    pmt = annuity_payment(principal, monthly_rate, months)

    opening, interests, principals, payments, closing = [], [], [], [], []
    balance = principal

    for month in range(1, months + 1):
        interest = balance * monthly_rate
        principal_payment = min(pmt - interest, balance)
        if month == months:
            # Last installment clears any float residue
            principal_payment = balance
        new_balance = max(0.0, balance - principal_payment)

        opening.append(round(balance, 2))
        interests.append(round(interest, 2))
        principals.append(round(principal_payment, 2))
        payments.append(round(interest + principal_payment, 2))
        closing.append(round(new_balance, 2))

        balance = new_balance

    return {
        "month": list(range(1, months + 1)),
        "opening_balance": opening,
        "interest": interests,
        "principal": principals,
        "payment": payments,
        "closing_balance": closing,
        "monthly_payment": pmt,
        "months": months,
    }


def calculate_remaining_balance(
    principal: float,
    annual_rate_pct: float,
    years: float,
    months_paid: int,
) -> float:
    """Calculate remaining loan balance after N monthly payments.

    Args:
        principal: Initial loan amount
        annual_rate_pct: Annual interest rate %
        years: Original loan term in years
        months_paid: Number of installments already paid

    Returns:
        Remaining balance
    """
    principal = max(0.0, as_amount(principal))
    months = int(round(max(0.0, as_amount(years)) * 12))

    if months_paid >= months:
        return 0.0

    if months_paid <= 0:
        return principal

    monthly_rate = max(0.0, as_amount(annual_rate_pct)) / 100.0 / 12.0

    if 1 + monthly_rate == 1.0:
        return principal * (1 - months_paid / months)

    # Balance = P * [1 - (1+r)^(p-n)] / [1 - (1+r)^-n], overflow-free form of
    # P * [(1+r)^n - (1+r)^p] / [(1+r)^n - 1]
    base = 1 + monthly_rate
    remaining = principal * (1 - base ** (months_paid - months)) / (1 - base ** -months)

    return max(0.0, remaining)
