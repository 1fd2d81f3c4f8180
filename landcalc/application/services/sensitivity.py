"""Holding-period sensitivity table.

Projects the same purchase over several candidate holding periods. Each
row is derived from the inputs alone, so rows can be filtered or reordered
without changing each other's values.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import pandas as pd
import structlog

from landcalc.core.rates import DEFAULT_RATES, RateTable
from landcalc.domain.calculator.common import as_amount, round_half_up
from landcalc.domain.calculator.financial import calculate_monthly_payment
from landcalc.domain.calculator.returns import annualized_return, real_return_rate
from landcalc.domain.models import FinancingPlan, SensitivityRow

log = structlog.get_logger(__name__)


def financing_cost(financing: FinancingPlan, years: float) -> float | None:
    """Interest paid on the plan's loan when it is repaid over ``years``.

    The loan term is capped at the plan's own term, so a short holding
    period re-amortizes the same principal faster.
    """
    loan = financing.loan_amount
    term = min(financing.mortgage.years, years)
    if loan <= 0 or term <= 0:
        return None
    monthly = calculate_monthly_payment(loan, financing.mortgage.annual_rate_pct, term)
    return monthly * round(term * 12) - loan


def build_sensitivity_row(
    price: float,
    projected_value: float,
    exit_net_profit: float,
    entry_costs: float,
    annual_holding_cost: float,
    years: int,
    selected_years: float | None = None,
    financing: FinancingPlan | None = None,
    rates: RateTable = DEFAULT_RATES,
) -> SensitivityRow:
    """Project one holding period.

    Args:
        price: Purchase price
        projected_value: Sale price
        exit_net_profit: Gross profit minus exit costs
        entry_costs: One-time acquisition costs
        annual_holding_cost: Holding cost for one year
        years: Holding period of this row
        selected_years: Period the user picked, flagged on its row
        financing: Optional financing plan
        rates: Rate table (inflation)

    Returns:
        SensitivityRow
    """
    hold_costs = annual_holding_cost * years
    net_profit = exit_net_profit - entry_costs - hold_costs

    gross_rate = annualized_return(price, projected_value, years)
    net_rate = annualized_return(price, price + net_profit, years)
    real_cagr = None
    if net_rate is not None:
        real_cagr = round_half_up(real_return_rate(net_rate / 100.0, rates=rates) * 100)

    net_with_financing = None
    if financing is not None:
        interest = financing_cost(financing, years)
        if interest is not None:
            net_with_financing = net_profit - interest

    return SensitivityRow(
        years=years,
        cagr=None if gross_rate is None else round_half_up(gross_rate),
        net_cagr=None if net_rate is None else round_half_up(net_rate),
        real_cagr=real_cagr,
        hold_costs=hold_costs,
        net_profit=net_profit,
        net_with_financing=net_with_financing,
        is_selected=selected_years is not None and years == selected_years,
    )


def build_sensitivity_table(
    price: float,
    projected_value: float,
    exit_net_profit: float,
    entry_costs: float,
    annual_holding_cost: float,
    selected_years: float | None = None,
    financing: FinancingPlan | None = None,
    years: Iterable[int] | None = None,
    rates: RateTable = DEFAULT_RATES,
) -> list[SensitivityRow]:
    """Build one row per candidate holding period.

    Args:
        years: Candidate periods; defaults to the configured sensitivity years

    Returns:
        Rows in ascending year order, empty when price <= 0
    """
    price = as_amount(price)
    if price <= 0:
        return []

    if years is None:
        from landcalc.core.settings import get_settings

        years = get_settings().sensitivity_years
    candidates = sorted({int(y) for y in years if int(y) > 0})

    rows = [
        build_sensitivity_row(
            price,
            as_amount(projected_value),
            as_amount(exit_net_profit),
            as_amount(entry_costs),
            as_amount(annual_holding_cost),
            y,
            selected_years=selected_years,
            financing=financing,
            rates=rates,
        )
        for y in candidates
    ]
    log.debug("sensitivity_table_built", price=price, years=candidates)
    return rows


def sensitivity_frame(rows: Sequence[SensitivityRow]) -> pd.DataFrame:
    """Tabular view of the sensitivity rows, indexed by years."""
    columns = list(SensitivityRow.model_fields)
    df = pd.DataFrame([r.model_dump() for r in rows], columns=columns)
    return df.set_index("years")
