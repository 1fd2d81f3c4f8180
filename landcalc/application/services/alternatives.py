"""Alternative-investment comparison: this land vs equities vs a bank deposit."""

from __future__ import annotations

from landcalc.core.logging import get_logger
from landcalc.core.rates import DEFAULT_RATES, RateTable
from landcalc.domain.calculator.common import as_amount, round_currency, round_half_up
from landcalc.domain.calculator.returns import annualized_return, real_return_rate
from landcalc.domain.models import AlternativeInvestment, AlternativeReturns

log = get_logger(__name__)


def _real_return_pct(nominal_rate: float, rates: RateTable) -> float:
    """Inflation-adjusted rate in percent, one decimal."""
    return round_half_up(real_return_rate(nominal_rate, rates=rates) * 1000) / 10


def _compounded(key: str, label: str, emoji: str, color: str, rate: float,
                investment: float, years: float, rates: RateTable) -> AlternativeInvestment:
    future_value = round_currency(investment * (1 + rate) ** years)
    return AlternativeInvestment(
        key=key,
        label=label,
        emoji=emoji,
        rate=rate,
        future_value=future_value,
        profit=future_value - investment,
        color=color,
        real_return=_real_return_pct(rate, rates),
    )


def calculate_alternative_returns(
    investment: float,
    net_profit: float,
    years: float,
    rates: RateTable = DEFAULT_RATES,
) -> AlternativeReturns | None:
    """Compare the plot's realized return with benchmark asset classes.

    Equities and the bank deposit compound the same capital at their fixed
    rates. The land entry is the plot's own outcome, ``investment +
    net_profit``, and its rate is the CAGR that outcome implies.

    Args:
        investment: Capital put in (usually the purchase price)
        net_profit: Net profit of the land investment
        years: Holding period
        rates: Rate table (benchmark and inflation rates)

    Returns:
        AlternativeReturns, or None for non-positive investment or years,
        or when compounding over ``years`` overflows a float
    """
    investment = as_amount(investment)
    years = as_amount(years)
    if investment <= 0 or years <= 0:
        return None

    net_profit = as_amount(net_profit)
    land_pct = annualized_return(investment, investment + net_profit, years)
    if land_pct is None:
        return None
    land_rate = land_pct / 100.0

    land = AlternativeInvestment(
        key="land",
        label="This plot",
        emoji="🏗️",
        rate=land_rate,
        future_value=investment + net_profit,
        profit=net_profit,
        color="#C8942A",
        real_return=_real_return_pct(land_rate, rates),
    )

    try:
        stock = _compounded("stock", "Equities index", "📊", "#3B82F6",
                            rates.stock_return_rate, investment, years, rates)
        bank = _compounded("bank", "Bank deposit", "🏦", "#94A3B8",
                           rates.bank_deposit_rate, investment, years, rates)
    except OverflowError:
        log.warning("alternative_returns_overflow", investment=investment, years=years)
        return None

    return AlternativeReturns(
        land=land,
        stock=stock,
        bank=bank,
        years=years,
        inflation_rate=rates.inflation_rate,
    )
