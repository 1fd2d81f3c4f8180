"""Return metrics: ROI, CAGR, inflation-adjusted returns, projected value."""

from __future__ import annotations

from landcalc.core.rates import DEFAULT_RATES, RateTable, ZoningStage, readiness_to_years
from landcalc.domain.models import CAGRResult

from .common import as_amount, round_currency, round_half_up


def calculate_roi(price: float, projected_value: float) -> int:
    """Gross ROI in whole percent; 0 when price <= 0."""
    price = as_amount(price)
    if price <= 0:
        return 0
    return round_half_up((as_amount(projected_value) - price) / price * 100)


def annualized_return(start_value: float, end_value: float, years: float) -> float | None:
    """Unrounded compound annual growth rate, in percent.

    A negative end value is clamped to zero before exponentiation, so a
    total loss yields -100% rather than a complex number.

    Args:
        start_value: Capital at the start (must be > 0)
        end_value: Capital at the end
        years: Holding period (must be > 0)

    Returns:
        Percent per year, or None if not computable (including a period so
        short that the growth factor overflows)
    """
    start_value = as_amount(start_value)
    years = as_amount(years)
    if start_value <= 0 or years <= 0:
        return None
    ratio = max(0.0, as_amount(end_value)) / start_value
    try:
        return (ratio ** (1.0 / years) - 1.0) * 100.0
    except OverflowError:
        return None


def calculate_cagr(total_roi_pct: float, years: float) -> CAGRResult | None:
    """CAGR equivalent to a total ROI earned over ``years``.

    A fractional period is used as given, so the result agrees with
    ``calculate_net_cagr`` over the same ``years``.

    Args:
        total_roi_pct: Total return over the period, percent
        years: Holding period in years

    Returns:
        CAGRResult rounded to one decimal, or None for non-positive ROI/years
    """
    total_roi_pct = as_amount(total_roi_pct)
    years = as_amount(years)
    if total_roi_pct <= 0 or years <= 0:
        return None
    rate = annualized_return(100.0, 100.0 + total_roi_pct, years)
    if rate is None:
        return None
    return CAGRResult(years=years, cagr=round_half_up(rate * 10) / 10)


def calculate_cagr_from_readiness(total_roi_pct: float, readiness: str | None) -> CAGRResult | None:
    """CAGR using the holding period implied by a readiness estimate."""
    return calculate_cagr(total_roi_pct, readiness_to_years(readiness))


def calculate_price_cagr(price: float, projected_value: float, years: float) -> int | None:
    """Gross CAGR from purchase price to projected value, whole percent."""
    rate = annualized_return(price, projected_value, years)
    return None if rate is None else round_half_up(rate)


def calculate_net_cagr(price: float, net_profit: float, years: float) -> int | None:
    """CAGR of ``price + net_profit`` over ``price``, whole percent."""
    price = as_amount(price)
    rate = annualized_return(price, price + as_amount(net_profit), years)
    return None if rate is None else round_half_up(rate)


def real_return_rate(nominal_rate: float, inflation_rate: float | None = None, rates: RateTable = DEFAULT_RATES) -> float:
    """Inflation-adjusted rate via the Fisher relation (1+n)/(1+i) - 1.

    Both rates are decimals (0.05 for 5%).
    """
    inflation = rates.inflation_rate if inflation_rate is None else as_amount(inflation_rate)
    return (1.0 + as_amount(nominal_rate)) / (1.0 + inflation) - 1.0


def project_value(size_sqm: float, target_stage: ZoningStage | str | None, rates: RateTable = DEFAULT_RATES) -> int:
    """Expected value of a plot once it reaches ``target_stage``.

    Returns 0 for an unknown stage or a non-positive size.
    """
    stage = ZoningStage.parse(target_stage)
    size_sqm = as_amount(size_sqm)
    if stage is None or size_sqm <= 0:
        return 0
    return round_currency(rates.price_per_sqm(stage) * size_sqm)
