"""Transaction, holding and exit cost models.

All three models are pure functions of their arguments and read every rate
from the ``RateTable``. Each component is rounded to the currency unit.
"""

from __future__ import annotations

from landcalc.core.rates import DEFAULT_RATES, RateTable, ZoningStage
from landcalc.domain.models import (
    AnnualHoldingCosts,
    ExitCosts,
    InvestmentPnL,
    PlotSnapshot,
    TransactionCosts,
)

from .common import as_amount, clamp, round_currency, round_half_up


def calculate_transaction_costs(
    price: float,
    rates: RateTable = DEFAULT_RATES,
) -> TransactionCosts:
    """Calculate one-time acquisition costs.

    Args:
        price: Purchase price
        rates: Rate table

    Returns:
        TransactionCosts; all zeros when price <= 0
    """
    price = as_amount(price)
    if price <= 0:
        return TransactionCosts()

    appraiser = clamp(price * rates.appraiser_fee_rate, rates.appraiser_fee_min, rates.appraiser_fee_max)

    return TransactionCosts(
        price=price,
        purchase_tax=round_currency(price * rates.purchase_tax_rate),
        attorney_fees=round_currency(price * rates.attorney_fee_rate),
        appraiser_fee=round_currency(appraiser),
        registration_fee=round_currency(rates.registration_fee),
    )


def calculate_annual_holding_costs(
    price: float,
    size_sqm: float,
    zoning_stage: ZoningStage | str | None,
    rates: RateTable = DEFAULT_RATES,
) -> AnnualHoldingCosts:
    """Calculate carrying costs for a single year of ownership.

    Arnona is cheaper before the detailed plan is approved. Multiplying by
    the holding period is left to the caller.

    Args:
        price: Purchase price (drives the opportunity cost only)
        size_sqm: Plot size in m²
        zoning_stage: Current zoning stage
        rates: Rate table

    Returns:
        AnnualHoldingCosts
    """
    price = max(0.0, as_amount(price))
    size_sqm = max(0.0, as_amount(size_sqm))
    per_sqm = rates.arnona_per_sqm(ZoningStage.parse(zoning_stage))

    return AnnualHoldingCosts(
        arnona=round_currency(size_sqm * per_sqm),
        arnona_per_sqm=per_sqm,
        management=round_currency(size_sqm * rates.management_per_sqm),
        opportunity_cost=round_currency(price * rates.opportunity_cost_rate),
    )


def calculate_exit_costs(
    price: float,
    projected_value: float,
    rates: RateTable = DEFAULT_RATES,
) -> ExitCosts:
    """Calculate taxes and commission due when selling at ``projected_value``.

    The capital gains base is the appreciation left after the betterment
    levy and the entry costs. A loss is never taxed, but the agent
    commission is still due on the sale.

    Args:
        price: Original purchase price
        projected_value: Sale price
        rates: Rate table

    Returns:
        ExitCosts
    """
    price = as_amount(price)
    projected_value = as_amount(projected_value)

    gross_profit = projected_value - price
    entry_costs = calculate_transaction_costs(price, rates).total

    gain = max(0.0, gross_profit)
    levy = gain * rates.betterment_levy_rate
    taxable = max(0.0, gain - levy - entry_costs)

    return ExitCosts(
        gross_profit=gross_profit,
        betterment_levy=round_currency(levy),
        capital_gains=round_currency(taxable * rates.capital_gains_rate),
        agent_commission=round_currency(max(projected_value, 0.0) * rates.agent_commission_rate),
    )


def calculate_investment_pnl(
    plot: PlotSnapshot,
    holding_years: float = 5,
    rates: RateTable = DEFAULT_RATES,
) -> InvestmentPnL:
    """Profit and loss of buying the plot and selling at its projected value.

    Args:
        plot: Plot snapshot
        holding_years: Years between purchase and sale
        rates: Rate table

    Returns:
        InvestmentPnL with net profit after holding costs
    """
    years = max(0.0, as_amount(holding_years))
    price = plot.price
    projected = plot.projected_value

    transaction = calculate_transaction_costs(price, rates)
    annual = calculate_annual_holding_costs(price, plot.size_sqm, plot.zoning_stage, rates)
    exit_costs = calculate_exit_costs(price, projected, rates)

    total_holding = annual.total_annual * years
    total_investment = transaction.total_with_purchase + total_holding
    net_profit = exit_costs.net_profit - transaction.total - total_holding

    return InvestmentPnL(
        purchase_price=price,
        projected_value=projected,
        holding_years=years,
        transaction=transaction,
        annual=annual,
        exit=exit_costs,
        total_holding_costs=total_holding,
        total_investment=total_investment,
        gross_profit=projected - price,
        net_profit=net_profit,
        true_roi=round_half_up(net_profit / total_investment * 100) if total_investment > 0 else 0,
        headline_roi=round_half_up((projected - price) / price * 100) if price > 0 else 0,
    )
