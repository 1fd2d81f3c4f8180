"""Calculator, Compare and PlotDetail orchestration.

Every view assembles its figures through these functions, so the same
plot always yields the same costs, net profit, CAGR and break-even price
wherever it is shown.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from landcalc.core.logging import get_logger
from landcalc.core.rates import DEFAULT_RATES, STAGE_LABELS, ZONING_ORDER, RateTable, ZoningStage
from landcalc.core.settings import EngineSettings, get_settings
from landcalc.domain.calculator.breakeven import BreakEvenSolver
from landcalc.domain.calculator.common import as_amount, round_currency, round_half_up
from landcalc.domain.calculator.costs import (
    calculate_annual_holding_costs,
    calculate_exit_costs,
    calculate_investment_pnl,
    calculate_transaction_costs,
)
from landcalc.domain.calculator.financial import calculate_financing
from landcalc.domain.calculator.returns import (
    calculate_cagr,
    calculate_cagr_from_readiness,
    calculate_net_cagr,
    calculate_price_cagr,
    calculate_roi,
)
from landcalc.domain.calculator.scoring import (
    calculate_investment_verdict,
    calculate_risk_level,
    calculate_score_breakdown,
)
from landcalc.domain.models import (
    CalculatorResult,
    PlotAnalysis,
    PlotFinancials,
    PlotSnapshot,
    StageProjection,
)

from .alternatives import calculate_alternative_returns
from .sensitivity import build_sensitivity_table

log = get_logger(__name__)


@dataclass
class CalculatorInputs:
    """Raw calculator form values.

    Optional values left as None fall back to the engine settings.
    """

    price: float = 0.0
    size_sqm: float = 0.0
    current_zoning: ZoningStage | str | None = ZoningStage.AGRICULTURAL
    target_zoning: ZoningStage | str | None = ZoningStage.BUILDING_PERMIT
    holding_years: float | None = None
    down_payment_pct: float | None = None
    interest_rate_pct: float | None = None
    loan_years: float | None = None
    include_financing: bool = True

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> CalculatorInputs:
        return cls(
            price=d.get("price", d.get("purchase_price", 0.0)),
            size_sqm=d.get("size_sqm", d.get("plot_size", 0.0)),
            current_zoning=d.get("current_zoning") or ZoningStage.AGRICULTURAL,
            target_zoning=d.get("target_zoning") or ZoningStage.BUILDING_PERMIT,
            holding_years=d.get("holding_years"),
            down_payment_pct=d.get("down_payment_pct"),
            interest_rate_pct=d.get("interest_rate_pct"),
            loan_years=d.get("loan_years"),
            include_financing=d.get("include_financing", True),
        )

    def resolved(self, settings: EngineSettings) -> dict[str, float]:
        """Numeric inputs with invalid or missing values replaced by defaults."""

        def positive_or(value: Any, default: float) -> float:
            number = as_amount(value)
            return number if number > 0 else float(default)

        down_payment = self.down_payment_pct
        return {
            "holding_years": positive_or(self.holding_years, settings.default_holding_years),
            "down_payment_pct": (
                float(settings.default_down_payment_pct)
                if down_payment is None
                else min(100.0, max(0.0, as_amount(down_payment)))
            ),
            "interest_rate_pct": positive_or(self.interest_rate_pct, settings.default_interest_rate_pct),
            "loan_years": positive_or(self.loan_years, settings.default_loan_years),
        }


def run_calculator(
    inputs: CalculatorInputs,
    rates: RateTable = DEFAULT_RATES,
    settings: EngineSettings | None = None,
    solver: BreakEvenSolver | None = None,
) -> CalculatorResult | None:
    """Project a purchase from its current zoning stage to a target stage.

    Args:
        inputs: Calculator form values
        rates: Rate table
        settings: Engine settings (cached settings if omitted)
        solver: Break-even solver (built from settings if omitted)

    Returns:
        CalculatorResult, or None when price or size is not positive, a
        stage is unknown, or the target is not after the current stage
    """
    settings = settings or get_settings()
    solver = solver or BreakEvenSolver.from_settings(settings)

    price = as_amount(inputs.price)
    size = as_amount(inputs.size_sqm)
    current = ZoningStage.parse(inputs.current_zoning)
    target = ZoningStage.parse(inputs.target_zoning)

    if price <= 0 or size <= 0:
        return None
    if current is None or target is None or target.index <= current.index:
        return None

    resolved = inputs.resolved(settings)
    years = resolved["holding_years"]

    target_price_per_sqm = rates.price_per_sqm(target)
    projected_value = round_currency(target_price_per_sqm * size)

    transaction = calculate_transaction_costs(price, rates)
    exit_costs = calculate_exit_costs(price, projected_value, rates)
    holding = calculate_annual_holding_costs(price, size, current, rates)
    total_holding = holding.total_annual * years
    net_profit = exit_costs.net_profit - transaction.total - total_holding

    break_even = solver.solve(
        price,
        transaction.total,
        total_holding,
        lambda p, s: calculate_exit_costs(p, s, rates),
        size_sqm=size,
        rates=rates,
    )

    financing = None
    if inputs.include_financing:
        financing = calculate_financing(
            price,
            resolved["down_payment_pct"],
            resolved["interest_rate_pct"],
            resolved["loan_years"],
        )

    sensitivity = build_sensitivity_table(
        price,
        projected_value,
        exit_costs.net_profit,
        transaction.total,
        holding.total_annual,
        selected_years=years,
        financing=financing,
        years=settings.sensitivity_years,
        rates=rates,
    )

    stages = [
        StageProjection(
            stage=stage,
            label=STAGE_LABELS[stage],
            price_per_sqm=rates.price_per_sqm(stage),
            value=round_currency(rates.price_per_sqm(stage) * size),
            is_current=stage is current,
            is_target=stage is target,
        )
        for stage in ZONING_ORDER[current.index:target.index + 1]
    ]

    log.debug(
        "calculator_run",
        price=price,
        size_sqm=size,
        current=current.value,
        target=target.value,
        net_profit=net_profit,
    )

    return CalculatorResult(
        price=price,
        size_sqm=size,
        current_price_per_sqm=round_currency(price / size),
        target_price_per_sqm=target_price_per_sqm,
        projected_value=projected_value,
        roi_percent=calculate_roi(price, projected_value),
        holding_years=years,
        transaction=transaction,
        holding=holding,
        exit=exit_costs,
        total_holding_costs=total_holding,
        net_profit=net_profit,
        annualized_roi=calculate_price_cagr(price, projected_value, years),
        net_annualized_roi=calculate_net_cagr(price, net_profit, years),
        break_even=break_even,
        financing=financing,
        sensitivity=sensitivity,
        alternatives=calculate_alternative_returns(price, net_profit, years, rates),
        stages=stages,
    )


def calculate_plot_financials(
    plot: PlotSnapshot,
    rates: RateTable = DEFAULT_RATES,
) -> PlotFinancials:
    """One Compare-table row for a plot.

    Net profit includes holding costs over the plot's effective holding
    period, matching the calculator and the detail view.
    """
    pnl = calculate_investment_pnl(plot, plot.effective_holding_years, rates)
    total_investment = pnl.transaction.total_with_purchase
    roi = calculate_roi(plot.price, plot.projected_value)

    return PlotFinancials(
        plot_id=plot.plot_id,
        price=plot.price,
        projected=plot.projected_value,
        size_sqm=plot.size_sqm,
        roi=roi,
        purchase_tax=pnl.transaction.purchase_tax,
        attorney_fees=pnl.transaction.attorney_fees,
        total_investment=total_investment,
        gross_profit=pnl.gross_profit,
        betterment_levy=pnl.exit.betterment_levy,
        capital_gains=pnl.exit.capital_gains,
        net_profit=pnl.net_profit,
        net_roi=round_half_up(pnl.net_profit / total_investment * 100) if total_investment > 0 else 0,
        cagr=calculate_cagr_from_readiness(roi, plot.readiness_estimate),
    )


def analyze_plot(
    plot: PlotSnapshot,
    peers: Sequence[PlotSnapshot] = (),
    holding_years: float | None = None,
    rates: RateTable = DEFAULT_RATES,
    solver: BreakEvenSolver | None = None,
) -> PlotAnalysis:
    """Everything the plot detail view shows for one plot.

    Args:
        plot: Plot snapshot
        peers: Comparable plots for the score, verdict and risk
        holding_years: Overrides the plot's own holding period
        rates: Rate table
        solver: Break-even solver (built from settings if omitted)

    Returns:
        PlotAnalysis; break-even and alternatives are None for a
        non-computable plot
    """
    years = as_amount(holding_years)
    if years <= 0:
        years = plot.effective_holding_years

    pnl = calculate_investment_pnl(plot, years, rates)

    break_even = None
    alternatives = None
    net_cagr = None
    if plot.is_computable:
        solver = solver or BreakEvenSolver.from_settings()
        break_even = solver.solve(
            plot.price,
            pnl.transaction.total,
            pnl.total_holding_costs,
            lambda p, s: calculate_exit_costs(p, s, rates),
            size_sqm=plot.size_sqm,
            rates=rates,
        )
        alternatives = calculate_alternative_returns(plot.price, pnl.net_profit, years, rates)
        net_cagr = calculate_net_cagr(plot.price, pnl.net_profit, years)

    return PlotAnalysis(
        pnl=pnl,
        cagr=calculate_cagr(pnl.headline_roi, years),
        net_cagr=net_cagr,
        break_even=break_even,
        alternatives=alternatives,
        score=calculate_score_breakdown(plot, peers),
        verdict=calculate_investment_verdict(plot, peers),
        risk=calculate_risk_level(plot, peers),
    )
