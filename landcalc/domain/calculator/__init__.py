"""Pure calculation functions for the investment engine."""

from .breakeven import BreakEvenSolver, solve_break_even, solve_break_even_price
from .costs import (
    calculate_annual_holding_costs,
    calculate_exit_costs,
    calculate_investment_pnl,
    calculate_transaction_costs,
)
from .financial import (
    calculate_financing,
    calculate_monthly_payment,
    calculate_mortgage,
    calculate_remaining_balance,
    generate_amortization_schedule,
)
from .metrics import calculate_buildable_value, calculate_investment_timeline, calculate_plot_metrics
from .returns import (
    annualized_return,
    calculate_cagr,
    calculate_cagr_from_readiness,
    calculate_net_cagr,
    calculate_price_cagr,
    calculate_roi,
    project_value,
    real_return_rate,
)
from .scoring import (
    calculate_investment_score,
    calculate_investment_verdict,
    calculate_location_score,
    calculate_percentile,
    calculate_plot_percentiles,
    calculate_risk_level,
    calculate_score_breakdown,
    get_investment_grade,
    get_score_label,
)

__all__ = [
    # Costs
    "calculate_transaction_costs",
    "calculate_annual_holding_costs",
    "calculate_exit_costs",
    "calculate_investment_pnl",
    # Financing
    "calculate_monthly_payment",
    "calculate_mortgage",
    "calculate_financing",
    "generate_amortization_schedule",
    "calculate_remaining_balance",
    # Returns
    "calculate_roi",
    "annualized_return",
    "calculate_cagr",
    "calculate_cagr_from_readiness",
    "calculate_price_cagr",
    "calculate_net_cagr",
    "real_return_rate",
    "project_value",
    # Break-even
    "BreakEvenSolver",
    "solve_break_even",
    "solve_break_even_price",
    # Scoring
    "calculate_investment_score",
    "calculate_score_breakdown",
    "calculate_location_score",
    "get_investment_grade",
    "get_score_label",
    "calculate_investment_verdict",
    "calculate_risk_level",
    "calculate_percentile",
    "calculate_plot_percentiles",
    # Metrics
    "calculate_plot_metrics",
    "calculate_buildable_value",
    "calculate_investment_timeline",
]
