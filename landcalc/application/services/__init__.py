"""Application services composing the pure calculators into view results."""

from .alternatives import calculate_alternative_returns
from .calculator import CalculatorInputs, analyze_plot, calculate_plot_financials, run_calculator
from .sensitivity import build_sensitivity_row, build_sensitivity_table, sensitivity_frame

__all__ = [
    "CalculatorInputs",
    "run_calculator",
    "calculate_plot_financials",
    "analyze_plot",
    "build_sensitivity_row",
    "build_sensitivity_table",
    "sensitivity_frame",
    "calculate_alternative_returns",
]
