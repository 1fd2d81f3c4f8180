"""Break-even sale price solver.

Finds the sale price S at which

    S - price - entry_costs - holding_costs - exit_costs(price, S).total_exit = 0

Exit costs are piecewise linear in S (the betterment levy and capital gains
tax only kick in above the purchase price), so the root is found with a
bounded damped fixed-point iteration rather than a closed form:

    guess <- guess - damping * net(guess)

The iteration budget, tolerance and damping factor are explicit solver
parameters. If the budget runs out the last guess is returned anyway and
the result is flagged ``converged=False``.
"""

from __future__ import annotations

from typing import Callable

import structlog

from landcalc.core.exceptions import InvalidParameterError
from landcalc.core.rates import (
    BREAK_EVEN_DAMPING,
    BREAK_EVEN_INITIAL_FACTOR,
    BREAK_EVEN_MAX_ITERATIONS,
    BREAK_EVEN_TOLERANCE,
    DEFAULT_RATES,
    RateTable,
)
from landcalc.domain.models import BreakEvenResult, ExitCosts

from .common import as_amount, round_currency
from .costs import calculate_exit_costs

log = structlog.get_logger(__name__)

ExitCostFn = Callable[[float, float], ExitCosts]


class BreakEvenSolver:
    """Damped fixed-point solver for the minimum break-even sale price."""

    def __init__(
        self,
        max_iterations: int = BREAK_EVEN_MAX_ITERATIONS,
        tolerance: float = BREAK_EVEN_TOLERANCE,
        damping: float = BREAK_EVEN_DAMPING,
        initial_factor: float = BREAK_EVEN_INITIAL_FACTOR,
    ):
        if max_iterations < 1:
            raise InvalidParameterError("max_iterations", max_iterations, "must be >= 1")
        if tolerance <= 0:
            raise InvalidParameterError("tolerance", tolerance, "must be > 0")
        if not 0 < damping <= 1:
            raise InvalidParameterError("damping", damping, "must be in (0, 1]")
        if initial_factor <= 0:
            raise InvalidParameterError("initial_factor", initial_factor, "must be > 0")

        self.max_iterations = int(max_iterations)
        self.tolerance = float(tolerance)
        self.damping = float(damping)
        self.initial_factor = float(initial_factor)

    @classmethod
    def from_settings(cls, settings=None) -> BreakEvenSolver:
        """Build a solver from the engine settings."""
        if settings is None:
            from landcalc.core.settings import get_settings

            settings = get_settings()
        return cls(
            max_iterations=settings.break_even_max_iterations,
            tolerance=settings.break_even_tolerance,
            damping=settings.break_even_damping,
        )

    def solve(
        self,
        price: float,
        entry_costs: float,
        holding_costs: float,
        exit_cost_fn: ExitCostFn | None = None,
        size_sqm: float | None = None,
        rates: RateTable = DEFAULT_RATES,
    ) -> BreakEvenResult:
        """Search the sale price at which net profit is zero.

        Args:
            price: Purchase price
            entry_costs: One-time acquisition costs
            holding_costs: Cumulative holding costs over the whole period
            exit_cost_fn: ``(price, sale_price) -> ExitCosts``; defaults to
                ``calculate_exit_costs`` with ``rates``
            size_sqm: Plot size, used for the per-m² figure
            rates: Rate table for the default exit cost model

        Returns:
            BreakEvenResult (the last guess when not converged)
        """
        price = as_amount(price)
        entry_costs = as_amount(entry_costs)
        holding_costs = as_amount(holding_costs)
        if exit_cost_fn is None:
            exit_cost_fn = lambda p, s: calculate_exit_costs(p, s, rates)  # noqa: E731

        sunk = price + entry_costs + holding_costs

        def net(sale_price: float) -> float:
            exit_costs = exit_cost_fn(price, sale_price)
            return sale_price - sunk - exit_costs.total_exit

        guess = sunk * self.initial_factor
        residual = net(guess)
        iterations = 0
        converged = abs(residual) < self.tolerance

        while not converged and iterations < self.max_iterations:
            guess -= residual * self.damping
            iterations += 1
            residual = net(guess)
            converged = abs(residual) < self.tolerance

        if not converged:
            log.warning(
                "break_even_not_converged",
                price=price,
                iterations=iterations,
                residual=round(residual, 2),
            )

        break_even = round_currency(guess)
        size = as_amount(size_sqm)
        return BreakEvenResult(
            price=break_even,
            per_sqm=round_currency(break_even / size) if size > 0 else None,
            iterations=iterations,
            converged=converged,
            residual=residual,
        )


def solve_break_even(
    price: float,
    entry_costs: float,
    holding_costs: float,
    exit_cost_fn: ExitCostFn | None = None,
    size_sqm: float | None = None,
    solver: BreakEvenSolver | None = None,
) -> BreakEvenResult:
    """Solve with the configured solver (settings defaults if none given)."""
    solver = solver or BreakEvenSolver.from_settings()
    return solver.solve(price, entry_costs, holding_costs, exit_cost_fn, size_sqm)


def solve_break_even_price(
    price: float,
    entry_costs: float,
    holding_costs: float,
    exit_cost_fn: ExitCostFn | None = None,
) -> int:
    """Plain-number form: the break-even sale price only."""
    return solve_break_even(price, entry_costs, holding_costs, exit_cost_fn).price
