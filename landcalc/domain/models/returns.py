"""Return, break-even and comparison result models."""

from __future__ import annotations

from pydantic import BaseModel, Field

_FROZEN = {"frozen": True}


class CAGRResult(BaseModel):
    """Compound annual growth rate over a holding period."""

    years: float = Field(..., gt=0)
    cagr: float = Field(..., description="Percent per year, one decimal")

    model_config = _FROZEN


class BreakEvenResult(BaseModel):
    """Outcome of the damped fixed-point break-even search.

    ``converged`` is False when the iteration budget ran out before the
    residual fell under the tolerance; ``price`` is then the last guess.
    """

    price: int
    per_sqm: int | None = None
    iterations: int
    converged: bool
    residual: float = Field(description="Net profit at the returned price")

    model_config = _FROZEN


class SensitivityRow(BaseModel):
    """One holding-period scenario of the sensitivity table."""

    years: int
    cagr: int | None = Field(description="Gross CAGR, percent")
    net_cagr: int | None = Field(description="CAGR after costs, taxes and holding costs")
    real_cagr: int | None = Field(description="Net CAGR adjusted for inflation")
    hold_costs: float
    net_profit: float
    net_with_financing: float | None = None
    is_selected: bool = False

    model_config = _FROZEN


class AlternativeInvestment(BaseModel):
    """Future value of the same capital in one asset class."""

    key: str
    label: str
    emoji: str
    rate: float = Field(description="Nominal annual rate, decimal")
    future_value: float
    profit: float
    color: str
    real_return: float = Field(description="Inflation-adjusted annual return, percent")

    model_config = _FROZEN


class AlternativeReturns(BaseModel):
    """Three-way comparison: this land, equities, bank deposit."""

    land: AlternativeInvestment
    stock: AlternativeInvestment
    bank: AlternativeInvestment
    years: float
    inflation_rate: float

    model_config = _FROZEN

    def as_list(self) -> list[AlternativeInvestment]:
        """Bar-chart order."""
        return [self.land, self.stock, self.bank]
