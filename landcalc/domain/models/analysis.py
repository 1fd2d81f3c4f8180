"""Composite analysis models for the Calculator, Compare and PlotDetail views."""

from __future__ import annotations

from pydantic import BaseModel, Field

from landcalc.core.rates import ZoningStage

from .costs import AnnualHoldingCosts, ExitCosts, FinancingPlan, InvestmentPnL, TransactionCosts
from .returns import AlternativeReturns, BreakEvenResult, CAGRResult, SensitivityRow
from .scoring import InvestmentScoreBreakdown, InvestmentVerdict, RiskLevel

_FROZEN = {"frozen": True}


class PlotMetrics(BaseModel):
    price: float
    projected: float
    size_sqm: float
    roi: int
    gross_profit: float
    price_per_sqm: int
    price_per_dunam: int
    projected_per_sqm: int
    dunam: float

    model_config = _FROZEN


class BuildableValue(BaseModel):
    """Price expressed per buildable unit and per buildable m²."""

    estimated_units: int
    total_buildable_area: float
    price_per_buildable_sqm: int
    price_per_unit: int
    efficiency_ratio: float
    density: float

    model_config = _FROZEN


class TimelineStage(BaseModel):
    stage: ZoningStage
    label: str
    duration_months: int
    status: str = Field(description="completed, current or future")

    model_config = _FROZEN


class InvestmentTimeline(BaseModel):
    stages: list[TimelineStage]
    current_stage: ZoningStage
    elapsed_months: int
    remaining_months: int
    total_months: int
    progress_pct: int

    model_config = _FROZEN


class StageProjection(BaseModel):
    """Value of the plot at one zoning stage of the calculator path."""

    stage: ZoningStage
    label: str
    price_per_sqm: float
    value: int
    is_current: bool
    is_target: bool

    model_config = _FROZEN


class CalculatorResult(BaseModel):
    """Everything the calculator view renders for one set of inputs."""

    price: float
    size_sqm: float
    current_price_per_sqm: int
    target_price_per_sqm: float
    projected_value: int
    roi_percent: int
    holding_years: float
    transaction: TransactionCosts
    holding: AnnualHoldingCosts
    exit: ExitCosts
    total_holding_costs: float
    net_profit: float
    annualized_roi: int | None
    net_annualized_roi: int | None
    break_even: BreakEvenResult
    financing: FinancingPlan | None
    sensitivity: list[SensitivityRow]
    alternatives: AlternativeReturns | None
    stages: list[StageProjection]

    model_config = _FROZEN


class PlotFinancials(BaseModel):
    """One row of the plot comparison table."""

    plot_id: str | None
    price: float
    projected: float
    size_sqm: float
    roi: int
    purchase_tax: int
    attorney_fees: int
    total_investment: float
    gross_profit: float
    betterment_levy: int
    capital_gains: int
    net_profit: float
    net_roi: int
    cagr: CAGRResult | None

    model_config = _FROZEN


class PlotAnalysis(BaseModel):
    """Bundle rendered by the plot detail view."""

    pnl: InvestmentPnL
    cagr: CAGRResult | None
    net_cagr: int | None
    break_even: BreakEvenResult | None
    alternatives: AlternativeReturns | None
    score: InvestmentScoreBreakdown
    verdict: InvestmentVerdict | None
    risk: RiskLevel | None

    model_config = _FROZEN
