"""Data models for landcalc."""

from .analysis import (
    BuildableValue,
    CalculatorResult,
    InvestmentTimeline,
    PlotAnalysis,
    PlotFinancials,
    PlotMetrics,
    StageProjection,
    TimelineStage,
)
from .costs import (
    AnnualHoldingCosts,
    ExitCosts,
    FinancingPlan,
    InvestmentPnL,
    MortgagePayment,
    TransactionCosts,
)
from .plot import PlotSnapshot
from .returns import (
    AlternativeInvestment,
    AlternativeReturns,
    BreakEvenResult,
    CAGRResult,
    SensitivityRow,
)
from .scoring import (
    InvestmentGrade,
    InvestmentScoreBreakdown,
    InvestmentVerdict,
    LocationScore,
    PercentileDimension,
    PlotPercentiles,
    RiskLevel,
    ScoreFactor,
    ScoreLabel,
)

__all__ = [
    "PlotSnapshot",
    "TransactionCosts",
    "AnnualHoldingCosts",
    "ExitCosts",
    "InvestmentPnL",
    "MortgagePayment",
    "FinancingPlan",
    "CAGRResult",
    "BreakEvenResult",
    "SensitivityRow",
    "AlternativeInvestment",
    "AlternativeReturns",
    "InvestmentGrade",
    "ScoreLabel",
    "ScoreFactor",
    "InvestmentScoreBreakdown",
    "LocationScore",
    "InvestmentVerdict",
    "RiskLevel",
    "PercentileDimension",
    "PlotPercentiles",
    "PlotMetrics",
    "BuildableValue",
    "TimelineStage",
    "InvestmentTimeline",
    "StageProjection",
    "CalculatorResult",
    "PlotFinancials",
    "PlotAnalysis",
]
