"""Scoring and verdict models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

_FROZEN = {"frozen": True}

VerdictTier = Literal["hot", "excellent", "good", "fair", "poor"]


class InvestmentGrade(BaseModel):
    grade: str
    tier: str
    color: str

    model_config = _FROZEN


class ScoreLabel(BaseModel):
    """Display label for a 0-10 score."""

    label: str
    grade: str
    color: str

    model_config = _FROZEN


class ScoreFactor(BaseModel):
    """One component of the investment score."""

    key: str
    label: str
    score: float = Field(ge=0, le=1, description="Normalized 0-1")
    points: float
    max_points: float
    explanation: str

    model_config = _FROZEN


class InvestmentScoreBreakdown(BaseModel):
    total: int = Field(ge=1, le=10)
    grade: InvestmentGrade
    factors: list[ScoreFactor]

    model_config = _FROZEN


class LocationScore(BaseModel):
    """Weighted proximity score (1-10) with per-category scores."""

    score: int = Field(ge=1, le=10)
    categories: dict[str, int]

    model_config = _FROZEN


class InvestmentVerdict(BaseModel):
    tier: VerdictTier
    label: str
    description: str
    emoji: str
    color: str
    score: int
    area_deviation_pct: float = Field(description="Price/m² vs peer median, percent")

    model_config = _FROZEN


class RiskLevel(BaseModel):
    level: int = Field(ge=1, le=5)
    label: str
    color: str
    score: int
    factors: list[str]

    model_config = _FROZEN


class PercentileDimension(BaseModel):
    """Percentile of a plot within its peers for one dimension."""

    value: int
    label: str
    beats: int = Field(description="Share of peers this plot is better than, percent")

    model_config = _FROZEN


class PlotPercentiles(BaseModel):
    price: PercentileDimension | None = None
    size: PercentileDimension | None = None
    roi: PercentileDimension | None = None
    price_per_sqm: PercentileDimension | None = None

    model_config = _FROZEN
