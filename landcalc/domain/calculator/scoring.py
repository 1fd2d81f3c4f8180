"""Scoring functions for plots.

Contains the composite investment score (0-10) and its breakdown, location
(proximity) scoring, letter grades, the peer-relative verdict, the risk
level and peer percentiles.

Peer comparisons benchmark a plot's price per m² against the *median* of
its peers (same city when at least two exist, otherwise all of them).
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from landcalc.core.rates import ZONING_ORDER, STAGE_LABELS, ZoningStage
from landcalc.domain.models import (
    InvestmentGrade,
    InvestmentScoreBreakdown,
    InvestmentVerdict,
    LocationScore,
    PercentileDimension,
    PlotPercentiles,
    PlotSnapshot,
    RiskLevel,
    ScoreFactor,
    ScoreLabel,
)

from .common import clamp, round_half_up
from .returns import calculate_roi

# Points available per component of the base score (sum to 10)
ROI_MAX_POINTS = 4.0
ZONING_MAX_POINTS = 3.0
READINESS_MAX_POINTS = 3.0

# Bonus components
MARKET_MAX_POINTS = 1.0
DEMAND_MAX_POINTS = 0.5
PROXIMITY_MAX_POINTS = 1.0

ROI_PCT_PER_POINT = 50.0

READINESS_POINTS = {
    "1-3": 3.0,
    "3-5": 2.0,
    "5+": 0.5,
    "5-": 0.5,
}
READINESS_UNKNOWN_POINTS = 1.5

# (field, weight, distance thresholds in km for 10 / 7 / 4 points)
PROXIMITY_CONFIG = [
    ("sea", 1.2, (1.0, 3.0, 6.0)),
    ("park", 0.8, (0.5, 1.0, 3.0)),
    ("hospital", 0.7, (2.0, 5.0, 10.0)),
    ("bus", 1.0, (0.3, 0.8, 1.5)),
    ("train", 1.1, (1.0, 3.0, 7.0)),
    ("school", 0.6, (0.5, 1.5, 3.0)),
    ("shopping", 0.5, (0.5, 1.5, 4.0)),
]

LOCATION_CATEGORIES = {
    "nature": ("sea", "park"),
    "services": ("hospital", "school", "shopping"),
    "transport": ("bus", "train"),
}

# Base risk by zoning stage (higher = riskier)
ZONING_RISK = {
    ZoningStage.AGRICULTURAL: 30,
    ZoningStage.MASTER_PLAN_DEPOSIT: 25,
    ZoningStage.MASTER_PLAN_APPROVED: 18,
    ZoningStage.DETAILED_PLAN_PREP: 15,
    ZoningStage.DETAILED_PLAN_DEPOSIT: 10,
    ZoningStage.DETAILED_PLAN_APPROVED: 5,
    ZoningStage.DEVELOPER_TENDER: 3,
    ZoningStage.BUILDING_PERMIT: 1,
}
UNKNOWN_ZONING_RISK = 20

RISK_LEVELS = {
    1: ("Low risk", "#22C55E"),
    2: ("Low-medium risk", "#84CC16"),
    3: ("Medium risk", "#F59E0B"),
    4: ("Medium-high risk", "#F97316"),
    5: ("High risk", "#EF4444"),
}

GRADES = [
    (9, "A+", "exceptional", "#22C55E"),
    (8, "A", "excellent", "#22C55E"),
    (7, "A-", "very-good", "#4ADE80"),
    (6, "B+", "good", "#84CC16"),
    (5, "B", "fair", "#F59E0B"),
    (4, "B-", "below-avg", "#F97316"),
    (3, "C+", "weak", "#EF4444"),
]
LOWEST_GRADE = ("C", "poor", "#DC2626")


# --- Components ---

def _readiness_points(readiness: str) -> float | None:
    for bucket, points in READINESS_POINTS.items():
        if bucket in readiness:
            return points
    return None


def _zoning_points(stage: ZoningStage | None) -> float:
    if stage is None:
        return 0.0
    return stage.index / (len(ZONING_ORDER) - 1) * ZONING_MAX_POINTS


def _proximity_points(distance_km: float | None, thresholds: tuple[float, float, float]) -> int | None:
    if distance_km is None:
        return None
    if distance_km <= thresholds[0]:
        return 10
    if distance_km <= thresholds[1]:
        return 7
    if distance_km <= thresholds[2]:
        return 4
    return 2


def _weighted_proximity(distances: dict[str, float | None], fields: Iterable[str]) -> int | None:
    total, weight_sum = 0.0, 0.0
    wanted = set(fields)
    for field, weight, thresholds in PROXIMITY_CONFIG:
        if field not in wanted:
            continue
        points = _proximity_points(distances.get(field), thresholds)
        if points is not None:
            total += points * weight
            weight_sum += weight
    if weight_sum <= 0:
        return None
    return int(clamp(round_half_up(total / weight_sum), 1, 10))


def calculate_location_score(plot: PlotSnapshot) -> LocationScore | None:
    """Weighted proximity score from the plot's distances.

    Args:
        plot: Plot snapshot with distances in meters

    Returns:
        LocationScore (1-10 overall and per category), or None without data
    """
    distances = plot.distances_km
    overall = _weighted_proximity(distances, distances.keys())
    if overall is None:
        return None

    categories = {}
    for name, fields in LOCATION_CATEGORIES.items():
        score = _weighted_proximity(distances, fields)
        if score is not None:
            categories[name] = score

    return LocationScore(score=overall, categories=categories)


# --- Peers ---

def _peer_pool(plot: PlotSnapshot, peers: Sequence[PlotSnapshot]) -> list[PlotSnapshot]:
    """Other plots in the same city, falling back to all other plots."""
    others = [
        p for p in peers
        if p is not plot and (plot.plot_id is None or p.plot_id != plot.plot_id)
    ]
    same_city = [p for p in others if p.city == plot.city]
    return same_city if len(same_city) >= 2 else others


def peer_median_price_per_sqm(plot: PlotSnapshot, peers: Sequence[PlotSnapshot]) -> float | None:
    """Median price per m² of the plot's peers, or None if not computable."""
    values = [p.price_per_sqm for p in _peer_pool(plot, peers) if p.is_computable]
    if not values:
        return None
    return float(np.median(values))


def area_deviation_pct(plot: PlotSnapshot, peers: Sequence[PlotSnapshot]) -> float | None:
    """How far the plot's price per m² sits from its peer median, percent."""
    if not plot.is_computable:
        return None
    median = peer_median_price_per_sqm(plot, peers)
    if not median:
        return None
    return (plot.price_per_sqm - median) / median * 100


# --- Score ---

def calculate_score_breakdown(
    plot: PlotSnapshot,
    peers: Sequence[PlotSnapshot] = (),
) -> InvestmentScoreBreakdown:
    """Composite 0-10 investment score with its factors.

    Base points: ROI (4), zoning progress (3) and readiness (3). Bonus
    points: market position against peers (1), demand from views (0.5)
    and proximity (1). The total is rounded and clamped to [1, 10].

    Args:
        plot: Plot snapshot
        peers: Comparable plots (may include the plot itself)

    Returns:
        InvestmentScoreBreakdown
    """
    roi = calculate_roi(plot.price, plot.projected_value)
    factors: list[ScoreFactor] = []

    # ROI
    roi_points = clamp(roi / ROI_PCT_PER_POINT, 0.0, ROI_MAX_POINTS)
    if roi >= 200:
        roi_text = f"Exceptional expected return +{roi}%"
    elif roi >= 100:
        roi_text = f"Expected return +{roi}% doubles the investment"
    elif roi >= 50:
        roi_text = f"Reasonable expected return +{roi}%"
    else:
        roi_text = f"Low expected return +{roi}%, compare alternatives"
    factors.append(_factor("roi", "Expected return", roi_points, ROI_MAX_POINTS, roi_text))

    # Zoning
    stage = plot.zoning_stage
    zoning_points = _zoning_points(stage)
    stage_label = STAGE_LABELS[stage] if stage is not None else "Unknown stage"
    if stage is not None and stage.index >= 6:
        zoning_text = f"{stage_label}: close to construction"
    elif stage is not None and stage.index >= 4:
        zoning_text = f"{stage_label}: good planning progress"
    elif stage is not None and stage.index >= 2:
        zoning_text = f"{stage_label}: planning in progress"
    else:
        zoning_text = f"{stage_label}: early stage, long horizon"
    factors.append(_factor("zoning", "Zoning stage", zoning_points, ZONING_MAX_POINTS, zoning_text))

    # Readiness
    readiness_points = _readiness_points(plot.readiness_estimate)
    if readiness_points is None:
        readiness_points = READINESS_UNKNOWN_POINTS
        readiness_text = "Unknown horizon"
    else:
        readiness_text = f"Horizon {plot.readiness_estimate} years"
    factors.append(_factor("readiness", "Time horizon", readiness_points, READINESS_MAX_POINTS, readiness_text))

    # Market position
    market_points = 0.0
    market_text = "Not enough peer data"
    deviation = area_deviation_pct(plot, peers)
    if deviation is not None:
        if deviation < -15:
            market_points, market_text = 1.0, f"{abs(round_half_up(deviation))}% below peer median"
        elif deviation < -5:
            market_points, market_text = 0.6, f"{abs(round_half_up(deviation))}% below peer median"
        elif deviation <= 10:
            market_points, market_text = 0.3, "Priced in line with peers"
        else:
            market_text = f"{round_half_up(deviation)}% above peer median"
    factors.append(_factor("market", "Market position", market_points, MARKET_MAX_POINTS, market_text))

    # Demand
    demand_points = 0.0
    demand_text = "No demand data"
    if plot.views >= 20:
        demand_points, demand_text = 0.5, f"{plot.views} views, high demand"
    elif plot.views >= 10:
        demand_points, demand_text = 0.3, f"{plot.views} views, moderate interest"
    elif plot.views > 0:
        demand_points, demand_text = 0.1, f"{plot.views} views"
    factors.append(_factor("demand", "Demand", demand_points, DEMAND_MAX_POINTS, demand_text))

    # Proximity
    proximity_points = 0.0
    proximity_text = "No proximity data"
    location = calculate_location_score(plot)
    if location is not None:
        proximity_points = clamp((location.score - 5) / 5 * PROXIMITY_MAX_POINTS, 0.0, PROXIMITY_MAX_POINTS)
        proximity_text = f"Location score {location.score}/10"
    factors.append(_factor("proximity", "Proximity", proximity_points, PROXIMITY_MAX_POINTS, proximity_text))

    raw = sum(f.points for f in factors)
    total = int(clamp(round_half_up(raw), 1, 10))
    return InvestmentScoreBreakdown(total=total, grade=get_investment_grade(total), factors=factors)


def _factor(key: str, label: str, points: float, max_points: float, explanation: str) -> ScoreFactor:
    return ScoreFactor(
        key=key,
        label=label,
        score=clamp(points / max_points, 0.0, 1.0),
        points=round(points, 2),
        max_points=max_points,
        explanation=explanation,
    )


def calculate_investment_score(plot: PlotSnapshot, peers: Sequence[PlotSnapshot] = ()) -> int:
    """Composite investment score, 1-10."""
    return calculate_score_breakdown(plot, peers).total


def get_investment_grade(score: float) -> InvestmentGrade:
    """Letter grade for a 0-10 score."""
    for threshold, grade, tier, color in GRADES:
        if score >= threshold:
            return InvestmentGrade(grade=grade, tier=tier, color=color)
    grade, tier, color = LOWEST_GRADE
    return InvestmentGrade(grade=grade, tier=tier, color=color)


def get_score_label(score: float) -> ScoreLabel:
    """Display label for a 0-10 score."""
    grade = get_investment_grade(score).grade
    if score >= 8:
        return ScoreLabel(label="Excellent", grade=grade, color="#22C55E")
    if score >= 6:
        return ScoreLabel(label="Good", grade=grade, color="#84CC16")
    if score >= 4:
        return ScoreLabel(label="Average", grade=grade, color="#F59E0B")
    return ScoreLabel(label="Low", grade=grade, color="#EF4444")


# --- Verdict ---

def calculate_investment_verdict(
    plot: PlotSnapshot | None,
    peers: Sequence[PlotSnapshot] = (),
) -> InvestmentVerdict | None:
    """Qualitative verdict tier for a plot.

    Thresholds the composite score and, when at least two peers exist,
    the plot's deviation from the peer median price per m².

    Args:
        plot: Plot snapshot
        peers: Comparable plots

    Returns:
        InvestmentVerdict, or None without a plot
    """
    if plot is None:
        return None

    roi = calculate_roi(plot.price, plot.projected_value)
    score = calculate_investment_score(plot, peers)

    deviation = area_deviation_pct(plot, peers) if len(peers) >= 2 else None
    dev = deviation or 0.0

    significantly_below = dev < -15
    below = dev < -8
    above = dev > 10

    if score >= 8 and (significantly_below or roi >= 200):
        description = (
            f"{abs(round_half_up(dev))}% below the area median, score {score}/10"
            if significantly_below
            else f"Outstanding return +{roi}%, score {score}/10"
        )
        return _verdict("hot", "Hot deal", description, "🔥", "#F97316", score, dev)

    if score >= 7 and (below or roi >= 150):
        description = (
            f"Attractive price, {abs(round_half_up(dev))}% below the median"
            if below
            else f"High return +{roi}% with score {score}/10"
        )
        return _verdict("excellent", "Excellent investment", description, "⭐", "#22C55E", score, dev)

    if score >= 5:
        return _verdict(
            "good", "Good opportunity", f"Score {score}/10, return +{roi}%", "✅", "#84CC16", score, dev
        )

    if score >= 3 and not above:
        return _verdict(
            "fair", "Worth a look", f"Score {score}/10, check planning and taxation", "📊", "#F59E0B", score, dev
        )

    description = (
        f"Price {round_half_up(dev)}% above the median, needs review"
        if above
        else f"Score {score}/10, higher-risk investment"
    )
    return _verdict("poor", "Needs careful review", description, "⚠️", "#EF4444", score, dev)


def _verdict(tier, label, description, emoji, color, score, deviation) -> InvestmentVerdict:
    return InvestmentVerdict(
        tier=tier,
        label=label,
        description=description,
        emoji=emoji,
        color=color,
        score=score,
        area_deviation_pct=round(deviation, 1),
    )


# --- Risk ---

def calculate_risk_level(
    plot: PlotSnapshot | None,
    peers: Sequence[PlotSnapshot] = (),
) -> RiskLevel | None:
    """Five-level risk rating from zoning, horizon, pricing and ROI.

    Returns:
        RiskLevel with up to three contributing factors, or None without a plot
    """
    if plot is None:
        return None

    roi = calculate_roi(plot.price, plot.projected_value)
    risk = 0
    factors: list[str] = []

    zoning_risk = ZONING_RISK.get(plot.zoning_stage, UNKNOWN_ZONING_RISK)
    risk += zoning_risk
    if zoning_risk >= 25:
        factors.append("Early planning stage")
    elif zoning_risk >= 15:
        factors.append("Planning in progress")

    readiness = plot.readiness_estimate
    time_risk = 15
    if "1-3" in readiness:
        time_risk = 8
    elif "5+" in readiness or "5-" in readiness:
        time_risk = 25
    risk += time_risk
    if time_risk >= 20:
        factors.append("Long investment horizon (5+ years)")

    if len(peers) >= 3:
        deviation = area_deviation_pct(plot, peers)
        if deviation is not None:
            if deviation > 20:
                risk += 20
                factors.append("Priced well above the area median")
            elif deviation > 10:
                risk += 10
                factors.append("Priced above the area median")
            elif deviation < -20:
                risk += 5
                factors.append("Unusually low price, verify")

    if roi > 300:
        risk += 15
        factors.append("Very high projected return, verify")
    elif roi > 200:
        risk += 8
    elif roi < 30 and plot.price > 0:
        risk += 5
        factors.append("Low projected return")

    # Baseline market risk
    risk += 5
    if plot.size_sqm > 10_000:
        risk += 5
        factors.append("Large plot, lower liquidity")

    if risk <= 20:
        level = 1
    elif risk <= 35:
        level = 2
    elif risk <= 50:
        level = 3
    elif risk <= 70:
        level = 4
    else:
        level = 5

    label, color = RISK_LEVELS[level]
    return RiskLevel(level=level, label=label, color=color, score=risk, factors=factors[:3])


# --- Percentiles ---

def calculate_percentile(value: float, values: Sequence[float]) -> int:
    """Share of ``values`` strictly below ``value``, whole percent."""
    if not values:
        return 0
    below = sum(1 for v in values if v < value)
    return round_half_up(below / len(values) * 100)


def calculate_plot_percentiles(
    plot: PlotSnapshot | None,
    peers: Sequence[PlotSnapshot],
) -> PlotPercentiles | None:
    """Where the plot ranks among ``peers`` on price, size, ROI and price/m².

    Args:
        plot: Plot snapshot
        peers: Full comparison set (at least two plots)

    Returns:
        PlotPercentiles, or None with fewer than two peers
    """
    if plot is None or len(peers) < 2:
        return None

    def roi_of(p: PlotSnapshot) -> float:
        return (p.projected_value - p.price) / p.price * 100 if p.price > 0 else 0.0

    prices = [p.price for p in peers if p.price > 0]
    sizes = [p.size_sqm for p in peers if p.size_sqm > 0]
    rois = [roi_of(p) for p in peers if roi_of(p) > 0]
    per_sqm = [p.price_per_sqm for p in peers if p.price_per_sqm > 0]

    def dimension(value: float, values: list[float], label: str, lower_is_better: bool) -> PercentileDimension | None:
        if value <= 0:
            return None
        pct = calculate_percentile(value, values)
        return PercentileDimension(value=pct, label=label, beats=100 - pct if lower_is_better else pct)

    return PlotPercentiles(
        price=dimension(plot.price, prices, "Price", True),
        size=dimension(plot.size_sqm, sizes, "Size", False),
        roi=dimension(roi_of(plot), rois, "Return", False),
        price_per_sqm=dimension(plot.price_per_sqm, per_sqm, "Price per m²", True),
    )
