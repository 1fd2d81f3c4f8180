"""Per-plot metrics: price ratios, buildable value and the zoning timeline."""

from __future__ import annotations

from landcalc.core.rates import SQM_PER_DUNAM, STAGE_DURATION_MONTHS, STAGE_LABELS, ZONING_ORDER
from landcalc.domain.models import (
    BuildableValue,
    InvestmentTimeline,
    PlotMetrics,
    PlotSnapshot,
    TimelineStage,
)

from .common import round_currency, round_half_up
from .returns import calculate_roi

DEFAULT_AVG_UNIT_SIZE_SQM = 100.0


def calculate_plot_metrics(plot: PlotSnapshot | None) -> PlotMetrics | None:
    """Headline ratios of a plot.

    Returns:
        PlotMetrics, or None unless price and size are positive
    """
    if plot is None or not plot.is_computable:
        return None

    dunam = plot.size_sqm / SQM_PER_DUNAM
    return PlotMetrics(
        price=plot.price,
        projected=plot.projected_value,
        size_sqm=plot.size_sqm,
        roi=calculate_roi(plot.price, plot.projected_value),
        gross_profit=plot.projected_value - plot.price,
        price_per_sqm=round_currency(plot.price / plot.size_sqm),
        price_per_dunam=round_currency(plot.price / dunam),
        projected_per_sqm=round_currency(plot.projected_value / plot.size_sqm),
        dunam=round(dunam, 3),
    )


def calculate_buildable_value(
    plot: PlotSnapshot | None,
    avg_unit_size_sqm: float = DEFAULT_AVG_UNIT_SIZE_SQM,
) -> BuildableValue | None:
    """Price per buildable unit and per buildable m².

    Uses the plot's planned density (housing units per dunam) and an
    average unit size to estimate how much can be built on it.

    Args:
        plot: Plot snapshot with ``density_units_per_dunam``
        avg_unit_size_sqm: Average floor area of one housing unit

    Returns:
        BuildableValue, or None without price, size, density or units
    """
    if plot is None or not plot.is_computable or plot.density_units_per_dunam <= 0:
        return None
    if avg_unit_size_sqm <= 0:
        return None

    dunam = plot.size_sqm / SQM_PER_DUNAM
    units = round_half_up(dunam * plot.density_units_per_dunam)
    if units <= 0:
        return None

    buildable_area = units * avg_unit_size_sqm
    return BuildableValue(
        estimated_units=units,
        total_buildable_area=buildable_area,
        price_per_buildable_sqm=round_currency(plot.price / buildable_area),
        price_per_unit=round_currency(plot.price / units),
        efficiency_ratio=round(buildable_area / plot.size_sqm, 2),
        density=plot.density_units_per_dunam,
    )


def calculate_investment_timeline(plot: PlotSnapshot | None) -> InvestmentTimeline | None:
    """Where the plot sits on the zoning pipeline, in months.

    Elapsed months sum the durations of every stage reached after the
    first; remaining months sum the stages still ahead.
    """
    if plot is None or plot.zoning_stage is None:
        return None

    current = plot.zoning_stage.index
    stages = []
    for i, stage in enumerate(ZONING_ORDER):
        if i < current:
            status = "completed"
        elif i == current:
            status = "current"
        else:
            status = "future"
        stages.append(
            TimelineStage(
                stage=stage,
                label=STAGE_LABELS[stage],
                duration_months=STAGE_DURATION_MONTHS[stage],
                status=status,
            )
        )

    elapsed = sum(s.duration_months for s in stages[1:current + 1])
    remaining = sum(s.duration_months for s in stages[current + 1:])
    total = elapsed + remaining

    return InvestmentTimeline(
        stages=stages,
        current_stage=plot.zoning_stage,
        elapsed_months=elapsed,
        remaining_months=remaining,
        total_months=total,
        progress_pct=round_half_up(elapsed / total * 100) if total > 0 else 100,
    )
