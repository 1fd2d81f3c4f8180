"""Unit tests for landcalc.domain.calculator.metrics module."""

from landcalc.core.rates import ZONING_ORDER, ZoningStage
from landcalc.domain.calculator.metrics import (
    calculate_buildable_value,
    calculate_investment_timeline,
    calculate_plot_metrics,
)
from landcalc.domain.models import PlotSnapshot


class TestPlotMetrics:
    """Tests for calculate_plot_metrics function."""

    def test_ratios(self, sample_plot):
        metrics = calculate_plot_metrics(sample_plot)
        assert metrics.price_per_sqm == 2_500
        assert metrics.price_per_dunam == 2_500_000
        assert metrics.projected_per_sqm == 6_000
        assert metrics.dunam == 1.0
        assert metrics.roi == 140
        assert metrics.gross_profit == 3_500_000

    def test_not_computable(self):
        assert calculate_plot_metrics(PlotSnapshot(price=1_000_000)) is None
        assert calculate_plot_metrics(None) is None


class TestBuildableValue:
    """Tests for calculate_buildable_value function."""

    def test_standard(self):
        """2 dunam at 8 units per dunam: 16 units of 100 m²."""
        plot = PlotSnapshot(price=2_400_000, size_sqm=2000, density_units_per_dunam=8)
        value = calculate_buildable_value(plot)
        assert value.estimated_units == 16
        assert value.total_buildable_area == 1_600
        assert value.price_per_buildable_sqm == 1_500
        assert value.price_per_unit == 150_000
        assert value.efficiency_ratio == 0.8

    def test_custom_unit_size(self):
        plot = PlotSnapshot(price=2_400_000, size_sqm=2000, density_units_per_dunam=8)
        assert calculate_buildable_value(plot, avg_unit_size_sqm=120).total_buildable_area == 1_920

    def test_requires_density(self, sample_plot):
        assert calculate_buildable_value(sample_plot) is None

    def test_rounds_to_zero_units(self):
        plot = PlotSnapshot(price=100_000, size_sqm=100, density_units_per_dunam=2)
        assert calculate_buildable_value(plot) is None


class TestInvestmentTimeline:
    """Tests for calculate_investment_timeline function."""

    def test_mid_pipeline(self, sample_plot):
        timeline = calculate_investment_timeline(sample_plot)
        assert timeline.elapsed_months == 20
        assert timeline.remaining_months == 26
        assert timeline.total_months == 46
        assert timeline.progress_pct == 43
        statuses = [s.status for s in timeline.stages]
        assert statuses[:3] == ["completed", "completed", "current"]
        assert statuses[3:] == ["future"] * (len(ZONING_ORDER) - 3)

    def test_first_stage(self):
        timeline = calculate_investment_timeline(PlotSnapshot(zoning_stage=ZoningStage.AGRICULTURAL))
        assert timeline.elapsed_months == 0
        assert timeline.progress_pct == 0

    def test_last_stage(self):
        timeline = calculate_investment_timeline(PlotSnapshot(zoning_stage="BUILDING_PERMIT"))
        assert timeline.remaining_months == 0
        assert timeline.progress_pct == 100

    def test_unknown_stage(self):
        assert calculate_investment_timeline(PlotSnapshot(zoning_stage="???")) is None
