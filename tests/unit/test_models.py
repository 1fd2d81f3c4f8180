"""Unit tests for Pydantic models and the rate table."""

import pytest
from pydantic import ValidationError

from landcalc.core.exceptions import ConfigurationError
from landcalc.core.rates import DEFAULT_RATES, RateTable, ZoningStage, make_rate_table, readiness_to_years
from landcalc.domain.models import (
    AnnualHoldingCosts,
    ExitCosts,
    MortgagePayment,
    PlotSnapshot,
    TransactionCosts,
)


class TestPlotSnapshot:
    """Tests for PlotSnapshot model."""

    def test_camel_case_payload(self, sample_plot):
        assert sample_plot.plot_id == "plot-1"
        assert sample_plot.price == 2_500_000
        assert sample_plot.size_sqm == 1000
        assert sample_plot.projected_value == 6_000_000
        assert sample_plot.zoning_stage is ZoningStage.MASTER_PLAN_APPROVED

    def test_snake_case_payload(self):
        plot = PlotSnapshot.model_validate({"total_price": 100, "size_sqm": 10, "zoning_stage": "agricultural"})
        assert plot.price == 100
        assert plot.zoning_stage is ZoningStage.AGRICULTURAL

    def test_tolerates_bad_values(self):
        """Unknown stages and non-finite numbers never raise."""
        plot = PlotSnapshot.model_validate(
            {"price": float("nan"), "sizeSqM": "big", "zoningStage": "SOMETHING", "views": -3, "holdingYears": 0}
        )
        assert plot.price == 0
        assert plot.size_sqm == 0
        assert plot.zoning_stage is None
        assert plot.views == 0
        assert plot.holding_years is None
        assert not plot.is_computable

    def test_unknown_keys_ignored(self):
        plot = PlotSnapshot.model_validate({"price": 1, "color": "red"})
        assert plot.price == 1

    def test_is_frozen(self, sample_plot):
        with pytest.raises(ValidationError):
            sample_plot.price = 1

    def test_price_per_sqm(self, sample_plot):
        assert sample_plot.price_per_sqm == 2_500
        assert PlotSnapshot(price=1_000).price_per_sqm == 0.0

    def test_effective_holding_years(self, sample_plot):
        assert sample_plot.effective_holding_years == 4
        assert PlotSnapshot(holding_years=8).effective_holding_years == 8

    def test_distances_in_km(self):
        plot = PlotSnapshot(distanceToSea=1500)
        assert plot.distances_km["sea"] == 1.5
        assert plot.distances_km["park"] is None

    def test_dump_is_plain_data(self, sample_plot):
        data = sample_plot.model_dump()
        assert data["zoning_stage"] == "MASTER_PLAN_APPROVED"


class TestCostModels:
    """Tests for cost record computed fields."""

    def test_transaction_totals(self):
        costs = TransactionCosts(price=100, purchase_tax=6, attorney_fees=2, appraiser_fee=3, registration_fee=1)
        assert costs.total == 12
        assert costs.total_with_purchase == 112
        assert costs.model_dump()["total"] == 12

    def test_holding_totals(self):
        costs = AnnualHoldingCosts(arnona=10, management=5, opportunity_cost=100)
        assert costs.total_annual == 15
        assert costs.total_with_opportunity == 115

    def test_exit_totals(self):
        costs = ExitCosts(gross_profit=1_000, betterment_levy=500, capital_gains=100, agent_commission=20)
        assert costs.total_exit == 620
        assert costs.net_profit == 380

    def test_mortgage_totals(self):
        mortgage = MortgagePayment(principal=1_000, annual_rate_pct=5, years=1, monthly_payment=90)
        assert mortgage.months == 12
        assert mortgage.total_payments == 1_080
        assert mortgage.total_interest == 80


class TestRateTable:
    """Tests for RateTable and its helpers."""

    def test_defaults(self):
        assert DEFAULT_RATES.purchase_tax_rate == 0.06
        assert DEFAULT_RATES.betterment_levy_rate == 0.5
        assert DEFAULT_RATES.entry_cost_rate == pytest.approx(0.0775)

    def test_arnona_by_stage(self):
        assert DEFAULT_RATES.arnona_per_sqm(ZoningStage.DETAILED_PLAN_DEPOSIT) == 2.5
        assert DEFAULT_RATES.arnona_per_sqm(ZoningStage.DETAILED_PLAN_APPROVED) == 5.0
        assert DEFAULT_RATES.arnona_per_sqm(None) == 2.5

    def test_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_RATES.purchase_tax_rate = 0.1

    def test_appraiser_bounds(self):
        with pytest.raises(ValidationError):
            RateTable(appraiser_fee_min=9_000, appraiser_fee_max=8_000)

    def test_make_rate_table(self):
        assert make_rate_table(capital_gains_rate=0.3).capital_gains_rate == 0.3

    @pytest.mark.parametrize("overrides", [{"purchase_tax_rate": 2}, {"vat_rate": 0.17}])
    def test_invalid_override(self, overrides):
        with pytest.raises(ConfigurationError):
            make_rate_table(**overrides)


class TestZoningStage:
    """Tests for ZoningStage ordering and parsing."""

    def test_order(self):
        assert ZoningStage.AGRICULTURAL.index == 0
        assert ZoningStage.BUILDING_PERMIT.index == 7
        assert ZoningStage.DETAILED_PLAN_APPROVED.is_advanced
        assert not ZoningStage.DETAILED_PLAN_DEPOSIT.is_advanced

    def test_parse(self):
        assert ZoningStage.parse(" building_permit ") is ZoningStage.BUILDING_PERMIT
        assert ZoningStage.parse("nope") is None
        assert ZoningStage.parse(3) is None

    @pytest.mark.parametrize(
        "readiness, years",
        [("1-3", 2), ("3-5", 4), ("5+", 7), ("6 years", 6), ("", 5), (None, 5), ("soon", 5)],
    )
    def test_readiness_to_years(self, readiness, years):
        assert readiness_to_years(readiness) == years
