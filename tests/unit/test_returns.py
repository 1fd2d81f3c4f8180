"""Unit tests for landcalc.domain.calculator.returns module."""

import pytest

from landcalc.core.rates import ZoningStage
from landcalc.domain.calculator.returns import (
    annualized_return,
    calculate_cagr,
    calculate_cagr_from_readiness,
    calculate_net_cagr,
    calculate_price_cagr,
    calculate_roi,
    project_value,
    real_return_rate,
)


class TestCalculateRoi:
    """Tests for calculate_roi function."""

    def test_standard(self):
        assert calculate_roi(2_500_000, 6_000_000) == 140

    def test_loss(self):
        assert calculate_roi(1_000_000, 800_000) == -20

    def test_zero_price(self):
        assert calculate_roi(0, 1_000_000) == 0


class TestAnnualizedReturn:
    """Tests for annualized_return function."""

    def test_doubling(self):
        """Doubling over one year is +100%."""
        assert annualized_return(100, 200, 1) == pytest.approx(100.0)

    def test_total_loss_is_minus_100(self):
        """A negative end value is clamped instead of producing a complex number."""
        assert annualized_return(100, -50, 3) == pytest.approx(-100.0)

    @pytest.mark.parametrize("start, years", [(0, 5), (-1, 5), (100, 0)])
    def test_not_computable(self, start, years):
        assert annualized_return(start, 200, years) is None

    def test_overflow_is_not_computable(self):
        assert annualized_return(100, 600, 1e-4) is None


class TestCalculateCagr:
    """Tests for calculate_cagr function."""

    def test_five_years(self):
        """140% over 5 years is about 19.1% a year."""
        result = calculate_cagr(140, 5)
        assert result.years == 5
        assert result.cagr == 19.1

    def test_non_positive_roi(self):
        assert calculate_cagr(0, 5) is None
        assert calculate_cagr(-10, 5) is None

    def test_non_positive_years(self):
        assert calculate_cagr(100, 0) is None

    def test_fractional_years(self):
        """A fractional period is not truncated to whole years."""
        result = calculate_cagr(140, 2.5)
        assert result.years == 2.5
        assert result.cagr == 41.9

    def test_vanishing_period(self):
        """A growth factor that overflows is not computable."""
        assert calculate_cagr(500, 1e-4) is None

    def test_from_readiness(self):
        """'3-5' maps to a 4-year holding period."""
        result = calculate_cagr_from_readiness(140, "3-5")
        assert result.years == 4
        assert result.cagr == 24.5

    def test_from_unknown_readiness_defaults_to_five_years(self):
        assert calculate_cagr_from_readiness(140, None).years == 5


class TestPriceAndNetCagr:
    """Tests for calculate_price_cagr and calculate_net_cagr."""

    def test_price_cagr(self):
        assert calculate_price_cagr(2_500_000, 6_000_000, 5) == 19

    def test_net_cagr(self):
        assert calculate_net_cagr(2_500_000, 1_081_437, 5) == 7

    def test_net_cagr_total_loss(self):
        """Losing more than the price floors the net CAGR at -100%."""
        assert calculate_net_cagr(1_000_000, -2_000_000, 5) == -100

    def test_invalid(self):
        assert calculate_price_cagr(0, 1_000, 5) is None
        assert calculate_net_cagr(1_000, 500, 0) is None


class TestRealReturnRate:
    """Tests for real_return_rate function."""

    def test_fisher_relation(self):
        assert real_return_rate(0.09) == pytest.approx(1.09 / 1.03 - 1)

    def test_explicit_inflation(self):
        assert real_return_rate(0.05, inflation_rate=0.05) == pytest.approx(0.0)


class TestProjectValue:
    """Tests for project_value function."""

    def test_building_permit(self):
        assert project_value(1000, ZoningStage.BUILDING_PERMIT) == 12_000_000

    def test_string_stage(self):
        assert project_value(500, "detailed_plan_approved") == 5_050_000

    def test_invalid(self):
        assert project_value(1000, "UNKNOWN") == 0
        assert project_value(0, ZoningStage.AGRICULTURAL) == 0
