"""Unit tests for landcalc.domain.calculator.financial module."""

import pytest

from landcalc.domain.calculator.financial import (
    calculate_financing,
    calculate_monthly_payment,
    calculate_mortgage,
    calculate_remaining_balance,
    generate_amortization_schedule,
)


class TestCalculateMonthlyPayment:
    """Tests for calculate_monthly_payment function."""

    def test_standard_loan(self):
        """1.75M over 15 years at 4.5%."""
        pmt = calculate_monthly_payment(1_750_000, 4.5, 15)
        # Expected around 13,390/month
        assert 13_300 < pmt < 13_500
        assert isinstance(pmt, int)

    @pytest.mark.parametrize(
        "principal, rate, years",
        [(0, 4.5, 15), (-100, 4.5, 15), (100_000, 0, 15), (100_000, -1, 15), (100_000, 4.5, 0)],
    )
    def test_degenerate_inputs(self, principal, rate, years):
        """Non-positive inputs give a zero payment."""
        assert calculate_monthly_payment(principal, rate, years) == 0

    def test_short_term(self):
        """Shorter loans have higher payments."""
        assert calculate_monthly_payment(1_000_000, 4.5, 10) > calculate_monthly_payment(1_000_000, 4.5, 25)

    @pytest.mark.parametrize("rate", [1e-13, 1e-300])
    def test_vanishing_rate_repays_straight_line(self, rate):
        """A rate too small to register in float precision still gives a payment."""
        assert calculate_monthly_payment(1_000_000, rate, 15) == 5_556

    def test_very_long_term_tends_to_interest_only(self):
        """1M at 4.5% over a million years pays the monthly interest."""
        assert calculate_monthly_payment(1_000_000, 4.5, 1_000_000) == 3_750


class TestCalculateMortgage:
    """Tests for calculate_mortgage function."""

    def test_totals(self):
        """Total payments and interest follow from the monthly payment."""
        mortgage = calculate_mortgage(1_750_000, 4.5, 15)
        assert mortgage.months == 180
        assert mortgage.total_payments == mortgage.monthly_payment * 180
        assert mortgage.total_interest == mortgage.total_payments - 1_750_000
        assert mortgage.total_interest > 0

    def test_zero_principal(self):
        mortgage = calculate_mortgage(0, 4.5, 15)
        assert mortgage.monthly_payment == 0
        assert mortgage.total_payments == 0


class TestCalculateFinancing:
    """Tests for calculate_financing function."""

    def test_default_terms(self):
        """30% down on 2.5M leaves a 1.75M loan."""
        plan = calculate_financing(2_500_000)
        assert plan.down_payment == 750_000
        assert plan.loan_amount == 1_750_000
        assert plan.ltv == pytest.approx(0.7)
        assert plan.monthly_payment == calculate_monthly_payment(1_750_000, 4.5, 15)

    def test_all_cash(self):
        plan = calculate_financing(1_000_000, down_payment_pct=100)
        assert plan.loan_amount == 0
        assert plan.monthly_payment == 0
        assert plan.total_interest == 0

    def test_down_payment_clamped(self):
        """Down payment share is clamped to 0-100%."""
        assert calculate_financing(1_000_000, down_payment_pct=150).loan_amount == 0
        assert calculate_financing(1_000_000, down_payment_pct=-10).loan_amount == 1_000_000

    def test_invalid_price(self):
        assert calculate_financing(0) is None


class TestGenerateAmortizationSchedule:
    """Tests for generate_amortization_schedule function."""

    def test_schedule_length(self):
        """Schedule should have one row per month."""
        schedule = generate_amortization_schedule(100_000, 3.0, 10)
        assert schedule["months"] == 120
        assert len(schedule["month"]) == 120
        assert len(schedule["closing_balance"]) == 120

    def test_loan_fully_repaid(self):
        """Principal repayments sum to the loan and the last balance is zero."""
        schedule = generate_amortization_schedule(1_750_000, 4.5, 15)
        assert sum(schedule["principal"]) == pytest.approx(1_750_000, abs=1.0)
        assert schedule["closing_balance"][-1] == 0

    def test_interest_decreases(self):
        """Interest share falls as the balance is repaid."""
        schedule = generate_amortization_schedule(500_000, 5.0, 20)
        assert schedule["interest"][0] > schedule["interest"][-1]

    def test_zero_rate(self):
        schedule = generate_amortization_schedule(120_000, 0.0, 10)
        assert schedule["monthly_payment"] == pytest.approx(1_000.0)
        assert sum(schedule["interest"]) == 0

    def test_vanishing_rate(self):
        schedule = generate_amortization_schedule(120_000, 1e-13, 10)
        assert schedule["monthly_payment"] == pytest.approx(1_000.0)
        assert schedule["closing_balance"][-1] == 0

    def test_empty_for_invalid_input(self):
        schedule = generate_amortization_schedule(0, 4.5, 15)
        assert schedule["months"] == 0
        assert schedule["month"] == []


class TestCalculateRemainingBalance:
    """Tests for calculate_remaining_balance function."""

    def test_matches_schedule(self):
        """Closed form agrees with the schedule after 5 years."""
        schedule = generate_amortization_schedule(1_000_000, 4.0, 20)
        remaining = calculate_remaining_balance(1_000_000, 4.0, 20, 60)
        assert remaining == pytest.approx(schedule["closing_balance"][59], abs=1.0)

    def test_bounds(self):
        assert calculate_remaining_balance(1_000_000, 4.0, 20, 0) == 1_000_000
        assert calculate_remaining_balance(1_000_000, 4.0, 20, 240) == 0.0

    def test_zero_rate_is_linear(self):
        assert calculate_remaining_balance(120_000, 0.0, 10, 60) == pytest.approx(60_000)

    def test_vanishing_rate_is_linear(self):
        assert calculate_remaining_balance(120_000, 1e-13, 10, 60) == pytest.approx(60_000)

    def test_very_long_term(self):
        """Almost nothing is repaid after 5 years of a million-year loan."""
        assert calculate_remaining_balance(1_000_000, 4.5, 1_000_000, 60) == pytest.approx(1_000_000)
