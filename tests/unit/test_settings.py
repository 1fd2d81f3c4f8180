"""Unit tests for engine settings and logging configuration."""

import pytest
from pydantic import ValidationError

from landcalc.core.logging import configure_logging, get_logger
from landcalc.core.settings import EngineSettings, get_settings


class TestEngineSettings:
    """Tests for EngineSettings."""

    def test_defaults(self, settings):
        assert settings.default_holding_years == 5
        assert settings.default_down_payment_pct == 30.0
        assert settings.default_interest_rate_pct == 4.5
        assert settings.default_loan_years == 15
        assert settings.break_even_max_iterations == 20
        assert settings.break_even_tolerance == 100.0
        assert settings.break_even_damping == 0.6
        assert settings.sensitivity_years == [3, 5, 7, 10, 15]

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LANDCALC_DEFAULT_HOLDING_YEARS", "7")
        monkeypatch.setenv("LANDCALC_BREAK_EVEN_TOLERANCE", "50")
        settings = EngineSettings(_env_file=None)
        assert settings.default_holding_years == 7
        assert settings.break_even_tolerance == 50

    def test_sensitivity_years_normalized(self, monkeypatch):
        monkeypatch.setenv("LANDCALC_SENSITIVITY_YEARS", "[10, 3, 3, -1]")
        assert EngineSettings(_env_file=None).sensitivity_years == [3, 10]

    def test_sensitivity_years_need_a_positive_year(self):
        with pytest.raises(ValidationError):
            EngineSettings(_env_file=None, sensitivity_years=[0, -5])

    @pytest.mark.parametrize(
        "field, value",
        [("break_even_damping", 0), ("break_even_damping", 1.5), ("default_down_payment_pct", 120)],
    )
    def test_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            EngineSettings(_env_file=None, **{field: value})

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    """Tests for structlog configuration."""

    def test_configure_is_idempotent(self):
        first = configure_logging()
        second = configure_logging(level="DEBUG")
        assert first is not None
        assert second is not None

    def test_get_logger(self):
        log = get_logger("landcalc.test")
        log.info("test_event", value=1)
