"""Engine settings with environment variable support.

Uses pydantic-settings for typed configuration validation. These are the
documented defaults callers fall back to when an optional input is missing.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .rates import (
    BREAK_EVEN_DAMPING,
    BREAK_EVEN_MAX_ITERATIONS,
    BREAK_EVEN_TOLERANCE,
    SENSITIVITY_YEARS,
)


class EngineSettings(BaseSettings):
    """Engine configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    # Calculator defaults
    default_holding_years: float = Field(default=5, gt=0, le=50)
    default_down_payment_pct: float = Field(default=30.0, ge=0, le=100)
    default_interest_rate_pct: float = Field(default=4.5, gt=0, le=30)
    default_loan_years: int = Field(default=15, gt=0, le=40)

    # Break-even solver
    break_even_max_iterations: int = Field(default=BREAK_EVEN_MAX_ITERATIONS, ge=1, le=1000)
    break_even_tolerance: float = Field(default=BREAK_EVEN_TOLERANCE, gt=0)
    break_even_damping: float = Field(default=BREAK_EVEN_DAMPING, gt=0, le=1)

    # Sensitivity table
    sensitivity_years: list[int] = Field(default_factory=lambda: list(SENSITIVITY_YEARS))

    model_config = {
        "env_prefix": "LANDCALC_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("sensitivity_years")
    @classmethod
    def validate_years(cls, v: list[int]) -> list[int]:
        """Keep positive, unique years in ascending order."""
        years = sorted({int(y) for y in v if int(y) > 0})
        if not years:
            raise ValueError("sensitivity_years needs at least one positive year")
        return years


@lru_cache
def get_settings() -> EngineSettings:
    """Get cached engine settings."""
    return EngineSettings()
