"""Rate table and zoning constants - single source of truth for fiscal rules.

Every cost and return function reads its rates from a ``RateTable``.
Nothing else in the package may hard-code a tax percentage.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field, ValidationError, model_validator

from .exceptions import ConfigurationError


class ZoningStage(str, Enum):
    """Planning-pipeline position of a plot, in pipeline order."""

    AGRICULTURAL = "AGRICULTURAL"
    MASTER_PLAN_DEPOSIT = "MASTER_PLAN_DEPOSIT"
    MASTER_PLAN_APPROVED = "MASTER_PLAN_APPROVED"
    DETAILED_PLAN_PREP = "DETAILED_PLAN_PREP"
    DETAILED_PLAN_DEPOSIT = "DETAILED_PLAN_DEPOSIT"
    DETAILED_PLAN_APPROVED = "DETAILED_PLAN_APPROVED"
    DEVELOPER_TENDER = "DEVELOPER_TENDER"
    BUILDING_PERMIT = "BUILDING_PERMIT"

    @property
    def index(self) -> int:
        return ZONING_ORDER.index(self)

    @property
    def is_advanced(self) -> bool:
        """Detailed plan approved or later."""
        return self.index >= ZoningStage.DETAILED_PLAN_APPROVED.index

    @classmethod
    def parse(cls, value: object) -> ZoningStage | None:
        """Lenient lookup: unknown or empty values map to None."""
        if isinstance(value, ZoningStage):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


ZONING_ORDER: tuple[ZoningStage, ...] = tuple(ZoningStage)

# Expected price per m² once a plot reaches each stage
STAGE_PRICE_PER_SQM: dict[ZoningStage, float] = {
    ZoningStage.AGRICULTURAL: 1140,
    ZoningStage.MASTER_PLAN_DEPOSIT: 2285,
    ZoningStage.MASTER_PLAN_APPROVED: 3428,
    ZoningStage.DETAILED_PLAN_PREP: 4800,
    ZoningStage.DETAILED_PLAN_DEPOSIT: 6720,
    ZoningStage.DETAILED_PLAN_APPROVED: 10100,
    ZoningStage.DEVELOPER_TENDER: 11500,
    ZoningStage.BUILDING_PERMIT: 12000,
}

# Typical months spent reaching each stage from the previous one
STAGE_DURATION_MONTHS: dict[ZoningStage, int] = {
    ZoningStage.AGRICULTURAL: 0,
    ZoningStage.MASTER_PLAN_DEPOSIT: 12,
    ZoningStage.MASTER_PLAN_APPROVED: 8,
    ZoningStage.DETAILED_PLAN_PREP: 10,
    ZoningStage.DETAILED_PLAN_DEPOSIT: 6,
    ZoningStage.DETAILED_PLAN_APPROVED: 6,
    ZoningStage.DEVELOPER_TENDER: 4,
    ZoningStage.BUILDING_PERMIT: 0,
}

STAGE_LABELS: dict[ZoningStage, str] = {
    ZoningStage.AGRICULTURAL: "Agricultural land",
    ZoningStage.MASTER_PLAN_DEPOSIT: "Master plan deposited",
    ZoningStage.MASTER_PLAN_APPROVED: "Master plan approved",
    ZoningStage.DETAILED_PLAN_PREP: "Detailed plan in preparation",
    ZoningStage.DETAILED_PLAN_DEPOSIT: "Detailed plan deposited",
    ZoningStage.DETAILED_PLAN_APPROVED: "Detailed plan approved",
    ZoningStage.DEVELOPER_TENDER: "Developer tender",
    ZoningStage.BUILDING_PERMIT: "Building permit",
}

# Readiness bucket -> representative holding years
READINESS_YEARS = {
    "1-3": 2,
    "3-5": 4,
    "5+": 7,
    "5-": 7,
}
DEFAULT_READINESS_YEARS = 5

# Break-even solver
BREAK_EVEN_MAX_ITERATIONS = 20
BREAK_EVEN_TOLERANCE = 100.0     # currency units
BREAK_EVEN_DAMPING = 0.6
BREAK_EVEN_INITIAL_FACTOR = 1.1  # start slightly above sunk cost

SENSITIVITY_YEARS: tuple[int, ...] = (3, 5, 7, 10, 15)

SQM_PER_DUNAM = 1000.0


class RateTable(BaseModel):
    """Immutable fiscal and market rate assumptions.

    All rates are decimals (0.06 for 6%). Fixed fees are in currency units.
    """

    # Acquisition
    purchase_tax_rate: float = Field(default=0.06, ge=0, le=1)
    attorney_fee_rate: float = Field(default=0.0175, ge=0, le=1)
    appraiser_fee_rate: float = Field(default=0.003, ge=0, le=1)
    appraiser_fee_min: float = Field(default=2000.0, ge=0)
    appraiser_fee_max: float = Field(default=8000.0, ge=0)
    registration_fee: float = Field(default=167.0, ge=0)

    # Disposal
    betterment_levy_rate: float = Field(default=0.5, ge=0, le=1)
    capital_gains_rate: float = Field(default=0.25, ge=0, le=1)
    agent_commission_rate: float = Field(default=0.01, ge=0, le=1)

    # Holding (per m² per year, except opportunity cost)
    arnona_per_sqm_early: float = Field(default=2.5, ge=0)
    arnona_per_sqm_advanced: float = Field(default=5.0, ge=0)
    management_per_sqm: float = Field(default=1.5, ge=0)
    opportunity_cost_rate: float = Field(default=0.08, ge=0, le=1)

    # Macro / benchmarks
    inflation_rate: float = Field(default=0.03, ge=0, le=1)
    stock_return_rate: float = Field(default=0.09, ge=0, le=1)
    bank_deposit_rate: float = Field(default=0.045, ge=0, le=1)

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @model_validator(mode="after")
    def check_appraiser_bounds(self) -> RateTable:
        if self.appraiser_fee_min > self.appraiser_fee_max:
            raise ValueError("appraiser_fee_min must not exceed appraiser_fee_max")
        return self

    @property
    def entry_cost_rate(self) -> float:
        """Proportional part of the acquisition costs (tax + attorney)."""
        return self.purchase_tax_rate + self.attorney_fee_rate

    def price_per_sqm(self, stage: ZoningStage) -> float:
        return STAGE_PRICE_PER_SQM[stage]

    def arnona_per_sqm(self, stage: ZoningStage | None) -> float:
        if stage is not None and stage.is_advanced:
            return self.arnona_per_sqm_advanced
        return self.arnona_per_sqm_early


DEFAULT_RATES = RateTable()


def readiness_to_years(readiness: str | None) -> int:
    """Map a coarse readiness estimate ("3-5", "5+", "4 years") to holding years.

    Args:
        readiness: Free text bucket as stored on the plot

    Returns:
        Representative number of years (defaults to 5)
    """
    if not readiness:
        return DEFAULT_READINESS_YEARS
    for bucket, years in READINESS_YEARS.items():
        if bucket in readiness:
            return years
    match = re.search(r"(\d+)", readiness)
    if match:
        return int(match.group(1))
    return DEFAULT_READINESS_YEARS


def make_rate_table(**overrides: float) -> RateTable:
    """Build a rate table from the defaults plus ``overrides``.

    Raises:
        ConfigurationError: If an override is unknown or out of range
    """
    try:
        return RateTable(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid rate table override: {e}") from e
