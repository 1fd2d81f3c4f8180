"""Plot snapshot data model.

A snapshot is the raw input every engine call is rebuilt from. It accepts
both the snake_case keys used by the API and the camelCase keys carried by
UI payloads, and tolerates missing or unknown values instead of raising.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from landcalc.core.rates import ZoningStage, readiness_to_years


def _aliases(*names: str) -> AliasChoices:
    return AliasChoices(*names)


class PlotSnapshot(BaseModel):
    """Plot attributes as seen by the engine.

    ``price > 0`` and ``size_sqm > 0`` are required for any derived metric;
    snapshots violating that are still valid objects, they are simply not
    computable.
    """

    # Identity
    plot_id: str | None = Field(None, validation_alias=_aliases("plot_id", "id"))
    city: str = Field(default="", description="City used to pick peer plots")

    # Core financials
    price: float = Field(
        default=0.0,
        validation_alias=_aliases("price", "total_price", "totalPrice"),
        description="Asking price in currency units",
    )
    size_sqm: float = Field(
        default=0.0,
        validation_alias=_aliases("size_sqm", "sizeSqM", "sizeSqm"),
        description="Plot size in m²",
    )
    projected_value: float = Field(
        default=0.0,
        validation_alias=_aliases("projected_value", "projectedValue"),
        description="Projected exit value in currency units",
    )
    zoning_stage: ZoningStage | None = Field(
        None, validation_alias=_aliases("zoning_stage", "zoningStage")
    )
    readiness_estimate: str = Field(
        default="", validation_alias=_aliases("readiness_estimate", "readinessEstimate")
    )
    holding_years: float | None = Field(
        None, validation_alias=_aliases("holding_years", "holdingYears")
    )

    # Market signals
    views: int = Field(default=0, ge=0)
    density_units_per_dunam: float = Field(
        default=0.0,
        validation_alias=_aliases("density_units_per_dunam", "densityUnitsPerDunam"),
    )

    # Proximity (meters)
    distance_to_sea: float | None = Field(None, validation_alias=_aliases("distance_to_sea", "distanceToSea"))
    distance_to_park: float | None = Field(None, validation_alias=_aliases("distance_to_park", "distanceToPark"))
    distance_to_hospital: float | None = Field(
        None, validation_alias=_aliases("distance_to_hospital", "distanceToHospital")
    )
    distance_to_bus: float | None = Field(None, validation_alias=_aliases("distance_to_bus", "distanceToBus"))
    distance_to_train: float | None = Field(None, validation_alias=_aliases("distance_to_train", "distanceToTrain"))
    distance_to_school: float | None = Field(
        None, validation_alias=_aliases("distance_to_school", "distanceToSchool")
    )
    distance_to_shopping: float | None = Field(
        None, validation_alias=_aliases("distance_to_shopping", "distanceToShopping")
    )

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "populate_by_name": True,
    }

    @field_validator("zoning_stage", mode="before")
    @classmethod
    def parse_zoning(cls, v: Any) -> ZoningStage | None:
        """Unknown stages are tolerated as 'no stage'."""
        return ZoningStage.parse(v)

    @field_validator("price", "size_sqm", "projected_value", "density_units_per_dunam", mode="before")
    @classmethod
    def finite_or_zero(cls, v: Any) -> float:
        """Missing, non-numeric or non-finite numbers collapse to 0."""
        try:
            value = float(v)
        except (TypeError, ValueError):
            return 0.0
        return value if math.isfinite(value) else 0.0

    @field_validator("holding_years", mode="before")
    @classmethod
    def positive_years(cls, v: Any) -> float | None:
        try:
            value = float(v)
        except (TypeError, ValueError):
            return None
        return value if math.isfinite(value) and value > 0 else None

    @field_validator("readiness_estimate", "city", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("views", mode="before")
    @classmethod
    def non_negative_views(cls, v: Any) -> int:
        try:
            return max(0, int(v))
        except (TypeError, ValueError):
            return 0

    @property
    def is_computable(self) -> bool:
        """Price and size are both positive."""
        return self.price > 0 and self.size_sqm > 0

    @property
    def price_per_sqm(self) -> float:
        return self.price / self.size_sqm if self.is_computable else 0.0

    @property
    def effective_holding_years(self) -> float:
        """Explicit holding period, else the one implied by readiness."""
        if self.holding_years is not None:
            return self.holding_years
        return float(readiness_to_years(self.readiness_estimate))

    @property
    def distances_km(self) -> dict[str, float | None]:
        """Proximity distances converted to kilometers."""
        raw = {
            "sea": self.distance_to_sea,
            "park": self.distance_to_park,
            "hospital": self.distance_to_hospital,
            "bus": self.distance_to_bus,
            "train": self.distance_to_train,
            "school": self.distance_to_school,
            "shopping": self.distance_to_shopping,
        }
        return {k: (v / 1000.0 if v is not None else None) for k, v in raw.items()}
