"""Core constants, configuration, logging and exceptions."""

from .exceptions import ConfigurationError, InvalidParameterError, LandCalcError
from .rates import DEFAULT_RATES, ZONING_ORDER, RateTable, ZoningStage, make_rate_table, readiness_to_years
from .settings import EngineSettings, get_settings

__all__ = [
    "RateTable",
    "DEFAULT_RATES",
    "make_rate_table",
    "ZoningStage",
    "ZONING_ORDER",
    "readiness_to_years",
    "EngineSettings",
    "get_settings",
    # Exceptions
    "LandCalcError",
    "ConfigurationError",
    "InvalidParameterError",
]
