"""Custom exceptions for landcalc.

The financial functions never raise for bad user input (they degrade to
0 / None / all-zero records). These exceptions cover configuration and
programmer errors only.
"""

from __future__ import annotations

from typing import Any


class LandCalcError(Exception):
    """Base exception for all landcalc errors."""
    pass


# --- Configuration Errors ---

class ConfigurationError(LandCalcError):
    """Error in engine configuration (settings or rate table overrides)."""
    pass


class InvalidParameterError(LandCalcError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)
