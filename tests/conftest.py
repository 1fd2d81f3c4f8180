"""Pytest fixtures for landcalc tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from landcalc.core.settings import EngineSettings, get_settings  # noqa: E402
from landcalc.domain.models import PlotSnapshot  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Default engine settings, independent of the environment."""
    return EngineSettings(_env_file=None)


@pytest.fixture
def sample_plot_data():
    """Sample plot payload as sent by the UI (camelCase keys)."""
    return {
        "id": "plot-1",
        "city": "Hadera",
        "totalPrice": 2_500_000,
        "sizeSqM": 1000,
        "projectedValue": 6_000_000,
        "zoningStage": "MASTER_PLAN_APPROVED",
        "readinessEstimate": "3-5",
    }


@pytest.fixture
def sample_plot(sample_plot_data):
    """2.5M / 1,000 m² plot projected to sell for 6M."""
    return PlotSnapshot.model_validate(sample_plot_data)


@pytest.fixture
def peer_plots():
    """Same-city peers priced at 2,000-3,000 per m²."""
    return [
        PlotSnapshot(plot_id="p-2", city="Hadera", price=2_000_000, size_sqm=1000, projected_value=3_000_000),
        PlotSnapshot(plot_id="p-3", city="Hadera", price=4_000_000, size_sqm=2000, projected_value=6_000_000),
        PlotSnapshot(plot_id="p-4", city="Hadera", price=3_000_000, size_sqm=1000, projected_value=4_000_000),
        PlotSnapshot(plot_id="p-5", city="Netanya", price=9_000_000, size_sqm=1000, projected_value=9_500_000),
    ]
