"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.streamflow_daily.models import ForecastPoint, ForecastSeries, ReachData  # noqa: E402


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def forecast_payload(fixtures_dir):
    """Load the sample forecast response document."""
    with open(fixtures_dir / "forecast_response.json") as f:
        return json.load(f)


@pytest.fixture
def reach():
    """Reach with 2/5/10-year thresholds in CMS."""
    return ReachData(
        reach_id="23021904",
        river_name="Deep Creek",
        return_periods={2: 100.0, 5: 200.0, 10: 300.0},
        return_period_unit="CMS",
    )


@pytest.fixture
def reach_without_return_periods():
    """Reach with no return-period data."""
    return ReachData(reach_id="99999999", river_name="Nowhere Creek")


@pytest.fixture
def make_series():
    """Factory building a series from (ISO timestamp, flow) pairs."""
    def _make(units, samples):
        return ForecastSeries(
            units=units,
            data=[
                ForecastPoint(
                    valid_time=datetime.fromisoformat(ts.replace("Z", "+00:00")),
                    flow=flow,
                )
                for ts, flow in samples
            ],
        )
    return _make


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test exercising the full workflow"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
