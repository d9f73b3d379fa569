"""
Shared pytest fixtures for FuelEU pool compliance tests.

Environment variables are set before any api.* import so the cached
settings pick up test values.
"""

import os

import pytest

# ---------------------------------------------------------------------------
# Section 1: Environment setup (before ANY api.* imports)
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_LEVEL", "warning")
os.environ.setdefault("DEFAULT_COMPLIANCE_YEAR", "2025")
os.environ.setdefault("TREND_START_YEAR", "2025")
os.environ.setdefault("TREND_END_YEAR", "2030")

from src.compliance.fueleu import FuelEUComplianceEngine, VesselRecord  # noqa: E402


# ---------------------------------------------------------------------------
# Section 2: Engine fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def engine():
    """Engine with the default regulation tables."""
    return FuelEUComplianceEngine()


@pytest.fixture
def compliant_vessel():
    """Slightly cleaner than the 2025 limit (89.3368)."""
    return VesselRecord(
        fuel_consumption=45000,
        ghg_intensity=89.25,
        metadata={"name": "Nordic Star", "imo": "9123456", "type": "container", "pool": "North"},
    )


@pytest.fixture
def deficit_vessel():
    """Dirtier than the 2025 limit by 5.7832 gCO2e/MJ."""
    return VesselRecord(
        fuel_consumption=28000,
        ghg_intensity=95.12,
        metadata={"name": "Baltic Trader", "imo": "9234567", "type": "bulk", "pool": "North"},
    )


@pytest.fixture
def pool_vessels(compliant_vessel, deficit_vessel):
    return [compliant_vessel, deficit_vessel]


# ---------------------------------------------------------------------------
# Section 3: API client
# ---------------------------------------------------------------------------

@pytest.fixture
def client():
    """FastAPI TestClient for the full application."""
    from fastapi.testclient import TestClient
    from api.main import app

    with TestClient(app) as test_client:
        yield test_client
