"""
FuelEU pool compliance API Pydantic schemas.

Re-exports all schema classes:
    from api.schemas import FuelEUVessel, FuelEUPoolRequest, ...
"""

from .fueleu import (  # noqa: F401
    FuelEUVessel,
    FuelEUVesselRequest,
    FuelEUPoolRequest,
    FuelEUTrendRequest,
    FuelEUVesselResult,
    FuelEUPoolSummary,
    FuelEUPoolResponse,
    FuelEUTrendYear,
    FuelEUTrendResponse,
    FuelEUSuggestionResponse,
    FuelEUBankingResponse,
    FuelEUYear,
    FuelEUYearsResponse,
    FuelEUPenaltyRatesResponse,
)
