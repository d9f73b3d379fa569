"""
FuelEU Maritime pool compliance API router.

Handles per-vessel compliance, pool aggregation, multi-year trends,
remediation suggestions and banking/borrowing capacity.
"""

from functools import lru_cache
from typing import NoReturn, Optional

from fastapi import APIRouter, Depends, HTTPException

from api.config import get_settings
from api.schemas.fueleu import (
    FuelEUVesselRequest, FuelEUVesselResult,
    FuelEUPoolRequest, FuelEUPoolResponse,
    FuelEUTrendRequest, FuelEUTrendResponse, FuelEUTrendYear,
    FuelEUSuggestionResponse, FuelEUBankingResponse,
    FuelEUYearsResponse, FuelEUYear, FuelEUPenaltyRatesResponse,
)
from src.compliance.fueleu import FuelEUComplianceEngine, InvalidYearError

router = APIRouter(prefix="/api/fueleu", tags=["FuelEU Maritime"])


@lru_cache()
def get_engine() -> FuelEUComplianceEngine:
    """Engine built once from settings; read-only so safe to share."""
    settings = get_settings()
    return FuelEUComplianceEngine(
        reference_intensity=settings.reference_ghg_intensity,
        banking_limit=settings.banking_limit,
        borrowing_limit=settings.borrowing_limit,
    )


# ---- helpers ----------------------------------------------------------------

def _year_or_default(year: Optional[int]) -> int:
    return get_settings().default_compliance_year if year is None else year


def _invalid_year(exc: InvalidYearError) -> NoReturn:
    raise HTTPException(
        status_code=400,
        detail={
            "error": "Invalid compliance year",
            "message": str(exc),
            "valid_years": list(exc.valid_years),
        },
    ) from exc


# ---- reference data endpoints -----------------------------------------------

@router.get("/years", response_model=FuelEUYearsResponse)
async def get_fueleu_years(engine: FuelEUComplianceEngine = Depends(get_engine)):
    """List compliance years with their reduction targets and limits."""
    return FuelEUYearsResponse(
        years=[FuelEUYear(**y.to_dict()) for y in engine.get_available_years()],
        reference_ghg=engine.reference_intensity,
    )


@router.get("/penalty-rates", response_model=FuelEUPenaltyRatesResponse)
async def get_fueleu_penalty_rates(engine: FuelEUComplianceEngine = Depends(get_engine)):
    """Return the penalty table; later years fall back to the last entry."""
    return FuelEUPenaltyRatesResponse(
        penalty_rates=dict(engine.penalty_rates),
        fallback_year=max(engine.penalty_rates),
    )


# ---- calculation endpoints --------------------------------------------------

@router.post("/vessel", response_model=FuelEUVesselResult)
async def calculate_vessel(
    request: FuelEUVesselRequest,
    engine: FuelEUComplianceEngine = Depends(get_engine),
):
    """Calculate compliance balance, status, penalty and score for one vessel."""
    try:
        result = engine.calculate_vessel_compliance(
            request.vessel.to_record(), _year_or_default(request.year),
        )
    except InvalidYearError as e:
        _invalid_year(e)
    return FuelEUVesselResult(**result.to_dict())


@router.post("/pool", response_model=FuelEUPoolResponse)
async def calculate_pool(
    request: FuelEUPoolRequest,
    engine: FuelEUComplianceEngine = Depends(get_engine),
):
    """Aggregate vessels into a pool; optionally restrict to one status."""
    records = [v.to_record() for v in request.vessels]
    year = _year_or_default(request.year)
    try:
        if request.status_filter:
            result = engine.filter_pool_by_status(records, year, request.status_filter)
        else:
            result = engine.calculate_pool_compliance(records, year)
    except InvalidYearError as e:
        _invalid_year(e)
    return FuelEUPoolResponse(**result.to_dict())


@router.post("/trend", response_model=FuelEUTrendResponse)
async def calculate_trend(
    request: FuelEUTrendRequest,
    engine: FuelEUComplianceEngine = Depends(get_engine),
):
    """Pool compliance per year as limits tighten, vessel figures held constant."""
    settings = get_settings()
    start_year = settings.trend_start_year if request.start_year is None else request.start_year
    end_year = settings.trend_end_year if request.end_year is None else request.end_year

    try:
        summaries = engine.calculate_compliance_trend(
            [v.to_record() for v in request.vessels], start_year, end_year,
        )
    except InvalidYearError as e:
        _invalid_year(e)

    trend = []
    for summary in summaries:
        s = summary.to_dict()
        trend.append(FuelEUTrendYear(
            year=s["compliance_year"],
            reduction_target=s["reduction_target"],
            compliance_rate=s["compliance_rate"],
            pool_compliant=s["pool_compliant"],
            pool_compliance_balance=s["pool_compliance_balance"],
            pool_potential_penalty=s["pool_potential_penalty"],
            total_penalty=s["total_potential_penalty"],
            pool_average_intensity=s["pool_average_intensity"],
            pool_target_intensity=s["pool_target_intensity"],
        ))
    return FuelEUTrendResponse(trend=trend)


@router.post("/suggestions", response_model=FuelEUSuggestionResponse)
async def suggest_improvements(
    request: FuelEUVesselRequest,
    engine: FuelEUComplianceEngine = Depends(get_engine),
):
    """Suggest measures for a non-compliant vessel."""
    try:
        result = engine.suggest_improvements(
            request.vessel.to_record(), _year_or_default(request.year),
        )
    except InvalidYearError as e:
        _invalid_year(e)
    return FuelEUSuggestionResponse(**result.to_dict())


@router.post("/banking", response_model=FuelEUBankingResponse)
async def calculate_banking(
    request: FuelEUVesselRequest,
    engine: FuelEUComplianceEngine = Depends(get_engine),
):
    """Banking/borrowing capacity for one vessel."""
    try:
        result = engine.calculate_banking_borrowing(
            request.vessel.to_record(), _year_or_default(request.year),
        )
    except InvalidYearError as e:
        _invalid_year(e)
    return FuelEUBankingResponse(**result.to_dict())
