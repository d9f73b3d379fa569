"""FuelEU Maritime pool compliance API schemas."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.compliance.fueleu import VesselRecord


class FuelEUVessel(BaseModel):
    """Vessel figures for a calculation; extra fields are passed through."""
    model_config = ConfigDict(extra="allow")

    fuel_consumption: float = Field(..., gt=0, description="Energy used in the year (MJ)")
    ghg_intensity: float = Field(..., gt=0, description="WtW GHG intensity (gCO2eq/MJ)")
    name: Optional[str] = Field(None, max_length=100)
    imo: Optional[str] = Field(None, max_length=20)

    def to_record(self) -> VesselRecord:
        metadata = self.model_dump(exclude={"fuel_consumption", "ghg_intensity"}, exclude_none=True)
        return VesselRecord(
            fuel_consumption=self.fuel_consumption,
            ghg_intensity=self.ghg_intensity,
            metadata=metadata,
        )


class FuelEUVesselRequest(BaseModel):
    """Request for a single-vessel calculation."""
    vessel: FuelEUVessel
    year: Optional[int] = Field(None, description="Compliance year (defaults to configured year)")


class FuelEUPoolRequest(BaseModel):
    """Request for pool aggregation."""
    vessels: List[FuelEUVessel] = Field(default_factory=list, max_length=1000)
    year: Optional[int] = None
    status_filter: Optional[str] = Field(
        None, pattern="^(compliant|non-compliant)$",
        description="Recompute the pool over vessels with this status only",
    )


class FuelEUTrendRequest(BaseModel):
    """Request for a multi-year compliance trend."""
    vessels: List[FuelEUVessel] = Field(default_factory=list, max_length=1000)
    start_year: Optional[int] = None
    end_year: Optional[int] = None


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class FuelEUVesselResult(BaseModel):
    """Vessel record plus computed compliance metrics."""
    model_config = ConfigDict(extra="allow")

    fuel_consumption: float
    ghg_intensity: float
    compliance_year: int
    reduction_target: float
    target_intensity: float
    deviation: float
    deviation_percent: float
    energy_deficit: float
    energy_surplus: float
    compliance_balance: float
    penalty_rate: float
    potential_penalty: float
    status: str
    compliance_score: float


class FuelEUPoolSummary(BaseModel):
    """Pool-level aggregated statistics."""
    compliance_year: int
    reduction_target: float
    total_vessels: int
    compliant_vessels: int
    non_compliant_vessels: int
    compliance_rate: float
    total_energy_consumption: float
    total_emissions: float
    pool_energy_deficit: float
    pool_energy_surplus: float
    net_energy_deficit: float
    net_energy_surplus: float
    pool_compliance_balance: float
    pool_compliance_deficit: float
    pool_compliance_surplus: float
    pool_average_intensity: float
    pool_target_intensity: float
    pool_deviation: float
    pool_compliant: bool
    pool_compliance_score: float
    pool_potential_penalty: float
    total_potential_penalty: float


class FuelEUPoolResponse(BaseModel):
    """Response for pool aggregation."""
    vessels: List[FuelEUVesselResult]
    summary: FuelEUPoolSummary


class FuelEUTrendYear(BaseModel):
    """Single year of a compliance trend."""
    year: int
    reduction_target: float
    compliance_rate: float
    pool_compliant: bool
    pool_compliance_balance: float
    pool_potential_penalty: float
    total_penalty: float
    pool_average_intensity: float
    pool_target_intensity: float


class FuelEUTrendResponse(BaseModel):
    """Response for a multi-year trend."""
    trend: List[FuelEUTrendYear]


class FuelEUSuggestionResponse(BaseModel):
    """Remediation suggestions for one vessel."""
    status: str
    tier: Optional[str] = None
    required_reduction: Optional[float] = None
    required_reduction_percent: Optional[float] = None
    target_intensity: Optional[float] = None
    suggestions: List[str]


class FuelEUBankingResponse(BaseModel):
    """Banking/borrowing capacity for one vessel."""
    compliance_year: int
    can_bank: bool
    banking_capacity: float
    can_borrow: bool
    borrowing_capacity: float
    banking_limit_mj: float
    borrowing_limit_mj: float


class FuelEUYear(BaseModel):
    """Reduction target for a compliance year."""
    year: int
    target: float
    target_percent: float
    target_intensity: float


class FuelEUYearsResponse(BaseModel):
    """Response for available compliance years."""
    years: List[FuelEUYear]
    reference_ghg: float


class FuelEUPenaltyRatesResponse(BaseModel):
    """Penalty rate table and fallback year."""
    penalty_rates: Dict[int, float]
    fallback_year: int

