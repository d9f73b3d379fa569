"""
FuelEU Maritime (EU 2023/1805) vessel and pool compliance engine.

Converts each vessel's annual energy use and Well-to-Wake GHG intensity into:
- Compliance balance (tCO2eq surplus/deficit vs the yearly limit)
- Compliant / non-compliant status
- Penalty exposure (EUR millions)
- Normalized compliance score (0-100)

and rolls vessels up into pool summaries, multi-year trends, remediation
suggestions and banking/borrowing capacity.

Every operation is a pure function of (vessel data, year, static tables).
Results keep unrounded values; rounding happens only in ``to_dict()``.

Reference: EU Regulation 2023/1805 (FuelEU Maritime)
Baseline: 91.16 gCO2eq/MJ (2020 EU MRV reference)
"""

import bisect
import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)


# =============================================================================
# Regulation Tables
# =============================================================================

REFERENCE_GHG = 91.16  # gCO2eq/MJ (2020 baseline)

# Fractional reduction vs REFERENCE_GHG
COMPLIANCE_TARGETS = {
    2025: 0.02,
    2026: 0.02,
    2027: 0.02,
    2028: 0.02,
    2029: 0.02,
    2030: 0.06,
    2031: 0.06,
    2032: 0.06,
}

# EUR per tonne CO2eq of deficit
PENALTY_RATES = {
    2025: 640.0,
    2026: 640.0,
    2027: 640.0,
    2028: 640.0,
    2029: 640.0,
    2030: 640.0,
}

# Fractions of annual energy use
BANKING_LIMIT = 0.05
BORROWING_LIMIT = 0.05

GRAMS_PER_TONNE = 1_000_000
EUR_PER_MILLION = 1_000_000

STATUS_COMPLIANT = "compliant"
STATUS_NON_COMPLIANT = "non-compliant"
VALID_STATUSES = (STATUS_COMPLIANT, STATUS_NON_COMPLIANT)


# =============================================================================
# Remediation Policy
# =============================================================================

MAINTENANCE_SUGGESTION = (
    "Vessel is already compliant. Consider maintaining current fuel efficiency."
)

# (tier, max required reduction %, suggestions), checked in order
IMPROVEMENT_TIERS: Tuple[Tuple[str, float, Tuple[str, ...]], ...] = (
    ("operational", 5.0, (
        "Consider operational efficiency improvements (route optimization, speed management)",
        "Implement energy management systems",
    )),
    ("technical", 15.0, (
        "Consider alternative fuel blending (biofuels, e-fuels)",
        "Upgrade to more efficient marine engines",
        "Install energy recovery systems",
    )),
    ("transformational", math.inf, (
        "Significant fuel transition required (ammonia, hydrogen, methanol)",
        "Consider vessel retrofit or replacement",
        "Implement comprehensive decarbonization strategy",
    )),
)


# =============================================================================
# Errors
# =============================================================================

class InvalidYearError(ValueError):
    """Requested year has no reduction target."""

    def __init__(self, year: Any, valid_years: Iterable[int]):
        self.year = year
        self.valid_years = tuple(sorted(valid_years))
        span = f"{self.valid_years[0]}-{self.valid_years[-1]}" if self.valid_years else "none"
        super().__init__(f"Invalid compliance year: {year} (valid years: {span})")


# =============================================================================
# Input Record
# =============================================================================

_FUEL_KEYS = ("fuelConsumption", "fuel_consumption")
_GHG_KEYS = ("ghgIntensity", "ghg_intensity")


def _first_present(data: Mapping[str, Any], keys: Sequence[str]) -> Optional[Any]:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


@dataclass(frozen=True)
class VesselRecord:
    """Calculator input: energy used and WtW intensity, plus opaque metadata."""
    fuel_consumption: float  # MJ
    ghg_intensity: float  # gCO2eq/MJ
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Later edits to the caller's dict must not reach results.
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VesselRecord":
        """
        Build a record from a registry dict.

        Accepts camelCase or snake_case keys for the two numeric fields;
        every other key is forwarded untouched as metadata.
        """
        fuel = _first_present(data, _FUEL_KEYS)
        ghg = _first_present(data, _GHG_KEYS)
        if fuel is None or ghg is None:
            raise ValueError("Vessel record requires fuelConsumption and ghgIntensity")

        metadata = {
            k: v for k, v in data.items()
            if k not in _FUEL_KEYS and k not in _GHG_KEYS
        }
        return cls(fuel_consumption=float(fuel), ghg_intensity=float(ghg), metadata=metadata)

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.metadata,
            "fuel_consumption": self.fuel_consumption,
            "ghg_intensity": self.ghg_intensity,
        }


VesselLike = Union[VesselRecord, Mapping[str, Any]]


# =============================================================================
# Result Dataclasses
# =============================================================================

@dataclass(frozen=True)
class VesselComplianceMetrics:
    """Computed compliance figures for one vessel in one year."""
    year: int
    reduction_target: float  # fraction
    target_intensity: float  # gCO2eq/MJ
    deviation: float  # gCO2eq/MJ, positive = cleaner than limit
    deviation_percent: float
    energy_deficit: float  # MJ
    energy_surplus: float  # MJ
    compliance_balance: float  # tCO2eq, positive = surplus
    penalty_rate: float  # EUR per tCO2eq
    potential_penalty: float  # EUR millions
    status: str
    compliance_score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "compliance_year": self.year,
            "reduction_target": round(self.reduction_target * 100, 1),
            "target_intensity": round(self.target_intensity, 2),
            "deviation": round(self.deviation, 3),
            "deviation_percent": round(self.deviation_percent, 2),
            "energy_deficit": round(self.energy_deficit, 0),
            "energy_surplus": round(self.energy_surplus, 0),
            "compliance_balance": round(self.compliance_balance, 2),
            "penalty_rate": self.penalty_rate,
            "potential_penalty": round(self.potential_penalty, 2),
            "status": self.status,
            "compliance_score": round(self.compliance_score, 1),
        }


@dataclass(frozen=True)
class VesselComplianceResult:
    """Original vessel record plus its computed compliance metrics."""
    vessel: VesselRecord
    metrics: VesselComplianceMetrics

    @property
    def status(self) -> str:
        return self.metrics.status

    @property
    def is_compliant(self) -> bool:
        return self.metrics.status == STATUS_COMPLIANT

    def to_dict(self) -> Dict[str, Any]:
        return {**self.vessel.to_dict(), **self.metrics.to_dict()}


@dataclass(frozen=True)
class PoolComplianceSummary:
    """Aggregated compliance statistics for a vessel set in one year."""
    year: int
    reduction_target: float
    total_vessels: int
    compliant_vessels: int
    non_compliant_vessels: int
    compliance_rate: float  # percent
    total_energy_consumption: float  # MJ
    total_emissions: float  # gCO2eq
    pool_energy_deficit: float  # MJ
    pool_energy_surplus: float  # MJ
    net_energy_deficit: float  # MJ
    net_energy_surplus: float  # MJ
    total_compliance_balance: float  # tCO2eq, signed
    total_deficit: float  # tCO2eq, gross
    total_surplus: float  # tCO2eq, gross
    pool_average_intensity: float  # fuel-weighted gCO2eq/MJ
    pool_target_intensity: float
    pool_deviation: float  # average - target
    pool_compliant: bool
    pool_compliance_score: float
    pool_potential_penalty: float  # EUR millions, on net balance
    total_potential_penalty: float  # EUR millions, sum of vessel penalties

    def to_dict(self) -> Dict[str, Any]:
        return {
            "compliance_year": self.year,
            "reduction_target": round(self.reduction_target * 100, 1),
            "total_vessels": self.total_vessels,
            "compliant_vessels": self.compliant_vessels,
            "non_compliant_vessels": self.non_compliant_vessels,
            "compliance_rate": round(self.compliance_rate, 1),
            "total_energy_consumption": round(self.total_energy_consumption, 0),
            "total_emissions": round(self.total_emissions, 0),
            # Energy positions reported in millions of MJ
            "pool_energy_deficit": round(self.pool_energy_deficit / 1_000_000, 2),
            "pool_energy_surplus": round(self.pool_energy_surplus / 1_000_000, 2),
            "net_energy_deficit": round(self.net_energy_deficit / 1_000_000, 2),
            "net_energy_surplus": round(self.net_energy_surplus / 1_000_000, 2),
            "pool_compliance_balance": round(self.total_compliance_balance, 2),
            "pool_compliance_deficit": round(self.total_deficit, 2),
            "pool_compliance_surplus": round(self.total_surplus, 2),
            "pool_average_intensity": round(self.pool_average_intensity, 2),
            "pool_target_intensity": round(self.pool_target_intensity, 2),
            "pool_deviation": round(self.pool_deviation, 2),
            "pool_compliant": self.pool_compliant,
            "pool_compliance_score": round(self.pool_compliance_score, 1),
            "pool_potential_penalty": round(self.pool_potential_penalty, 2),
            "total_potential_penalty": round(self.total_potential_penalty, 2),
        }


@dataclass(frozen=True)
class PoolComplianceResult:
    """Per-vessel results plus the pool summary."""
    vessels: List[VesselComplianceResult]
    summary: PoolComplianceSummary

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vessels": [v.to_dict() for v in self.vessels],
            "summary": self.summary.to_dict(),
        }


@dataclass(frozen=True)
class ImprovementSuggestion:
    """Remediation advice for one vessel."""
    status: str
    suggestions: List[str]
    tier: Optional[str] = None
    required_reduction: Optional[float] = None  # gCO2eq/MJ
    required_reduction_percent: Optional[float] = None
    target_intensity: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        def _r(value: Optional[float], digits: int) -> Optional[float]:
            return None if value is None else round(value, digits)

        return {
            "status": self.status,
            "tier": self.tier,
            "required_reduction": _r(self.required_reduction, 2),
            "required_reduction_percent": _r(self.required_reduction_percent, 1),
            "target_intensity": _r(self.target_intensity, 2),
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class BankingBorrowingAssessment:
    """Capacity to bank surplus or borrow against deficit (MJ)."""
    year: int
    can_bank: bool
    banking_capacity: float
    can_borrow: bool
    borrowing_capacity: float
    banking_limit_mj: float
    borrowing_limit_mj: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "compliance_year": self.year,
            "can_bank": self.can_bank,
            "banking_capacity": round(self.banking_capacity, 0),
            "can_borrow": self.can_borrow,
            "borrowing_capacity": round(self.borrowing_capacity, 0),
            "banking_limit_mj": round(self.banking_limit_mj, 0),
            "borrowing_limit_mj": round(self.borrowing_limit_mj, 0),
        }


@dataclass(frozen=True)
class ComplianceYear:
    """A year with a defined reduction target."""
    year: int
    target: float
    target_intensity: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "target": self.target,
            "target_percent": round(self.target * 100, 1),
            "target_intensity": round(self.target_intensity, 2),
        }


# =============================================================================
# Helpers
# =============================================================================

def _ratio(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics: x/0 gives +/-inf, 0/0 gives nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.true_divide(numerator, denominator))


def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


# =============================================================================
# Engine
# =============================================================================

class FuelEUComplianceEngine:
    """
    FuelEU Maritime compliance engine for vessels and pools.

    Holds only read-only regulation tables; all methods are pure and safe to
    call concurrently.
    """

    def __init__(
        self,
        targets: Optional[Mapping[int, float]] = None,
        reference_intensity: float = REFERENCE_GHG,
        penalty_rates: Optional[Mapping[int, float]] = None,
        banking_limit: float = BANKING_LIMIT,
        borrowing_limit: float = BORROWING_LIMIT,
    ):
        targets = dict(COMPLIANCE_TARGETS if targets is None else targets)
        penalty_rates = dict(PENALTY_RATES if penalty_rates is None else penalty_rates)

        if not targets:
            raise ValueError("At least one compliance target year is required")
        for year, target in targets.items():
            if not 0 < target < 1:
                raise ValueError(f"Reduction target for {year} must be in (0, 1), got {target}")
        if not penalty_rates:
            raise ValueError("At least one penalty rate year is required")
        if reference_intensity <= 0:
            raise ValueError(f"Reference intensity must be positive, got {reference_intensity}")
        if banking_limit < 0 or borrowing_limit < 0:
            raise ValueError("Banking and borrowing limits must be non-negative")

        self.targets: Mapping[int, float] = MappingProxyType(targets)
        self.penalty_rates: Mapping[int, float] = MappingProxyType(penalty_rates)
        self.reference_intensity = float(reference_intensity)
        self.banking_limit = float(banking_limit)
        self.borrowing_limit = float(borrowing_limit)
        self._penalty_years: Tuple[int, ...] = tuple(sorted(penalty_rates))

    # ---- reference data -----------------------------------------------------

    def get_target_intensity(self, year: int) -> float:
        """GHG intensity limit (gCO2eq/MJ) for a target year."""
        return self.reference_intensity * (1 - self._get_target(year))

    def get_penalty_rate(self, year: int) -> float:
        """
        Penalty rate (EUR/tCO2eq) for a target year.

        Uses the most recent penalty year at or before ``year``; years past
        the table's end use its last rate, years before its start its first.
        """
        self._get_target(year)
        idx = bisect.bisect_right(self._penalty_years, year) - 1
        return self.penalty_rates[self._penalty_years[max(idx, 0)]]

    def get_available_years(self) -> List[ComplianceYear]:
        """Return all target years, ascending."""
        return [
            ComplianceYear(
                year=year,
                target=target,
                target_intensity=self.reference_intensity * (1 - target),
            )
            for year, target in sorted(self.targets.items())
        ]

    # ---- per-vessel -----------------------------------------------------------

    def calculate_compliance_score(self, actual_intensity: float, target_intensity: float) -> float:
        """
        Score conformance on 0-100, independent of fuel volume.

        At or below target the +20% bonus always saturates at 100, so every
        compliant vessel scores exactly 100. Above target the score drops one
        point per percent of excess and floors at 0.
        """
        if actual_intensity <= target_intensity:
            surplus_fraction = _ratio(target_intensity - actual_intensity, target_intensity)
            return min(100.0, 100.0 + surplus_fraction * 20)

        deficit_fraction = _ratio(actual_intensity - target_intensity, target_intensity)
        return max(0.0, 100.0 - deficit_fraction * 100)

    def calculate_vessel_compliance(self, vessel: VesselLike, year: int) -> VesselComplianceResult:
        """
        Calculate compliance for a single vessel.

        Args:
            vessel: VesselRecord or registry dict with fuel consumption (MJ)
                    and GHG intensity (gCO2eq/MJ)
            year: Compliance year (must be a target year)

        Returns:
            VesselComplianceResult composing the record and its metrics

        Raises:
            InvalidYearError: year has no reduction target
        """
        record = self._as_record(vessel)
        target = self._get_target(year)
        target_intensity = self.reference_intensity * (1 - target)
        fuel = record.fuel_consumption
        ghg = record.ghg_intensity

        deviation = target_intensity - ghg
        deviation_percent = _ratio(deviation, target_intensity) * 100

        # Positive balance = surplus
        compliance_balance = deviation * fuel / GRAMS_PER_TONNE
        status = STATUS_COMPLIANT if compliance_balance >= 0 else STATUS_NON_COMPLIANT

        energy_deficit = max(0.0, fuel * (ghg - target_intensity))
        energy_surplus = max(0.0, fuel * (target_intensity - ghg))

        penalty_rate = self.get_penalty_rate(year)
        potential_penalty = (
            abs(compliance_balance) * penalty_rate / EUR_PER_MILLION
            if compliance_balance < 0 else 0.0
        )

        metrics = VesselComplianceMetrics(
            year=year,
            reduction_target=target,
            target_intensity=target_intensity,
            deviation=deviation,
            deviation_percent=deviation_percent,
            energy_deficit=energy_deficit,
            energy_surplus=energy_surplus,
            compliance_balance=compliance_balance,
            penalty_rate=penalty_rate,
            potential_penalty=potential_penalty,
            status=status,
            compliance_score=self.calculate_compliance_score(ghg, target_intensity),
        )

        if not math.isfinite(compliance_balance):
            logger.warning(
                "Non-finite compliance balance for vessel %s (fuel=%s, ghg=%s)",
                record.metadata.get("name", "<unnamed>"), fuel, ghg,
            )

        return VesselComplianceResult(vessel=record, metrics=metrics)

    # ---- pool -----------------------------------------------------------------

    def calculate_pool_compliance(self, vessels: Iterable[VesselLike], year: int) -> PoolComplianceResult:
        """
        Calculate compliance for a pool of vessels.

        Pool status is a net-balance test: surplus vessels offset deficit
        vessels. Gross deficit/surplus are summed independently of the net.

        Args:
            vessels: Vessel records or registry dicts
            year: Compliance year

        Returns:
            PoolComplianceResult with per-vessel results and summary
        """
        target = self._get_target(year)
        target_intensity = self.reference_intensity * (1 - target)
        records = [self._as_record(v) for v in vessels]

        if not records:
            return PoolComplianceResult(vessels=[], summary=self._empty_summary(year, target))

        total_energy = 0.0
        total_emissions = 0.0
        total_energy_deficit = 0.0
        total_energy_surplus = 0.0
        total_balance = 0.0
        total_deficit = 0.0
        total_surplus = 0.0
        total_penalty = 0.0
        compliant_count = 0

        results = []
        for record in records:
            result = self.calculate_vessel_compliance(record, year)
            m = result.metrics

            total_energy += record.fuel_consumption
            total_emissions += record.fuel_consumption * record.ghg_intensity
            total_energy_deficit += m.energy_deficit
            total_energy_surplus += m.energy_surplus
            total_balance += m.compliance_balance
            total_penalty += m.potential_penalty

            if m.compliance_balance < 0:
                total_deficit += abs(m.compliance_balance)
            elif m.compliance_balance > 0:
                total_surplus += m.compliance_balance

            if result.is_compliant:
                compliant_count += 1

            results.append(result)

        total_vessels = len(records)
        pool_average = _ratio(total_emissions, total_energy)
        pool_penalty = (
            abs(total_balance) * self.get_penalty_rate(year) / EUR_PER_MILLION
            if total_balance < 0 else 0.0
        )

        summary = PoolComplianceSummary(
            year=year,
            reduction_target=target,
            total_vessels=total_vessels,
            compliant_vessels=compliant_count,
            non_compliant_vessels=total_vessels - compliant_count,
            compliance_rate=compliant_count / total_vessels * 100,
            total_energy_consumption=total_energy,
            total_emissions=total_emissions,
            pool_energy_deficit=total_energy_deficit,
            pool_energy_surplus=total_energy_surplus,
            net_energy_deficit=max(0.0, total_energy_deficit - total_energy_surplus),
            net_energy_surplus=max(0.0, total_energy_surplus - total_energy_deficit),
            total_compliance_balance=total_balance,
            total_deficit=total_deficit,
            total_surplus=total_surplus,
            pool_average_intensity=pool_average,
            pool_target_intensity=target_intensity,
            pool_deviation=pool_average - target_intensity,
            pool_compliant=total_balance >= 0,
            pool_compliance_score=self.calculate_compliance_score(pool_average, target_intensity),
            pool_potential_penalty=pool_penalty,
            total_potential_penalty=total_penalty,
        )

        logger.debug(
            "Pool %d: %d vessels, %d compliant, net balance %.4f tCO2eq",
            year, total_vessels, compliant_count, total_balance,
        )

        return PoolComplianceResult(vessels=results, summary=summary)

    def filter_pool_by_status(
        self, vessels: Iterable[VesselLike], year: int, status: str
    ) -> PoolComplianceResult:
        """Recompute the pool over only the vessels whose own status matches."""
        if status not in VALID_STATUSES:
            raise ValueError(f"Unknown status: {status}. Valid: {list(VALID_STATUSES)}")

        full = self.calculate_pool_compliance(vessels, year)
        matching = [r.vessel for r in full.vessels if r.status == status]
        return self.calculate_pool_compliance(matching, year)

    def calculate_compliance_trend(
        self,
        vessels: Iterable[VesselLike],
        start_year: int,
        end_year: int,
    ) -> List[PoolComplianceSummary]:
        """
        Pool summaries for each target year in [start_year, end_year].

        Vessel figures are held constant, so the trend shows the effect of
        tightening limits alone. Years without a target are skipped.

        Raises:
            InvalidYearError: no year of the range has a target
        """
        records = [self._as_record(v) for v in vessels]
        years = [y for y in range(start_year, end_year + 1) if y in self.targets]
        if not years:
            raise InvalidYearError(f"{start_year}-{end_year}", self.targets)

        return [self.calculate_pool_compliance(records, year).summary for year in years]

    # ---- remediation & flexibility ------------------------------------------

    def suggest_improvements(self, vessel: VesselLike, year: int) -> ImprovementSuggestion:
        """Suggest measures to close a vessel's intensity gap."""
        compliance = self.calculate_vessel_compliance(vessel, year)
        if compliance.is_compliant:
            return ImprovementSuggestion(
                status=STATUS_COMPLIANT,
                suggestions=[MAINTENANCE_SUGGESTION],
            )

        ghg = compliance.vessel.ghg_intensity
        target_intensity = compliance.metrics.target_intensity
        required_reduction = ghg - target_intensity
        # Relative to the vessel's own intensity, not the limit
        required_pct = _ratio(required_reduction, ghg) * 100

        tier, suggestions = self._select_tier(required_pct)
        suggestions.append(
            f"Target: Reduce GHG intensity by {required_pct:.1f}% "
            f"to {target_intensity:.2f} gCO2e/MJ"
        )

        return ImprovementSuggestion(
            status=compliance.status,
            suggestions=suggestions,
            tier=tier,
            required_reduction=required_reduction,
            required_reduction_percent=required_pct,
            target_intensity=target_intensity,
        )

    def calculate_banking_borrowing(self, vessel: VesselLike, year: int) -> BankingBorrowingAssessment:
        """Banking/borrowing capacity, each capped at a fraction of energy used."""
        compliance = self.calculate_vessel_compliance(vessel, year)
        fuel = compliance.vessel.fuel_consumption
        m = compliance.metrics

        banking_limit_mj = fuel * self.banking_limit
        borrowing_limit_mj = fuel * self.borrowing_limit

        banking_capacity = min(m.energy_surplus, banking_limit_mj) if m.energy_surplus > 0 else 0.0
        borrowing_capacity = min(m.energy_deficit, borrowing_limit_mj) if m.energy_deficit > 0 else 0.0

        return BankingBorrowingAssessment(
            year=year,
            can_bank=banking_capacity > 0,
            banking_capacity=banking_capacity,
            can_borrow=borrowing_capacity > 0,
            borrowing_capacity=borrowing_capacity,
            banking_limit_mj=banking_limit_mj,
            borrowing_limit_mj=borrowing_limit_mj,
        )

    # ---- validation -----------------------------------------------------------

    def validate_inputs(self, vessel: Optional[VesselLike], year: Any) -> List[str]:
        """Return human-readable problems with a vessel/year pair (empty if valid)."""
        errors: List[str] = []

        if vessel is None:
            errors.append("Vessel data is required")
            return errors

        if isinstance(vessel, VesselRecord):
            fuel, ghg = vessel.fuel_consumption, vessel.ghg_intensity
        else:
            fuel = _first_present(vessel, _FUEL_KEYS)
            ghg = _first_present(vessel, _GHG_KEYS)

        if not _is_positive_number(fuel):
            errors.append("Valid fuel consumption is required")
        if not _is_positive_number(ghg):
            errors.append("Valid GHG intensity is required")
        try:
            self._get_target(year)
        except InvalidYearError as e:
            errors.append(str(e))

        return errors

    # ---- private helpers ------------------------------------------------------

    def _get_target(self, year: int) -> float:
        try:
            return self.targets[year]
        except (KeyError, TypeError):
            raise InvalidYearError(year, self.targets) from None

    @staticmethod
    def _as_record(vessel: VesselLike) -> VesselRecord:
        if isinstance(vessel, VesselRecord):
            return vessel
        return VesselRecord.from_dict(vessel)

    @staticmethod
    def _select_tier(required_pct: float) -> Tuple[str, List[str]]:
        for tier, ceiling, suggestions in IMPROVEMENT_TIERS:
            if required_pct <= ceiling:
                return tier, list(suggestions)
        # NaN falls through every comparison
        tier, _, suggestions = IMPROVEMENT_TIERS[-1]
        return tier, list(suggestions)

    def _empty_summary(self, year: int, target: float) -> PoolComplianceSummary:
        return PoolComplianceSummary(
            year=year,
            reduction_target=target,
            total_vessels=0,
            compliant_vessels=0,
            non_compliant_vessels=0,
            compliance_rate=0.0,
            total_energy_consumption=0.0,
            total_emissions=0.0,
            pool_energy_deficit=0.0,
            pool_energy_surplus=0.0,
            net_energy_deficit=0.0,
            net_energy_surplus=0.0,
            total_compliance_balance=0.0,
            total_deficit=0.0,
            total_surplus=0.0,
            pool_average_intensity=0.0,
            pool_target_intensity=self.reference_intensity * (1 - target),
            pool_deviation=0.0,
            pool_compliant=True,
            pool_compliance_score=0.0,
            pool_potential_penalty=0.0,
            total_potential_penalty=0.0,
        )
