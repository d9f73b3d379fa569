"""Compliance module for maritime regulations (FuelEU Maritime)."""

from .fueleu import (
    FuelEUComplianceEngine,
    InvalidYearError,
    PoolComplianceResult,
    PoolComplianceSummary,
    VesselComplianceResult,
    VesselRecord,
)

__all__ = [
    "FuelEUComplianceEngine",
    "InvalidYearError",
    "PoolComplianceResult",
    "PoolComplianceSummary",
    "VesselComplianceResult",
    "VesselRecord",
]
