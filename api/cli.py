#!/usr/bin/env python3
"""
FuelEU pool compliance CLI Tool.

Command-line interface to the compliance engine:
- Compliance years and targets
- Single-vessel compliance, suggestions and banking/borrowing
- Pool aggregation and multi-year trends
- Running the API server

Usage:
    python -m api.cli years
    python -m api.cli vessel --fuel-consumption 45000 --ghg-intensity 89.25 --year 2025
    python -m api.cli pool --vessel "Alpha:45000:89.25" --vessel "Beta:28000:95.12"
    python -m api.cli trend --vessel "Alpha:45000:89.25" --start-year 2025 --end-year 2032
    python -m api.cli serve
"""
import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from src.compliance.fueleu import (
    FuelEUComplianceEngine,
    InvalidYearError,
    VesselRecord,
)


def _parse_vessel_spec(spec: str) -> VesselRecord:
    """Parse NAME:FUEL_MJ:GHG_INTENSITY into a vessel record."""
    parts = spec.rsplit(":", 2)
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(
            f"Invalid vessel '{spec}', expected NAME:FUEL_MJ:GHG_INTENSITY"
        )
    name, fuel, ghg = parts
    try:
        return VesselRecord(
            fuel_consumption=float(fuel),
            ghg_intensity=float(ghg),
            metadata={"name": name},
        )
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid numbers in vessel '{spec}'"
        ) from None


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str))


def _print_rows(title: str, rows: Dict[str, Any]) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)
    for key, value in rows.items():
        print(f"{key.replace('_', ' ').title():<32} {value}")
    print("=" * 60 + "\n")


def _check_vessel(engine: FuelEUComplianceEngine, vessel: VesselRecord, year: int) -> bool:
    errors = engine.validate_inputs(vessel, year)
    for error in errors:
        print(f"Error: {error}", file=sys.stderr)
    return not errors


def _check_pool(engine: FuelEUComplianceEngine, vessels: List[VesselRecord], year: int) -> bool:
    ok = True
    for vessel in vessels:
        errors = engine.validate_inputs(vessel, year)
        for error in errors:
            print(f"Error: {vessel.metadata.get('name', '-')}: {error}", file=sys.stderr)
        ok = ok and not errors
    return ok


def show_years(engine: FuelEUComplianceEngine, as_json: bool = False) -> None:
    """List compliance years and limits."""
    years = [y.to_dict() for y in engine.get_available_years()]
    if as_json:
        _print_json({"years": years, "reference_ghg": engine.reference_intensity})
        return

    print(f"\nReference GHG intensity: {engine.reference_intensity} gCO2e/MJ")
    print(f"{'Year':<8} {'Reduction':<12} {'Limit (gCO2e/MJ)':<18} {'Penalty (EUR/t)':<16}")
    print("-" * 56)
    for y in years:
        rate = engine.get_penalty_rate(y["year"])
        print(
            f"{y['year']:<8} {str(y['target_percent']) + '%':<12} "
            f"{y['target_intensity']:<18} {rate:<16}"
        )
    print()


def show_vessel(engine: FuelEUComplianceEngine, vessel: VesselRecord, year: int, as_json: bool = False) -> None:
    """Print single-vessel compliance."""
    result = engine.calculate_vessel_compliance(vessel, year).to_dict()
    if as_json:
        _print_json(result)
    else:
        _print_rows(f"VESSEL COMPLIANCE {year}", result)


def show_pool(
    engine: FuelEUComplianceEngine,
    vessels: List[VesselRecord],
    year: int,
    status: Optional[str] = None,
    as_json: bool = False,
) -> None:
    """Print pool compliance with per-vessel lines."""
    if status:
        result = engine.filter_pool_by_status(vessels, year, status)
    else:
        result = engine.calculate_pool_compliance(vessels, year)

    if as_json:
        _print_json(result.to_dict())
        return

    print(f"\n{'Vessel':<24} {'GHG':<10} {'Balance (t)':<14} {'Score':<8} {'Status':<14}")
    print("-" * 72)
    for v in result.vessels:
        row = v.to_dict()
        print(
            f"{str(row.get('name', '-'))[:22]:<24} {row['ghg_intensity']:<10} "
            f"{row['compliance_balance']:<14} {row['compliance_score']:<8} {row['status']:<14}"
        )
    _print_rows(f"POOL SUMMARY {year}", result.summary.to_dict())


def show_trend(
    engine: FuelEUComplianceEngine,
    vessels: List[VesselRecord],
    start_year: int,
    end_year: int,
    as_json: bool = False,
) -> None:
    """Print the pool trend across years."""
    summaries = [s.to_dict() for s in engine.calculate_compliance_trend(vessels, start_year, end_year)]
    if as_json:
        _print_json({"trend": summaries})
        return

    print(f"\n{'Year':<8} {'Target %':<10} {'Rate %':<9} {'Pool OK':<9} {'Net (t)':<12} {'Penalty (M EUR)':<16}")
    print("-" * 66)
    for s in summaries:
        print(
            f"{s['compliance_year']:<8} {s['reduction_target']:<10} {s['compliance_rate']:<9} "
            f"{'Yes' if s['pool_compliant'] else 'No':<9} {s['pool_compliance_balance']:<12} "
            f"{s['total_potential_penalty']:<16}"
        )
    print()


def show_suggestions(engine: FuelEUComplianceEngine, vessel: VesselRecord, year: int, as_json: bool = False) -> None:
    """Print remediation suggestions."""
    result = engine.suggest_improvements(vessel, year).to_dict()
    if as_json:
        _print_json(result)
        return

    print(f"\nStatus: {result['status']}")
    if result["tier"]:
        print(f"Tier: {result['tier']}")
    for suggestion in result["suggestions"]:
        print(f"  - {suggestion}")
    print()


def show_banking(engine: FuelEUComplianceEngine, vessel: VesselRecord, year: int, as_json: bool = False) -> None:
    """Print banking/borrowing capacity."""
    result = engine.calculate_banking_borrowing(vessel, year).to_dict()
    if as_json:
        _print_json(result)
    else:
        _print_rows(f"BANKING / BORROWING {year}", result)


def serve(host: str, port: int) -> None:
    """Run the API server."""
    import uvicorn

    uvicorn.run("api.main:app", host=host, port=port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="FuelEU pool compliance CLI Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  List compliance years:
    python -m api.cli years

  Check one vessel:
    python -m api.cli vessel --fuel-consumption 28000 --ghg-intensity 95.12 --year 2025

  Pool two vessels, non-compliant ones only:
    python -m api.cli pool --vessel "Alpha:45000:89.25" --vessel "Beta:28000:95.12" --status non-compliant

  Trend 2025-2032:
    python -m api.cli trend --vessel "Alpha:45000:89.25" --start-year 2025 --end-year 2032
        """
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of tables")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("years", help="List compliance years and limits")

    for name, help_text in (
        ("vessel", "Calculate compliance for one vessel"),
        ("suggest", "Suggest improvements for one vessel"),
        ("banking", "Banking/borrowing capacity for one vessel"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--fuel-consumption", type=float, required=True, help="Energy used (MJ)")
        sub.add_argument("--ghg-intensity", type=float, required=True, help="GHG intensity (gCO2e/MJ)")
        sub.add_argument("--name", default=None, help="Vessel name")
        sub.add_argument("--year", type=int, default=2025, help="Compliance year (default: 2025)")

    pool_parser = subparsers.add_parser("pool", help="Aggregate a pool of vessels")
    pool_parser.add_argument(
        "--vessel", dest="vessels", action="append", type=_parse_vessel_spec, default=[],
        help="NAME:FUEL_MJ:GHG_INTENSITY (repeatable)",
    )
    pool_parser.add_argument("--year", type=int, default=2025, help="Compliance year (default: 2025)")
    pool_parser.add_argument(
        "--status", choices=["compliant", "non-compliant"], default=None,
        help="Recompute the pool over vessels with this status only",
    )

    trend_parser = subparsers.add_parser("trend", help="Pool compliance across years")
    trend_parser.add_argument(
        "--vessel", dest="vessels", action="append", type=_parse_vessel_spec, default=[],
        help="NAME:FUEL_MJ:GHG_INTENSITY (repeatable)",
    )
    trend_parser.add_argument("--start-year", type=int, default=2025)
    trend_parser.add_argument("--end-year", type=int, default=2030)

    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    engine = FuelEUComplianceEngine()

    try:
        if args.command == "years":
            show_years(engine, args.json)
        elif args.command in ("vessel", "suggest", "banking"):
            vessel = VesselRecord(
                fuel_consumption=args.fuel_consumption,
                ghg_intensity=args.ghg_intensity,
                metadata={"name": args.name} if args.name else {},
            )
            if not _check_vessel(engine, vessel, args.year):
                return 1
            handler = {"vessel": show_vessel, "suggest": show_suggestions, "banking": show_banking}
            handler[args.command](engine, vessel, args.year, args.json)
        elif args.command == "pool":
            if not _check_pool(engine, args.vessels, args.year):
                return 1
            show_pool(engine, args.vessels, args.year, args.status, args.json)
        elif args.command == "trend":
            # Range gaps are skipped by the trend, so check figures against a year it covers.
            covered = [y for y in range(args.start_year, args.end_year + 1) if y in engine.targets]
            if not _check_pool(engine, args.vessels, covered[0] if covered else args.start_year):
                return 1
            show_trend(engine, args.vessels, args.start_year, args.end_year, args.json)
        elif args.command == "serve":
            serve(args.host, args.port)
        else:
            parser.print_help()
            return 1
    except InvalidYearError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
