#!/usr/bin/env python3
"""
Run the planning engine over a set of reference scenarios for manual review.

Prints unit counts, population, cost and classification for each scenario
against a country's regional assumptions, then a demand forecast and a
home-builder specification.

Usage:
    python3 scripts/validate_reference_scenarios.py
    python3 scripts/validate_reference_scenarios.py --country NG --json
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from datetime import datetime

# Add backend to path for direct import mode
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
BACKEND_DIR = os.path.join(os.path.dirname(SCRIPT_DIR), "backend")
sys.path.insert(0, BACKEND_DIR)

from housing_planner.config import configure_logging  # noqa: E402
from housing_planner.models.schemas import BudgetRange, HomeBuilderConfig  # noqa: E402
from housing_planner.planning_engine import (  # noqa: E402
    ScenarioValidationError,
    calculate_home_specification,
    calculate_scenario_results,
    project_demand,
)
from housing_planner.planning_engine.formatting import (  # noqa: E402
    format_area,
    format_currency,
    format_number,
)
from housing_planner.planning_engine.regional_assumptions import get_cost_assumptions  # noqa: E402

# ──────────────────────────────────────────────────────────────────
# REFERENCE SCENARIOS
# ──────────────────────────────────────────────────────────────────

REFERENCE_SCENARIOS = [
    {
        "name": "4-storey walk-up, 8 units per floor",
        "land_size_sqm": 5000,
        "budget": {"min": 800_000, "max": 1_200_000},
        "scenario": {
            "projectType": "apartment",
            "unitsPerFloor": 8,
            "numberOfFloors": 4,
            "unitMix": {"oneBedroom": 50, "twoBedroom": 40, "threeBedroom": 10},
            "unitSize": 50,
            "sharedSpacePercentage": 20,
            "finishLevel": "standard",
            "infrastructureCosts": {"water": 50_000, "sewer": 75_000, "roads": 100_000},
        },
    },
    {
        "name": "Mid-rise block, family mix",
        "land_size_sqm": 8000,
        "budget": {"min": 5_000_000, "max": 8_000_000},
        "scenario": {
            "projectType": "apartment",
            "unitsPerFloor": 12,
            "numberOfFloors": 10,
            "unitMix": {"oneBedroom": 20, "twoBedroom": 50, "threeBedroom": 30},
            "unitSize": 65,
            "finishLevel": "improved",
        },
    },
    {
        "name": "Site-and-service estate",
        "land_size_sqm": 40_000,
        "budget": {"min": 2_000_000, "max": 4_000_000},
        "scenario": {
            "projectType": "single-family",
            "numberOfUnits": 80,
            "houseSize": 70,
            "finishLevel": "basic",
            "infrastructureCosts": {"water": 120_000, "sewer": 160_000, "roads": 400_000},
        },
    },
    {
        "name": "Mixed neighbourhood",
        "land_size_sqm": 25_000,
        "budget": {"min": 3_000_000, "max": 6_000_000},
        "scenario": {
            "projectType": "mixed",
            "apartmentUnits": 120,
            "singleFamilyUnits": 40,
        },
    },
    {
        "name": "Incomplete apartment record (expected to fail validation)",
        "land_size_sqm": 5000,
        "budget": {"min": 0, "max": 1},
        "scenario": {"projectType": "apartment", "unitsPerFloor": 6},
    },
]


def format_scenario(case: dict, results) -> str:
    lines = [
        f"\n{'='*70}",
        f"  {case['name']}",
        f"{'='*70}",
        f"  Units:            {results.total_units}",
        f"  Population:       {format_number(results.estimated_population)}",
        f"  Built-up area:    {format_area(results.built_up_area)}",
        f"  Land coverage:    {results.land_coverage_percentage:.1f}%",
        f"  Density:          {results.units_per_hectare:.0f} units/ha ({results.density_classification})",
        f"  Total cost:       {format_currency(results.total_project_cost)} ({results.budget_status})",
        f"  Cost per unit:    {format_currency(results.cost_per_unit)}",
    ]
    if results.cost_per_person is not None:
        lines.append(f"  Cost per person:  {format_currency(results.cost_per_person)}")
    lines.extend([
        f"  Water:            {results.daily_water_demand / 1000:,.1f} m³/day",
        f"  Electricity:      {results.electricity_demand:,.0f} kWh/day",
        f"  Waste:            {results.waste_generation:,.0f} kg/day",
        f"  Infrastructure:   {results.infrastructure_status}",
    ])
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(description="Validate planning engine reference scenarios")
    parser.add_argument("--country", default="KE", help="Country name or ISO code for assumptions")
    parser.add_argument("--json", action="store_true", help="Emit results as JSON")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args()

    configure_logging(args.log_level)
    assumptions = get_cost_assumptions(args.country)

    print(f"\nHousing Planner Reference Scenarios")
    print(f"Date:    {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"Region:  {assumptions.country}")

    results = []
    for case in REFERENCE_SCENARIOS:
        try:
            r = calculate_scenario_results(
                case["scenario"],
                BudgetRange(**case["budget"]),
                case["land_size_sqm"],
                assumptions,
            )
        except ScenarioValidationError as e:
            print(f"\n  {case['name']}\n  REJECTED: {e}")
            results.append({"scenario": case["name"], "status": "rejected", "error": str(e)})
            continue
        if args.json:
            results.append({"scenario": case["name"], "status": "ok", "results": r.model_dump(by_alias=True)})
        else:
            print(format_scenario(case, r))
            results.append({"scenario": case["name"], "status": "ok"})

    print(f"\n{'='*70}\n  DEMAND FORECAST (10,000 people, 2%/yr, 4 per household, 2,300 units)\n{'='*70}")
    for p in project_demand(10_000, 2, 10, 4, 2300):
        print(f"  Year {p.year:>2}: population {p.population:>7,}  demand {p.housing_demand:>6,}  "
              f"surplus/shortfall {p.surplus_shortfall:>+6,}")

    home = calculate_home_specification(HomeBuilderConfig(country_code=args.country))
    print(f"\n{'='*70}\n  HOME BUILDER (defaults)\n{'='*70}")
    print(f"  {home.room_breakdown.description}")
    print(f"  Total cost:  {format_currency(home.total_cost)} "
          f"({home.percentage_used:.1f}% of budget, {home.budget_status})")
    print(f"  Timeline:    {home.estimated_timeline_months} months")

    if args.json:
        print(json.dumps(results, indent=2))

    ok = sum(1 for r in results if r["status"] == "ok")
    print(f"\n  Computed: {ok}/{len(results)}")


if __name__ == "__main__":
    main()
