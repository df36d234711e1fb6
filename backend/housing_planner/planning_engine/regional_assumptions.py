"""
Regional cost and consumption assumptions.

Default tables for the two providers the calculators consume:

  - CostAssumptions per country (scenario metrics): construction rates by
    finish level, infrastructure unit costs, occupancy, per-person daily
    consumption, density and infrastructure thresholds
  - CountryData per ISO code (home builder): construction tiers, labour
    share, connection and road costs

Figures are illustrative USD planning defaults for affordable housing
programmes, not market quotations; callers with local data should build
their own CostAssumptions / CountryData records instead.  CountryData
carries ``currency="USD"`` (the unit of every amount) and the national
currency code separately as ``local_currency``.
"""

from __future__ import annotations

import logging

from housing_planner.config import settings
from housing_planner.models.schemas import CostAssumptions, CountryData

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────
# COUNTRY TABLE
# ──────────────────────────────────────────────────────────────────
# construction: $/m² by finish level (basic, standard, improved)
# labor_pct: labour as % of building cost (home builder)
# water/sewer: $ per connection; roads: $ per metre

COUNTRIES: dict[str, dict] = {
    "KE": {
        "name": "Kenya", "region": "East Africa", "local_currency": "KES",
        "construction": (350, 500, 750), "labor_pct": 25,
        "water": 800, "sewer": 1200, "roads": 150,
        "water_lpd": 80, "electricity_kwh": 1.5, "waste_kg": 0.5,
    },
    "UG": {
        "name": "Uganda", "region": "East Africa", "local_currency": "UGX",
        "construction": (300, 450, 650), "labor_pct": 22,
        "water": 600, "sewer": 1000, "roads": 120,
        "water_lpd": 70, "electricity_kwh": 1.2, "waste_kg": 0.45,
    },
    "TZ": {
        "name": "Tanzania", "region": "East Africa", "local_currency": "TZS",
        "construction": (320, 470, 700), "labor_pct": 23,
        "water": 650, "sewer": 1050, "roads": 130,
        "water_lpd": 75, "electricity_kwh": 1.3, "waste_kg": 0.45,
    },
    "RW": {
        "name": "Rwanda", "region": "East Africa", "local_currency": "RWF",
        "construction": (330, 480, 720), "labor_pct": 24,
        "water": 700, "sewer": 1100, "roads": 140,
        "water_lpd": 70, "electricity_kwh": 1.2, "waste_kg": 0.4,
    },
    "ET": {
        "name": "Ethiopia", "region": "East Africa", "local_currency": "ETB",
        "construction": (280, 420, 620), "labor_pct": 20,
        "water": 550, "sewer": 900, "roads": 110,
        "water_lpd": 60, "electricity_kwh": 1.0, "waste_kg": 0.4,
    },
    "NG": {
        "name": "Nigeria", "region": "West Africa", "local_currency": "NGN",
        "construction": (400, 550, 800), "labor_pct": 28,
        "water": 900, "sewer": 1300, "roads": 170,
        "water_lpd": 90, "electricity_kwh": 1.8, "waste_kg": 0.55,
    },
    "GH": {
        "name": "Ghana", "region": "West Africa", "local_currency": "GHS",
        "construction": (380, 530, 780), "labor_pct": 26,
        "water": 850, "sewer": 1250, "roads": 160,
        "water_lpd": 85, "electricity_kwh": 1.6, "waste_kg": 0.5,
    },
    "ZA": {
        "name": "South Africa", "region": "Southern Africa", "local_currency": "ZAR",
        "construction": (550, 750, 1100), "labor_pct": 32,
        "water": 1200, "sewer": 1800, "roads": 220,
        "water_lpd": 150, "electricity_kwh": 3.5, "waste_kg": 0.8,
    },
}

# One occupancy set applies to every country
PERSONS_PER_UNIT = {"one_bedroom": 1.5, "two_bedroom": 3.0, "three_bedroom": 4.5}
SINGLE_FAMILY_PERSONS_PER_UNIT = 4.5


def _resolve_code(country: str) -> str | None:
    """Map an ISO code or country name (any case) to a table key."""
    key = country.strip().upper()
    if key in COUNTRIES:
        return key
    for code, row in COUNTRIES.items():
        if row["name"].upper() == key:
            return code
    return None


def _lookup(country: str) -> tuple[str, dict]:
    code = _resolve_code(country)
    if code is None:
        code = _resolve_code(settings.default_country) or "KE"
        logger.info("No regional table for %r; using %s defaults", country, code)
    return code, COUNTRIES[code]


def get_available_countries() -> list[dict]:
    """List supported countries as {code, name, region} dicts."""
    return [
        {"code": code, "name": row["name"], "region": row["region"]}
        for code, row in COUNTRIES.items()
    ]


def get_cost_assumptions(country: str) -> CostAssumptions:
    """Scenario-level CostAssumptions for a country name or ISO code.

    Falls back to the configured default country for unknown keys.
    A fresh record is built on every call.
    """
    code, row = _lookup(country)
    basic, standard, improved = row["construction"]
    return CostAssumptions(
        country=row["name"],
        construction_costs={"basic": basic, "standard": standard, "improved": improved},
        water_per_connection=row["water"],
        sewer_per_connection=row["sewer"],
        roads_per_meter=row["roads"],
        persons_per_unit=dict(PERSONS_PER_UNIT),
        single_family_persons_per_unit=SINGLE_FAMILY_PERSONS_PER_UNIT,
        water_liters_per_person=row["water_lpd"],
        electricity_kwh_per_person=row["electricity_kwh"],
        waste_kg_per_person=row["waste_kg"],
    )


def get_country_data(country_code: str) -> CountryData:
    """Home-builder CountryData for an ISO code (or name), with fallback."""
    code, row = _lookup(country_code)
    basic, standard, improved = row["construction"]
    return CountryData(
        code=code,
        name=row["name"],
        region=row["region"],
        currency="USD",
        local_currency=row["local_currency"],
        construction_costs={"basic": basic, "standard": standard, "improved": improved},
        labor_cost_percentage=row["labor_pct"],
        water_per_connection=row["water"],
        sewer_per_connection=row["sewer"],
        roads_per_meter=row["roads"],
    )
