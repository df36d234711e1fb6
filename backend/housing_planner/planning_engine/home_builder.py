"""
Single-home specification calculator.

Turns a HomeBuilderConfig (style, size, feature toggles, budget) plus a
country's cost data into a HomeSpecification:
  - Floor area and room breakdown from the size preference
  - Building cost from the country's construction tier × style multiplier
  - Labour, connection/infrastructure and optional feature costs
  - Operating estimates (maintenance, utilities, property tax, insurance)
  - Build timeline and budget utilisation
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from housing_planner.models.schemas import (
    CountryData,
    FeatureItem,
    HomeBuilderConfig,
    HomeSpecification,
    RoomBreakdown,
)
from housing_planner.planning_engine.numeric import round_half_up
from housing_planner.planning_engine.regional_assumptions import get_country_data

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────
# STYLE AND SIZE TABLES
# ──────────────────────────────────────────────────────────────────

# Which country construction tier each style is priced from
STYLE_COST_TIER = {
    "basic": "basic",
    "standard": "standard",
    "modern": "standard",
    "traditional": "standard",
    "luxury": "improved",
}

STYLE_MULTIPLIERS = {
    "basic": 1.0,
    "standard": 1.5,
    "modern": 1.8,
    "traditional": 1.3,
    "luxury": 2.5,
}

SIZE_AREAS = {  # m² of floor area
    "small": 60,
    "medium": 100,
    "large": 150,
    "spacious": 200,
}

SIZE_BEDROOMS = {"small": 1, "medium": 2, "large": 2, "spacious": 3}
SIZE_BATHROOMS = {"small": 1, "medium": 1, "large": 2, "spacious": 3}

# Share of total floor area per room; sums to 1.0
ROOM_PROPORTIONS = {
    "master_bedroom": 0.15,
    "bedroom_2": 0.12,
    "bedroom_3": 0.12,
    "living_room": 0.25,
    "kitchen": 0.12,
    "bathrooms": 0.08,
    "hallways": 0.16,
}


# ──────────────────────────────────────────────────────────────────
# FEATURES
# ──────────────────────────────────────────────────────────────────

FEATURE_COSTS = {
    "solar_panels": 8000,
    "smart_home": 5000,
    "air_conditioning": 6000,
    "swimming_pool": 25000,
    "garage": 12000,
    "garden": 4000,
}

FEATURE_NAMES = {
    "solar_panels": "Solar Panels",
    "smart_home": "Smart Home",
    "air_conditioning": "AC System",
    "swimming_pool": "Pool",
    "garage": "Garage",
    "garden": "Garden",
}

FEATURE_DESCRIPTIONS = {
    "solar_panels": "Rooftop photovoltaic array with inverter and battery backup",
    "smart_home": "Smart lighting, security cameras and app-controlled locks",
    "air_conditioning": "Split-unit air conditioning for bedrooms and living area",
    "swimming_pool": "In-ground residential swimming pool with filtration",
    "garage": "Covered single-car garage with roller door",
    "garden": "Landscaped garden with lawn, planting and irrigation",
}


# ──────────────────────────────────────────────────────────────────
# OPERATING-COST AND SITE CONSTANTS
# ──────────────────────────────────────────────────────────────────

ROAD_FRONTAGE_M = 50             # access road length charged per home
ELECTRICITY_CONNECTION = 5000    # flat grid connection charge

MAINTENANCE_RATE = 0.025         # of building cost per year
PROPERTY_TAX_RATE = 0.007        # of total cost per year
INSURANCE_RATE = 0.004           # of total cost per year

DAILY_WATER_LITERS = 300
WATER_PRICE_PER_LITER = 0.003
ELECTRICITY_COST_PER_SQM_MONTH = 2

SQM_BUILT_PER_MONTH = 20

TIGHT_BUDGET_PCT = 90


def get_budget_status(percentage_used: float) -> str:
    """comfortable ≤ 90% < tight ≤ 100% < over."""
    if percentage_used > 100:
        return "over"
    if percentage_used > TIGHT_BUDGET_PCT:
        return "tight"
    return "comfortable"


def calculate_room_breakdown(total_area: float, bedrooms: int, config: HomeBuilderConfig) -> RoomBreakdown:
    areas = {room: round(total_area * share, 1) for room, share in ROOM_PROPORTIONS.items()}
    description = (
        f"{bedrooms}-bedroom {config.style} home with {total_area:.0f} m² of floor area "
        f"on a {config.land_size:.0f} m² plot"
    )
    return RoomBreakdown(**areas, description=description)


def calculate_features(config: HomeBuilderConfig) -> list[FeatureItem]:
    return [
        FeatureItem(
            key=key,
            name=FEATURE_NAMES[key],
            cost=FEATURE_COSTS[key],
            description=FEATURE_DESCRIPTIONS[key],
        )
        for key in config.features.enabled()
    ]


class HomeSpecificationCalculator:
    """Costs and specifies a single standalone home build."""

    def compute(self, config: HomeBuilderConfig, country_data: CountryData) -> HomeSpecification:
        # ── Rates ──
        tier = STYLE_COST_TIER[config.style]
        base_cost_per_sqm = getattr(country_data.construction_costs, tier)
        adjusted_cost_per_sqm = base_cost_per_sqm * STYLE_MULTIPLIERS[config.style]

        # ── Layout ──
        total_area = SIZE_AREAS[config.size_preference]
        bedrooms = SIZE_BEDROOMS[config.size_preference]
        bathrooms = SIZE_BATHROOMS[config.size_preference]
        rooms = calculate_room_breakdown(total_area, bedrooms, config)

        # ── Capital cost ──
        building_cost = round_half_up(total_area * adjusted_cost_per_sqm)
        labor_cost = round_half_up(building_cost * country_data.labor_cost_percentage / 100)
        infrastructure_cost = (
            country_data.water_per_connection
            + country_data.sewer_per_connection
            + country_data.roads_per_meter * ROAD_FRONTAGE_M
            + ELECTRICITY_CONNECTION
        )
        features = calculate_features(config)
        features_cost = sum(f.cost for f in features)
        total_cost = building_cost + labor_cost + infrastructure_cost + features_cost

        # ── Operating cost ──
        water_monthly = DAILY_WATER_LITERS * 30 * WATER_PRICE_PER_LITER
        electricity_monthly = total_area * ELECTRICITY_COST_PER_SQM_MONTH

        percentage_used = total_cost / config.budget * 100

        logger.debug(
            "Home %s/%s in %s: %d m², total %.0f (%.1f%% of budget)",
            config.style, config.size_preference, country_data.code,
            total_area, total_cost, percentage_used,
        )

        return HomeSpecification(
            total_building_area=total_area,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            room_breakdown=rooms,
            building_cost=building_cost,
            cost_per_sqm=adjusted_cost_per_sqm,
            infrastructure_cost=infrastructure_cost,
            features_cost=features_cost,
            features=features,
            labor_cost=labor_cost,
            total_cost=total_cost,
            annual_maintenance_cost=round_half_up(building_cost * MAINTENANCE_RATE),
            monthly_utilities_cost=round_half_up(water_monthly + electricity_monthly),
            property_tax_annual=round_half_up(total_cost * PROPERTY_TAX_RATE),
            insurance_annual=round_half_up(total_cost * INSURANCE_RATE),
            estimated_timeline_months=math.ceil(total_area / SQM_BUILT_PER_MONTH),
            remaining_budget=config.budget - total_cost,
            percentage_used=percentage_used,
            budget_status=get_budget_status(percentage_used),
        )


def calculate_home_specification(
    config: HomeBuilderConfig,
    country_data: Optional[CountryData] = None,
) -> HomeSpecification:
    """Compute a home specification; country data defaults to the config's country."""
    if country_data is None:
        country_data = get_country_data(config.country_code)
    return HomeSpecificationCalculator().compute(config, country_data)
