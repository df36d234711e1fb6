"""
Housing demand projection.

Compounds current population at a fixed annual growth rate and compares the
implied household count against today's housing stock, year by year.
Growth compounds on the unrounded population; only the reported figure is
rounded.
"""

from __future__ import annotations

import logging
import math

from housing_planner.models.schemas import DemandForecast, YearProjection
from housing_planner.planning_engine.numeric import round_half_up

logger = logging.getLogger(__name__)


def project_demand(
    current_population: float,
    annual_growth_rate: float,
    horizon_years: int,
    avg_household_size: float,
    current_units: int,
) -> list[YearProjection]:
    """Project population, housing demand and surplus/shortfall for years 1..horizon.

    Args:
        current_population: Population today
        annual_growth_rate: Growth in percent per year (may be negative)
        horizon_years: Number of years to project
        avg_household_size: Persons per household
        current_units: Housing units available today

    Returns one YearProjection per year; surplus_shortfall is negative when
    demand outstrips the current stock.
    """
    if avg_household_size <= 0:
        raise ValueError("Average household size must be positive.")
    if horizon_years < 0:
        raise ValueError("Projection horizon cannot be negative.")

    growth = 1 + annual_growth_rate / 100
    projections: list[YearProjection] = []

    for year in range(1, horizon_years + 1):
        population = current_population * growth ** year
        housing_demand = math.ceil(population / avg_household_size)
        projections.append(YearProjection(
            year=year,
            population=round_half_up(population),
            housing_demand=housing_demand,
            surplus_shortfall=current_units - housing_demand,
        ))

    if projections:
        logger.debug(
            "Projected %d years at %.2f%%: demand %d units by year %d (stock %d)",
            horizon_years, annual_growth_rate, projections[-1].housing_demand,
            horizon_years, current_units,
        )
    return projections


class DemandForecastProjector:
    """Year-by-year housing demand projection; stateless."""

    def project(
        self,
        current_population: float,
        annual_growth_rate: float,
        horizon_years: int,
        avg_household_size: float,
        current_units: int,
    ) -> list[YearProjection]:
        return project_demand(
            current_population, annual_growth_rate, horizon_years,
            avg_household_size, current_units,
        )

    def forecast(
        self,
        forecast: DemandForecast,
        avg_household_size: float,
        current_units: int,
    ) -> DemandForecast:
        """Return a copy of ``forecast`` with its projections filled in."""
        projections = self.project(
            forecast.current_population,
            forecast.annual_growth_rate,
            forecast.time_horizon,
            avg_household_size,
            current_units,
        )
        return forecast.model_copy(update={"projections": projections})


def forecast_demand(
    forecast: DemandForecast,
    avg_household_size: float,
    current_units: int,
) -> DemandForecast:
    return DemandForecastProjector().forecast(forecast, avg_household_size, current_units)
