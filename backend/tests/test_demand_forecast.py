"""Tests for housing demand projection."""

from __future__ import annotations

import math

import pytest

from housing_planner.models.schemas import DemandForecast
from housing_planner.planning_engine.demand_forecast import (
    DemandForecastProjector,
    forecast_demand,
    project_demand,
)


class TestProjectDemand:
    """10,000 people growing 2% a year, 4 per household, 2,300 units today."""

    @pytest.fixture
    def projections(self):
        return project_demand(10_000, 2, 5, 4, 2300)

    def test_one_entry_per_year(self, projections):
        assert [p.year for p in projections] == [1, 2, 3, 4, 5]

    def test_first_year(self, projections):
        first = projections[0]
        assert first.population == 10_200
        assert first.housing_demand == 2550
        assert first.surplus_shortfall == -250

    def test_final_year_compounds(self, projections):
        last = projections[-1]
        # 10,000 × 1.02^5 = 11,040.81
        assert last.population == 11_041
        assert last.housing_demand == 2761
        assert last.surplus_shortfall == 2300 - 2761

    def test_demand_uses_unrounded_population(self):
        # 1.5 × 1.1 = 1.65 people → 1 household of 1.6 needs 2 units, not 1
        projections = project_demand(1.5, 10, 1, 1.6, 0)
        assert projections[0].population == 2
        assert projections[0].housing_demand == math.ceil(1.65 / 1.6)

    def test_surplus_when_stock_exceeds_demand(self):
        projections = project_demand(1000, 0, 3, 4, 300)
        assert all(p.housing_demand == 250 for p in projections)
        assert all(p.surplus_shortfall == 50 for p in projections)

    def test_negative_growth_shrinks(self):
        projections = project_demand(10_000, -1, 5, 4, 2500)
        populations = [p.population for p in projections]
        assert populations == sorted(populations, reverse=True)
        assert projections[0].population == 9900

    def test_zero_horizon(self):
        assert project_demand(10_000, 2, 0, 4, 2300) == []

    def test_zero_population_zero_demand(self):
        projections = project_demand(0, 5, 10, 3, 0)
        assert all(p.housing_demand == 0 for p in projections)

    @pytest.mark.parametrize("population,rate,size", [
        (0, 0, 1),
        (500, 3.5, 2.5),
        (123_456, 0.7, 4.2),
        (10, 50, 1),
    ])
    def test_demand_non_negative(self, population, rate, size):
        for p in project_demand(population, rate, 20, size, 0):
            assert p.housing_demand >= 0

    def test_restartable(self):
        first = project_demand(75_000, 2.8, 20, 4.4, 15_000)
        second = project_demand(75_000, 2.8, 20, 4.4, 15_000)
        assert first == second

    def test_household_size_must_be_positive(self):
        with pytest.raises(ValueError):
            project_demand(10_000, 2, 5, 0, 2300)

    def test_negative_horizon_rejected(self):
        with pytest.raises(ValueError):
            project_demand(10_000, 2, -1, 4, 2300)


class TestDemandForecastRecord:
    def test_fills_projections(self):
        forecast = DemandForecast(current_population=10_000, annual_growth_rate=2, time_horizon=10)
        result = forecast_demand(forecast, 4, 2300)
        assert len(result.projections) == 10
        assert result.projections[0].housing_demand == 2550
        assert forecast.projections is None

    def test_projector_matches_function(self):
        projector = DemandForecastProjector()
        assert projector.project(5000, 3, 5, 3.5, 1200) == project_demand(5000, 3, 5, 3.5, 1200)

    def test_horizon_restricted(self):
        with pytest.raises(ValueError):
            DemandForecast(current_population=10_000, annual_growth_rate=2, time_horizon=7)

    def test_camel_case_input(self):
        forecast = DemandForecast.model_validate(
            {"projectId": "p1", "currentPopulation": 20_000, "annualGrowthRate": 2, "timeHorizon": 5},
        )
        result = forecast_demand(forecast, 5, 4000)
        assert result.model_dump(by_alias=True)["projections"][0]["housingDemand"] == 4080
