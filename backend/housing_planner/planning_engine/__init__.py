from __future__ import annotations

from housing_planner.planning_engine.demand_forecast import (
    DemandForecastProjector,
    forecast_demand,
    project_demand,
)
from housing_planner.planning_engine.errors import ScenarioValidationError
from housing_planner.planning_engine.home_builder import (
    HomeSpecificationCalculator,
    calculate_home_specification,
)
from housing_planner.planning_engine.portfolio import summarize_portfolio
from housing_planner.planning_engine.scenario_metrics import (
    ScenarioMetricsCalculator,
    calculate_for_project,
    calculate_scenario_results,
    parse_scenario,
    rebalance_unit_mix,
)

__all__ = [
    "DemandForecastProjector",
    "HomeSpecificationCalculator",
    "ScenarioMetricsCalculator",
    "ScenarioValidationError",
    "calculate_for_project",
    "calculate_home_specification",
    "calculate_scenario_results",
    "forecast_demand",
    "parse_scenario",
    "project_demand",
    "rebalance_unit_mix",
    "summarize_portfolio",
]
