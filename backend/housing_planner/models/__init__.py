from __future__ import annotations

from housing_planner.models.schemas import (
    ApartmentScenario,
    BudgetRange,
    CostAssumptions,
    CountryData,
    DemandForecast,
    HomeBuilderConfig,
    HomeSpecification,
    MixedScenario,
    PortfolioSummary,
    Project,
    Scenario,
    ScenarioResults,
    SingleFamilyScenario,
    YearProjection,
)

__all__ = [
    "ApartmentScenario",
    "BudgetRange",
    "CostAssumptions",
    "CountryData",
    "DemandForecast",
    "HomeBuilderConfig",
    "HomeSpecification",
    "MixedScenario",
    "PortfolioSummary",
    "Project",
    "Scenario",
    "ScenarioResults",
    "SingleFamilyScenario",
    "YearProjection",
]
