from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


FinishLevel = Literal["basic", "standard", "improved"]
DensityClassification = Literal["low", "medium", "high", "very-high"]
BudgetStatus = Literal["under", "within", "over"]
InfrastructureStatus = Literal["ok", "warning", "exceeds"]
HomeStyle = Literal["basic", "standard", "modern", "traditional", "luxury"]
SizePreference = Literal["small", "medium", "large", "spacious"]
HomeBudgetStatus = Literal["comfortable", "tight", "over"]


class PlannerModel(BaseModel):
    """Immutable record; accepts snake_case or camelCase keys and dumps camelCase by alias."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ──────────────────────────────────────────────────────────────────
# SCENARIO INPUTS
# ──────────────────────────────────────────────────────────────────

class UnitMix(PlannerModel):
    # Percentages of apartment units by bedroom count; meant to total 100
    one_bedroom: float = Field(ge=0)
    two_bedroom: float = Field(ge=0)
    three_bedroom: float = Field(ge=0)

    @property
    def total_percentage(self) -> float:
        return self.one_bedroom + self.two_bedroom + self.three_bedroom


class InfrastructureCosts(PlannerModel):
    water: float = Field(default=0, ge=0)
    sewer: float = Field(default=0, ge=0)
    roads: float = Field(default=0, ge=0)


class AssumptionOverrides(PlannerModel):
    """Optional per-scenario or per-project replacements for regional defaults."""
    one_bedroom_persons: Optional[float] = Field(default=None, ge=0)
    two_bedroom_persons: Optional[float] = Field(default=None, ge=0)
    three_bedroom_persons: Optional[float] = Field(default=None, ge=0)
    single_family_persons_per_unit: Optional[float] = Field(default=None, ge=0)
    mixed_apartment_unit_area: Optional[float] = Field(default=None, gt=0)
    mixed_house_unit_area: Optional[float] = Field(default=None, gt=0)


class ScenarioBase(PlannerModel):
    name: str = "Scenario"
    construction_cost_per_sqm: Optional[float] = Field(default=None, ge=0)
    infrastructure_costs: InfrastructureCosts = InfrastructureCosts()
    finish_level: FinishLevel = "standard"
    custom_assumptions: Optional[AssumptionOverrides] = None


class ApartmentScenario(ScenarioBase):
    project_type: Literal["apartment"] = "apartment"
    units_per_floor: int = Field(gt=0)
    number_of_floors: int = Field(gt=0)
    unit_mix: UnitMix
    unit_size: float = Field(default=50, gt=0)  # m² per unit
    shared_space_percentage: float = Field(default=20, ge=0)  # corridors, stairs, lifts


class SingleFamilyScenario(ScenarioBase):
    project_type: Literal["single-family"] = "single-family"
    number_of_units: int = Field(gt=0)
    house_size: float = Field(default=100, gt=0)  # m² per house


class MixedScenario(ScenarioBase):
    project_type: Literal["mixed"] = "mixed"
    apartment_units: int = Field(gt=0)
    single_family_units: int = Field(gt=0)


Scenario = Union[ApartmentScenario, SingleFamilyScenario, MixedScenario]


# ──────────────────────────────────────────────────────────────────
# PROJECT
# ──────────────────────────────────────────────────────────────────

class BudgetRange(PlannerModel):
    min: float = Field(ge=0)
    max: float = Field(ge=0)
    currency: str = "USD"

    @model_validator(mode="after")
    def _check_order(self) -> "BudgetRange":
        if self.min > self.max:
            raise ValueError(f"budget min ({self.min}) exceeds max ({self.max})")
        return self


class Location(PlannerModel):
    city: str = ""
    country: str = ""


class Project(PlannerModel):
    name: str
    location: Location = Location()
    land_size: float = Field(gt=0)
    land_size_unit: Literal["sqm", "acres"] = "sqm"
    budget_range: BudgetRange
    target_income_group: Literal["low", "lower-middle", "middle", "mixed"] = "mixed"
    assumption_overrides: Optional[AssumptionOverrides] = None


# ──────────────────────────────────────────────────────────────────
# REGIONAL ASSUMPTIONS
# ──────────────────────────────────────────────────────────────────

class ConstructionCosts(PlannerModel):
    # Cost per m² by finish level
    basic: float = Field(ge=0)
    standard: float = Field(ge=0)
    improved: float = Field(ge=0)


class PersonsPerUnit(PlannerModel):
    one_bedroom: float = Field(ge=0)
    two_bedroom: float = Field(ge=0)
    three_bedroom: float = Field(ge=0)


class DensityThresholds(PlannerModel):
    # Upper bounds in units per hectare; expected to increase low → high
    low: float = 50
    medium: float = 150
    high: float = 300


class InfrastructureWarningLevels(PlannerModel):
    water_demand_exceeds: float = 500   # m³/day
    water_demand_warning: float = 300   # m³/day
    population_exceeds: float = 2000
    population_warning: float = 1500


class CostAssumptions(PlannerModel):
    country: str
    construction_costs: ConstructionCosts

    # Infrastructure unit costs
    water_per_connection: float = 0
    sewer_per_connection: float = 0
    roads_per_meter: float = 0

    persons_per_unit: PersonsPerUnit
    single_family_persons_per_unit: float = Field(default=4.5, ge=0)

    # Consumption per person per day
    water_liters_per_person: float = Field(ge=0)
    electricity_kwh_per_person: float = Field(ge=0)
    waste_kg_per_person: float = Field(ge=0)

    density_thresholds: DensityThresholds = DensityThresholds()
    infrastructure_warning_levels: InfrastructureWarningLevels = InfrastructureWarningLevels()


class CountryData(PlannerModel):
    code: str
    name: str
    region: str = ""
    currency: str = "USD"  # unit of every amount in this record
    local_currency: Optional[str] = None  # national currency code, informational
    construction_costs: ConstructionCosts
    labor_cost_percentage: float = Field(ge=0)
    water_per_connection: float = Field(default=0, ge=0)
    sewer_per_connection: float = Field(default=0, ge=0)
    roads_per_meter: float = Field(default=0, ge=0)


# ──────────────────────────────────────────────────────────────────
# SCENARIO RESULTS
# ──────────────────────────────────────────────────────────────────

class BedroomBreakdown(PlannerModel):
    one_bedroom_units: int
    two_bedroom_units: int
    three_bedroom_units: int


class ScenarioResults(PlannerModel):
    total_units: int
    estimated_population: int
    built_up_area: float
    land_coverage_percentage: float
    units_per_hectare: float
    density_classification: DensityClassification

    construction_cost: float
    infrastructure_cost: float
    total_project_cost: float
    cost_per_unit: float
    cost_per_person: Optional[float] = None  # None when the population is zero
    budget_status: BudgetStatus

    daily_water_demand: float   # litres per day
    electricity_demand: float   # kWh per day
    waste_generation: float     # kg per day
    infrastructure_status: InfrastructureStatus

    bedroom_breakdown: Optional[BedroomBreakdown] = None  # apartment scenarios only


class PortfolioSummary(PlannerModel):
    """Totals across every computed scenario of a set of projects."""
    project_count: int
    scenario_count: int
    total_units: int
    total_people_housed: int
    total_budget: float
    avg_units_per_project: int


# ──────────────────────────────────────────────────────────────────
# DEMAND FORECAST
# ──────────────────────────────────────────────────────────────────

class YearProjection(PlannerModel):
    year: int
    population: int
    housing_demand: int
    surplus_shortfall: int  # negative = shortfall


class DemandForecast(PlannerModel):
    project_id: Optional[str] = None
    current_population: float = Field(ge=0)
    annual_growth_rate: float  # percentage
    time_horizon: Literal[5, 10, 20] = 10
    projections: Optional[list[YearProjection]] = None


# ──────────────────────────────────────────────────────────────────
# HOME BUILDER
# ──────────────────────────────────────────────────────────────────

class HomeFeatures(PlannerModel):
    solar_panels: bool = False
    smart_home: bool = False
    air_conditioning: bool = False
    swimming_pool: bool = False
    garage: bool = False
    garden: bool = True

    def enabled(self) -> list[str]:
        """Enabled feature keys, in declaration order."""
        return [name for name in type(self).model_fields if getattr(self, name)]


class HomeBuilderConfig(PlannerModel):
    country_code: str = "KE"
    land_size: float = Field(default=500, gt=0)  # m²
    budget: float = Field(default=50000, gt=0)
    style: HomeStyle = "standard"
    size_preference: SizePreference = "medium"
    features: HomeFeatures = HomeFeatures()


class RoomBreakdown(PlannerModel):
    master_bedroom: float
    bedroom_2: float
    bedroom_3: float
    living_room: float
    kitchen: float
    bathrooms: float
    hallways: float
    description: str


class FeatureItem(PlannerModel):
    key: str
    name: str
    cost: float
    description: str


class HomeSpecification(PlannerModel):
    total_building_area: float
    bedrooms: int
    bathrooms: int
    room_breakdown: RoomBreakdown

    building_cost: float
    cost_per_sqm: float
    infrastructure_cost: float
    features_cost: float
    features: list[FeatureItem] = []
    labor_cost: float
    total_cost: float

    annual_maintenance_cost: float
    monthly_utilities_cost: float
    property_tax_annual: float
    insurance_annual: float

    estimated_timeline_months: int
    remaining_budget: float  # negative = over budget
    percentage_used: float
    budget_status: HomeBudgetStatus
