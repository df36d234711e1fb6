"""
Scenario metrics calculator.

Takes a development scenario (apartment, single-family or mixed), a budget
envelope, a land area and regional CostAssumptions, and produces:
  - Unit count and bedroom split (apartments)
  - Estimated population from occupancy assumptions
  - Built-up area and land coverage
  - Density classification (units per hectare ladder)
  - Construction + infrastructure cost, cost per unit / per person
  - Budget status against the project's min/max envelope
  - Daily water, electricity and waste demand with an infrastructure status

Occupancy and the mixed-development area constants resolve through
scenario overrides → project overrides → regional defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pydantic.alias_generators import to_camel

from housing_planner.models.schemas import (
    ApartmentScenario,
    AssumptionOverrides,
    BedroomBreakdown,
    BudgetRange,
    CostAssumptions,
    MixedScenario,
    Project,
    Scenario,
    ScenarioResults,
    SingleFamilyScenario,
    UnitMix,
)
from housing_planner.planning_engine.errors import ScenarioValidationError
from housing_planner.planning_engine.numeric import (
    classify,
    land_size_to_sqm,
    resolve_assumption,
    round_half_up,
)
from housing_planner.planning_engine.regional_assumptions import get_cost_assumptions

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────
# CONSTANTS
# ──────────────────────────────────────────────────────────────────

# Mixed developments carry unit counts only, so floor area per unit is a
# flat approximation.  Overridable via AssumptionOverrides.
MIXED_APARTMENT_UNIT_AREA = 70.0   # m² per apartment
MIXED_HOUSE_UNIT_AREA = 100.0      # m² per house

SQM_PER_HECTARE = 10_000
LITERS_PER_M3 = 1_000

SCENARIO_TYPES: dict[str, type] = {
    "apartment": ApartmentScenario,
    "single-family": SingleFamilyScenario,
    "mixed": MixedScenario,
}

# Fields with no default; a scenario of that type cannot be computed without them
REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "apartment": ("units_per_floor", "number_of_floors", "unit_mix"),
    "single-family": ("number_of_units",),
    "mixed": ("apartment_units", "single_family_units"),
}


# ──────────────────────────────────────────────────────────────────
# SCENARIO PARSING
# ──────────────────────────────────────────────────────────────────

def _get(data: Mapping[str, Any], field: str) -> Any:
    value = data.get(field)
    if value is None:
        value = data.get(to_camel(field))
    return value


def parse_scenario(data: Union[Scenario, Mapping[str, Any]]) -> Scenario:
    """Build the scenario variant named by ``project_type``.

    Accepts an already-typed scenario (returned unchanged) or a mapping with
    snake_case or camelCase keys.  Raises ScenarioValidationError when the
    tag is unknown or a field the tag requires is absent.
    """
    if isinstance(data, (ApartmentScenario, SingleFamilyScenario, MixedScenario)):
        return data

    project_type = _get(data, "project_type")
    if project_type not in SCENARIO_TYPES:
        raise ScenarioValidationError(project_type, ["project_type"])

    missing = [f for f in REQUIRED_FIELDS[project_type] if _get(data, f) is None]
    if missing:
        raise ScenarioValidationError(project_type, missing)

    return SCENARIO_TYPES[project_type].model_validate(data)


# ──────────────────────────────────────────────────────────────────
# UNIT PROGRAM
# ──────────────────────────────────────────────────────────────────

@dataclass
class UnitProgram:
    """Unit count, unrounded population and built area for one scenario."""
    total_units: int
    population: float
    built_up_area: float
    bedrooms: Optional[BedroomBreakdown] = None


def split_unit_mix(total_units: int, scenario: ApartmentScenario) -> BedroomBreakdown:
    """Split apartment units by bedroom count.

    One- and two-bedroom counts are rounded from their percentages; the
    three-bedroom count takes the remainder so the three always sum to
    ``total_units``, whatever the percentages add up to.
    """
    mix = scenario.unit_mix
    one = round_half_up(total_units * mix.one_bedroom / 100)
    two = round_half_up(total_units * mix.two_bedroom / 100)
    three = total_units - one - two  # Last type gets remainder
    return BedroomBreakdown(
        one_bedroom_units=one,
        two_bedroom_units=two,
        three_bedroom_units=three,
    )


# When one share is set and the other two are both zero, the first of the
# other two receives this fraction of what remains.
REBALANCE_FALLBACK_RATIOS: dict[str, tuple[str, str, float]] = {
    "one_bedroom": ("two_bedroom", "three_bedroom", 0.7),
    "two_bedroom": ("one_bedroom", "three_bedroom", 0.7),
    "three_bedroom": ("one_bedroom", "two_bedroom", 0.6),
}


def rebalance_unit_mix(mix: UnitMix, changed: str, value: float) -> UnitMix:
    """Set one bedroom share and redistribute the rest to keep 100%.

    The other two shares split ``100 - value`` in their current proportion.
    The first is rounded half-up and the second takes the remainder, so the
    result always totals exactly 100.  A share that is currently zero stays
    zero unless both are zero, in which case the fallback ratio applies.
    """
    if changed not in REBALANCE_FALLBACK_RATIOS:
        raise ValueError(f"Unknown unit type: {changed!r}")
    if not 0 <= value <= 100:
        raise ValueError(f"Unit share must be between 0 and 100, got {value}")

    first, second, fallback = REBALANCE_FALLBACK_RATIOS[changed]
    current = mix.model_dump()
    others = current[first] + current[second]
    ratio = current[first] / others if others > 0 else fallback

    remaining = 100 - value
    first_share = min(round_half_up(remaining * ratio), remaining)
    return UnitMix(**{
        changed: value,
        first: first_share,
        second: remaining - first_share,
    })


def _occupancy(
    assumptions: CostAssumptions,
    overrides: tuple[Optional[AssumptionOverrides], ...],
) -> dict[str, float]:
    ppu = assumptions.persons_per_unit
    return {
        "one_bedroom": resolve_assumption("one_bedroom_persons", *overrides, default=ppu.one_bedroom),
        "two_bedroom": resolve_assumption("two_bedroom_persons", *overrides, default=ppu.two_bedroom),
        "three_bedroom": resolve_assumption("three_bedroom_persons", *overrides, default=ppu.three_bedroom),
        "single_family": resolve_assumption(
            "single_family_persons_per_unit", *overrides,
            default=assumptions.single_family_persons_per_unit,
        ),
    }


def apartment_program(
    scenario: ApartmentScenario,
    occupancy: dict[str, float],
) -> UnitProgram:
    total_units = scenario.units_per_floor * scenario.number_of_floors

    if abs(scenario.unit_mix.total_percentage - 100) > 1e-9:
        logger.warning(
            "Unit mix for %r totals %.1f%%, not 100%%; three-bedroom count absorbs the difference",
            scenario.name, scenario.unit_mix.total_percentage,
        )

    bedrooms = split_unit_mix(total_units, scenario)
    population = (
        bedrooms.one_bedroom_units * occupancy["one_bedroom"]
        + bedrooms.two_bedroom_units * occupancy["two_bedroom"]
        + bedrooms.three_bedroom_units * occupancy["three_bedroom"]
    )

    unit_area = total_units * scenario.unit_size
    shared_area = unit_area * (scenario.shared_space_percentage / 100)

    return UnitProgram(
        total_units=total_units,
        population=population,
        built_up_area=unit_area + shared_area,
        bedrooms=bedrooms,
    )


def single_family_program(
    scenario: SingleFamilyScenario,
    occupancy: dict[str, float],
) -> UnitProgram:
    total_units = scenario.number_of_units
    return UnitProgram(
        total_units=total_units,
        population=total_units * occupancy["single_family"],
        built_up_area=total_units * scenario.house_size,
    )


def mixed_program(
    scenario: MixedScenario,
    occupancy: dict[str, float],
    overrides: tuple[Optional[AssumptionOverrides], ...],
) -> UnitProgram:
    """Mixed developments: apartments use the plain mean of the three
    bedroom occupancies, since no unit mix is known."""
    avg_apartment_occupancy = (
        occupancy["one_bedroom"] + occupancy["two_bedroom"] + occupancy["three_bedroom"]
    ) / 3
    apartment_area = resolve_assumption(
        "mixed_apartment_unit_area", *overrides, default=MIXED_APARTMENT_UNIT_AREA,
    )
    house_area = resolve_assumption(
        "mixed_house_unit_area", *overrides, default=MIXED_HOUSE_UNIT_AREA,
    )

    return UnitProgram(
        total_units=scenario.apartment_units + scenario.single_family_units,
        population=(
            scenario.apartment_units * avg_apartment_occupancy
            + scenario.single_family_units * occupancy["single_family"]
        ),
        built_up_area=(
            scenario.apartment_units * apartment_area
            + scenario.single_family_units * house_area
        ),
    )


def build_unit_program(
    scenario: Scenario,
    assumptions: CostAssumptions,
    project_overrides: Optional[AssumptionOverrides] = None,
) -> UnitProgram:
    """Dispatch on scenario type to count units, people and floor area."""
    overrides = (scenario.custom_assumptions, project_overrides)
    occupancy = _occupancy(assumptions, overrides)

    if isinstance(scenario, ApartmentScenario):
        return apartment_program(scenario, occupancy)
    if isinstance(scenario, SingleFamilyScenario):
        return single_family_program(scenario, occupancy)
    if isinstance(scenario, MixedScenario):
        return mixed_program(scenario, occupancy, overrides)
    raise TypeError(f"Unsupported scenario type: {type(scenario).__name__}")


# ──────────────────────────────────────────────────────────────────
# CLASSIFICATIONS
# ──────────────────────────────────────────────────────────────────

def get_density_classification(units_per_hectare: float, assumptions: CostAssumptions) -> str:
    """Bucket units/ha into low, medium, high or very-high (strict < bounds)."""
    t = assumptions.density_thresholds
    return classify(
        units_per_hectare,
        [(t.low, "low"), (t.medium, "medium"), (t.high, "high")],
        "very-high",
    )


def get_budget_status(total_cost: float, budget: BudgetRange) -> str:
    """under / within / over; both envelope edges count as within."""
    if total_cost < budget.min:
        return "under"
    if total_cost > budget.max:
        return "over"
    return "within"


def get_infrastructure_status(
    daily_water_liters: float,
    population: float,
    assumptions: CostAssumptions,
) -> str:
    """Combined water-demand and population status.

    Either measure strictly above its exceeds level makes the whole
    scenario "exceeds"; otherwise strictly above a warning level gives
    "warning".  Exceeds levels are checked first, so a warning level set
    above the exceeds level never masks an exceedance.
    """
    levels = assumptions.infrastructure_warning_levels
    water_m3 = daily_water_liters / LITERS_PER_M3

    if water_m3 > levels.water_demand_exceeds or population > levels.population_exceeds:
        return "exceeds"
    if water_m3 > levels.water_demand_warning or population > levels.population_warning:
        return "warning"
    return "ok"


# ──────────────────────────────────────────────────────────────────
# MAIN ENTRY
# ──────────────────────────────────────────────────────────────────

class ScenarioMetricsCalculator:
    """Computes physical, demographic, cost and infrastructure metrics for a scenario."""

    def compute(
        self,
        scenario: Union[Scenario, Mapping[str, Any]],
        budget_range: Union[BudgetRange, Mapping[str, Any]],
        land_size_sqm: float,
        cost_assumptions: Union[CostAssumptions, Mapping[str, Any]],
        project_overrides: Optional[AssumptionOverrides] = None,
    ) -> ScenarioResults:
        """Full calculation for one scenario on one site.

        Args:
            scenario: Typed scenario variant or raw mapping with ``project_type``
            budget_range: Project budget envelope (min ≤ max)
            land_size_sqm: Site area in square metres
            cost_assumptions: Regional cost and consumption constants
            project_overrides: Project-level assumption overrides

        Raises:
            ScenarioValidationError: a field required by the scenario type is
                missing, or the land size is not positive
        """
        scenario = parse_scenario(scenario)
        if not land_size_sqm or land_size_sqm <= 0:
            raise ScenarioValidationError(scenario.project_type, ["land_size"])
        if not isinstance(budget_range, BudgetRange):
            budget_range = BudgetRange.model_validate(budget_range)
        if not isinstance(cost_assumptions, CostAssumptions):
            cost_assumptions = CostAssumptions.model_validate(cost_assumptions)

        program = build_unit_program(scenario, cost_assumptions, project_overrides)
        total_units = program.total_units
        population = round_half_up(program.population)
        built_up_area = program.built_up_area

        # ── Site ──
        land_coverage = built_up_area / land_size_sqm * 100
        units_per_hectare = total_units / land_size_sqm * SQM_PER_HECTARE
        density = get_density_classification(units_per_hectare, cost_assumptions)

        # ── Cost ──
        rate = getattr(cost_assumptions.construction_costs, scenario.finish_level)
        construction_cost = built_up_area * rate
        infra = scenario.infrastructure_costs
        infrastructure_cost = infra.water + infra.sewer + infra.roads
        total_cost = construction_cost + infrastructure_cost

        cost_per_unit = total_cost / total_units
        if population > 0:
            cost_per_person = total_cost / population
        else:
            cost_per_person = None
            logger.warning(
                "Scenario %r has zero estimated population; cost per person is undefined",
                scenario.name,
            )

        budget_status = get_budget_status(total_cost, budget_range)

        # ── Infrastructure demand ──
        water = population * cost_assumptions.water_liters_per_person
        electricity = population * cost_assumptions.electricity_kwh_per_person
        waste = population * cost_assumptions.waste_kg_per_person
        infra_status = get_infrastructure_status(water, population, cost_assumptions)

        logger.debug(
            "Scenario %r (%s): %d units, %d people, %.0f m² built, cost %.0f (%s), infrastructure %s",
            scenario.name, scenario.project_type, total_units, population,
            built_up_area, total_cost, budget_status, infra_status,
        )

        return ScenarioResults(
            total_units=total_units,
            estimated_population=population,
            built_up_area=built_up_area,
            land_coverage_percentage=land_coverage,
            units_per_hectare=units_per_hectare,
            density_classification=density,
            construction_cost=construction_cost,
            infrastructure_cost=infrastructure_cost,
            total_project_cost=total_cost,
            cost_per_unit=cost_per_unit,
            cost_per_person=cost_per_person,
            budget_status=budget_status,
            daily_water_demand=water,
            electricity_demand=electricity,
            waste_generation=waste,
            infrastructure_status=infra_status,
            bedroom_breakdown=program.bedrooms,
        )


def calculate_scenario_results(
    scenario: Union[Scenario, Mapping[str, Any]],
    budget_range: Union[BudgetRange, Mapping[str, Any]],
    land_size_sqm: float,
    cost_assumptions: Union[CostAssumptions, Mapping[str, Any]],
    project_overrides: Optional[AssumptionOverrides] = None,
) -> ScenarioResults:
    """Module-level shortcut for ScenarioMetricsCalculator().compute()."""
    return ScenarioMetricsCalculator().compute(
        scenario, budget_range, land_size_sqm, cost_assumptions, project_overrides,
    )


def calculate_for_project(
    scenario: Union[Scenario, Mapping[str, Any]],
    project: Project,
    cost_assumptions: Optional[CostAssumptions] = None,
) -> ScenarioResults:
    """Compute a scenario against its project's site, budget and overrides.

    Acre land sizes are converted to m².  Without explicit assumptions the
    regional table for the project's country is used.
    """
    if cost_assumptions is None:
        cost_assumptions = get_cost_assumptions(project.location.country)

    return ScenarioMetricsCalculator().compute(
        scenario,
        project.budget_range,
        land_size_to_sqm(project.land_size, project.land_size_unit),
        cost_assumptions,
        project_overrides=project.assumption_overrides,
    )
