"""Tests for input record validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from housing_planner.models.schemas import (
    ApartmentScenario,
    BudgetRange,
    HomeBuilderConfig,
    HomeFeatures,
    InfrastructureCosts,
    MixedScenario,
    Project,
    SingleFamilyScenario,
    UnitMix,
)


class TestScenarioRecords:
    def test_apartment_defaults(self):
        s = ApartmentScenario(
            units_per_floor=4, number_of_floors=3,
            unit_mix={"one_bedroom": 30, "two_bedroom": 50, "three_bedroom": 20},
        )
        assert s.project_type == "apartment"
        assert s.unit_size == 50
        assert s.shared_space_percentage == 20
        assert s.finish_level == "standard"
        assert s.infrastructure_costs == InfrastructureCosts()

    def test_units_must_be_positive(self):
        with pytest.raises(ValidationError):
            SingleFamilyScenario(number_of_units=0)
        with pytest.raises(ValidationError):
            MixedScenario(apartment_units=5, single_family_units=0)

    def test_negative_infrastructure_cost_rejected(self):
        with pytest.raises(ValidationError):
            InfrastructureCosts(water=-1)

    def test_unknown_finish_level_rejected(self):
        with pytest.raises(ValidationError):
            SingleFamilyScenario(number_of_units=3, finish_level="premium")

    def test_unit_mix_total(self):
        assert UnitMix(one_bedroom=50, two_bedroom=40, three_bedroom=10).total_percentage == 100


class TestProjectRecords:
    def test_budget_min_above_max_rejected(self):
        with pytest.raises(ValidationError):
            BudgetRange(min=2_000_000, max=1_000_000)

    def test_budget_equal_edges_allowed(self):
        assert BudgetRange(min=5, max=5).currency == "USD"

    def test_project_from_camel_case(self):
        p = Project.model_validate({
            "name": "Riverside",
            "location": {"city": "Kisumu", "country": "Kenya"},
            "landSize": 2.5,
            "landSizeUnit": "acres",
            "budgetRange": {"min": 1e6, "max": 2e6, "currency": "KES"},
            "targetIncomeGroup": "lower-middle",
        })
        assert p.land_size_unit == "acres"
        assert p.budget_range.currency == "KES"


class TestHomeRecords:
    def test_enabled_features(self):
        features = HomeFeatures(solar_panels=True, garage=True)
        assert features.enabled() == ["solar_panels", "garage", "garden"]

    def test_budget_must_be_positive(self):
        with pytest.raises(ValidationError):
            HomeBuilderConfig(budget=0)

    def test_unknown_style_rejected(self):
        with pytest.raises(ValidationError):
            HomeBuilderConfig(style="brutalist")
