"""Tests for regional cost assumption and country data tables."""

from __future__ import annotations

import logging

import pytest

from housing_planner.planning_engine.formatting import format_currency
from housing_planner.planning_engine.regional_assumptions import (
    COUNTRIES,
    PERSONS_PER_UNIT,
    get_available_countries,
    get_cost_assumptions,
    get_country_data,
)


class TestGetCostAssumptions:
    def test_kenya_by_name(self):
        a = get_cost_assumptions("Kenya")
        assert a.country == "Kenya"
        assert a.construction_costs.basic == 350
        assert a.construction_costs.standard == 500
        assert a.construction_costs.improved == 750

    def test_code_and_name_equivalent(self):
        assert get_cost_assumptions("ke") == get_cost_assumptions("KENYA")

    def test_occupancy(self):
        a = get_cost_assumptions("NG")
        assert a.persons_per_unit.one_bedroom == PERSONS_PER_UNIT["one_bedroom"]
        assert a.single_family_persons_per_unit == 4.5

    def test_default_thresholds(self):
        a = get_cost_assumptions("GH")
        assert (a.density_thresholds.low, a.density_thresholds.medium, a.density_thresholds.high) == (50, 150, 300)
        levels = a.infrastructure_warning_levels
        assert levels.water_demand_exceeds == 500
        assert levels.water_demand_warning == 300
        assert levels.population_exceeds == 2000
        assert levels.population_warning == 1500

    def test_unknown_country_falls_back(self, caplog):
        with caplog.at_level(logging.INFO):
            a = get_cost_assumptions("Atlantis")
        assert a.country == "Kenya"
        assert "Atlantis" in caplog.text

    def test_fresh_record_each_call(self):
        assert get_cost_assumptions("KE") is not get_cost_assumptions("KE")


class TestGetCountryData:
    @pytest.mark.parametrize("code", list(COUNTRIES))
    def test_every_country(self, code):
        data = get_country_data(code)
        assert data.code == code
        assert data.construction_costs.basic < data.construction_costs.standard < data.construction_costs.improved
        assert 0 < data.labor_cost_percentage < 100

    def test_south_africa(self):
        data = get_country_data("ZA")
        assert data.local_currency == "ZAR"
        assert data.labor_cost_percentage == 32
        assert data.roads_per_meter == 220

    @pytest.mark.parametrize("code", list(COUNTRIES))
    def test_amounts_labelled_usd(self, code):
        data = get_country_data(code)
        assert data.currency == "USD"
        assert format_currency(data.water_per_connection, data.currency).startswith("$")

    def test_unknown_code_falls_back(self):
        assert get_country_data("ZZ").code == "KE"


class TestAvailableCountries:
    def test_lists_all(self):
        countries = get_available_countries()
        assert len(countries) == len(COUNTRIES)
        assert {"code": "KE", "name": "Kenya", "region": "East Africa"} in countries
