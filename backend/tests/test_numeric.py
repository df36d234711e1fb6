"""Tests for shared numeric helpers and display formatting."""

from __future__ import annotations

import pytest

from housing_planner.models.schemas import AssumptionOverrides
from housing_planner.planning_engine.formatting import (
    format_area,
    format_currency,
    format_number,
)
from housing_planner.planning_engine.numeric import (
    classify,
    land_size_to_sqm,
    resolve_assumption,
    round_half_up,
)


class TestRoundHalfUp:
    @pytest.mark.parametrize("value,expected", [
        (76.5, 77),
        (2.5, 3),
        (0.5, 1),
        (2.4999, 2),
        (0, 0),
        (10_200.0, 10_200),
    ])
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected


# ──────────────────────────────────────────────────────────────────
# THRESHOLD LADDERS
# ──────────────────────────────────────────────────────────────────

LADDER = [(50, "low"), (150, "medium"), (300, "high")]


class TestClassify:
    def test_below_first_bound(self):
        assert classify(10, LADDER, "very-high") == "low"

    def test_strict_bound_moves_up(self):
        assert classify(50, LADDER, "very-high") == "medium"

    def test_inclusive_bound_stays(self):
        assert classify(50, LADDER, "very-high", inclusive=True) == "low"

    def test_top_label(self):
        assert classify(300, LADDER, "very-high") == "very-high"
        assert classify(1e9, LADDER, "very-high") == "very-high"

    def test_first_match_wins(self):
        # Non-monotonic bounds are not corrected
        assert classify(60, [(100, "a"), (50, "b")], "c") == "a"

    def test_empty_ladder(self):
        assert classify(5, [], "only") == "only"


# ──────────────────────────────────────────────────────────────────
# ASSUMPTION RESOLUTION
# ──────────────────────────────────────────────────────────────────

class TestResolveAssumption:
    def test_default_when_no_layers(self):
        assert resolve_assumption("one_bedroom_persons", None, None, default=1.5) == 1.5

    def test_first_defined_layer_wins(self):
        scenario = AssumptionOverrides(one_bedroom_persons=2)
        project = AssumptionOverrides(one_bedroom_persons=1)
        assert resolve_assumption("one_bedroom_persons", scenario, project, default=1.5) == 2

    def test_skips_unset_field(self):
        scenario = AssumptionOverrides(two_bedroom_persons=3.5)
        project = AssumptionOverrides(one_bedroom_persons=1)
        assert resolve_assumption("one_bedroom_persons", scenario, project, default=1.5) == 1

    def test_zero_is_a_value(self):
        scenario = AssumptionOverrides(one_bedroom_persons=0)
        assert resolve_assumption("one_bedroom_persons", scenario, default=1.5) == 0


class TestLandSize:
    def test_sqm_unchanged(self):
        assert land_size_to_sqm(5000, "sqm") == 5000

    def test_acres(self):
        assert land_size_to_sqm(2, "acres") == pytest.approx(8093.72)

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            land_size_to_sqm(1, "hectares")


# ──────────────────────────────────────────────────────────────────
# FORMATTING
# ──────────────────────────────────────────────────────────────────

class TestFormatting:
    def test_currency(self):
        assert format_currency(1_250_000) == "$1,250,000"
        assert format_currency(1_377_000.4, "usd") == "$1,377,000"

    def test_negative_currency(self):
        assert format_currency(-500) == "-$500"

    def test_currency_symbol_table(self):
        assert format_currency(2500, "KES") == "KSh2,500"

    def test_unknown_currency_uses_code(self):
        assert format_currency(1000, "XOF") == "XOF 1,000"

    @pytest.mark.parametrize("num,expected", [
        (1_500_000, "1.5M"),
        (2_500, "2.5K"),
        (1_000, "1.0K"),
        (999, "999"),
        (0, "0"),
    ])
    def test_number(self, num, expected):
        assert format_number(num) == expected

    def test_area(self):
        assert format_area(1920) == "1,920 m²"
