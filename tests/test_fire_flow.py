"""Tests for the required fire flow calculation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from engine.fire_flow import (
    CONSTRUCTION_TYPES,
    calculate_fire_flow,
    construction_coefficient,
    fire_flow_duration,
)


class TestCalculateFireFlow:
    def test_ordinary_construction_moderate_hazard(self):
        result = calculate_fire_flow(1000, "type-iii")
        # 1000 m2 = 10,764 ft2 -> 3,588 GPM -> rounded up to 3,750
        assert result.flow_gpm == 3750
        assert result.duration_hours == 4
        assert result.flow_lps == 237
        assert result.total_gallons == 900000
        assert result.total_liters == 3406500

    def test_minimum_flow(self):
        result = calculate_fire_flow(100, "type-i")
        assert result.flow_gpm == 500
        assert result.duration_hours == 2

    def test_sprinkler_reduction(self):
        result = calculate_fire_flow(1000, "type-iii", sprinklered=True)
        assert result.flow_gpm == 2000
        assert result.duration_hours == 2

    def test_exposures_increase_flow(self):
        result = calculate_fire_flow(1000, "type-iii", exposures=2)
        assert result.flow_gpm == 4250

    def test_light_hazard(self):
        result = calculate_fire_flow(1000, "type-iii", hazard="light")
        assert result.flow_gpm == 2750
        assert result.duration_hours == 3

    def test_wood_frame(self):
        assert calculate_fire_flow(1000, "type-v").flow_gpm == 5500

    def test_unknown_construction_falls_back_to_ordinary(self):
        assert calculate_fire_flow(1000, "type-x") == calculate_fire_flow(1000, "type-iii")

    def test_zero_area(self):
        result = calculate_fire_flow(0)
        assert result.flow_gpm == 0
        assert result.duration_hours == 0
        assert result.total_liters == 0

    def test_negative_exposures_raise(self):
        with pytest.raises(ValueError):
            calculate_fire_flow(1000, exposures=-1)

    def test_rule_config_override(self):
        result = calculate_fire_flow(100, "type-i", rule_config={"minimum_gpm": 1000})
        assert result.flow_gpm == 1000

    def test_flow_is_multiple_of_rounding(self):
        for area in (150, 720, 2300, 9000):
            assert calculate_fire_flow(area).flow_gpm % 250 == 0


class TestHelpers:
    def test_duration_bands(self):
        assert fire_flow_duration(2500) == 2
        assert fire_flow_duration(2750) == 3
        assert fire_flow_duration(3500) == 3
        assert fire_flow_duration(3750) == 4

    def test_coefficients(self):
        assert construction_coefficient("type-i") == 0.6
        assert construction_coefficient("type-v") == 1.5
        assert len(CONSTRUCTION_TYPES) == 5


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
