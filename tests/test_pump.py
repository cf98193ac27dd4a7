"""Tests for fire pump sizing."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from engine.pump import (
    calculate_pump_flow_rate,
    calculate_pump_horsepower,
    calculate_pump_pressure,
    size_fire_pump,
)


class TestPumpPressure:
    def test_base_pressure_at_grade(self):
        assert calculate_pump_pressure(0) == 65

    def test_rounds_up(self):
        assert calculate_pump_pressure(15) == 87     # 86.3
        assert calculate_pump_pressure(30) == 108    # 107.6

    def test_rule_config_override(self):
        assert calculate_pump_pressure(0, {"base_head_pressure_psi": 100}) == 100


class TestPumpFlow:
    def test_height_steps(self):
        assert calculate_pump_flow_rate(30, 0) == 500
        assert calculate_pump_flow_rate(31, 0) == 750
        assert calculate_pump_flow_rate(60, 0) == 750
        assert calculate_pump_flow_rate(61, 0) == 1000

    def test_large_load_increment(self):
        assert calculate_pump_flow_rate(10, 1000) == 500
        assert calculate_pump_flow_rate(10, 1001) == 750
        assert calculate_pump_flow_rate(61, 1001) == 1250

    def test_rule_config_override(self):
        assert calculate_pump_flow_rate(10, 0, {"pump_base_flow_gpm": 600}) == 600


class TestHorsepower:
    def test_formula(self):
        assert calculate_pump_horsepower(500, 100, 0.65) == pytest.approx(50000 / (1714 * 0.65))

    @pytest.mark.parametrize("efficiency", [0, -0.5, 1.5])
    def test_invalid_efficiency(self, efficiency):
        with pytest.raises(ValueError):
            calculate_pump_horsepower(500, 100, efficiency)

    def test_full_efficiency_allowed(self):
        assert calculate_pump_horsepower(1714, 1, 1.0) == pytest.approx(1.0)


class TestSizeFirePump:
    def test_five_story_building(self):
        sizing = size_fire_pump(15, 100)
        assert sizing.pressure_psi == 87
        assert sizing.flow_gpm == 500
        assert sizing.horsepower == pytest.approx(39.04)   # 39.045 rounds down
        assert sizing.recommended_horsepower == 47

    def test_recommended_exceeds_calculated(self):
        sizing = size_fire_pump(90, 2000)
        assert sizing.flow_gpm == 1250
        assert sizing.recommended_horsepower >= sizing.horsepower


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
