"""Tests for egress component capacity."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.calculators import EgressComponent
from engine.egress import assess_egress, calculate_component_capacity, capacity_factor


def make_component(component_type="door", width_mm=1210, location=""):
    return EgressComponent(component_type, width_mm, location)


class TestComponentCapacity:
    def test_door_standard_class(self):
        assert calculate_component_capacity(make_component("door", 1210), "business") == 80

    def test_stairway_standard_class(self):
        assert calculate_component_capacity(make_component("stairway", 1520), "business") == 150

    def test_stairway_elevated_class(self):
        assert calculate_component_capacity(make_component("stairway", 1520), "healthcare-hospitals") == 200

    def test_door_elevated_class(self):
        assert calculate_component_capacity(make_component("door", 1210), "storage-high-hazard") == 120

    def test_width_below_minimum(self):
        assert calculate_component_capacity(make_component("door", 700), "business") == 0

    def test_zero_width(self):
        assert calculate_component_capacity(make_component("corridor", 0), "default") == 0

    def test_unknown_component_raises(self):
        with pytest.raises(ValueError):
            calculate_component_capacity(make_component("elevator", 1500), "business")

    def test_unknown_class_uses_standard_factor(self):
        assert capacity_factor("ramp", "spaceport") == capacity_factor("ramp", "default")


class TestAssessEgress:
    def test_deficient_building(self):
        components = [make_component("door", 1210, "Main"), make_component("stairway", 1520, "Stair A")]
        result = assess_egress(300, "business", components)

        assert [c.capacity for c in result.components] == [80, 150]
        assert result.total_capacity == 230
        assert result.deficiency == 70
        assert result.is_deficient

    def test_adequate_building(self):
        result = assess_egress(100, "business", [make_component("stairway", 1520)])
        assert result.deficiency == 0
        assert not result.is_deficient

    def test_inputs_not_mutated(self):
        components = [make_component("door", 1210)]
        assess_egress(50, "business", components)
        assert components[0].capacity == 0

    def test_no_components(self):
        result = assess_egress(40, "default", [])
        assert result.total_capacity == 0
        assert result.deficiency == 40


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
