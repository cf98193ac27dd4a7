"""Tests for hazardous material storage fees."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from data.hazardous_materials import HAZARDOUS_CATEGORIES, HAZARDOUS_MATERIALS
from engine.hazmat_fees import (
    calculate_hazardous_material_fee,
    calculate_total_fees,
    get_hazardous_category,
    get_hazardous_material,
    get_materials_by_category,
)


def make_entry(material_id="gasoline", quantity=100, unit="liter"):
    return {"material_id": material_id, "quantity": quantity, "unit": unit}


class TestMaterialFee:
    def test_liters_converted_through_density(self):
        # 100 L x 0.75 kg/L x 7.50 PHP/kg
        assert calculate_hazardous_material_fee("gasoline", 100, "liter") == pytest.approx(562.5)

    def test_kilograms_converted_through_density(self):
        # 100 kg / 0.75 kg/L x 5.75 PHP/L
        assert calculate_hazardous_material_fee("gasoline", 100, "kg") == pytest.approx(766.6667, rel=1e-4)

    def test_no_density_uses_unit_rate(self):
        assert calculate_hazardous_material_fee("lpg", 200, "kg") == pytest.approx(900)

    def test_minimum_fee(self):
        assert calculate_hazardous_material_fee("gasoline", 10, "liter") == 500
        assert calculate_hazardous_material_fee("lpg", 100, "liter") == 350
        assert calculate_hazardous_material_fee("dynamite", 10, "kg") == 1000

    def test_zero_liter_rate_falls_to_minimum(self):
        assert calculate_hazardous_material_fee("matches", 10, "liter") == 450

    def test_zero_quantity_charges_minimum(self):
        assert calculate_hazardous_material_fee("diesel", 0, "liter") == 400

    def test_unknown_material_raises(self):
        with pytest.raises(ValueError, match="Unknown hazardous material"):
            calculate_hazardous_material_fee("plutonium", 1, "kg")

    def test_unsupported_unit_raises(self):
        with pytest.raises(ValueError, match="Unsupported unit"):
            calculate_hazardous_material_fee("gasoline", 1, "gallon")

    def test_negative_quantity_raises(self):
        with pytest.raises(ValueError):
            calculate_hazardous_material_fee("gasoline", -5, "liter")


class TestTotalFees:
    def test_sum_of_lines(self):
        lines, total = calculate_total_fees([make_entry("gasoline", 100, "liter"), make_entry("lpg", 200, "kg")])
        assert [line.fee for line in lines] == [562.5, 900.0]
        assert total == 1462.5
        assert not any(line.minimum_applied for line in lines)

    def test_minimum_flagged(self):
        lines, total = calculate_total_fees([make_entry("gasoline", 10, "liter")])
        assert lines[0].minimum_applied
        assert lines[0].fee == 500
        assert total == 500

    def test_line_labels(self):
        lines, _ = calculate_total_fees([make_entry("sulfuric-acid", 50, "liter")])
        assert lines[0].material_name == "Sulfuric Acid"
        assert lines[0].category_name == "Corrosive Materials"

    def test_unit_defaults_to_material_default(self):
        lines, _ = calculate_total_fees([{"material_id": "lpg", "quantity": 200}])
        assert lines[0].unit == "kg"

    def test_empty(self):
        assert calculate_total_fees([]) == ([], 0)


class TestCatalog:
    def test_sizes(self):
        assert len(HAZARDOUS_CATEGORIES) == 8
        assert len(HAZARDOUS_MATERIALS) == 22

    def test_every_material_has_a_category(self):
        for material in HAZARDOUS_MATERIALS:
            assert get_hazardous_category(material.category_id)

    def test_materials_by_category(self):
        ids = [m.material_id for m in get_materials_by_category("explosives")]
        assert ids == ["dynamite", "fireworks", "ammunition"]

    def test_lookup(self):
        assert get_hazardous_material("lpg").density is None
        with pytest.raises(ValueError):
            get_hazardous_category("radioactive")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
