"""Tests for floor aggregation and the informational risk level."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.building import Floor
from models.occupancy import OccupancyType
from data.occupancy_types import OCCUPANCY_TYPES, get_occupancy_type, occupancy_ids
from data.building_features import BUILDING_FEATURES, default_features, apply_selection
from engine.calculations import (
    calculate_floor_area,
    calculate_occupant_load,
    calculate_building_data,
    make_floor,
    recalculate_floors,
    add_floor,
    remove_floor,
    determine_risk_level,
)


def make_occupancy(occupancy_id="business", factor=9.3, hazard="light"):
    return OccupancyType(occupancy_id, occupancy_id.title(), "", factor, hazard)


def make_floors(count, length, width, occupancy):
    return [make_floor(str(i), length, width, occupancy) for i in range(1, count + 1)]


class TestFloorArithmetic:
    def test_floor_area(self):
        assert calculate_floor_area(20, 20) == 400
        assert calculate_floor_area(12.5, 4) == 50

    def test_occupant_load_rounds_up(self):
        business = get_occupancy_type("business")
        assert calculate_occupant_load(400, business) == 44   # 43.01 -> 44

    def test_occupant_load_exact_division(self):
        occ = make_occupancy(factor=10.0)
        assert calculate_occupant_load(100, occ) == 10

    def test_occupant_load_just_over_factor(self):
        occ = make_occupancy(factor=9.3)
        assert calculate_occupant_load(9.3, occ) == 1
        assert calculate_occupant_load(9.3 + 1e-9, occ) == 2

    def test_make_floor(self):
        floor = make_floor("1", 25, 25, get_occupancy_type("mercantile"))
        assert floor.area == 625
        assert floor.occupant_load == 224    # 625 / 2.8 = 223.2


class TestCalculateBuildingData:
    def test_mercantile_five_floors(self):
        mercantile = get_occupancy_type("mercantile")
        building = calculate_building_data(mercantile, make_floors(5, 25, 25, mercantile))

        assert building.stories == 5
        assert building.building_height == 15
        assert building.total_area == 3125
        assert building.total_occupant_load == 1120

    def test_empty_floor_list(self):
        building = calculate_building_data(get_occupancy_type("business"), [])
        assert building.stories == 0
        assert building.building_height == 0
        assert building.total_area == 0
        assert building.total_occupant_load == 0

    def test_inputs_not_mutated(self):
        occ = get_occupancy_type("business")
        floors = make_floors(2, 20, 20, occ)
        snapshot = [Floor(f.floor_id, f.length, f.width, f.area, f.occupant_load) for f in floors]

        first = calculate_building_data(occ, floors)
        second = calculate_building_data(occ, floors)

        assert floors == snapshot
        assert first.total_area == second.total_area
        assert first.total_occupant_load == second.total_occupant_load

    def test_features_only_count_when_selected(self):
        occ = get_occupancy_type("business")
        features = apply_selection(default_features(), ["elevator"])
        building = calculate_building_data(occ, [], features)

        assert building.has_feature("elevator")
        assert not building.has_feature("atrium")
        assert not building.has_feature("no-such-feature")


class TestFloorManagement:
    def test_recalculate_keeps_area(self):
        business = get_occupancy_type("business")
        mercantile = get_occupancy_type("mercantile")
        floors = make_floors(2, 20, 20, business)

        updated = recalculate_floors(floors, mercantile)
        assert [f.area for f in updated] == [400, 400]
        assert [f.occupant_load for f in updated] == [143, 143]   # 400 / 2.8 = 142.9
        assert floors[0].occupant_load == 44

    def test_add_floor_next_ordinal(self):
        occ = get_occupancy_type("business")
        floors = add_floor([], 10, 10, occ)
        floors = add_floor(floors, 20, 10, occ)
        assert [f.floor_id for f in floors] == ["1", "2"]
        assert floors[1].area == 200

    def test_remove_floor_renumbers(self):
        occ = get_occupancy_type("business")
        floors = [make_floor("1", 10, 10, occ), make_floor("2", 20, 10, occ), make_floor("3", 30, 10, occ)]

        remaining = remove_floor(floors, "2")
        assert [f.floor_id for f in remaining] == ["1", "2"]
        assert [f.area for f in remaining] == [100, 300]
        assert len(floors) == 3

    def test_remove_unknown_floor_is_noop(self):
        occ = get_occupancy_type("business")
        floors = make_floors(2, 10, 10, occ)
        assert [f.floor_id for f in remove_floor(floors, "9")] == ["1", "2"]


class TestDetermineRiskLevel:
    def test_small_business_low(self):
        occ = get_occupancy_type("business")
        assert determine_risk_level(calculate_building_data(occ, make_floors(1, 20, 20, occ))) == "low"

    def test_high_hazard_occupancy(self):
        occ = get_occupancy_type("high-hazard")
        assert determine_risk_level(calculate_building_data(occ, make_floors(1, 5, 5, occ))) == "high"

    def test_healthcare_is_high(self):
        occ = get_occupancy_type("healthcare-hospitals")
        assert determine_risk_level(calculate_building_data(occ, make_floors(1, 5, 5, occ))) == "high"

    def test_large_assembly_is_high(self):
        occ = get_occupancy_type("assembly-standing")
        building = calculate_building_data(occ, make_floors(1, 20, 20, occ))   # 400 / 0.28 -> 1429
        assert determine_risk_level(building) == "high"

    def test_tall_building_is_high(self):
        occ = get_occupancy_type("business")
        assert determine_risk_level(calculate_building_data(occ, make_floors(8, 10, 10, occ))) == "high"

    def test_five_stories_is_moderate(self):
        occ = get_occupancy_type("business")
        assert determine_risk_level(calculate_building_data(occ, make_floors(5, 10, 10, occ))) == "moderate"


class TestReferenceData:
    def test_occupancy_catalog(self):
        ids = [o.occupancy_id for o in OCCUPANCY_TYPES]
        assert len(ids) == 43
        assert len(set(ids)) == len(ids)
        assert all(o.occupant_load_factor > 0 for o in OCCUPANCY_TYPES)

    def test_unknown_occupancy_raises(self):
        with pytest.raises(ValueError, match="Unknown occupancy type"):
            get_occupancy_type("spaceport")

    def test_occupancy_ids_in_catalog_order(self):
        ids = occupancy_ids()
        assert ids == [o.occupancy_id for o in OCCUPANCY_TYPES]
        assert len(ids) == 43
        assert all(get_occupancy_type(i).occupancy_id == i for i in ids)

    def test_default_features_unselected_copies(self):
        features = default_features()
        assert len(features) == len(BUILDING_FEATURES) == 12
        assert not any(f.selected for f in features)
        features[0].selected = True
        assert not BUILDING_FEATURES[0].selected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
