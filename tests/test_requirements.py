"""Tests for requirement selection, exemptions, text rendering and explanations."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from config.defaults import STORY_HEIGHT_M
from models.occupancy import OccupancyType
from models.requirement import FireSafetyRequirement, RequirementParams, SpecificRequirements, Thresholds
from data.occupancy_types import get_occupancy_type
from data.building_features import default_features, apply_selection
from data.fire_code_requirements import (
    FIRE_SAFETY_REQUIREMENTS,
    get_requirement,
    required_exit_count,
    required_hydrant_count,
)
from engine.calculations import calculate_building_data, make_floor
from engine.exemptions import find_exemption
from engine.requirements import (
    OTHER_CATEGORY,
    build_requirement_params,
    categorize_requirement,
    determine_required_fire_safety_measures,
    evaluate_all,
    evaluate_requirement,
    group_requirements_by_category,
    render_specific_requirements,
    render_text_field,
)
from engine.explainer import explain_requirement, summarize_building


def make_building(occupancy_id="business", num_floors=1, length=20, width=20,
                  feature_ids=None, occupancy=None):
    occ = occupancy or get_occupancy_type(occupancy_id)
    floors = [make_floor(str(i), length, width, occ) for i in range(1, num_floors + 1)]
    features = apply_selection(default_features(), feature_ids or [])
    return calculate_building_data(occ, floors, features)


def required_ids(building):
    return [r.requirement_id for r in determine_required_fire_safety_measures(building)]


def make_params(occupant_load=100, floor_area=1000, stories=2, building_height=6):
    return RequirementParams(occupant_load, floor_area, stories, building_height)


class TestSelection:
    def test_small_business_single_floor(self):
        building = make_building("business", 1, 20, 20)
        ids = required_ids(building)

        assert building.total_occupant_load == 44
        assert "fire-extinguishers" in ids
        assert "fire-exit-doors" in ids
        assert "automatic-sprinkler-system" not in ids
        assert "fire-detection-alarm-system" not in ids   # load 44 < 50

    def test_small_business_sprinkler_is_exempt(self):
        building = make_building("business", 1, 20, 20)
        decision = evaluate_requirement(get_requirement("automatic-sprinkler-system"), building)
        assert decision.status == "exempt"
        assert not decision.is_required
        assert "Single-story business" in decision.reason

    def test_mercantile_five_floors_needs_sprinklers(self):
        building = make_building("mercantile", 5, 25, 25)
        ids = required_ids(building)

        assert building.total_occupant_load == 1120
        assert building.total_area == 3125
        assert building.building_height == 15
        assert "automatic-sprinkler-system" in ids
        assert "standpipe-system" in ids
        assert "fire-detection-alarm-system" in ids
        assert "fire-safety-officer" in ids
        assert "fire-pump" not in ids          # needs 8 stories
        assert "fire-hydrant" in ids

    def test_zero_floors(self):
        building = make_building("business", 0)
        ids = required_ids(building)
        assert "fire-extinguishers" in ids
        assert "fire-detection-alarm-system" not in ids
        assert "fire-exit-doors" not in ids

    def test_all_thresholds_must_be_met(self):
        # Large single floor: load and area pass, stories and height do not
        building = make_building("mercantile", 1, 100, 100)
        decision = evaluate_requirement(get_requirement("automatic-sprinkler-system"), building)
        assert decision.status == "below_threshold"
        assert len(decision.unmet_thresholds) == 2

    def test_threshold_boundary_is_inclusive(self):
        occ = OccupancyType("business", "Business", "", 10.0, "light")
        building = make_building(occupancy=occ, num_floors=1, length=10, width=50)  # load exactly 50
        ids = required_ids(building)
        assert building.total_occupant_load == 50
        assert "emergency-lighting" in ids
        assert "exit-signs" in ids

    def test_result_preserves_catalog_order(self):
        building = make_building("mercantile", 10, 40, 40)
        ids = required_ids(building)
        catalog_ids = [r.requirement_id for r in FIRE_SAFETY_REQUIREMENTS]
        assert ids == [i for i in catalog_ids if i in ids]

    def test_selection_is_pure(self):
        building = make_building("mercantile", 5, 25, 25)
        assert required_ids(building) == required_ids(building)
        assert building.total_occupant_load == 1120

    def test_occupancy_scoping(self):
        req = FireSafetyRequirement(
            "school-only", "School Only", "", ("educational",), "Test",
        )
        building = make_building("business")
        decision = evaluate_requirement(req, building)
        assert decision.status == "not_applicable"
        assert determine_required_fire_safety_measures(building, [req]) == []

    def test_evaluate_all_covers_catalog(self):
        decisions = evaluate_all(make_building("business"))
        assert len(decisions) == len(FIRE_SAFETY_REQUIREMENTS)

    @pytest.mark.parametrize("occupancy_id,num_floors,size", [
        ("business", 1, 20), ("mercantile", 5, 25), ("mercantile", 10, 40), ("business", 0, 20),
    ])
    def test_required_matches_required_decisions(self, occupancy_id, num_floors, size):
        building = make_building(occupancy_id, num_floors, size, size)
        expected = [d.requirement for d in evaluate_all(building) if d.is_required]
        assert determine_required_fire_safety_measures(building) == expected


class TestExemptions:
    def test_low_rise_dwelling(self):
        dwelling = OccupancyType("residential-single-family", "Single Family Dwelling", "", 18.6, "light")
        building = make_building(occupancy=dwelling, num_floors=2, length=15, width=10)
        assert find_exemption("automatic-sprinkler-system", building) is not None
        assert "automatic-sprinkler-system" not in required_ids(building)

    def test_crop_growing_agricultural_building(self):
        building = make_building("agricultural-facility", 6, 50, 50, feature_ids=["crop-growing-only"])
        decision = evaluate_requirement(get_requirement("automatic-sprinkler-system"), building)
        assert decision.status == "exempt"

    def test_agricultural_without_feature_not_exempt(self):
        building = make_building("agricultural-facility", 6, 50, 50)
        assert find_exemption("automatic-sprinkler-system", building) is None

    def test_open_parking_garage(self):
        garage = OccupancyType("storage-parking-garage", "Parking Garage", "", 18.6, "ordinary")
        building = make_building(occupancy=garage, num_floors=6, length=50, width=50,
                                 feature_ids=["natural-ventilation"])
        assert find_exemption("automatic-sprinkler-system", building) == "Naturally ventilated open parking garage"

    def test_small_telecom_facility(self):
        small = make_building("telecommunication-facility", 2, 20, 20)
        large = make_building("telecommunication-facility", 3, 20, 20)
        assert find_exemption("automatic-sprinkler-system", small) is not None
        assert find_exemption("automatic-sprinkler-system", large) is None

    def test_no_exemptions_for_other_requirements(self):
        building = make_building("business", 1, 20, 20)
        assert find_exemption("fire-extinguishers", building) is None


class TestCatalog:
    def test_unique_ids(self):
        ids = [r.requirement_id for r in FIRE_SAFETY_REQUIREMENTS]
        assert len(ids) == 24
        assert len(set(ids)) == len(ids)

    def test_unknown_requirement_raises(self):
        with pytest.raises(ValueError):
            get_requirement("moat")

    def test_exit_count_tiers(self):
        assert required_exit_count(50) == 1
        assert required_exit_count(51) == 2
        assert required_exit_count(501) == 3
        assert required_exit_count(1001) == 4

    def test_hydrant_count_tiers(self):
        assert required_hydrant_count(2500) == 1
        assert required_hydrant_count(6000) == 2
        assert required_hydrant_count(12000) == 3


class TestRenderText:
    def test_literal_callable_and_none(self):
        params = make_params()
        assert render_text_field("Fixed text", params) == "Fixed text"
        assert render_text_field(lambda p: f"load {p.occupant_load}", params) == "load 100"
        assert render_text_field(None, params) is None

    def test_extinguisher_quantity_from_area(self):
        building = make_building("mercantile", 5, 25, 25)
        rendered = render_specific_requirements(
            get_requirement("fire-extinguishers"), build_requirement_params(building)
        )
        assert rendered["quantity"] == "Minimum 12 fire extinguisher(s) required for the building"
        assert list(rendered) == ["quantity", "type", "specifications", "distribution",
                                  "installation", "maintenance"]
        assert "4-A:40-B:C" in rendered["specifications"]

    def test_sprinkler_pump_pressure(self):
        building = make_building("mercantile", 5, 25, 25)
        rendered = render_specific_requirements(
            get_requirement("automatic-sprinkler-system"), build_requirement_params(building)
        )
        assert "87 PSI" in rendered["specifications"]

    def test_exit_widths(self):
        params = make_params(occupant_load=1120)
        rendered = render_specific_requirements(get_requirement("fire-exit-doors"), params)
        assert rendered["quantity"] == "Minimum 4 exit(s) required"
        assert "3.70 meters" in rendered["specifications"]
        assert "5.60 meters" in rendered["specifications"]

    def test_exit_width_minimums(self):
        rendered = render_specific_requirements(get_requirement("fire-exit-doors"), make_params(occupant_load=20))
        assert "0.81 meters" in rendered["specifications"]
        assert "1.12 meters" in rendered["specifications"]

    def test_entry_without_text(self):
        req = FireSafetyRequirement("plain", "Plain", "", ("all",), "Test")
        assert render_specific_requirements(req, make_params()) == {}

    def test_only_defined_fields_rendered(self):
        req = FireSafetyRequirement(
            "partial", "Partial", "", ("all",), "Test",
            specific_requirements=SpecificRequirements(maintenance="Yearly", quantity="One"),
        )
        assert list(render_specific_requirements(req, make_params())) == ["quantity", "maintenance"]

    def test_rendering_is_repeatable(self):
        buildings = [
            make_building("business", 1, 20, 20),
            make_building("mercantile", 5, 25, 25),
            make_building("mercantile", 10, 40, 40),
            make_building("business", 0),
        ]
        for building in buildings:
            params = build_requirement_params(building)
            for req in FIRE_SAFETY_REQUIREMENTS:
                assert render_specific_requirements(req, params) == render_specific_requirements(req, params)


class TestGrouping:
    def test_keyword_categories(self):
        assert categorize_requirement("fire-detection-alarm-system") == "Fire Detection & Alarm"
        assert categorize_requirement("automatic-sprinkler-system") == "Fire Suppression"
        assert categorize_requirement("exit-signs") == "Egress & Emergency Lighting"
        assert categorize_requirement("fire-barrier") == "Structural Fire Protection"
        assert categorize_requirement("fire-drill") == "Emergency Planning"
        assert categorize_requirement("smoke-control-system") == OTHER_CATEGORY

    def test_group_drops_empty_categories(self):
        reqs = [get_requirement("fire-extinguishers"), get_requirement("fire-drill")]
        groups = group_requirements_by_category(reqs)
        assert [name for name, _ in groups] == ["Fire Suppression", "Emergency Planning"]

    def test_group_keeps_every_requirement(self):
        building = make_building("mercantile", 10, 40, 40)
        reqs = determine_required_fire_safety_measures(building)
        groups = group_requirements_by_category(reqs)
        assert sum(len(items) for _, items in groups) == len(reqs)


class TestExplainer:
    def test_summary_lists_each_floor(self):
        building = make_building("business", 2, 20, 20)
        lines = summarize_building(building)
        assert any(line.strip().startswith("Floor 1:") for line in lines)
        assert any(line.strip().startswith("Floor 2:") for line in lines)
        assert lines[-1] == "Occupant load: sum of floor loads = 88"

    def test_height_line_uses_story_height(self):
        building = make_building("business", 2, 20, 20)
        lines = summarize_building(building)
        assert lines[2] == f"Height: 2 stories x {STORY_HEIGHT_M:g} m = {building.building_height:g} m"
        assert building.building_height == 2 * STORY_HEIGHT_M

    def test_required_explanation(self):
        building = make_building("mercantile", 5, 25, 25)
        decision = evaluate_requirement(get_requirement("automatic-sprinkler-system"), building)
        steps = explain_requirement(decision, building)
        assert steps[0].startswith("Step 1")
        assert steps[-1] == "Result: required"
        assert all("NOT met" not in s for s in steps)

    def test_below_threshold_explanation(self):
        building = make_building("business", 1, 20, 20)
        decision = evaluate_requirement(get_requirement("fire-detection-alarm-system"), building)
        steps = explain_requirement(decision, building)
        assert any("NOT met" in s for s in steps)
        assert steps[-1] == "Result: not required (below threshold)"

    def test_exempt_explanation_stops_early(self):
        building = make_building("business", 1, 20, 20)
        decision = evaluate_requirement(get_requirement("automatic-sprinkler-system"), building)
        steps = explain_requirement(decision, building)
        assert steps[-1].startswith("Step 2 - Exemptions: exempt")

    def test_unconditional_requirement(self):
        building = make_building("business", 1, 20, 20)
        decision = evaluate_requirement(get_requirement("fire-extinguishers"), building)
        steps = explain_requirement(decision, building)
        assert "Step 3 - Thresholds: none, always required" in steps


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
