"""Tests for document requirements, specialized requirements and NFPA guidance lookups."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from data.occupancy_types import get_occupancy_type
from data.fire_code_requirements import get_requirement
from data.nfpa_guidance import SPRINKLER_GUIDANCE_BY_FLOORS
from engine.calculations import calculate_building_data, make_floor
from engine.documents import (
    get_document_requirements,
    get_specialized_requirements,
    has_specialized_requirements,
    get_sprinkler_guidance_for_stories,
    is_sprinkler_guidance_relevant,
)


def doc_ids(occupancy_id, requirement_ids=None):
    requirements = None
    if requirement_ids is not None:
        requirements = [get_requirement(i) for i in requirement_ids]
    return [d.document_id for d in get_document_requirements(get_occupancy_type(occupancy_id), requirements)]


def make_building(occupancy_id="business", num_floors=1, length=20, width=20):
    occ = get_occupancy_type(occupancy_id)
    floors = [make_floor(str(i), length, width, occ) for i in range(1, num_floors + 1)]
    return calculate_building_data(occ, floors)


class TestDocumentRequirements:
    def test_business_without_requirement_context(self):
        ids = doc_ids("business")
        assert ids == [
            "fsic", "fire-safety-plan", "fire-drill-records", "maintenance-records",
            "electrical-inspection", "building-permit", "fire-insurance",
            "emergency-evacuation-plan", "sprinkler-certification", "fire-detection-certification",
        ]

    def test_certifications_follow_required_systems(self):
        ids = doc_ids("business", [])
        assert "sprinkler-certification" not in ids
        assert "fire-detection-certification" not in ids
        assert len(ids) == 8

    def test_sprinkler_certification_only(self):
        ids = doc_ids("business", ["automatic-sprinkler-system", "fire-extinguishers"])
        assert "sprinkler-certification" in ids
        assert "fire-detection-certification" not in ids

    def test_detection_certification_only(self):
        ids = doc_ids("business", ["fire-detection-alarm-system"])
        assert "fire-detection-certification" in ids
        assert "sprinkler-certification" not in ids

    def test_category_prefix_match(self):
        ids = doc_ids("business-data-centers", [])
        assert "fire-drill-records" in ids

    def test_assembly_category(self):
        ids = doc_ids("assembly-fixed-seats", [])
        assert "fire-drill-records" in ids
        assert "fire-safety-officer" in ids
        assert "hazmat-inventory" not in ids

    def test_exact_id_only_entries(self):
        ids = doc_ids("business", [])
        assert "fire-safety-officer" not in ids
        assert "fire-safety-clearance" not in ids

    def test_universal_documents_for_uncategorized_occupancy(self):
        ids = doc_ids("marina", [])
        assert ids == [
            "fsic", "fire-safety-plan", "maintenance-records", "electrical-inspection",
            "building-permit", "fire-insurance", "emergency-evacuation-plan",
        ]


class TestSpecializedRequirements:
    def test_solar_facility(self):
        reqs = get_specialized_requirements("solar-photovoltaic-facility")
        assert [r.requirement_id for r in reqs] == [
            "solar-pv-access", "solar-pv-marking", "solar-pv-rapid-shutdown",
        ]
        assert has_specialized_requirements("solar-photovoltaic-facility")

    def test_telecom_facility(self):
        assert len(get_specialized_requirements("telecommunication-facility")) == 2

    def test_plain_business_has_none(self):
        assert get_specialized_requirements("business") == []
        assert not has_specialized_requirements("business")


class TestSprinklerGuidance:
    def test_no_floors(self):
        assert get_sprinkler_guidance_for_stories(0) == []

    @pytest.mark.parametrize("stories,band", [
        (1, "1-2"), (2, "1-2"), (3, "3-6"), (6, "3-6"), (7, "7-20"), (20, "7-20"), (21, "21+"), (50, "21+"),
    ])
    def test_band_selection(self, stories, band):
        bands = get_sprinkler_guidance_for_stories(stories)
        assert [b["floors"] for b in bands] == [band]

    def test_bands_do_not_overlap(self):
        for stories in range(1, 60):
            assert len(get_sprinkler_guidance_for_stories(stories)) == 1
        assert len(SPRINKLER_GUIDANCE_BY_FLOORS) == 4

    def test_relevance(self):
        assert not is_sprinkler_guidance_relevant(make_building("business", 1, 20, 20))
        assert is_sprinkler_guidance_relevant(make_building("business", 5, 10, 10))
        assert is_sprinkler_guidance_relevant(make_building("business", 1, 50, 50))   # 2,500 m2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
