"""Exemption predicates keyed by requirement id.

Only requirements listed here can be waived; each predicate is paired with a
label used in explanations.
"""

from typing import Callable, Dict, List, Optional, Tuple

from models.building import BuildingData

Exemption = Tuple[str, Callable[[BuildingData], bool]]


def _small_single_story_business(b: BuildingData) -> bool:
    return (
        b.occupancy_type.occupancy_id == "business"
        and b.stories == 1
        and b.total_area < 2000
        and b.total_occupant_load < 500
    )


def _low_rise_dwelling(b: BuildingData) -> bool:
    return (
        b.occupancy_type.occupancy_id in ("residential-single-family", "residential-two-family")
        and b.stories <= 2
    )


def _open_parking_garage(b: BuildingData) -> bool:
    return b.occupancy_type.occupancy_id == "storage-parking-garage" and b.has_feature("natural-ventilation")


def _small_telecom_facility(b: BuildingData) -> bool:
    return (
        b.occupancy_type.occupancy_id == "telecommunication-facility"
        and b.stories < 3
        and b.total_area < 2000
    )


def _crop_growing_facility(b: BuildingData) -> bool:
    return b.occupancy_type.occupancy_id == "agricultural-facility" and b.has_feature("crop-growing-only")


EXEMPTIONS: Dict[str, List[Exemption]] = {
    "automatic-sprinkler-system": [
        ("Single-story business under 2,000 m2 with occupant load under 500", _small_single_story_business),
        ("One- or two-family dwelling of two stories or less", _low_rise_dwelling),
        ("Naturally ventilated open parking garage", _open_parking_garage),
        ("Telecommunication facility under 3 stories and 2,000 m2", _small_telecom_facility),
        ("Agricultural building used only for crop growing", _crop_growing_facility),
    ],
}


def find_exemption(requirement_id: str, building: BuildingData) -> Optional[str]:
    """Label of the first exemption that applies, or None."""
    for label, predicate in EXEMPTIONS.get(requirement_id, []):
        if predicate(building):
            return label
    return None
