"""Document, specialized-requirement and NFPA guidance lookups for a building."""

from typing import List, Optional, Sequence

from models.building import BuildingData
from models.document import DocumentRequirement, SpecializedRequirement
from models.occupancy import OccupancyType
from models.requirement import FireSafetyRequirement
from data.document_requirements import (
    ALL_WITH_DETECTION, ALL_WITH_SPRINKLERS, DOCUMENT_REQUIREMENTS, OCCUPANCY_CATEGORIES,
)
from data.specialized_requirements import SPECIALIZED_REQUIREMENTS
from data.nfpa_guidance import SPRINKLER_GUIDANCE_BY_FLOORS


def _matches_occupancy(doc: DocumentRequirement, occupancy_id: str) -> bool:
    listed = doc.applicable_occupancies
    if "all" in listed or occupancy_id in listed:
        return True
    return any(occupancy_id.startswith(cat) and cat in listed for cat in OCCUPANCY_CATEGORIES)


def _matches_installed_systems(doc: DocumentRequirement,
                               requirements: Optional[Sequence[FireSafetyRequirement]]) -> bool:
    listed = doc.applicable_occupancies
    if ALL_WITH_SPRINKLERS not in listed and ALL_WITH_DETECTION not in listed:
        return False
    if requirements is None:
        return True
    ids = [r.requirement_id for r in requirements]
    if ALL_WITH_SPRINKLERS in listed and "automatic-sprinkler-system" in ids:
        return True
    if ALL_WITH_DETECTION in listed and any("detection" in i or "alarm" in i for i in ids):
        return True
    return False


def get_document_requirements(
    occupancy_type: OccupancyType,
    requirements: Optional[Sequence[FireSafetyRequirement]] = None,
    catalog: Sequence[DocumentRequirement] = DOCUMENT_REQUIREMENTS,
) -> List[DocumentRequirement]:
    """Documents to keep on file.

    When the building's required measures are given, sprinkler and detection
    certifications are only listed if those systems are required.
    """
    return [
        doc for doc in catalog
        if _matches_occupancy(doc, occupancy_type.occupancy_id)
        or _matches_installed_systems(doc, requirements)
    ]


def get_specialized_requirements(occupancy_type_id: str) -> List[SpecializedRequirement]:
    return [r for r in SPECIALIZED_REQUIREMENTS if r.occupancy_type_id == occupancy_type_id]


def has_specialized_requirements(occupancy_type_id: str) -> bool:
    return any(r.occupancy_type_id == occupancy_type_id for r in SPECIALIZED_REQUIREMENTS)


def get_sprinkler_guidance_for_stories(stories: int) -> List[dict]:
    """Sprinkler guidance bands covering the given story count."""
    return [
        band for band in SPRINKLER_GUIDANCE_BY_FLOORS
        if stories >= band["min_floors"]
        and (band["max_floors"] is None or stories <= band["max_floors"])
    ]


def is_sprinkler_guidance_relevant(building: BuildingData) -> bool:
    return (
        building.total_occupant_load > 500
        or building.stories >= 5
        or building.building_height > 15
        or building.total_area > 2000
    )
