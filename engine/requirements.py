"""Requirement selection: which catalog entries apply to a building, and their rendered text."""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from models.building import BuildingData
from models.requirement import (
    FireSafetyRequirement, RequirementDecision, RequirementParams, TextField, TEXT_FIELDS,
)
from data.fire_code_requirements import FIRE_SAFETY_REQUIREMENTS
from engine.exemptions import find_exemption

logger = logging.getLogger(__name__)

REQUIREMENT_CATEGORIES: List[Tuple[str, Tuple[str, ...]]] = [
    ("Fire Detection & Alarm", ("alarm", "detection")),
    ("Fire Suppression", ("sprinkler", "extinguisher", "standpipe", "pump", "hydrant")),
    ("Egress & Emergency Lighting", ("exit", "egress", "lighting")),
    ("Structural Fire Protection", ("resistance", "barrier", "construction")),
    ("Emergency Planning", ("plan", "drill", "officer")),
]
OTHER_CATEGORY = "Other Requirements"


def _applies_to_occupancy(requirement: FireSafetyRequirement, occupancy_id: str) -> bool:
    occupancies = requirement.applicable_occupancies
    return "all" in occupancies or occupancy_id in occupancies


def _unmet_thresholds(requirement: FireSafetyRequirement, building: BuildingData) -> List[str]:
    """Describe every present threshold the building falls short of."""
    t = requirement.thresholds
    checks = [
        ("occupant load", t.occupant_load, building.total_occupant_load),
        ("stories", t.stories, building.stories),
        ("floor area", t.floor_area, building.total_area),
        ("building height", t.building_height, building.building_height),
    ]
    return [
        f"{label} {actual:g} < {minimum:g}"
        for label, minimum, actual in checks
        if minimum is not None and actual < minimum
    ]


def evaluate_requirement(requirement: FireSafetyRequirement, building: BuildingData) -> RequirementDecision:
    """Decide one catalog entry: occupancy, then exemptions, then thresholds."""
    occ_id = building.occupancy_type.occupancy_id
    if not _applies_to_occupancy(requirement, occ_id):
        return RequirementDecision(requirement, "not_applicable", f"Does not apply to occupancy '{occ_id}'")

    exemption = find_exemption(requirement.requirement_id, building)
    if exemption:
        return RequirementDecision(requirement, "exempt", exemption)

    unmet = _unmet_thresholds(requirement, building)
    if unmet:
        return RequirementDecision(requirement, "below_threshold", "; ".join(unmet), unmet_thresholds=unmet)

    return RequirementDecision(requirement, "required", "All applicable thresholds met")


def evaluate_all(
    building: BuildingData,
    catalog: Sequence[FireSafetyRequirement] = FIRE_SAFETY_REQUIREMENTS,
) -> List[RequirementDecision]:
    return [evaluate_requirement(req, building) for req in catalog]


def determine_required_fire_safety_measures(
    building: BuildingData,
    catalog: Sequence[FireSafetyRequirement] = FIRE_SAFETY_REQUIREMENTS,
) -> List[FireSafetyRequirement]:
    """Catalog entries required for the building, in catalog order."""
    required = [d.requirement for d in evaluate_all(building, catalog) if d.is_required]
    logger.debug(
        "Selected %d of %d requirements for %s",
        len(required), len(catalog), building.occupancy_type.occupancy_id,
    )
    return required


def build_requirement_params(building: BuildingData) -> RequirementParams:
    return RequirementParams(
        occupant_load=building.total_occupant_load,
        floor_area=building.total_area,
        stories=building.stories,
        building_height=building.building_height,
        floors=tuple(building.floors),
        occupancy_type=building.occupancy_type,
    )


def render_text_field(text_field: Optional[TextField], params: RequirementParams) -> Optional[str]:
    if text_field is None:
        return None
    if callable(text_field):
        return text_field(params)
    return text_field


def render_specific_requirements(requirement: FireSafetyRequirement,
                                 params: RequirementParams) -> Dict[str, str]:
    """Rendered text for the fields the entry defines, in field order."""
    specific = requirement.specific_requirements
    if specific is None:
        return {}
    rendered = {}
    for name in TEXT_FIELDS:
        text = render_text_field(getattr(specific, name), params)
        if text is not None:
            rendered[name] = text
    return rendered


def categorize_requirement(requirement_id: str) -> str:
    for category, keywords in REQUIREMENT_CATEGORIES:
        if any(k in requirement_id for k in keywords):
            return category
    return OTHER_CATEGORY


def group_requirements_by_category(
    requirements: Sequence[FireSafetyRequirement],
) -> List[Tuple[str, List[FireSafetyRequirement]]]:
    """Group into display categories; empty groups are dropped."""
    groups: Dict[str, List[FireSafetyRequirement]] = {
        name: [] for name in [c for c, _ in REQUIREMENT_CATEGORIES] + [OTHER_CATEGORY]
    }
    for req in requirements:
        groups[categorize_requirement(req.requirement_id)].append(req)
    return [(name, reqs) for name, reqs in groups.items() if reqs]
