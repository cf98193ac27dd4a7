"""Generates human-readable explanations for requirement decisions."""

from typing import List

from config.defaults import STORY_HEIGHT_M
from models.building import BuildingData
from models.requirement import RequirementDecision
from engine.exemptions import EXEMPTIONS


def summarize_building(building: BuildingData) -> List[str]:
    """Headline derivation of the values every requirement is tested against."""
    occ = building.occupancy_type
    steps = [
        f"Occupancy: {occ.name} at {occ.occupant_load_factor} m2 per person",
        f"Stories: {building.stories} floor(s) entered",
        f"Height: {building.stories} stories x {STORY_HEIGHT_M:g} m = {building.building_height:g} m",
        f"Area: sum of floor areas = {building.total_area:,.2f} m2",
    ]
    for floor in building.floors:
        steps.append(
            f"  Floor {floor.floor_id}: {floor.length:g} m x {floor.width:g} m = {floor.area:,.2f} m2, "
            f"load ceil({floor.area:,.2f} / {occ.occupant_load_factor}) = {floor.occupant_load}"
        )
    steps.append(f"Occupant load: sum of floor loads = {building.total_occupant_load:,}")
    return steps


def explain_requirement(decision: RequirementDecision, building: BuildingData) -> List[str]:
    """Produce step-by-step explanation for one requirement decision."""
    req = decision.requirement
    occ_id = building.occupancy_type.occupancy_id
    steps = []

    if "all" in req.applicable_occupancies:
        steps.append("Step 1 - Occupancy: applies to all occupancies")
    elif occ_id in req.applicable_occupancies:
        steps.append(f"Step 1 - Occupancy: '{occ_id}' is listed")
    else:
        steps.append(f"Step 1 - Occupancy: '{occ_id}' is not listed => not applicable")
        return steps

    if req.requirement_id not in EXEMPTIONS:
        steps.append("Step 2 - Exemptions: none defined for this requirement")
    elif decision.status == "exempt":
        steps.append(f"Step 2 - Exemptions: exempt => {decision.reason}")
        return steps
    else:
        steps.append("Step 2 - Exemptions: no exemption applies")

    t = req.thresholds
    checks = [
        ("Occupant load", t.occupant_load, building.total_occupant_load),
        ("Stories", t.stories, building.stories),
        ("Floor area", t.floor_area, building.total_area),
        ("Building height", t.building_height, building.building_height),
    ]
    present = [(label, minimum, actual) for label, minimum, actual in checks if minimum is not None]
    if not present:
        steps.append("Step 3 - Thresholds: none, always required")
    for label, minimum, actual in present:
        verdict = "met" if actual >= minimum else "NOT met"
        steps.append(f"Step 3 - {label}: {actual:,g} >= {minimum:,g} => {verdict}")

    if decision.is_required:
        steps.append("Result: required")
    else:
        steps.append("Result: not required (below threshold)")
    return steps
