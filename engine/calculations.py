"""Floor aggregation: per-floor area and occupant load rolled up into BuildingData."""

import logging
import math
from typing import List, Optional

from models.building import BuildingData, BuildingFeature, Floor
from models.occupancy import OccupancyType
from config.defaults import (
    RISK_HIGH_STORIES, RISK_HIGH_AREA_M2, RISK_HIGH_ASSEMBLY_LOAD,
    RISK_MODERATE_STORIES, RISK_MODERATE_AREA_M2, RISK_MODERATE_LOAD,
)

logger = logging.getLogger(__name__)


def calculate_floor_area(length: float, width: float) -> float:
    return length * width


def calculate_occupant_load(area: float, occupancy_type: OccupancyType) -> int:
    """Occupant load for an area, always rounded up."""
    return math.ceil(area / occupancy_type.occupant_load_factor)


def make_floor(floor_id: str, length: float, width: float, occupancy_type: OccupancyType) -> Floor:
    area = calculate_floor_area(length, width)
    return Floor(
        floor_id=floor_id,
        length=length,
        width=width,
        area=area,
        occupant_load=calculate_occupant_load(area, occupancy_type),
    )


def calculate_building_data(
    occupancy_type: OccupancyType,
    floors: List[Floor],
    features: Optional[List[BuildingFeature]] = None,
) -> BuildingData:
    """Sum floor areas and occupant loads. Inputs are never mutated."""
    floors = list(floors)
    total_area = sum(f.area for f in floors)
    total_load = sum(f.occupant_load for f in floors)

    building = BuildingData(
        occupancy_type=occupancy_type,
        floors=floors,
        total_area=total_area,
        total_occupant_load=total_load,
        features=list(features or []),
    )
    logger.debug(
        "Building data for %s: %d floors, %.2f m2, load %d",
        occupancy_type.occupancy_id, building.stories, total_area, total_load,
    )
    return building


def recalculate_floors(floors: List[Floor], occupancy_type: OccupancyType) -> List[Floor]:
    """New floors with occupant loads recomputed for another occupancy; areas are kept."""
    return [
        Floor(f.floor_id, f.length, f.width, f.area, calculate_occupant_load(f.area, occupancy_type))
        for f in floors
    ]


def _renumber(floors: List[Floor]) -> List[Floor]:
    return [Floor(str(i), f.length, f.width, f.area, f.occupant_load) for i, f in enumerate(floors, 1)]


def add_floor(floors: List[Floor], length: float, width: float,
              occupancy_type: OccupancyType) -> List[Floor]:
    """Append a floor with the next ordinal id."""
    new_floor = make_floor(str(len(floors) + 1), length, width, occupancy_type)
    return _renumber(floors) + [new_floor]


def remove_floor(floors: List[Floor], floor_id: str) -> List[Floor]:
    """Drop a floor and renumber the rest 1..n."""
    return _renumber([f for f in floors if f.floor_id != floor_id])


def determine_risk_level(building: BuildingData) -> str:
    """Informational risk tier: "low", "moderate" or "high"."""
    occ = building.occupancy_type
    occ_id = occ.occupancy_id
    stories = building.stories
    area = building.total_area
    load = building.total_occupant_load

    if occ.hazard_classification == "high" or "high-hazard" in occ_id or "storage-high" in occ_id:
        return "high"
    if any(key in occ_id for key in ("healthcare", "hospital", "restrained")):
        return "high"
    if occ_id.startswith("assembly") and load > RISK_HIGH_ASSEMBLY_LOAD:
        return "high"
    if stories > RISK_HIGH_STORIES or area > RISK_HIGH_AREA_M2:
        return "high"
    if area > RISK_MODERATE_AREA_M2 or stories > RISK_MODERATE_STORIES or load > RISK_MODERATE_LOAD:
        return "moderate"
    return "low"
