from dataclasses import dataclass, field
from typing import List

from config.defaults import STORY_HEIGHT_M
from models.occupancy import OccupancyType


@dataclass
class Floor:
    floor_id: str         # Ordinal "1".."n", reassigned when a floor is removed
    length: float         # meters
    width: float          # meters
    area: float           # square meters
    occupant_load: int


@dataclass
class BuildingFeature:
    feature_id: str
    name: str
    description: str
    selected: bool = False


@dataclass
class BuildingData:
    """Aggregated view of one building configuration."""
    occupancy_type: OccupancyType
    floors: List[Floor]
    total_area: float
    total_occupant_load: int
    features: List[BuildingFeature] = field(default_factory=list)

    @property
    def stories(self) -> int:
        return len(self.floors)

    @property
    def building_height(self) -> float:
        return self.stories * STORY_HEIGHT_M

    def has_feature(self, feature_id: str) -> bool:
        return any(f.feature_id == feature_id and f.selected for f in self.features)

