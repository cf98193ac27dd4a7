from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OccupancyType:
    occupancy_id: str
    name: str
    description: str
    occupant_load_factor: float                  # Square meters per person
    hazard_classification: Optional[str] = None  # "light", "ordinary", "high"
    examples: Optional[str] = None
