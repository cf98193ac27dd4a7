from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, Union

from models.building import Floor
from models.occupancy import OccupancyType


@dataclass(frozen=True)
class Thresholds:
    """Minimum values; a field left as None imposes no constraint."""
    occupant_load: Optional[int] = None
    stories: Optional[int] = None
    floor_area: Optional[float] = None
    building_height: Optional[float] = None


@dataclass(frozen=True)
class RequirementParams:
    occupant_load: int
    floor_area: float
    stories: int
    building_height: float
    floors: Tuple[Floor, ...] = ()
    occupancy_type: Optional[OccupancyType] = None


# Either literal text or a pure function of the building parameters
TextField = Union[str, Callable[[RequirementParams], str]]

TEXT_FIELDS = ["quantity", "type", "specifications", "distribution", "installation", "maintenance"]


@dataclass(frozen=True)
class SpecificRequirements:
    quantity: Optional[TextField] = None
    type: Optional[TextField] = None
    specifications: Optional[TextField] = None
    distribution: Optional[TextField] = None
    installation: Optional[TextField] = None
    maintenance: Optional[TextField] = None


@dataclass(frozen=True)
class FireSafetyRequirement:
    requirement_id: str
    name: str
    description: str
    applicable_occupancies: Tuple[str, ...]   # Occupancy ids, or ("all",)
    reference: str
    thresholds: Thresholds = field(default_factory=Thresholds)
    specific_requirements: Optional[SpecificRequirements] = None


@dataclass
class RequirementDecision:
    """Outcome of evaluating one catalog entry against a building."""
    requirement: FireSafetyRequirement
    status: str                  # "required", "exempt", "not_applicable", "below_threshold"
    reason: str = ""
    unmet_thresholds: List[str] = field(default_factory=list)

    @property
    def is_required(self) -> bool:
        return self.status == "required"
