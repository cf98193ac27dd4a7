from models.occupancy import OccupancyType
from models.building import Floor, BuildingData, BuildingFeature
from models.requirement import (
    FireSafetyRequirement, RequirementDecision, RequirementParams,
    SpecificRequirements, Thresholds,
)
from models.document import DocumentRequirement, SpecializedRequirement
from models.calculators import (
    EgressAssessment, EgressComponent, FireFlowResult, FireLoadItem, FireLoadResult,
    HazardousCategory, HazardousMaterial, HazmatFeeLine, PumpSizing,
)
from models.reference import Reference
from models.suggestion import SuggestionLog
