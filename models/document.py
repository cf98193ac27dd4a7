from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class DocumentRequirement:
    document_id: str
    name: str
    description: str
    applicable_occupancies: Tuple[str, ...]
    reference: str
    details: str = ""


@dataclass(frozen=True)
class SpecializedRequirement:
    requirement_id: str
    occupancy_type_id: str
    name: str
    description: str
    reference: str
    details: str
