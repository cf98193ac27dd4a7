from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class FireFlowResult:
    flow_gpm: int
    duration_hours: int
    flow_lps: int
    total_gallons: int
    total_liters: int


@dataclass
class EgressComponent:
    component_type: str      # "door", "stairway", "ramp", "corridor"
    width_mm: float
    location: str = ""
    capacity: int = 0


@dataclass
class EgressAssessment:
    occupant_load: int
    egress_class: str
    components: List[EgressComponent]
    total_capacity: int
    deficiency: int

    @property
    def is_deficient(self) -> bool:
        return self.deficiency > 0


@dataclass
class FireLoadItem:
    name: str
    quantity: float
    unit: str                # "kg", "pcs", "m2", "m3"
    calorific_value: float   # MJ/kg
    weight_per_unit: float   # kg per pc / m2 / m3
    total_energy: float = 0.0


@dataclass
class FireLoadResult:
    room_area: float
    items: List[FireLoadItem]
    total_fire_load: float   # MJ
    density: float           # MJ/m2
    classification: str


@dataclass
class PumpSizing:
    building_height: float
    occupant_load: int
    pressure_psi: int
    flow_gpm: int
    efficiency: float
    horsepower: float
    recommended_horsepower: int


@dataclass(frozen=True)
class HazardousCategory:
    category_id: str
    name: str
    description: str
    examples: tuple
    fee_per_liter: float     # PHP
    fee_per_kg: float        # PHP
    minimum_fee: float       # PHP


@dataclass(frozen=True)
class HazardousMaterial:
    material_id: str
    name: str
    category_id: str
    default_unit: str                # "liter" or "kg"
    density: Optional[float] = None  # kg per liter


@dataclass
class HazmatFeeLine:
    material_id: str
    material_name: str
    category_name: str
    quantity: float
    unit: str
    fee: float
    minimum_applied: bool = False
