"""Egress capacity check: clear width of each exit component against the occupant load."""

import math
from typing import Dict, List

from models.calculators import EgressAssessment, EgressComponent

COMPONENT_TYPES = ["door", "stairway", "ramp", "corridor"]

# Persons per mm of clear width beyond the minimum
CAPACITY_FACTORS: Dict[str, Dict[str, float]] = {
    "door": {"standard": 0.2, "elevated": 0.3},
    "stairway": {"standard": 0.375, "elevated": 0.5},
    "ramp": {"standard": 0.22, "elevated": 0.3},
    "corridor": {"standard": 0.2, "elevated": 0.3},
}

MINIMUM_WIDTHS_MM: Dict[str, int] = {
    "door": 810,
    "stairway": 1120,
    "ramp": 1120,
    "corridor": 1120,
}

EGRESS_CLASSES = [
    "assembly", "educational",
    "healthcare-hospitals", "healthcare-outpatient", "healthcare-nursing-homes",
    "institutional-restrained", "institutional-general",
    "mercantile", "business",
    "industrial-general", "industrial-special", "industrial-high-hazard",
    "storage-low-hazard", "storage-moderate-hazard", "storage-high-hazard",
    "residential-hotel", "residential-apartment", "residential-dormitories",
    "residential-single-family", "residential-two-family",
    "default",
]

ELEVATED_CLASSES = {
    "healthcare-hospitals", "healthcare-nursing-homes",
    "institutional-restrained", "institutional-general",
    "industrial-high-hazard", "storage-high-hazard",
}


def capacity_factor(component_type: str, egress_class: str) -> float:
    if component_type not in CAPACITY_FACTORS:
        raise ValueError(f"Unknown egress component type: {component_type}")
    tier = "elevated" if egress_class in ELEVATED_CLASSES else "standard"
    return CAPACITY_FACTORS[component_type][tier]


def calculate_component_capacity(component: EgressComponent, egress_class: str) -> int:
    """Persons served by one component; only width beyond the minimum counts."""
    factor = capacity_factor(component.component_type, egress_class)
    if component.width_mm <= 0:
        return 0
    effective_width = max(0, component.width_mm - MINIMUM_WIDTHS_MM[component.component_type])
    return math.floor(effective_width * factor)


def assess_egress(occupant_load: int, egress_class: str,
                  components: List[EgressComponent]) -> EgressAssessment:
    """Total egress capacity and shortfall against the occupant load."""
    assessed = [
        EgressComponent(c.component_type, c.width_mm, c.location, calculate_component_capacity(c, egress_class))
        for c in components
    ]
    total = sum(c.capacity for c in assessed)
    return EgressAssessment(
        occupant_load=occupant_load,
        egress_class=egress_class,
        components=assessed,
        total_capacity=total,
        deficiency=max(0, occupant_load - total),
    )
