"""Required fire flow (ISO/NFPA 1 style) from floor area and construction type."""

import math
from typing import Dict, List, Optional

from models.calculators import FireFlowResult
from config.defaults import (
    SQFT_PER_SQM, FIRE_FLOW_EXPOSURE_FACTOR, FIRE_FLOW_SPRINKLER_REDUCTION,
    FIRE_FLOW_ROUNDING_GPM, FIRE_FLOW_MINIMUM_GPM, FIRE_FLOW_HAZARD_FACTORS, GPM_TO_LPM,
)

CONSTRUCTION_TYPES: List[Dict] = [
    {"id": "type-i", "name": "Type I (Fire Resistive)", "coefficient": 0.6, "fire_resistance": "3-4 hours",
     "description": "Structural elements made of non-combustible materials with the highest fire resistance rating."},
    {"id": "type-ii", "name": "Type II (Non-Combustible)", "coefficient": 0.8, "fire_resistance": "1-2 hours",
     "description": "Structural elements made of non-combustible materials with moderate fire resistance rating."},
    {"id": "type-iii", "name": "Type III (Ordinary)", "coefficient": 1.0, "fire_resistance": "1 hour",
     "description": "Exterior walls made of non-combustible materials, interior structure may be combustible."},
    {"id": "type-iv", "name": "Type IV (Heavy Timber)", "coefficient": 0.9, "fire_resistance": "1 hour",
     "description": "Exterior walls made of non-combustible materials, interior structure of heavy timber."},
    {"id": "type-v", "name": "Type V (Wood Frame)", "coefficient": 1.5, "fire_resistance": "0-1 hour",
     "description": "Structural elements made of combustible materials with minimal fire resistance rating."},
]

_COEFFICIENTS = {c["id"]: c["coefficient"] for c in CONSTRUCTION_TYPES}


def construction_coefficient(construction_type_id: str) -> float:
    """Unknown construction types fall back to ordinary (1.0)."""
    return _COEFFICIENTS.get(construction_type_id, 1.0)


def fire_flow_duration(flow_gpm: int) -> int:
    if flow_gpm > 3500:
        return 4
    if flow_gpm > 2500:
        return 3
    return 2


def calculate_fire_flow(
    area_m2: float,
    construction_type_id: str = "type-iii",
    exposures: int = 0,
    hazard: str = "moderate",
    sprinklered: bool = False,
    rule_config: Optional[dict] = None,
) -> FireFlowResult:
    """Required fire flow, duration and total water demand."""
    if exposures < 0:
        raise ValueError(f"Exposure count must not be negative, got {exposures}")
    if area_m2 <= 0:
        return FireFlowResult(flow_gpm=0, duration_hours=0, flow_lps=0, total_gallons=0, total_liters=0)

    cfg = rule_config or {}
    hazard_factors = cfg.get("hazard_factors", FIRE_FLOW_HAZARD_FACTORS)
    rounding = cfg.get("rounding_gpm", FIRE_FLOW_ROUNDING_GPM)
    minimum = cfg.get("minimum_gpm", FIRE_FLOW_MINIMUM_GPM)

    area_ft2 = area_m2 * SQFT_PER_SQM
    flow = area_ft2 * construction_coefficient(construction_type_id) / 3
    flow *= hazard_factors.get(hazard, 1.0)
    flow *= 1 + exposures * cfg.get("exposure_factor", FIRE_FLOW_EXPOSURE_FACTOR)
    if sprinklered:
        flow *= cfg.get("sprinkler_reduction", FIRE_FLOW_SPRINKLER_REDUCTION)

    flow_gpm = max(minimum, math.ceil(flow / rounding) * rounding)
    duration = fire_flow_duration(flow_gpm)
    total_gallons = flow_gpm * duration * 60

    return FireFlowResult(
        flow_gpm=flow_gpm,
        duration_hours=duration,
        flow_lps=round(flow_gpm * GPM_TO_LPM / 60),
        total_gallons=total_gallons,
        total_liters=round(total_gallons * GPM_TO_LPM),
    )
