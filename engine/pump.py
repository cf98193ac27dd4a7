"""Fire pump sizing: pressure, flow rate and horsepower."""

import math
from typing import Optional

from models.calculators import PumpSizing
from config.defaults import (
    PSI_PER_METER, BASE_HEAD_PRESSURE_PSI,
    PUMP_EFFICIENCY, HP_CONVERSION_FACTOR, PUMP_SAFETY_FACTOR,
    PUMP_BASE_FLOW_GPM, PUMP_MID_FLOW_GPM, PUMP_HIGH_FLOW_GPM,
    PUMP_MID_HEIGHT_M, PUMP_HIGH_HEIGHT_M,
    PUMP_LARGE_LOAD_THRESHOLD, PUMP_LARGE_LOAD_EXTRA_GPM,
)


def calculate_pump_pressure(building_height: float, rule_config: Optional[dict] = None) -> int:
    """Required pump pressure in PSI: base head pressure plus elevation loss."""
    cfg = rule_config or {}
    base = cfg.get("base_head_pressure_psi", BASE_HEAD_PRESSURE_PSI)
    psi_per_m = cfg.get("psi_per_meter", PSI_PER_METER)
    return math.ceil(base + building_height * psi_per_m)


def calculate_pump_flow_rate(
    building_height: float,
    occupant_load: int,
    rule_config: Optional[dict] = None,
) -> int:
    """Required pump flow in GPM, stepped by height with an increment for large loads."""
    cfg = rule_config or {}
    mid_height = cfg.get("pump_mid_height_m", PUMP_MID_HEIGHT_M)
    high_height = cfg.get("pump_high_height_m", PUMP_HIGH_HEIGHT_M)

    flow = cfg.get("pump_base_flow_gpm", PUMP_BASE_FLOW_GPM)
    if building_height > high_height:
        flow = cfg.get("pump_high_flow_gpm", PUMP_HIGH_FLOW_GPM)
    elif building_height > mid_height:
        flow = cfg.get("pump_mid_flow_gpm", PUMP_MID_FLOW_GPM)

    if occupant_load > cfg.get("pump_large_load_threshold", PUMP_LARGE_LOAD_THRESHOLD):
        flow += cfg.get("pump_large_load_extra_gpm", PUMP_LARGE_LOAD_EXTRA_GPM)
    return flow


def calculate_pump_horsepower(flow_gpm: float, pressure_psi: float,
                              efficiency: float = PUMP_EFFICIENCY) -> float:
    if efficiency <= 0 or efficiency > 1:
        raise ValueError(f"Pump efficiency must be in (0, 1], got {efficiency}")
    return (flow_gpm * pressure_psi) / (HP_CONVERSION_FACTOR * efficiency)


def size_fire_pump(
    building_height: float,
    occupant_load: int,
    efficiency: float = PUMP_EFFICIENCY,
    rule_config: Optional[dict] = None,
) -> PumpSizing:
    """Full pump sizing with a recommended nameplate rating."""
    cfg = rule_config or {}
    pressure = calculate_pump_pressure(building_height, cfg)
    flow = calculate_pump_flow_rate(building_height, occupant_load, cfg)
    hp = calculate_pump_horsepower(flow, pressure, efficiency)
    safety = cfg.get("pump_safety_factor", PUMP_SAFETY_FACTOR)

    return PumpSizing(
        building_height=building_height,
        occupant_load=occupant_load,
        pressure_psi=pressure,
        flow_gpm=flow,
        efficiency=efficiency,
        horsepower=round(hp, 2),
        recommended_horsepower=math.ceil(hp * safety),
    )
