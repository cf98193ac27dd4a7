"""Fire load density of a room from its combustible contents."""

from typing import Dict, List

from models.calculators import FireLoadItem, FireLoadResult
from config.defaults import FIRE_LOAD_LIGHT_MAX, FIRE_LOAD_ORDINARY_1_MAX, FIRE_LOAD_ORDINARY_2_MAX

FIRE_LOAD_UNITS = ["kg", "pcs", "m2", "m3"]

# calorific_value in MJ/kg; weight in kg per m3, per piece or per m2 depending on the material
FIRE_LOAD_MATERIALS: List[Dict] = [
    {"name": "Wood (general)", "calorific_value": 16.7, "weight": 700},
    {"name": "Paper", "calorific_value": 17.5, "weight": 1.0},
    {"name": "Cardboard", "calorific_value": 16.9, "weight": 0.5},
    {"name": "Textiles (Cotton)", "calorific_value": 19.0, "weight": 1.0},
    {"name": "Textiles (Synthetic)", "calorific_value": 28.0, "weight": 1.0},
    {"name": "Plastics (PVC)", "calorific_value": 17.8, "weight": 1380},
    {"name": "Plastics (Polyethylene)", "calorific_value": 46.5, "weight": 950},
    {"name": "Plastics (Polystyrene)", "calorific_value": 40.0, "weight": 1050},
    {"name": "Rubber", "calorific_value": 32.0, "weight": 1200},
    {"name": "Leather", "calorific_value": 19.0, "weight": 860},
    {"name": "Alcohol (Ethanol)", "calorific_value": 29.7, "weight": 789},
    {"name": "Gasoline", "calorific_value": 46.0, "weight": 750},
    {"name": "Diesel", "calorific_value": 45.0, "weight": 850},
    {"name": "Kerosene", "calorific_value": 43.0, "weight": 820},
    {"name": "Furniture (Wood, average)", "calorific_value": 18.0, "weight": 25},
    {"name": "Furniture (Upholstered)", "calorific_value": 22.0, "weight": 45},
    {"name": "Electronics (Small)", "calorific_value": 15.0, "weight": 5},
    {"name": "Electronics (Large)", "calorific_value": 15.0, "weight": 20},
    {"name": "Food (Dry goods)", "calorific_value": 17.0, "weight": 1.0},
    {"name": "Clothing", "calorific_value": 20.0, "weight": 0.5},
]


def get_fire_load_material(name: str) -> Dict:
    for material in FIRE_LOAD_MATERIALS:
        if material["name"] == name:
            return material
    raise ValueError(f"Unknown fire load material: {name}")


def make_fire_load_item(name: str, quantity: float, unit: str) -> FireLoadItem:
    material = get_fire_load_material(name)
    return FireLoadItem(name, quantity, unit, material["calorific_value"], material["weight"])


def item_weight(item: FireLoadItem) -> float:
    """Weight in kg; "kg" quantities are already weights."""
    if item.unit == "kg":
        return item.quantity
    return item.quantity * item.weight_per_unit


def classify_fire_load(density: float) -> str:
    if density < FIRE_LOAD_LIGHT_MAX:
        return "Light Hazard"
    if density < FIRE_LOAD_ORDINARY_1_MAX:
        return "Ordinary Hazard Group 1"
    if density < FIRE_LOAD_ORDINARY_2_MAX:
        return "Ordinary Hazard Group 2"
    return "High Hazard"


def calculate_fire_load(room_area: float, items: List[FireLoadItem]) -> FireLoadResult:
    """Total energy content, density per m2 and hazard class."""
    if room_area <= 0:
        return FireLoadResult(room_area, list(items), 0.0, 0.0, "")

    evaluated = []
    for item in items:
        if item.unit not in FIRE_LOAD_UNITS:
            raise ValueError(f"Unsupported fire load unit: {item.unit}")
        energy = item_weight(item) * item.calorific_value
        evaluated.append(FireLoadItem(
            item.name, item.quantity, item.unit, item.calorific_value, item.weight_per_unit, energy,
        ))

    total = sum(i.total_energy for i in evaluated)
    density = total / room_area
    return FireLoadResult(room_area, evaluated, total, density, classify_fire_load(density))
