"""Storage fee calculation for hazardous materials."""

from typing import Dict, List, Tuple

from models.calculators import HazardousCategory, HazardousMaterial, HazmatFeeLine
from data.hazardous_materials import HAZARDOUS_CATEGORIES, HAZARDOUS_MATERIALS, UNITS

_CATEGORIES: Dict[str, HazardousCategory] = {c.category_id: c for c in HAZARDOUS_CATEGORIES}
_MATERIALS: Dict[str, HazardousMaterial] = {m.material_id: m for m in HAZARDOUS_MATERIALS}


def get_hazardous_material(material_id: str) -> HazardousMaterial:
    try:
        return _MATERIALS[material_id]
    except KeyError:
        raise ValueError(f"Unknown hazardous material: {material_id}") from None


def get_hazardous_category(category_id: str) -> HazardousCategory:
    try:
        return _CATEGORIES[category_id]
    except KeyError:
        raise ValueError(f"Unknown hazardous material category: {category_id}") from None


def get_materials_by_category(category_id: str) -> List[HazardousMaterial]:
    return [m for m in HAZARDOUS_MATERIALS if m.category_id == category_id]


def _raw_fee(material: HazardousMaterial, category: HazardousCategory, quantity: float, unit: str) -> float:
    """Fee before the category minimum, converting units through density where possible."""
    if unit == "liter" and material.density and category.fee_per_kg > 0:
        return quantity * material.density * category.fee_per_kg
    if unit == "kg" and material.density and category.fee_per_liter > 0:
        return quantity / material.density * category.fee_per_liter
    if unit == "liter":
        return quantity * category.fee_per_liter
    return quantity * category.fee_per_kg


def calculate_hazardous_material_fee(material_id: str, quantity: float, unit: str) -> float:
    """Storage fee in PHP, never below the category minimum."""
    if unit not in UNITS:
        raise ValueError(f"Unsupported unit: {unit}. Use 'liter' or 'kg'.")
    if quantity < 0:
        raise ValueError(f"Quantity must not be negative, got {quantity}")
    material = get_hazardous_material(material_id)
    category = get_hazardous_category(material.category_id)
    return max(_raw_fee(material, category, quantity, unit), category.minimum_fee)


def calculate_total_fees(entries: List[dict]) -> Tuple[List[HazmatFeeLine], float]:
    """Fee lines for entries of {"material_id", "quantity", "unit"} and their total."""
    lines = []
    for entry in entries:
        material = get_hazardous_material(entry["material_id"])
        category = get_hazardous_category(material.category_id)
        quantity = float(entry["quantity"])
        unit = entry.get("unit", material.default_unit)
        fee = calculate_hazardous_material_fee(material.material_id, quantity, unit)
        lines.append(HazmatFeeLine(
            material_id=material.material_id,
            material_name=material.name,
            category_name=category.name,
            quantity=quantity,
            unit=unit,
            fee=round(fee, 2),
            minimum_applied=_raw_fee(material, category, quantity, unit) < category.minimum_fee,
        ))
    total = round(sum(line.fee for line in lines), 2)
    return lines, total
