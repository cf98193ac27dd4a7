"""Selectable building features."""

import copy
from typing import List

from models.building import BuildingFeature


BUILDING_FEATURES: List[BuildingFeature] = [
    BuildingFeature("elevator", "Elevator", "Building has one or more elevators for vertical transportation"),
    BuildingFeature("escalator", "Escalator", "Building has one or more escalators for vertical transportation"),
    BuildingFeature("basement", "Basement", "Building has one or more below-grade levels"),
    BuildingFeature("atrium", "Atrium", "Building has an atrium or multi-story open space"),
    BuildingFeature("kitchen", "Commercial Kitchen", "Building contains a commercial kitchen or food preparation area"),
    BuildingFeature("generator", "Emergency Generator", "Building has an emergency generator or backup power system"),
    BuildingFeature("data-center", "Data Center / Server Room", "Building contains a data center or server room"),
    BuildingFeature("hazardous-materials", "Hazardous Materials Storage",
                    "Building stores hazardous materials or chemicals"),
    BuildingFeature("parking-garage", "Parking Garage", "Building includes an enclosed parking garage"),
    BuildingFeature("high-piled-storage", "High-Piled Storage",
                    "Building contains high-piled storage (storage over 12 feet in height)"),
    BuildingFeature("natural-ventilation", "Natural Ventilation",
                    "Parking or storage areas are open-sided and naturally ventilated"),
    BuildingFeature("crop-growing-only", "Crop Growing Only",
                    "Agricultural building used only for growing crops, with no processing or storage"),
]


def default_features() -> List[BuildingFeature]:
    """Fresh, unselected copies of every feature."""
    features = copy.deepcopy(BUILDING_FEATURES)
    for f in features:
        f.selected = False
    return features


def apply_selection(features: List[BuildingFeature], selected_ids) -> List[BuildingFeature]:
    """Return copies of features with `selected` set from a collection of ids."""
    selected_ids = set(selected_ids)
    return [
        BuildingFeature(f.feature_id, f.name, f.description, f.feature_id in selected_ids)
        for f in features
    ]
