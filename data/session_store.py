"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import List
from models.building import BuildingData, BuildingFeature, Floor
from models.occupancy import OccupancyType
from config.defaults import DEFAULT_OCCUPANCY_ID
from data.building_features import BUILDING_FEATURES, apply_selection
from data.occupancy_types import get_occupancy_type
from engine.calculations import calculate_building_data, recalculate_floors


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "occupancy_id": DEFAULT_OCCUPANCY_ID,
        "floors": [],
        "selected_features": [],
        "bookmarks": [],
        "hazmat_entries": [],
        "is_admin": False,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_occupancy_id() -> str:
    return st.session_state.get("occupancy_id", DEFAULT_OCCUPANCY_ID)


def get_occupancy_type_obj() -> OccupancyType:
    return get_occupancy_type(get_occupancy_id())


def get_floors() -> List[Floor]:
    return st.session_state.get("floors", [])


def get_selected_feature_ids() -> List[str]:
    return st.session_state.get("selected_features", [])


def get_features() -> List[BuildingFeature]:
    return apply_selection(BUILDING_FEATURES, get_selected_feature_ids())


def get_building() -> BuildingData:
    return calculate_building_data(get_occupancy_type_obj(), get_floors(), get_features())


def get_bookmarks() -> List[str]:
    return st.session_state.get("bookmarks", [])


def get_hazmat_entries() -> List[dict]:
    return st.session_state.get("hazmat_entries", [])


def is_admin() -> bool:
    return st.session_state.get("is_admin", False)


# --- Setters ---

def set_occupancy_type(occupancy_id: str):
    """Switch occupancy and recompute every floor's occupant load."""
    occupancy_type = get_occupancy_type(occupancy_id)
    st.session_state["occupancy_id"] = occupancy_id
    st.session_state["floors"] = recalculate_floors(get_floors(), occupancy_type)


def set_floors(floors: List[Floor]):
    st.session_state["floors"] = floors


def set_selected_feature_ids(feature_ids: List[str]):
    st.session_state["selected_features"] = list(feature_ids)


def set_bookmarks(bookmarks: List[str]):
    st.session_state["bookmarks"] = bookmarks


def set_hazmat_entries(entries: List[dict]):
    st.session_state["hazmat_entries"] = entries


def add_hazmat_entry(material_id: str, quantity: float, unit: str):
    st.session_state["hazmat_entries"].append(
        {"material_id": material_id, "quantity": quantity, "unit": unit}
    )


def set_admin(value: bool):
    st.session_state["is_admin"] = value
