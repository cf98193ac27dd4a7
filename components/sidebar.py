"""Global sidebar: occupancy, building features, suggestion form and building summary."""

import logging
import streamlit as st
from dataclasses import dataclass
from data.session_store import (
    get_occupancy_id, set_occupancy_type, get_selected_feature_ids, set_selected_feature_ids, get_building,
)
from data.occupancy_types import get_occupancy_type, occupancy_ids
from data.building_features import BUILDING_FEATURES
from data.suggestion_store import append_suggestion, create_suggestion
from config.defaults import SUGGESTION_TYPES, SUGGESTION_TYPE_LABELS
from engine.calculations import determine_risk_level

logger = logging.getLogger(__name__)


@dataclass
class SidebarState:
    occupancy_id: str
    feature_ids: list


def _render_suggestion_form():
    with st.expander("Suggest an improvement"):
        with st.form("suggestion_form", clear_on_submit=True):
            suggestion_type = st.selectbox(
                "Type",
                options=SUGGESTION_TYPES,
                format_func=lambda t: SUGGESTION_TYPE_LABELS.get(t, t),
            )
            details = st.text_area("Details", placeholder="Describe the mistake or idea...")
            submitted = st.form_submit_button("Submit")
        if submitted:
            try:
                append_suggestion(create_suggestion(suggestion_type, details))
                st.success("Thank you! Your suggestion was recorded.")
            except ValueError as e:
                st.error(str(e))
            except OSError as e:
                logger.error("Failed to save suggestion: %s", e)
                st.error(f"Could not save suggestion: {e}")


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Fire Safety Inspector")
        st.caption("RA 9514 (Revised Fire Code of the Philippines) IRR 2019")
        st.divider()

        # Occupancy selector
        options = occupancy_ids()
        current_id = get_occupancy_id()
        selected_id = st.selectbox(
            "Occupancy Type",
            options=options,
            format_func=lambda x: get_occupancy_type(x).name,
            index=options.index(current_id) if current_id in options else 0,
            key="sidebar_occupancy",
        )
        if selected_id != current_id:
            set_occupancy_type(selected_id)

        occ = get_occupancy_type(selected_id)
        st.caption(occ.description)
        st.caption(f"Load factor: {occ.occupant_load_factor} m2/person")
        if occ.examples:
            st.caption(f"Examples: {occ.examples}")

        st.divider()

        # Building features
        st.subheader("Building Features")
        selected = []
        current_features = set(get_selected_feature_ids())
        for feature in BUILDING_FEATURES:
            if st.checkbox(feature.name, value=feature.feature_id in current_features,
                           help=feature.description, key=f"feature_{feature.feature_id}"):
                selected.append(feature.feature_id)
        if selected != get_selected_feature_ids():
            set_selected_feature_ids(selected)

        st.divider()

        # Building summary
        building = get_building()
        if building.floors:
            st.success(f"{building.stories} floor(s) entered")
            st.caption(f"Total area: {building.total_area:,.2f} m2")
            st.caption(f"Occupant load: {building.total_occupant_load:,}")
            st.caption(f"Estimated height: {building.building_height:g} m")
            st.caption(f"Risk level: {determine_risk_level(building).title()}")
        else:
            st.warning("No floors entered. Add floors in Building Assessment.")

        st.divider()
        _render_suggestion_form()

    return SidebarState(
        occupancy_id=selected_id,
        feature_ids=selected,
    )
