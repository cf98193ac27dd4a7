"""Tab 1: Building Assessment: floor manager, required measures, documents and NFPA guidance."""

import streamlit as st
import pandas as pd

from data.loader import load_file, parse_floors, floors_to_df, LENGTH_COLUMN, WIDTH_COLUMN
from data.validator import validate_floors, validate_dimensions
from data.sample_data import generate_floors_df
from data.session_store import get_building, get_floors, set_floors, get_occupancy_type_obj
from data.nfpa_guidance import ALTERNATE_POWER_SUPPLY, FIREMAN_SWITCH, SPRINKLER_STANDARD
from engine.calculations import add_floor, remove_floor, determine_risk_level
from engine.requirements import (
    evaluate_all, determine_required_fire_safety_measures, build_requirement_params,
    render_specific_requirements, group_requirements_by_category,
)
from engine.explainer import explain_requirement, summarize_building
from engine.documents import (
    get_document_requirements, get_specialized_requirements,
    get_sprinkler_guidance_for_stories, is_sprinkler_guidance_relevant,
)
from components.charts import floor_breakdown_bar, requirement_category_bar
from components.metrics_cards import render_building_metrics, render_risk_badge
from components.tables import render_styled_table, render_status_table


def _render_floor_manager():
    st.subheader("Floors")
    occupancy_type = get_occupancy_type_obj()

    col_len, col_wid, col_add = st.columns([2, 2, 1])
    with col_len:
        length = st.number_input("Length (m)", min_value=0.0, value=20.0, step=1.0, key="new_floor_length")
    with col_wid:
        width = st.number_input("Width (m)", min_value=0.0, value=20.0, step=1.0, key="new_floor_width")
    with col_add:
        st.write("")
        if st.button("Add Floor", type="primary", key="btn_add_floor"):
            check = validate_dimensions(length, width)
            if check.is_valid:
                set_floors(add_floor(get_floors(), length, width, occupancy_type))
                st.rerun()
            for e in check.errors:
                st.error(e)

    with st.expander("Import floor schedule (CSV / XLSX)", expanded=False):
        st.caption(f"Columns: **{LENGTH_COLUMN}**, **{WIDTH_COLUMN}**. One row per floor, bottom to top.")
        uploaded = st.file_uploader("Floor schedule", type=["csv", "xlsx"], key="upload_floors")
        col_upload, col_sample = st.columns(2)
        with col_upload:
            if st.button("Upload & Validate", key="btn_upload_floors") and uploaded is not None:
                try:
                    df = load_file(uploaded)
                    result = validate_floors(df)
                    for e in result.errors:
                        st.error(e)
                    for w in result.warnings:
                        st.warning(w)
                    if result.is_valid:
                        set_floors(parse_floors(df, occupancy_type))
                        st.success(f"Loaded {len(df)} floors")
                        st.rerun()
                except Exception as e:
                    st.error(f"Error loading file: {e}")
        with col_sample:
            if st.button("Load Sample Building", key="btn_sample_floors"):
                set_floors(parse_floors(generate_floors_df(), occupancy_type))
                st.rerun()

    floors = get_floors()
    if not floors:
        st.info("No floors yet. Add a floor or import a schedule.")
        return

    render_styled_table(floors_to_df(floors))
    col_remove, col_clear = st.columns([3, 1])
    with col_remove:
        to_remove = st.selectbox(
            "Remove floor", [f.floor_id for f in floors],
            format_func=lambda x: f"Floor {x}", key="remove_floor_id",
        )
        if st.button("Remove", key="btn_remove_floor"):
            set_floors(remove_floor(floors, to_remove))
            st.rerun()
    with col_clear:
        st.write("")
        if st.button("Clear All", key="btn_clear_floors"):
            set_floors([])
            st.rerun()


def _render_requirements(building):
    decisions = evaluate_all(building)
    required = determine_required_fire_safety_measures(building)
    params = build_requirement_params(building)
    groups = group_requirements_by_category(required)

    st.subheader(f"Required Fire Safety Measures ({len(required)})")
    if groups:
        st.plotly_chart(requirement_category_bar(groups), use_container_width=True)

    decision_map = {d.requirement.requirement_id: d for d in decisions}
    for category, reqs in groups:
        st.markdown(f"#### {category}")
        for req in reqs:
            with st.expander(f"{req.name}  ·  {req.reference}"):
                st.write(req.description)
                for field_name, text in render_specific_requirements(req, params).items():
                    st.markdown(f"**{field_name.title()}:** {text}")
                st.caption("Why this applies")
                for step in explain_requirement(decision_map[req.requirement_id], building):
                    st.caption(step)

    with st.expander("All catalog decisions", expanded=False):
        df = pd.DataFrame([
            {"Requirement": d.requirement.name, "Status": d.status, "Reason": d.reason} for d in decisions
        ])
        render_status_table(df)
        st.download_button(
            "Export Decisions (CSV)", df.to_csv(index=False),
            "requirement_decisions.csv", "text/csv", key="dl_decisions",
        )
    return required


def _render_documents(building, required):
    st.subheader("Required Documents")
    docs = get_document_requirements(building.occupancy_type, required)
    for doc in docs:
        with st.expander(f"{doc.name}  ·  {doc.reference}"):
            st.write(doc.description)
            if doc.details:
                st.caption(doc.details)

    specialized = get_specialized_requirements(building.occupancy_type.occupancy_id)
    if specialized:
        st.subheader("Specialized Requirements")
        for req in specialized:
            with st.expander(f"{req.name}  ·  {req.reference}"):
                st.write(req.description)
                st.caption(req.details)


def _render_nfpa_guidance(building):
    st.subheader("NFPA Guidance")
    if is_sprinkler_guidance_relevant(building):
        for band in get_sprinkler_guidance_for_stories(building.stories):
            st.markdown(f"**Sprinkler system, {band['floors']} floors ({SPRINKLER_STANDARD})**")
            st.caption(f"System: {band['system']}")
            st.caption(f"Pressure: {band['pressure']}")
            st.caption(f"Water supply: {band['water_supply']}")
            if band.get("additional"):
                st.caption(f"Additional: {band['additional']}")

    with st.expander("Alternate Power Supply", expanded=False):
        for entry in ALTERNATE_POWER_SUPPLY.values():
            st.markdown(f"**{entry['title']}** ({entry['standard']} §{entry['section']})")
            for line in entry["requirements"]:
                st.markdown(f"- {line}")

    if building.has_feature("elevator"):
        with st.expander("Elevator Fireman Switch", expanded=False):
            st.markdown(f"**{FIREMAN_SWITCH['standard']} §{FIREMAN_SWITCH['section']}**")
            for line in FIREMAN_SWITCH["requirements"]:
                st.markdown(f"- {line}")


def render(sidebar_state):
    """Render the Building Assessment tab."""
    st.header("Building Assessment")

    _render_floor_manager()
    building = get_building()
    if not building.floors:
        return

    st.divider()
    render_building_metrics(building)
    render_risk_badge(determine_risk_level(building))

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(floor_breakdown_bar(building.floors), use_container_width=True)
    with col2:
        st.caption("How these values were derived")
        for step in summarize_building(building):
            st.caption(step)

    st.divider()
    required = _render_requirements(building)
    st.divider()
    _render_documents(building, required)
    st.divider()
    _render_nfpa_guidance(building)
