"""Tab 2: Calculators: fire flow, egress capacity, fire load density and fire pump sizing."""

import streamlit as st
import pandas as pd

from data.session_store import get_building
from engine.fire_flow import CONSTRUCTION_TYPES, calculate_fire_flow
from engine.egress import COMPONENT_TYPES, EGRESS_CLASSES, MINIMUM_WIDTHS_MM, assess_egress
from engine.fire_load import FIRE_LOAD_MATERIALS, FIRE_LOAD_UNITS, calculate_fire_load, make_fire_load_item
from engine.pump import size_fire_pump
from models.calculators import EgressComponent
from components.charts import egress_capacity_bar, fire_load_donut
from components.metrics_cards import render_metric_row, render_egress_verdict


def _render_fire_flow(building):
    st.subheader("Required Fire Flow")
    col1, col2 = st.columns(2)
    with col1:
        area = st.number_input("Building area (m2)", min_value=0.0,
                               value=float(building.total_area), key="ff_area")
        ctype = st.selectbox(
            "Construction type", [c["id"] for c in CONSTRUCTION_TYPES], index=2,
            format_func=lambda x: next(c["name"] for c in CONSTRUCTION_TYPES if c["id"] == x), key="ff_ctype",
        )
        st.caption(next(c["description"] for c in CONSTRUCTION_TYPES if c["id"] == ctype))
    with col2:
        exposures = st.number_input("Exposed sides (0-4)", min_value=0, max_value=4, value=0, key="ff_exposures")
        hazard = st.selectbox("Occupancy hazard", ["light", "moderate", "high"], index=1, key="ff_hazard")
        sprinklered = st.checkbox("Building is sprinklered", key="ff_sprinklered")

    try:
        result = calculate_fire_flow(area, ctype, int(exposures), hazard, sprinklered)
    except ValueError as e:
        st.error(str(e))
        return
    if result.flow_gpm == 0:
        st.info("Enter a building area to calculate fire flow.")
        return
    render_metric_row([
        ("Fire Flow", f"{result.flow_gpm:,} GPM"),
        ("Flow (L/s)", f"{result.flow_lps:,}"),
        ("Duration", f"{result.duration_hours} h"),
    ])
    st.caption(f"Total water required: {result.total_gallons:,} gallons ({result.total_liters:,} liters)")


def _render_egress(building):
    st.subheader("Egress Capacity")
    col1, col2 = st.columns(2)
    with col1:
        load = st.number_input("Occupant load", min_value=0,
                               value=int(building.total_occupant_load), key="eg_load")
    with col2:
        egress_class = st.selectbox("Occupancy class", EGRESS_CLASSES,
                                    index=EGRESS_CLASSES.index("default"), key="eg_class")

    st.caption("Exit components (widths in mm). Minimums: " +
               ", ".join(f"{k} {v} mm" for k, v in MINIMUM_WIDTHS_MM.items()))
    default_df = pd.DataFrame([{"Type": "door", "Width (mm)": 1200, "Location": "Main Exit"}])
    edited = st.data_editor(
        default_df,
        num_rows="dynamic",
        column_config={"Type": st.column_config.SelectboxColumn("Type", options=COMPONENT_TYPES)},
        key="eg_components",
    )
    try:
        components = [
            EgressComponent(str(r["Type"]), float(r["Width (mm)"] or 0), str(r["Location"] or ""))
            for _, r in edited.dropna(subset=["Type"]).iterrows()
        ]
        assessment = assess_egress(int(load), egress_class, components)
    except (ValueError, TypeError) as e:
        st.error(f"Invalid component: {e}")
        return

    render_egress_verdict(assessment)
    if assessment.components:
        st.plotly_chart(egress_capacity_bar(assessment), use_container_width=True)


def _render_fire_load():
    st.subheader("Fire Load Density")
    room_area = st.number_input("Room area (m2)", min_value=0.0, value=50.0, key="fl_area")
    names = [m["name"] for m in FIRE_LOAD_MATERIALS]
    default_df = pd.DataFrame([{"Material": "Furniture (Wood, average)", "Quantity": 10.0, "Unit": "pcs"}])
    edited = st.data_editor(
        default_df,
        num_rows="dynamic",
        column_config={
            "Material": st.column_config.SelectboxColumn("Material", options=names),
            "Unit": st.column_config.SelectboxColumn("Unit", options=FIRE_LOAD_UNITS),
        },
        key="fl_items",
    )
    try:
        items = [
            make_fire_load_item(str(r["Material"]), float(r["Quantity"] or 0), str(r["Unit"]))
            for _, r in edited.dropna(subset=["Material"]).iterrows()
        ]
        result = calculate_fire_load(room_area, items)
    except ValueError as e:
        st.error(str(e))
        return

    if not result.classification:
        st.info("Enter a room area to calculate fire load density.")
        return
    render_metric_row([
        ("Total Fire Load", f"{result.total_fire_load:,.0f} MJ"),
        ("Density", f"{result.density:,.1f} MJ/m2"),
        ("Classification", result.classification),
    ])
    if result.total_fire_load > 0:
        st.plotly_chart(fire_load_donut(result), use_container_width=True)


def _render_pump(building):
    st.subheader("Fire Pump Sizing")
    col1, col2, col3 = st.columns(3)
    with col1:
        height = st.number_input("Building height (m)", min_value=0.0,
                                 value=float(building.building_height), key="pump_height")
    with col2:
        load = st.number_input("Occupant load", min_value=0,
                               value=int(building.total_occupant_load), key="pump_load")
    with col3:
        efficiency = st.slider("Pump efficiency", min_value=0.3, max_value=1.0, value=0.65, step=0.05,
                               key="pump_efficiency")
    try:
        sizing = size_fire_pump(height, int(load), efficiency)
    except ValueError as e:
        st.error(str(e))
        return
    render_metric_row([
        ("Pressure", f"{sizing.pressure_psi} PSI"),
        ("Flow", f"{sizing.flow_gpm:,} GPM"),
        ("Calculated HP", f"{sizing.horsepower:,.2f}"),
        ("Recommended HP", f"{sizing.recommended_horsepower}"),
    ])
    st.caption("HP = (GPM x PSI) / (1714 x efficiency); recommended rating includes a 20% safety margin.")


def render(sidebar_state):
    """Render the Calculators tab."""
    st.header("Fire Safety Calculators")
    building = get_building()

    calculator = st.radio(
        "Calculator",
        ["Fire Flow", "Egress Capacity", "Fire Load", "Fire Pump"],
        horizontal=True,
        key="calculator_choice",
    )
    if calculator == "Fire Flow":
        _render_fire_flow(building)
    elif calculator == "Egress Capacity":
        _render_egress(building)
    elif calculator == "Fire Load":
        _render_fire_load()
    else:
        _render_pump(building)
