"""Tab 3: Hazardous Materials Fees: storage fee schedule calculator."""

import streamlit as st
import pandas as pd

from data.hazardous_materials import HAZARDOUS_CATEGORIES, UNITS
from data.session_store import get_hazmat_entries, set_hazmat_entries, add_hazmat_entry
from engine.hazmat_fees import calculate_total_fees, get_materials_by_category, get_hazardous_category
from components.tables import render_fee_table, render_styled_table


def render(sidebar_state):
    """Render the Hazardous Materials Fees tab."""
    st.header("Hazardous Materials Fees")
    st.caption("Storage fees under RA 9514 IRR Rule 11.3. Amounts in Philippine Pesos.")

    with st.expander("Fee Schedule", expanded=False):
        render_styled_table(pd.DataFrame([
            {
                "Category": c.name,
                "Per Liter": c.fee_per_liter,
                "Per kg": c.fee_per_kg,
                "Minimum": c.minimum_fee,
                "Examples": ", ".join(c.examples),
            }
            for c in HAZARDOUS_CATEGORIES
        ]))

    col1, col2, col3, col4 = st.columns([2, 2, 1, 1])
    with col1:
        category_id = st.selectbox(
            "Category", [c.category_id for c in HAZARDOUS_CATEGORIES],
            format_func=lambda x: get_hazardous_category(x).name, key="hz_category",
        )
        st.caption(get_hazardous_category(category_id).description)
    materials = get_materials_by_category(category_id)
    with col2:
        material_id = st.selectbox(
            "Material", [m.material_id for m in materials],
            format_func=lambda x: next(m.name for m in materials if m.material_id == x), key="hz_material",
        )
    material = next(m for m in materials if m.material_id == material_id)
    with col3:
        quantity = st.number_input("Quantity", min_value=0.0, value=100.0, key="hz_quantity")
    with col4:
        unit = st.selectbox("Unit", UNITS, index=UNITS.index(material.default_unit), key="hz_unit")

    if st.button("Add Material", type="primary", key="btn_add_hazmat"):
        add_hazmat_entry(material_id, quantity, unit)

    entries = get_hazmat_entries()
    if not entries:
        st.info("No materials added yet.")
        return

    try:
        lines, total = calculate_total_fees(entries)
    except ValueError as e:
        st.error(str(e))
        return

    df = pd.DataFrame([
        {
            "Material": line.material_name,
            "Category": line.category_name,
            "Quantity": line.quantity,
            "Unit": line.unit,
            "Fee (PHP)": line.fee,
            "Minimum Applied": line.minimum_applied,
        }
        for line in lines
    ])
    render_fee_table(df)
    st.metric("Total Fees", f"PHP {total:,.2f}")

    col_dl, col_clear = st.columns(2)
    with col_dl:
        st.download_button("Export Fees (CSV)", df.to_csv(index=False), "hazmat_fees.csv", "text/csv")
    with col_clear:
        if st.button("Clear Materials", key="btn_clear_hazmat"):
            set_hazmat_entries([])
            st.rerun()
