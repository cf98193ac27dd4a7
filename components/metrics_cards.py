"""Metric cards for building figures, risk level and calculator verdicts."""

import streamlit as st
from typing import List, Tuple

from models.building import BuildingData
from models.calculators import EgressAssessment

RISK_LEVEL_ALERTS = {"high": "error", "moderate": "warning", "low": "info"}
RISK_LEVEL_NOTES = {
    "high": "Prioritize for inspection. Expect sprinklers, detection and a fire safety officer.",
    "moderate": "Routine inspection with attention to egress and detection coverage.",
    "low": "Basic protection: extinguishers, exits and signage.",
}


def render_metric_row(metrics: List[Tuple[str, str]]):
    """Render (label, value) pairs as one row of metric cards."""
    cols = st.columns(len(metrics))
    for col, (label, value) in zip(cols, metrics):
        with col:
            st.metric(label=label, value=value)


def render_building_metrics(building: BuildingData):
    render_metric_row([
        ("Stories", str(building.stories)),
        ("Est. Height", f"{building.building_height:g} m"),
        ("Total Area", f"{building.total_area:,.2f} m2"),
        ("Occupant Load", f"{building.total_occupant_load:,}"),
    ])


def _alert(message: str, level: str):
    if level == "error":
        st.error(message, icon="🔴")
    elif level == "warning":
        st.warning(message, icon="🟡")
    else:
        st.info(message, icon="🔵")


def render_risk_badge(risk_level: str):
    """Informational risk tier; it does not affect requirement selection."""
    note = RISK_LEVEL_NOTES.get(risk_level, "")
    _alert(f"Risk level: {risk_level.title()}. {note}", RISK_LEVEL_ALERTS.get(risk_level, "info"))


def render_egress_verdict(assessment: EgressAssessment):
    render_metric_row([
        ("Total Capacity", f"{assessment.total_capacity:,}"),
        ("Occupant Load", f"{assessment.occupant_load:,}"),
        ("Deficiency", f"{assessment.deficiency:,}"),
    ])
    if assessment.is_deficient:
        _alert(f"Insufficient egress capacity: {assessment.deficiency:,} persons are not served.", "error")
    else:
        _alert("Sufficient egress capacity.", "info")
