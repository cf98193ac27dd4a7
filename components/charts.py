"""Plotly chart builders for the Fire Safety Inspector Toolkit."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List, Tuple

from models.building import Floor
from models.calculators import EgressAssessment, FireLoadResult
from models.requirement import FireSafetyRequirement


def floor_breakdown_bar(floors: List[Floor], title: str = "Area and Occupant Load by Floor") -> go.Figure:
    """Grouped bar of floor area with occupant load on a secondary axis."""
    df = pd.DataFrame([
        {"floor": f"Floor {f.floor_id}", "area": f.area, "load": f.occupant_load} for f in floors
    ])
    fig = go.Figure()
    fig.add_trace(go.Bar(x=df["floor"], y=df["area"], name="Area (m2)", marker_color="#4A90D9"))
    fig.add_trace(go.Scatter(
        x=df["floor"], y=df["load"], name="Occupant Load", yaxis="y2",
        mode="lines+markers", marker_color="#E8734A",
    ))
    fig.update_layout(
        title=title,
        height=380,
        yaxis=dict(title="Area (m2)"),
        yaxis2=dict(title="Occupant Load", overlaying="y", side="right"),
        legend=dict(orientation="h", y=-0.2),
    )
    return fig


def requirement_category_bar(
    groups: List[Tuple[str, List[FireSafetyRequirement]]],
    title: str = "Required Measures by Category",
) -> go.Figure:
    df = pd.DataFrame([{"category": name, "count": len(reqs)} for name, reqs in groups])
    fig = px.bar(
        df, x="count", y="category", orientation="h",
        labels={"count": "Requirements", "category": ""},
        title=title,
        color_discrete_sequence=["#E8734A"],
    )
    fig.update_layout(height=max(250, len(df) * 50), yaxis=dict(autorange="reversed"))
    return fig


def fire_load_donut(result: FireLoadResult, title: str = "Fire Load Contribution") -> go.Figure:
    """Donut of each item's share of the total energy content."""
    items = [i for i in result.items if i.total_energy > 0]
    fig = go.Figure(data=[go.Pie(
        labels=[i.name for i in items],
        values=[i.total_energy for i in items],
        hole=0.6,
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        annotations=[dict(text=f"{result.density:,.0f}<br>MJ/m2", x=0.5, y=0.5, font_size=14, showarrow=False)],
    )
    return fig


def egress_capacity_bar(assessment: EgressAssessment, title: str = "Egress Capacity vs Occupant Load") -> go.Figure:
    """Per-component capacity with the occupant load as a reference line."""
    df = pd.DataFrame([
        {"component": c.location or c.component_type, "capacity": c.capacity} for c in assessment.components
    ] + [{"component": "Total", "capacity": assessment.total_capacity}])
    fig = px.bar(
        df, x="component", y="capacity",
        labels={"capacity": "Persons", "component": ""},
        title=title,
        color_discrete_sequence=["#4A90D9"],
    )
    fig.add_hline(
        y=assessment.occupant_load, line_dash="dash", line_color="#cc0000",
        annotation_text=f"Occupant load {assessment.occupant_load:,}",
    )
    fig.update_layout(height=350)
    return fig
