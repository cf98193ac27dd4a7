"""Dataframe display helpers for floors, requirement decisions and fee lines."""

import streamlit as st
import pandas as pd
from typing import Callable, Optional

STATUS_STYLES = {
    "required": "background-color: #ffcccc; color: #cc0000; font-weight: bold",
    "exempt": "background-color: #fff3cd; color: #856404; font-weight: bold",
    "below_threshold": "background-color: #d4edda; color: #155724",
    "not_applicable": "color: #6c757d",
}


def render_styled_table(df: pd.DataFrame, title: Optional[str] = None, height: Optional[int] = None):
    """Read-only table without the index column."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=True, hide_index=True)


def _render_highlighted(df: pd.DataFrame, column: str, style_cell: Callable[[object], str]):
    if column in df.columns:
        st.dataframe(df.style.map(style_cell, subset=[column]), use_container_width=True, hide_index=True)
    else:
        render_styled_table(df)


def render_status_table(df: pd.DataFrame, status_column: str = "Status"):
    """Requirement decisions, color-coded by status."""
    _render_highlighted(df, status_column, lambda val: STATUS_STYLES.get(val, ""))


def render_fee_table(df: pd.DataFrame, minimum_column: str = "Minimum Applied"):
    """Fee lines; rows billed at the category minimum are flagged."""
    _render_highlighted(df, minimum_column, lambda val: "color: #856404; font-weight: bold" if val else "")
