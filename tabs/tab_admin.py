"""Tab 5: Admin: password-gated suggestion log review."""

import logging
import streamlit as st
import pandas as pd

from config.defaults import ADMIN_PASSWORD, SUGGESTION_TYPE_LABELS
from data.session_store import is_admin, set_admin
from data.suggestion_store import load_suggestions, clear_suggestions, export_suggestions_json
from components.tables import render_styled_table

logger = logging.getLogger(__name__)


def render(sidebar_state):
    """Render the Admin tab."""
    st.header("Admin")

    if not is_admin():
        password = st.text_input("Admin password", type="password", key="admin_password")
        if st.button("Log in", key="btn_admin_login"):
            if password == ADMIN_PASSWORD:
                set_admin(True)
                st.rerun()
            else:
                logger.warning("Failed admin login attempt")
                st.error("Incorrect password.")
        return

    if st.button("Log out", key="btn_admin_logout"):
        set_admin(False)
        st.rerun()

    entries = load_suggestions()
    st.subheader(f"Suggestion Log ({len(entries)})")
    if not entries:
        st.info("No suggestions recorded.")
        return

    df = pd.DataFrame([
        {
            "Timestamp": e.timestamp,
            "Type": SUGGESTION_TYPE_LABELS.get(e.suggestion_type, e.suggestion_type),
            "Details": e.details,
        }
        for e in reversed(entries)
    ])
    render_styled_table(df)

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "Export Log (JSON)", export_suggestions_json(entries),
            "suggestion_logs.json", "application/json",
        )
    with col2:
        if st.button("Clear Log", key="btn_clear_log"):
            try:
                clear_suggestions()
                st.success("Suggestion log cleared.")
                st.rerun()
            except OSError as e:
                st.error(f"Could not clear log: {e}")
