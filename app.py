"""Fire Safety Inspector Toolkit: Streamlit entry point."""

import logging
import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_building_assessment,
    tab_calculators,
    tab_hazmat_fees,
    tab_reference_library,
    tab_admin,
)

logging.basicConfig(
    level=os.environ.get("FIRE_INSPECTOR_LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def main():
    st.set_page_config(
        page_title="Fire Safety Inspector",
        page_icon="🧯",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3, tab4, tab5 = st.tabs([
        "🏢 Building Assessment",
        "🧮 Calculators",
        "☣️ Hazardous Materials Fees",
        "📚 Reference Library",
        "⚙️ Admin",
    ])

    with tab1:
        tab_building_assessment.render(sidebar_state)
    with tab2:
        tab_calculators.render(sidebar_state)
    with tab3:
        tab_hazmat_fees.render(sidebar_state)
    with tab4:
        tab_reference_library.render(sidebar_state)
    with tab5:
        tab_admin.render(sidebar_state)


if __name__ == "__main__":
    main()
