"""Tab 4: Reference Library: fire code rules, BFP memoranda and NFPA standards."""

import streamlit as st

from data.references import REFERENCES, REFERENCE_TYPES, REFERENCE_TYPE_LABELS
from data.nfpa_guidance import ADDITIONAL_NFPA_STANDARDS
from data.session_store import get_bookmarks, set_bookmarks
from engine.library import search_references, list_categories, toggle_bookmark


def render(sidebar_state):
    """Render the Reference Library tab."""
    st.header("Reference Library")

    col1, col2, col3, col4 = st.columns([3, 2, 2, 1])
    with col1:
        query = st.text_input("Search", placeholder="e.g. sprinkler, FSIC, egress", key="ref_query")
    with col2:
        category = st.selectbox("Category", ["All"] + list_categories(REFERENCES), key="ref_category")
    with col3:
        ref_type = st.selectbox("Type", ["All"] + REFERENCE_TYPES,
                                format_func=lambda x: REFERENCE_TYPE_LABELS.get(x, x), key="ref_type")
    with col4:
        st.write("")
        bookmarked_only = st.checkbox("Bookmarked", key="ref_bookmarked")

    bookmarks = get_bookmarks()
    results = search_references(
        REFERENCES,
        query=query,
        category=None if category == "All" else category,
        ref_type=None if ref_type == "All" else ref_type,
        bookmarks=bookmarks if bookmarked_only else None,
    )
    st.caption(f"{len(results)} reference(s)")

    for ref in results:
        marker = "★ " if ref.reference_id in bookmarks else ""
        with st.expander(f"{marker}{ref.title}"):
            st.caption(f"{REFERENCE_TYPE_LABELS.get(ref.ref_type, ref.ref_type)} · {ref.category}"
                       + (f" · {ref.date_published}" if ref.date_published else ""))
            st.write(ref.description)
            if ref.content:
                st.text(ref.content)
            if ref.url:
                st.markdown(f"[Source]({ref.url})")
            if ref.tags:
                st.caption("Tags: " + ", ".join(ref.tags))
            label = "Remove bookmark" if ref.reference_id in bookmarks else "Bookmark"
            if st.button(label, key=f"bm_{ref.reference_id}"):
                set_bookmarks(toggle_bookmark(bookmarks, ref.reference_id))
                st.rerun()

    with st.expander("Additional NFPA Standards", expanded=False):
        for std in ADDITIONAL_NFPA_STANDARDS:
            st.markdown(f"**{std['code']}: {std['title']}**")
            st.caption(std["relevance"])
