import streamlit as st
from typing import Any, Dict, List, Tuple

from .base import avatar, inject_base_css, status_badge, skill_chips


def stat_card(title: str, value: int, caption: str, key: str):
    """Displays one dashboard metric with a 'View all' link. Returns True when clicked."""
    with st.container(border=True):
        st.metric(title, value)
        st.caption(caption)
        return st.button("View all", key=f"stat_{key}")


def record_details(title: str, record: Dict[str, Any], rows: List[Tuple[str, str]]):
    """
    Displays a read-only detail card for a record.

    rows: (field, label) pairs in display order. Empty values show as N/A.
    """
    inject_base_css()
    with st.container(border=True):
        st.subheader(title)
        if record.get('profile_image_url'):
            avatar(record['profile_image_url'])
        for field, label in rows:
            value = record.get(field)
            if field == 'status':
                st.markdown(f"**{label}:** {status_badge(value)}", unsafe_allow_html=True)
            elif field == 'skills':
                st.markdown(f"**{label}:** {skill_chips(value) or 'N/A'}", unsafe_allow_html=True)
            else:
                st.markdown(f"**{label}:** {value if value else 'N/A'}")
