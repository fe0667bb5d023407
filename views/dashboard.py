import html

import pandas as pd
import streamlit as st

from services import dashboard as dashboard_svc
from ui import components
from ui.session import get_store, navigate, show_flash


def view(params=None):
    st.header("Dashboard")
    st.caption("Overview of your system's performance and status")
    show_flash()

    store = get_store()
    stats = dashboard_svc.get_stats(store)

    c1, c2, c3 = st.columns(3)
    with c1:
        if components.stat_card("Active Admins", stats["active_admins"],
                                f"{stats['total_admins']} total", "admins"):
            navigate("/admins")
    with c2:
        if components.stat_card("Active Candidates", stats["active_candidates"],
                                f"{stats['total_candidates']} total", "candidates"):
            navigate("/candidates")
    with c3:
        if components.stat_card("Active Companies", stats["active_companies"],
                                f"{stats['total_companies']} total", "companies"):
            navigate("/companies")

    left, right = st.columns(2)
    with left:
        with st.container(border=True):
            st.subheader("Recent Activity")
            activity = dashboard_svc.get_recent_activity(store, limit=5)
            if not activity:
                st.caption("No changes yet in this session.")
            for entry in activity:
                st.markdown(f"- {html.escape(entry['message'])}  \n  <small>{html.escape(entry['at'])}</small>",
                            unsafe_allow_html=True)

    with right:
        with st.container(border=True):
            st.subheader("Status Overview")
            overview = dashboard_svc.get_status_overview(store)
            kind = st.radio("Collection", list(overview.keys()), horizontal=True,
                            format_func=str.capitalize, key="status_overview_kind")
            counts = overview[kind]
            chart = pd.DataFrame({"Status": [s.capitalize() for s in counts], "Count": list(counts.values())})
            st.bar_chart(chart, x="Status", y="Count")
