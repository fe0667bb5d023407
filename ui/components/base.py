import html

import streamlit as st

GREEN = "#059669"  # emerald-600
YELLOW = "#D97706"  # amber-600
RED = "#DC2626"  # red-600
BLUE = "#2563EB"  # blue-600
PURPLE = "#7C3AED"  # violet-600
GRAY = "#6B7280"  # gray-500

STATUS_COLORS = {
    "active": GREEN,
    "inactive": GRAY,
    "new": BLUE,
    "screening": YELLOW,
    "interview": PURPLE,
    "hired": GREEN,
    "rejected": RED,
}


def inject_base_css():
    st.markdown(
        """
        <style>
        .badge {
            display:inline-block; padding:2px 8px; border-radius:12px;
            font-size:12px; line-height:16px; font-weight:600;
            color:#F9FAFB; margin-right:4px; margin-bottom:4px;
        }
        .skill-chip {
            display:inline-block; padding:2px 8px; border-radius:12px; font-size:12px;
            background:#EEF2FF; color:#3730A3; margin-right:4px; margin-bottom:4px;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def status_label(status: str) -> str:
    return (status or "").capitalize()


def status_badge(status: str) -> str:
    color = STATUS_COLORS.get((status or "").lower(), GRAY)
    return f'<span class="badge" style="background:{color};">{html.escape(status_label(status))}</span>'


def skill_chips(skills) -> str:
    return " ".join(f'<span class="skill-chip">{html.escape(str(s))}</span>' for s in skills or [])


def avatar(url: str, size: int = 96):
    st.markdown(f'<img src="{html.escape(url)}" width="{size}" style="border-radius:50%;">', unsafe_allow_html=True)
