import streamlit as st

from ui.session import keep_for_route


def request_confirmation(key: str, payload):
    """Stores the payload until confirmed, cancelled or the page is left."""
    st.session_state[keep_for_route(f"confirm_{key}")] = payload


def confirm_dialog(key: str, title: str, message: str, confirm_label: str = "Delete",
                   cancel_label: str = "Cancel"):
    """
    Shows a pending confirmation raised with `request_confirmation`.

    Returns the stored payload once confirmed, otherwise None. Cancel clears it.
    """
    state_key = f"confirm_{key}"
    payload = st.session_state.get(state_key)
    if payload is None:
        return None
    with st.container(border=True):
        st.markdown(f"**⚠️ {title}**")
        st.write(message)
        c1, c2 = st.columns(2)
        if c1.button(confirm_label, key=f"{state_key}_yes", type="primary"):
            del st.session_state[state_key]
            return payload
        if c2.button(cancel_label, key=f"{state_key}_no"):
            del st.session_state[state_key]
            st.rerun()
    return None
