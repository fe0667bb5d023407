import streamlit as st

from services import auth
from services.validation import validate_profile
from ui.components import show_errors
from ui.session import get_current_user, set_current_user, show_flash, flash

LABELS = {'name': 'Full name', 'email': 'Email', 'phone': 'Phone', 'title': 'Job title', 'bio': 'Bio'}


def view(params=None):
    st.header("Profile")
    st.caption("Manage your personal information")
    show_flash()

    me = get_current_user()
    if not me:
        st.warning("No signed-in user.")
        return

    with st.form("profile_form"):
        st.markdown(f"**{me.get('role', '')}**")
        c1, c2 = st.columns(2)
        name = c1.text_input(LABELS['name'], value=me.get('name') or '')
        email = c2.text_input(LABELS['email'], value=me.get('email') or '')
        phone = c1.text_input(LABELS['phone'], value=me.get('phone') or '')
        title = c2.text_input(LABELS['title'], value=me.get('title') or '')
        bio = st.text_area(LABELS['bio'], value=me.get('bio') or '')
        submitted = st.form_submit_button("Save Changes", type="primary")

    if not submitted:
        return

    updates = {'name': name.strip(), 'email': email.strip(), 'phone': phone.strip(),
               'title': title.strip(), 'bio': bio.strip()}
    errors = validate_profile(updates)
    if errors:
        show_errors(errors, LABELS)
        return

    try:
        with st.spinner("Saving..."):
            updated = auth.update_profile(me, updates)
    except ValueError as e:
        st.error(f"Failed to update profile: {e}")
        return
    set_current_user(updated)
    flash("Profile updated successfully")
    st.rerun()
