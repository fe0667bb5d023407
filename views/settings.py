import streamlit as st

from services import auth, preferences
from ui.components import show_errors
from ui.session import show_flash, flash

PASSWORD_LABELS = {
    'current_password': 'Current password',
    'new_password': 'New password',
    'confirm_password': 'Confirm new password',
}


def view(params=None):
    st.header("Settings")
    st.caption("Manage your account settings and preferences")
    show_flash()

    prefs = preferences.load_preferences()

    with st.container(border=True):
        st.subheader("🔔 Notifications")
        st.caption("Manage your notification preferences")
        with st.form("notifications_form"):
            email_n = st.checkbox("Email notifications", value=prefs['email_notifications'],
                                  help="Receive email notifications about important updates")
            push_n = st.checkbox("Push notifications", value=prefs['push_notifications'],
                                 help="Receive push notifications in your browser")
            marketing = st.checkbox("Marketing emails", value=prefs['marketing_emails'],
                                    help="Receive marketing and promotional emails")
            if st.form_submit_button("Save Preferences"):
                preferences.save_preferences({
                    'email_notifications': email_n,
                    'push_notifications': push_n,
                    'marketing_emails': marketing,
                })
                flash("Preferences saved")
                st.rerun()

    with st.container(border=True):
        st.subheader("🔒 Password")
        st.caption("Update your password")
        with st.form("password_form", clear_on_submit=False):
            current = st.text_input(PASSWORD_LABELS['current_password'], type="password")
            new = st.text_input(PASSWORD_LABELS['new_password'], type="password")
            confirm = st.text_input(PASSWORD_LABELS['confirm_password'], type="password")
            submitted = st.form_submit_button("Update Password")
        if submitted:
            errors = auth.change_password(current, new, confirm)
            if errors:
                show_errors(errors, PASSWORD_LABELS)
            else:
                st.success("Password updated successfully")

    with st.container(border=True):
        st.subheader("🛡️ Security")
        enabled = st.toggle("Two-factor authentication", value=prefs['two_factor_enabled'],
                            help="Add an extra layer of security to your account")
        if enabled != prefs['two_factor_enabled']:
            preferences.save_preferences({'two_factor_enabled': enabled})
            st.success("Two-factor authentication " + ("enabled" if enabled else "disabled"))
