import streamlit as st
import time
import datetime as dt

from utils import config
from utils import logger as _logging_setup  # noqa: F401  configures logging once
from utils.routing import guard, is_public
from services import local_storage
from ui.session import get_store, get_current_user, current_path, navigate, client_id, enter_route
from ui.components import inject_base_css

# Import the page rendering functions from the view modules
from views import dashboard, admins, candidates, companies, settings, profile, auth as auth_views

# --- Page Registry ---
# Maps a page key (see utils.routing.ROUTES) to its label, rendering function,
# the path its sidebar entry opens, and whether it is listed in the sidebar.
PAGE_REGISTRY = {
    "dashboard": {
        "label": "📊 Dashboard",
        "render_func": dashboard.view,
        "path": "/",
        "nav": True,
    },
    "admin_list": {
        "label": "🛡️ Admins",
        "render_func": admins.list_view,
        "path": "/admins",
        "nav": True,
    },
    "admin_form": {
        "label": "Admin Form",
        "render_func": admins.form_view,
        "path": "/admins/new",
        "nav": False,
    },
    "candidate_list": {
        "label": "🧑‍💼 Candidates",
        "render_func": candidates.list_view,
        "path": "/candidates",
        "nav": True,
    },
    "candidate_form": {
        "label": "Candidate Form",
        "render_func": candidates.form_view,
        "path": "/candidates/new",
        "nav": False,
    },
    "company_list": {
        "label": "🏢 Companies",
        "render_func": companies.list_view,
        "path": "/companies",
        "nav": True,
    },
    "company_form": {
        "label": "Company Form",
        "render_func": companies.form_view,
        "path": "/companies/new",
        "nav": False,
    },
    "settings": {
        "label": "⚙️ Settings",
        "render_func": settings.view,
        "path": "/settings",
        "nav": True,
    },
    "profile": {
        "label": "🙍 Profile",
        "render_func": profile.view,
        "path": "/settings/profile",
        "nav": True,
    },
    "login": {
        "label": "Sign in",
        "render_func": auth_views.login_view,
        "path": "/login",
        "nav": False,
    },
    "signup": {
        "label": "Sign up",
        "render_func": auth_views.signup_view,
        "path": "/signup",
        "nav": False,
    },
}

# Parent list page highlighted in the sidebar while a form is open
NAV_PARENT = {
    "admin_form": "admin_list",
    "candidate_form": "candidate_list",
    "company_form": "company_list",
}


def render_sidebar(user, active_key):
    st.sidebar.title("Admin Dashboard")
    st.sidebar.caption(f"Signed in as **{user.get('name', '')}** · {user.get('role', '')}")
    st.sidebar.markdown("---")
    highlighted = NAV_PARENT.get(active_key, active_key)
    for key, page in PAGE_REGISTRY.items():
        if not page["nav"]:
            continue
        button_type = "primary" if key == highlighted else "secondary"
        if st.sidebar.button(page["label"], key=f"nav_{key}", type=button_type, width="stretch"):
            navigate(page["path"])
    st.sidebar.markdown("---")
    if st.sidebar.button("🚪 Logout", key="nav_logout", width="stretch"):
        auth_views.logout()
    st.sidebar.caption(f"{dt.datetime.now(dt.timezone.utc).strftime('%H:%M:%S')}Z")


def render_page():
    user = get_current_user()
    path = current_path()
    enter_route(path)
    page_key, params = guard(path, authenticated=bool(user))
    page = PAGE_REGISTRY[page_key]

    if is_public(page_key):
        page["render_func"](params)
        return

    store = get_store()
    if store.is_loading:
        # Simulated fetch of the seed data on first render of the session
        with st.spinner("Loading data..."):
            time.sleep(config.SIMULATED_DELAY)
        store.finish_loading()

    render_sidebar(user, page_key)
    page["render_func"](params)


def main():
    """
    Main application router.

    Resolves the `page` query parameter to a registered page, sends anonymous
    visitors to the login page, renders the sidebar for signed-in users and
    then the selected page. Auth and preferences read the local storage of
    the browser named by the `client` query parameter.
    """
    st.set_page_config(page_title="Admin Dashboard", layout="wide")
    inject_base_css()

    with local_storage.client_scope(client_id()):
        render_page()


if __name__ == "__main__":
    main()
