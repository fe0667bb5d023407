"""URL path resolution for the dashboard shell.

Streamlit has no router of its own, so the current path lives in the `page`
query parameter (e.g. `?page=/candidates/cand_123`) and is resolved here into
a page key plus route params.
"""
import re
from typing import Dict, Optional, Tuple

# Ordered: first match wins
ROUTES = [
    (r"^/$", "dashboard"),
    (r"^/login$", "login"),
    (r"^/signup$", "signup"),
    (r"^/admins$", "admin_list"),
    (r"^/admins/new$", "admin_form"),
    (r"^/admins/(?P<id>[^/]+)$", "admin_form"),
    (r"^/candidates$", "candidate_list"),
    (r"^/candidates/new$", "candidate_form"),
    (r"^/candidates/(?P<id>[^/]+)$", "candidate_form"),
    (r"^/companies$", "company_list"),
    (r"^/companies/new$", "company_form"),
    (r"^/companies/(?P<id>[^/]+)$", "company_form"),
    (r"^/settings$", "settings"),
    (r"^/settings/profile$", "profile"),
]

PUBLIC_PAGES = {"login", "signup"}

DEFAULT_PAGE = "dashboard"
LOGIN_PATH = "/login"


def normalize_path(path: Optional[str]) -> str:
    if not path:
        return "/"
    path = path.strip()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def resolve(path: Optional[str]) -> Tuple[str, Dict[str, str]]:
    """Map a URL path to (page_key, params). Unknown paths fall back to the dashboard."""
    normalized = normalize_path(path)
    for pattern, page_key in ROUTES:
        m = re.match(pattern, normalized)
        if m:
            return page_key, m.groupdict()
    return DEFAULT_PAGE, {}


def is_public(page_key: str) -> bool:
    return page_key in PUBLIC_PAGES


def guard(path: Optional[str], authenticated: bool) -> Tuple[str, Dict[str, str]]:
    """Resolve a path, sending anonymous visitors of private pages to the login page."""
    page_key, params = resolve(path)
    if not authenticated and not is_public(page_key):
        return resolve(LOGIN_PATH)
    if authenticated and is_public(page_key):
        return DEFAULT_PAGE, {}
    return page_key, params
