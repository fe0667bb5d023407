import pandas  # noqa: F401  imported before sys.modules is patched
from unittest.mock import patch, MagicMock

from utils.routing import ROUTES

# Mock streamlit before importing the app
st_mock = MagicMock()


def _registry():
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        from app import PAGE_REGISTRY
    return PAGE_REGISTRY


def test_page_registry_structure():
    """
    Tests that the PAGE_REGISTRY has the correct structure.
    """
    registry = _registry()
    assert isinstance(registry, dict)
    for key, value in registry.items():
        assert "label" in value
        assert "render_func" in value
        assert "path" in value
        assert "nav" in value
        assert callable(value["render_func"])
        assert isinstance(value["nav"], bool)


def test_every_route_has_a_page():
    registry = _registry()
    route_pages = {page for _, page in ROUTES}
    assert route_pages == set(registry.keys())


def test_sidebar_pages():
    """
    Tests that only list and account pages appear in the sidebar.
    """
    registry = _registry()
    nav_pages = [key for key, value in registry.items() if value["nav"]]
    assert sorted(nav_pages) == sorted(["dashboard", "admin_list", "candidate_list",
                                        "company_list", "settings", "profile"])


def test_registry_paths_resolve_back_to_their_page():
    from utils.routing import resolve
    registry = _registry()
    for key, value in registry.items():
        assert resolve(value["path"])[0] == key
