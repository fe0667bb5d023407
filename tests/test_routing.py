import pytest

from utils.routing import resolve, guard, normalize_path


@pytest.mark.parametrize("path,expected", [
    ("/", ("dashboard", {})),
    ("", ("dashboard", {})),
    ("/admins", ("admin_list", {})),
    ("/admins/", ("admin_list", {})),
    ("admins/new", ("admin_form", {})),
    ("/admins/adm_1", ("admin_form", {'id': 'adm_1'})),
    ("/candidates/cand_9", ("candidate_form", {'id': 'cand_9'})),
    ("/companies/new", ("company_form", {})),
    ("/settings", ("settings", {})),
    ("/settings/profile", ("profile", {})),
    ("/login", ("login", {})),
    ("/nowhere/at/all", ("dashboard", {})),
])
def test_resolve(path, expected):
    assert resolve(path) == expected


def test_normalize_path():
    assert normalize_path(None) == "/"
    assert normalize_path(" companies// ") == "/companies"


def test_guard_sends_anonymous_users_to_login():
    assert guard("/candidates", authenticated=False) == ("login", {})
    assert guard("/signup", authenticated=False) == ("signup", {})


def test_guard_keeps_signed_in_users_off_auth_pages():
    assert guard("/login", authenticated=True) == ("dashboard", {})
    assert guard("/companies/comp_1", authenticated=True) == ("company_form", {'id': 'comp_1'})
