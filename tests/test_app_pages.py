import os

import pytest
from streamlit.testing.v1 import AppTest

from domain.constants import DEFAULT_AUTH_USER
from ui.session import ROUTE_KEYS

APP_PATH = os.path.join(os.path.dirname(__file__), '..', 'app.py')


def _app(path, user=None):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.query_params['page'] = path
    if user is not None:
        at.session_state['auth_user'] = user
    return at.run()


def _open(at, path):
    at.query_params['page'] = path
    return at.run()


def _button(at, label):
    return next(b for b in at.button if b.label == label)


@pytest.fixture
def signed_in(data_dir):
    def open_page(path):
        return _app(path, user=dict(DEFAULT_AUTH_USER))
    return open_page


def test_anonymous_visitor_sees_login_page(data_dir):
    at = _app('/admins')
    assert not at.exception
    assert at.session_state['auth_user'] is None
    assert [h.value for h in at.header] == ["Sign in to your account"]
    assert 'data_store' not in at.session_state


def test_first_render_finishes_loading(signed_in):
    at = signed_in('/')
    assert not at.exception
    assert at.session_state['data_store'].is_loading is False
    assert at.header[0].value == "Dashboard"


def test_unknown_id_returns_to_list_with_error(signed_in):
    at = signed_in('/companies/comp_missing')
    assert at.query_params['page'] == '/companies'
    assert "Company not found" in [e.value for e in at.error]
    assert at.header[0].value == "Companies"


def test_create_returns_to_list(signed_in):
    at = signed_in('/companies/new')
    store = at.session_state['data_store']
    before = store.count('companies')
    at.text_input(key='companies_new_name').input("Acme Corp")
    _button(at, "Create Company").click().run()
    assert at.query_params['page'] == '/companies'
    assert "Company created successfully" in [s.value for s in at.success]
    assert store.count('companies') == before + 1
    assert any(c['name'] == "Acme Corp" for c in store.list('companies'))


def test_invalid_create_stays_on_form(signed_in):
    at = signed_in('/companies/new')
    store = at.session_state['data_store']
    before = store.count('companies')
    _button(at, "Create Company").click().run()
    assert at.query_params['page'] == '/companies/new'
    assert store.count('companies') == before
    assert at.error


def test_edit_returns_to_list(signed_in):
    at = signed_in('/companies/comp_seed_1')
    store = at.session_state['data_store']
    at.text_input(key='companies_comp_seed_1_name').input("Renamed Inc")
    _button(at, "Save Changes").click().run()
    assert at.query_params['page'] == '/companies'
    assert "Company updated successfully" in [s.value for s in at.success]
    assert store.get('companies', 'comp_seed_1')['name'] == "Renamed Inc"


def test_delete_waits_for_confirmation(signed_in):
    at = signed_in('/companies')
    store = at.session_state['data_store']
    at.session_state['confirm_delete_companies'] = {'id': 'comp_seed_1', 'name': 'Seed'}
    at.run()
    assert store.get('companies', 'comp_seed_1') is not None

    at.button(key='confirm_delete_companies_yes').click().run()
    assert store.get('companies', 'comp_seed_1') is None
    assert "Company Seed deleted" in [s.value for s in at.success]


def test_cancelled_delete_keeps_record(signed_in):
    at = signed_in('/companies')
    store = at.session_state['data_store']
    at.session_state['confirm_delete_companies'] = {'id': 'comp_seed_1', 'name': 'Seed'}
    at.run()
    at.button(key='confirm_delete_companies_no').click().run()
    assert store.get('companies', 'comp_seed_1') is not None
    assert 'confirm_delete_companies' not in at.session_state


def test_pending_delete_is_dropped_when_leaving_the_page(signed_in):
    at = signed_in('/companies')
    at.session_state['confirm_delete_companies'] = {'id': 'comp_seed_1', 'name': 'Seed'}
    at.session_state[ROUTE_KEYS] = {'confirm_delete_companies'}
    at.run()
    assert at.button(key='confirm_delete_companies_yes')

    at.button(key='nav_dashboard').click().run()
    _open(at, '/companies')
    assert 'confirm_delete_companies' not in at.session_state
    assert at.session_state['data_store'].get('companies', 'comp_seed_1') is not None


def test_unsaved_skills_are_dropped_when_leaving_through_sidebar(signed_in):
    at = signed_in('/candidates/cand_seed_1')
    store = at.session_state['data_store']
    saved = store.get('candidates', 'cand_seed_1')['skills']
    at.text_input(key='candidates_cand_seed_1_new_skill').input("Fortran")
    at.button(key='candidates_cand_seed_1_add_skill').click().run()
    assert "Fortran" in at.session_state['candidates_cand_seed_1_skills']

    at.button(key='nav_dashboard').click().run()
    _open(at, '/candidates/cand_seed_1')
    assert at.session_state['candidates_cand_seed_1_skills'] == saved
    assert store.get('candidates', 'cand_seed_1')['skills'] == saved


def test_unsaved_skills_survive_reruns_on_the_same_page(signed_in):
    at = signed_in('/candidates/new')
    at.text_input(key='candidates_new_new_skill').input("Go")
    at.button(key='candidates_new_add_skill').click().run()
    at.run()
    assert at.session_state['candidates_new_skills'] == ["Go"]


def test_sign_in_is_private_to_one_browser(data_dir):
    first = _app('/login')
    first.text_input[0].input("jane@example.com")
    first.text_input[1].input("pw")
    _button(first, "Sign in").click().run()
    assert first.session_state['auth_user']['email'] == "jane@example.com"
    client = first.query_params['client']

    other = _app('/admins')
    assert other.session_state['auth_user'] is None
    assert other.query_params['client'] != client
    assert [h.value for h in other.header] == ["Sign in to your account"]

    # a reload of the first browser keeps its session
    reloaded = AppTest.from_file(APP_PATH, default_timeout=30)
    reloaded.query_params['page'] = '/admins'
    reloaded.query_params['client'] = client
    reloaded.run()
    assert reloaded.session_state['auth_user']['email'] == "jane@example.com"


def test_recent_activity_escapes_record_names(signed_in):
    at = signed_in('/')
    at.session_state['data_store'].add('candidates', {'name': '<b>Eve</b>', 'email': 'eve@example.com'})
    at.run()
    lines = [m.value for m in at.markdown if 'Eve' in m.value]
    assert lines
    assert all('<b>' not in line and '&lt;b&gt;Eve&lt;/b&gt;' in line for line in lines)


def test_list_page_renders_table_and_sidebar_without_warnings(signed_in):
    at = signed_in('/companies')
    assert not at.exception
    assert len(at.dataframe) == 1
    assert at.sidebar.button(key='nav_company_list').proto.type == 'primary'
    assert not [w.value for w in at.warning if 'use_container_width' in w.value]
