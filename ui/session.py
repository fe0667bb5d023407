"""Per-session state: the data store, the signed-in user and navigation."""
import uuid

import streamlit as st

from demo.mock_data import generate_mock_data
from services import auth, local_storage
from services.store import DataStore
from utils.routing import normalize_path

CLIENT_PARAM = 'client'
ROUTE_KEYS = '_route_keys'


def get_store() -> DataStore:
    if 'data_store' not in st.session_state:
        st.session_state.data_store = DataStore(seed=generate_mock_data())
    return st.session_state.data_store


def client_id() -> str:
    """
    Id of the browser's local storage.

    Carried in the `client` query parameter so a reload finds the same storage;
    a visitor arriving without one gets a fresh id and therefore no session.
    """
    value = st.query_params.get(CLIENT_PARAM)
    if not local_storage.is_valid_client_id(value):
        value = uuid.uuid4().hex
        st.query_params[CLIENT_PARAM] = value
    return value


def get_current_user():
    if 'auth_user' not in st.session_state:
        st.session_state.auth_user = auth.restore_session()
    return st.session_state.auth_user


def set_current_user(user):
    st.session_state.auth_user = user


def current_path() -> str:
    return normalize_path(st.query_params.get('page', '/'))


def navigate(path: str):
    """Switch page by rewriting the `page` query parameter."""
    st.query_params['page'] = normalize_path(path)
    st.rerun()


def keep_for_route(key: str) -> str:
    """Register a session key that is dropped as soon as the page changes."""
    if ROUTE_KEYS not in st.session_state:
        st.session_state[ROUTE_KEYS] = set()
    st.session_state[ROUTE_KEYS].add(key)
    return key


def enter_route(path: str):
    """
    Record the page being rendered. Leaving a page, by any means, discards the
    unsaved state its widgets registered with `keep_for_route`.
    """
    if st.session_state.get('current_route') == path:
        return
    for key in st.session_state.pop(ROUTE_KEYS, set()):
        st.session_state.pop(key, None)
    st.session_state.current_route = path


def flash(message: str, level: str = 'success'):
    """Queue a message for the next page render (survives st.rerun)."""
    st.session_state.flash = (level, message)


def show_flash():
    pending = st.session_state.pop('flash', None)
    if not pending:
        return
    level, message = pending
    getattr(st, level, st.info)(message)
