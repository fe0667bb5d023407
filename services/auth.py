"""Mock authentication: one user session kept in local storage.

There is no real identity provider. Any well-formed credentials sign in and the
session survives reloads through the `auth_token` entry in local storage.
"""
from __future__ import annotations

import logging
import time
from dataclasses import asdict
from typing import Any, Dict, Optional

from domain.constants import AUTH_TOKEN, DEFAULT_AUTH_USER, MIN_PASSWORD_LENGTH
from domain.models import auth_user_from_dict
from services import local_storage
from services.validation import is_valid_email, validate_password_change
from utils import config

logger = logging.getLogger(__name__)

TOKEN_KEY = 'auth_token'
USER_KEY = 'auth_user'


class AuthError(ValueError):
    pass


def _simulate_latency():
    if config.SIMULATED_DELAY > 0:
        time.sleep(config.SIMULATED_DELAY)


def _start_session(user: Dict[str, Any]) -> Dict[str, Any]:
    local_storage.set_item(TOKEN_KEY, AUTH_TOKEN)
    local_storage.set_item(USER_KEY, user)
    return user


def _check_email(email: str):
    if not (email or '').strip():
        raise AuthError("Email is required")
    if not is_valid_email(email):
        raise AuthError("Email is invalid")


def restore_session() -> Optional[Dict[str, Any]]:
    """Return the stored user when a token exists, else None."""
    if not local_storage.get_item(TOKEN_KEY):
        return None
    stored = local_storage.get_item(USER_KEY)
    if isinstance(stored, dict) and stored.get('id'):
        return asdict(auth_user_from_dict(stored))
    return dict(DEFAULT_AUTH_USER)


def login(email: str, password: str) -> Dict[str, Any]:
    _check_email(email)
    if not password:
        raise AuthError("Password is required")
    _simulate_latency()
    user = {**DEFAULT_AUTH_USER, 'email': email.strip()}
    logger.info("Signed in %s", user['email'])
    return _start_session(user)


def signup(name: str, email: str, password: str) -> Dict[str, Any]:
    if not (name or '').strip():
        raise AuthError("Name is required")
    _check_email(email)
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise AuthError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    _simulate_latency()
    user = {**DEFAULT_AUTH_USER, 'name': name.strip(), 'email': email.strip()}
    logger.info("Signed up %s", user['email'])
    return _start_session(user)


def logout():
    local_storage.remove_item(TOKEN_KEY)
    local_storage.remove_item(USER_KEY)
    logger.info("Signed out")


def update_profile(user: Optional[Dict[str, Any]], changes: Dict[str, Any]) -> Dict[str, Any]:
    if not user:
        raise AuthError("Not signed in")
    _simulate_latency()
    merged = asdict(auth_user_from_dict({**user, **changes, 'id': user['id']}))
    local_storage.set_item(USER_KEY, merged)
    logger.info("Updated profile for %s", merged['email'])
    return merged


def is_authenticated(user: Optional[Dict[str, Any]]) -> bool:
    return bool(user)


def change_password(current: str, new: str, confirm: str) -> Dict[str, str]:
    """Validate a password change. No backend exists, so a valid change is only logged."""
    errors = validate_password_change(current, new, confirm)
    if errors:
        logger.info("Rejected password change: %s", sorted(errors))
        return errors
    _simulate_latency()
    logger.info("Password changed")
    return {}
