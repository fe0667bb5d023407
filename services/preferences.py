"""Account settings kept next to the auth session in local storage."""
import logging
from typing import Any, Dict

from domain.constants import DEFAULT_PREFERENCES
from services import local_storage

logger = logging.getLogger(__name__)

PREFERENCES_KEY = 'preferences'


def load_preferences() -> Dict[str, Any]:
    stored = local_storage.get_item(PREFERENCES_KEY) or {}
    prefs = dict(DEFAULT_PREFERENCES)
    if isinstance(stored, dict):
        prefs.update({k: bool(v) for k, v in stored.items() if k in DEFAULT_PREFERENCES})
    return prefs


def save_preferences(updates: Dict[str, Any]) -> Dict[str, Any]:
    """Persist known preference keys, ignoring anything else."""
    prefs = load_preferences()
    prefs.update({k: bool(v) for k, v in updates.items() if k in DEFAULT_PREFERENCES})
    local_storage.set_item(PREFERENCES_KEY, prefs)
    logger.info("Saved preferences %s", prefs)
    return prefs
