"""Browser-style local storage backed by one JSON file per browser.

Holds the few values that must survive a page reload (auth token, signed-in
user, preferences). Records themselves never touch disk. Calls made inside
`client_scope(client_id)` read and write that browser's file; calls outside
any scope use the unscoped `local_storage.json`.
"""
import contextvars
import json
import logging
import os
import re
import tempfile
import shutil
from contextlib import contextmanager
from typing import Any, Dict, Optional

from utils import config

logger = logging.getLogger(__name__)

FILENAME = 'local_storage.json'
CLIENT_ID_RE = re.compile(r'^[0-9a-f]{32}$')

_client = contextvars.ContextVar('local_storage_client', default=None)


def is_valid_client_id(client_id) -> bool:
    return isinstance(client_id, str) and bool(CLIENT_ID_RE.match(client_id))


@contextmanager
def client_scope(client_id: str):
    """Route every storage call in the block to the file of one browser."""
    if not is_valid_client_id(client_id):
        raise ValueError(f"Invalid client id: {client_id!r}")
    token = _client.set(client_id)
    try:
        yield
    finally:
        _client.reset(token)


def filename_for(client_id: Optional[str]) -> str:
    return FILENAME if client_id is None else f'local_storage_{client_id}.json'


def _path() -> str:
    return os.path.join(config.DATA_DIR, filename_for(_client.get()))


def _load() -> Dict[str, Any]:
    file_path = _path()
    if not os.path.exists(file_path):
        return {}
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Unreadable local storage at %s: %s", file_path, e)
        return {}
    return data if isinstance(data, dict) else {}


def atomic_write(data: Dict[str, Any]):
    file_path = _path()
    os.makedirs(os.path.dirname(file_path), exist_ok=True)
    tmp_fd, tmp_path = tempfile.mkstemp(prefix='tmp_', suffix='.json', dir=os.path.dirname(file_path))
    with os.fdopen(tmp_fd, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    shutil.move(tmp_path, file_path)


def get_item(key: str, default: Optional[Any] = None) -> Any:
    return _load().get(key, default)


def set_item(key: str, value: Any):
    data = _load()
    data[key] = value
    atomic_write(data)


def remove_item(key: str):
    data = _load()
    if key in data:
        del data[key]
        atomic_write(data)


def clear():
    atomic_write({})
