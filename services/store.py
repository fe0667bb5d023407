"""In-memory CRUD registry over the three record collections.

One `DataStore` lives per browser session (see `ui.session.get_store`). Records
are plain dicts shaped by the dataclasses in `domain.models`; nothing is
written to disk. Field-level validation happens in `services.validation`
before a form calls into the store, never here.
"""
from __future__ import annotations

import copy
import logging
from collections import deque
from dataclasses import asdict, fields
from typing import Any, Deque, Dict, List, Optional

from domain.constants import KINDS, KIND_LABELS, ID_PREFIXES
from domain.models import MODEL_BY_KIND, FROM_DICT_BY_KIND
from utils import config
from utils.ids import create_id_with_prefix, utc_now_iso

logger = logging.getLogger(__name__)

IMMUTABLE_FIELDS = {'id', 'created_at'}


class RecordNotFound(ValueError):
    """Raised by the `require` helper when an id is unknown."""


def display_name(record: Dict[str, Any]) -> str:
    return record.get('full_name') or record.get('name') or record.get('id', '')


class DataStore:
    def __init__(self, seed: Optional[Dict[str, List[Dict[str, Any]]]] = None,
                 activity_limit: Optional[int] = None):
        self._collections: Dict[str, List[Dict[str, Any]]] = {k: [] for k in KINDS}
        self._activity: Deque[Dict[str, Any]] = deque(
            maxlen=activity_limit or config.ACTIVITY_LIMIT)
        self.is_loading = True
        for kind, records in (seed or {}).items():
            coll = self._collection(kind)
            for r in records:
                coll.append(asdict(FROM_DICT_BY_KIND[kind](r)))

    def _collection(self, kind: str) -> List[Dict[str, Any]]:
        if kind not in self._collections:
            raise KeyError(f"Unknown record kind: {kind}")
        return self._collections[kind]

    def _find(self, kind: str, record_id: str) -> Optional[Dict[str, Any]]:
        return next((r for r in self._collection(kind) if r['id'] == record_id), None)

    def _new_id(self, kind: str) -> str:
        existing = {r['id'] for r in self._collection(kind)}
        while True:
            new_id = create_id_with_prefix(ID_PREFIXES[kind])
            if new_id not in existing:
                return new_id

    def _record_activity(self, kind: str, action: str, record: Dict[str, Any]):
        self._activity.appendleft({
            'kind': kind,
            'action': action,
            'record_id': record['id'],
            'label': display_name(record),
            'at': utc_now_iso(),
        })

    def finish_loading(self):
        self.is_loading = False

    # --- generic CRUD ---

    def list(self, kind: str) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._collection(kind))

    def count(self, kind: str) -> int:
        return len(self._collection(kind))

    def get(self, kind: str, record_id: str) -> Optional[Dict[str, Any]]:
        record = self._find(kind, record_id)
        return copy.deepcopy(record) if record else None

    def require(self, kind: str, record_id: str) -> Dict[str, Any]:
        record = self.get(kind, record_id)
        if record is None:
            raise RecordNotFound(f"{KIND_LABELS[kind]} not found")
        return record

    def add(self, kind: str, data: Dict[str, Any]) -> Dict[str, Any]:
        coll = self._collection(kind)
        payload = {k: v for k, v in data.items() if k not in IMMUTABLE_FIELDS}
        payload['id'] = self._new_id(kind)
        payload['created_at'] = utc_now_iso()
        record = asdict(FROM_DICT_BY_KIND[kind](copy.deepcopy(payload)))
        coll.append(record)
        self._record_activity(kind, 'created', record)
        logger.info("Created %s %s", kind, record['id'])
        return copy.deepcopy(record)

    def update(self, kind: str, record_id: str, patch: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        record = self._find(kind, record_id)
        if record is None:
            logger.info("Update skipped, %s %s not found", kind, record_id)
            return None
        allowed = {f.name for f in fields(MODEL_BY_KIND[kind])} - IMMUTABLE_FIELDS
        record.update({k: copy.deepcopy(v) for k, v in patch.items() if k in allowed})
        if 'updated_at' in allowed:
            record['updated_at'] = utc_now_iso()
        self._record_activity(kind, 'updated', record)
        logger.info("Updated %s %s", kind, record_id)
        return copy.deepcopy(record)

    def delete(self, kind: str, record_id: str) -> bool:
        coll = self._collection(kind)
        record = self._find(kind, record_id)
        if record is None:
            return False
        coll.remove(record)
        self._record_activity(kind, 'deleted', record)
        logger.info("Deleted %s %s", kind, record_id)
        return True

    def recent_activity(self, limit: int = 5) -> List[Dict[str, Any]]:
        return list(self._activity)[:limit]

    # --- typed conveniences ---

    def get_admin(self, record_id):
        return self.get('admins', record_id)

    def add_admin(self, data):
        return self.add('admins', data)

    def update_admin(self, record_id, patch):
        return self.update('admins', record_id, patch)

    def delete_admin(self, record_id):
        return self.delete('admins', record_id)

    def get_candidate(self, record_id):
        return self.get('candidates', record_id)

    def add_candidate(self, data):
        return self.add('candidates', data)

    def update_candidate(self, record_id, patch):
        return self.update('candidates', record_id, patch)

    def delete_candidate(self, record_id):
        return self.delete('candidates', record_id)

    def get_company(self, record_id):
        return self.get('companies', record_id)

    def add_company(self, data):
        return self.add('companies', data)

    def update_company(self, record_id, patch):
        return self.update('companies', record_id, patch)

    def delete_company(self, record_id):
        return self.delete('companies', record_id)

    @property
    def admins(self):
        return self.list('admins')

    @property
    def candidates(self):
        return self.list('candidates')

    @property
    def companies(self):
        return self.list('companies')
