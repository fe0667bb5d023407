"""
This service module computes the figures shown on the dashboard page:
stat cards, status breakdowns and the recent activity feed. It keeps the view
layer focused on rendering.
"""
from collections import Counter

from domain.constants import KINDS, KIND_LABELS, STATUSES_BY_KIND
from services.store import DataStore


def get_stats(store: DataStore):
    """Counts of active records per collection."""
    admins = store.list('admins')
    candidates = store.list('candidates')
    companies = store.list('companies')
    return {
        "active_admins": sum(1 for a in admins if a.get('status') == 'active'),
        "active_candidates": sum(1 for c in candidates if c.get('status') != 'rejected'),
        "active_companies": sum(1 for c in companies if c.get('status') == 'active'),
        "total_admins": len(admins),
        "total_candidates": len(candidates),
        "total_companies": len(companies),
    }


def get_status_overview(store: DataStore):
    """Returns {kind: {status: count}} including zero counts for every known status."""
    overview = {}
    for kind in KINDS:
        counts = Counter(r.get('status') for r in store.list(kind))
        overview[kind] = {s: counts.get(s, 0) for s in STATUSES_BY_KIND[kind]}
    return overview


def describe_activity(entry) -> str:
    """Human readable line for a recent activity entry."""
    label = KIND_LABELS.get(entry['kind'], entry['kind'])
    return f"{label} {entry['label']} {entry['action']}"


def get_recent_activity(store: DataStore, limit=5):
    return [{**e, 'message': describe_activity(e)} for e in store.recent_activity(limit)]
