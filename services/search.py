"""Client-side search and status filtering for the list pages."""
from typing import Any, Callable, Dict, Iterable, List, Optional


def _contains(value: Any, term: str) -> bool:
    if not value:
        return False
    if isinstance(value, (list, tuple)):
        return any(_contains(v, term) for v in value)
    return term in str(value).lower()


def admin_matches(admin: Dict[str, Any], term: str) -> bool:
    # every field except the embedded image data is searchable
    return any(_contains(v, term) for k, v in admin.items() if k != 'profile_image_url')


def candidate_matches(candidate: Dict[str, Any], term: str) -> bool:
    return (_contains(candidate.get('name'), term)
            or _contains(candidate.get('email'), term)
            or _contains(candidate.get('location'), term)
            or _contains(candidate.get('skills'), term))


def company_matches(company: Dict[str, Any], term: str) -> bool:
    return (_contains(company.get('name'), term)
            or _contains(company.get('industry'), term)
            or _contains(company.get('website'), term)
            or _contains(company.get('phone'), term))


MATCHERS: Dict[str, Callable[[Dict[str, Any], str], bool]] = {
    'admins': admin_matches,
    'candidates': candidate_matches,
    'companies': company_matches,
}


def filter_records(kind: str, records: Iterable[Dict[str, Any]], search: str = '',
                   status: Optional[str] = None) -> List[Dict[str, Any]]:
    """Case-insensitive substring search, then an optional exact status filter."""
    matcher = MATCHERS[kind]
    term = (search or '').strip().lower()
    result = []
    for r in records:
        if term and not matcher(r, term):
            continue
        if status and r.get('status') != status:
            continue
        result.append(r)
    return result
