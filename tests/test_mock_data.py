from demo.mock_data import generate_mock_data
from domain.constants import ADMIN_ROLES, CANDIDATE_STATUSES, COMPANY_SIZES
from services.validation import validate_admin, validate_candidate, validate_company


def test_seeded_generation_is_reproducible():
    first = generate_mock_data(n=5, seed=42)
    second = generate_mock_data(n=5, seed=42)
    strip = lambda recs: [{k: v for k, v in r.items() if k != 'created_at'} for r in recs]
    for kind in ('admins', 'candidates', 'companies'):
        assert strip(first[kind]) == strip(second[kind])


def test_generated_records_pass_form_validation():
    data = generate_mock_data(n=6, seed=1)
    assert all(validate_admin(a) == {} for a in data['admins'])
    assert all(validate_candidate(c) == {} for c in data['candidates'])
    assert all(validate_company(c) == {} for c in data['companies'])


def test_generated_values_use_known_options():
    data = generate_mock_data(n=6, seed=3)
    assert {a['role'] for a in data['admins']} <= set(ADMIN_ROLES)
    assert {c['status'] for c in data['candidates']} <= set(CANDIDATE_STATUSES)
    assert {c['size'] for c in data['companies']} <= set(COMPANY_SIZES)
    assert len({a['id'] for a in data['admins']}) == 6
