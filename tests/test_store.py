import pytest

from demo.mock_data import generate_mock_data
from services.store import DataStore, RecordNotFound


def make_store():
    return DataStore(seed={
        'admins': [{'id': 'a1', 'full_name': 'Ada Admin', 'email': 'ada@example.com', 'role': 'Admin',
                    'employee_id': 'E1', 'designation': 'Lead', 'status': 'active'}],
        'candidates': [{'id': 'c1', 'name': 'Cara Candidate', 'email': 'cara@mail.com', 'phone': '+1 555',
                        'skills': ['Python'], 'status': 'new'}],
        'companies': [],
    })


def test_seeded_store_starts_loading_and_lists_records():
    store = make_store()
    assert store.is_loading is True
    store.finish_loading()
    assert store.is_loading is False
    assert [a['id'] for a in store.admins] == ['a1']
    assert store.companies == []
    # created_at filled by the converter
    assert store.get_admin('a1')['created_at'].endswith('Z')


def test_add_assigns_fresh_id_and_created_at_ignoring_input():
    store = make_store()
    rec = store.add_company({'id': 'forced', 'created_at': 'yesterday', 'name': 'Acme', 'industry': 'Retail'})
    assert rec['id'] != 'forced'
    assert rec['id'].startswith('comp_')
    assert rec['created_at'] != 'yesterday'
    assert store.get_company(rec['id'])['name'] == 'Acme'
    assert store.count('companies') == 1


def test_add_generates_unique_ids():
    store = DataStore()
    ids = {store.add('candidates', {'name': f'C{i}'})['id'] for i in range(50)}
    assert len(ids) == 50


def test_update_merges_and_keeps_identity_fields():
    store = make_store()
    original = store.get_admin('a1')
    updated = store.update_admin('a1', {'status': 'inactive', 'id': 'x', 'created_at': 'never', 'bogus': 1})
    assert updated['status'] == 'inactive'
    assert updated['id'] == 'a1'
    assert updated['created_at'] == original['created_at']
    assert 'bogus' not in updated
    assert updated['full_name'] == 'Ada Admin'


def test_update_candidate_stamps_updated_at():
    store = make_store()
    assert store.get_candidate('c1')['updated_at'] is None
    updated = store.update_candidate('c1', {'status': 'interview'})
    assert updated['updated_at'] is not None


def test_update_unknown_returns_none():
    store = make_store()
    assert store.update_company('missing', {'name': 'X'}) is None


def test_delete_reports_whether_removed():
    store = make_store()
    assert store.delete_candidate('c1') is True
    assert store.get_candidate('c1') is None
    assert store.delete_candidate('c1') is False


def test_returned_records_are_copies():
    store = make_store()
    rec = store.get_candidate('c1')
    rec['skills'].append('Hacking')
    assert store.get_candidate('c1')['skills'] == ['Python']


def test_unknown_kind_raises_key_error():
    store = make_store()
    with pytest.raises(KeyError):
        store.list('robots')


def test_require_raises_record_not_found():
    store = make_store()
    with pytest.raises(RecordNotFound):
        store.require('admins', 'nope')
    assert store.require('admins', 'a1')['id'] == 'a1'


def test_recent_activity_is_newest_first_and_bounded():
    store = DataStore(activity_limit=3)
    a = store.add_admin({'full_name': 'First'})
    store.update_admin(a['id'], {'role': 'Moderator'})
    c = store.add_candidate({'name': 'Second'})
    store.delete_candidate(c['id'])
    feed = store.recent_activity(limit=10)
    assert len(feed) == 3
    assert [e['action'] for e in feed] == ['deleted', 'created', 'updated']
    assert feed[0]['label'] == 'Second'


def test_store_accepts_generated_mock_data():
    store = DataStore(seed=generate_mock_data(n=4, seed=7))
    assert store.count('admins') == 4
    assert store.count('candidates') == 4
    assert store.count('companies') == 4
