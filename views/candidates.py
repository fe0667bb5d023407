from services.validation import validate_candidate
from ui.components import candidate_form, status_label
from views.records import render_list_page, render_form_page

COLUMNS = [
    ('name', 'Name', lambda c: f"{c.get('name', '')} ({c.get('location') or 'Not specified'})"),
    ('email', 'Contact', lambda c: f"{c.get('email', '')} · {c.get('phone', '')}"),
    ('status', 'Status', lambda c: status_label(c.get('status'))),
    ('skills', 'Skills', None),
]

DETAIL_ROWS = [
    ('name', 'Name'),
    ('email', 'Email'),
    ('phone', 'Phone'),
    ('location', 'Location'),
    ('status', 'Status'),
    ('skills', 'Skills'),
    ('created_at', 'Created At'),
    ('updated_at', 'Updated At'),
]


def list_view(params=None):
    render_list_page('candidates', "Candidates", "Manage candidate profiles and application status",
                     COLUMNS, DETAIL_ROWS, search_placeholder="Search by name, email, location or skill...")


def form_view(params=None):
    render_form_page('candidates', params, candidate_form, validate_candidate)
