from services.validation import validate_company
from ui.components import company_form, status_label
from views.records import render_list_page, render_form_page

COLUMNS = [
    ('name', 'Company', lambda c: f"{c.get('name', '')} ({c.get('industry') or 'N/A'})"),
    ('founded', 'Founded', lambda c: c.get('founded') or 'N/A'),
    ('website', 'Website', lambda c: c.get('website') or 'N/A'),
    ('size', 'Size', lambda c: f"{c.get('size', '')} employees"),
    ('status', 'Status', lambda c: status_label(c.get('status'))),
    ('email', 'Contact', lambda c: c.get('email') or c.get('phone') or 'N/A'),
]

DETAIL_ROWS = [
    ('name', 'Name'),
    ('industry', 'Industry'),
    ('founded', 'Founded'),
    ('website', 'Website'),
    ('email', 'Email'),
    ('phone', 'Phone'),
    ('address', 'Address'),
    ('size', 'Size'),
    ('status', 'Status'),
    ('created_at', 'Created At'),
]


def list_view(params=None):
    render_list_page('companies', "Companies", "Manage company profiles and partnerships",
                     COLUMNS, DETAIL_ROWS, search_placeholder="Search by name, industry, website or phone...")


def form_view(params=None):
    render_form_page('companies', params, company_form, validate_company)
