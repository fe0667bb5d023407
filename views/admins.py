from services.validation import validate_admin
from ui.components import admin_form, status_label
from views.records import render_list_page, render_form_page

COLUMNS = [
    ('full_name', 'Profile', lambda a: f"{a.get('full_name', '')} <{a.get('email', '')}>"),
    ('role', 'Role', None),
    ('whatsapp_number', 'Contact', lambda a: a.get('whatsapp_number') or 'N/A'),
    ('employee_id', 'Employee Info', lambda a: f"{a.get('employee_id', '')} · {a.get('designation', '')}"),
    ('status', 'Status', lambda a: status_label(a.get('status'))),
]

DETAIL_ROWS = [
    ('full_name', 'Name'),
    ('email', 'Email'),
    ('role', 'Role'),
    ('status', 'Status'),
    ('whatsapp_number', 'WhatsApp'),
    ('employee_id', 'Employee ID'),
    ('designation', 'Designation'),
    ('office_address', 'Office Address'),
    ('created_at', 'Created At'),
]


def list_view(params=None):
    render_list_page('admins', "Admins", "Manage administrator accounts and permissions",
                     COLUMNS, DETAIL_ROWS, search_placeholder="Search admins...")


def form_view(params=None):
    render_form_page('admins', params, admin_form, validate_admin)
