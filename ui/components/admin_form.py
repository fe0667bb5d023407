import streamlit as st
from typing import Dict, Any

from domain.constants import ADMIN_ROLES, ADMIN_STATUSES
from services.validation import validate_profile_image
from utils.images import to_data_url
from .base import avatar
from .forms import index_of, show_errors

LABELS = {
    'full_name': 'Full name', 'email': 'Email address', 'role': 'Role',
    'whatsapp_number': 'WhatsApp number', 'employee_id': 'Employee ID',
    'designation': 'Designation', 'office_address': 'Office address',
    'profile_image': 'Profile image', 'status': 'Status',
}


def render(admin: Dict[str, Any], key_prefix: str, is_new: bool = False):
    """
    Renders the admin create/edit form.

    Args:
        admin (Dict[str, Any]): Existing values to populate the form with.
        key_prefix (str): A unique prefix for Streamlit widget keys.
        is_new (bool): Flag to adjust labels for the create context.

    Returns:
        Dict[str, Any]: The submitted admin data, or None if not submitted.
    """
    with st.form(f"form_{key_prefix}"):
        c1, c2 = st.columns(2)
        full_name = c1.text_input(LABELS['full_name'], value=admin.get('full_name', ''), key=f"{key_prefix}_full_name")
        role_options = [""] + ADMIN_ROLES
        role = c2.selectbox(LABELS['role'], role_options, index=index_of(role_options, admin.get('role', '')),
                            format_func=lambda r: r or "Select Role", key=f"{key_prefix}_role")
        email = c1.text_input(LABELS['email'], value=admin.get('email', ''), key=f"{key_prefix}_email")
        whatsapp = c2.text_input(LABELS['whatsapp_number'], value=admin.get('whatsapp_number', ''),
                                 key=f"{key_prefix}_whatsapp_number")
        employee_id = c1.text_input(LABELS['employee_id'], value=admin.get('employee_id', ''), key=f"{key_prefix}_employee_id")
        designation = c2.text_input(LABELS['designation'], value=admin.get('designation', ''), key=f"{key_prefix}_designation")
        office_address = st.text_area(LABELS['office_address'], value=admin.get('office_address', ''),
                                      key=f"{key_prefix}_office_address")
        status = st.selectbox(LABELS['status'], ADMIN_STATUSES, index=index_of(ADMIN_STATUSES, admin.get('status')),
                              format_func=str.capitalize, key=f"{key_prefix}_status")

        if admin.get('profile_image_url'):
            avatar(admin['profile_image_url'])
        upload = st.file_uploader(LABELS['profile_image'], type=["png", "jpg", "jpeg", "gif"],
                                  key=f"{key_prefix}_profile_image")

        submitted = st.form_submit_button("Create Admin" if is_new else "Save Changes", type="primary")

    if not submitted:
        return None

    profile_image_url = admin.get('profile_image_url')
    if upload is not None:
        image_errors = validate_profile_image(upload.size)
        if image_errors:
            show_errors(image_errors, LABELS)
            return None
        profile_image_url = to_data_url(upload.getvalue(), upload.name, upload.type)

    return {
        'full_name': full_name.strip(),
        'email': email.strip(),
        'role': role,
        'whatsapp_number': whatsapp.strip(),
        'employee_id': employee_id.strip(),
        'designation': designation.strip(),
        'office_address': office_address.strip(),
        'profile_image_url': profile_image_url,
        'status': status,
    }
