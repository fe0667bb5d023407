import streamlit as st
from typing import Dict, Any

from domain.constants import COMPANY_SIZES, COMPANY_STATUSES, INDUSTRIES
from .forms import index_of

LABELS = {
    'name': 'Company name', 'industry': 'Industry', 'founded': 'Founded',
    'website': 'Website', 'email': 'Email', 'phone': 'Phone',
    'address': 'Address', 'size': 'Company size', 'status': 'Status',
}


def render(company: Dict[str, Any], key_prefix: str, is_new: bool = False):
    """Renders the company create/edit form. Returns submitted data or None."""
    with st.form(f"form_{key_prefix}"):
        c1, c2 = st.columns(2)
        name = c1.text_input(LABELS['name'], value=company.get('name', ''), key=f"{key_prefix}_name")
        industry_options = [""] + INDUSTRIES
        current_industry = company.get('industry', '')
        if current_industry and current_industry not in industry_options:
            industry_options.append(current_industry)
        industry = c2.selectbox(LABELS['industry'], industry_options,
                                index=index_of(industry_options, current_industry),
                                format_func=lambda i: i or "Select Industry", key=f"{key_prefix}_industry")
        founded = c1.text_input(LABELS['founded'], value=company.get('founded') or '', key=f"{key_prefix}_founded")
        website = c2.text_input(LABELS['website'], value=company.get('website') or '',
                                placeholder="https://", key=f"{key_prefix}_website")
        email = c1.text_input(LABELS['email'], value=company.get('email') or '', key=f"{key_prefix}_email")
        phone = c2.text_input(LABELS['phone'], value=company.get('phone') or '', key=f"{key_prefix}_phone")
        address = st.text_area(LABELS['address'], value=company.get('address') or '', key=f"{key_prefix}_address")
        size = c1.selectbox(LABELS['size'], COMPANY_SIZES, index=index_of(COMPANY_SIZES, company.get('size')),
                            format_func=lambda s: f"{s} employees", key=f"{key_prefix}_size")
        status = c2.selectbox(LABELS['status'], COMPANY_STATUSES, index=index_of(COMPANY_STATUSES, company.get('status')),
                              format_func=str.capitalize, key=f"{key_prefix}_status")

        submitted = st.form_submit_button("Create Company" if is_new else "Save Changes", type="primary")

    if not submitted:
        return None

    # Optional fields are stored as None when left blank
    return {
        'name': name.strip(),
        'industry': industry,
        'founded': founded.strip() or None,
        'website': website.strip() or None,
        'email': email.strip() or None,
        'phone': phone.strip() or None,
        'address': address.strip() or None,
        'size': size,
        'status': status,
    }
