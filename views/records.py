"""Shared list and form page flow for the three record kinds.

Each entity module (`views.admins`, `views.candidates`, `views.companies`)
supplies its columns, detail rows, form component and validator; the search,
table, view/edit/delete actions and submit handling live here.
"""
import logging
import streamlit as st

from domain.constants import KIND_LABELS, STATUSES_BY_KIND
from services import search
from services.export import to_csv
from services.store import display_name
from ui import components
from ui.session import get_store, navigate, flash, show_flash

logger = logging.getLogger(__name__)


def render_list_page(kind: str, title: str, subtitle: str, columns, detail_rows,
                     search_placeholder: str = "Search..."):
    label = KIND_LABELS[kind]
    store = get_store()

    head, action = st.columns([4, 1])
    with head:
        st.header(title)
        st.caption(subtitle)
    if action.button(f"➕ Add {label}", key=f"{kind}_add", type="primary"):
        navigate(f"/{kind}/new")

    show_flash()

    c1, c2 = st.columns([3, 1])
    term = c1.text_input("Search", key=f"{kind}_search", placeholder=search_placeholder,
                         label_visibility="collapsed")
    status_options = ["All"] + STATUSES_BY_KIND[kind]
    status = c2.selectbox("Status", status_options, key=f"{kind}_status_filter",
                          format_func=str.capitalize, label_visibility="collapsed")

    records = search.filter_records(kind, store.list(kind), term,
                                    None if status == "All" else status)
    st.caption(f"{len(records)} of {store.count(kind)} {kind}")

    selected = components.render_table(records, columns, key=f"{kind}_table",
                                       empty_message=f"No {kind} found")

    # Pending delete confirmation comes first so it stays visible after selection changes
    confirmed = components.confirm_dialog(
        f"delete_{kind}", f"Delete {label}",
        f"Are you sure you want to delete this {label.lower()}? This action cannot be undone.")
    if confirmed:
        if store.delete(kind, confirmed['id']):
            flash(f"{label} {confirmed['name']} deleted")
        else:
            flash(f"{label} not found", 'error')
        st.rerun()

    if selected:
        b1, b2, b3 = st.columns(3)
        show_details = b1.toggle("View details", key=f"{kind}_view_{selected['id']}")
        if b2.button("✏️ Edit", key=f"{kind}_edit_{selected['id']}"):
            navigate(f"/{kind}/{selected['id']}")
        if b3.button("🗑️ Delete", key=f"{kind}_delete_{selected['id']}"):
            components.request_confirmation(f"delete_{kind}",
                                            {'id': selected['id'], 'name': display_name(selected)})
            st.rerun()
        if show_details:
            components.record_details(f"{label} details", selected, detail_rows)

    if records:
        st.download_button(f"Export {kind}.csv", to_csv(records), f"{kind}.csv", "text/csv",
                           key=f"{kind}_export")


def render_form_page(kind: str, params, form_component, validator):
    """
    Create when the route carries no id, edit otherwise.

    Unknown ids flash 'not found' and return to the list page.
    """
    label = KIND_LABELS[kind]
    store = get_store()
    record_id = (params or {}).get('id')
    is_new = record_id is None

    existing = {} if is_new else store.get(kind, record_id)
    if existing is None:
        flash(f"{label} not found", 'error')
        navigate(f"/{kind}")
        return

    key_prefix = f"{kind}_new" if is_new else f"{kind}_{record_id}"
    if st.button("← Back", key=f"{kind}_back"):
        navigate(f"/{kind}")

    st.header(f"Add New {label}" if is_new else f"Edit {label}")
    submitted = form_component.render(existing, key_prefix=key_prefix, is_new=is_new)
    if not submitted:
        return

    errors = validator(submitted)
    if errors:
        logger.info("Rejected %s form: %s", kind, sorted(errors))
        components.show_errors(errors, form_component.LABELS)
        return

    try:
        if is_new:
            store.add(kind, submitted)
            flash(f"{label} created successfully")
        else:
            if store.update(kind, record_id, submitted) is None:
                raise ValueError(f"Failed to update {label.lower()}")
            flash(f"{label} updated successfully")
    except ValueError as e:
        st.error(e)
        return

    navigate(f"/{kind}")
