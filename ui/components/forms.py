import streamlit as st
from typing import Dict


def show_errors(errors: Dict[str, str], labels: Dict[str, str]):
    """Lists validation errors under the form, one line per field."""
    if not errors:
        return
    lines = [f"- **{labels.get(f, f)}**: {msg}" for f, msg in errors.items()]
    st.error("Please fix the following:\n" + "\n".join(lines))


def index_of(options, value, default=0):
    return options.index(value) if value in options else default
