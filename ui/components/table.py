"""Generic record table shared by the list pages."""
from typing import Any, Callable, Dict, List, Optional, Tuple

import pandas as pd
import streamlit as st

# (field, header, formatter) - formatter receives the whole record
Column = Tuple[str, str, Optional[Callable[[Dict[str, Any]], Any]]]


def _cell(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return "" if value is None else value


def build_frame(records: List[Dict[str, Any]], columns: List[Column]) -> pd.DataFrame:
    """Project records onto the table columns, one row per record, order kept."""
    rows = []
    for r in records:
        rows.append({header: _cell(fmt(r) if fmt else r.get(field))
                     for field, header, fmt in columns})
    return pd.DataFrame(rows, columns=[header for _, header, _ in columns])


def render_table(records: List[Dict[str, Any]], columns: List[Column], key: str,
                 empty_message: str = "No data available") -> Optional[Dict[str, Any]]:
    """
    Renders records as a selectable table.

    Returns:
        The record of the selected row, or None.
    """
    if not records:
        st.caption(empty_message)
        return None
    event = st.dataframe(
        build_frame(records, columns),
        hide_index=True,
        width="stretch",
        on_select="rerun",
        selection_mode="single-row",
        key=key,
    )
    rows = event.selection.rows if event is not None else []
    if rows and rows[0] < len(records):
        return records[rows[0]]
    return None
