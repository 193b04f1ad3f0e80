"""Feedback list component: one expander per record with a delete button."""

from typing import Any, Dict, List, Optional

import streamlit as st

from feedback_ui.utils.formatting import format_feedback_label, truncate


def render_feedback_list(records: List[Dict[str, Any]]) -> Optional[int]:
    """Display records in insertion order.

    Returns:
        The id whose delete button was clicked, or None.
    """
    if not records:
        st.info("No feedback yet.")
        return None

    to_delete = None
    for record in records:
        with st.expander(format_feedback_label(record), expanded=False):
            st.write(record.get("comment", ""))
            st.caption(f"Client: {truncate(record.get('clientInfo', 'Unknown'), 80)}")
            if st.button("Delete", key=f"delete_{record.get('id')}"):
                to_delete = record.get("id")

    return to_delete
