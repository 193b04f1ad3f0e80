"""Streamlit entrypoint for the feedback UI.

Run:
  streamlit run feedback_ui/app.py
"""

from __future__ import annotations

from pathlib import Path
import sys

import streamlit as st

# Add repo root to sys.path BEFORE importing feedback_ui modules
_script_dir = Path(__file__).resolve().parent
_repo_root = _script_dir.parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

from feedback_ui.components.feedback_form import render_feedback_form
from feedback_ui.components.feedback_list import render_feedback_list
from feedback_ui.services.api_client import (
    APIError,
    create_feedback,
    delete_feedback,
    list_feedback,
)
from feedback_ui.utils.state import KEY_ERROR, KEY_NOTICE, initialize_state, set_error, set_notice


def main() -> None:
    st.set_page_config(page_title="Product Feedback", layout="centered")
    st.title("Product Feedback")

    initialize_state()

    submission = render_feedback_form()
    if submission:
        rating, comment = submission
        try:
            record = create_feedback(rating=rating, comment=comment)
            set_notice(f"Thanks! Feedback #{record['id']} saved.")
        except APIError as exc:
            set_error(str(exc))

    if st.session_state[KEY_NOTICE]:
        st.success(st.session_state[KEY_NOTICE])
    if st.session_state[KEY_ERROR]:
        st.error(st.session_state[KEY_ERROR])

    try:
        collection = list_feedback()
    except APIError as exc:
        st.error(str(exc))
        return

    st.subheader(f"All feedback ({collection['count']})")
    to_delete = render_feedback_list(collection["feedback"])
    if to_delete is not None:
        try:
            delete_feedback(to_delete)
            set_notice(f"Feedback #{to_delete} deleted.")
        except APIError as exc:
            set_error(str(exc))
        st.rerun()


if __name__ == "__main__":
    main()
