"""Feedback submission form component.

This component uses st.form so a submission is sent only when the user
clicks "Submit", not on every widget change.
"""

from typing import Optional, Tuple

import streamlit as st


def render_feedback_form() -> Optional[Tuple[int, str]]:
    """Render the rating + comment form.

    Returns:
        (rating, comment) if the form was submitted with a non-empty comment,
        None otherwise.
    """
    with st.form(key="feedback_form", clear_on_submit=True):
        rating = st.slider("Rating", min_value=1, max_value=5, value=5, step=1)
        comment = st.text_area(
            "Comment",
            placeholder="What did you think?",
            key="comment_input",
        )
        submitted = st.form_submit_button(label="Submit", type="primary")

    if not submitted:
        return None

    if not comment or not comment.strip():
        st.warning("Please write a comment before submitting.")
        return None

    return rating, comment.strip()
