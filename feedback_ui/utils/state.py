"""Session state management helpers.

Centralizing session_state keys here prevents typos and KeyError exceptions
when keys are read before Streamlit has run the code that sets them.
"""

import streamlit as st

KEY_NOTICE = "notice"
KEY_ERROR = "error"


def initialize_state() -> None:
    """Initialize all session state variables with default values.

    - notice: Success message from the last action (None if none)
    - error: Error message string if an API call failed (None if no error)
    """
    if KEY_NOTICE not in st.session_state:
        st.session_state[KEY_NOTICE] = None

    if KEY_ERROR not in st.session_state:
        st.session_state[KEY_ERROR] = None


def set_notice(message: str) -> None:
    st.session_state[KEY_NOTICE] = message
    st.session_state[KEY_ERROR] = None


def set_error(message: str) -> None:
    st.session_state[KEY_ERROR] = message
    st.session_state[KEY_NOTICE] = None
