import logging
import streamlit as st
from utils.constants import Keys, Label
from utils.validation import validate_username

logger = logging.getLogger(__name__)


def _sign_in():
    try:
        username = validate_username(st.session_state.get(Keys.USERNAME.value))
    except ValueError as e:
        st.session_state.sign_in_error = str(e)
        return
    st.session_state.sign_in_error = None
    st.session_state.username = username
    logger.info(f"Signed in as @{username}")


def authenticate() -> bool:
    """Username sign-in. Returns True once the session has a user."""
    if st.session_state.get("username"):
        return True

    st.title("EduVision")
    st.caption("AI Questions · Geo-Pinned Learning")
    st.subheader("Welcome! Choose a username")
    st.write("Pick any username to get started. No password needed.")
    with st.form("sign_in_form"):
        st.text_input(
            Label.USERNAME.value,
            key=Keys.USERNAME.value,
            placeholder="your_username",
            max_chars=20,
        )
        st.form_submit_button(
            Label.SIGN_IN_BUTTON.value, type="primary", on_click=_sign_in
        )
    if st.session_state.get("sign_in_error"):
        st.error(st.session_state.sign_in_error)
    st.caption("Your questions will be saved & visible to others nearby.")
    return False
