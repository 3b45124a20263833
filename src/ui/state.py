import streamlit as st
from config.config import SETTINGS
from utils.constants import STATE_KEYS


def ensure_state():
    """Ensure default state values exist for this browser session."""
    defaults = {
        "username": None,
        "location": None,
        "uploaded_image": None,
        "subject": None,
        "difficulty": "middle",
        "draft": None,
        "published_id": None,
        "search_radius": SETTINGS.default_radius_m,
        "nearby_questions": None,
        "handled_map_click": None,
        "answers": {},
        "score": 0,
    }
    for key in STATE_KEYS:
        st.session_state.setdefault(key, defaults[key])


def reset_draft():
    """Forget the current upload and generated question."""
    st.session_state.update(
        {
            "uploaded_image": None,
            "draft": None,
            "published_id": None,
        }
    )


def sign_out():
    for key in STATE_KEYS:
        st.session_state.pop(key, None)
    ensure_state()
