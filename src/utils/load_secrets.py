import os
import logging
import streamlit as st

logger = logging.getLogger(__name__)


def load_env_vars():
    if not st.secrets.load_if_toml_exists():
        logger.debug("No secrets.toml found, using process environment only")
        return
    for k, v in st.secrets.items():
        if isinstance(v, str):
            os.environ.setdefault(k, v)
