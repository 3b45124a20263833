import streamlit as st
from abc import ABC, abstractmethod


class Page(ABC):
    """Abstract base class for UI pages."""

    title: str = ""

    def render_header(self, caption: str | None = None):
        st.title(self.title)
        if caption:
            st.caption(caption)

    @abstractmethod
    def render(self):
        pass
