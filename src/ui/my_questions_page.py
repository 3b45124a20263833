import logging
import streamlit as st
from clients.question_store import QuestionStore
from ui.net_action import net_action
from ui.question_card import render_question_card
from ui.Page import Page

logger = logging.getLogger(__name__)


class MyQuestionsPage(Page):
    """Questions the signed-in user has published."""

    title = "My Questions"

    def __init__(self, question_store: QuestionStore):
        self.question_store = question_store

    def render(self):
        username = st.session_state.username
        self.render_header(f"Questions you've published as @{username}")
        st.button("↻ Refresh")
        try:
            with net_action("Loading your questions…"):
                questions = self.question_store.list_by_user(username)
        except Exception as e:
            logger.exception("Loading published questions failed")
            st.error(str(e))
            return

        if not questions:
            st.info("No questions yet. Create and pin your first question to see it here!")
            return
        for question in questions:
            render_question_card(question, answerable=False)
        st.caption(
            f"{len(questions)} question{'s' if len(questions) != 1 else ''} published"
        )
