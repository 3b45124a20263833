import logging
import streamlit as st
from utils.constants import RADIUS_OPTIONS_M, Label
from utils.format_utils import format_radius
from ui.map_view import render_explore_map
from ui.net_action import net_action
from ui.question_card import render_question_card
from ui.Page import Page
from workflows.explore_workflow import ExploreWorkflow

logger = logging.getLogger(__name__)


class ExplorePage(Page):
    """Questions pinned near the user's location."""

    title = "Nearby Questions"

    def __init__(self, explore_workflow: ExploreWorkflow):
        self.explore_workflow = explore_workflow

    def _load_nearby(self):
        with net_action("Scanning nearby…"):
            st.session_state.nearby_questions = self.explore_workflow.run(
                {
                    "location": st.session_state.location,
                    "radius_m": st.session_state.search_radius,
                }
            )

    def _on_radius_change(self):
        st.session_state.nearby_questions = None

    def render(self):
        self.render_header()
        location = st.session_state.location
        if not location:
            st.info("Set your location in the sidebar to discover questions nearby.")
            return

        try:
            col1, col2 = st.columns([4, 1])
            with col1:
                st.session_state.search_radius = st.segmented_control(
                    Label.RADIUS.value,
                    RADIUS_OPTIONS_M,
                    default=st.session_state.search_radius,
                    format_func=format_radius,
                    on_change=self._on_radius_change,
                    key="radius_control",
                ) or st.session_state.search_radius
            with col2:
                refresh = st.button("↻ Refresh", use_container_width=True)

            if refresh or st.session_state.nearby_questions is None:
                self._load_nearby()

            nearby = st.session_state.nearby_questions
            render_explore_map(
                location["lat"], location["lng"], st.session_state.search_radius, nearby
            )
            if not nearby:
                st.info("No questions nearby yet. Be the first! Create a question and pin it to your location.")
                return
            st.caption(
                f"{len(nearby)} question{'s' if len(nearby) != 1 else ''} within "
                f"{format_radius(st.session_state.search_radius)}"
            )
            for question in nearby:
                render_question_card(question)
        except Exception as e:
            logger.exception("Explore page failed")
            st.error(str(e))
