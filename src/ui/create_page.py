import logging
import streamlit as st
from config.config import SETTINGS
from utils.constants import DIFFICULTY_LEVELS, SUBJECTS, Keys, Label, find_subject
from utils.image_utils import to_data_url
from utils.validation import validate_image_upload
from ui.net_action import net_action
from ui.question_card import render_generated_question
from ui.state import reset_draft
from ui.Page import Page
from workflows.publish_question_workflow import PublishQuestionWorkflow
from workflows.question_generation_workflow import QuestionGenerationWorkflow

logger = logging.getLogger(__name__)


class CreatePage(Page):
    """Upload a photo, generate a question from it and pin it to the map."""

    title = "Create a Question"

    def __init__(
        self,
        question_generation_workflow: QuestionGenerationWorkflow,
        publish_question_workflow: PublishQuestionWorkflow,
    ):
        self.question_generation_workflow = question_generation_workflow
        self.publish_question_workflow = publish_question_workflow

    def _on_upload(self):
        st.session_state.draft = None
        st.session_state.published_id = None
        file = st.session_state.get(Keys.FILE_UPLOAD.value)
        if file is None:
            st.session_state.uploaded_image = None
            return
        data = file.getvalue()
        try:
            validate_image_upload(file.type, len(data), SETTINGS.max_upload_mb)
        except ValueError as e:
            st.session_state.uploaded_image = None
            st.session_state.upload_error = str(e)
            return
        st.session_state.upload_error = None
        st.session_state.uploaded_image = {
            "name": file.name,
            "type": file.type or "image/jpeg",
            "data": data,
        }

    def _generate(self):
        image = st.session_state.uploaded_image
        with net_action("Analyzing image & crafting your question…"):
            output = self.question_generation_workflow.run(
                {
                    "image_b64": to_data_url(image["data"], image["type"]),
                    "subject": st.session_state.subject,
                    "difficulty": st.session_state.difficulty,
                }
            )
        st.session_state.draft = {
            "question": output["question"],
            "rarity": output["rarity"],
            "points": output["points"],
            "subject": st.session_state.subject,
            "difficulty": st.session_state.difficulty,
        }
        st.session_state.published_id = None

    def _publish(self):
        draft = st.session_state.draft
        with net_action("Pinning your question…"):
            published = self.publish_question_workflow.run(
                {
                    **draft,
                    "image_bytes": st.session_state.uploaded_image["data"],
                    "location": st.session_state.location,
                    "username": st.session_state.username,
                }
            )
        st.session_state.published_id = published.id
        st.session_state.nearby_questions = None

    def _render_inputs(self):
        st.file_uploader(
            Label.FILE_UPLOAD.value,
            type=["jpg", "jpeg", "png", "gif", "webp"],
            key=Keys.FILE_UPLOAD.value,
            on_change=self._on_upload,
        )
        if st.session_state.get("upload_error"):
            st.error(st.session_state.upload_error)
        if st.session_state.uploaded_image:
            st.image(st.session_state.uploaded_image["data"], width=320)

        subject_ids = [s["id"] for s in SUBJECTS]
        st.session_state.subject = st.radio(
            Label.SUBJECT.value,
            subject_ids,
            index=(
                subject_ids.index(st.session_state.subject)
                if st.session_state.subject
                else None
            ),
            format_func=lambda x: f"{find_subject(x)['icon']} {find_subject(x)['label']}",
            horizontal=True,
            key=Keys.SUBJECT.value,
        )
        difficulty_ids = [d["id"] for d in DIFFICULTY_LEVELS]
        st.session_state.difficulty = st.radio(
            Label.DIFFICULTY.value,
            difficulty_ids,
            index=difficulty_ids.index(st.session_state.difficulty),
            format_func=lambda x: next(
                f"{d['label']} ({d['ages']})" for d in DIFFICULTY_LEVELS if d["id"] == x
            ),
            horizontal=True,
            key=Keys.DIFFICULTY.value,
        )

    def _render_draft(self):
        draft = st.session_state.draft
        if not draft:
            st.info("Upload an image, select a subject & difficulty, then hit Generate.")
            return

        render_generated_question(
            draft["question"], draft["subject"], draft["rarity"], draft["points"]
        )
        col1, col2 = st.columns(2)
        with col1:
            regenerate = st.button(Label.REGENERATE_BUTTON.value, icon="🔄")
        with col2:
            if st.session_state.published_id:
                st.success(f"Published as @{st.session_state.username}")
                publish = False
            else:
                publish = st.button(
                    Label.PUBLISH_BUTTON.value,
                    type="primary",
                    icon="📍",
                    disabled=st.session_state.location is None,
                    help="Set your location in the sidebar first.",
                )
        if regenerate:
            self._generate()
            st.rerun()
        if publish:
            self._publish()
            st.rerun()

    def render(self):
        self.render_header("Turn any photo into a geo-pinned learning challenge.")
        try:
            self._render_inputs()
            can_generate = bool(
                st.session_state.uploaded_image and st.session_state.subject
            )
            col1, col2 = st.columns([3, 1])
            with col1:
                generate = st.button(
                    Label.GENERATE_BUTTON.value,
                    type="primary",
                    disabled=not can_generate,
                    use_container_width=True,
                )
            with col2:
                st.button("Reset", on_click=reset_draft, use_container_width=True)
            if generate:
                self._generate()
                st.rerun()
            self._render_draft()
        except Exception as e:
            logger.exception("Create page action failed")
            st.error(str(e))
