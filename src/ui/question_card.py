import base64
import html
import logging
import streamlit as st
from models.models import GeneratedQuestion, GeoQuestion, ScoredCandidate
from utils.constants import Label, find_difficulty, find_rarity, find_subject
from utils.format_utils import avatar_color, format_distance, time_ago
from utils.scoring import grade_answer

logger = logging.getLogger(__name__)

OPTION_LETTERS = "ABCDEF"


def rarity_badge(rarity_id: str, points: int) -> str:
    tier = find_rarity(rarity_id) or {"label": rarity_id, "color": "#667085", "icon": ""}
    return (
        f"<span class='ev-badge' style='background:{tier['color']}'>"
        f"{html.escape(tier['icon'])} {html.escape(tier['label'])} · {points} pts</span>"
    )


def subject_badge(subject_id: str) -> str:
    subject = find_subject(subject_id) or {"label": subject_id, "icon": "", "color": "#1A1A2E", "bg": "#F4F5F7"}
    return (
        f"<span class='ev-badge' style='background:{subject['bg']};color:{subject['color']}'>"
        f"{html.escape(subject['icon'])} {html.escape(subject['label'])}</span>"
    )


def user_badge(username: str) -> str:
    return (
        f"<span class='ev-avatar' style='background:{avatar_color(username)}'>"
        f"{html.escape(username[:1].upper())}</span> @{html.escape(username)}"
    )


def _format_option(question: GeneratedQuestion, index: int) -> str:
    return f"{OPTION_LETTERS[index]}. {question.options[index]}"


def render_generated_question(
    question: GeneratedQuestion, subject_id: str, rarity_id: str, points: int
):
    """Preview of a freshly generated question, answer included."""
    with st.container(border=True):
        st.markdown(
            subject_badge(subject_id) + " " + rarity_badge(rarity_id, points),
            unsafe_allow_html=True,
        )
        st.caption("Image Analysis")
        st.write(question.image_analysis)
        st.subheader(question.question)
        for i in range(len(question.options)):
            marker = "✅" if i == question.correct_index else "▫️"
            st.markdown(f"{marker} {_format_option(question, i)}")
        with st.expander("💡 Hint"):
            st.write(question.hint)
        col1, col2 = st.columns(2)
        with col1:
            st.caption("Learning Objective")
            st.write(question.learning_objective)
        with col2:
            st.caption("Image Connection")
            st.write(question.why_this_image)
        st.caption("Explanation")
        st.write(question.explanation)


def _submit_answer(question: GeoQuestion, widget_key: str):
    selected = st.session_state.get(widget_key)
    if selected is None or question.id in st.session_state.answers:
        return
    result = grade_answer(question, selected)
    st.session_state.answers[question.id] = selected
    st.session_state.score += result.points_awarded
    logger.info(
        f"@{st.session_state.username} answered {question.id}: "
        f"{'correct' if result.correct else 'wrong'}"
    )


def _render_answer_form(question: GeoQuestion):
    widget_key = f"answer_{question.id}"
    answered = st.session_state.answers.get(question.id)
    if answered is None:
        st.radio(
            "Your answer",
            list(range(len(question.options))),
            format_func=lambda i: _format_option(question, i),
            index=None,
            key=widget_key,
        )
        st.button(
            Label.SUBMIT_ANSWER_BUTTON.value,
            key=f"submit_{question.id}",
            on_click=_submit_answer,
            args=(question, widget_key),
        )
        return

    result = grade_answer(question, answered)
    if result.correct:
        st.success(f"Correct! +{result.points_awarded} points")
    else:
        st.error(f"Not quite. The answer was {_format_option(question, result.correct_index)}")
    st.write(result.explanation)


def render_question_card(question: GeoQuestion, answerable: bool = True):
    with st.container(border=True):
        if question.thumbnail:
            thumb_col, body = st.columns([1, 3])
            with thumb_col:
                st.image(base64.b64decode(question.thumbnail))
        else:
            body = st.container()
        with body:
            meta = subject_badge(question.subject) + " " + rarity_badge(question.rarity, question.points)
            if isinstance(question, ScoredCandidate):
                meta += f" <small>{format_distance(question.distance_m)}</small>"
            else:
                difficulty = find_difficulty(question.difficulty) or {"label": question.difficulty}
                meta += f" <small>{html.escape(difficulty['label'])}</small>"
            st.markdown(meta, unsafe_allow_html=True)
            st.markdown(f"**{question.question}**")
            st.markdown(
                f"{user_badge(question.username)} · {time_ago(question.created_at)}",
                unsafe_allow_html=True,
            )
        if not answerable:
            return
        with st.expander("Answer this question"):
            st.caption("What's in the image")
            st.write(question.image_analysis)
            with st.expander("💡 Need a hint?"):
                st.write(question.hint)
            _render_answer_form(question)
