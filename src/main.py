import streamlit as st
from ui.auth import authenticate
from ui.location import render_location_picker
from ui.state import ensure_state, sign_out
from utils.constants import Label, Pages
from utils.logging import setup_logging
from utils.rarity import load_default_tiers
from utils.styling import load_custom_css
from di.container import Container


@st.cache_resource
def get_container() -> Container:
    load_default_tiers()
    return Container()


def main():
    st.set_page_config(page_title="EduVision", page_icon="🧭", layout="wide")
    setup_logging()
    container = get_container()
    ensure_state()
    load_custom_css()

    if not authenticate():
        return

    st.sidebar.title("EduVision")
    st.sidebar.caption(f"Signed in as @{st.session_state.username}")
    st.sidebar.metric("Score", f"{st.session_state.score} pts")
    selection = st.sidebar.radio(
        "Navigation",
        (
            Pages.CREATE.value["key"],
            Pages.EXPLORE.value["key"],
            Pages.MY_QUESTIONS.value["key"],
        ),
        format_func=lambda x: {
            Pages.CREATE.value["key"]: Pages.CREATE.value["title"],
            Pages.EXPLORE.value["key"]: Pages.EXPLORE.value["title"],
            Pages.MY_QUESTIONS.value["key"]: Pages.MY_QUESTIONS.value["title"],
        }[x],
        label_visibility="hidden",
    )
    render_location_picker()
    st.sidebar.button(Label.SIGN_OUT_BUTTON.value, on_click=sign_out)

    if selection == Pages.CREATE.value["key"]:
        container.create_page().render()
    elif selection == Pages.EXPLORE.value["key"]:
        container.explore_page().render()
    elif selection == Pages.MY_QUESTIONS.value["key"]:
        container.my_questions_page().render()


if __name__ == "__main__":
    main()
