import streamlit as st

SIDEBAR_CUSTOM_CSS = """
<style>
section[data-testid="stSidebar"] {
    min-width: 260px;
}

section[data-testid="stSidebar"] .stRadio > div[role='radiogroup'] > label[data-baseweb="radio"] {
    font-size: 16px;
    font-weight: 500;
    padding: 10px 8px;
    border-radius: 8px;
    margin-bottom: 4px;
    width: 100%;
    display: block;
    box-sizing: border-box;
}

section[data-testid="stSidebar"] .stRadio > div[role='radiogroup'] label[data-baseweb="radio"] > div:first-child {
    display: none;
}
</style>
"""

QUESTION_CARD_CSS = """
<style>
.ev-badge {
    display: inline-block;
    color: #fff;
    font-size: 11px;
    font-weight: 700;
    padding: 2px 8px;
    border-radius: 4px;
    margin-right: 4px;
}

.ev-avatar {
    display: inline-flex;
    align-items: center;
    justify-content: center;
    width: 20px;
    height: 20px;
    border-radius: 50%;
    color: #fff;
    font-size: 10px;
    font-weight: 700;
}
</style>
"""

SIDEBAR_HIGHLIGHT_CSS = """
<style>
section[data-testid="stSidebar"] .stRadio > div[role='radiogroup'] > label[data-baseweb="radio"]:has(input:checked) {{
    background: {background};
    color: {color} !important;
}}
</style>
"""


def load_custom_css():
    st.markdown(SIDEBAR_CUSTOM_CSS, unsafe_allow_html=True)
    st.markdown(QUESTION_CARD_CSS, unsafe_allow_html=True)
    if st.context.theme.type == "dark":
        highlight = SIDEBAR_HIGHLIGHT_CSS.format(background="#0e1117", color="#fff")
    else:
        highlight = SIDEBAR_HIGHLIGHT_CSS.format(background="#d0d0d0", color="#222")
    st.markdown(highlight, unsafe_allow_html=True)
