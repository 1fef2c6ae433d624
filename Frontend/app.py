import logging
import streamlit as st
import streamlit.components.v1 as components
import requests

from edugen.schemas import ContentType, Difficulty, Grade, Length, Tone, GenerateOptions
from edugen.rendering.markdown import render_markdown_html
from edugen.rendering.quiz import parse_quiz, render_quiz, toggle_answer
from edugen.ui.actions import CopyButtonState, clipboard_script, download_file
from edugen.ui.backend_client import BackendClient
from edugen.ui.state import Coordinator
from edugen.utils.config import settings

logging.basicConfig(level=logging.INFO)

# Configuration
BACKEND_URL = settings.backend_url
st.set_page_config(page_title="AI Edu-Generator", layout="centered")

CONTENT_TYPE_LABELS = {
    ContentType.STUDY_GUIDE: "Study Guide",
    ContentType.QUIZ: "Quiz",
}

# Initialize session state
def init_session():
    session_defaults = {
        "coordinator": lambda: Coordinator(BackendClient(BACKEND_URL).generate),
        "show_answers": dict,
        "copy_button": CopyButtonState,
    }
    for key, factory in session_defaults.items():
        if key not in st.session_state:
            st.session_state[key] = factory()

init_session()
coordinator: Coordinator = st.session_state.coordinator


def toggle(key: str):
    st.session_state.show_answers = toggle_answer(st.session_state.show_answers, key)


def copy_content():
    st.session_state.copy_button.mark_copied()
    st.session_state.copy_requested = True


def render_output(content: str, content_type: ContentType, generation_time: str):
    st.divider()
    header, timing = st.columns([3, 2])
    header.subheader("Generated Content")
    timing.markdown(f"Generation Time: **{generation_time}s**")

    copy_col, download_col = st.columns(2)
    copy_col.button(st.session_state.copy_button.label, key="copy", on_click=copy_content)
    if st.session_state.pop("copy_requested", False):
        components.html(clipboard_script(content), height=0)

    file = download_file(content, content_type)
    download_col.download_button("Download", data=file.data, file_name=file.file_name, mime=file.mime_type)

    if content_type == ContentType.STUDY_GUIDE:
        st.markdown(render_markdown_html(content), unsafe_allow_html=True)
        return

    result = parse_quiz(content)
    if result.quiz is None:
        st.error(result.error)
        st.text(content)
        return

    view = render_quiz(result.quiz, st.session_state.show_answers)
    st.header(view.title)

    if view.has_multiple_choice:
        st.subheader("Multiple Choice")
        for block in view.multiple_choice:
            with st.container(border=True):
                st.markdown(f"**{block.number}. {block.question}**")
                for option in block.options:
                    st.markdown(f"&nbsp;&nbsp;&nbsp;&nbsp;{option}")
                st.button(block.toggle_label, key=f"toggle-{block.key}", on_click=toggle, args=(block.key,))
                if block.answer_visible:
                    st.success(f"**Answer:** {block.answer}")

    if view.has_short_answer:
        st.subheader("Short Answer")
        for block in view.short_answer:
            with st.container(border=True):
                st.markdown(f"**{block.number}. {block.question}**")
                st.button(block.toggle_label, key=f"toggle-{block.key}", on_click=toggle, args=(block.key,))
                if block.answer_visible:
                    st.success(f"**Answer:** {block.answer}")


# UI Components
st.title("AI Edu-Generator")
st.caption("Generate Study Guides & Quizzes Instantly")

with st.sidebar:
    st.header("Settings")
    if st.button("Test API Key"):
        with st.spinner("Checking..."):
            try:
                check = BackendClient(BACKEND_URL).check_api_key()
                if check["ok"]:
                    st.success(f"API key works: {check['message']}")
                else:
                    st.error(check["message"])
            except requests.exceptions.RequestException as e:
                st.error(f"Connection error: {str(e)}")

with st.form(key="generator_form"):
    topic = st.text_input("Topic or Subject", placeholder="e.g., Photosynthesis, The Cold War, React Hooks")

    col1, col2, col3 = st.columns(3)
    content_type = col1.selectbox(
        "Content Type", list(ContentType), format_func=CONTENT_TYPE_LABELS.get
    )
    difficulty = col2.selectbox("Difficulty Level", list(Difficulty), format_func=lambda d: d.value)
    grade = col3.selectbox("Grade Level", list(Grade), format_func=lambda g: g.value)
    tone = col1.selectbox("Tone", list(Tone), format_func=lambda t: t.value)
    length = col2.selectbox(
        "Length / Detail", list(Length), index=list(Length).index(Length.STANDARD), format_func=lambda l: l.value
    )

    instructions = st.text_area(
        "Additional Instructions (Optional)",
        placeholder="e.g., Focus on the historical context, include a section on key figures...",
    )
    submitted = st.form_submit_button(
        "Generate Content", key="generate", disabled=coordinator.state.is_loading
    )

if submitted:
    options = GenerateOptions(
        topic=topic,
        content_type=content_type,
        difficulty=difficulty,
        length=length,
        grade=grade,
        tone=tone,
        instructions=instructions,
    )
    with st.spinner("AI is thinking..."):
        if coordinator.submit(options):
            st.session_state.show_answers = {}

state = coordinator.state
if state.error:
    st.error(state.error)

if state.has_output:
    render_output(state.content, state.content_type, state.metrics.display)
