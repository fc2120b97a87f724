"""
Meeting Summarizer Streamlit UI: main entry point.

Run with: ``streamlit run meeting_summarizer/ui/app.py``
"""

# ---------------------------------------------------------------------------
# Ensure project root is on sys.path so ``from meeting_summarizer.xxx`` imports work.
# Streamlit replaces sys.path[0] with the script directory (meeting_summarizer/ui/),
# which removes the project root needed for absolute imports.
# ---------------------------------------------------------------------------
import sys  # noqa: E402
from pathlib import Path  # noqa: E402

_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import asyncio  # noqa: E402
import logging  # noqa: E402

import streamlit as st  # noqa: E402

from meeting_summarizer.core.config import get_settings  # noqa: E402
from meeting_summarizer.services.session import SummarizerSession  # noqa: E402
from meeting_summarizer.ui.components.result_view import render_result  # noqa: E402

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="AI Meeting Summarizer",
    page_icon="\U0001f9e0",
    layout="centered",
)

logging.basicConfig(level=get_settings().log_level.upper())
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Session state defaults
# ---------------------------------------------------------------------------
if "summarizer_session" not in st.session_state:
    st.session_state.summarizer_session = SummarizerSession()
if "summarize_requested" not in st.session_state:
    st.session_state.summarize_requested = False
if "pending_notification" not in st.session_state:
    st.session_state.pending_notification = None

session: SummarizerSession = st.session_state.summarizer_session


def _request_summary() -> None:
    st.session_state.summarize_requested = True


# Notification from the previous run (st.rerun drops anything drawn before it)
_notification = st.session_state.pending_notification
if _notification is not None:
    st.session_state.pending_notification = None
    icon = "⚠️" if _notification.is_error else "✅"
    st.toast(f"**{_notification.title}**\n\n{_notification.description}", icon=icon)

# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------
st.title("\U0001f9e0 AI Meeting Summarizer")
st.markdown(
    "Transform your meeting transcripts into concise summaries and "
    "actionable insights using advanced AI"
)

# ---------------------------------------------------------------------------
# API configuration
# ---------------------------------------------------------------------------
with st.container(border=True):
    st.subheader("API Configuration")
    st.caption("Enter your OpenAI API key to enable AI-powered summarization")
    session.credential = st.text_input(
        "API key",
        type="password",
        placeholder="sk-...",
        key="credential_input",
        label_visibility="collapsed",
    )

# ---------------------------------------------------------------------------
# Transcript input
# ---------------------------------------------------------------------------
busy = st.session_state.summarize_requested or session.is_processing

with st.container(border=True):
    st.subheader("Meeting Transcript")
    st.caption("Paste your meeting transcript below to generate a summary")
    session.transcript = st.text_area(
        "Transcript",
        placeholder="Paste your meeting transcript here...",
        height=200,
        key="transcript_input",
        label_visibility="collapsed",
    )

    col_count, col_button = st.columns([3, 1])
    with col_count:
        st.caption(f"{len(session.transcript)} characters")
    with col_button:
        st.button(
            "Processing..." if busy else "Summarize",
            type="primary",
            disabled=busy,
            on_click=_request_summary,
        )

if st.session_state.summarize_requested:
    with st.spinner("Processing..."):
        try:
            st.session_state.pending_notification = asyncio.run(session.submit())
            logger.debug("Submit finished: %s", st.session_state.pending_notification.title)
        finally:
            st.session_state.summarize_requested = False
    st.rerun()

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
render_result(session.result)
