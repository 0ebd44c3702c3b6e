"""
Reusable UI components for the Streamlit app.
"""

import html
from typing import Callable, Optional

import streamlit as st

from ytmp3.config import config
from ytmp3.models.schemas import ConversionResult, Phase, UIState

FEATURES = [
    ("🎵", "High Quality Audio"),
    ("⬇️", "Fast Downloads"),
    ("▶️", "Any YouTube Video"),
]


def header():
    """Display the application header."""
    st.set_page_config(
        page_title=config.APP_NAME,
        page_icon="🎧",
        layout="centered",
    )

    st.title(f"▶️ {config.APP_NAME}")
    st.markdown(config.APP_TAGLINE)
    st.divider()


def youtube_input(disabled: bool, can_submit: Callable, on_convert: Callable):
    """
    Display the URL input and the Convert button.

    Args:
        disabled: Whether a conversion is in flight
        can_submit: Tells whether the entered text may be submitted
        on_convert: Called with the entered text when Convert is clicked
    """
    col1, col2 = st.columns([5, 1])
    with col1:
        text = st.text_input(
            "YouTube URL or video ID",
            placeholder="Paste your YouTube URL here...",
            key="video_input",
            disabled=disabled,
            label_visibility="collapsed",
        )
    with col2:
        st.button(
            "Converting..." if disabled else "Convert",
            type="primary",
            disabled=not can_submit(text),
            use_container_width=True,
            on_click=lambda: on_convert(st.session_state.get("video_input", "")),
        )


def download_link_html(result: ConversionResult) -> str:
    """
    Build the anchor for the MP3 link; it opens in a new tab.

    Args:
        result: Successful conversion payload

    Returns:
        HTML anchor whose href is exactly the link from the API
    """
    href = html.escape(result.link, quote=True)
    return (
        f'<a href="{href}" target="_blank" rel="noopener noreferrer">'
        f'⬇️ Download Your MP3</a>'
    )


def format_duration(seconds: Optional[float]) -> Optional[str]:
    """Format a duration in seconds as m:ss, or None when unknown."""
    if not seconds:
        return None
    minutes, secs = divmod(int(round(seconds)), 60)
    return f"{minutes}:{secs:02d}"


def display_result(result: ConversionResult):
    """
    Display the success panel.

    Args:
        result: Successful conversion payload
    """
    with st.container(border=True):
        st.markdown("### ✨ Ready to Download!")
        st.text(result.title)
        duration = format_duration(result.duration)
        if duration:
            st.caption(f"Duration: {duration}")
        st.markdown(download_link_html(result), unsafe_allow_html=True)


def display_error(message: str):
    """
    Display an error message.

    Args:
        message: Error message to display
    """
    st.error(message, icon="⚠️")


def display_outcome(state: UIState):
    """Render the outcome area for the current state; nothing while idle or loading."""
    if state.phase == Phase.ERROR:
        display_error(state.error)
    elif state.phase == Phase.SUCCESS:
        display_result(state.result)


def features():
    """Display the row of feature highlights."""
    st.divider()
    for col, (icon, label) in zip(st.columns(len(FEATURES)), FEATURES):
        with col:
            st.markdown(f"<div style='text-align:center'>{icon}<br>{label}</div>", unsafe_allow_html=True)
