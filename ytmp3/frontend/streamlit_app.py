"""
Main Streamlit application for the YouTube to MP3 converter.

A click on Convert only moves the controller into Loading (see
``start_conversion``); the rerun that follows renders the disabled trigger
and then runs the request, so a second click cannot start another one.
"""

import traceback

import streamlit as st

from ytmp3.config import config
from ytmp3.core.controller import ConversionController
from ytmp3.core.converter import ConversionClient
from ytmp3.core.task import ConversionTask
from ytmp3.frontend.components import (
    header, youtube_input, display_outcome, display_error, features
)
from ytmp3.models.schemas import Outcome, TaskOutcome
from ytmp3.utils.error_handling import ConfigurationError, user_message
from ytmp3.utils.logger import logging


def init_session_state():
    """
    Initialize session state variables.

    Raises:
        ConfigurationError: if the API credentials are missing
    """
    if "controller" not in st.session_state:
        client = ConversionClient(config.api_settings())
        st.session_state.controller = ConversionController(client)

    if "pending_video_id" not in st.session_state:
        st.session_state.pending_video_id = None


def start_conversion(text: str):
    """Button callback: validate the input and enter Loading."""
    controller = st.session_state.controller
    video_id = controller.begin(text)
    if video_id is not None:
        st.session_state.pending_video_id = video_id


def run_pending_conversion(controller: ConversionController):
    """
    Run the conversion started by the last click and settle the state.

    Args:
        controller: Controller held in session state
    """
    video_id = st.session_state.pending_video_id
    if video_id is None:
        # lost the id (e.g. interrupted run); nothing is in flight any more
        controller.reset()
        return

    with st.spinner("Converting..."):
        try:
            outcome = ConversionTask(controller.client, video_id).run()
        except Exception as e:
            logging.error(f"Unexpected error converting {video_id}: {e}")
            logging.error(traceback.format_exc())
            outcome = TaskOutcome(kind=Outcome.NETWORK_FAILURE, detail=str(e))

        # settle before leaving the spinner; a rerun may interrupt us there
        controller.resolve(outcome)
        st.session_state.pending_video_id = None


def main():
    """Main application entry point."""
    logging.setLevel(config.LOG_LEVEL)
    header()

    try:
        init_session_state()
    except ConfigurationError as e:
        logging.error(f"Startup configuration error: {e}")
        display_error(user_message(e))
        st.stop()

    controller = st.session_state.controller

    youtube_input(
        disabled=controller.is_loading,
        can_submit=controller.can_submit,
        on_convert=start_conversion,
    )

    if controller.is_loading:
        run_pending_conversion(controller)
        st.rerun()

    display_outcome(controller.state)
    features()


if __name__ == "__main__":
    main()
