"""
Glue between user input, the conversion client and the page state.
"""

from typing import Optional

from ytmp3.core.converter import ConversionClient
from ytmp3.core.normalizer import extract_video_id
from ytmp3.core.state_machine import Event, outcome_event, transition
from ytmp3.core.task import ConversionTask
from ytmp3.models.schemas import TaskOutcome, UIState
from ytmp3.utils.error_handling import ValidationError, require_video_id
from ytmp3.utils.logger import logging


class ConversionController:
    """Holds the single UIState slot and runs at most one conversion at a time."""

    def __init__(self, client: ConversionClient):
        """
        Initialize the controller.

        Args:
            client: Conversion client used for every submission
        """
        self.client = client
        self.state = UIState.idle()

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    def can_submit(self, raw_input: Optional[str]) -> bool:
        """Whether the Convert trigger should be enabled."""
        return not self.is_loading and bool(raw_input)

    def begin(self, raw_input: Optional[str]) -> Optional[str]:
        """
        Start a submission.

        Args:
            raw_input: Text from the input box

        Returns:
            The video ID to convert, or None if nothing should be requested
            (already loading, or no identifier in the input)
        """
        if self.is_loading:
            logging.debug("Submit ignored, a conversion is already in flight")
            return None

        try:
            video_id = require_video_id(extract_video_id(raw_input or ""))
        except ValidationError:
            self.state = transition(self.state, Event.INVALID_INPUT)
            return None

        logging.info(f"Submitting conversion for video {video_id}")
        self.state = transition(self.state, Event.SUBMIT)
        return video_id

    def resolve(self, outcome: TaskOutcome) -> UIState:
        """Apply the outcome of the in-flight conversion."""
        self.state = transition(self.state, outcome_event(outcome), outcome.result)
        return self.state

    def submit(self, raw_input: Optional[str]) -> UIState:
        """
        Normalize the input, convert, and settle the state.

        Args:
            raw_input: Text from the input box

        Returns:
            The state after the attempt
        """
        video_id = self.begin(raw_input)
        if video_id is None:
            return self.state

        outcome = ConversionTask(self.client, video_id).run()
        return self.resolve(outcome)

    def reset(self) -> UIState:
        self.state = UIState.idle()
        return self.state
