"""
Transition table for the converter page.

Idle -> Loading -> (Success | Error), re-enterable from any settled phase.
Events that do not apply to the current phase leave it unchanged, so
``transition`` is defined for every (phase, event) pair.
"""

from enum import Enum
from typing import Optional

from ytmp3.models.schemas import ConversionResult, Outcome, Phase, TaskOutcome, UIState
from ytmp3.utils.error_handling import (
    CONVERSION_FAILURE_MESSAGE,
    NETWORK_ERROR_MESSAGE,
    VALIDATION_MESSAGE,
)


class Event(str, Enum):
    """Things that can happen to the page."""
    SUBMIT = "submit"
    INVALID_INPUT = "invalid_input"
    SUCCEEDED = "succeeded"
    CONVERSION_FAILED = "conversion_failed"
    NETWORK_FAILED = "network_failed"


SETTLED = (Phase.IDLE, Phase.SUCCESS, Phase.ERROR)

_OUTCOME_EVENTS = {
    Outcome.SUCCESS: Event.SUCCEEDED,
    Outcome.CONVERSION_FAILURE: Event.CONVERSION_FAILED,
    Outcome.NETWORK_FAILURE: Event.NETWORK_FAILED,
}


def outcome_event(outcome: TaskOutcome) -> Event:
    """Map a task outcome to the event it feeds into the state machine."""
    return _OUTCOME_EVENTS[outcome.kind]


def transition(state: UIState, event: Event, result: Optional[ConversionResult] = None) -> UIState:
    """
    Compute the next state.

    Args:
        state: Current state
        event: What happened
        result: Conversion payload, required for SUCCEEDED

    Returns:
        The next state (``state`` itself when the event does not apply)
    """
    if state.phase in SETTLED:
        if event == Event.SUBMIT:
            return UIState.loading()
        if event == Event.INVALID_INPUT:
            return UIState.failed(VALIDATION_MESSAGE)
        # responses with nothing in flight are stale
        return state

    # Loading: the trigger is disabled, only responses move us on
    if event == Event.SUCCEEDED:
        if result is None:
            raise ValueError("SUCCEEDED requires a conversion result")
        return UIState.success(result)
    if event == Event.CONVERSION_FAILED:
        return UIState.failed(CONVERSION_FAILURE_MESSAGE)
    if event == Event.NETWORK_FAILED:
        return UIState.failed(NETWORK_ERROR_MESSAGE)
    return state
