"""
Tests for the conversion controller: the whole submit cycle against a mocked API.
"""

import pytest

import requests

from ytmp3.core.controller import ConversionController
from ytmp3.models.schemas import ConversionResult, Outcome, Phase, TaskOutcome, UIState
from ytmp3.utils.error_handling import (
    CONVERSION_FAILURE_MESSAGE,
    NETWORK_ERROR_MESSAGE,
    VALIDATION_MESSAGE,
)
from conftest import make_response


def test_initial_state_is_idle(controller):
    assert controller.state == UIState.idle()
    assert not controller.is_loading


@pytest.mark.parametrize("raw", ["", "   ", "https://vimeo.com/123456"])
def test_invalid_input_never_calls_api(controller, mock_session, raw):
    state = controller.submit(raw)

    assert state == UIState.failed(VALIDATION_MESSAGE)
    mock_session.get.assert_not_called()


def test_ok_response_gives_success(controller, mock_session):
    mock_session.get.return_value = make_response({"status": "ok", "title": "T", "link": "L"})

    state = controller.submit("https://www.youtube.com/watch?v=dQw4w9WgXcQ")

    assert state.phase == Phase.SUCCESS
    assert state.result.title == "T"
    assert state.result.link == "L"
    assert mock_session.get.call_args.kwargs["params"] == {"id": "dQw4w9WgXcQ"}


def test_fail_response_gives_conversion_error(controller, mock_session):
    mock_session.get.return_value = make_response({"status": "fail"})

    assert controller.submit("dQw4w9WgXcQ") == UIState.failed(CONVERSION_FAILURE_MESSAGE)


def test_connection_refused_gives_network_error(controller, mock_session):
    mock_session.get.side_effect = requests.ConnectionError("Connection refused")

    assert controller.submit("dQw4w9WgXcQ") == UIState.failed(NETWORK_ERROR_MESSAGE)


def test_submit_while_loading_has_no_effect(controller, mock_session):
    """A second submit during the call does not issue another request."""
    nested_states = []

    def answer_and_resubmit(*args, **kwargs):
        nested_states.append(controller.submit("https://youtu.be/other"))
        return make_response({"status": "ok", "title": "T", "link": "L"})

    mock_session.get.side_effect = answer_and_resubmit

    state = controller.submit("https://youtu.be/dQw4w9WgXcQ")

    assert mock_session.get.call_count == 1
    assert nested_states == [UIState.loading()]
    assert state.phase == Phase.SUCCESS


def test_begin_blocks_until_resolved(controller, mock_session):
    assert controller.begin("dQw4w9WgXcQ") == "dQw4w9WgXcQ"
    assert controller.is_loading
    assert not controller.can_submit("dQw4w9WgXcQ")

    assert controller.submit("dQw4w9WgXcQ") == UIState.loading()
    assert controller.begin("") is None
    assert controller.is_loading
    mock_session.get.assert_not_called()

    controller.resolve(TaskOutcome(kind=Outcome.NETWORK_FAILURE))
    assert controller.state == UIState.failed(NETWORK_ERROR_MESSAGE)
    assert controller.can_submit("dQw4w9WgXcQ")


def test_new_submit_clears_previous_result(controller):
    controller.submit("dQw4w9WgXcQ")
    assert controller.state.phase == Phase.SUCCESS

    controller.begin("dQw4w9WgXcQ")

    assert controller.state == UIState.loading()
    assert controller.state.result is None


def test_error_then_success(controller, mock_session, ok_payload):
    mock_session.get.side_effect = [
        requests.ConnectionError("Connection refused"),
        make_response(ok_payload),
    ]

    controller.submit("dQw4w9WgXcQ")
    state = controller.submit("dQw4w9WgXcQ")

    assert state.phase == Phase.SUCCESS
    assert state.error is None


def test_repeated_submission_is_idempotent(controller, mock_session):
    first = controller.submit("https://youtu.be/dQw4w9WgXcQ")
    second = controller.submit("https://youtu.be/dQw4w9WgXcQ")

    assert first == second
    assert isinstance(second.result, ConversionResult)
    assert mock_session.get.call_count == 2


@pytest.mark.parametrize("raw, expected", [
    ("", False),
    ("   ", True),
    (None, False),
    ("dQw4w9WgXcQ", True),
])
def test_can_submit(controller, raw, expected):
    assert controller.can_submit(raw) is expected


def test_reset(controller):
    controller.submit("")
    assert controller.reset() == UIState.idle()


def test_controller_uses_injected_client(client):
    assert ConversionController(client).client is client


@pytest.mark.parametrize("msg", [429, {"code": 429, "text": "Too many requests"}, ["quota"]])
def test_non_string_failure_msg_gives_conversion_error(controller, mock_session, msg):
    mock_session.get.return_value = make_response({"status": "fail", "msg": msg})

    assert controller.submit("dQw4w9WgXcQ") == UIState.failed(CONVERSION_FAILURE_MESSAGE)


def test_unreadable_duration_still_succeeds(controller, mock_session):
    mock_session.get.return_value = make_response(
        {"status": "ok", "title": "T", "link": "L", "duration": "N/A"}
    )

    state = controller.submit("dQw4w9WgXcQ")

    assert state.phase == Phase.SUCCESS
    assert state.result.link == "L"
    assert state.result.duration is None


def test_whitespace_input_enables_trigger_then_fails_validation(controller, mock_session):
    assert controller.can_submit("   ")

    assert controller.submit("   ") == UIState.failed(VALIDATION_MESSAGE)
    mock_session.get.assert_not_called()
