"""
Tests for the error taxonomy and user-facing messages.
"""

import pytest

from ytmp3.utils.error_handling import (
    CONVERSION_FAILURE_MESSAGE,
    NETWORK_ERROR_MESSAGE,
    VALIDATION_MESSAGE,
    ConversionFailure,
    NetworkError,
    ValidationError,
    require_video_id,
    user_message,
)


@pytest.mark.parametrize("error, expected", [
    (ValidationError(), VALIDATION_MESSAGE),
    (ConversionFailure(status="fail"), CONVERSION_FAILURE_MESSAGE),
    (NetworkError("refused"), NETWORK_ERROR_MESSAGE),
    (RuntimeError("unexpected"), NETWORK_ERROR_MESSAGE),
])
def test_user_message(error, expected):
    assert user_message(error) == expected


def test_require_video_id():
    assert require_video_id("abc") == "abc"
    with pytest.raises(ValidationError):
        require_video_id(None)
    with pytest.raises(ValidationError):
        require_video_id("")
