"""
Centralized error handling for the converter.

Every failure a conversion attempt can end in is one of the exceptions below.
They are caught at the task/controller boundary and turned into the message
shown to the user; none of them propagate into the UI.
"""

from typing import Any, Optional

from ytmp3.utils.logger import logging


VALIDATION_MESSAGE = "Please enter a valid YouTube URL or video ID"
CONVERSION_FAILURE_MESSAGE = "Conversion failed. Please try a different video."
NETWORK_ERROR_MESSAGE = "Network error occurred. Please check your connection."
CONFIGURATION_MESSAGE = "The converter is not configured. Set RAPIDAPI_KEY and RAPIDAPI_HOST."


class ConverterError(Exception):
    """Base class for all converter errors."""

    message = CONVERSION_FAILURE_MESSAGE


class ValidationError(ConverterError):
    """No video identifier could be derived from the user's input."""

    message = VALIDATION_MESSAGE


class ConversionFailure(ConverterError):
    """The conversion API answered, but not with status "ok"."""

    message = CONVERSION_FAILURE_MESSAGE

    def __init__(self, status: Optional[str] = None, detail: Any = None):
        self.status = status
        self.detail = None if detail is None else str(detail)
        super().__init__(f"Conversion API returned status {status!r}: {detail or 'no message'}")


class NetworkError(ConverterError):
    """The request did not complete or its body could not be understood."""

    message = NETWORK_ERROR_MESSAGE


class ConfigurationError(ConverterError):
    """Required API credentials are missing at startup."""

    message = CONFIGURATION_MESSAGE


def user_message(error: Exception) -> str:
    """
    Get the text shown to the user for an error.

    Args:
        error: The exception that ended the attempt

    Returns:
        User-facing message
    """
    if isinstance(error, ConverterError):
        return error.message

    logging.error(f"Unclassified error mapped to network error: {error!r}")
    return NETWORK_ERROR_MESSAGE


def require_video_id(video_id: Optional[str]) -> str:
    """Return the identifier, or raise ValidationError when there is none."""
    if not video_id:
        raise ValidationError(VALIDATION_MESSAGE)
    return video_id
