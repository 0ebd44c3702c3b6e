"""
Configuration for pytest tests.
"""

import os
import pytest
from unittest.mock import MagicMock

import requests

from ytmp3.config import ApiSettings
from ytmp3.core.controller import ConversionController
from ytmp3.core.converter import ConversionClient


TEST_API_KEY = "test_api_key"
TEST_API_HOST = "youtube-mp36.p.rapidapi.com"


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Setup test environment variables."""
    os.environ["RAPIDAPI_KEY"] = os.environ.get("RAPIDAPI_KEY", TEST_API_KEY)
    os.environ["RAPIDAPI_HOST"] = os.environ.get("RAPIDAPI_HOST", TEST_API_HOST)
    os.environ["ENVIRONMENT"] = "development"
    yield


@pytest.fixture
def settings():
    """Return API settings with test credentials."""
    return ApiSettings(api_key=TEST_API_KEY, api_host=TEST_API_HOST)


@pytest.fixture
def test_video_id():
    """Return a test YouTube video ID."""
    return "dQw4w9WgXcQ"


def make_response(payload=None, status_code=200, json_error=None):
    """Build a mock requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Server Error")
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def ok_payload():
    """Return a successful conversion payload."""
    return {
        "status": "ok",
        "title": "Rick Astley - Never Gonna Give You Up",
        "link": "https://cdn.example.com/dl/dQw4w9WgXcQ.mp3",
        "duration": 212.0,
        "filesize": 3397632,
        "progress": 100,
        "msg": "success",
    }


@pytest.fixture
def mock_session(ok_payload):
    """Fixture for an HTTP session that answers with a successful conversion."""
    session = MagicMock(spec=requests.Session)
    session.get.return_value = make_response(ok_payload)
    return session


@pytest.fixture
def client(settings, mock_session):
    """Return a conversion client wired to the mock session."""
    return ConversionClient(settings, session=mock_session)


@pytest.fixture
def controller(client):
    """Return a fresh controller in the idle state."""
    return ConversionController(client)
