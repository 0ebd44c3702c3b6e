"""
Client for the hosted YouTube to MP3 conversion API.
"""

from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError as PydanticValidationError

from ytmp3.config import ApiSettings
from ytmp3.models.schemas import ConversionRequest, ConversionResult
from ytmp3.utils.error_handling import ConversionFailure, NetworkError, ValidationError
from ytmp3.utils.logger import logging

SUCCESS_STATUS = "ok"


class ConversionClient:
    """Issues conversion requests to the RapidAPI youtube-mp36 endpoint."""

    def __init__(self, settings: ApiSettings, session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            settings: API key and host to send with every request
            session: HTTP session to use (a fresh one if not given)
        """
        self.settings = settings
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        return {
            "x-rapidapi-host": self.settings.api_host,
            "x-rapidapi-key": self.settings.api_key,
        }

    def url_for(self, video_id: str) -> str:
        """Get the full request URL for a video, for logging."""
        return requests.Request("GET", self.settings.endpoint, params={"id": video_id}).prepare().url

    def _fetch(self, request: ConversionRequest) -> Dict[str, Any]:
        logging.info(f"Requesting conversion: {self.url_for(request.video_id)}")
        try:
            response = self.session.get(
                self.settings.endpoint,
                params={"id": request.video_id},
                headers=self._headers(),
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise NetworkError(f"Request for {request.video_id} failed: {e}") from e
        except ValueError as e:
            raise NetworkError(f"Response for {request.video_id} is not JSON: {e}") from e

        if not isinstance(data, dict):
            raise NetworkError(f"Response for {request.video_id} is not a JSON object")
        return data

    def convert(self, video_id: str) -> ConversionResult:
        """
        Convert a video and return the download details.

        Args:
            video_id: YouTube video ID

        Returns:
            ConversionResult with the title and MP3 link

        Raises:
            ValidationError: if video_id is empty
            NetworkError: if the request fails or the body is unusable
            ConversionFailure: if the API reports any status other than "ok"
        """
        try:
            request = ConversionRequest(video_id=video_id)
        except PydanticValidationError as e:
            raise ValidationError(str(e)) from e

        data = self._fetch(request)

        status = data.get("status")
        if status != SUCCESS_STATUS:
            raise ConversionFailure(status=status, detail=data.get("msg"))

        try:
            result = ConversionResult.model_validate(data)
        except PydanticValidationError as e:
            raise NetworkError(f"Malformed success payload for {request.video_id}: {e}") from e

        logging.info(f"Conversion ready for {request.video_id}: {result.title}")
        return result
