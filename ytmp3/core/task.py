"""
One conversion attempt, reduced to one of three outcomes.
"""

import traceback

from ytmp3.core.converter import ConversionClient
from ytmp3.models.schemas import Outcome, TaskOutcome
from ytmp3.utils.error_handling import ConversionFailure, NetworkError
from ytmp3.utils.logger import logging


class ConversionTask:
    """Runs a single conversion request and classifies how it ended."""

    def __init__(self, client: ConversionClient, video_id: str):
        self.client = client
        self.video_id = video_id

    def run(self) -> TaskOutcome:
        """
        Perform the request.

        Returns:
            TaskOutcome; conversion and network failures are reported here
            instead of being raised
        """
        try:
            result = self.client.convert(self.video_id)
        except ConversionFailure as e:
            logging.warning(f"Conversion failed for {self.video_id}: {e}")
            return TaskOutcome(kind=Outcome.CONVERSION_FAILURE, detail=e.detail)
        except NetworkError as e:
            logging.error(f"Network error converting {self.video_id}: {e}")
            logging.error(traceback.format_exc())
            return TaskOutcome(kind=Outcome.NETWORK_FAILURE, detail=str(e))

        return TaskOutcome(kind=Outcome.SUCCESS, result=result)
