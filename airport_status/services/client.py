"""
HTTP client for the FAA airport status API.

One call of fetch() is one GET plus JSON decoding into an AirportModel. Every
way that can go wrong (unknown code, transport error, malformed body) surfaces
as a single FetchFailure.
"""

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from ..models.airport import AirportModel
from ..utils.config import AirportStatusConfig, get_config

logger = logging.getLogger(__name__)


class FetchFailure(Exception):
    """Fetching or decoding the status of one airport failed."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message


class AirportStatusClient:
    """
    Fetch collaborator for airport status records.

    No retries. The request timeout is the transport default (none) unless
    the configuration sets one.
    """

    def __init__(self, config: Optional[AirportStatusConfig] = None):
        """
        Initialize the client.

        Args:
            config: AirportStatusConfig instance, defaults to environment-based config
        """
        self.config = config or get_config()

    def status_url(self, code: str) -> str:
        """Build the status URL for an airport code."""
        return f"{self.config.api_base_url}/{code}"

    def fetch(self, code: str) -> AirportModel:
        """
        Fetch the current status of one airport.

        Args:
            code: Airport code, e.g. "LAX"

        Returns:
            AirportModel: Fully decoded status record

        Raises:
            FetchFailure: If the request fails or the response cannot be decoded
        """
        url = self.status_url(code)
        logger.debug(f"GET {url}")

        try:
            response = requests.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self.config.request_timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Fetching status for {code} failed: {e}")
            raise FetchFailure(code, str(e)) from e

        try:
            return AirportModel.model_validate(payload)
        except ValidationError as e:
            first_error = e.errors()[0]
            location = ".".join(str(part) for part in first_error["loc"])
            message = f"Malformed status for {code}: {location} {first_error['msg']}"
            logger.warning(message)
            raise FetchFailure(code, message) from e
