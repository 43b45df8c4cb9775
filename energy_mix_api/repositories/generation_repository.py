"""
Repository for half-hourly generation mix data.

Fetches generation mix intervals from the Carbon Intensity API
(`/generation/{from}/{to}`) and parses them into GenerationInterval models.
Nothing is cached: every call issues a fresh HTTP request.

Tags:
    - data-access
    - http-client
    - generation-mix

Errors:
    - UpstreamError: transport failure or non-2xx response
    - ParseError: body is not JSON or does not match the record schema
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import List, Optional

import requests
from pydantic import ValidationError as PydanticValidationError

from .base_repository import BaseRepository
from ..config import UpstreamConfig, app_config
from ..exceptions import ParseError, UpstreamError
from ..models import GenerationInterval, GenerationResponse


class GenerationRepository(BaseRepository):
    """Repository for generation mix intervals served by the upstream API."""

    def __init__(self, session: Optional[requests.Session] = None,
                 config: Optional[UpstreamConfig] = None):
        """
        Initialize the repository.

        Args:
            session: Optional requests session (one per repository instance)
            config: Optional upstream settings, defaults to app_config.upstream
        """
        self.config = config or app_config.upstream
        self.logger = logging.getLogger(__name__)
        self.session = session or requests.Session()
        self.session.headers.update(self.config.headers)

    def close(self) -> None:
        """Release the pooled connections of the HTTP session."""
        self.session.close()

    def format_timestamp(self, moment: datetime) -> str:
        """Format a datetime as the provider's UTC timestamp (naive means UTC)."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return moment.astimezone(timezone.utc).strftime(self.config.timestamp_format)

    def build_url(self, start: datetime, end: datetime) -> str:
        return f"{self.config.base_url}/{self.format_timestamp(start)}/{self.format_timestamp(end)}"

    def fetch(self, start: datetime, end: datetime) -> List[GenerationInterval]:
        """
        Fetch generation intervals synchronously.

        Args:
            start: Start of the requested range
            end: End of the requested range

        Returns:
            Intervals in the order the provider returned them

        Raises:
            UpstreamError: If the request fails or the response is not successful
            ParseError: If the response body cannot be parsed
        """
        url = self.build_url(start, end)
        self.logger.info(f"Fetching data from {url}")

        try:
            response = self.session.get(url, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise UpstreamError(f"Failed to fetch data from API: {e}") from e

        if not response.ok:
            raise UpstreamError(
                f"Failed to fetch data from API: {response.reason}",
                status_code=response.status_code,
                status_text=response.reason,
            )

        try:
            payload = GenerationResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise ParseError(f"Unexpected response body from {url}: {e}") from e

        intervals = payload.data
        self.logger.info(f"Received {len(intervals)} intervals")
        self._check_continuity(intervals)
        return intervals

    async def find_between(self, start: datetime, end: datetime) -> List[GenerationInterval]:
        """Fetch generation intervals without blocking the event loop."""
        return await asyncio.get_event_loop().run_in_executor(None, self.fetch, start, end)

    def _check_continuity(self, intervals: List[GenerationInterval]) -> None:
        """Warn when the provider returns gaps, overlaps or unordered intervals."""
        # Intervals are used as returned; this only reports broken assumptions
        for previous, current in zip(intervals, intervals[1:]):
            if current.from_ != previous.to:
                self.logger.warning(
                    f"⚠️ Non-contiguous intervals: {previous.from_}-{previous.to} "
                    f"followed by {current.from_}-{current.to}"
                )
                return
