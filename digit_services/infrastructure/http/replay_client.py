# digit_services/infrastructure/http/replay_client.py

import json
import logging
from typing import Optional

import httpx

from digit_services.application.exceptions import ReplayError
from digit_services.config.settings import settings
from digit_services.domain.models.error_record import ApiDetails

logger = logging.getLogger(__name__)


class HttpReplayClient:
    """Re-POSTs a stored request body to its original URL."""

    def __init__(self, client: httpx.AsyncClient | None = None):
        self._client = client or httpx.AsyncClient(timeout=settings.replay_timeout_seconds)

    async def replay(self, api_details: Optional[ApiDetails]) -> None:
        if api_details is None or not api_details.url:
            raise ReplayError("Error record carries no request URL to replay")
        if api_details.request_body is None:
            raise ReplayError("Error record carries no request body to replay")

        try:
            body = json.loads(api_details.request_body)
        except ValueError as e:
            raise ReplayError(f"Stored request body is not valid JSON: {e}") from e

        # InvalidURL is not an HTTPError; ValueError covers bodies httpx refuses to encode (NaN).
        try:
            response = await self._client.post(api_details.url, json=body)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError, TypeError) as e:
            logger.info("replay_failed", extra={"url": api_details.url, "error": str(e)})
            raise ReplayError(f"Replay of {api_details.url} failed: {e}") from e

    async def close(self):
        await self._client.aclose()
