# digit_services/infrastructure/search/index_client.py

import logging
from typing import Any, Dict

import httpx

from digit_services.application.exceptions import IndexStoreError
from digit_services.config.settings import settings

logger = logging.getLogger(__name__)


class IndexStoreClient:
    """HTTP client for the search index. Any transport or HTTP error surfaces as IndexStoreError."""

    def __init__(self, client: httpx.AsyncClient | None = None):
        self._client = client or httpx.AsyncClient(timeout=settings.es_timeout_seconds)

    async def fetch(self, uri: str, query_body: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = await self._client.post(uri, json=query_body)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.error("index_fetch_failed", extra={"uri": uri, "error": str(e)})
            raise IndexStoreError(f"Index store request failed: {e}") from e
        except ValueError as e:
            raise IndexStoreError(f"Index store returned a non-JSON body: {e}") from e

    async def close(self):
        await self._client.aclose()
