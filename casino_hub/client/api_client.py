"""Casino Hub API client using raw HTTP via httpx.

Fetches the full dataset from ``GET /api/content`` in one request and
validates it into ``CasinoContent``. Every failure mode (transport error,
non-2xx status, malformed or invalid JSON) surfaces as ``ContentFetchError``.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from casino_hub.content.models import CasinoContent

logger = logging.getLogger(__name__)

CONTENT_PATH = "/api/content"


class ContentFetchError(Exception):
    """The content request failed; ``str(exc)`` is user-presentable."""


class ContentApiClient:
    """Async client for the Casino Hub REST API.

    Args:
        base_url: API root, e.g. ``http://localhost:5000``.
        timeout: Request timeout in seconds.
        http_client: Injected client for testing; closed by its owner.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = http_client or httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Accept": "application/json"},
            timeout=httpx.Timeout(timeout),
        )
        self._owns_client = http_client is None

    async def close(self) -> None:
        """Close the underlying HTTP client if we own it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def fetch_content(self) -> CasinoContent:
        """Fetch and validate the full dataset.

        Raises:
            ContentFetchError: On any transport, status, or decode failure.
        """
        try:
            response = await self._client.get(CONTENT_PATH)
        except httpx.HTTPError as exc:
            raise ContentFetchError(f"Failed to fetch data: {exc}") from exc

        if not response.is_success:
            raise ContentFetchError(f"HTTP error! status: {response.status_code}")

        try:
            return CasinoContent.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise ContentFetchError(f"Malformed content response: {exc}") from exc
