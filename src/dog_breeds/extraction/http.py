# ABOUTME: httpx-backed fetch capability for the Wikipedia API and Wikidata SPARQL endpoint
# ABOUTME: Raises on non-success responses; never retries or wraps transport errors

from collections.abc import Mapping
from typing import Any

import httpx

from dog_breeds.config import get_config
from dog_breeds.utils.logging import get_logger, log_api_call


class WikiHttpFetcher:
    """JSON fetcher over a shared ``httpx.AsyncClient``."""

    def __init__(self, client: httpx.AsyncClient | None = None):
        config = get_config()
        self._owns_client = client is None
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={"User-Agent": config.user_agent, "Accept": "application/json"},
            timeout=config.request_timeout,
            follow_redirects=True,
        )
        self.logger = get_logger(__name__)

    @log_api_call("wikimedia")
    async def __call__(self, url: str, params: Mapping[str, str]) -> Any:
        response = await self.http_client.get(url, params=dict(params))
        response.raise_for_status()

        self.logger.debug(
            "Fetched JSON document",
            url=str(response.url),
            status_code=response.status_code,
            content_length=len(response.content),
        )
        return response.json()

    async def close(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._owns_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "WikiHttpFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
