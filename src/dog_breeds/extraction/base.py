# ABOUTME: Fetch capability protocol shared by every network-touching extraction step
# ABOUTME: Production wiring passes the httpx fetcher; tests pass a stub returning canned JSON

from collections.abc import Mapping
from typing import Any, Protocol


class FetchJSON(Protocol):
    """Protocol for fetching a JSON document. Anything callable with a URL and
    query parameters that returns the decoded body can be injected."""

    async def __call__(self, url: str, params: Mapping[str, str]) -> Any:
        """Fetch ``url`` with the given query parameters.

        Args:
            url: Endpoint URL without a query string
            params: Query parameters to send

        Returns:
            The decoded JSON body

        Raises:
            httpx.HTTPError: If the request fails or the response is not a success
        """
        ...


class ExtractionError(Exception):
    """Raised when an extraction step is called with arguments it cannot honour."""

    pass
