# ABOUTME: Resolves Wikipedia title normalizations and redirects for extracted breed titles
# ABOUTME: Splits titles into API-sized batches and queries them concurrently

import asyncio
from collections.abc import Sequence

from dog_breeds.config import get_config
from dog_breeds.core.models import AliasMap
from dog_breeds.extraction.base import ExtractionError, FetchJSON
from dog_breeds.utils.logging import get_logger, log_pipeline_step

logger = get_logger(__name__)

# MediaWiki caps the titles parameter at 50 values for regular clients
MAX_TITLES_PER_QUERY = 50


def _pairs_to_map(pairs: list[dict[str, str]] | None) -> dict[str, str]:
    return {pair["from"]: pair["to"] for pair in pairs or []}


async def resolve_redirect_batch(
    titles: Sequence[str], fetch: FetchJSON, api_url: str | None = None
) -> AliasMap:
    """Resolve one batch of titles with a single API request.

    Normalization is applied first and its result is then looked up in the
    redirects. Titles that resolve to themselves are left out.

    Args:
        titles: At most 50 article titles
        fetch: Fetch capability used for the request
        api_url: MediaWiki API endpoint, defaults to the configured one

    Returns:
        Mapping of original title to resolved title, only for titles that changed
    """
    if len(titles) > MAX_TITLES_PER_QUERY:
        raise ExtractionError(f"Cannot resolve {len(titles)} titles in one request (max {MAX_TITLES_PER_QUERY})")

    params = {
        "action": "query",
        "titles": "|".join(titles),
        "redirects": "1",
        "format": "json",
    }
    data = await fetch(api_url or get_config().wikipedia_api_url, params)

    query = data["query"]
    normalized = _pairs_to_map(query.get("normalized"))
    redirects = _pairs_to_map(query.get("redirects"))

    aliases: AliasMap = {}
    for title in titles:
        resolved = normalized.get(title, title)
        resolved = redirects.get(resolved, resolved)
        if resolved != title:
            aliases[title] = resolved

    return aliases


def chunk_titles(titles: Sequence[str], size: int = MAX_TITLES_PER_QUERY) -> list[list[str]]:
    """Split titles into consecutive chunks of at most ``size``."""
    if size < 1:
        raise ValueError("chunk size must be at least 1")
    return [list(titles[start : start + size]) for start in range(0, len(titles), size)]


@log_pipeline_step("resolve_redirects")
async def resolve_redirects(
    titles: Sequence[str],
    fetch: FetchJSON,
    api_url: str | None = None,
    batch_size: int = MAX_TITLES_PER_QUERY,
) -> AliasMap:
    """Resolve redirects for any number of titles.

    One request per batch, all in flight at once. If any batch fails the
    error propagates and results from the other batches are dropped.
    """
    batches = chunk_titles(titles, min(batch_size, MAX_TITLES_PER_QUERY))
    if not batches:
        return {}

    logger.debug("Resolving redirects", title_count=len(titles), batch_count=len(batches))

    results = await asyncio.gather(*(resolve_redirect_batch(batch, fetch, api_url) for batch in batches))

    aliases: AliasMap = {}
    for batch_aliases in results:
        aliases.update(batch_aliases)

    logger.info("Resolved Wikipedia redirects", alias_count=len(aliases), batch_count=len(batches))
    return aliases
