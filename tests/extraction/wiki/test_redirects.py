# ABOUTME: Tests for Wikipedia redirect and normalization resolution
# ABOUTME: Validates alias composition, batching at the 50-title limit and failure propagation

import asyncio

import pytest

from dog_breeds.extraction.base import ExtractionError
from dog_breeds.extraction.wiki.redirects import (
    MAX_TITLES_PER_QUERY,
    chunk_titles,
    resolve_redirect_batch,
    resolve_redirects,
)


def _redirect_payload(normalized=None, redirects=None) -> dict:
    query: dict = {"pages": {}}
    if normalized is not None:
        query["normalized"] = [{"from": source, "to": target} for source, target in normalized.items()]
    if redirects is not None:
        query["redirects"] = [{"from": source, "to": target} for source, target in redirects.items()]
    return {"query": query}


class RecordingFetch:
    """Redirects the first title of every batch and records the titles of each call."""

    def __init__(self, fail_on_call: int | None = None):
        self.batches: list[list[str]] = []
        self.fail_on_call = fail_on_call
        self.in_flight = 0
        self.max_in_flight = 0

    async def __call__(self, url, params):
        titles = params["titles"].split("|")
        self.batches.append(titles)
        call_number = len(self.batches)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            if call_number == self.fail_on_call:
                raise ConnectionError(f"batch {call_number} failed")
            return _redirect_payload(redirects={title: f"{title} (dog)" for title in titles[:1]})
        finally:
            self.in_flight -= 1


class TestResolveRedirectBatch:
    @pytest.mark.asyncio
    async def test_resolves_redirects_and_normalizations(self, stub_fetch):
        result = await resolve_redirect_batch(["Akita (dog)", "Affenpinscher"], stub_fetch)
        assert result == {"Akita (dog)": "Akita (dog breed)"}

    @pytest.mark.asyncio
    async def test_sends_pipe_joined_titles(self, stub_fetch):
        await resolve_redirect_batch(["Akita (dog)", "Affenpinscher"], stub_fetch)

        url, params = stub_fetch.calls[0]
        assert url == "https://en.wikipedia.org/w/api.php"
        assert params == {
            "action": "query",
            "titles": "Akita (dog)|Affenpinscher",
            "redirects": "1",
            "format": "json",
        }

    @pytest.mark.asyncio
    async def test_response_without_redirects(self):
        async def fetch(url, params):
            return {"query": {"pages": {}}}

        assert await resolve_redirect_batch(["Beagle"], fetch) == {}

    @pytest.mark.asyncio
    async def test_normalization_feeds_redirect_lookup(self):
        async def fetch(url, params):
            return _redirect_payload(
                normalized={"german shepherd": "German shepherd"},
                redirects={"German shepherd": "German Shepherd"},
            )

        result = await resolve_redirect_batch(["german shepherd"], fetch)
        assert result == {"german shepherd": "German Shepherd"}

    @pytest.mark.asyncio
    async def test_normalization_only(self):
        async def fetch(url, params):
            return _redirect_payload(normalized={"Chien_Français": "Chien Français"})

        assert await resolve_redirect_batch(["Chien_Français"], fetch) == {"Chien_Français": "Chien Français"}

    @pytest.mark.asyncio
    async def test_identity_resolutions_are_omitted(self):
        async def fetch(url, params):
            return _redirect_payload(normalized={"Beagle": "Beagle"}, redirects={"Boxer": "Boxer"})

        assert await resolve_redirect_batch(["Beagle", "Boxer"], fetch) == {}

    @pytest.mark.asyncio
    async def test_rejects_oversized_batch(self, stub_fetch):
        titles = [f"Breed {i}" for i in range(MAX_TITLES_PER_QUERY + 1)]

        with pytest.raises(ExtractionError, match="max 50"):
            await resolve_redirect_batch(titles, stub_fetch)
        assert stub_fetch.calls == []


class TestChunkTitles:
    @pytest.mark.parametrize(
        "count,expected_sizes",
        [
            (0, []),
            (1, [1]),
            (50, [50]),
            (51, [50, 1]),
            (101, [50, 50, 1]),
        ],
    )
    def test_chunk_sizes(self, count, expected_sizes):
        titles = [f"Breed {i}" for i in range(count)]
        chunks = chunk_titles(titles)

        assert [len(chunk) for chunk in chunks] == expected_sizes
        assert [title for chunk in chunks for title in chunk] == titles

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            chunk_titles(["Beagle"], 0)


class TestResolveRedirects:
    @pytest.mark.asyncio
    async def test_batches_titles_and_merges_results(self, stub_fetch):
        aliases = await resolve_redirects(["Akita (dog)", "Affenpinscher", "Afghan Hound"], stub_fetch)
        assert aliases == {"Akita (dog)": "Akita (dog breed)"}

    @pytest.mark.asyncio
    async def test_101_titles_issue_three_concurrent_calls(self):
        fetch = RecordingFetch()
        titles = [f"Breed {i}" for i in range(101)]

        aliases = await resolve_redirects(titles, fetch)

        assert sorted(len(batch) for batch in fetch.batches) == [1, 50, 50]
        assert fetch.max_in_flight == 3
        assert aliases == {
            "Breed 0": "Breed 0 (dog)",
            "Breed 50": "Breed 50 (dog)",
            "Breed 100": "Breed 100 (dog)",
        }

    @pytest.mark.asyncio
    async def test_no_titles_makes_no_calls(self):
        fetch = RecordingFetch()

        assert await resolve_redirects([], fetch) == {}
        assert fetch.batches == []

    @pytest.mark.asyncio
    async def test_smaller_batch_size(self):
        fetch = RecordingFetch()

        await resolve_redirects([f"Breed {i}" for i in range(5)], fetch, batch_size=2)
        assert [len(batch) for batch in fetch.batches] == [2, 2, 1]

    @pytest.mark.asyncio
    async def test_batch_size_is_capped_at_api_limit(self):
        fetch = RecordingFetch()

        await resolve_redirects([f"Breed {i}" for i in range(60)], fetch, batch_size=500)
        assert [len(batch) for batch in fetch.batches] == [50, 10]

    @pytest.mark.asyncio
    async def test_any_failed_batch_fails_the_whole_resolution(self):
        fetch = RecordingFetch(fail_on_call=2)

        with pytest.raises(ConnectionError, match="batch 2 failed"):
            await resolve_redirects([f"Breed {i}" for i in range(120)], fetch)
