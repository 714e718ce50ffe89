# ABOUTME: Shared fixtures: canned Wikipedia/Wikidata payloads and a recording fetch stub
# ABOUTME: The stub stands in for the HTTP fetcher so pipeline tests never touch the network

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import pytest

from dog_breeds.config import reload_config

SAMPLE_WIKITEXT = """
== Extant breeds, varieties and types ==
=== A–C ===
{{columns-list|colwidth=20em|
* [[Affenpinscher]]{{sfnp|Fogle|2009|p=277}}
* [[Afghan Hound]]{{sfnp|Fogle|2009|p=107}}
* [[Akita (dog)|Akita]]{{sfnp|Fogle|2009|p=136}}
* [[Alaskan Malamute]]{{sfnp|Fogle|2009|p=122}}
}}

== Extinct and critically endangered breeds ==
* [[Alpine Spaniel]]
* [[Extinct Breed Two]]
"""

SAMPLE_BINDINGS = [
    {
        "breedLabel": {"value": "Affenpinscher"},
        "article": {"value": "https://en.wikipedia.org/wiki/Affenpinscher"},
        "origins": {"value": "Germany"},
        "image": {"value": "http://commons.wikimedia.org/wiki/Special:FilePath/Affenpinscher.jpg"},
    },
    {
        "breedLabel": {"value": "Afghan Hound"},
        "article": {"value": "https://en.wikipedia.org/wiki/Afghan_Hound"},
        "origins": {"value": "Afghanistan"},
        "image": {"value": "http://commons.wikimedia.org/wiki/Special:FilePath/Afghan_Hound.jpg"},
    },
    {
        "breedLabel": {"value": "Akita"},
        "article": {"value": "https://en.wikipedia.org/wiki/Akita_(dog_breed)"},
        "origins": {"value": "Japan"},
        "image": {"value": "http://commons.wikimedia.org/wiki/Special:FilePath/Akita_inu.jpg"},
    },
    {
        "breedLabel": {"value": "Alaskan Malamute"},
        "article": {"value": "https://en.wikipedia.org/wiki/Alaskan_Malamute"},
        "origins": {"value": ""},
    },
]

SAMPLE_REDIRECTS = {
    "query": {
        "normalized": [{"from": "Akita (dog)", "to": "Akita (dog)"}],
        "redirects": [{"from": "Akita (dog)", "to": "Akita (dog breed)"}],
        "pages": {},
    }
}


class StubFetch:
    """Fetch capability returning canned payloads based on the request parameters."""

    def __init__(
        self,
        wikitext: str = SAMPLE_WIKITEXT,
        bindings: list[dict[str, Any]] | None = None,
        redirects: dict[str, Any] | None = None,
        fail_on: str | None = None,
        error: Exception | None = None,
    ):
        self.wikitext = wikitext
        self.bindings = SAMPLE_BINDINGS if bindings is None else bindings
        self.redirects = SAMPLE_REDIRECTS if redirects is None else redirects
        self.fail_on = fail_on
        self.error = error or RuntimeError("network down")
        self.calls: list[tuple[str, dict[str, str]]] = []

    def calls_for(self, action: str) -> list[dict[str, str]]:
        return [params for _, params in self.calls if params.get("action") == action]

    async def __call__(self, url: str, params: Mapping[str, str]) -> Any:
        params = dict(params)
        self.calls.append((url, params))
        # Let concurrent requests interleave like real I/O would
        await asyncio.sleep(0)

        kind = params.get("action") or ("sparql" if "query" in params else "unknown")
        if kind == self.fail_on:
            raise self.error

        if kind == "parse":
            return {"parse": {"wikitext": {"*": self.wikitext}}}
        if kind == "query":
            return self.redirects
        if kind == "sparql":
            return {"results": {"bindings": self.bindings}}
        raise AssertionError(f"Unexpected fetch: {url} {params}")


@pytest.fixture
def stub_fetch() -> StubFetch:
    return StubFetch()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep tests independent of the developer's environment and .env file."""
    for key in ("DOG_BREEDS_OUTPUT_PATH", "DOG_BREEDS_REDIRECT_BATCH_SIZE", "DOG_BREEDS_LOG_MODE"):
        monkeypatch.delenv(key, raising=False)
    reload_config()
    yield
    reload_config()


@pytest.fixture
def make_fetch():
    """Factory for stub fetchers with custom payloads or failures."""
    return StubFetch


@pytest.fixture
def sample_wikitext() -> str:
    return SAMPLE_WIKITEXT


@pytest.fixture
def sample_bindings() -> list[dict[str, Any]]:
    return [dict(binding) for binding in SAMPLE_BINDINGS]
