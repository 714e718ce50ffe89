# ABOUTME: Wikidata SPARQL query and result parsing for breed origins and images
# ABOUTME: Keys results by the English Wikipedia article title so they join with the breed list

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import unquote

from dog_breeds.config import get_config
from dog_breeds.core.models import MetadataEntry, SparqlBinding
from dog_breeds.extraction.base import FetchJSON
from dog_breeds.utils.logging import get_logger, log_pipeline_step

logger = get_logger(__name__)

WIKI_PATH_PREFIX = "/wiki/"

SPARQL_QUERY = """
SELECT ?breed ?breedLabel ?article
  (GROUP_CONCAT(DISTINCT ?originLabel; separator=", ") AS ?origins)
  (SAMPLE(?img) AS ?image)
WHERE {
  ?breed wdt:P31 wd:Q39367 .
  ?breed rdfs:label ?breedLabel . FILTER(LANG(?breedLabel) = "en")
  ?article schema:about ?breed ; schema:isPartOf <https://en.wikipedia.org/> .
  OPTIONAL {
    ?breed wdt:P495 ?origin .
    ?origin rdfs:label ?originLabel . FILTER(LANG(?originLabel) = "en")
  }
  OPTIONAL { ?breed wdt:P18 ?img . }
}
GROUP BY ?breed ?breedLabel ?article
ORDER BY ?breedLabel
"""


def article_title_from_url(article_url: str) -> str:
    """Turn ``https://en.wikipedia.org/wiki/Afghan_Hound`` into ``Afghan Hound``."""
    encoded_title = article_url.split(WIKI_PATH_PREFIX)[1]
    return unquote(encoded_title).replace("_", " ")


def secure_image_url(image_url: str) -> str:
    """Swap a leading ``http://`` for ``https://``; Wikidata still hands out insecure Commons links."""
    if image_url.startswith("http://"):
        return "https://" + image_url[len("http://") :]
    return image_url


def parse_metadata(bindings: Iterable[SparqlBinding | Mapping[str, Any]]) -> dict[str, MetadataEntry]:
    """Parse SPARQL result bindings into metadata keyed by Wikipedia article title.

    Missing origin or image values become empty strings here so nothing
    downstream has to tell absent from empty.

    Args:
        bindings: The ``results.bindings`` rows of a SPARQL JSON response

    Returns:
        Mapping of article title to metadata entry
    """
    breeds: dict[str, MetadataEntry] = {}

    for raw in bindings:
        binding = raw if isinstance(raw, SparqlBinding) else SparqlBinding.model_validate(raw)

        breeds[article_title_from_url(binding.article.value)] = MetadataEntry(
            name=binding.breed_label.value,
            origin=binding.origins.value if binding.origins else "",
            image_url=secure_image_url(binding.image.value) if binding.image else "",
        )

    return breeds


@log_pipeline_step("fetch_metadata")
async def fetch_metadata(fetch: FetchJSON, sparql_url: str | None = None) -> dict[str, MetadataEntry]:
    """Query Wikidata for every dog breed with an English Wikipedia article."""
    config = get_config()
    params = {"format": "json", "query": SPARQL_QUERY}

    data = await fetch(sparql_url or config.wikidata_sparql_url, params)
    breeds = parse_metadata(data["results"]["bindings"])

    logger.info("Parsed Wikidata breed metadata", breed_count=len(breeds))
    return breeds
