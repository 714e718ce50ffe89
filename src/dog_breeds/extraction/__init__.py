# ABOUTME: Data extraction from Wikipedia and Wikidata
# ABOUTME: Pipeline Stage 1: breed list, breed metadata and title redirects

"""
Extraction Layer: Get raw data from external sources

This layer handles:
- Breed list wikitext extraction from Wikipedia
- Origin and image metadata from the Wikidata SPARQL endpoint
- Wikipedia title normalization and redirect resolution

Data Flow: External Sources → title-keyed maps → core/ merge
"""

from .base import ExtractionError, FetchJSON
from .http import WikiHttpFetcher
from .wiki.breed_list import fetch_breed_list, parse_breed_list_wikitext
from .wiki.redirects import MAX_TITLES_PER_QUERY, resolve_redirect_batch, resolve_redirects
from .wikidata import fetch_metadata, parse_metadata

__all__ = [
    "ExtractionError",
    "FetchJSON",
    "MAX_TITLES_PER_QUERY",
    "WikiHttpFetcher",
    "fetch_breed_list",
    "fetch_metadata",
    "parse_breed_list_wikitext",
    "parse_metadata",
    "resolve_redirect_batch",
    "resolve_redirects",
]
