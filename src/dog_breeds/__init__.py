# ABOUTME: Dog breed dataset built from Wikipedia's breed list and Wikidata metadata
# ABOUTME: Re-exports the accessor library; the refresh pipeline lives in dog_breeds.core.pipeline

from .catalog import BreedCatalog, UniqueRandomPicker, all_breeds, get_catalog, load_catalog, random_breed
from .core.models import BreedRecord

__all__ = [
    "BreedCatalog",
    "BreedRecord",
    "UniqueRandomPicker",
    "all_breeds",
    "get_catalog",
    "load_catalog",
    "random_breed",
]
