# ABOUTME: Business logic and orchestration layer
# ABOUTME: Pipeline Stage 2: title-keyed source maps → merged, sorted breed records

"""
Core Layer: Domain models, merging and pipeline orchestration

This layer handles:
- Breed record and source metadata models
- Joining the breed list with Wikidata metadata via redirects
- Orchestrating a full dataset refresh

Data Flow: extraction/ maps → merge → persistence/ document
"""

from .merge import MergeReport, collation_key, find_metadata, merge_breed_data, merge_with_report
from .models import AliasMap, BreedRecord, ExtractedBreeds, MetadataEntry, SparqlBinding

# Import the pipeline on-demand to avoid circular imports
# Use: from dog_breeds.core.pipeline import BreedUpdatePipeline

__all__ = [
    "AliasMap",
    "BreedRecord",
    "ExtractedBreeds",
    "MergeReport",
    "MetadataEntry",
    "SparqlBinding",
    "collation_key",
    "find_metadata",
    "merge_breed_data",
    "merge_with_report",
]
