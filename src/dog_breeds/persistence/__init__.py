# ABOUTME: Dataset document persistence layer
# ABOUTME: Pipeline Stage 3: merged records → dog-breeds.json → accessor library

"""
Persistence Layer: Save and load the breed dataset

This layer handles:
- Deterministic JSON serialization of breed records
- The default write capability used by the update pipeline
- Loading and validating the published document

Data Flow: core/ merged records → dog-breeds.json → catalog
"""

from .dataset import (
    DATASET_FILENAME,
    WriteText,
    default_dataset_path,
    load_breeds,
    serialize_breeds,
    write_text_file,
)

__all__ = [
    "DATASET_FILENAME",
    "WriteText",
    "default_dataset_path",
    "load_breeds",
    "serialize_breeds",
    "write_text_file",
]
