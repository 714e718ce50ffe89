# ABOUTME: Reads and writes the dog-breeds.json dataset document
# ABOUTME: Serialization is deterministic: two-space indent, fixed key order, one trailing newline

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, ConfigDict, TypeAdapter

from dog_breeds.core.models import BreedRecord
from dog_breeds.utils.logging import get_logger

logger = get_logger(__name__)

DATASET_FILENAME = "dog-breeds.json"


class StoredBreed(BaseModel):
    """One entry as it appears on disk; all three keys are required, others are ignored."""

    model_config = ConfigDict(extra="ignore")

    name: str
    origin: str
    imageURL: str


_document_adapter = TypeAdapter(list[StoredBreed])


class WriteText(Protocol):
    """Write capability: persist the full document text at ``path``."""

    def __call__(self, path: Path, text: str) -> None: ...


def default_dataset_path() -> Path:
    """Location of the dataset shipped inside the package."""
    return Path(__file__).resolve().parent.parent / "data" / DATASET_FILENAME


def serialize_breeds(records: Iterable[BreedRecord]) -> str:
    """Render records as the published JSON document."""
    documents = [record.to_document() for record in records]
    return json.dumps(documents, indent=2, ensure_ascii=False) + "\n"


def write_text_file(path: Path, text: str) -> None:
    """Overwrite ``path`` with ``text``, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.debug("Wrote dataset document", path=str(path), size=len(text))


def load_breeds(path: Path | None = None) -> list[BreedRecord]:
    """Load and validate a dataset document.

    Raises:
        FileNotFoundError: If the document does not exist
        pydantic.ValidationError: If an entry is missing one of the three keys
    """
    path = Path(path) if path is not None else default_dataset_path()
    entries = _document_adapter.validate_json(path.read_bytes())
    records = [BreedRecord(name=entry.name, origin=entry.origin, image_url=entry.imageURL) for entry in entries]
    logger.debug("Loaded dataset document", path=str(path), breed_count=len(records))
    return records
