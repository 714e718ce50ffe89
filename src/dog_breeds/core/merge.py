# ABOUTME: Joins the Wikipedia breed list with Wikidata metadata into the published records
# ABOUTME: Falls back to redirect targets for lookups and sorts with the Unicode Collation Algorithm

from dataclasses import dataclass, field
from functools import lru_cache

from pyuca import Collator

from dog_breeds.core.models import AliasMap, BreedRecord, ExtractedBreeds, MetadataEntry
from dog_breeds.utils.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loading the DUCET table is slow, build it once per process
    return Collator()


def collation_key(name: str) -> tuple[int, ...]:
    """Locale-independent sort key for a breed name (Unicode default collation)."""
    return _collator().sort_key(name)


def sort_breeds(records: list[BreedRecord]) -> list[BreedRecord]:
    """Return records ordered by name; ties keep their incoming order."""
    return sorted(records, key=lambda record: collation_key(record.name))


def find_metadata(
    article_title: str, metadata: dict[str, MetadataEntry], aliases: AliasMap
) -> MetadataEntry | None:
    """Look up a title directly, then through its redirect target."""
    if article_title in metadata:
        return metadata[article_title]

    resolved = aliases.get(article_title)
    if resolved is not None and resolved in metadata:
        return metadata[resolved]

    return None


@dataclass
class MergeReport:
    """Informational match counts for one merge."""

    total: int = 0
    matched_direct: int = 0
    matched_via_alias: int = 0
    unmatched: list[str] = field(default_factory=list)

    @property
    def matched(self) -> int:
        return self.matched_direct + self.matched_via_alias


def merge_with_report(
    extracted: ExtractedBreeds, metadata: dict[str, MetadataEntry], aliases: AliasMap
) -> tuple[list[BreedRecord], MergeReport]:
    """Merge breed list entries with metadata and report how each one matched.

    The record name always comes from the breed list; metadata only supplies
    origin and image. Entries without metadata are kept with empty fields, so
    the output has exactly one record per extracted entry.
    """
    report = MergeReport(total=len(extracted))
    merged: list[BreedRecord] = []

    for article_title, display_name in extracted.items():
        entry = find_metadata(article_title, metadata, aliases)

        if entry is None:
            report.unmatched.append(display_name)
            merged.append(BreedRecord(name=display_name))
            continue

        if article_title in metadata:
            report.matched_direct += 1
        else:
            report.matched_via_alias += 1
        merged.append(BreedRecord(name=display_name, origin=entry.origin, image_url=entry.image_url))

    return sort_breeds(merged), report


def merge_breed_data(
    extracted: ExtractedBreeds, metadata: dict[str, MetadataEntry], aliases: AliasMap
) -> list[BreedRecord]:
    """Merge breed list entries with metadata into a name-sorted record list."""
    records, report = merge_with_report(extracted, metadata, aliases)
    log_merge_report(report)
    return records


def log_merge_report(report: MergeReport) -> None:
    logger.info(
        "Merged breed data",
        total=report.total,
        matched_direct=report.matched_direct,
        matched_via_alias=report.matched_via_alias,
        unmatched=len(report.unmatched),
    )
    if report.unmatched:
        logger.debug("Breeds without Wikidata metadata", names=report.unmatched)
