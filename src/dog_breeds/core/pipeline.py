# ABOUTME: Orchestrates a full dataset refresh: fetch both sources, resolve redirects, merge, write
# ABOUTME: Network and file access are injected so the whole run can be exercised without I/O

from __future__ import annotations

import asyncio
from pathlib import Path

from dog_breeds.config import get_config
from dog_breeds.core.merge import MergeReport, log_merge_report, merge_with_report
from dog_breeds.core.models import BreedRecord
from dog_breeds.extraction.base import FetchJSON
from dog_breeds.extraction.http import WikiHttpFetcher
from dog_breeds.extraction.wiki.breed_list import fetch_breed_list
from dog_breeds.extraction.wiki.redirects import resolve_redirects
from dog_breeds.extraction.wikidata import fetch_metadata
from dog_breeds.persistence.dataset import WriteText, default_dataset_path, serialize_breeds, write_text_file
from dog_breeds.utils.logging import with_pipeline_context


class BreedUpdatePipeline:
    """Rebuilds the breed dataset from Wikipedia and Wikidata.

    Every run starts from scratch and writes the document exactly once, as
    its last step, so a failure anywhere leaves the existing file untouched.
    Errors are not caught here; retrying is up to the caller.
    """

    def __init__(
        self,
        fetch: FetchJSON | None = None,
        write: WriteText | None = None,
        output_path: Path | str | None = None,
    ):
        config = get_config()
        self._owned_fetcher = WikiHttpFetcher() if fetch is None else None
        self.fetch: FetchJSON = fetch or self._owned_fetcher
        self.write: WriteText = write or write_text_file
        self.output_path = Path(output_path or config.output_path or default_dataset_path())
        self.redirect_batch_size = config.redirect_batch_size
        self.report: MergeReport | None = None

    async def run(self) -> list[BreedRecord]:
        """Run the pipeline and return the records that were written."""
        with with_pipeline_context("breed_update", output_path=str(self.output_path)) as logger:
            logger.info("Starting breed dataset update")

            breed_list, metadata = await asyncio.gather(
                fetch_breed_list(self.fetch),
                fetch_metadata(self.fetch),
            )

            aliases = await resolve_redirects(list(breed_list), self.fetch, batch_size=self.redirect_batch_size)

            records, report = merge_with_report(breed_list, metadata, aliases)
            log_merge_report(report)
            self.report = report

            self.write(self.output_path, serialize_breeds(records))

            logger.info("Breed dataset updated", breed_count=len(records), output_path=str(self.output_path))
            return records

    async def close(self) -> None:
        """Close the HTTP fetcher if the pipeline created it."""
        if self._owned_fetcher is not None:
            await self._owned_fetcher.close()


async def run_update(
    fetch: FetchJSON | None = None,
    write: WriteText | None = None,
    output_path: Path | str | None = None,
) -> list[BreedRecord]:
    """Refresh the dataset once with optional injected fetch/write capabilities."""
    pipeline = BreedUpdatePipeline(fetch=fetch, write=write, output_path=output_path)
    try:
        return await pipeline.run()
    finally:
        await pipeline.close()
