# ABOUTME: Read-only accessor library over the published breed dataset
# ABOUTME: Exposes all breeds in alphabetical order and a random picker that avoids immediate repeats

import random as _random
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Generic, TypeVar

from dog_breeds.core.models import BreedRecord
from dog_breeds.persistence.dataset import load_breeds

T = TypeVar("T")


class UniqueRandomPicker(Generic[T]):
    """Random picker that never returns the same item twice in a row.

    With a single item that item is always returned.
    """

    def __init__(self, items: Sequence[T], rng: _random.Random | None = None):
        self._items = tuple(items)
        self._rng = rng or _random.Random()
        self._last_index: int | None = None

    def __call__(self) -> T:
        if not self._items:
            raise IndexError("cannot pick from an empty collection")

        index = self._rng.randrange(len(self._items))
        if len(self._items) > 1:
            while index == self._last_index:
                index = self._rng.randrange(len(self._items))

        self._last_index = index
        return self._items[index]


class BreedCatalog:
    """The breed dataset as loaded once at startup."""

    def __init__(self, records: Sequence[BreedRecord], rng: _random.Random | None = None):
        self._records = tuple(records)
        self._picker = UniqueRandomPicker(self._records, rng=rng)

    @property
    def all(self) -> tuple[BreedRecord, ...]:
        """Every breed, in dataset (alphabetical) order."""
        return self._records

    def random(self) -> BreedRecord:
        """One breed at random, never the same as the previous pick."""
        return self._picker()

    def find(self, name: str) -> BreedRecord | None:
        """Case-insensitive lookup by breed name."""
        wanted = name.casefold()
        return next((record for record in self._records if record.name.casefold() == wanted), None)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[BreedRecord]:
        return iter(self._records)


def load_catalog(path: Path | str | None = None, rng: _random.Random | None = None) -> BreedCatalog:
    """Read a dataset document into a catalog."""
    return BreedCatalog(load_breeds(Path(path) if path is not None else None), rng=rng)


# Global catalog instance - lazy loaded when first accessed
_catalog_instance: BreedCatalog | None = None


def get_catalog() -> BreedCatalog:
    """Get the process-wide catalog over the packaged dataset.

    The dataset is read on first access; subsequent calls return the same
    instance, so consecutive random picks share their no-repeat state.
    """
    global _catalog_instance
    if _catalog_instance is None:
        _catalog_instance = load_catalog()
    return _catalog_instance


def all_breeds() -> tuple[BreedRecord, ...]:
    return get_catalog().all


def random_breed() -> BreedRecord:
    return get_catalog().random()
