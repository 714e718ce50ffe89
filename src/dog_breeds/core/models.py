# ABOUTME: Domain models for breed records and the raw data pulled from Wikipedia/Wikidata
# ABOUTME: Optional source fields stay optional here and are coerced to empty strings during parsing

from pydantic import BaseModel, ConfigDict, Field

# Intermediate maps produced by each pipeline stage
ExtractedBreeds = dict[str, str]  # article title -> display name
AliasMap = dict[str, str]  # original article title -> resolved article title


class BreedRecord(BaseModel):
    """One breed in the published dataset.

    Serialized as ``{"name", "origin", "imageURL"}`` in that order. ``origin``
    and ``imageURL`` are empty strings when unknown, never null.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    origin: str = ""
    image_url: str = Field(default="", alias="imageURL")

    def to_document(self) -> dict[str, str]:
        """Dict in dataset field order with the published key names."""
        return self.model_dump(by_alias=True)


class MetadataEntry(BaseModel):
    """Wikidata facts for one Wikipedia article; ``name`` is the Wikidata label."""

    model_config = ConfigDict(frozen=True)

    name: str
    origin: str = ""
    image_url: str = ""


class SparqlValue(BaseModel):
    value: str


class SparqlBinding(BaseModel):
    """A single row of the Wikidata SPARQL JSON result."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    article: SparqlValue
    breed_label: SparqlValue = Field(alias="breedLabel")
    origins: SparqlValue | None = None
    image: SparqlValue | None = None
