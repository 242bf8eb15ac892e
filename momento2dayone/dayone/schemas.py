"""
Schemas for Day One entries and import results.
"""

from typing import List, Protocol, runtime_checkable

from pydantic import BaseModel, Field, ConfigDict


@runtime_checkable
class DayOneCompatible(Protocol):
    """Anything the importer can turn into a dayone2 'new' command."""

    iso_timestamp: str
    text: str
    merged_tags: List[str]
    media: List[str]

    def filtered_media(self, extension: str) -> List[str]:
        ...


class DayOneEntry(BaseModel):
    """A moment projected into the shape Day One expects."""

    model_config = ConfigDict(frozen=True)

    iso_timestamp: str = Field(description="Entry date, e.g. 2002-08-13T13:45:00Z")
    text: str = Field(default="", description="Entry text")
    merged_tags: List[str] = Field(
        default_factory=list,
        description="Tags followed by people and places"
    )
    media: List[str] = Field(default_factory=list, description="Absolute attachment paths")

    def filtered_media(self, extension: str) -> List[str]:
        """Return attachments ending with the given extension, in order."""
        return [path for path in self.media if path.endswith(extension)]


class ImportFailure(BaseModel):
    """A single entry the dayone2 tool rejected."""

    iso_timestamp: str = Field(description="Date of the rejected entry")
    output: str = Field(default="", description="Combined dayone2 output")


class ImportResult(BaseModel):
    """Result of importing a batch of entries."""

    total: int = Field(default=0, description="Entries submitted")
    imported: int = Field(default=0, description="Entries imported")
    failed: int = Field(default=0, description="Entries rejected")
    failures: List[ImportFailure] = Field(default_factory=list, description="Rejected entries")
    processing_time: float = Field(default=0.0, description="Processing time in seconds")
    dry_run: bool = Field(default=False, description="Whether commands were only logged")

    @property
    def success(self) -> bool:
        """Check if every entry was imported."""
        return self.failed == 0
