"""
Pydantic schemas for the Momento export parser.

This module defines the parsed moment model and the result of
classifying a single export line.
"""

from datetime import datetime
from typing import List, Optional, Union
from enum import Enum

from pydantic import BaseModel, Field, ConfigDict


class LineKind(str, Enum):
    """Grammar productions of a Momento export line."""
    DATE_HEADER = "date_header"
    TIME_HEADER = "time_header"
    PLACE = "place"
    PEOPLE = "people"
    TAGS = "tags"
    MEDIA = "media"
    BODY = "body"


class ClassifiedLine(BaseModel):
    """A single export line and the data captured from it."""

    model_config = ConfigDict(frozen=True)

    kind: LineKind = Field(description="Grammar production the line belongs to")
    value: Union[str, List[str], None] = Field(
        default=None,
        description="Captured data (list for people and tags)"
    )
    raw: str = Field(description="Line as read, without its terminator")

    @property
    def is_header(self) -> bool:
        """Check if the line changes parser state."""
        return self.kind in (LineKind.DATE_HEADER, LineKind.TIME_HEADER)

    @property
    def is_metadata(self) -> bool:
        """Check if the line carries a structured field."""
        return self.kind in (LineKind.PLACE, LineKind.PEOPLE, LineKind.TAGS, LineKind.MEDIA)


class Moment(BaseModel):
    """A journal entry parsed from a Momento export."""

    timestamp: Optional[datetime] = Field(
        default=None,
        description="Resolved UTC timestamp; unset until a time header is seen"
    )
    body: str = Field(default="", description="Entry text without metadata lines")
    people: List[str] = Field(default_factory=list, description="People, last 'With:' line wins")
    places: List[str] = Field(default_factory=list, description="Places in appearance order")
    tags: List[str] = Field(default_factory=list, description="Tags, last 'Tags:' line wins")
    media: List[str] = Field(default_factory=list, description="Absolute attachment paths")

    @property
    def is_valid(self) -> bool:
        """A moment may be emitted only once its timestamp is resolved."""
        return self.timestamp is not None
