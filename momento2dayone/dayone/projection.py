"""
Projection of parsed moments into Day One entries.
"""

from typing import Iterable, List

from ..momento.dates import to_iso8601
from ..momento.schemas import Moment
from .schemas import DayOneEntry


def merge_tags(moment: Moment) -> List[str]:
    """
    Day One has no people or places, so both become tags.

    Order is tags, people, places. Duplicates are kept; Day One decides
    whether two tags are the same.
    """
    return [*moment.tags, *moment.people, *moment.places]


def project(moment: Moment) -> DayOneEntry:
    """
    Project a parsed moment into a Day One entry.

    Args:
        moment: A valid moment

    Returns:
        DayOneEntry ready for import

    Raises:
        ValueError: If the moment has no timestamp
    """
    if not moment.is_valid:
        raise ValueError("Cannot project a moment without a timestamp")

    return DayOneEntry(
        iso_timestamp=to_iso8601(moment.timestamp),
        text=moment.body,
        merged_tags=merge_tags(moment),
        media=list(moment.media)
    )


def project_all(moments: Iterable[Moment]) -> List[DayOneEntry]:
    """Project moments, keeping their order."""
    return [project(moment) for moment in moments]
