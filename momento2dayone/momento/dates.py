"""
Date helpers for Momento export headers.

Momento writes a day header such as ``13 August 2002`` followed by
``HH:MM`` time headers in 24-hour local time. The export carries no
time zone, so moments are resolved as UTC.
"""

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Mapping

from ..core.exceptions import MalformedTimestampError


MONTHS: Mapping[str, int] = MappingProxyType({
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
})

ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def resolve_timestamp(date_text: str, time_text: str) -> datetime:
    """
    Combine a date header and a time header into a UTC datetime.

    Args:
        date_text: Date header text, e.g. ``13 August 2002``
        time_text: Time header text, e.g. ``13:45``

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        MalformedTimestampError: If the pair is not a valid calendar instant
    """
    if not date_text:
        raise MalformedTimestampError(
            f"Time header {time_text!r} appears before any date header",
            date_text=date_text,
            time_text=time_text
        )

    parts = date_text.split()
    if len(parts) != 3:
        raise MalformedTimestampError(
            f"Unrecognized date header {date_text!r}",
            date_text=date_text,
            time_text=time_text
        )

    day, month_name, year = parts
    month = MONTHS.get(month_name.lower())
    if month is None:
        raise MalformedTimestampError(
            f"Unknown month {month_name!r} in date header {date_text!r}",
            date_text=date_text,
            time_text=time_text
        )

    try:
        hour, minute = (int(part) for part in time_text.split(":"))
        return datetime(int(year), month, int(day), hour, minute, tzinfo=timezone.utc)
    except ValueError as e:
        raise MalformedTimestampError(
            f"Invalid timestamp {date_text!r} {time_text!r}: {e}",
            date_text=date_text,
            time_text=time_text
        ) from e


def to_iso8601(value: datetime) -> str:
    """Render a datetime as ``YYYY-MM-DDTHH:MM:SSZ``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(ISO_FORMAT)
