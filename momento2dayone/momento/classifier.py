"""
Line classification for Momento exports.

The export has no explicit delimiters: headers are recognized by line
length and a pattern, metadata by a literal prefix, and everything else
is entry text. Assumes entry text never contains a line that is exactly
a date or a time.
"""

import re
from typing import List

from .schemas import ClassifiedLine, LineKind


# Regular expressions required during classification
DATE_PATTERN = re.compile(r"[0-9]{1,2}\s[a-zA-Z]{3,9}\s[0-9]{4}")
TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}")

PLACE_PREFIX = "At: "
PEOPLE_PREFIX = "With: "
TAGS_PREFIX = "Tags: "
MEDIA_PREFIX = "Media: "

LIST_SEPARATOR = ", "


def is_date_candidate(line: str) -> bool:
    """Cheap length check before matching the date pattern."""
    return 10 <= len(line) <= 17


def is_time_candidate(line: str) -> bool:
    """Cheap length check before matching the time pattern."""
    return len(line) == 5


def parse_place(remainder: str) -> str:
    """Drop the address and coordinates that follow the first colon."""
    return remainder.split(":", 1)[0]


def split_list(remainder: str) -> List[str]:
    """Split a people or tags value on the export's list separator."""
    return remainder.split(LIST_SEPARATOR)


def classify_line(line: str) -> ClassifiedLine:
    """
    Classify a single export line.

    Precedence is date header, time header, place, people, tags, media,
    then body. A line that passes a header length check but not the
    pattern falls through to the prefix checks.

    Args:
        line: Export line without its line terminator

    Returns:
        ClassifiedLine with the captured value
    """
    if is_date_candidate(line) and DATE_PATTERN.fullmatch(line):
        return ClassifiedLine(kind=LineKind.DATE_HEADER, value=line, raw=line)

    if is_time_candidate(line) and TIME_PATTERN.fullmatch(line):
        return ClassifiedLine(kind=LineKind.TIME_HEADER, value=line, raw=line)

    if line.startswith(PLACE_PREFIX):
        value = parse_place(line[len(PLACE_PREFIX):])
        return ClassifiedLine(kind=LineKind.PLACE, value=value, raw=line)

    if line.startswith(PEOPLE_PREFIX):
        value = split_list(line[len(PEOPLE_PREFIX):])
        return ClassifiedLine(kind=LineKind.PEOPLE, value=value, raw=line)

    if line.startswith(TAGS_PREFIX):
        value = split_list(line[len(TAGS_PREFIX):])
        return ClassifiedLine(kind=LineKind.TAGS, value=value, raw=line)

    if line.startswith(MEDIA_PREFIX):
        return ClassifiedLine(kind=LineKind.MEDIA, value=line[len(MEDIA_PREFIX):], raw=line)

    return ClassifiedLine(kind=LineKind.BODY, value=line, raw=line)
