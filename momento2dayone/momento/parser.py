"""
Momento export parser.

This module turns the plain text export written by Momento into a list
of Moment objects in a single pass over the lines of the export.
"""

import io
import os
import time
from pathlib import Path
from typing import IO, Iterator, List, Optional, Union

from ..core.logging import get_logger
from ..core.exceptions import ExportFileError
from .classifier import classify_line
from .dates import resolve_timestamp
from .schemas import LineKind, Moment


logger = get_logger(__name__)

BOM = "\ufeff"
EXPORT_SUFFIX = ".txt"
ATTACHMENTS_DIR = "Attachments"


def parse(stream: IO, media_root: Union[str, Path]) -> List[Moment]:
    """
    Extract all moments from a Momento export stream.

    Args:
        stream: Binary stream of UTF-8 text, or an already decoded text stream
        media_root: Directory that 'Media:' file names are joined with

    Returns:
        Valid moments in export order; empty for an export with no moments

    Raises:
        MalformedTimestampError: If a date and time header do not resolve
    """
    start_time = time.time()
    root = str(media_root)

    moments: List[Moment] = []
    current_date = ""
    moment = Moment()
    body: List[str] = []

    lines = _iter_lines(stream)
    try:
        for line in lines:
            classified = classify_line(line)
            kind = classified.kind

            if kind is LineKind.DATE_HEADER:
                current_date = classified.value
                # The line under a date header is a separator, never content
                next(lines, None)
            elif kind is LineKind.TIME_HEADER:
                _finalize(moment, body, moments)
                moment = Moment(timestamp=resolve_timestamp(current_date, classified.value))
                body = []
            elif kind is LineKind.PLACE:
                moment.places.append(classified.value)
            elif kind is LineKind.PEOPLE:
                moment.people = list(dict.fromkeys(classified.value))
            elif kind is LineKind.TAGS:
                moment.tags = list(classified.value)
            elif kind is LineKind.MEDIA:
                moment.media.append(resolve_media_path(root, classified.value))
            else:
                body.append(line)
    finally:
        lines.close()

    _finalize(moment, body, moments)

    logger.debug(
        f"Parsed {len(moments)} moments in {time.time() - start_time:.3f}s"
    )
    return moments


def parse_file(
    path: Union[str, Path],
    media_root: Optional[Union[str, Path]] = None
) -> List[Moment]:
    """
    Extract all moments from a Momento export file.

    Args:
        path: Path to the exported .txt file
        media_root: Attachments directory (defaults to 'Attachments' beside the export)

    Returns:
        Valid moments in export order
    """
    path = Path(path)
    if path.suffix.lower() != EXPORT_SUFFIX:
        raise ExportFileError(
            f"Export file must be of type {EXPORT_SUFFIX}: {path}",
            path=str(path)
        )

    if media_root is None:
        media_root = default_media_root(path)

    logger.info(f"Parsing Momento export {path}")
    with open(path, "rb") as f:
        return parse(f, media_root)


def default_media_root(export_path: Path) -> Path:
    """Momento writes attachments to a folder next to Export.txt."""
    return export_path.resolve().parent / ATTACHMENTS_DIR


def resolve_media_path(media_root: str, file_name: str) -> str:
    """Join an attachment name with the media root as an absolute path."""
    return os.path.abspath(os.path.join(media_root, file_name))


def _finalize(moment: Moment, body: List[str], moments: List[Moment]) -> None:
    """Close the moment being built and keep it if it has a timestamp."""
    if not moment.is_valid:
        return
    moment.body = "\n".join(body).strip()
    moments.append(moment)


def _iter_lines(stream: IO) -> Iterator[str]:
    """Yield lines without terminators, dropping a leading byte order mark."""
    if isinstance(stream, io.TextIOBase):
        text, wrapper = stream, None
    else:
        # utf-8-sig drops a BOM at the start of the stream only
        wrapper = io.TextIOWrapper(stream, encoding="utf-8-sig", newline="\n")
        text = wrapper

    try:
        first = True
        for line in text:
            # One terminator only: a bare \r inside the line is content
            if line.endswith("\n"):
                line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
            if first:
                first = False
                if line.startswith(BOM):
                    line = line[len(BOM):]
            yield line
    finally:
        # Leave the caller's stream open
        if wrapper is not None:
            wrapper.detach()
