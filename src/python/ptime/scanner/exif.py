"""
EXIF capture-date extraction for image files.

The metadata container is parsed with exifread, which handles JPEG, TIFF
and the TIFF-based RAW formats. A fresh parse is done per file; nothing is
cached between files.

Capture date resolution tries tags in a fixed priority order:

1. Original capture (DateTimeOriginal)
2. Modification timestamp (DateTime)
3. Digitization timestamp (DateTimeDigitized)

The first tag that is present *and* parses to a valid calendar date wins.
A tag that is present but garbled falls through to the next one.

Failures are split in two:
- FileReadError: the file itself cannot be opened or read (fatal for a scan)
- MetadataError: the EXIF block is malformed (the file is skipped)
"""

import errno
import logging
import re
from datetime import date
from pathlib import Path
from typing import Iterator, Optional, Tuple

import exifread

from ptime.errors import FileReadError, MetadataError

logger = logging.getLogger(__name__)

# exifread keys are "<IFD name> <tag name>". The same tag can live in more
# than one IFD depending on the camera, so each priority level lists every
# place it has been seen.
DATE_TAG_PRIORITY: Tuple[Tuple[str, ...], ...] = (
    ("EXIF DateTimeOriginal", "Image DateTimeOriginal"),
    ("Image DateTime", "Thumbnail DateTime"),
    ("EXIF DateTimeDigitized", "Image DateTimeDigitized"),
)

DATE_SEPARATORS = (":", "-")

# Optional sign and ASCII digits only
DATE_COMPONENT = re.compile(r"[+-]?[0-9]+")


def read_capture_date(file_path: Path) -> Optional[date]:
    """
    Read the capture date from an image file's EXIF metadata.

    Args:
        file_path: Path to the image file

    Returns:
        The capture date, or None if no date tag holds a valid date

    Raises:
        FileReadError: If the file cannot be opened or read
        MetadataError: If the EXIF container cannot be parsed

    Example:
        >>> read_capture_date(Path("/photos/IMG_1234.jpg"))
        datetime.date(2023, 12, 25)
    """
    try:
        f = open(file_path, "rb")
    except OSError as e:
        raise FileReadError(file_path, e) from e

    with f:
        try:
            tags = exifread.process_file(f, details=False)
        except OSError as e:
            # A corrupt IFD offset makes exifread seek to an invalid position
            if e.errno == errno.EINVAL:
                raise MetadataError(file_path, str(e)) from e
            raise FileReadError(file_path, e) from e
        except Exception as e:
            raise MetadataError(file_path, str(e) or type(e).__name__) from e

    if not tags:
        logger.debug("No EXIF data found in %s", file_path)
        return None

    return resolve_capture_date(tags)


def resolve_capture_date(tags) -> Optional[date]:
    """
    Pick a capture date out of a parsed tag mapping.

    Args:
        tags: Mapping of exifread tag names to tag objects (or plain values)

    Returns:
        Date from the highest-priority tag that parses, or None
    """
    for tag_names in DATE_TAG_PRIORITY:
        for tag_name in tag_names:
            tag = tags.get(tag_name)
            if tag is None:
                continue
            for text in _tag_texts(tag):
                parsed = parse_exif_datetime(text)
                if parsed is not None:
                    return parsed
            logger.debug("Unparsable %s value: %r", tag_name, tag)
    return None


def _tag_texts(tag) -> Iterator[str]:
    """
    Yield cleaned text values from an exifread tag.

    ASCII tags come back from exifread as a str, but malformed files can
    produce bytes or a list of either.
    """
    values = getattr(tag, "values", tag)
    if isinstance(values, (str, bytes)):
        values = [values]

    for value in values:
        if isinstance(value, bytes):
            try:
                value = value.decode("utf-8")
            except UnicodeDecodeError:
                continue
        if not isinstance(value, str):
            continue
        text = value.strip("\x00").strip()
        if text:
            yield text


def parse_exif_datetime(datetime_str: str) -> Optional[date]:
    """
    Parse the date part of an EXIF datetime string.

    EXIF stores "YYYY:MM:DD HH:MM:SS", but some writers use hyphens in the
    date, drop the time, or append trailing junk. Only the first
    whitespace-separated token is used.

    Args:
        datetime_str: Raw EXIF datetime text

    Returns:
        The calendar date, or None if the text holds no valid date

    Examples:
        >>> parse_exif_datetime("2023:12:25 14:30:45")
        datetime.date(2023, 12, 25)
        >>> parse_exif_datetime("2020-01-15 10:11:12")
        datetime.date(2020, 1, 15)
        >>> parse_exif_datetime("2023:13:25 10:00:00") is None
        True
    """
    parts = datetime_str.split()
    if not parts:
        return None

    date_part = parts[0]
    for separator in DATE_SEPARATORS:
        components = date_part.split(separator)
        if len(components) != 3:
            continue
        if not all(DATE_COMPONENT.fullmatch(c) for c in components):
            continue
        try:
            year, month, day = (int(c) for c in components)
            return date(year, month, day)
        except ValueError:
            continue

    return None
