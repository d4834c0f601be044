"""
Collect capture records for every image under a directory.

Per-file problems are handled by error class:
- no date tag: skipped, not an error
- malformed EXIF (MetadataError): skipped, a single bad file must not
  abort a bulk scan
- unreadable file (FileReadError): aborts the whole collection, since it
  points at an environment problem (e.g. lost permissions) rather than
  one bad file
"""

import logging
from pathlib import Path
from typing import Iterable, List

from ptime.errors import PtimeError
from ptime.models import CaptureRecord
from ptime.scanner.directory import IMAGE_EXTENSIONS, scan_candidates
from ptime.scanner.exif import read_capture_date

logger = logging.getLogger(__name__)


def collect_photos(root: Path, extensions: Iterable[str] = IMAGE_EXTENSIONS) -> List[CaptureRecord]:
    """
    Scan a directory tree and read the capture date of every image.

    Args:
        root: Directory to scan
        extensions: Accepted image extensions

    Returns:
        One CaptureRecord per file with a resolvable date, in traversal order

    Raises:
        PtimeError: Any fatal error from scanning or reading files

    Example:
        >>> records = collect_photos(Path("/photos"))
        >>> print(f"Found {len(records)} dated photos")
    """
    candidates = scan_candidates(root, extensions)
    records = []
    skipped = 0

    for candidate in candidates:
        try:
            captured = read_capture_date(candidate.absolute_path)
        except PtimeError as e:
            if e.fatal:
                raise
            logger.debug("Skipping %s: %s", candidate.relative_path, e)
            skipped += 1
            continue

        if captured is None:
            logger.debug("No capture date in %s", candidate.relative_path)
            skipped += 1
            continue

        records.append(CaptureRecord(relative_path=candidate.relative_path, capture_date=captured))

    logger.info(
        "Scanned %d candidates under %s: %d dated, %d skipped",
        len(candidates), root, len(records), skipped,
    )
    return records
