"""Scanner module for discovering image files and reading their capture dates."""

from ptime.scanner.collector import collect_photos
from ptime.scanner.directory import is_image_file, iter_candidates, resolve_root, scan_candidates
from ptime.scanner.exif import parse_exif_datetime, read_capture_date

__all__ = [
    "collect_photos",
    "is_image_file",
    "iter_candidates",
    "parse_exif_datetime",
    "read_capture_date",
    "resolve_root",
    "scan_candidates",
]
