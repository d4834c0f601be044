"""
ptime - report when the photos in a directory tree were taken.

The pipeline:
1. Scan a directory tree for JPEG files
2. Read each file's EXIF capture date
3. Answer oldest / latest / per-year histogram queries

Usage:
    from pathlib import Path
    from ptime import collect_photos, find_oldest

    records = collect_photos(Path("/photos"))
    oldest = find_oldest(records)
    if oldest:
        print(oldest.relative_path, oldest.capture_date)
"""

from ptime.__version__ import __version__
from ptime.analysis import build_histogram, find_latest, find_oldest, records_to_dataframe
from ptime.errors import (
    FileReadError,
    MetadataError,
    PathResolutionError,
    PtimeError,
    RelativePathError,
    TraversalError,
)
from ptime.models import Candidate, CaptureRecord
from ptime.render import render_histogram
from ptime.scanner import collect_photos, read_capture_date, scan_candidates

__all__ = [
    "__version__",
    # Models
    "Candidate",
    "CaptureRecord",
    # Errors
    "FileReadError",
    "MetadataError",
    "PathResolutionError",
    "PtimeError",
    "RelativePathError",
    "TraversalError",
    # Pipeline
    "build_histogram",
    "collect_photos",
    "find_latest",
    "find_oldest",
    "read_capture_date",
    "records_to_dataframe",
    "render_histogram",
    "scan_candidates",
]
