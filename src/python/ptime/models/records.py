"""
Candidate and CaptureRecord models.

A Candidate is a file the scanner found by extension; it has not been
opened yet. A CaptureRecord pairs a file's root-relative path with the
calendar date it was captured. Both are immutable and are passed from one
pipeline stage to the next without modification.
"""

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Dict


@dataclass(frozen=True)
class Candidate:
    """
    An image file discovered under a scan root.

    Attributes:
        absolute_path: Location of the file under the canonical root
        relative_path: The same location with the root prefix stripped
    """
    absolute_path: Path
    relative_path: Path


@dataclass(frozen=True)
class CaptureRecord:
    """
    A file with a resolved capture date.

    Attributes:
        relative_path: Path of the file relative to the scan root
        capture_date: Calendar date the photo was taken (no time, no timezone)
    """
    relative_path: Path
    capture_date: date

    @property
    def year(self) -> int:
        return self.capture_date.year

    def to_dict(self) -> Dict[str, object]:
        """Convert to dictionary for DataFrame construction."""
        return {
            "relative_path": self.relative_path.as_posix(),
            "capture_date": self.capture_date,
            "year": self.year,
        }

    def format_line(self) -> str:
        """Format as ``<relative-path> <YYYY-MM-DD>`` for console output."""
        return f"{self.relative_path.as_posix()} {self.capture_date.isoformat()}"
