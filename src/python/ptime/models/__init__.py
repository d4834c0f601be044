"""Data models for ptime."""

from ptime.models.records import Candidate, CaptureRecord

__all__ = [
    "Candidate",
    "CaptureRecord",
]
