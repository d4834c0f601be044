"""
Aggregate queries over a capture record dataset.

All three queries accept an empty dataset and report "no result" (None or
an empty histogram) instead of failing.

Tie-breaking is deterministic: when several records share the winning date,
the one with the smallest relative path is reported. This is the same for
oldest and latest; latest does not reverse the path order.
"""

import logging
from typing import Dict, Optional, Sequence

import pandas as pd

from ptime.models import CaptureRecord

logger = logging.getLogger(__name__)

RECORD_COLUMNS = ["relative_path", "capture_date", "year"]


def find_oldest(records: Sequence[CaptureRecord]) -> Optional[CaptureRecord]:
    """Return the earliest-dated record, or None for an empty dataset."""
    if not records:
        return None
    return min(records, key=lambda r: (r.capture_date, r.relative_path))


def find_latest(records: Sequence[CaptureRecord]) -> Optional[CaptureRecord]:
    """Return the latest-dated record, or None for an empty dataset."""
    if not records:
        return None
    latest_date = max(r.capture_date for r in records)
    return min(
        (r for r in records if r.capture_date == latest_date),
        key=lambda r: r.relative_path,
    )


def build_histogram(records: Sequence[CaptureRecord]) -> Dict[int, int]:
    """
    Count records per capture year, zero-filling missing years.

    Args:
        records: Capture records in any order

    Returns:
        Mapping of year to count with ascending keys covering every year
        from the earliest to the latest capture year. Empty for no records.

    Example:
        >>> build_histogram(records)
        {2019: 4, 2020: 0, 2021: 7}
    """
    df = records_to_dataframe(records)
    if df.empty:
        return {}

    counts = df["year"].value_counts()
    all_years = range(int(counts.index.min()), int(counts.index.max()) + 1)
    counts = counts.reindex(all_years, fill_value=0)

    return {int(year): int(count) for year, count in counts.items()}


def records_to_dataframe(records: Sequence[CaptureRecord]) -> pd.DataFrame:
    """
    Convert capture records to a pandas DataFrame.

    Args:
        records: Capture records

    Returns:
        DataFrame with relative_path (POSIX string), capture_date and year
        columns, one row per record
    """
    if not records:
        return pd.DataFrame(columns=RECORD_COLUMNS)

    return pd.DataFrame([record.to_dict() for record in records], columns=RECORD_COLUMNS)
