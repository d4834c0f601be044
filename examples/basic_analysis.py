"""
Example: Basic capture-date analysis

This script collects capture dates for a photo library and explores them
with pandas, going a little beyond the three built-in CLI queries.
"""

import logging
import sys
from pathlib import Path

from ptime import PtimeError, build_histogram, collect_photos, find_latest, find_oldest, records_to_dataframe
from ptime.render import render_histogram


def main():
    """Run basic capture-date analysis example."""

    # Set up logging to see what's happening
    logging.basicConfig(level=logging.INFO)

    # Example photo directory (replace with your path)
    photo_directory = Path(sys.argv[1] if len(sys.argv) > 1 else "~/Pictures").expanduser()

    print(f"Scanning photos in: {photo_directory}")

    try:
        records = collect_photos(photo_directory)
    except PtimeError as e:
        print(f"Error during scan: {e}")
        return

    if not records:
        print("No dated photos found")
        return

    oldest = find_oldest(records)
    latest = find_latest(records)
    print(f"\n{len(records)} dated photos")
    print(f"   Oldest: {oldest.format_line()}")
    print(f"   Latest: {latest.format_line()}")

    print("\nPhotos per year:")
    for line in render_histogram(build_histogram(records), width=40):
        print(f"   {line}")

    # The DataFrame makes ad-hoc questions easy
    df = records_to_dataframe(records)
    df["month"] = df["capture_date"].map(lambda d: d.month)
    busiest = df.groupby(["year", "month"]).size().sort_values(ascending=False).head(3)

    print("\nBusiest months:")
    for (year, month), count in busiest.items():
        print(f"   {year}-{month:02d}: {count} photos")

    folders = df["relative_path"].map(lambda p: Path(p).parent.as_posix())
    print(f"\nPhotos spread over {folders.nunique()} folders")


if __name__ == "__main__":
    main()
