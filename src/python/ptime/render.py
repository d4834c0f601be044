"""
Text bar chart rendering for year histograms.

Each year becomes one line:

    2019 ██████████████████████████ 52
    2020  0
    2021 ██████████████████████████████████████████████████ 100

Bars are scaled so the largest count spans the full width. A non-zero
count always gets at least one block.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Mapping

from ptime.config import BLOCK_CHAR


def render_histogram(
    year_counts: Mapping[int, int],
    width: int,
    bar_char: str = BLOCK_CHAR,
) -> List[str]:
    """
    Render a year histogram as text lines.

    Args:
        year_counts: Year to count mapping, in ascending year order
        width: Bar length for the largest count (already clamped by the caller)
        bar_char: Glyph repeated to draw bars

    Returns:
        One line per year; empty for an empty mapping
    """
    if not year_counts:
        return []

    max_count = max(year_counts.values())
    if max_count == 0:
        return [f"{year}  {count}" for year, count in year_counts.items()]

    lines = []
    for year, count in year_counts.items():
        if count == 0:
            bar = ""
        else:
            bar = bar_char * max(bar_length(count, max_count, width), 1)
        lines.append(f"{year} {bar} {count}")
    return lines


def bar_length(count: int, max_count: int, width: int) -> int:
    """Scale count to width, rounding halves away from zero."""
    scaled = count / max_count * width
    return int(Decimal(scaled).quantize(Decimal(1), rounding=ROUND_HALF_UP))
