"""Brute-force reference lookup.

This module scans a series front to back and is used as the ground
truth the binary search is checked against.
"""

from __future__ import annotations

from core.types import NOT_FOUND, LookupResult, SeriesId
from store.series_store import SeriesReader


def linear_scan_last_at_or_before(
    reader: SeriesReader,
    series_id: SeriesId,
    target: int,
) -> LookupResult:
    """Return the last index with timestamp <= target by scanning every record."""
    result = NOT_FOUND
    for index in range(reader.count(series_id)):
        if reader.timestamp_at(series_id, index) > target:
            break
        result = LookupResult.hit(index)
    return result
