"""Read-metering series accessor.

This module wraps a series reader and charges a fixed cost per read.
It models metered execution where every storage access is billed.
"""

from __future__ import annotations

from core.types import SeriesId
from store.series_store import SeriesReader


class MeteredSeriesReader:
    """Series reader proxy that counts reads and accumulates cost."""

    def __init__(self, reader: SeriesReader, read_cost: int = 1) -> None:
        self._reader = reader
        self._read_cost = read_cost
        self.count_reads = 0
        self.timestamp_reads = 0
        self.value_reads = 0

    @property
    def total_cost(self) -> int:
        """Cost of all timestamp and value reads so far."""
        return (self.timestamp_reads + self.value_reads) * self._read_cost

    def count(self, series_id: SeriesId) -> int:
        self.count_reads += 1
        return self._reader.count(series_id)

    def timestamp_at(self, series_id: SeriesId, index: int) -> int:
        self.timestamp_reads += 1
        return self._reader.timestamp_at(series_id, index)

    def value_at(self, series_id: SeriesId, index: int) -> object:
        self.value_reads += 1
        return self._reader.value_at(series_id, index)

    def reset(self) -> None:
        """Zero all counters."""
        self.count_reads = 0
        self.timestamp_reads = 0
        self.value_reads = 0
