"""Series accessor protocol and in-memory store.

This module defines the read-only capability the lookup depends on.
It also provides the append-only write path shared by concrete stores.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from core.errors import ChronicleStoreError, NonMonotonicTimestampError, SeriesIndexError
from core.logging_config import get_logger
from core.types import Record, SeriesId

_LOGGER = get_logger(__name__)


class SeriesReader(Protocol):
    """Read-only access to ordered series records."""

    def count(self, series_id: SeriesId) -> int:
        """Return record count, zero for unknown series."""

    def timestamp_at(self, series_id: SeriesId, index: int) -> int:
        """Return the timestamp at index or raise SeriesIndexError."""

    def value_at(self, series_id: SeriesId, index: int) -> object:
        """Return the value at index or raise SeriesIndexError."""


class InMemorySeriesStore:
    """Append-only series store backed by Python lists."""

    def __init__(self, series: dict[SeriesId, Iterable[Record]] | None = None) -> None:
        self._series: dict[SeriesId, list[Record]] = {}
        for series_id, records in (series or {}).items():
            for record in records:
                self.append(series_id, record.timestamp, record.value)

    def count(self, series_id: SeriesId) -> int:
        """Return record count, zero for unknown series."""
        return len(self._series.get(series_id, ()))

    def timestamp_at(self, series_id: SeriesId, index: int) -> int:
        """Return the timestamp stored at index."""
        return record_at(self._series.get(series_id, ()), series_id, index).timestamp

    def value_at(self, series_id: SeriesId, index: int) -> object:
        """Return the value stored at index."""
        return record_at(self._series.get(series_id, ()), series_id, index).value

    def series_ids(self) -> list[SeriesId]:
        """Return known series ids in sorted order."""
        return sorted(self._series)

    def append(self, series_id: SeriesId, timestamp: int, value: object) -> int:
        """Append a record to a series.

        Args:
            series_id: Target series.
            timestamp: Submission timestamp.
            value: Submitted payload.

        Returns:
            Index of the appended record.

        Raises:
            ChronicleStoreError: If timestamp is invalid.
            NonMonotonicTimestampError: If timestamp precedes the last record.
        """
        validate_append(self._series.get(series_id, ()), series_id, timestamp)
        records = self._series.setdefault(series_id, [])
        records.append(Record(timestamp=timestamp, value=value))
        _LOGGER.debug(
            "record_appended",
            series_id=series_id,
            index=len(records) - 1,
            timestamp=timestamp,
        )
        return len(records) - 1


def record_at(records: Sequence[Record], series_id: SeriesId, index: int) -> Record:
    """Return one record with range validation.

    Args:
        records: Series records.
        series_id: Series identifier used in error messages.
        index: Requested index.

    Returns:
        Record at index.

    Raises:
        SeriesIndexError: If index is outside ``[0, count - 1]``.
    """
    if not 0 <= index < len(records):
        raise SeriesIndexError(
            f"Index {index} is out of range for series '{series_id}' "
            f"with {len(records)} records."
        )
    return records[index]


def validate_append(records: Sequence[Record], series_id: SeriesId, timestamp: int) -> None:
    """Check that a timestamp may be appended after existing records.

    Raises:
        ChronicleStoreError: If timestamp is not a non-negative integer.
        NonMonotonicTimestampError: If timestamp is older than the last record.
    """
    if isinstance(timestamp, bool) or not isinstance(timestamp, int) or timestamp < 0:
        raise ChronicleStoreError(
            f"Invalid timestamp {timestamp!r} for series '{series_id}': "
            "expected a non-negative integer."
        )
    if records and timestamp < records[-1].timestamp:
        raise NonMonotonicTimestampError(
            f"Cannot append timestamp {timestamp} to series '{series_id}': "
            f"last recorded timestamp is {records[-1].timestamp}. "
            "Series timestamps must never decrease."
        )
