"""Point-in-time lookup over timestamp-ordered series.

This module finds the last record at or before a target timestamp
with a bounded binary search. Each round peeks one neighbour so the
insertion point is settled without a second search pass, and boundary
timestamps are carried between iterations so that every iteration
after the first reads at most two new timestamps.

Series timestamps must be non-decreasing by index. The search does
not re-validate that ordering; a violating series may produce a wrong
index. The range at least halves on every iteration whatever the
timestamps are, so the iteration bound holds for any input.
"""

from __future__ import annotations

from core.errors import ChronicleLookupError
from core.logging_config import get_logger
from core.types import NOT_FOUND, DataPoint, LookupResult, LookupTrace, SeriesId
from store.series_store import SeriesReader

_LOGGER = get_logger(__name__)


def find_last_at_or_before(
    reader: SeriesReader,
    series_id: SeriesId,
    target: int,
) -> LookupResult:
    """Return the index of the last record with timestamp <= target.

    Args:
        reader: Series accessor.
        series_id: Series to search.
        target: Target timestamp, any integer.

    Returns:
        ``Found(index)`` or ``NotFound`` when the series is empty or
        its first timestamp is after the target.

    Raises:
        ChronicleLookupError: If the search fails to converge within its
            iteration bound.
    """
    return trace_lookup(reader, series_id, target).result


def find_last_before(reader: SeriesReader, series_id: SeriesId, target: int) -> LookupResult:
    """Return the index of the last record with timestamp strictly < target."""
    return find_last_at_or_before(reader, series_id, target - 1)


def trace_lookup(reader: SeriesReader, series_id: SeriesId, target: int) -> LookupTrace:
    """Run the search and report how many iterations it took.

    Args:
        reader: Series accessor.
        series_id: Series to search.
        target: Target timestamp.

    Returns:
        Lookup result with iteration count.

    Raises:
        ChronicleLookupError: If the iteration bound is exhausted.
    """
    count = reader.count(series_id)
    if count == 0:
        return LookupTrace(result=NOT_FOUND, iterations=0)
    start = 0
    end = count - 1
    start_time = reader.timestamp_at(series_id, start)
    end_time = start_time if end == start else reader.timestamp_at(series_id, end)
    max_iterations = iteration_bound(count)
    for iteration in range(1, max_iterations + 1):
        if end_time <= target:
            return _resolved(series_id, target, LookupResult.hit(end), iteration)
        if start_time > target:
            return _resolved(series_id, target, NOT_FOUND, iteration)
        # start_time <= target < end_time, so start < end and middle is in (start, end].
        middle = start + (end - start + 1) // 2
        middle_time = reader.timestamp_at(series_id, middle)
        if middle_time <= target:
            next_time = reader.timestamp_at(series_id, middle + 1)
            if next_time > target:
                return _resolved(series_id, target, LookupResult.hit(middle), iteration)
            start, start_time = middle + 1, next_time
        else:
            previous_time = reader.timestamp_at(series_id, middle - 1)
            if previous_time <= target:
                return _resolved(series_id, target, LookupResult.hit(middle - 1), iteration)
            end, end_time = middle - 1, previous_time
    raise ChronicleLookupError(
        f"Lookup for target {target} in series '{series_id}' did not converge "
        f"within {max_iterations} iterations over {count} records. "
        "The search narrowing step is defective."
    )


def iteration_bound(count: int) -> int:
    """Return the maximum search iterations for a series of ``count`` records.

    This is ``ceil(log2(count)) + 1``, computed exactly on integers.
    """
    if count <= 0:
        return 0
    return (count - 1).bit_length() + 1


def get_data_before(reader: SeriesReader, series_id: SeriesId, target: int) -> DataPoint:
    """Return the last record at or before target with its value.

    Args:
        reader: Series accessor.
        series_id: Series to search.
        target: Target timestamp.

    Returns:
        Resolved data point, ``found=False`` when no record qualifies.
    """
    return resolve_data_point(reader, series_id, find_last_at_or_before(reader, series_id, target))


def resolve_data_point(
    reader: SeriesReader,
    series_id: SeriesId,
    result: LookupResult,
) -> DataPoint:
    """Read the record a lookup result points at, reading nothing on a miss."""
    if not result.found or result.index is None:
        return DataPoint(found=False)
    return _data_point(reader, series_id, result.index)


def get_current_value(reader: SeriesReader, series_id: SeriesId) -> DataPoint:
    """Return the most recent record of a series."""
    count = reader.count(series_id)
    if count == 0:
        return DataPoint(found=False)
    return _data_point(reader, series_id, count - 1)


def _data_point(reader: SeriesReader, series_id: SeriesId, index: int) -> DataPoint:
    return DataPoint(
        found=True,
        value=reader.value_at(series_id, index),
        timestamp=reader.timestamp_at(series_id, index),
        index=index,
    )


def _resolved(
    series_id: SeriesId,
    target: int,
    result: LookupResult,
    iterations: int,
) -> LookupTrace:
    _LOGGER.debug(
        "lookup_resolved",
        series_id=series_id,
        target=target,
        found=result.found,
        index=result.index,
        iterations=iterations,
    )
    return LookupTrace(result=result, iterations=iterations)
