"""Shared typed models.

This module defines immutable data models used by the store, lookup,
benchmark, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass

SeriesId = str


@dataclass(frozen=True)
class Record:
    """One submission in a series.

    Attributes:
        timestamp: Non-negative submission time.
        value: Opaque submitted payload.
    """

    timestamp: int
    value: object


@dataclass(frozen=True)
class LookupResult:
    """Tagged lookup outcome.

    Attributes:
        found: Whether a record at or before the target exists.
        index: Index of that record, or None when not found.
    """

    found: bool
    index: int | None = None

    @classmethod
    def hit(cls, index: int) -> "LookupResult":
        """Build a ``Found(index)`` result."""
        return cls(found=True, index=index)

    @classmethod
    def miss(cls) -> "LookupResult":
        """Build a ``NotFound`` result."""
        return cls(found=False, index=None)


NOT_FOUND = LookupResult.miss()


@dataclass(frozen=True)
class LookupTrace:
    """Lookup result with search effort.

    Attributes:
        result: Lookup outcome.
        iterations: Number of search loop iterations entered.
    """

    result: LookupResult
    iterations: int


@dataclass(frozen=True)
class DataPoint:
    """Resolved record returned by value lookups.

    Attributes:
        found: Whether a qualifying record exists.
        value: Record payload, or None when not found.
        timestamp: Record timestamp, or None when not found.
        index: Record index, or None when not found.
    """

    found: bool
    value: object = None
    timestamp: int | None = None
    index: int | None = None


@dataclass(frozen=True)
class BenchmarkReport:
    """Worst-case read effort across a lookup sweep.

    Attributes:
        series_id: Benchmarked series.
        record_count: Number of records in the series.
        first_target: First swept target timestamp.
        last_target: Last swept target timestamp.
        lookups: Number of lookups executed.
        worst_timestamp_reads: Maximum timestamp reads for one lookup.
        worst_cost: Maximum metered cost for one lookup.
        worst_iterations: Maximum search iterations for one lookup.
        worst_target: Target that produced the maximum cost.
        mismatches: Targets whose result differed from the linear scan.
    """

    series_id: SeriesId
    record_count: int
    first_target: int
    last_target: int
    lookups: int
    worst_timestamp_reads: int
    worst_cost: int
    worst_iterations: int
    worst_target: int
    mismatches: tuple[int, ...] = ()
