"""Read-cost benchmark for point-in-time lookups.

This module sweeps every target timestamp around a series and meters
the reads each lookup performs. It reports the worst case and can
cross-check every result against the linear scan.
"""

from __future__ import annotations

from core.constants import (
    DEFAULT_BENCHMARK_MARGIN,
    DEFAULT_BENCHMARK_MAX_LOOKUPS,
    DEFAULT_READ_COST,
)
from core.errors import ChronicleLookupError
from core.logging_config import get_logger
from core.types import BenchmarkReport, SeriesId
from lookup.linear_scan import linear_scan_last_at_or_before
from lookup.time_indexed_lookup import trace_lookup
from store.metered_reader import MeteredSeriesReader
from store.series_store import SeriesReader

_LOGGER = get_logger(__name__)


def run_lookup_benchmark(
    reader: SeriesReader,
    series_id: SeriesId,
    margin: int = DEFAULT_BENCHMARK_MARGIN,
    read_cost: int = DEFAULT_READ_COST,
    verify: bool = False,
    max_lookups: int = DEFAULT_BENCHMARK_MAX_LOOKUPS,
) -> BenchmarkReport:
    """Meter lookups for every target across the series time range.

    Args:
        reader: Series accessor.
        series_id: Series to benchmark.
        margin: Targets swept before the first and after the last timestamp.
        read_cost: Cost charged per metered read.
        verify: Compare each result with the linear scan.
        max_lookups: Largest sweep allowed; one lookup runs per integer target.

    Returns:
        Worst-case read effort report.

    Raises:
        ChronicleLookupError: If the series is empty, margin is negative, or
            the sweep would exceed max_lookups.
    """
    if margin < 0:
        raise ChronicleLookupError(f"Benchmark margin must be >= 0, got {margin}.")
    record_count = reader.count(series_id)
    if record_count == 0:
        raise ChronicleLookupError(
            f"Cannot benchmark series '{series_id}': it has no records. "
            "Submit or import records before benchmarking."
        )
    first_target = reader.timestamp_at(series_id, 0) - margin
    last_target = reader.timestamp_at(series_id, record_count - 1) + margin
    lookups = last_target - first_target + 1
    if lookups > max_lookups:
        raise ChronicleLookupError(
            f"Benchmark of series '{series_id}' would run {lookups} lookups "
            f"over targets {first_target}..{last_target}, above the limit of {max_lookups}. "
            "Raise max_lookups to sweep the full range."
        )
    worst_reads = 0
    worst_cost = -1
    worst_iterations = 0
    worst_target = first_target
    mismatches: list[int] = []
    for target in range(first_target, last_target + 1):
        metered = MeteredSeriesReader(reader, read_cost)
        trace = trace_lookup(metered, series_id, target)
        worst_reads = max(worst_reads, metered.timestamp_reads)
        worst_iterations = max(worst_iterations, trace.iterations)
        if metered.total_cost > worst_cost:
            worst_cost = metered.total_cost
            worst_target = target
        if verify and trace.result != linear_scan_last_at_or_before(reader, series_id, target):
            mismatches.append(target)
    report = BenchmarkReport(
        series_id=series_id,
        record_count=record_count,
        first_target=first_target,
        last_target=last_target,
        lookups=lookups,
        worst_timestamp_reads=worst_reads,
        worst_cost=worst_cost,
        worst_iterations=worst_iterations,
        worst_target=worst_target,
        mismatches=tuple(mismatches),
    )
    _LOGGER.info(
        "benchmark_completed",
        series_id=series_id,
        record_count=record_count,
        lookups=report.lookups,
        worst_cost=worst_cost,
        worst_iterations=worst_iterations,
        mismatch_count=len(mismatches),
    )
    return report
