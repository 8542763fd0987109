"""Public SDK surface for Chronicle.

This module provides a stable import path for library users.
It re-exports the lookup functions, stores, and typed models.
"""

from __future__ import annotations

from core.config import ChronicleConfig
from core.errors import (
    ChronicleError,
    ChronicleLookupError,
    ChronicleStoreError,
    NonMonotonicTimestampError,
    SeriesIndexError,
)
from core.types import BenchmarkReport, DataPoint, LookupResult, LookupTrace, Record
from lookup.benchmark import run_lookup_benchmark
from lookup.linear_scan import linear_scan_last_at_or_before
from lookup.time_indexed_lookup import (
    find_last_at_or_before,
    find_last_before,
    get_current_value,
    get_data_before,
    resolve_data_point,
    trace_lookup,
)
from store.metered_reader import MeteredSeriesReader
from store.series_file import FileSeriesStore
from store.series_spec import load_series_spec
from store.series_store import InMemorySeriesStore, SeriesReader

__all__ = [
    "BenchmarkReport",
    "ChronicleConfig",
    "ChronicleError",
    "ChronicleLookupError",
    "ChronicleStoreError",
    "DataPoint",
    "FileSeriesStore",
    "InMemorySeriesStore",
    "LookupResult",
    "LookupTrace",
    "MeteredSeriesReader",
    "NonMonotonicTimestampError",
    "Record",
    "SeriesIndexError",
    "SeriesReader",
    "find_last_at_or_before",
    "find_last_before",
    "get_current_value",
    "get_data_before",
    "linear_scan_last_at_or_before",
    "load_series_spec",
    "resolve_data_point",
    "run_lookup_benchmark",
    "trace_lookup",
]
