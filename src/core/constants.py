"""Core constants used across Chronicle modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".chronicle")
SERIES_DIR_NAME = "series"
SERIES_FILE_SUFFIX = ".jsonl"
SERIES_ID_PATTERN = r"[A-Za-z0-9._-]+"
DEFAULT_READ_COST = 1
DEFAULT_BENCHMARK_MARGIN = 2
SERIES_SPEC_ROOT_KEY = "series"
DEFAULT_BENCHMARK_MAX_LOOKUPS = 100_000
