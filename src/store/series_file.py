"""Filesystem-backed series store.

This module persists each series as one JSONL file under the data root.
Records are loaded once per store instance and appends write through.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from core.config import ChronicleConfig
from core.constants import SERIES_DIR_NAME, SERIES_FILE_SUFFIX, SERIES_ID_PATTERN
from core.errors import ChronicleStoreError
from core.logging_config import get_logger
from core.types import Record, SeriesId
from store.series_store import record_at, validate_append

_LOGGER = get_logger(__name__)
_SERIES_ID_RE = re.compile(SERIES_ID_PATTERN)


class FileSeriesStore:
    """JSONL series store rooted at ``<data_root>/series``."""

    def __init__(self, config: ChronicleConfig) -> None:
        """Initialize file store from config.

        Args:
            config: Runtime configuration.
        """
        self._series_root = config.data_root / SERIES_DIR_NAME
        self._series_root.mkdir(parents=True, exist_ok=True)
        self._loaded: dict[SeriesId, list[Record]] = {}

    def count(self, series_id: SeriesId) -> int:
        """Return record count, zero for unknown series."""
        return len(self._records(series_id))

    def timestamp_at(self, series_id: SeriesId, index: int) -> int:
        """Return the timestamp stored at index."""
        return record_at(self._records(series_id), series_id, index).timestamp

    def value_at(self, series_id: SeriesId, index: int) -> object:
        """Return the value stored at index."""
        return record_at(self._records(series_id), series_id, index).value

    def series_ids(self) -> list[SeriesId]:
        """Return persisted series ids in sorted order."""
        return sorted(path.stem for path in self._series_root.glob(f"*{SERIES_FILE_SUFFIX}"))

    def append(self, series_id: SeriesId, timestamp: int, value: object) -> int:
        """Append a record and persist it.

        Args:
            series_id: Target series.
            timestamp: Submission timestamp.
            value: JSON-serializable payload.

        Returns:
            Index of the appended record.

        Raises:
            ChronicleStoreError: If the record is invalid or cannot be written.
            NonMonotonicTimestampError: If timestamp precedes the last record.
        """
        records = self._records(series_id)
        validate_append(records, series_id, timestamp)
        try:
            line = json.dumps({"timestamp": timestamp, "value": value}, sort_keys=True)
        except TypeError as error:
            raise ChronicleStoreError(
                f"Value for series '{series_id}' is not JSON serializable: {error}."
            ) from error
        with self._series_path(series_id).open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
        records.append(Record(timestamp=timestamp, value=value))
        _LOGGER.info(
            "record_appended",
            series_id=series_id,
            index=len(records) - 1,
            timestamp=timestamp,
        )
        return len(records) - 1

    def _records(self, series_id: SeriesId) -> list[Record]:
        if series_id not in self._loaded:
            self._loaded[series_id] = _read_series_file(self._series_path(series_id))
        return self._loaded[series_id]

    def _series_path(self, series_id: SeriesId) -> Path:
        if not _SERIES_ID_RE.fullmatch(series_id):
            raise ChronicleStoreError(
                f"Invalid series id '{series_id}'. "
                "Use letters, digits, '.', '_' or '-' only."
            )
        return self._series_root / f"{series_id}{SERIES_FILE_SUFFIX}"


def _read_series_file(series_path: Path) -> list[Record]:
    """Read series records from a JSONL file, empty when missing."""
    if not series_path.exists():
        return []
    records: list[Record] = []
    for line_number, line in enumerate(series_path.read_text(encoding="utf-8").splitlines(), 1):
        if not line.strip():
            continue
        payload = _parse_series_line(series_path, line, line_number)
        records.append(Record(timestamp=payload["timestamp"], value=payload["value"]))
    return records


def _parse_series_line(series_path: Path, line: str, line_number: int) -> dict[str, Any]:
    """Parse one series file line."""
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as error:
        raise ChronicleStoreError(
            f"Failed to parse series file at {series_path}:{line_number}: {error.msg}. "
            "Repair or remove the corrupted line."
        ) from error
    if not isinstance(payload, dict) or "value" not in payload:
        raise ChronicleStoreError(
            f"Invalid series record at {series_path}:{line_number}: "
            "expected an object with 'timestamp' and 'value'."
        )
    timestamp = payload.get("timestamp")
    if isinstance(timestamp, bool) or not isinstance(timestamp, int) or timestamp < 0:
        raise ChronicleStoreError(
            f"Invalid series record at {series_path}:{line_number}: "
            f"timestamp {timestamp!r} is not a non-negative integer."
        )
    return payload
