"""Chronicle CLI entry points.
This module exposes commands for submitting and looking up series records.
It maps argparse commands onto store and lookup calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
from pathlib import Path
import time
from typing import Any, Sequence

from cli.bench_command import add_bench_command, run_bench_command
from core.config import ChronicleConfig
from core.errors import ChronicleError, ChronicleStoreError, NonMonotonicTimestampError
from core.types import DataPoint, Record, SeriesId
from lookup.time_indexed_lookup import (
    find_last_at_or_before,
    find_last_before,
    get_current_value,
    resolve_data_point,
)
from store.series_file import FileSeriesStore
from store.series_spec import load_series_spec


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="chronicle", description="Chronicle series lookup CLI")
    parser.add_argument("--data-root", help="Override CHRONICLE_DATA_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_submit_command(subparsers)
    _add_lookup_command(subparsers)
    _add_current_command(subparsers)
    _add_series_command(subparsers)
    _add_import_command(subparsers)
    add_bench_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Chronicle CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.data_root)
        store = FileSeriesStore(config)
        if args.command == "submit":
            return _run_submit_command(store, args)
        if args.command == "lookup":
            return _run_lookup_command(store, args)
        if args.command == "current":
            return _run_current_command(store, args)
        if args.command == "series":
            return _run_series_command(store)
        if args.command == "import":
            return _run_import_command(store, args)
        if args.command == "bench":
            return run_bench_command(store, config, args)
    except ChronicleError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(data_root: str | None) -> ChronicleConfig:
    """Build config with optional data-root override.

    Args:
        data_root: Optional override path.

    Returns:
        Validated runtime config.
    """
    config = ChronicleConfig.from_env()
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    return config


def _run_submit_command(store: FileSeriesStore, args: argparse.Namespace) -> int:
    """Handle submit command.

    Args:
        store: Series store.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    timestamp = args.timestamp if args.timestamp is not None else int(time.time())
    index = store.append(args.series, timestamp, args.value)
    print(f"index={index}")
    return 0


def _run_lookup_command(store: FileSeriesStore, args: argparse.Namespace) -> int:
    """Handle lookup command.

    Args:
        store: Series store.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    find = find_last_before if args.strict else find_last_at_or_before
    result = find(store, args.series, args.timestamp)
    print(_render_data_point(resolve_data_point(store, args.series, result)))
    return 0


def _run_current_command(store: FileSeriesStore, args: argparse.Namespace) -> int:
    """Handle current command."""
    print(_render_data_point(get_current_value(store, args.series)))
    return 0


def _run_series_command(store: FileSeriesStore) -> int:
    """Handle series command."""
    for series_id in store.series_ids():
        print(f"{series_id}\t{store.count(series_id)}")
    return 0


def _run_import_command(store: FileSeriesStore, args: argparse.Namespace) -> int:
    """Handle import command.

    Args:
        store: Series store.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    series_records = load_series_spec(args.spec_path)
    _check_import_fits(store, series_records)
    for series_id, records in series_records.items():
        for record in records:
            store.append(series_id, record.timestamp, record.value)
        print(f"{series_id}\t{len(records)}")
    return 0


def _check_import_fits(
    store: FileSeriesStore,
    series_records: dict[SeriesId, tuple[Record, ...]],
) -> None:
    """Reject an import that would fail part way, before writing any record.

    Raises:
        ChronicleStoreError: If a value cannot be stored as JSON.
        NonMonotonicTimestampError: If a series starts before its stored last timestamp.
    """
    for series_id, records in series_records.items():
        for record in records:
            try:
                json.dumps(record.value)
            except TypeError as error:
                raise ChronicleStoreError(
                    f"Cannot import series '{series_id}': value at timestamp "
                    f"{record.timestamp} is not JSON serializable: {error}."
                ) from error
        count = store.count(series_id)
        if not records or count == 0:
            continue
        last_timestamp = store.timestamp_at(series_id, count - 1)
        if records[0].timestamp < last_timestamp:
            raise NonMonotonicTimestampError(
                f"Cannot import series '{series_id}': first timestamp "
                f"{records[0].timestamp} precedes stored timestamp {last_timestamp}. "
                "No records were written."
            )


def _render_data_point(point: DataPoint) -> str:
    if not point.found:
        return "found=false index=- timestamp=- value=-"
    return f"found=true index={point.index} timestamp={point.timestamp} value={point.value}"


def _add_submit_command(subparsers: Any) -> None:
    """Register submit subcommand."""
    parser = subparsers.add_parser("submit", help="Append a value to a series")
    parser.add_argument("--series", required=True, help="Series id")
    parser.add_argument("--value", required=True, help="Submitted value")
    parser.add_argument(
        "--timestamp",
        type=int,
        help="Submission timestamp, defaults to current UNIX time",
    )


def _add_lookup_command(subparsers: Any) -> None:
    """Register lookup subcommand."""
    parser = subparsers.add_parser(
        "lookup",
        help="Find the last value at or before a timestamp",
    )
    parser.add_argument("--series", required=True, help="Series id")
    parser.add_argument("--timestamp", type=int, required=True, help="Target timestamp")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Only match values strictly before the timestamp",
    )


def _add_current_command(subparsers: Any) -> None:
    """Register current subcommand."""
    parser = subparsers.add_parser("current", help="Show the latest value of a series")
    parser.add_argument("--series", required=True, help="Series id")


def _add_series_command(subparsers: Any) -> None:
    """Register series subcommand."""
    subparsers.add_parser("series", help="List series and record counts")


def _add_import_command(subparsers: Any) -> None:
    """Register import subcommand."""
    parser = subparsers.add_parser("import", help="Append records from a YAML series spec")
    parser.add_argument("spec_path", help="Path to YAML series spec")
