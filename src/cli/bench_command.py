"""Benchmark command wiring for Chronicle CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import ChronicleConfig
from core.constants import DEFAULT_BENCHMARK_MARGIN, DEFAULT_BENCHMARK_MAX_LOOKUPS
from lookup.benchmark import run_lookup_benchmark
from store.series_store import SeriesReader


def add_bench_command(subparsers: Any) -> None:
    """Register bench subcommand."""
    parser = subparsers.add_parser(
        "bench",
        help="Measure worst-case lookup read cost; runs one lookup per integer target",
    )
    parser.add_argument("--series", required=True, help="Series id")
    parser.add_argument(
        "--margin",
        type=int,
        default=DEFAULT_BENCHMARK_MARGIN,
        help="Targets swept beyond the first and last timestamp",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check every result against a linear scan",
    )
    parser.add_argument(
        "--max-lookups",
        type=int,
        default=DEFAULT_BENCHMARK_MAX_LOOKUPS,
        help="Refuse sweeps with more targets than this",
    )


def run_bench_command(
    reader: SeriesReader,
    config: ChronicleConfig,
    args: argparse.Namespace,
) -> int:
    """Execute the benchmark sweep and print its report."""
    report = run_lookup_benchmark(
        reader,
        args.series,
        margin=args.margin,
        read_cost=config.read_cost,
        verify=args.verify,
        max_lookups=args.max_lookups,
    )
    print(f"series={report.series_id}")
    print(f"records={report.record_count}")
    print(f"targets={report.first_target}..{report.last_target}")
    print(f"lookups={report.lookups}")
    print(f"worst_timestamp_reads={report.worst_timestamp_reads}")
    print(f"worst_cost={report.worst_cost}")
    print(f"worst_iterations={report.worst_iterations}")
    print(f"worst_target={report.worst_target}")
    if args.verify:
        print(f"mismatches={len(report.mismatches)}")
    return 0 if not report.mismatches else 1
