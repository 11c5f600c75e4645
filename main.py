#!/usr/bin/env python3
"""
Cache Latency Lab - Main entry point for running cache store benchmarks.

Usage:
    python main.py <store> [options]

Stores:
    array   - In-process dictionary store
    file    - On-disk store backed by diskcache
    null    - Store that keeps nothing (harness overhead baseline)

Timings are reported in microseconds.
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from cache_latency_lab.backends import resolve_store, validate_store_name
from cache_latency_lab.config import LabConfig
from cache_latency_lab.harness import (
    BenchmarkConfig,
    BenchmarkReport,
    BenchmarkRunner,
    ChartReporter,
    ConsoleReporter,
    JSONReporter,
    WorkloadTimings,
)
from cache_latency_lab.logger import setup_logging
from cache_latency_lab.workloads import (
    FixtureStore,
    PayloadGenerator,
    WordSource,
    list_workloads,
    select_workloads,
)


def run_cache_test(args) -> BenchmarkReport:
    """Benchmark one cache store and print the results table."""
    config = LabConfig.from_env().with_overrides(
        runs=args.runs,
        ttl_seconds=args.ttl,
        fixtures_dir=args.fixtures_dir,
        seed=args.seed,
    )

    # Fails on unknown store names before any store is opened
    validate_store_name(args.store, config)

    bench_config = BenchmarkConfig(
        store=args.store,
        runs=config.runs,
        ttl_seconds=config.ttl_seconds,
        workloads=select_workloads(args.only),
    )
    generator = PayloadGenerator(
        source=WordSource(seed=config.seed),
        fixtures=FixtureStore(config.fixtures_dir),
    )

    def progress(result: WorkloadTimings) -> None:
        print(
            f"  {result.workload.title:<10} write {result.write.mean():>10.2f}us"
            f"  read {result.read.mean():>10.2f}us",
            file=sys.stderr,
        )

    with resolve_store(args.store, config) as store:
        runner = BenchmarkRunner(
            store,
            bench_config,
            generator=generator,
            on_workload_complete=progress if args.verbose else None,
        )
        report = runner.run()

    reporter = ConsoleReporter(use_color=not args.no_color)
    print(reporter.single_result(report))

    if args.json:
        path = JSONReporter(args.output_dir).save_report(report, config=bench_config)
        print(f"Results saved to {path}")

    if args.chart:
        charts = ChartReporter(args.output_dir / "charts")
        if charts.available:
            path = charts.latency_bar_chart(report)
            print(f"Chart saved to {path}")
        else:
            print("Warning: chart skipped (matplotlib not installed)")

    return report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run speed tests for the given cache store. Timings given in microseconds.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py array
    python main.py file --runs 200 --json
    python main.py null --only integer stats
        """,
    )

    parser.add_argument(
        "store",
        nargs="?",
        help="Cache store to benchmark (array, file, null)",
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=None,
        help="Number of runs per test (default: 1000, or CACHE_LAB_RUNS)",
    )
    parser.add_argument(
        "--ttl",
        type=int,
        default=None,
        help="TTL in seconds for stored entries (default: 600)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for generated payloads",
    )
    parser.add_argument(
        "--only",
        nargs="+",
        choices=list_workloads(),
        metavar="TEST",
        help=f"Only run these tests ({', '.join(list_workloads())})",
    )
    parser.add_argument(
        "--fixtures-dir",
        type=Path,
        default=None,
        help="Directory containing the webpage fixture",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("results"),
        help="Directory to save results (default: results/)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Save the report as JSON in the output directory",
    )
    parser.add_argument(
        "--chart",
        action="store_true",
        help="Save a bar chart of the results (requires matplotlib)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable coloured output",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging and per-test progress",
    )
    return parser


def main(argv=None):
    # Load environment variables from .env file
    load_dotenv()

    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, use_color=not args.no_color)

    try:
        run_cache_test(args)
    except KeyboardInterrupt:
        print("\nBenchmark interrupted by user", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
