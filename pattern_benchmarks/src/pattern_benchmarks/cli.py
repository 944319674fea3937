"""Command line entry point for the pattern benchmarks."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from bench_harness import BenchmarkConfig, ResultCollector, SuiteRunner

from . import SUITES, get_suite


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run design pattern benchmarks.")
    parser.add_argument(
        "--suite",
        action="append",
        dest="suites",
        default=None,
        help=f"Suite to run; repeat for several (default: all). Choices: {', '.join(SUITES)}.",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Override every run's iteration count.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for generated test data.",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to export a CSV of all runs into (default: no export).",
    )
    parser.add_argument(
        "--output-filename",
        default=None,
        help="CSV filename for results (default: results.csv).",
    )
    parser.add_argument(
        "--trace-heap",
        action="store_true",
        help="Trace Python heap allocations so Heap Used is reported (slows timed calls).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available suites and exit.",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> BenchmarkConfig:
    """Layer command line options over the environment configuration."""
    config = BenchmarkConfig.from_env()
    iterations = args.iterations if args.iterations is not None else config.iterations_override
    return BenchmarkConfig(
        trace_heap=config.trace_heap or args.trace_heap,
        iterations_override=iterations,
        seed=args.seed if args.seed is not None else config.seed,
        output_dir=args.output_dir or config.output_dir,
        output_filename=args.output_filename or config.output_filename,
        verbose=args.verbose or config.verbose,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for name, suite_cls in SUITES.items():
            print(f"{name}: {suite_cls.description}")
        return 0

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    names = args.suites or list(SUITES)
    try:
        suites = [get_suite(name) for name in names]
    except KeyError as e:
        parser.error(e.args[0])

    collector = ResultCollector(config.output_dir, config.output_filename)
    runner = None
    for suite in suites:
        runner = SuiteRunner(suite, config, collector)
        runner.run()
        print()

    if runner is not None:
        csv_path = runner.finish()
        if csv_path:
            print(f"\nResults exported to: {csv_path}")
    return 0
