"""Test configuration for pattern_benchmarks."""

from __future__ import annotations

from pathlib import Path
import random
import sys

import pytest

from bench_harness import BenchmarkConfig, SuiteContext, SuiteRunner


def pytest_sessionstart():
    repo_root = Path(__file__).resolve().parents[1]
    for src_path in (repo_root / "src", repo_root.parent / "bench_harness" / "src"):
        if str(src_path) not in sys.path:
            sys.path.insert(0, str(src_path))


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def small_config():
    return BenchmarkConfig(iterations_override=3, seed=99, trace_heap=False)


@pytest.fixture
def run_suite(small_config):
    """Run a suite with tiny iteration counts and return (runner, collector)."""

    def _run(suite):
        runner = SuiteRunner(suite, small_config)
        collector = runner.run()
        return runner, collector

    return _run


@pytest.fixture
def context(small_config):
    return SuiteContext(config=small_config)
