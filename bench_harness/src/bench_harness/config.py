"""Configuration classes for benchmark execution."""

from __future__ import annotations

from dataclasses import dataclass
import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str) -> int | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return int(value)


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark execution.

    Attributes:
        trace_heap: Trace Python heap allocations with tracemalloc during each run
            so the "Heap Used" delta is populated (default: False). Tracing slows
            every timed call, so durations from traced runs are inflated
        iterations_override: Replace every suite's iteration count (default: None)
        seed: Seed for the suite random generator (default: None, unseeded)
        output_dir: Directory for CSV export; no file is written when None
        output_filename: Filename for CSV export (default: "results.csv")
        verbose: Enable verbose logging (default: False)
    """

    trace_heap: bool = False
    iterations_override: int | None = None
    seed: int | None = None
    output_dir: str | None = None
    output_filename: str = "results.csv"
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if self.iterations_override is not None and self.iterations_override < 1:
            raise ValueError("iterations_override must be at least 1")
        if not self.output_filename.strip():
            raise ValueError("output_filename must not be empty")

    @classmethod
    def from_env(cls) -> BenchmarkConfig:
        return cls(
            trace_heap=_env_bool("BENCH_TRACE_HEAP", default=False),
            iterations_override=_env_int("BENCH_ITERATIONS"),
            seed=_env_int("BENCH_SEED"),
            output_dir=os.getenv("BENCH_OUTPUT_DIR") or None,
            output_filename=os.getenv("BENCH_OUTPUT_FILENAME", "results.csv"),
            verbose=_env_bool("BENCH_VERBOSE", default=False),
        )
