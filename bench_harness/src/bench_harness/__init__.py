"""Benchmark harness measuring elapsed time and memory deltas over repeated operations."""

from .config import BenchmarkConfig
from .formatting import format_bytes, format_duration
from .measure import measure, measure_async
from .metrics import MemorySnapshot, collect_memory_usage, heap_tracing, time_execution
from .results import MeasurementRun, ResultCollector
from .runner import SuiteRunner
from .suite import BenchmarkSuite, SuiteContext

__all__ = [
    "BenchmarkConfig",
    "BenchmarkSuite",
    "MeasurementRun",
    "MemorySnapshot",
    "ResultCollector",
    "SuiteContext",
    "SuiteRunner",
    "collect_memory_usage",
    "format_bytes",
    "format_duration",
    "heap_tracing",
    "measure",
    "measure_async",
    "time_execution",
]

__version__ = "0.1.0"
