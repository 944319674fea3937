"""Metrics collection utilities for benchmark runs."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass
import logging
import time
import tracemalloc

import psutil

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemorySnapshot:
    """Point-in-time process memory counters, in bytes.

    Attributes:
        heap_used: Bytes allocated by the Python allocator, as traced by tracemalloc
            (0 while tracing is off)
        heap_total: Virtual memory size of the process
        rss: Resident set size of the process
    """

    heap_used: int
    heap_total: int
    rss: int

    def __sub__(self, other: MemorySnapshot) -> MemorySnapshot:
        if not isinstance(other, MemorySnapshot):
            return NotImplemented
        return MemorySnapshot(
            heap_used=self.heap_used - other.heap_used,
            heap_total=self.heap_total - other.heap_total,
            rss=self.rss - other.rss,
        )


def collect_memory_usage() -> MemorySnapshot:
    """Collect current memory usage of this process.

    Returns:
        MemorySnapshot with heap used, heap total and RSS in bytes.
    """
    memory_info = psutil.Process().memory_info()
    heap_used = tracemalloc.get_traced_memory()[0] if tracemalloc.is_tracing() else 0
    return MemorySnapshot(
        heap_used=heap_used,
        heap_total=memory_info.vms,
        rss=memory_info.rss,
    )


@contextmanager
def time_execution() -> Generator[dict[str, float], None, None]:
    """Context manager for timing code execution.

    Yields a dictionary that receives 'duration_ns' and 'duration_ms' keys on exit,
    also when the body raises.

    Example:
        with time_execution() as timing:
            # code to time
            result = some_function()
        duration = timing['duration_ms']
    """
    start = time.perf_counter_ns()
    timing = {}
    try:
        yield timing
    finally:
        end = time.perf_counter_ns()
        timing["duration_ns"] = end - start
        timing["duration_ms"] = (end - start) / 1_000_000


@contextmanager
def heap_tracing(enabled: bool = True) -> Generator[bool, None, None]:
    """Keep tracemalloc tracing for the duration of the block.

    Tracing that was already active is left running on exit. Yields whether
    tracing is active inside the block.
    """
    started = False
    if enabled and not tracemalloc.is_tracing():
        tracemalloc.start()
        started = True
        logger.debug("Started tracemalloc for heap tracing")
    try:
        yield tracemalloc.is_tracing()
    finally:
        if started:
            tracemalloc.stop()
            logger.debug("Stopped tracemalloc")
