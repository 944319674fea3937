"""Measurement of an operation repeated over a fixed number of iterations."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
import inspect
import logging
from typing import Any, TypeVar, Union

from .config import BenchmarkConfig
from .metrics import MemorySnapshot, collect_memory_usage, heap_tracing, time_execution
from .results import MeasurementRun, ResultCollector

logger = logging.getLogger(__name__)

T = TypeVar("T")

# An operation returns either an immediate result or a deferred one (an awaitable).
Operation = Callable[[], Union[T, Awaitable[T]]]


def _check_iterations(iterations: Any) -> None:
    if isinstance(iterations, bool) or not isinstance(iterations, int):
        raise TypeError(f"iterations must be an int, got {type(iterations).__name__}")
    if iterations < 1:
        raise ValueError("iterations must be at least 1")


def _run_iterations(operation: Operation, iterations: int, progress: list[int]) -> None:
    """Call operation sequentially on the calling thread.

    Deferred results are driven to completion on an event loop owned by this
    run, created on the first awaitable and closed when the run ends.
    """
    loop = None
    try:
        for _ in range(iterations):
            outcome = operation()
            if inspect.isawaitable(outcome):
                if loop is None:
                    loop = asyncio.new_event_loop()
                loop.run_until_complete(outcome)
            progress[0] += 1
    finally:
        if loop is not None:
            loop.run_until_complete(loop.shutdown_asyncgens())
            loop.close()


async def _run_iterations_async(
    operation: Operation, iterations: int, progress: list[int]
) -> None:
    """Call operation sequentially, awaiting each deferred result before the next call."""
    for _ in range(iterations):
        outcome = operation()
        if inspect.isawaitable(outcome):
            await outcome
        progress[0] += 1


def _log_abort(label: str, progress: list[int], iterations: int) -> None:
    logger.debug("Run %r aborted after %d of %d iterations", label, progress[0], iterations)


def _finish_run(
    label: str,
    iterations: int,
    duration_ms: float,
    memory_before: MemorySnapshot,
    memory_after: MemorySnapshot,
    collector: ResultCollector | None,
    group: str | None,
) -> MeasurementRun:
    result = MeasurementRun(
        label=label,
        iterations=iterations,
        duration_ms=duration_ms,
        memory_before=memory_before,
        memory_after=memory_after,
        group=group,
    )
    print(result.render_report())
    if collector is not None:
        collector.add_result(result)
    logger.debug("Finished run %r in %.3fms", label, result.duration_ms)
    return result


def measure(
    label: str,
    iterations: int,
    operation: Operation,
    *,
    config: BenchmarkConfig | None = None,
    collector: ResultCollector | None = None,
    group: str | None = None,
) -> MeasurementRun:
    """Time `iterations` sequential calls of `operation` and print a report.

    Args:
        label: Display name of the run
        iterations: Number of calls, at least 1
        operation: Zero-argument callable; awaitables it returns are run to
            completion before the next call
        config: Benchmark configuration (default: BenchmarkConfig())
        collector: Optional collector the finished run is added to
        group: Optional comparison group recorded on the run

    Returns:
        The finished MeasurementRun.

    Synchronous operations run directly on the calling thread, so they may
    start their own event loops or call measure again. Errors raised by
    `operation` propagate unchanged and abort the run.
    """
    _check_iterations(iterations)
    config = config or BenchmarkConfig()
    progress = [0]

    logger.debug("Starting run %r with %d iterations", label, iterations)
    with heap_tracing(config.trace_heap):
        memory_before = collect_memory_usage()
        try:
            with time_execution() as timing:
                _run_iterations(operation, iterations, progress)
        except Exception:
            _log_abort(label, progress, iterations)
            raise
        memory_after = collect_memory_usage()

    return _finish_run(
        label, iterations, timing["duration_ms"], memory_before, memory_after, collector, group
    )


async def measure_async(
    label: str,
    iterations: int,
    operation: Operation,
    *,
    config: BenchmarkConfig | None = None,
    collector: ResultCollector | None = None,
    group: str | None = None,
) -> MeasurementRun:
    """Coroutine form of measure for callers already running inside an event loop.

    Deferred results are awaited on the caller's loop.
    """
    _check_iterations(iterations)
    config = config or BenchmarkConfig()
    progress = [0]

    logger.debug("Starting run %r with %d iterations", label, iterations)
    with heap_tracing(config.trace_heap):
        memory_before = collect_memory_usage()
        try:
            with time_execution() as timing:
                await _run_iterations_async(operation, iterations, progress)
        except Exception:
            _log_abort(label, progress, iterations)
            raise
        memory_after = collect_memory_usage()

    return _finish_run(
        label, iterations, timing["duration_ms"], memory_before, memory_after, collector, group
    )
