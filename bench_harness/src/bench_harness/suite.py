"""Benchmark suite interface using the Strategy design pattern."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import random
from typing import Any

from .config import BenchmarkConfig
from .measure import Operation, measure
from .results import MeasurementRun, ResultCollector


@dataclass
class SuiteContext:
    """Context object passed to benchmark suite methods."""

    config: BenchmarkConfig = field(default_factory=BenchmarkConfig)
    collector: ResultCollector = field(default_factory=ResultCollector)
    rng: random.Random | None = None
    shared_state: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Seed the random generator from the config when none is given."""
        if self.rng is None:
            self.rng = random.Random(self.config.seed)

    def iterations(self, default: int) -> int:
        """Return the iteration count to use in place of a suite default."""
        if self.config.iterations_override is not None:
            return self.config.iterations_override
        return default

    def measure(
        self,
        label: str,
        iterations: int,
        operation: Operation,
        group: str | None = None,
    ) -> MeasurementRun:
        """Measure an operation and record the run in the collector."""
        return measure(
            label,
            self.iterations(iterations),
            operation,
            config=self.config,
            collector=self.collector,
            group=group,
        )


class BenchmarkSuite(ABC):
    """Abstract base class for benchmark suites.

    Subclasses implement this interface to compare implementations of one behavior.
    The runner will call setup() once, execute() once, and teardown() once.
    """

    name: str = ""
    description: str = ""

    def setup(self, _context: SuiteContext) -> None:
        """One-time setup before the suite's measurements.

        Args:
            context: Suite context with config, collector and random generator.
        """
        _ = _context

    @abstractmethod
    def execute(self, context: SuiteContext) -> None:
        """Issue the suite's measurements through context.measure().

        Args:
            context: Suite context with config, collector and random generator.
        """

    def teardown(self, _context: SuiteContext) -> None:
        """Cleanup after the suite's measurements.

        Args:
            context: Suite context with config, collector and random generator.
        """
        _ = _context
