"""Benchmarks comparing object-oriented design patterns with direct implementations."""

from bench_harness import BenchmarkSuite

from .access import AccessManagerSuite
from .chain import ChainOfResponsibilitySuite
from .command import CommandSuite
from .dependency_injection import DependencyInjectionSuite
from .entity import EntitySuite
from .repository import RepositorySuite
from .result import ResultPatternSuite
from .validation import ValidationSuite

SUITES: dict[str, type[BenchmarkSuite]] = {
    suite.name: suite
    for suite in (
        RepositorySuite,
        DependencyInjectionSuite,
        CommandSuite,
        ChainOfResponsibilitySuite,
        AccessManagerSuite,
        ResultPatternSuite,
        ValidationSuite,
        EntitySuite,
    )
}


def get_suite(name: str) -> BenchmarkSuite:
    """Instantiate the suite registered under `name`; raises KeyError when unknown."""
    try:
        suite_cls = SUITES[name]
    except KeyError:
        raise KeyError(f"Unknown suite: {name!r} (choose from {', '.join(SUITES)})") from None
    return suite_cls()


__all__ = [
    "AccessManagerSuite",
    "ChainOfResponsibilitySuite",
    "CommandSuite",
    "DependencyInjectionSuite",
    "EntitySuite",
    "RepositorySuite",
    "ResultPatternSuite",
    "SUITES",
    "ValidationSuite",
    "get_suite",
]

__version__ = "0.1.0"
