"""Suite runner that executes benchmark suites and manages lifecycle."""

import logging
from typing import Optional

from .config import BenchmarkConfig
from .results import ResultCollector
from .suite import BenchmarkSuite, SuiteContext

logger = logging.getLogger(__name__)


class SuiteRunner:
    """Runs a benchmark suite with a configuration."""

    def __init__(
        self,
        suite: BenchmarkSuite,
        config: BenchmarkConfig,
        collector: Optional[ResultCollector] = None,
    ):
        """Initialize suite runner.

        Args:
            suite: Benchmark suite to execute
            config: Benchmark configuration
            collector: Collector to record runs in; a new one is created when omitted
        """
        self.suite = suite
        self.config = config
        self.collector = collector or ResultCollector(config.output_dir, config.output_filename)
        self.context: Optional[SuiteContext] = None

    def run(self) -> ResultCollector:
        """Run the suite according to configuration.

        Returns:
            ResultCollector with all collected runs
        """
        print(f"Running {self.suite.description or self.suite.name}...")
        self.context = SuiteContext(config=self.config, collector=self.collector)

        try:
            logger.debug("Calling %s.setup()", type(self.suite).__name__)
            self.suite.setup(self.context)
            try:
                logger.debug("Calling %s.execute()", type(self.suite).__name__)
                self.suite.execute(self.context)
            finally:
                logger.debug("Calling %s.teardown()", type(self.suite).__name__)
                self.suite.teardown(self.context)
        except Exception as e:
            logger.error("Suite %s failed: %s", self.suite.name, e)
            raise

        return self.collector

    def finish(self) -> Optional[str]:
        """Print the summary and export results when an output directory is configured."""
        self.collector.print_summary()
        csv_path = self.collector.export_to_csv()
        if csv_path:
            logger.info("Results exported to: %s", csv_path)
        return csv_path
