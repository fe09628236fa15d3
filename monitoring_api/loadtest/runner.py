"""Stress test runner orchestrating batches, statistics and reporting."""
import logging
import sys
import time
from typing import Optional, TextIO

import requests

from .batch_scheduler import BatchScheduler
from .concurrency_manager import ConcurrencyManager
from .exceptions import LoadTestExecutionError
from .models import LoadTestConfig
from .report import ReportFormatter, format_duration
from .request_executor import RequestExecutor
from .request_session_manager import RequestSessionManager
from .result_exporter import ResultExporter
from .run_statistics import Statistics


logger = logging.getLogger(__name__)


class LoadTestRunner:
    """Orchestrates the execution of a stress test and manages output."""

    def __init__(self, config: LoadTestConfig, stream: Optional[TextIO] = None):
        self.config = config
        self.stream = stream if stream is not None else sys.stdout
        self.request_executor = RequestExecutor(config)
        self.concurrency_manager = ConcurrencyManager(self.request_executor)
        self.report_formatter = ReportFormatter(config)
        self.result_exporter = ResultExporter()

    def _print(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

    def run(self, stats: Optional[Statistics] = None, session: Optional[requests.Session] = None) -> Statistics:
        """
        Run every batch, then print and optionally export the report.

        Args:
            stats: Aggregate to fold outcomes into; a fresh one by default.
            session: HTTP session; one sized to the concurrency by default.

        Returns:
            The finished Statistics.

        Raises:
            LoadTestExecutionError: If anything outside a single request fails.
        """
        stats = stats if stats is not None else Statistics()
        owns_session = session is None
        if owns_session:
            session = RequestSessionManager.create_session(self.config.concurrent_requests)

        self._print(self.report_formatter.banner())
        stats.start()

        try:
            plan = BatchScheduler.plan(self.config.total_requests, self.config.concurrent_requests)
            logger.info(f"Executing {plan.num_batches} batches with ~{plan.requests_per_batch} requests per batch")

            for batch, batch_size in enumerate(plan.batch_sizes):
                logger.info(f"Starting batch {batch + 1}/{plan.num_batches} with {batch_size} requests")

                batch_start = time.perf_counter()
                outcomes = self.concurrency_manager.execute_batch(session, batch, batch_size)
                for outcome in outcomes:
                    stats.record(outcome)
                batch_ms = (time.perf_counter() - batch_start) * 1000

                logger.info(f"Batch {batch + 1} completed in {format_duration(batch_ms)}")

                if batch < plan.num_batches - 1 and self.config.delay_between_batches > 0:
                    logger.info(f"Waiting {self.config.delay_between_batches}ms before next batch...")
                    time.sleep(self.config.delay_between_batches / 1000)

            stats.finish()
            self._print(self.report_formatter.report(stats))

            if self.config.output is not None:
                self.result_exporter.save_results(self.config, stats, self.config.output)

        except Exception as e:
            logger.error(f"Stress test failed: {e}", stack_info=True)
            raise LoadTestExecutionError(f"Stress test failed: {e}") from e
        finally:
            if owns_session:
                session.close()

        return stats
