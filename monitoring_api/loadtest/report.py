"""Formats the start banner and the final stress test report."""
from collections import Counter
from typing import Dict, List

from .constants import LoadTestConstants
from .latency_analyzer import LatencyAnalyzer
from .models import LoadTestConfig, RequestErrorRecord
from .run_statistics import Statistics


def format_duration(ms: float) -> str:
    """Render a duration as ``Nms``, ``N.NNs`` or ``N.NNm``."""
    if ms < 1000:
        return f"{ms:.2f}ms"
    if ms < 60000:
        return f"{ms / 1000:.2f}s"
    return f"{ms / 60000:.2f}m"


def group_errors(errors: List[RequestErrorRecord]) -> Dict[str, int]:
    """Count errors by the text before the first colon, keeping first-seen order."""
    counts = Counter()
    for record in errors:
        key = record.error.split(":", 1)[0] or record.error
        counts[key] += 1
    return dict(counts)


class ReportFormatter:
    """Builds the console text printed around a run."""

    def __init__(self, config: LoadTestConfig):
        self.config = config
        self.rule = "=" * LoadTestConstants.REPORT_WIDTH

    def banner(self) -> str:
        return "\n".join([
            "Starting Stress Test",
            self.rule,
            f"Target: {self.config.target_url}",
            f"Concurrent Requests: {self.config.concurrent_requests}",
            f"Total Requests: {self.config.total_requests}",
            f"Batch Delay: {self.config.delay_between_batches}ms",
            f"Timeout: {self.config.timeout}ms",
            self.rule,
        ])

    def report(self, stats: Statistics) -> str:
        lines = [
            "",
            self.rule,
            "STRESS TEST RESULTS",
            self.rule,
            f"Base URL: {self.config.base_url}",
            f"Endpoint: {self.config.endpoint}",
            f"Total Duration: {format_duration(stats.duration_ms)}",
            f"Total Requests: {stats.total}",
            f"Successful: {stats.successful}",
            f"Failed: {stats.failed}",
            f"Success Rate: {stats.success_rate:.2f}%",
            f"Requests/Second: {stats.requests_per_second:.2f}",
            "",
        ]

        if stats.successful > 0:
            lines.extend([
                "RESPONSE TIME STATISTICS:",
                f"  Average: {stats.average_elapsed_ms:.2f}ms",
                f"  Minimum: {stats.min_elapsed_ms:.2f}ms",
                f"  Maximum: {stats.max_elapsed_ms:.2f}ms",
            ])
            for percentile in LoadTestConstants.PERCENTILES:
                value = LatencyAnalyzer.percentile(stats.elapsed_times, percentile)
                lines.append(f"  {percentile}th Percentile: {value:.2f}ms")

        if stats.errors:
            lines.append("")
            lines.append("ERROR SUMMARY:")
            for error_type, count in group_errors(stats.errors).items():
                lines.append(f"  {error_type}: {count} occurrences")

        lines.append(self.rule)
        return "\n".join(lines)
