"""Handles exporting stress test results to CSV."""
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Union

import pandas as pd

from .constants import LoadTestConstants
from .latency_analyzer import LatencyAnalyzer
from .models import LoadTestConfig
from .run_statistics import Statistics


# Configure logging
logger = logging.getLogger(__name__)


class ResultExporter:
    """Handles exporting stress test results to CSV."""

    @staticmethod
    def summarize(config: LoadTestConfig, stats: Statistics) -> Dict[str, Any]:
        """Flatten a finished run into one summary row."""
        has_successes = stats.successful > 0
        percentiles = LatencyAnalyzer.compute_percentiles(stats.elapsed_times)
        row = {
            "target_url": config.target_url,
            "concurrent_requests": config.concurrent_requests,
            "duration_ms": stats.duration_ms,
            "total_requests": stats.total,
            "successful": stats.successful,
            "failed": stats.failed,
            "success_rate_pct": stats.success_rate,
            "requests_per_second": stats.requests_per_second,
            "avg_ms": stats.average_elapsed_ms,
            "min_ms": stats.min_elapsed_ms if has_successes else 0.0,
            "max_ms": stats.max_elapsed_ms,
        }
        row.update({f"{name}_ms": value for name, value in asdict(percentiles).items()})
        return row

    @staticmethod
    def errors_path(output_path: Union[Path, str]) -> Path:
        output_path = Path(output_path)
        return output_path.with_name(f"{output_path.stem}{LoadTestConstants.ERRORS_FILE_SUFFIX}{output_path.suffix}")

    @classmethod
    def save_results(cls, config: LoadTestConfig, stats: Statistics, output_path: Union[Path, str]) -> None:
        """
        Save the run summary, and the failed requests if any, to CSV.

        Args:
            config: Configuration the run used.
            stats: Finished statistics.
            output_path: Path of the summary CSV; errors go next to it.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        df = pd.DataFrame([cls.summarize(config, stats)])
        df.to_csv(output_path, index=False)
        logger.info(f"Summary saved to CSV: {output_path}")

        if stats.errors:
            errors_path = cls.errors_path(output_path)
            errors_df = pd.DataFrame([asdict(record) for record in stats.errors])
            errors_df = errors_df.sort_values(by=["request_id"])
            errors_df.to_csv(errors_path, index=False)
            logger.info(f"Errors saved to CSV: {errors_path}")
