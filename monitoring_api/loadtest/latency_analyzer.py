"""Analyzes and computes latency statistics."""
import math
from typing import Sequence

import numpy as np

from .constants import LoadTestConstants
from .models import LatencyResults


class LatencyAnalyzer:
    """Analyzes and computes latency statistics."""

    @staticmethod
    def percentile(values: Sequence[float], percentile: float) -> float:
        """
        Nearest-rank percentile.

        The samples are sorted ascending and the value at
        ``ceil(percentile / 100 * n) - 1`` is returned. An index outside the
        list falls back to the first sample.

        Args:
            values: Latency measurements, in any order.
            percentile: Percentile in the range 0-100.

        Returns:
            The selected sample, or 0.0 for an empty input.
        """
        if len(values) == 0:
            return 0.0

        ordered = np.sort(np.asarray(values, dtype=float))
        index = math.ceil((percentile / 100) * len(ordered)) - 1
        if index < 0 or index >= len(ordered):
            index = 0
        return float(ordered[index])

    @classmethod
    def compute_percentiles(cls, latencies: Sequence[float]) -> LatencyResults:
        """
        Compute p50, p90, p95 and p99.

        Args:
            latencies: List of latency measurements.

        Returns:
            LatencyResults dataclass with percentiles.
        """
        p50, p90, p95, p99 = (cls.percentile(latencies, p) for p in LoadTestConstants.PERCENTILES)
        return LatencyResults(p50=p50, p90=p90, p95=p95, p99=p99)
