"""Running aggregate of request outcomes."""
import math
import threading
import time
from typing import List, Optional

from .models import RequestErrorRecord, RequestOutcome


class Statistics:
    """Aggregates request outcomes for one run.

    ``record`` is safe to call from worker threads; the counters, the latency
    samples and the error list are updated under one lock so that
    ``total == successful + failed`` holds after every call.
    """

    def __init__(self):
        self.total = 0
        self.successful = 0
        self.failed = 0
        self.total_elapsed_ms = 0.0
        self.min_elapsed_ms = math.inf
        self.max_elapsed_ms = 0.0
        self.elapsed_times: List[float] = []
        self.errors: List[RequestErrorRecord] = []
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self._lock = threading.Lock()

    def start(self) -> None:
        self.start_time = time.perf_counter()

    def finish(self) -> None:
        self.end_time = time.perf_counter()

    def record(self, outcome: RequestOutcome) -> None:
        """Fold one outcome into the aggregate."""
        with self._lock:
            if outcome.success:
                self.successful += 1
                self.total_elapsed_ms += outcome.elapsed_ms
                self.min_elapsed_ms = min(self.min_elapsed_ms, outcome.elapsed_ms)
                self.max_elapsed_ms = max(self.max_elapsed_ms, outcome.elapsed_ms)
                self.elapsed_times.append(outcome.elapsed_ms)
            else:
                self.failed += 1
                self.errors.append(RequestErrorRecord(
                    request_id=outcome.request_id,
                    error=outcome.error or "",
                    elapsed_ms=outcome.elapsed_ms,
                ))
            self.total += 1

    @property
    def duration_ms(self) -> float:
        """Wall-clock run duration; 0 until both timestamps are set."""
        if self.start_time is None or self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    @property
    def average_elapsed_ms(self) -> float:
        if self.successful == 0:
            return 0.0
        return self.total_elapsed_ms / self.successful

    @property
    def success_rate(self) -> float:
        """Percentage of successful requests, 0 when nothing ran."""
        if self.total == 0:
            return 0.0
        return self.successful / self.total * 100

    @property
    def requests_per_second(self) -> float:
        duration_seconds = self.duration_ms / 1000
        if duration_seconds <= 0:
            return 0.0
        return self.total / duration_seconds
