"""Unit tests for the statistics aggregate."""

import threading

from monitoring_api.loadtest.run_statistics import Statistics
from tests.conftest import make_outcome
from tests.test_const import TIMEOUT_ERROR_DESCRIPTION


class TestStatistics:
    """Test outcome aggregation."""

    def test_empty(self):
        stats = Statistics()

        assert stats.total == 0
        assert stats.success_rate == 0.0
        assert stats.requests_per_second == 0.0
        assert stats.average_elapsed_ms == 0.0
        assert stats.duration_ms == 0.0

    def test_record_success_and_failure(self):
        stats = Statistics()
        stats.record(make_outcome(1, 12.5))
        stats.record(make_outcome(2, 7.5))
        stats.record(make_outcome(3, 100.0, success=False, error=TIMEOUT_ERROR_DESCRIPTION))

        assert stats.total == 3
        assert stats.successful == 2
        assert stats.failed == 1
        assert stats.total == stats.successful + stats.failed
        assert stats.min_elapsed_ms == 7.5
        assert stats.max_elapsed_ms == 12.5
        assert stats.elapsed_times == [12.5, 7.5]
        assert stats.average_elapsed_ms == 10.0
        assert stats.errors[0].request_id == 3
        assert stats.errors[0].error == TIMEOUT_ERROR_DESCRIPTION
        assert stats.errors[0].elapsed_ms == 100.0

    def test_failures_do_not_touch_latency(self):
        stats = Statistics()
        stats.record(make_outcome(1, 5.0, success=False, error="boom"))

        assert stats.elapsed_times == []
        assert stats.max_elapsed_ms == 0.0
        assert stats.success_rate == 0.0

    def test_success_rate(self):
        stats = Statistics()
        for i in range(3):
            stats.record(make_outcome(i, 1.0))
        stats.record(make_outcome(4, 1.0, success=False, error="x"))

        assert stats.success_rate == 75.0

    def test_throughput(self):
        stats = Statistics()
        stats.start_time = 10.0
        stats.end_time = 12.0
        for i in range(10):
            stats.record(make_outcome(i, 1.0))

        assert stats.duration_ms == 2000.0
        assert stats.requests_per_second == 5.0

    def test_concurrent_records(self):
        stats = Statistics()

        def worker(offset):
            for i in range(200):
                stats.record(make_outcome(offset + i, float(i % 7), success=i % 5 != 0, error="e"))

        threads = [threading.Thread(target=worker, args=(n * 1000,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert stats.total == 1600
        assert stats.total == stats.successful + stats.failed
        assert len(stats.elapsed_times) == stats.successful
        assert len(stats.errors) == stats.failed
        assert all(stats.min_elapsed_ms <= t <= stats.max_elapsed_ms for t in stats.elapsed_times)
