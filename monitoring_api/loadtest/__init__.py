"""Stress test package initialization."""
from .models import LoadTestConfig, RequestOutcome, RequestErrorRecord, LatencyResults
from .constants import LoadTestConstants
from .exceptions import LoadTestExecutionError, ConfigurationError
from .run_statistics import Statistics
from .batch_scheduler import BatchPlan, BatchScheduler
from .request_session_manager import RequestSessionManager
from .request_executor import RequestExecutor
from .latency_analyzer import LatencyAnalyzer
from .concurrency_manager import ConcurrencyManager
from .report import ReportFormatter, format_duration, group_errors
from .result_exporter import ResultExporter
from .runner import LoadTestRunner

__all__ = [
    'LoadTestConfig',
    'RequestOutcome',
    'RequestErrorRecord',
    'LatencyResults',
    'LoadTestConstants',
    'LoadTestExecutionError',
    'ConfigurationError',
    'Statistics',
    'BatchPlan',
    'BatchScheduler',
    'RequestSessionManager',
    'RequestExecutor',
    'LatencyAnalyzer',
    'ConcurrencyManager',
    'ReportFormatter',
    'format_duration',
    'group_errors',
    'ResultExporter',
    'LoadTestRunner'
]
