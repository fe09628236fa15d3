"""Command-line entry point for the stress test."""
import argparse
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from monitoring_api.shared.logging import LoggingManager

from .constants import LoadTestConstants
from .exceptions import ConfigurationError, LoadTestExecutionError
from .models import LoadTestConfig
from .runner import LoadTestRunner


logger = logging.getLogger(__name__)

EPILOG = """\
Environment Variables:
  CONCURRENT_REQUESTS      Number of concurrent requests
  TOTAL_REQUESTS           Total number of requests
  DELAY_BETWEEN_BATCHES    Delay between batches in ms
  TIMEOUT                  Request timeout in ms
  BASE_URL                 Base URL
  ENDPOINT                 Endpoint path
  VERBOSE                  Enable verbose logging (true/false)
  OUTPUT                   CSV file for the run summary

Examples:
  monitoring-stress-test --concurrent 20 --total 500
  monitoring-stress-test --base-url http://localhost:8080 --verbose
  CONCURRENT_REQUESTS=50 TOTAL_REQUESTS=1000 monitoring-stress-test
"""

# Flag destination -> LoadTestConfig field
FLAG_FIELDS = {
    "concurrent": "concurrent_requests",
    "total": "total_requests",
    "delay": "delay_between_batches",
    "timeout": "timeout",
    "base_url": "base_url",
    "endpoint": "endpoint",
    "verbose": "verbose",
    "output": "output",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monitoring-stress-test",
        description=f"Stress test script for the {LoadTestConstants.DEFAULT_ENDPOINT} endpoint",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--concurrent", type=int, metavar="<number>",
                        help=f"Number of concurrent requests (default: {LoadTestConstants.DEFAULT_CONCURRENT_REQUESTS})")
    parser.add_argument("--total", type=int, metavar="<number>",
                        help=f"Total number of requests (default: {LoadTestConstants.DEFAULT_TOTAL_REQUESTS})")
    parser.add_argument("--delay", type=int, metavar="<number>",
                        help=f"Delay between batches in ms (default: {LoadTestConstants.DEFAULT_DELAY_BETWEEN_BATCHES})")
    parser.add_argument("--timeout", type=int, metavar="<number>",
                        help=f"Request timeout in ms (default: {LoadTestConstants.DEFAULT_TIMEOUT})")
    parser.add_argument("--base-url", metavar="<url>",
                        help=f"Base URL (default: {LoadTestConstants.DEFAULT_BASE_URL})")
    parser.add_argument("--endpoint", metavar="<path>",
                        help=f"Endpoint path (default: {LoadTestConstants.DEFAULT_ENDPOINT})")
    parser.add_argument("--output", metavar="<csv>", help="Write the run summary to this CSV file")
    parser.add_argument("--verbose", action="store_true", default=None, help="Enable verbose logging")
    return parser


def resolve_config(args: argparse.Namespace) -> LoadTestConfig:
    """Layer the given flags over environment and defaults."""
    overrides: Dict[str, Any] = {
        field: getattr(args, flag)
        for flag, field in FLAG_FIELDS.items()
        if getattr(args, flag) is not None
    }
    try:
        return LoadTestConfig(**overrides)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e


def main(argv: Optional[List[str]] = None) -> int:
    """Run the stress test; returns the process exit code."""
    LoggingManager.setup_logging(fmt=LoadTestConstants.LOG_FORMAT, datefmt=None)

    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    for arg in unknown:
        if arg.startswith("--"):
            logger.warning(f"Unknown option: {arg}")

    try:
        config = resolve_config(args)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        LoadTestRunner(config).run()
    except LoadTestExecutionError as e:
        logger.error(f"Fatal error: {e}")
        return 1
    return 0
