import logging
import sys
from typing import Dict, Optional

from monitoring_api.const import LIBRARY_LOG_LEVELS, LOG_DATE_FORMAT, LOG_FORMAT


class LoggingManager:
    """Manager for logging setup and logger retrieval."""

    _handler: Optional[logging.Handler] = None

    @classmethod
    def setup_logging(
        cls,
        level: str = "INFO",
        fmt: str = LOG_FORMAT,
        datefmt: Optional[str] = LOG_DATE_FORMAT,
        library_log_levels: Optional[Dict[str, str]] = None,
    ) -> None:
        """Setup console logging for the application.

        Calling it again replaces the handler installed by the previous call,
        so the service and the load generator can each pick their own format.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            fmt: Log record format string
            datefmt: Date format for ``%(asctime)s``; None keeps ISO-8601
            library_log_levels: Per-logger overrides for noisy libraries
        """
        # Convert string level to logging level
        numeric_level = getattr(logging, level.upper(), logging.INFO)

        formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(numeric_level)

        # Configure root logger
        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)
        if cls._handler is not None:
            root_logger.removeHandler(cls._handler)
        root_logger.addHandler(console_handler)
        cls._handler = console_handler

        # Set levels for noisy libraries
        levels = LIBRARY_LOG_LEVELS if library_log_levels is None else library_log_levels
        for logger_name, library_level in levels.items():
            logging.getLogger(logger_name).setLevel(getattr(logging, library_level.upper(), logging.WARNING))

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name, typically __name__

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)
