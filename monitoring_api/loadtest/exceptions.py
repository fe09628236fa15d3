"""Custom exceptions for the stress test."""


class LoadTestExecutionError(Exception):
    """Raised when the batch loop aborts on an unexpected error."""
    pass


class ConfigurationError(Exception):
    """Raised when the run configuration cannot be resolved."""
    pass
