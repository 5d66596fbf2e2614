"""Custom exceptions for the worker-nodes package."""

from typing import Any


class WorkerNodesError(Exception):
    """Base exception for all worker-nodes errors."""


class ConfigurationError(WorkerNodesError):
    """Raised when there is an issue with the configuration.

    Attributes:
        message: Explanation of the error.
        details: Context for the failure, such as ``fields`` (options that are not
            valid numbers), ``size`` (bytes of an oversized file), ``actual_type``
            (type of a non-mapping document), ``filename`` (file that could not be read) or
            ``original_error`` (YAML parser message).

    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize ConfigurationError."""
        super().__init__(message)
        self.details = details or {}
