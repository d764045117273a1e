"""
Processing-specific exceptions for the classification core.

The core never returns partial results: malformed input raises here and the
API layer maps the exception to a generic 500 response.
"""

from typing import Any


class ProcessingError(Exception):
    """
    Base exception for all classification core errors.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize processing error.

        Args:
            message: Human-readable error description
            details: Structured error data for logging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidInputError(ProcessingError):
    """
    Raised when classify() receives something other than a sequence of strings.

    Request validation should make this unreachable over HTTP, so seeing it
    in the logs points at a caller bypassing BfhlRequest.
    """

    def __init__(
        self,
        message: str,
        received_type: str | None = None,
        index: int | None = None,
    ):
        """
        Initialize invalid input error.

        Args:
            message: Error description
            received_type: Type name of the offending value
            index: Position of the offending element (None if the container itself is wrong)
        """
        details: dict[str, Any] = {}
        if received_type:
            details["received_type"] = received_type
        if index is not None:
            details["index"] = index

        super().__init__(message, details)
