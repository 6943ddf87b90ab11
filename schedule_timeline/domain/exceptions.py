"""
Domain exceptions for the Schedule Timeline application.

This module defines domain-level exceptions that represent rule violations
on timeline documents. These exceptions are independent of infrastructure
concerns.
"""

from typing import Any


class TimelineException(Exception):
    """
    Base exception for all Schedule Timeline errors.

    All custom exceptions should inherit from this class to allow
    for consistent error handling and logging.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error code for API responses
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TimelineException):
    """Raised when an operation's input precondition is not met."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class DocumentValidationException(TimelineException):
    """
    Raised at a fail-fast boundary when a timeline document failed validation.

    The message joins every validation error with newlines so that all
    problems surface together.
    """

    def __init__(self, errors: list[str]):
        super().__init__(
            "\n".join(errors),
            "DOCUMENT_INVALID",
            {"errors": list(errors)},
        )
        self.errors = list(errors)
