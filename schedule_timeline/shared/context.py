"""
Request context management using contextvars.

Provides async-safe storage for request-scoped data like the correlation
ID used to tie log lines to a single request.

Usage:
    # In middleware:
    set_correlation_id("3f2a...")

    # In any code that needs it (e.g. logging filters):
    correlation_id = get_correlation_id()  # Returns "" outside a request

    # Context is automatically reset per request due to contextvars
"""

from contextvars import ContextVar

# Context variable for the current request's correlation ID
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current request context."""
    _correlation_id.set(correlation_id)


def get_correlation_id() -> str:
    """Get the correlation ID for the current request"""
    return _correlation_id.get()
