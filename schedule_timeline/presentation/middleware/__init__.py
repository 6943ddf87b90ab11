"""
Middleware layer for Schedule Timeline application.

This package contains middleware components for request processing,
correlation IDs, security headers, size limits and timeouts.
"""

from schedule_timeline.presentation.middleware.correlation import \
    CorrelationIDMiddleware
from schedule_timeline.presentation.middleware.security import (
    RequestSizeLimitMiddleware, SecurityHeadersMiddleware)
from schedule_timeline.presentation.middleware.timeout import TimeoutMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "SecurityHeadersMiddleware",
    "RequestSizeLimitMiddleware",
    "TimeoutMiddleware",
]
