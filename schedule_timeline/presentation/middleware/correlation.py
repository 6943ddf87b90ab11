"""Correlation ID middleware for request tracing"""
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from schedule_timeline.shared.context import set_correlation_id

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """
    Add correlation IDs to all requests for distributed tracing.

    Features:
    - Generates unique correlation ID for each request
    - Accepts X-Correlation-ID header from clients
    - Adds correlation ID to response headers
    - Makes correlation ID available to logging system

    Usage in logs:
        Log records carry ``correlation_id`` through CorrelationIdFilter.
    """

    async def dispatch(self, request: Request, call_next):
        # Get correlation ID from header or generate new one
        correlation_id = request.headers.get(CORRELATION_HEADER)

        if not correlation_id:
            correlation_id = str(uuid.uuid4())

        set_correlation_id(correlation_id)

        response = await call_next(request)

        response.headers[CORRELATION_HEADER] = correlation_id

        return response
