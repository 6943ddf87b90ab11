"""Request timeout middleware."""

import asyncio
import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class TimeoutMiddleware(BaseHTTPMiddleware):
    """
    Middleware to enforce request timeouts.

    Also reports processing time in the X-Process-Time header.
    """

    def __init__(self, app, timeout: float = 30.0):
        super().__init__(app)
        self.timeout = timeout

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request with timeout."""
        start_time = time.perf_counter()

        try:
            response = await asyncio.wait_for(call_next(request), timeout=self.timeout)
        except asyncio.TimeoutError:
            process_time = time.perf_counter() - start_time
            logger.warning("Request %s timed out after %.2fs", request.url.path, process_time)
            return JSONResponse(
                status_code=504,
                content={
                    "error": "REQUEST_TIMEOUT",
                    "message": f"Request timeout after {process_time:.2f} seconds",
                },
            )

        response.headers["X-Process-Time"] = f"{time.perf_counter() - start_time:.6f}"
        return response
