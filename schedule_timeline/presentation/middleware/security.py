"""Security middleware for HTTP security headers and request validation"""
import logging
from collections.abc import Callable

from fastapi import Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

DOCS_PATHS = ("/docs", "/redoc", "/openapi.json")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Add security headers to all HTTP responses.

    Headers added:
    - X-Frame-Options: Prevents clickjacking attacks
    - X-Content-Type-Options: Prevents MIME type sniffing
    - Strict-Transport-Security: Forces HTTPS (https requests only)
    - Content-Security-Policy: Restricts resource loading
    - Referrer-Policy: Controls referrer information
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Add security headers to response."""
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error("Error processing request: %s", e)
            raise

        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        if request.url.scheme == "https":
            response.headers[
                "Strict-Transport-Security"
            ] = "max-age=63072000; includeSubDomains"  # 2 years

        # Relax CSP for API documentation endpoints
        if request.url.path in DOCS_PATHS:
            response.headers["Content-Security-Policy"] = (
                "default-src 'self'; "
                "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
                "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
                "img-src 'self' data: https:; "
                "frame-ancestors 'none';"
            )
        else:
            response.headers["Content-Security-Policy"] = (
                "default-src 'none'; frame-ancestors 'none'; base-uri 'self';"
            )

        if "server" in response.headers:
            del response.headers["server"]

        return response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """
    Limit request body size.

    Timeline documents are small JSON blobs; anything above the configured
    limit is rejected before the body is read.
    """

    def __init__(self, app, max_request_size: int = 1024 * 1024) -> None:
        """
        Initialize middleware with max request size.

        Args:
            app: FastAPI application
            max_request_size: Maximum allowed request size in bytes (default 1MB)
        """
        super().__init__(app)
        self.max_request_size = max_request_size

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Check request size before processing."""
        content_length = request.headers.get("content-length")

        if content_length:
            try:
                content_length_int = int(content_length)
            except ValueError:
                logger.error("Invalid Content-Length header: %s", content_length)
                return JSONResponse(
                    status_code=400,
                    content={
                        "error": "INVALID_CONTENT_LENGTH",
                        "message": "Invalid Content-Length header",
                    },
                )

            if content_length_int > self.max_request_size:
                logger.warning(
                    "Request size %d exceeds limit %d from %s",
                    content_length_int,
                    self.max_request_size,
                    request.client.host if request.client else "unknown",
                )
                return JSONResponse(
                    status_code=413,
                    content={
                        "error": "PAYLOAD_TOO_LARGE",
                        "message": f"Request body too large. Maximum size: {self.max_request_size} bytes",
                        "details": {
                            "max_size_bytes": self.max_request_size,
                            "received_size_bytes": content_length_int,
                        },
                    },
                )

        return await call_next(request)
