from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from schedule_timeline.infrastructure.config.settings import get_settings
from schedule_timeline.presentation.api.exception_handlers import \
    register_exception_handlers
from schedule_timeline.presentation.api.v1.routes import timeline
from schedule_timeline.presentation.middleware import (
    CorrelationIDMiddleware, RequestSizeLimitMiddleware,
    SecurityHeadersMiddleware, TimeoutMiddleware)
from schedule_timeline.shared.telemetry.logging import get_logger, setup_logging
from schedule_timeline.shared.telemetry.telemetry import (TelemetryConfig,
                                                          get_telemetry,
                                                          set_telemetry)

logger = get_logger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for application initialization and cleanup"""
    setup_logging()

    # Initialize OpenTelemetry distributed tracing
    if settings.telemetry_enabled:
        telemetry = TelemetryConfig.from_settings(settings)
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        telemetry.instrument_fastapi(app)
        set_telemetry(telemetry)
        logger.info("Distributed tracing initialized: exporter=%s", settings.telemetry_exporter)
    else:
        logger.info("Distributed tracing disabled in configuration")

    yield

    # Shutdown telemetry (flush remaining spans)
    telemetry_instance = get_telemetry()
    if telemetry_instance:
        telemetry_instance.shutdown()
        set_telemetry(None)


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Middleware (order matters - applied in reverse)
# 1. Request size limit (first check)
app.add_middleware(RequestSizeLimitMiddleware, max_request_size=settings.max_request_size)

# 2. Request timeout
app.add_middleware(TimeoutMiddleware, timeout=settings.request_timeout)

# 3. Correlation ID for request tracing
app.add_middleware(CorrelationIDMiddleware)

# 4. Security headers
app.add_middleware(SecurityHeadersMiddleware)

# 5. CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.allowed_origins.split(",")],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Routers
app.include_router(timeline.router, prefix="/timeline", tags=["timeline"])


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """
    Health check endpoint for load balancers and monitoring.

    The service keeps no external connections, so a response means the
    API and the timeline pipeline are available.
    """
    checks = {
        "api": True,
        "tracing": get_telemetry() is not None if settings.telemetry_enabled else None,
    }
    return {"status": "healthy", "checks": checks}
