"""OpenTelemetry distributed tracing configuration"""

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import \
    OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (BatchSpanProcessor,
                                            ConsoleSpanExporter, SpanExporter)
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased

from schedule_timeline.infrastructure.config.settings import Settings

logger = logging.getLogger(__name__)

# Probes are polled constantly and carry no timeline work
UNTRACED_URLS = "/health,/"


def build_span_exporter(exporter_type: str, otlp_endpoint: str | None = None) -> SpanExporter | None:
    """
    Pick the span exporter for a configured exporter type.

    Returns None for "none". An "otlp" type without an endpoint falls back to
    the console exporter so spans are not silently dropped.
    """
    if exporter_type == "none":
        return None

    if exporter_type == "otlp":
        if otlp_endpoint:
            # Plain-text gRPC only for http:// endpoints
            return OTLPSpanExporter(
                endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
            )
        logger.warning("OTLP exporter selected without an endpoint, using console")

    return ConsoleSpanExporter()


class TelemetryConfig:
    """
    OpenTelemetry setup for the timeline service

    Spans come from two places:
    - FastAPI request instrumentation
    - The ``traced`` decorator around validate/normalize/layout/load_default

    Any OTLP-compatible backend (Jaeger, Tempo, Datadog) can receive them.
    """

    def __init__(
        self,
        service_name: str,
        service_version: str,
        environment: str = "development",
        enabled: bool = True,
    ):
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment
        self.enabled = enabled
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "TelemetryConfig":
        return cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            environment=settings.telemetry_environment,
            enabled=settings.telemetry_enabled,
        )

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """
        Create and register the global tracer provider

        Args:
            exporter_type: "console", "otlp" or "none"
            otlp_endpoint: OTLP gRPC endpoint, e.g. "http://localhost:4317"
            sample_rate: Fraction of root traces to keep (0.0-1.0)

        Returns:
            The registered TracerProvider, or None if disabled or setup failed
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None

        try:
            provider = TracerProvider(
                resource=Resource(
                    attributes={
                        SERVICE_NAME: self.service_name,
                        SERVICE_VERSION: self.service_version,
                        "deployment.environment": self.environment,
                    }
                ),
                sampler=ParentBased(TraceIdRatioBased(sample_rate)),
            )

            exporter = build_span_exporter(exporter_type, otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))

            trace.set_tracer_provider(provider)
        except Exception as e:
            logger.exception("Failed to initialize telemetry: %s", e)
            return None

        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s, exporter=%s, sample_rate=%.2f",
            self.service_name,
            exporter_type,
            sample_rate,
        )
        return provider

    def instrument_fastapi(self, app: FastAPI):
        """Trace HTTP requests to the timeline API, probes excluded"""
        if not self.tracer_provider:
            return

        try:
            FastAPIInstrumentor.instrument_app(
                app, tracer_provider=self.tracer_provider, excluded_urls=UNTRACED_URLS
            )
            logger.info("FastAPI instrumentation enabled")
        except Exception as e:
            logger.error("Failed to instrument FastAPI: %s", e)

    def shutdown(self):
        """Flush pending spans and release the provider"""
        if not self.tracer_provider:
            return

        try:
            self.tracer_provider.shutdown()
            logger.info("Telemetry shutdown complete")
        except Exception as e:
            logger.error("Error during telemetry shutdown: %s", e)
        self.tracer_provider = None


# Process-wide instance set during application startup
_telemetry: TelemetryConfig | None = None


def get_telemetry() -> TelemetryConfig | None:
    return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None):
    global _telemetry
    _telemetry = telemetry
