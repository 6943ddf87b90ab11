"""Tests for logging and tracing helpers"""

import logging

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (ConsoleSpanExporter,
                                            SimpleSpanProcessor)
from opentelemetry.sdk.trace.export.in_memory_span_exporter import \
    InMemorySpanExporter
from opentelemetry.trace import StatusCode

from schedule_timeline.infrastructure.config.settings import Settings
from schedule_timeline.shared.context import set_correlation_id
from schedule_timeline.shared.telemetry.logging import CorrelationIdFilter
from schedule_timeline.shared.telemetry.telemetry import (TelemetryConfig,
                                                          build_span_exporter)
from schedule_timeline.shared.telemetry.tracing import traced


@pytest.fixture
def span_exporter(monkeypatch):
    """Collect spans in memory without touching the global provider"""
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(trace, "get_tracer", provider.get_tracer)
    return exporter


def make_record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)


class TestCorrelationIdFilter:
    """Tests for attaching correlation IDs to log records"""

    def test_record_gets_current_correlation_id(self):
        set_correlation_id("req-42")
        record = make_record()

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "req-42"

    def test_placeholder_outside_request(self):
        set_correlation_id("")
        record = make_record()

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"


class TestTraced:
    """Tests for the traced decorator"""

    def test_sync_function_creates_span(self, span_exporter):
        @traced("timeline.test", attributes={"timeline.kind": "unit"})
        def work():
            return 7

        assert work() == 7

        span = span_exporter.get_finished_spans()[0]
        assert span.name == "timeline.test"
        assert span.attributes["timeline.kind"] == "unit"
        assert span.status.status_code == StatusCode.OK

    @pytest.mark.asyncio
    async def test_async_function_creates_span(self, span_exporter):
        @traced()
        async def load():
            return "loaded"

        assert await load() == "loaded"

        span = span_exporter.get_finished_spans()[0]
        assert span.name.endswith("load")

    def test_exception_marks_span_as_error(self, span_exporter):
        @traced("timeline.fail")
        def fail():
            raise ValueError("bad input")

        with pytest.raises(ValueError):
            fail()

        span = span_exporter.get_finished_spans()[0]
        assert span.status.status_code == StatusCode.ERROR
        assert span.events[0].name == "exception"


class TestTelemetryConfig:
    """Tests for tracer provider setup"""

    def test_none_exporter(self):
        assert build_span_exporter("none") is None

    def test_otlp_without_endpoint_falls_back_to_console(self):
        assert isinstance(build_span_exporter("otlp"), ConsoleSpanExporter)

    def test_from_settings(self):
        settings = Settings(telemetry_enabled=True, telemetry_environment="staging")

        telemetry = TelemetryConfig.from_settings(settings)

        assert telemetry.service_name == "Schedule Timeline"
        assert telemetry.environment == "staging"
        assert telemetry.enabled is True

    def test_disabled_setup_registers_nothing(self):
        telemetry = TelemetryConfig("svc", "1.0", enabled=False)

        assert telemetry.setup_telemetry() is None
        assert telemetry.tracer_provider is None
