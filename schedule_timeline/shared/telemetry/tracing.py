"""Span helpers for the timeline pipeline"""
import inspect
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps

from opentelemetry import trace
from opentelemetry.trace import Span, Status, StatusCode


@contextmanager
def operation_span(name: str, attributes: dict | None = None) -> Iterator[Span]:
    """
    Open a current span that ends OK, or ERROR with the exception recorded

    Usage:
        with operation_span("timeline.parse", {"timeline.bytes": len(text)}):
            document = serializer.deserialize(text)
    """
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(name, attributes=attributes) as span:
        try:
            yield span
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR, str(e)))
            span.record_exception(e)
            raise
        span.set_status(Status(StatusCode.OK))


def traced(operation_name: str | None = None, attributes: dict | None = None):
    """
    Decorator wrapping a sync or async function in an operation span

    Usage:
        @traced("timeline.validate")
        def validate(self, document):
            ...

        @traced("timeline.load_default")
        async def load_default(self, source):
            ...

    Args:
        operation_name: Span name (defaults to module.qualname)
        attributes: Static attributes set on every span
    """

    def decorator(func: Callable) -> Callable:
        span_name = operation_name or f"{func.__module__}.{func.__qualname__}"

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                with operation_span(span_name, attributes):
                    return await func(*args, **kwargs)

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            with operation_span(span_name, attributes):
                return func(*args, **kwargs)

        return sync_wrapper

    return decorator


def add_span_attributes(**attributes):
    """
    Add attributes to the current span, if one is recording

    Usage:
        add_span_attributes(**{"timeline.validation_errors": 3})
    """
    span = trace.get_current_span()
    if span.is_recording():
        span.set_attributes(attributes)
