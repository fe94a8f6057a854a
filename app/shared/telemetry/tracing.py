"""Span helpers for application code: the @traced decorator and add_span_attributes."""

import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any

from opentelemetry import trace

from app.shared.telemetry.telemetry import get_tracer

# Keyword arguments copied onto spans as arg.<name>; ids and search filters only.
_RECORDED_KWARGS = frozenset({"org_id", "event_id", "ticket_id", "category", "location"})


def _record_kwargs(span: trace.Span, kwargs: dict[str, Any]) -> None:
    for key, value in kwargs.items():
        if key in _RECORDED_KWARGS and value is not None:
            span.set_attribute(f"arg.{key}", str(value))


def traced(operation_name: str | None = None) -> Callable:
    """Run the decorated function (sync or async) inside its own span.

    The span is named operation_name (default module.function). Id and
    filter keyword arguments are recorded as arg.* attributes. An exception
    is recorded on the span, marks it as failed, and propagates unchanged.
    """

    def decorator(func: Callable) -> Callable:
        span_name = operation_name or f"{func.__module__}.{func.__name__}"
        tracer = get_tracer(func.__module__)

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with tracer.start_as_current_span(span_name) as span:
                    _record_kwargs(span, kwargs)
                    return await func(*args, **kwargs)

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(span_name) as span:
                _record_kwargs(span, kwargs)
                return func(*args, **kwargs)

        return sync_wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Set attributes on the current span; no-op when nothing is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)
