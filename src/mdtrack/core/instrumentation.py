"""OpenTelemetry instrumentation for tracking scans.

This module provides optional, configuration-driven tracing of corpus scans,
exporting traces compatible with Arize Phoenix.

Usage:
    # In config or via MDTRACK_TRACING=1:
    config.tracing.enabled = True

    # Initialize tracer early in application startup:
    tracer = configure_tracing(config.tracing)

    # Wrap an operation:
    with traced_request("track", attributes={"queries": 3}) as span:
        ...
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generator

from loguru import logger

if TYPE_CHECKING:
    from opentelemetry.trace import Span, Tracer


# =============================================================================
# Configuration
# =============================================================================


@dataclass
class TracingConfig:
    """Phoenix/OpenTelemetry tracing configuration.

    Attributes:
        enabled: Whether tracing is enabled (default: False).
        phoenix_endpoint: OTLP endpoint for Phoenix (default: local Phoenix).
        service_name: Service name for traces (default: mdtrack).
        service_version: Service version for traces.
        batch_export: Use BatchSpanProcessor vs SimpleSpanProcessor.
    """

    enabled: bool = False
    phoenix_endpoint: str = "http://localhost:6006/v1/traces"
    service_name: str = "mdtrack"
    service_version: str = "0.1.0"
    batch_export: bool = False


# =============================================================================
# Global State
# =============================================================================

_tracer: "Tracer | None" = None
_warning_logged: bool = False


def get_tracer() -> "Tracer | None":
    """Get the configured tracer, or None if tracing is disabled."""
    return _tracer


def configure_tracing(config: TracingConfig) -> "Tracer | None":
    """Configure OpenTelemetry tracing.

    Sets up the TracerProvider with an OTLP HTTP exporter. If tracing is
    disabled or setup fails, returns None and scans run untraced.

    Args:
        config: TracingConfig with endpoint and settings.

    Returns:
        Configured Tracer instance, or None if disabled/failed.
    """
    global _tracer, _warning_logged

    if not config.enabled:
        logger.debug("Tracing is disabled")
        _tracer = None
        return None

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
            OTLPSpanExporter,
        )
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import (
            BatchSpanProcessor,
            SimpleSpanProcessor,
        )

        resource = Resource.create(
            {
                "service.name": config.service_name,
                "service.version": config.service_version,
            }
        )
        provider = TracerProvider(resource=resource)
        exporter = OTLPSpanExporter(endpoint=config.phoenix_endpoint)

        # CLI runs are short-lived; the simple processor flushes every span
        if config.batch_export:
            processor = BatchSpanProcessor(exporter)
        else:
            processor = SimpleSpanProcessor(exporter)
        provider.add_span_processor(processor)

        trace.set_tracer_provider(provider)
        _tracer = trace.get_tracer(config.service_name, config.service_version)

        logger.info(f"Tracing enabled: endpoint={config.phoenix_endpoint}")
        _warning_logged = False
        return _tracer

    except ImportError as e:
        if not _warning_logged:
            logger.warning(
                f"OpenTelemetry packages not installed, tracing disabled: {e}. "
                "Install with: pip install 'mdtrack[tracing]'"
            )
            _warning_logged = True
        _tracer = None
        return None


def shutdown_tracing() -> None:
    """Shutdown tracing and flush any pending spans."""
    global _tracer

    if _tracer is None:
        return

    from opentelemetry import trace

    provider = trace.get_tracer_provider()
    if hasattr(provider, "shutdown"):
        provider.shutdown()
    logger.debug("Tracing shutdown complete")

    _tracer = None


# =============================================================================
# High-level Request Tracing
# =============================================================================


@contextmanager
def traced_request(
    operation: str,
    *,
    tracer: "Tracer | None" = None,
    attributes: dict[str, Any] | None = None,
) -> Generator["Span | None", None, None]:
    """Create a span for a high-level operation.

    Args:
        operation: Operation name (e.g., "track").
        tracer: Optional tracer (uses global if not provided).
        attributes: Additional span attributes; None values are skipped.

    Yields:
        The span (or None if tracing disabled).
    """
    active_tracer = tracer or _tracer

    if active_tracer is None:
        yield None
        return

    from opentelemetry.trace import Status, StatusCode

    with active_tracer.start_as_current_span(f"mdtrack.{operation}") as span:
        if attributes:
            for key, value in attributes.items():
                if value is not None:
                    span.set_attribute(key, value)

        try:
            yield span
            span.set_status(Status(StatusCode.OK))
        except Exception as e:
            span.record_exception(e)
            span.set_status(Status(StatusCode.ERROR, str(e)))
            raise
