"""OpenTelemetry setup helpers."""

from __future__ import annotations

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from ..core.logging import get_logger
from .settings import get_settings

logger = get_logger(__name__)


def setup_otel(app=None) -> bool:
    """Configure tracing and instrument the FastAPI app. Returns True if enabled."""
    settings = get_settings()
    if not settings.enabled:
        return False

    resource = Resource.create(attributes={"service.name": settings.service_name})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.otlp_endpoint)))
    trace.set_tracer_provider(provider)

    # Must run before the app starts serving; it adds middleware.
    if app is not None:
        FastAPIInstrumentor.instrument_app(app)

    logger.info("OpenTelemetry tracing enabled (endpoint=%s)", settings.otlp_endpoint)
    return True
