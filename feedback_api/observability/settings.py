"""OpenTelemetry settings (simple, env-driven)."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class OTelSettings:
    enabled: bool = False
    service_name: str = "feedback-api"
    otlp_endpoint: str = "http://localhost:4317"


def get_settings() -> OTelSettings:
    # Read at call time so tests and .env files can change them.
    return OTelSettings(
        enabled=_env_bool("OTEL_ENABLED", False),
        service_name=os.getenv("OTEL_SERVICE_NAME", "feedback-api"),
        otlp_endpoint=os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4317"),
    )
