"""Shared telemetry: logging setup and OpenTelemetry config."""

from app.shared.telemetry.logging import setup_logging
from app.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)

__all__ = [
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "setup_logging",
]
