"""Tests for opt-in OpenTelemetry setup and its lifespan wiring."""

from fastapi import FastAPI

from app.core import lifespan as lifespan_module
from app.core.lifespan import create_lifespan
from app.infrastructure.firebase import DocumentStore
from app.shared.telemetry import telemetry as telemetry_module
from app.shared.telemetry.telemetry import TelemetryConfig, get_telemetry


def _record_instrumentation(monkeypatch) -> list[str]:
    calls: list[str] = []
    monkeypatch.setattr(telemetry_module.trace, "set_tracer_provider", lambda provider: calls.append("provider"))
    monkeypatch.setattr(
        telemetry_module.FastAPIInstrumentor,
        "instrument_app",
        staticmethod(lambda app, **kwargs: calls.append("fastapi")),
    )
    monkeypatch.setattr(
        telemetry_module.LoggingInstrumentor,
        "instrument",
        lambda self, **kwargs: calls.append("logging"),
    )
    return calls


def test_disabled_config_installs_nothing(monkeypatch) -> None:
    calls = _record_instrumentation(monkeypatch)
    config = TelemetryConfig("stayplus", "1.0.0", enabled=False)

    assert config.setup_telemetry() is None
    config.instrument_fastapi(FastAPI())
    config.instrument_logging()

    assert calls == []


def test_enabled_config_instruments_app_and_logging(monkeypatch) -> None:
    calls = _record_instrumentation(monkeypatch)
    config = TelemetryConfig("stayplus", "1.0.0", environment="test")

    provider = config.setup_telemetry(exporter_type="none")
    config.instrument_fastapi(FastAPI())
    config.instrument_logging()

    assert provider is config.tracer_provider
    assert calls == ["provider", "fastapi", "logging"]
    config.shutdown()


class _FakeTelemetry:
    instances: list["_FakeTelemetry"] = []

    def __init__(self, **kwargs) -> None:
        self.kwargs = kwargs
        self.calls: list[str] = []
        _FakeTelemetry.instances.append(self)

    def setup_telemetry(self, **kwargs) -> None:
        self.calls.append(f"setup:{kwargs['exporter_type']}")

    def instrument_fastapi(self, app) -> None:
        self.calls.append("fastapi")

    def instrument_logging(self) -> None:
        self.calls.append("logging")

    def shutdown(self) -> None:
        self.calls.append("shutdown")


async def test_lifespan_skips_telemetry_by_default(monkeypatch, store: DocumentStore) -> None:
    _FakeTelemetry.instances = []
    monkeypatch.setattr(lifespan_module, "TelemetryConfig", _FakeTelemetry)

    async with create_lifespan(FastAPI()):
        assert get_telemetry() is None

    assert _FakeTelemetry.instances == []


async def test_lifespan_wires_telemetry_when_enabled(monkeypatch, store: DocumentStore) -> None:
    _FakeTelemetry.instances = []
    monkeypatch.setattr(lifespan_module, "TelemetryConfig", _FakeTelemetry)
    monkeypatch.setenv("TELEMETRY_ENABLED", "true")
    monkeypatch.setenv("TELEMETRY_EXPORTER", "none")

    async with create_lifespan(FastAPI()):
        (telemetry,) = _FakeTelemetry.instances
        assert get_telemetry() is telemetry
        assert telemetry.kwargs["service_name"] == "stayplus"

    assert telemetry.calls == ["setup:none", "fastapi", "logging", "shutdown"]
    assert get_telemetry() is None
