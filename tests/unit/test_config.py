"""Tests for Settings validation and derived properties."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings, get_settings


def _settings(**overrides) -> Settings:
    fields = {"database_backend": "memory", "environment": "development", "_env_file": None}
    fields.update(overrides)
    return Settings(**fields)


def test_memory_backend_needs_no_credentials() -> None:
    assert _settings().database_backend == "memory"


def test_firestore_backend_requires_credentials() -> None:
    with pytest.raises(ValidationError, match="FIREBASE_SERVICE_ACCOUNT_KEY"):
        _settings(database_backend="firestore")


def test_firestore_backend_accepts_key_or_path() -> None:
    assert _settings(database_backend="firestore", firebase_service_account_key="{}")
    assert _settings(database_backend="firestore", firebase_service_account_path="sa.json")


def test_unknown_backend_rejected() -> None:
    with pytest.raises(ValidationError, match="database_backend"):
        _settings(database_backend="postgres")


def test_unknown_environment_rejected() -> None:
    with pytest.raises(ValidationError, match="environment"):
        _settings(environment="staging")


def test_poll_interval_must_be_positive() -> None:
    with pytest.raises(ValidationError, match="POLL_INTERVAL"):
        _settings(firestore_poll_interval_seconds=0)


def test_seed_allowed() -> None:
    assert _settings().seed_allowed
    assert not _settings(environment="production").seed_allowed
    assert _settings(environment="production", allow_seed=True).seed_allowed


def test_cors_origins_split_and_trimmed() -> None:
    settings = _settings(allowed_origins=" https://a.test ,, https://b.test ")
    assert settings.cors_origins == ["https://a.test", "https://b.test"]


def test_get_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "test")
    get_settings.cache_clear()
    assert get_settings().environment == "test"
    assert get_settings() is get_settings()
