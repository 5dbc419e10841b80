"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Firebase credentials are validated at load time when
the Firestore backend is selected.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except the Firebase credentials,
    required in validate_backend when database_backend is "firestore".
    """

    # App
    app_name: str = "stayplus"
    app_version: str = "1.0.0"
    debug: bool = False
    # "development" enables seed/reset; "production" and "test" do not (see allow_seed)
    environment: str = "development"

    # Document store: "firestore" (REST API) or "memory" (process-local, dev/tests)
    database_backend: str = "firestore"

    # Firebase / Firestore: use key (env) or path (file). For Vercel, use key.
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None  # Path to JSON file
    # REST listeners poll runQuery at this interval
    firestore_poll_interval_seconds: float = 2.0
    firestore_http_timeout_seconds: float = 30.0

    # Seeding
    seed_on_startup: bool = False
    allow_seed: bool = False

    # HTTP
    allowed_origins: str = "http://localhost:3000,http://localhost:5173"
    request_id_header: str = "X-Request-ID"

    # OpenTelemetry (opt-in)
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def seed_allowed(self) -> bool:
        """Seed/reset are development tools; ALLOW_SEED opts other environments in."""
        return self.is_development or self.allow_seed

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @model_validator(mode="after")
    def validate_backend(self) -> "Settings":
        """Validate backend selection and its credentials.

        - Firestore: FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH required.
        - Memory: no credentials; data lives for the life of the process.
        """
        if self.database_backend == "firestore":
            has_key = (
                self.firebase_service_account_key
                and self.firebase_service_account_key.get_secret_value()
            )
            if not has_key and not self.firebase_service_account_path:
                raise ValueError(
                    "When database_backend is 'firestore', set FIREBASE_SERVICE_ACCOUNT_KEY (full JSON string) "
                    "or FIREBASE_SERVICE_ACCOUNT_PATH (path to JSON file)."
                )
        elif self.database_backend != "memory":
            raise ValueError(
                f"database_backend must be 'firestore' or 'memory', got: {self.database_backend!r}"
            )
        if self.environment not in ("development", "production", "test"):
            raise ValueError(
                f"environment must be 'development', 'production' or 'test', got: {self.environment!r}"
            )
        if self.firestore_poll_interval_seconds <= 0:
            raise ValueError("FIRESTORE_POLL_INTERVAL_SECONDS must be positive")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
