"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The database URL must name an async driver
(sqlite+aiosqlite or postgresql+asyncpg); it is validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ASYNC_DRIVERS = ("sqlite+aiosqlite", "postgresql+asyncpg")
_TELEMETRY_EXPORTERS = ("console", "otlp", "none")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; validate_database_and_telemetry rejects
    combinations that cannot start.
    """

    # App
    app_name: str = "eventhub"
    app_version: str = "1.0.0"
    debug: bool = False
    # Mount point for the resource routers ("" serves /organizations at the root)
    api_prefix: str = ""

    # Database
    database_url: str = "sqlite+aiosqlite:///./eventhub.db"
    database_echo: bool = False
    # Optional pool overrides (None = use defaults in database.py; ignored for SQLite)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Startup
    create_tables_on_startup: bool = True
    seed_on_startup: bool = True

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_database_and_telemetry(self) -> "Settings":
        """Validate database URL and telemetry exporter.

        - DATABASE_URL is required and must use an async driver.
        - TELEMETRY_EXPORTER must be console, otlp or none; otlp needs an endpoint.
        """
        if not self.database_url:
            raise ValueError(
                "DATABASE_URL is required. Set in environment or .env file "
                "(e.g. sqlite+aiosqlite:///./eventhub.db)."
            )
        if not self.database_url.startswith(_ASYNC_DRIVERS):
            raise ValueError(
                f"DATABASE_URL must use an async driver ({', '.join(_ASYNC_DRIVERS)}), "
                f"got: {self.database_url.split('://', 1)[0]!r}"
            )
        if self.telemetry_exporter not in _TELEMETRY_EXPORTERS:
            raise ValueError(
                f"Invalid telemetry_exporter '{self.telemetry_exporter}'. "
                f"Must be one of: {', '.join(_TELEMETRY_EXPORTERS)}"
            )
        if (
            self.telemetry_enabled
            and self.telemetry_exporter == "otlp"
            and not self.telemetry_otlp_endpoint
        ):
            raise ValueError(
                "telemetry_otlp_endpoint is required when telemetry_exporter is 'otlp'. "
                "Set TELEMETRY_OTLP_ENDPOINT (e.g. http://localhost:4317)."
            )
        return self

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


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
