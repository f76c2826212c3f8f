from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Fundtrack API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    log_level: str | None = None  # DEBUG, INFO, WARNING...; derived from DEBUG if unset
    enable_openapi: bool = True
    host: str = "0.0.0.0"
    port: int = 8080

    # Database
    database_url: str
    database_migrations_url: str | None = None  # Sync URL for Alembic, defaults to database_url
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_ssl_mode: str = "disable"  # disable, prefer, require, verify-ca, verify-full
    database_statement_cache_size: int = 100

    # Projects
    initial_status_id: int = 1  # Status definition assigned when a project is created

    # CORS
    cors_origins: list[str] = ["*"]

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    # Rate Limiting (fixed window, per client IP)
    rate_limit_enabled: bool = False
    rate_limit_window_seconds: int = 15 * 60
    rate_limit_max: int = 100
    rate_limit_storage_uri: str | None = None  # e.g. "redis://localhost:6379/0", in-memory if unset

    @field_validator("database_ssl_mode")
    @classmethod
    def validate_ssl_mode(cls, v: str) -> str:
        allowed = {"disable", "prefer", "require", "verify-ca", "verify-full"}
        if v not in allowed:
            raise ValueError(f"DATABASE_SSL_MODE must be one of {sorted(allowed)}")
        return v

    @field_validator("rate_limit_window_seconds", "rate_limit_max")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Rate limit window and max must be positive")
        return v

    @property
    def cors_allow_all(self) -> bool:
        return "*" in self.cors_origins


@lru_cache
def get_settings() -> Settings:
    return Settings()
