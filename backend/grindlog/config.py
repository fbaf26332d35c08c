"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

_POSTGRES_SCHEMES = ("postgresql+asyncpg://", "postgresql://", "postgres://")


def _with_scheme(url: str, scheme: str) -> str:
    """Swap whichever Postgres scheme `url` uses for `scheme`."""
    for prefix in _POSTGRES_SCHEMES:
        if url.startswith(prefix):
            return scheme + url[len(prefix):]
    return url


class Settings(BaseSettings):
    """Grindlog settings, read from the environment or a local .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Grindlog"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    # A full URL (e.g. a hosted Postgres with ?sslmode=require) wins over the parts below
    database_url_override: str | None = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "grindlog"
    postgres_password: str = ""
    postgres_db: str = "grindlog"
    database_pool_size: int = 5
    database_max_overflow: int = 10

    @property
    def raw_database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field
    @property
    def database_url(self) -> str:
        """asyncpg URL for the app. Query params are dropped; SSL goes through connect_args."""
        url = _with_scheme(self.raw_database_url, "postgresql+asyncpg://")
        if url.startswith("postgresql+asyncpg://"):
            url = url.split("?", 1)[0]
        return url

    @computed_field
    @property
    def database_requires_ssl(self) -> bool:
        override = self.database_url_override or ""
        return "sslmode=require" in override or "ssl=require" in override

    @computed_field
    @property
    def database_url_sync(self) -> str:
        """psycopg2 URL for Alembic, query params intact."""
        return _with_scheme(self.raw_database_url, "postgresql://")

    # Auth / JWT
    jwt_secret_key: str  # Required - no default, must be set in .env
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 24 * 7  # 7 days
    password_min_length: int = 6

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Cookies
    # True when the frontend is served from another domain: samesite="none" + secure
    cookie_cross_domain: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def sanitize_error(error: Exception, *, generic_message: str = "An internal error occurred.") -> str:
    """
    Return a user-safe error message.

    Only the development environment sees the raw exception text.
    """
    if get_settings().environment == "development":
        return str(error)
    return generic_message
