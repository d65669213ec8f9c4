"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - An empty revalidate_secret rejects every external revalidation request

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://agency:agency@db:5432/agency"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres provides postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Revalidation
    revalidate_secret: str = ""
    render_cache_ttl_seconds: int | None = 3600
    render_cache_max_entries: int = 512

    # Site
    site_url: str = "http://localhost:3000"
    ga_measurement_id: str | None = None

    @field_validator("site_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Admin sessions
    auth_secret: str = "change-me-in-production"
    session_max_age_seconds: int = 60 * 60 * 12
    session_cookie_secure: bool = False
    admin_email: str | None = None
    admin_password: str | None = None
    admin_name: str = "Admin"

    # Email (Resend)
    resend_api_key: str | None = None
    resend_base_url: str = "https://api.resend.com"
    resend_timeout_seconds: float = 10.0
    from_email: str = "noreply@ai1.com"
    agency_email: str = "agency@ai1.com"

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
