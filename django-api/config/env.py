"""Environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - Every non-secret setting has a default that works for local development and tests
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings read from the environment (and an optional .env file)."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Django
    django_secret_key: str = "django-insecure-dev-only"
    django_debug: bool = False
    django_allowed_hosts: str = "localhost,127.0.0.1,testserver"

    # Database
    database_engine: Literal["sqlite", "postgresql"] = "sqlite"
    postgres_db: str = "devevent"
    postgres_user: str = "devevent"
    postgres_password: str = ""
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_conn_max_age: int = 60
    sqlite_path: str | None = None

    # Cache
    event_cache_timeout: int = 300

    # Observability
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    @field_validator("log_level")
    @classmethod
    def uppercase_level(cls, v: str) -> str:
        return v.strip().upper()

    @property
    def allowed_hosts(self) -> list[str]:
        """Comma-separated DJANGO_ALLOWED_HOSTS, blanks dropped."""
        return [host.strip() for host in self.django_allowed_hosts.split(",") if host.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
