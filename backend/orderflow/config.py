"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets and endpoints come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Storage variants are chosen here and nowhere else

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
    - Bare host:port Redis addresses accepted (REDIS_ADDR style) and normalised to a URL
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from orderflow.core.domain_types import RepositoryBackend, SessionBackend


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "OrderFlow API"

    # Order storage
    repository_backend: RepositoryBackend = RepositoryBackend.SQL
    database_url: str = (
        "postgresql+asyncpg://orderflow:orderflow@db:5432/orderflow"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """postgres:// and postgresql:// URLs need the asyncpg driver prefix."""
        if isinstance(v, str):
            for prefix in ("postgresql://", "postgres://"):
                if v.startswith(prefix):
                    return v.replace(prefix, "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Sessions
    session_backend: SessionBackend = SessionBackend.REDIS
    redis_url: str = "redis://redis:6379/0"
    redis_socket_timeout_seconds: float = 2.0

    @field_validator("redis_url", mode="before")
    @classmethod
    def convert_redis_addr(cls, v: str) -> str:
        """Accept host:port and turn it into redis://host:port/0."""
        if isinstance(v, str) and v and "://" not in v:
            return f"redis://{v}/0"
        return v

    session_ttl_seconds: int = 3600
    session_cookie_name: str = "session_id"
    session_cookie_secure: bool = True
    session_token_bytes: int = 32

    # Deadlines applied to every repository and session-store call
    operation_timeout_seconds: float = 5.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8443
    ssl_certfile: str | None = None
    ssl_keyfile: str | None = None

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
