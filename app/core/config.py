from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    PORT: int = 8000
    APP_ENV: Literal["development", "production"] = "production"

    JELLYFIN_URL: str = "http://jellyfin:8096"
    JELLYFIN_API_KEY: str | None = None
    JELLYFIN_TIMEOUT_SECONDS: float = 30.0

    CACHE_BACKEND: Literal["redis", "memory"] = "redis"
    REDIS_URL: str = "redis://redis:6379/0"
    # Maximum number of connections Redis client will open per process
    REDIS_MAX_CONNECTIONS: int = 20

    # Bump the version whenever the cached payload shape changes
    RECS_CACHE_KEY_PREFIX: str = "jellypicks:recs"
    RECS_CACHE_VERSION: str = "v1"
    RECS_CACHE_TTL_SECONDS: int = 86400  # 24 hours

    RECENCY_HALF_LIFE_DAYS: float = 180.0
    RESURFACE_AFTER_DAYS: float = 730.0
    RECS_LIST_LIMIT: int = 60

    PLAYED_ITEMS_LIMIT: int = 2000
    CANDIDATE_ITEMS_LIMIT: int = 100000


settings = Settings()
