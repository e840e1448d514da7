from pydantic import BaseModel, Field

from app.core.config import settings


class RecommendationSettings(BaseModel):
    """Tunables for a single recommendation build."""

    half_life_days: float = Field(default=180.0, gt=0, description="Days for a play's weight to halve")
    resurface_after_days: float = Field(
        default=730.0, ge=0, description="Played items reappear once last played longer ago than this"
    )
    cache_ttl_seconds: int = Field(default=86400, gt=0, description="How long a built result is served from cache")
    list_limit: int = Field(default=60, gt=0, description="Maximum length of each result list")


def get_default_settings() -> RecommendationSettings:
    return RecommendationSettings(
        half_life_days=settings.RECENCY_HALF_LIFE_DAYS,
        resurface_after_days=settings.RESURFACE_AFTER_DAYS,
        cache_ttl_seconds=settings.RECS_CACHE_TTL_SECONDS,
        list_limit=settings.RECS_LIST_LIMIT,
    )
