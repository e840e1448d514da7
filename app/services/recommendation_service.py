from loguru import logger

from app.core.cache import MemoryStore
from app.core.config import settings
from app.core.constants import (
    RAIL_COMBINED_ID,
    RAIL_COMBINED_TITLE,
    RAIL_MOVIES_ID,
    RAIL_MOVIES_TITLE,
    RAIL_SERIES_ID,
    RAIL_SERIES_TITLE,
)
from app.core.settings import get_default_settings
from app.models.recommendation import Rail, RecommendationResult
from app.services.jellyfin import JellyfinClient, JellyfinLibraryService
from app.services.recommendation.engine import RecommendationEngine
from app.services.redis_service import RedisService
from app.services.user_cache import RecommendationCache


class RecommendationService:
    """
    Process-wide wiring of the recommendation engine to Jellyfin and the cache store.
    """

    def __init__(self):
        self._engine: RecommendationEngine | None = None
        self._client: JellyfinClient | None = None
        self._store: RedisService | MemoryStore | None = None

    def _create_store(self) -> RedisService | MemoryStore:
        if settings.CACHE_BACKEND == "memory":
            logger.info("Using in-memory recommendation cache")
            return MemoryStore()
        return RedisService()

    def get_engine(self) -> RecommendationEngine:
        if self._engine is None:
            recommendation_settings = get_default_settings()
            self._client = JellyfinClient()
            self._store = self._create_store()
            self._engine = RecommendationEngine(
                query=JellyfinLibraryService(self._client),
                cache=RecommendationCache(self._store, ttl_seconds=recommendation_settings.cache_ttl_seconds),
                recommendation_settings=recommendation_settings,
            )
        return self._engine

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
        if self._store is not None:
            await self._store.close()
        self._engine = None
        self._client = None
        self._store = None


def build_rails(result: RecommendationResult) -> list[Rail]:
    """Home screen rows in display order: combined, movies, then TV."""
    return [
        Rail(id=RAIL_COMBINED_ID, title=RAIL_COMBINED_TITLE, items=result.combined),
        Rail(id=RAIL_MOVIES_ID, title=RAIL_MOVIES_TITLE, items=result.movies),
        Rail(id=RAIL_SERIES_ID, title=RAIL_SERIES_TITLE, items=result.series),
    ]


recommendation_service = RecommendationService()


def get_recommendation_engine() -> RecommendationEngine:
    return recommendation_service.get_engine()
