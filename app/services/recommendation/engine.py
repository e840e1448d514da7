import asyncio
from collections.abc import Callable
from datetime import datetime

from loguru import logger

from app.core.settings import RecommendationSettings
from app.models.recommendation import RecommendationResult
from app.services.profile.builder import ProfileBuilder
from app.services.recommendation.fetcher import ItemQuery
from app.services.recommendation.selector import RecommendationSelector
from app.services.user_cache import RecommendationCache
from app.utils.timestamps import utc_now


class RecommendationEngine:
    """
    Builds per-user recommendations from watch history, at most once per cache TTL.
    """

    def __init__(
        self,
        query: ItemQuery,
        cache: RecommendationCache,
        recommendation_settings: RecommendationSettings | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.query = query
        self.cache = cache
        self.settings = recommendation_settings or RecommendationSettings()
        self.clock = clock

        self.profile_builder = ProfileBuilder(half_life_days=self.settings.half_life_days, clock=clock)
        self.selector = RecommendationSelector(
            resurface_after_days=self.settings.resurface_after_days,
            list_limit=self.settings.list_limit,
        )
        self._in_flight: dict[str, asyncio.Task] = {}

    async def build_recommendations(self, user_id: str) -> RecommendationResult:
        """
        Return recommendations for a user, from cache when fresh.

        Concurrent calls for the same user share one build. Query failures
        propagate to every waiting caller and leave the cache untouched.
        """
        if not user_id or not user_id.strip():
            raise ValueError("user_id must be a non-empty string")

        task = self._in_flight.get(user_id)
        if task is None:
            cached = await self.cache.read(user_id)
            if cached is not None:
                logger.info(f"[{user_id}] Serving cached recommendations from {cached.generated_at.isoformat()}")
                return cached

            # Another caller may have started a build while the cache was read
            task = self._in_flight.get(user_id)
            if task is None:
                task = asyncio.create_task(self._build(user_id))
                self._in_flight[user_id] = task
                task.add_done_callback(lambda t: self._forget(user_id, t))
        else:
            logger.debug(f"[{user_id}] Joining in-flight recommendation build")

        return await asyncio.shield(task)

    def _forget(self, user_id: str, task: asyncio.Task) -> None:
        if self._in_flight.get(user_id) is task:
            del self._in_flight[user_id]
        # Mark the outcome as retrieved; callers that stayed receive it through the shield
        if not task.cancelled():
            task.exception()

    async def _build(self, user_id: str) -> RecommendationResult:
        logger.info(f"[{user_id}] Building recommendations")

        played, candidates = await asyncio.gather(
            self.query.fetch_played_items(user_id),
            self.query.fetch_unplayed_candidates(user_id),
        )

        now = self.clock()
        profile = self.profile_builder.build_profile(played, now=now)
        result = self.selector.select(candidates, profile, now)

        logger.info(
            f"[{user_id}] Recommendations ready: {len(result.movies)} movies, "
            f"{len(result.series)} series, {len(result.combined)} combined "
            f"(from {len(played)} played, {len(candidates)} candidates)"
        )

        if not await self.cache.write(user_id, result):
            logger.warning(f"[{user_id}] Recommendations were not cached; the next request will rebuild")

        return result
