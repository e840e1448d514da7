import json
from collections.abc import Callable
from datetime import datetime

from loguru import logger
from pydantic import ValidationError

from app.core.cache import KeyValueStore
from app.core.config import settings
from app.models.recommendation import RecommendationResult
from app.utils.timestamps import utc_now

_REQUIRED_FIELDS = ("generated_at", "movies", "series", "combined")


class RecommendationCache:
    """
    Per-user cache of built recommendations.

    One entry per user under ``{prefix}:{version}:{user_id}``. Entries are
    never deleted; they are overwritten on rebuild and ignored once older
    than ``ttl_seconds``.
    """

    def __init__(
        self,
        store: KeyValueStore,
        ttl_seconds: int = 86400,
        key_prefix: str | None = None,
        version: str | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.ttl_seconds = ttl_seconds
        self.key_prefix = key_prefix or settings.RECS_CACHE_KEY_PREFIX
        self.version = version or settings.RECS_CACHE_VERSION
        self.clock = clock

    def key_for(self, user_id: str) -> str:
        """Generate cache key for a user's recommendations."""
        return f"{self.key_prefix}:{self.version}:{user_id}"

    async def read(self, user_id: str) -> RecommendationResult | None:
        """
        Get cached recommendations for a user.

        Args:
            user_id: Jellyfin user id

        Returns:
            RecommendationResult, or None if absent, unreadable or expired
        """
        key = self.key_for(user_id)
        try:
            raw = await self.store.get(key)
        except Exception as e:
            logger.warning(f"[{user_id}] Recommendation cache read failed: {e}")
            return None

        if not raw:
            return None

        try:
            data = json.loads(raw)
            if not isinstance(data, dict) or any(field not in data for field in _REQUIRED_FIELDS):
                raise ValueError("cached entry is missing fields")
            result = RecommendationResult.model_validate(data)
        except (json.JSONDecodeError, ValidationError, ValueError, TypeError) as e:
            logger.warning(f"[{user_id}] Ignoring unreadable cached recommendations: {e}")
            return None

        age_seconds = (self.clock() - result.generated_at).total_seconds()
        if age_seconds > self.ttl_seconds:
            logger.debug(f"[{user_id}] Cached recommendations expired ({int(age_seconds)}s old)")
            return None

        return result

    async def write(self, user_id: str, result: RecommendationResult) -> bool:
        """
        Cache recommendations for a user, replacing any previous entry.

        Best-effort: failures are logged and reported, never raised.

        Args:
            user_id: Jellyfin user id
            result: Freshly built recommendations

        Returns:
            True if the entry was stored
        """
        key = self.key_for(user_id)
        try:
            stored = await self.store.set(key, result.model_dump_json())
        except Exception as e:
            logger.warning(f"[{user_id}] Recommendation cache write failed: {e}")
            return False

        if stored:
            logger.debug(f"[{user_id}] Cached recommendations under {key}")
        return bool(stored)
