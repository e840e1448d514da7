from typing import Any, TypeVar

from loguru import logger
from pydantic import ValidationError

from app.core.config import settings
from app.models.items import CandidateItem, MediaItem, PlayedItem

from .client import JellyfinClient

ItemT = TypeVar("ItemT", bound=MediaItem)

INCLUDE_ITEM_TYPES = "Movie,Series"
PLAYED_FIELDS = "Genres,People,Studios,ProviderIds,UserData,ProductionYear,OfficialRating"
CANDIDATE_FIELDS = "Genres,People,Studios,ProviderIds,UserData,Type,Name,ProductionYear"


class JellyfinLibraryService:
    """Reads a user's watch history and recommendable items from Jellyfin."""

    def __init__(
        self,
        client: JellyfinClient,
        played_limit: int | None = None,
        candidate_limit: int | None = None,
    ):
        self.client = client
        self.played_limit = played_limit or settings.PLAYED_ITEMS_LIMIT
        self.candidate_limit = candidate_limit or settings.CANDIDATE_ITEMS_LIMIT

    async def fetch_played_items(self, user_id: str) -> list[PlayedItem]:
        """Played movies and series, most recently played first."""
        raw_items = await self.client.get_items(
            user_id,
            {
                "IsPlayed": "true",
                "IncludeItemTypes": INCLUDE_ITEM_TYPES,
                "SortBy": "DatePlayed",
                "SortOrder": "Descending",
                "Recursive": "true",
                "Limit": self.played_limit,
                "Fields": PLAYED_FIELDS,
            },
        )
        items = self._parse_items(raw_items, PlayedItem)
        logger.info(f"[{user_id}] Library: {len(raw_items)} played fetched, {len(items)} usable")
        return items

    async def fetch_unplayed_candidates(self, user_id: str) -> list[CandidateItem]:
        """
        Unplayed movies and series.

        Items that were played and later marked unplayed keep their
        ``LastPlayedDate``; the resurfacing filter decides whether they
        may come back.
        """
        raw_items = await self.client.get_items(
            user_id,
            {
                "IsPlayed": "false",
                "IncludeItemTypes": INCLUDE_ITEM_TYPES,
                "Recursive": "true",
                "Limit": self.candidate_limit,
                "Fields": CANDIDATE_FIELDS,
            },
        )
        items = self._parse_items(raw_items, CandidateItem)
        logger.info(f"[{user_id}] Library: {len(raw_items)} candidates fetched, {len(items)} usable")
        return items

    @staticmethod
    def _parse_items(raw_items: list[Any], model: type[ItemT]) -> list[ItemT]:
        items = []
        for raw in raw_items:
            try:
                items.append(model.model_validate(raw))
            except ValidationError as e:
                item_id = raw.get("Id") if isinstance(raw, dict) else None
                logger.debug(f"Skipping malformed library item {item_id}: {e.error_count()} validation errors")
        return items
