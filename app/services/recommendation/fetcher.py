from typing import Protocol, runtime_checkable

from app.models.items import CandidateItem, PlayedItem


@runtime_checkable
class ItemQuery(Protocol):
    """
    Read-only access to a user's library.

    ``fetch_unplayed_candidates`` must also return previously played items
    whose last play is old enough to resurface; the engine only filters.
    Failures are raised, not swallowed.
    """

    async def fetch_played_items(self, user_id: str) -> list[PlayedItem]: ...

    async def fetch_unplayed_candidates(self, user_id: str) -> list[CandidateItem]: ...
