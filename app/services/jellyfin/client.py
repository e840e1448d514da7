from typing import Any

import httpx

from app.core.base_client import BaseClient
from app.core.config import settings
from app.core.version import __version__


class JellyfinClient(BaseClient):
    """
    Client for interacting with the Jellyfin server API.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {
            "User-Agent": f"Jellypicks/{__version__}",
            "Accept": "application/json",
        }
        api_key = api_key if api_key is not None else settings.JELLYFIN_API_KEY
        if api_key:
            headers["X-Emby-Token"] = api_key
        super().__init__(
            base_url=(base_url or settings.JELLYFIN_URL).rstrip("/"),
            timeout=timeout or settings.JELLYFIN_TIMEOUT_SECONDS,
            max_retries=max_retries,
            headers=headers,
            transport=transport,
        )

    async def get_items(self, user_id: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        """Query ``/Users/{user_id}/Items`` and return the raw ``Items`` list."""
        data = await self.get(f"/Users/{user_id}/Items", params=params)
        if not isinstance(data, dict):
            return []
        return data.get("Items") or []
