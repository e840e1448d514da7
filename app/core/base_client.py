import asyncio
from typing import Any

import httpx
from loguru import logger

# Client errors worth retrying; any other 4xx fails immediately
RETRYABLE_STATUS_CODES = {408, 425, 429}


class BaseClient:
    """
    Base asynchronous HTTP client with built-in retry logic and logging.
    """

    retry_backoff_seconds: float = 0.5

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        max_retries: int = 3,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max_retries
        self.headers = headers or {}
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self.headers,
            follow_redirects=True,
            transport=self.transport,
        )

    async def get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx.AsyncClient instance."""
        if self._client is None or self._client.is_closed:
            self._client = self._build_client()
        return self._client

    async def close(self):
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    @staticmethod
    def _is_retryable(exc: httpx.HTTPError) -> bool:
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            return status >= 500 or status in RETRYABLE_STATUS_CODES
        return True

    async def _request(self, method: str, url: str, max_tries: int | None = None, **kwargs) -> httpx.Response:
        """Internal request handler with retry logic."""
        client = await self.get_client()
        tries = max_tries or self.max_retries

        for attempt in range(1, tries + 1):
            try:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                return response
            except (httpx.HTTPStatusError, httpx.RequestError) as e:
                if attempt < tries and self._is_retryable(e):
                    wait_time = self.retry_backoff_seconds * (2 ** (attempt - 1))  # Exponential backoff
                    logger.warning(
                        f"Request failed ({method} {url}): {str(e)}. "
                        f"Retrying in {wait_time}s... (Attempt {attempt}/{tries})"
                    )
                    await asyncio.sleep(wait_time)
                    continue
                logger.error(f"Request failed after {attempt} attempt(s): {str(e)}")
                raise

        raise httpx.RequestError(f"Request failed for unknown reasons ({method} {url})")

    async def get(self, url: str, params: dict[str, Any] | None = None, **kwargs) -> Any:
        """Perform a GET request and return the JSON response."""
        response = await self._request("GET", url, params=params, **kwargs)
        return response.json()
