from typing import Protocol, runtime_checkable

from cachetools import LRUCache


@runtime_checkable
class KeyValueStore(Protocol):
    """
    Persistent string key-value store used for recommendation caching.

    Both operations are best-effort: ``get`` returns None when the key is
    missing or the backend fails, ``set`` returns False when the write failed.
    Implementations must not raise on backend errors. Values are stored
    without expiry.
    """

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> bool: ...


class MemoryStore:
    """
    Process-local store for single-instance deployments and tests.
    Least recently used entries are evicted once ``maxsize`` keys are held.
    """

    def __init__(self, maxsize: int = 10000):
        self._data: LRUCache = LRUCache(maxsize=maxsize)

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> bool:
        # No expiry; readers judge freshness from the stored timestamp
        self._data[key] = value
        return True

    async def close(self) -> None:
        self._data.clear()
