"""Pytest configuration and test helpers."""

from __future__ import annotations

import asyncio
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest

# Ensure the application package is importable when running tests without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


from app.models.items import CandidateItem, PlayedItem

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Settable clock for simulating the passage of time."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class FakeQuery:
    """In-memory ItemQuery that records how often it was asked."""

    def __init__(
        self,
        played: list[PlayedItem] | None = None,
        candidates: list[CandidateItem] | None = None,
        error: Exception | None = None,
    ):
        self.played = played or []
        self.candidates = candidates or []
        self.error = error
        self.played_calls = 0
        self.candidate_calls = 0
        self.gate: asyncio.Event | None = None

    async def _wait(self) -> None:
        if self.gate is not None:
            await self.gate.wait()
        else:
            await asyncio.sleep(0)

    async def fetch_played_items(self, user_id: str) -> list[PlayedItem]:
        self.played_calls += 1
        await self._wait()
        if self.error:
            raise self.error
        return list(self.played)

    async def fetch_unplayed_candidates(self, user_id: str) -> list[CandidateItem]:
        self.candidate_calls += 1
        await self._wait()
        return list(self.candidates)


def _raw_item(
    item_id: str,
    item_type: str = "Movie",
    genres: list[str] | None = None,
    people: list[str] | None = None,
    studios: list[str] | None = None,
    last_played: datetime | None = None,
    play_count: Any = None,
    favorite: bool = False,
) -> dict[str, Any]:
    user_data: dict[str, Any] = {"IsFavorite": favorite}
    if last_played is not None:
        user_data["LastPlayedDate"] = last_played.strftime("%Y-%m-%dT%H:%M:%S.0000000Z")
    if play_count is not None:
        user_data["PlayCount"] = play_count
    return {
        "Id": item_id,
        "Name": f"Item {item_id}",
        "Type": item_type,
        "Genres": genres or [],
        "People": [{"Name": name, "Type": "Actor"} for name in people or []],
        "Studios": [{"Name": name, "Id": f"studio-{name}"} for name in studios or []],
        "UserData": user_data,
    }


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO tests to run on asyncio without requiring trio."""

    return "asyncio"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_played():
    def factory(item_id: str, **kwargs: Any) -> PlayedItem:
        return PlayedItem.model_validate(_raw_item(item_id, **kwargs))

    return factory


@pytest.fixture
def make_candidate():
    def factory(item_id: str, **kwargs: Any) -> CandidateItem:
        return CandidateItem.model_validate(_raw_item(item_id, **kwargs))

    return factory


@pytest.fixture
def raw_item():
    return _raw_item


@pytest.fixture
def make_query():
    return FakeQuery
