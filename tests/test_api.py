from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from app.core.app import app
from app.core.cache import MemoryStore
from app.core.version import __version__
from app.services.recommendation.engine import RecommendationEngine
from app.services.recommendation_service import get_recommendation_engine
from app.services.user_cache import RecommendationCache


@pytest.fixture
def client():
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


def _use_query(query, clock) -> None:
    engine = RecommendationEngine(query=query, cache=RecommendationCache(MemoryStore(), clock=clock), clock=clock)
    app.dependency_overrides[get_recommendation_engine] = lambda: engine


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_app_reports_package_version() -> None:
    assert app.version == __version__


def test_recommendations_endpoint(client, make_query, make_played, make_candidate, clock) -> None:
    query = make_query(
        played=[make_played("p", genres=["Drama"], last_played=clock.now - timedelta(days=1))],
        candidates=[
            make_candidate("m1", genres=["Drama"]),
            make_candidate("s1", item_type="Series", genres=["Drama"]),
        ],
    )
    _use_query(query, clock)

    response = client.get("/recommendations/user-1")

    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body["movies"]] == ["m1"]
    assert [item["id"] for item in body["series"]] == ["s1"]
    assert [item["id"] for item in body["combined"]] == ["m1", "s1"]
    assert body["generated_at"].startswith("2026-03-01T12:00:00")


def test_rails_endpoint_orders_rows(client, make_query, make_played, make_candidate, clock) -> None:
    query = make_query(
        played=[make_played("p", genres=["Drama"])],
        candidates=[make_candidate("m1", genres=["Drama"])],
    )
    _use_query(query, clock)

    response = client.get("/recommendations/user-1/rails")

    assert response.status_code == 200
    rails = response.json()
    assert [(rail["id"], rail["title"]) for rail in rails] == [
        ("client-recs-combined", "Recommended"),
        ("client-recs-movies", "Recommended Movies"),
        ("client-recs-series", "Recommended TV"),
    ]
    assert [item["id"] for item in rails[0]["items"]] == ["m1"]
    assert rails[2]["items"] == []


def test_failed_build_degrades_to_empty_lists(client, make_query, clock) -> None:
    _use_query(make_query(error=RuntimeError("jellyfin down")), clock)

    response = client.get("/recommendations/user-1")

    assert response.status_code == 200
    body = response.json()
    assert body["movies"] == [] and body["series"] == [] and body["combined"] == []


def test_failed_build_still_returns_rails(client, make_query, clock) -> None:
    _use_query(make_query(error=RuntimeError("jellyfin down")), clock)

    rails = client.get("/recommendations/user-1/rails").json()

    assert len(rails) == 3
    assert all(rail["items"] == [] for rail in rails)
