from datetime import timedelta

from app.models.recommendation import ScoredCandidate
from app.models.taste_profile import InterestProfile
from app.services.recommendation.selector import RecommendationSelector

PROFILE = InterestProfile(genres={"Drama": 10.0, "Comedy": 4.0}, people={"Ann": 2.0})


def test_resurfacing_boundary(clock, make_candidate) -> None:
    selector = RecommendationSelector()
    recent = make_candidate("recent", genres=["Drama"], last_played=clock.now - timedelta(days=730))
    old = make_candidate("old", genres=["Drama"], last_played=clock.now - timedelta(days=731))
    fresh = make_candidate("fresh", genres=["Drama"])

    result = selector.select([recent, old, fresh], PROFILE, clock.now)

    assert [item.id for item in result.combined] == ["old", "fresh"]


def test_recently_played_is_dropped_regardless_of_score(clock, make_candidate) -> None:
    selector = RecommendationSelector()
    loved = make_candidate("loved", genres=["Drama", "Comedy"], people=["Ann"], last_played=clock.now)

    assert selector.select([loved], PROFILE, clock.now).combined == []


def test_zero_overlap_never_appears(clock, make_candidate) -> None:
    selector = RecommendationSelector()
    unrelated = make_candidate("x", genres=["Horror"], people=["Zed"], studios=["Nobody"])
    bare = make_candidate("y")

    result = selector.select([unrelated, bare], PROFILE, clock.now)

    assert result.combined == [] and result.movies == [] and result.series == []


def test_ranking_is_descending_and_stable(clock, make_candidate) -> None:
    selector = RecommendationSelector()
    candidates = [
        make_candidate("comedy-1", genres=["Comedy"]),
        make_candidate("drama-1", genres=["Drama"]),
        make_candidate("comedy-2", genres=["Comedy"]),
        make_candidate("drama-2", genres=["Drama"]),
        make_candidate("both", genres=["Drama", "Comedy"]),
    ]

    ranked = selector.rank_candidates(candidates, PROFILE, clock.now)

    assert [s.item.id for s in ranked] == ["both", "drama-1", "drama-2", "comedy-1", "comedy-2"]
    assert [s.score for s in ranked] == [7.0, 5.0, 5.0, 2.0, 2.0]


def test_top_sixty_movies_by_score(clock, make_candidate) -> None:
    selector = RecommendationSelector()
    profile = InterestProfile(genres={f"g{i}": float(i + 1) for i in range(61)})
    candidates = [make_candidate(f"m{i}", genres=[f"g{i}"]) for i in range(61)]

    result = selector.select(candidates, profile, clock.now)

    assert len(result.movies) == 60
    assert [item.id for item in result.movies] == [f"m{i}" for i in range(60, 0, -1)]
    assert "m0" not in {item.id for item in result.movies}
    assert result.series == []


def test_lists_are_capped(clock, make_candidate) -> None:
    selector = RecommendationSelector(list_limit=60)
    candidates = [make_candidate(f"m{i}", genres=["Drama"]) for i in range(80)]
    candidates += [make_candidate(f"s{i}", item_type="Series", genres=["Comedy"]) for i in range(80)]

    result = selector.select(candidates, PROFILE, clock.now)

    assert len(result.movies) == 60
    assert len(result.series) == 60
    assert len(result.combined) == 60
    assert all(item.is_movie for item in result.combined)


def test_partition_stops_once_both_lists_are_full(make_candidate) -> None:
    selector = RecommendationSelector(list_limit=2)
    ranked = [
        ScoredCandidate(item=make_candidate("m1"), score=9),
        ScoredCandidate(item=make_candidate("s1", item_type="Series"), score=8),
        ScoredCandidate(item=make_candidate("m2"), score=7),
        ScoredCandidate(item=make_candidate("s2", item_type="Show"), score=6),
        ScoredCandidate(item=make_candidate("m3"), score=5),
        ScoredCandidate(item=make_candidate("s3", item_type="Series"), score=4),
    ]
    consumed = []

    def walk():
        for scored in ranked:
            consumed.append(scored.item.id)
            yield scored

    movies, series = selector.partition(walk())

    assert [item.id for item in movies] == ["m1", "m2"]
    assert [item.id for item in series] == ["s1", "s2"]
    assert consumed == ["m1", "s1", "m2", "s2"]


def test_combined_is_independent_of_typed_lists(clock, make_candidate) -> None:
    selector = RecommendationSelector()
    movie = make_candidate("movie", genres=["Drama"])
    show = make_candidate("show", item_type="Series", genres=["Comedy"])
    boxset = make_candidate("boxset", item_type="BoxSet", genres=["Drama", "Comedy"])

    result = selector.select([movie, show, boxset], PROFILE, clock.now)

    assert [item.id for item in result.combined] == ["boxset", "movie", "show"]
    assert [item.id for item in result.movies] == ["movie"]
    assert [item.id for item in result.series] == ["show"]


def test_result_is_stamped_with_build_time(clock, make_candidate) -> None:
    result = RecommendationSelector().select([make_candidate("a", genres=["Drama"])], PROFILE, clock.now)
    assert result.generated_at == clock.now
