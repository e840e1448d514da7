from collections.abc import Iterable
from datetime import datetime

from loguru import logger

from app.models.items import CandidateItem
from app.models.recommendation import RecommendationResult, ScoredCandidate
from app.models.taste_profile import InterestProfile
from app.services.profile.scorer import ProfileScorer
from app.services.recommendation.filtering import RecommendationFiltering


class RecommendationSelector:
    """
    Scores, ranks and partitions candidates into the three result lists.
    """

    def __init__(self, resurface_after_days: float = 730.0, list_limit: int = 60):
        self.resurface_after_days = resurface_after_days
        self.list_limit = list_limit

    def rank_candidates(
        self, candidates: Iterable[CandidateItem], profile: InterestProfile, now: datetime
    ) -> list[ScoredCandidate]:
        """
        Score eligible candidates and rank them.

        Items seen too recently and items with no overlap (score 0) are dropped.
        Sorting is stable, so equal scores keep the order the server returned.
        """
        scored = []
        for item in candidates:
            if not RecommendationFiltering.is_resurfaceable(item, now, self.resurface_after_days):
                continue
            score = ProfileScorer.score_item(item, profile)
            if score > 0:
                scored.append(ScoredCandidate(item=item, score=score))

        scored.sort(key=lambda x: x.score, reverse=True)
        return scored

    def partition(self, ranked: Iterable[ScoredCandidate]) -> tuple[list[CandidateItem], list[CandidateItem]]:
        """Split ranked candidates into capped movie and series lists in one pass."""
        limit = self.list_limit
        movies: list[CandidateItem] = []
        series: list[CandidateItem] = []
        for scored in ranked:
            item = scored.item
            if item.is_movie and len(movies) < limit:
                movies.append(item)
            elif item.is_series and len(series) < limit:
                series.append(item)
            if len(movies) >= limit and len(series) >= limit:
                break
        return movies, series

    def select(
        self, candidates: Iterable[CandidateItem], profile: InterestProfile, now: datetime
    ) -> RecommendationResult:
        """
        Build the result lists for one user.

        ``combined`` is the top of the ranking regardless of type and may
        repeat items that also appear in ``movies`` or ``series``.
        """
        ranked = self.rank_candidates(candidates, profile, now)
        movies, series = self.partition(ranked)
        combined = [scored.item for scored in ranked[: self.list_limit]]

        logger.debug(
            f"Ranked {len(ranked)} candidates: {len(movies)} movies, {len(series)} series, {len(combined)} combined"
        )
        return RecommendationResult(generated_at=now, movies=movies, series=series, combined=combined)
