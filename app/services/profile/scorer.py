from app.core.constants import (
    SCORE_WEIGHT_GENRE,
    SCORE_WEIGHT_PERSON,
    SCORE_WEIGHT_STUDIO,
    SCORE_WEIGHT_TRENDING,
)
from app.models.items import MediaItem
from app.models.taste_profile import InterestProfile


class ProfileScorer:
    """
    Scores items against an interest profile.
    """

    @staticmethod
    def score_item(item: MediaItem, profile: InterestProfile, trending_boost: float = 0.0) -> float:
        """
        Score an item against the profile.

        Sums the profile weight of every genre, person and studio on the item,
        then blends the three sums with fixed feature weights.

        Args:
            item: Candidate item
            profile: InterestProfile to score against
            trending_boost: Reserved popularity signal, 0 until a source exists

        Returns:
            Score (0 = no overlap, higher = better match)
        """
        genre_score = sum(profile.weight_for("genres", genre) for genre in item.genres)
        people_score = sum(profile.weight_for("people", person) for person in item.people)
        studio_score = sum(profile.weight_for("studios", studio) for studio in item.studios)

        return (
            SCORE_WEIGHT_GENRE * genre_score
            + SCORE_WEIGHT_PERSON * people_score
            + SCORE_WEIGHT_STUDIO * studio_score
            + SCORE_WEIGHT_TRENDING * trending_boost
        )
