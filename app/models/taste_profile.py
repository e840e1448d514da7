from typing import Literal

from pydantic import BaseModel, Field

ProfileBucket = Literal["genres", "people", "studios"]


class InterestProfile(BaseModel):
    """
    Transparent, additive interest profile.

    Answers one question: "How much has this user watched things like this?"

    All weights are additive accumulations of decayed play weights.
    No normalization and no caps; absent keys mean zero.
    """

    genres: dict[str, float] = Field(default_factory=dict, description="Genre name → accumulated weight")
    people: dict[str, float] = Field(default_factory=dict, description="Person name → accumulated weight")
    studios: dict[str, float] = Field(default_factory=dict, description="Studio name → accumulated weight")

    def add(self, bucket: ProfileBucket, key: str, weight: float) -> None:
        if not key:
            return
        scores = getattr(self, bucket)
        scores[key] = scores.get(key, 0.0) + weight

    def weight_for(self, bucket: ProfileBucket, key: str) -> float:
        return getattr(self, bucket).get(key, 0.0)

    def is_empty(self) -> bool:
        return not (self.genres or self.people or self.studios)

    def get_top_genres(self, limit: int = 5) -> list[tuple[str, float]]:
        """Get top N genres by weight."""
        return sorted(self.genres.items(), key=lambda x: x[1], reverse=True)[:limit]

    def get_top_people(self, limit: int = 5) -> list[tuple[str, float]]:
        """Get top N people by weight."""
        return sorted(self.people.items(), key=lambda x: x[1], reverse=True)[:limit]

    def get_top_studios(self, limit: int = 3) -> list[tuple[str, float]]:
        """Get top N studios by weight."""
        return sorted(self.studios.items(), key=lambda x: x[1], reverse=True)[:limit]
