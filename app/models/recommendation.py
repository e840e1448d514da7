from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.models.items import CandidateItem
from app.utils.timestamps import parse_timestamp, utc_now


class ScoredCandidate(BaseModel):
    """A candidate paired with its match score. Recomputed every build, never persisted."""

    item: CandidateItem
    score: float


class RecommendationResult(BaseModel):
    """Ranked recommendation lists for one user; the unit that is cached and returned."""

    generated_at: datetime = Field(default_factory=utc_now)
    movies: list[CandidateItem] = Field(default_factory=list)
    series: list[CandidateItem] = Field(default_factory=list)
    combined: list[CandidateItem] = Field(default_factory=list)

    @field_validator("generated_at", mode="before")
    @classmethod
    def _parse_generated_at(cls, value):
        parsed = parse_timestamp(value)
        if parsed is None:
            raise ValueError(f"Invalid generated_at timestamp: {value!r}")
        return parsed

    @classmethod
    def empty(cls, generated_at: datetime | None = None) -> "RecommendationResult":
        return cls(generated_at=generated_at or utc_now())


class Rail(BaseModel):
    """A titled recommendation row for the home screen."""

    id: str
    title: str
    items: list[CandidateItem]
