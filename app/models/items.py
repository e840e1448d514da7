from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from app.core.constants import MOVIE_TYPE, SERIES_TYPE
from app.utils.timestamps import parse_timestamp

_SERIES_ALIASES = {"series", "show", "tv"}


class WatchData(BaseModel):
    """Per-user watch state of an item (Jellyfin ``UserData``)."""

    model_config = ConfigDict(extra="ignore")

    last_played: datetime | None = Field(
        default=None, validation_alias=AliasChoices("last_played", "LastPlayedDate")
    )
    play_count: int = Field(default=1, validation_alias=AliasChoices("play_count", "PlayCount"))
    is_favorite: bool = Field(default=False, validation_alias=AliasChoices("is_favorite", "IsFavorite"))

    @field_validator("last_played", mode="before")
    @classmethod
    def _parse_last_played(cls, value: Any) -> datetime | None:
        return parse_timestamp(value)

    @field_validator("play_count", mode="before")
    @classmethod
    def _coerce_play_count(cls, value: Any) -> int:
        if value is None or isinstance(value, bool):
            return 1
        try:
            count = int(value)
        except (TypeError, ValueError, OverflowError):
            return 1
        return count if count >= 0 else 1

    @field_validator("is_favorite", mode="before")
    @classmethod
    def _coerce_favorite(cls, value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return bool(value)


def _names(values: Any) -> list[str]:
    """Flatten ``[{"Name": ...}]`` or ``["..."]`` into a list of non-blank names."""
    if not isinstance(values, (list, tuple)):
        return []
    names = []
    for value in values:
        if isinstance(value, dict):
            value = value.get("Name") or value.get("name")
        if isinstance(value, str) and value.strip():
            names.append(value)
    return names


class MediaItem(BaseModel):
    """
    Library item as seen by the recommender.

    Validates either a raw Jellyfin ``BaseItemDto`` or a previously dumped
    item, defaulting every field the scorer reads.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(validation_alias=AliasChoices("id", "Id"), min_length=1)
    name: str = Field(default="", validation_alias=AliasChoices("name", "Name"))
    type: str = Field(default="", validation_alias=AliasChoices("type", "Type"))
    genres: list[str] = Field(default_factory=list, validation_alias=AliasChoices("genres", "Genres"))
    people: list[str] = Field(default_factory=list, validation_alias=AliasChoices("people", "People"))
    studios: list[str] = Field(default_factory=list, validation_alias=AliasChoices("studios", "Studios"))
    production_year: int | None = Field(
        default=None, validation_alias=AliasChoices("production_year", "ProductionYear")
    )
    provider_ids: dict[str, str] = Field(
        default_factory=dict, validation_alias=AliasChoices("provider_ids", "ProviderIds")
    )
    user_data: WatchData = Field(default_factory=WatchData, validation_alias=AliasChoices("user_data", "UserData"))

    @field_validator("name", mode="before")
    @classmethod
    def _default_name(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: Any) -> str:
        if not isinstance(value, str):
            return ""
        lowered = value.strip().lower()
        if lowered in _SERIES_ALIASES:
            return SERIES_TYPE
        return lowered

    @field_validator("genres", "people", "studios", mode="before")
    @classmethod
    def _flatten_names(cls, value: Any) -> list[str]:
        return _names(value)

    @field_validator("production_year", mode="before")
    @classmethod
    def _coerce_year(cls, value: Any) -> int | None:
        try:
            return int(value) if value is not None else None
        except (TypeError, ValueError, OverflowError):
            return None

    @field_validator("provider_ids", mode="before")
    @classmethod
    def _coerce_provider_ids(cls, value: Any) -> dict[str, str]:
        if not isinstance(value, dict):
            return {}
        return {str(k): str(v) for k, v in value.items() if v is not None}

    @field_validator("user_data", mode="before")
    @classmethod
    def _default_user_data(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, WatchData)) else {}

    @property
    def is_movie(self) -> bool:
        return self.type == MOVIE_TYPE

    @property
    def is_series(self) -> bool:
        return self.type == SERIES_TYPE

    @property
    def last_played(self) -> datetime | None:
        return self.user_data.last_played


class PlayedItem(MediaItem):
    """An item from the user's watch history."""


class CandidateItem(MediaItem):
    """An item that may be recommended; carries ``last_played`` only when seen before."""
