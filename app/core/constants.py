"""
Core constants used across the application. Keep these simple and documented.
"""

from typing import Final

SECONDS_PER_DAY: Final[float] = 24 * 60 * 60

# Favorites count a little more than an ordinary play
FAVORITE_MULTIPLIER: Final[float] = 1.2

# Profile accumulation: share of an item's weight credited to each feature type
PROFILE_WEIGHT_GENRE: Final[float] = 1.0
PROFILE_WEIGHT_PERSON: Final[float] = 0.6
PROFILE_WEIGHT_STUDIO: Final[float] = 0.4

# Candidate scoring: how much each matched feature type contributes
SCORE_WEIGHT_GENRE: Final[float] = 0.5
SCORE_WEIGHT_PERSON: Final[float] = 0.3
SCORE_WEIGHT_STUDIO: Final[float] = 0.1
SCORE_WEIGHT_TRENDING: Final[float] = 0.4

MOVIE_TYPE: Final[str] = "movie"
SERIES_TYPE: Final[str] = "series"

RAIL_COMBINED_ID: Final[str] = "client-recs-combined"
RAIL_MOVIES_ID: Final[str] = "client-recs-movies"
RAIL_SERIES_ID: Final[str] = "client-recs-series"
RAIL_COMBINED_TITLE: Final[str] = "Recommended"
RAIL_MOVIES_TITLE: Final[str] = "Recommended Movies"
RAIL_SERIES_TITLE: Final[str] = "Recommended TV"
