import math
from datetime import datetime

from app.core.constants import FAVORITE_MULTIPLIER
from app.models.items import WatchData
from app.utils.timestamps import age_in_days


class EvidenceCalculator:
    """
    Calculates how much a single play contributes to the profile.

    Pure function: no side effects, easy to test.
    """

    def __init__(self, half_life_days: float = 180.0):
        self.half_life_days = half_life_days
        self.decay_rate = math.log(2) / half_life_days

    def calculate_recency_multiplier(self, last_played: datetime | None, now: datetime) -> float:
        """
        Exponential decay on days since the last play.

        Args:
            last_played: When the item was last played (None = treat as now)
            now: Reference time

        Returns:
            Multiplier in (0, 1], halving every ``half_life_days``
        """
        return math.exp(-self.decay_rate * age_in_days(last_played, now))

    def calculate_evidence_weight(self, watch: WatchData, now: datetime) -> float:
        """
        Combine play count, recency and favorite flag into one weight.

        Args:
            watch: Watch data of the played item
            now: Reference time

        Returns:
            Non-negative evidence weight
        """
        base_weight = max(1, watch.play_count)
        weight = base_weight * self.calculate_recency_multiplier(watch.last_played, now)
        if watch.is_favorite:
            weight *= FAVORITE_MULTIPLIER
        return weight
