from collections.abc import Callable, Iterable
from datetime import datetime

from loguru import logger

from app.core.constants import PROFILE_WEIGHT_GENRE, PROFILE_WEIGHT_PERSON, PROFILE_WEIGHT_STUDIO
from app.models.items import PlayedItem
from app.models.taste_profile import InterestProfile
from app.services.profile.evidence import EvidenceCalculator
from app.utils.timestamps import utc_now


class ProfileBuilder:
    """
    Builds an interest profile using additive accumulation.

    Design principles:
    - Pure accumulation: score += weight
    - Same evidence weight for all metadata of an item, scaled per feature type
    - No normalization, no caps
    - Order independent
    """

    def __init__(self, half_life_days: float = 180.0, clock: Callable[[], datetime] = utc_now):
        """
        Initialize profile builder.

        Args:
            half_life_days: Days for a play's contribution to halve
            clock: Source of the reference time
        """
        self.evidence_calculator = EvidenceCalculator(half_life_days)
        self.clock = clock

    def build_profile(self, played_items: Iterable[PlayedItem], now: datetime | None = None) -> InterestProfile:
        """
        Build interest profile from played items.

        Args:
            played_items: Watch history, in any order
            now: Reference time; defaults to the builder's clock

        Returns:
            Built InterestProfile
        """
        now = now or self.clock()
        profile = InterestProfile()

        count = 0
        for item in played_items:
            weight = self.evidence_calculator.calculate_evidence_weight(item.user_data, now)
            self._accumulate_features(profile, item, weight)
            count += 1

        logger.debug(
            f"Built profile from {count} played items: "
            f"{len(profile.genres)} genres, {len(profile.people)} people, {len(profile.studios)} studios; "
            f"top genres {profile.get_top_genres(3)}, top people {profile.get_top_people(3)}, "
            f"top studios {profile.get_top_studios(2)}"
        )
        return profile

    @staticmethod
    def _accumulate_features(profile: InterestProfile, item: PlayedItem, weight: float) -> None:
        for genre in item.genres:
            profile.add("genres", genre, PROFILE_WEIGHT_GENRE * weight)

        for person in item.people:
            profile.add("people", person, PROFILE_WEIGHT_PERSON * weight)

        for studio in item.studios:
            profile.add("studios", studio, PROFILE_WEIGHT_STUDIO * weight)
