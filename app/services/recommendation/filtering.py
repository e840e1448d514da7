from datetime import datetime

from app.models.items import CandidateItem
from app.utils.timestamps import age_in_days


class RecommendationFiltering:
    """
    Decides which candidates are eligible to be scored at all.
    """

    @staticmethod
    def is_resurfaceable(item: CandidateItem, now: datetime, resurface_after_days: float) -> bool:
        """
        Never-played items are always eligible. Played items are eligible only
        once their last play is strictly older than ``resurface_after_days``.
        """
        last_played = item.last_played
        if last_played is None:
            return True
        return age_in_days(last_played, now) > resurface_after_days
