"""Trip recommendations."""

import logging

from travelmate.config import settings
from travelmate.models import Trip
from travelmate.services.storage import MemStorage

logger = logging.getLogger(__name__)


class RecommendationService:
    """Suggests trips planned by other travellers.

    There is no scoring yet: trips come back in store order, the user's own
    trips excluded, capped at ``limit``.
    """

    def __init__(self, limit: int = 6):
        self.limit = limit

    def get_recommendations(self, store: MemStorage, user_id: int, limit: int | None = None) -> list[Trip]:
        if store.get_user(user_id) is None:
            logger.debug(f"Recommendations requested for unknown user {user_id}")
            return []

        cap = self.limit if limit is None else limit
        others = store.trips.filter(lambda t: t.user_id != user_id)
        return others[:cap]


recommendation_service = RecommendationService(limit=settings.recommendation_limit)
