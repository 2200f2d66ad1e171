"""Catalog search: flights, hotels and activities by substring, deals by type."""

import logging

from travelmate.config import settings
from travelmate.models import Activity, Deal, Flight, Hotel
from travelmate.schemas.search import ActivitySearch, FlightSearch, HotelSearch
from travelmate.services.storage import MemStorage

logger = logging.getLogger(__name__)

ALL_DEALS = "all"


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


class SearchService:
    """Case-insensitive substring matching over the in-memory catalog."""

    def __init__(self, require_both_cities: bool = False):
        self.require_both_cities = require_both_cities

    def search_flights(self, store: MemStorage, search: FlightSearch) -> list[Flight]:
        """Flights whose origin matches ``from`` or whose destination matches ``to``.

        With ``require_both_cities`` set, both must match.
        """
        def matches(flight: Flight) -> bool:
            from_ok = _contains(flight.from_city, search.from_city)
            to_ok = _contains(flight.to_city, search.to_city)
            if self.require_both_cities:
                return from_ok and to_ok
            return from_ok or to_ok

        results = store.flights.filter(matches)
        logger.debug(f"Flight search {search.from_city!r} -> {search.to_city!r}: {len(results)} results")
        return results

    def search_hotels(self, store: MemStorage, search: HotelSearch) -> list[Hotel]:
        results = store.hotels.filter(lambda h: _contains(h.location, search.destination))
        logger.debug(f"Hotel search {search.destination!r}: {len(results)} results")
        return results

    def search_activities(self, store: MemStorage, search: ActivitySearch) -> list[Activity]:
        # price_range is part of the search form but does not narrow results
        results = store.activities.filter(
            lambda a: _contains(a.location, search.destination)
            and (not search.type or _contains(a.type, search.type))
        )
        logger.debug(f"Activity search {search.destination!r} type={search.type!r}: {len(results)} results")
        return results

    def list_deals(self, store: MemStorage, deal_type: str | None = None) -> list[Deal]:
        """All deals, or only those of ``deal_type`` unless it is empty or "all"."""
        if deal_type and deal_type != ALL_DEALS:
            return store.deals.filter(lambda d: d.type == deal_type)
        return store.deals.all()


search_service = SearchService(require_both_cities=settings.flight_search_require_both_cities)
