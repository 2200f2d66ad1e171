from travelmate.models.user import User, UserPreferences
from travelmate.models.trip import SavedTrip, Trip, TripDetails, TripStatus
from travelmate.models.catalog import Activity, CabinClass, Deal, DealType, Flight, Hotel

__all__ = [
    "Activity",
    "CabinClass",
    "Deal",
    "DealType",
    "Flight",
    "Hotel",
    "SavedTrip",
    "Trip",
    "TripDetails",
    "TripStatus",
    "User",
    "UserPreferences",
]
