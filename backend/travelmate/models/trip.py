from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel

TripStatus = Literal["upcoming", "completed", "saved"]


class TripDetails(BaseModel):
    """Ids of the catalog items booked as part of a trip."""

    flights: list[int] = []
    hotels: list[int] = []
    activities: list[int] = []


class Trip(BaseModel):
    id: int
    user_id: int
    name: str
    destination: str
    start_date: str | None = None
    end_date: str | None = None
    status: TripStatus
    total_price: Decimal | None = None
    details: TripDetails | None = None
    created_at: datetime


class SavedTrip(BaseModel):
    id: int
    user_id: int
    trip_id: int | None = None
    flight_id: int | None = None
    hotel_id: int | None = None
    activity_ids: list[int] = []
    custom_name: str | None = None
    notes: str | None = None
    created_at: datetime
