from decimal import Decimal

from pydantic import BaseModel, field_validator

from travelmate.models import TripDetails, TripStatus


class CreateTripRequest(BaseModel):
    user_id: int
    name: str
    destination: str
    start_date: str | None = None
    end_date: str | None = None
    status: TripStatus
    total_price: Decimal | None = None
    details: TripDetails | None = None


class UpdateTripRequest(BaseModel):
    """Partial trip update. Only the keys present in the body are applied."""

    user_id: int | None = None
    name: str | None = None
    destination: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    status: TripStatus | None = None
    total_price: Decimal | None = None
    details: TripDetails | None = None

    @field_validator("user_id", "name", "destination", "status")
    @classmethod
    def _required_fields_not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


class CreateSavedTripRequest(BaseModel):
    user_id: int
    trip_id: int | None = None
    flight_id: int | None = None
    hotel_id: int | None = None
    activity_ids: list[int] = []
    custom_name: str | None = None
    notes: str | None = None
