from pydantic import BaseModel, Field

from travelmate.models import CabinClass


class FlightSearch(BaseModel):
    from_city: str = Field(..., alias="from", min_length=1)
    to_city: str = Field(..., alias="to", min_length=1)
    departure_date: str = Field(..., min_length=1)
    return_date: str | None = None
    passengers: int = Field(1, ge=1)
    flight_class: CabinClass = Field("economy", alias="class")

    model_config = {"populate_by_name": True}


class HotelSearch(BaseModel):
    destination: str = Field(..., min_length=1)
    check_in: str = Field(..., min_length=1)
    check_out: str = Field(..., min_length=1)
    guests: int = Field(1, ge=1)
    rooms: int = Field(1, ge=1)


class PriceRange(BaseModel):
    min: float | None = None
    max: float | None = None


class ActivitySearch(BaseModel):
    destination: str = Field(..., min_length=1)
    type: str | None = None
    price_range: PriceRange | None = None
