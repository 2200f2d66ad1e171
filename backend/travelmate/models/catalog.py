"""Bookable catalog items: flights, hotels, activities and promotional deals."""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

CabinClass = Literal["economy", "business", "first"]
DealType = Literal["flights", "hotels", "activities", "packages"]


class Flight(BaseModel):
    id: int
    from_city: str
    to_city: str
    departure_date: str
    return_date: str | None = None
    price: Decimal
    original_price: Decimal | None = None
    airline: str
    passengers: int = 1
    # "class" is reserved in Python
    flight_class: CabinClass = Field("economy", alias="class")
    discount: int = 0

    model_config = {"populate_by_name": True}


class Hotel(BaseModel):
    id: int
    name: str
    location: str
    check_in: str
    check_out: str
    price: Decimal
    rating: Decimal
    amenities: list[str] = []
    image_url: str | None = None
    guests: int = 1
    rooms: int = 1


class Activity(BaseModel):
    id: int
    name: str
    location: str
    price: Decimal
    duration: str
    type: str
    rating: Decimal
    description: str | None = None
    image_url: str | None = None


class Deal(BaseModel):
    id: int
    type: DealType
    title: str
    description: str | None = None
    original_price: Decimal
    current_price: Decimal
    discount: int
    badge: str | None = None  # "30% OFF", "LIMITED", "POPULAR", "FLASH SALE"
    image_url: str | None = None
    valid_until: datetime | None = None
