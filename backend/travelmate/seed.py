"""Sample data loaded into a fresh store at startup."""

import logging
from datetime import datetime, timezone
from decimal import Decimal

from travelmate.services.storage import MemStorage

logger = logging.getLogger(__name__)

_HOTEL_IMAGE = "https://images.unsplash.com/photo-1611892440504-42a792e24d32"
_TOUR_IMAGE = "https://images.unsplash.com/photo-1552832230-c0197dd311b5"

# ── Users ──────────────────────────────────────────────────────────────────────

USERS = [
    {
        "name": "John Doe",
        "email": "john@example.com",
        "preferences": {
            "budget": "$1,000 - $2,500",
            "style": ["Adventure & Outdoor", "Beach & Relaxation"],
            "destinations": ["Europe", "Asia"],
            "accommodation": "Mid-range (3★ Hotels, B&Bs)",
        },
    },
]

# ── Catalog ────────────────────────────────────────────────────────────────────

FLIGHTS = [
    {
        "from_city": "New York",
        "to_city": "Paris",
        "departure_date": "2024-12-15",
        "return_date": "2024-12-22",
        "price": Decimal("599.00"),
        "original_price": Decimal("899.00"),
        "airline": "Delta Airlines",
        "passengers": 1,
        "flight_class": "economy",
        "discount": 30,
    },
    {
        "from_city": "Los Angeles",
        "to_city": "Tokyo",
        "departure_date": "2024-12-20",
        "return_date": "2024-12-27",
        "price": Decimal("799.00"),
        "original_price": Decimal("1099.00"),
        "airline": "JAL",
        "passengers": 1,
        "flight_class": "economy",
        "discount": 25,
    },
]

HOTELS = [
    {
        "name": "Grand Hotel Rome",
        "location": "Rome, Italy",
        "check_in": "2024-12-15",
        "check_out": "2024-12-22",
        "price": Decimal("199.00"),
        "rating": Decimal("5.0"),
        "amenities": ["WiFi", "Pool", "Spa", "Restaurant"],
        "image_url": _HOTEL_IMAGE,
        "guests": 2,
        "rooms": 1,
    },
    {
        "name": "Tokyo Palace Hotel",
        "location": "Tokyo, Japan",
        "check_in": "2024-12-20",
        "check_out": "2024-12-27",
        "price": Decimal("159.00"),
        "rating": Decimal("4.8"),
        "amenities": ["WiFi", "Gym", "Restaurant", "Concierge"],
        "image_url": _HOTEL_IMAGE,
        "guests": 2,
        "rooms": 1,
    },
]

ACTIVITIES = [
    {
        "name": "Historic Rome Walking Tour",
        "location": "Rome, Italy",
        "price": Decimal("89.00"),
        "duration": "Full day",
        "type": "Cultural",
        "rating": Decimal("4.9"),
        "description": "Explore ancient Rome with an expert guide",
        "image_url": _TOUR_IMAGE,
    },
    {
        "name": "Mount Fuji Day Trip",
        "location": "Tokyo, Japan",
        "price": Decimal("120.00"),
        "duration": "Full day",
        "type": "Adventure",
        "rating": Decimal("4.7"),
        "description": "Experience Japan's iconic mountain",
        "image_url": "https://images.unsplash.com/photo-1578662996442-48f60103fc96",
    },
]

DEALS = [
    {
        "type": "flights",
        "title": "NYC → Paris",
        "description": "Round trip • Delta Airlines",
        "original_price": Decimal("899.00"),
        "current_price": Decimal("599.00"),
        "discount": 30,
        "badge": "30% OFF",
        "image_url": "https://images.unsplash.com/photo-1436491865332-7a61a109cc05",
        "valid_until": datetime(2024, 12, 31, tzinfo=timezone.utc),
    },
    {
        "type": "hotels",
        "title": "Grand Hotel Rome",
        "description": "5★ • City Center",
        "original_price": Decimal("299.00"),
        "current_price": Decimal("199.00"),
        "discount": 33,
        "badge": "LIMITED",
        "image_url": _HOTEL_IMAGE,
        "valid_until": datetime(2024, 12, 25, tzinfo=timezone.utc),
    },
    {
        "type": "activities",
        "title": "Historic City Tour",
        "description": "Full day • Guide included",
        "original_price": Decimal("129.00"),
        "current_price": Decimal("89.00"),
        "discount": 31,
        "badge": "POPULAR",
        "image_url": _TOUR_IMAGE,
        "valid_until": datetime(2024, 12, 30, tzinfo=timezone.utc),
    },
    {
        "type": "packages",
        "title": "Maldives Package",
        "description": "7 days • All inclusive",
        "original_price": Decimal("3299.00"),
        "current_price": Decimal("2299.00"),
        "discount": 30,
        "badge": "FLASH SALE",
        "image_url": "https://images.unsplash.com/photo-1506905925346-21bda4d32df4",
        "valid_until": datetime(2024, 12, 20, tzinfo=timezone.utc),
    },
]

# ── Trips (all owned by the sample user) ───────────────────────────────────────

TRIPS = [
    {
        "user_id": 1,
        "name": "Swiss Alps Adventure",
        "destination": "Zurich, Switzerland",
        "start_date": "2024-12-15",
        "end_date": "2024-12-22",
        "status": "upcoming",
        "total_price": Decimal("1299.00"),
        "details": {"flights": [1], "hotels": [1], "activities": [1]},
    },
    {
        "user_id": 1,
        "name": "Thailand Explorer",
        "destination": "Bangkok, Chiang Mai",
        "start_date": "2024-09-05",
        "end_date": "2024-09-18",
        "status": "completed",
        "total_price": Decimal("1599.00"),
        "details": {"flights": [2], "hotels": [2], "activities": [2]},
    },
    {
        "user_id": 1,
        "name": "Greek Islands Getaway",
        "destination": "Santorini, Mykonos",
        "start_date": None,
        "end_date": None,
        "status": "saved",
        "total_price": Decimal("1799.00"),
        "details": {"flights": [], "hotels": [], "activities": []},
    },
]


def seed(store: MemStorage) -> None:
    """Populate an empty store. Ids follow list order starting at 1."""
    if len(store.users):
        logger.info("Store already seeded. Skipping.")
        return

    for u in USERS:
        store.create_user(**u)
    for f in FLIGHTS:
        store.create_flight(**f)
    for h in HOTELS:
        store.create_hotel(**h)
    for a in ACTIVITIES:
        store.create_activity(**a)
    for d in DEALS:
        store.create_deal(**d)
    for t in TRIPS:
        store.create_trip(**t)

    logger.info(
        f"Seeded {len(USERS)} users, {len(FLIGHTS)} flights, {len(HOTELS)} hotels, "
        f"{len(ACTIVITIES)} activities, {len(DEALS)} deals, {len(TRIPS)} trips"
    )
