"""In-memory entity store with one id-keyed table per entity type."""

import logging
import threading
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from travelmate.models import (
    Activity,
    Deal,
    Flight,
    Hotel,
    SavedTrip,
    Trip,
    User,
    UserPreferences,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityTable(Generic[T]):
    """Id -> record map with its own monotonic id counter.

    Ids start at 1 and are never reused, even after a delete. Records are
    kept in insertion order.
    """

    def __init__(self, model: type[T]):
        self._model = model
        self._rows: dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._rows)

    def get(self, id: int) -> T | None:
        return self._rows.get(id)

    def all(self) -> list[T]:
        with self._lock:
            return list(self._rows.values())

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        return [row for row in self.all() if predicate(row)]

    def add(self, **fields: Any) -> T:
        """Assign the next id, build the record and store it."""
        with self._lock:
            id = self._next_id
            self._next_id += 1
            record = self._model(id=id, **fields)
            self._rows[id] = record
        return record

    def update(self, id: int, changes: Mapping[str, Any]) -> T | None:
        """Shallow merge: keys present in ``changes`` replace the stored values."""
        with self._lock:
            current = self._rows.get(id)
            if current is None:
                return None
            merged = {**current.model_dump(), **changes, "id": id}
            updated = self._model.model_validate(merged)
            self._rows[id] = updated
        return updated

    def delete(self, id: int) -> bool:
        with self._lock:
            return self._rows.pop(id, None) is not None


class MemStorage:
    """Process-wide store holding every entity table."""

    def __init__(self):
        self.users: EntityTable[User] = EntityTable(User)
        self.trips: EntityTable[Trip] = EntityTable(Trip)
        self.flights: EntityTable[Flight] = EntityTable(Flight)
        self.hotels: EntityTable[Hotel] = EntityTable(Hotel)
        self.activities: EntityTable[Activity] = EntityTable(Activity)
        self.deals: EntityTable[Deal] = EntityTable(Deal)
        self.saved_trips: EntityTable[SavedTrip] = EntityTable(SavedTrip)
        # email uniqueness spans a lookup and an insert
        self._users_lock = threading.Lock()

    # ── Users ──

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def get_user_by_email(self, email: str) -> User | None:
        return next((u for u in self.users.all() if u.email == email), None)

    def create_user(self, **fields: Any) -> User:
        """Create a user. Raises ValueError if the email is already registered."""
        with self._users_lock:
            if self.get_user_by_email(fields["email"]) is not None:
                raise ValueError(f"Email already registered: {fields['email']}")
            user = self.users.add(**fields)
        logger.info(f"Created user {user.id} ({user.email})")
        return user

    def update_user_preferences(self, user_id: int, preferences: UserPreferences) -> User | None:
        """Replace the user's preferences as a whole."""
        return self.users.update(user_id, {"preferences": preferences.model_dump()})

    # ── Trips ──

    def get_trip(self, trip_id: int) -> Trip | None:
        return self.trips.get(trip_id)

    def get_user_trips(self, user_id: int) -> list[Trip]:
        return self.trips.filter(lambda t: t.user_id == user_id)

    def create_trip(self, **fields: Any) -> Trip:
        trip = self.trips.add(**fields, created_at=_utcnow())
        logger.info(f"Created trip {trip.id} for user {trip.user_id}")
        return trip

    def update_trip(self, trip_id: int, changes: Mapping[str, Any]) -> Trip | None:
        # created_at is stamped by the store, never by callers
        changes = {k: v for k, v in changes.items() if k != "created_at"}
        return self.trips.update(trip_id, changes)

    def delete_trip(self, trip_id: int) -> bool:
        deleted = self.trips.delete(trip_id)
        if deleted:
            logger.info(f"Deleted trip {trip_id}")
        return deleted

    # ── Catalog ──

    def get_flight(self, flight_id: int) -> Flight | None:
        return self.flights.get(flight_id)

    def create_flight(self, **fields: Any) -> Flight:
        return self.flights.add(**fields)

    def get_hotel(self, hotel_id: int) -> Hotel | None:
        return self.hotels.get(hotel_id)

    def create_hotel(self, **fields: Any) -> Hotel:
        return self.hotels.add(**fields)

    def get_activity(self, activity_id: int) -> Activity | None:
        return self.activities.get(activity_id)

    def create_activity(self, **fields: Any) -> Activity:
        return self.activities.add(**fields)

    def get_deal(self, deal_id: int) -> Deal | None:
        return self.deals.get(deal_id)

    def create_deal(self, **fields: Any) -> Deal:
        return self.deals.add(**fields)

    # ── Saved trips ──

    def get_saved_trips(self, user_id: int) -> list[SavedTrip]:
        return self.saved_trips.filter(lambda s: s.user_id == user_id)

    def create_saved_trip(self, **fields: Any) -> SavedTrip:
        saved = self.saved_trips.add(**fields, created_at=_utcnow())
        logger.info(f"Created saved trip {saved.id} for user {saved.user_id}")
        return saved

    def delete_saved_trip(self, saved_trip_id: int) -> bool:
        deleted = self.saved_trips.delete(saved_trip_id)
        if deleted:
            logger.info(f"Deleted saved trip {saved_trip_id}")
        return deleted
