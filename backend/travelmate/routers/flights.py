from fastapi import APIRouter, Depends, HTTPException

from travelmate.dependencies import get_store
from travelmate.models import Flight
from travelmate.schemas.search import FlightSearch
from travelmate.services.search_service import search_service
from travelmate.services.storage import MemStorage

router = APIRouter()


@router.post("/search", response_model=list[Flight])
async def search_flights(req: FlightSearch, store: MemStorage = Depends(get_store)):
    """Search flights by origin/destination city."""
    return search_service.search_flights(store, req)


@router.get("/{flight_id}", response_model=Flight)
async def get_flight(flight_id: int, store: MemStorage = Depends(get_store)):
    flight = store.get_flight(flight_id)
    if not flight:
        raise HTTPException(status_code=404, detail="Flight not found")
    return flight
