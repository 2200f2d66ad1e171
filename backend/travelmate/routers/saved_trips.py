from fastapi import APIRouter, Depends, HTTPException

from travelmate.dependencies import get_store
from travelmate.models import SavedTrip
from travelmate.schemas.trip import CreateSavedTripRequest
from travelmate.services.storage import MemStorage

router = APIRouter()


@router.get("/user/{user_id}", response_model=list[SavedTrip])
async def list_saved_trips(user_id: int, store: MemStorage = Depends(get_store)):
    return store.get_saved_trips(user_id)


@router.post("", status_code=201, response_model=SavedTrip)
async def create_saved_trip(req: CreateSavedTripRequest, store: MemStorage = Depends(get_store)):
    """Bookmark a trip, flight, hotel or set of activities under a custom name."""
    return store.create_saved_trip(**req.model_dump())


@router.delete("/{saved_trip_id}", status_code=204)
async def delete_saved_trip(saved_trip_id: int, store: MemStorage = Depends(get_store)):
    if not store.delete_saved_trip(saved_trip_id):
        raise HTTPException(status_code=404, detail="Saved trip not found")
