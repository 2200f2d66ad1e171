import logging

from fastapi import APIRouter, Depends, HTTPException

from travelmate.dependencies import get_store
from travelmate.models import Trip
from travelmate.schemas.trip import CreateTripRequest, UpdateTripRequest
from travelmate.services.storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/user/{user_id}", response_model=list[Trip])
async def list_user_trips(user_id: int, store: MemStorage = Depends(get_store)):
    """List a user's trips. Unknown users simply have none."""
    return store.get_user_trips(user_id)


@router.post("", status_code=201, response_model=Trip)
async def create_trip(req: CreateTripRequest, store: MemStorage = Depends(get_store)):
    return store.create_trip(**req.model_dump())


@router.get("/{trip_id}", response_model=Trip)
async def get_trip(trip_id: int, store: MemStorage = Depends(get_store)):
    trip = store.get_trip(trip_id)
    if not trip:
        raise HTTPException(status_code=404, detail="Trip not found")
    return trip


@router.put("/{trip_id}", response_model=Trip)
async def update_trip(
    trip_id: int,
    req: UpdateTripRequest,
    store: MemStorage = Depends(get_store),
):
    """Apply the fields present in the body; everything else is left as is."""
    changes = req.model_dump(exclude_unset=True)
    trip = store.update_trip(trip_id, changes)
    if not trip:
        raise HTTPException(status_code=404, detail="Trip not found")
    logger.info(f"Updated trip {trip_id}: {sorted(changes)}")
    return trip


@router.delete("/{trip_id}", status_code=204)
async def delete_trip(trip_id: int, store: MemStorage = Depends(get_store)):
    if not store.delete_trip(trip_id):
        raise HTTPException(status_code=404, detail="Trip not found")
