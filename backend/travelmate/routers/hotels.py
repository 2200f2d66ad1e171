from fastapi import APIRouter, Depends, HTTPException

from travelmate.dependencies import get_store
from travelmate.models import Hotel
from travelmate.schemas.search import HotelSearch
from travelmate.services.search_service import search_service
from travelmate.services.storage import MemStorage

router = APIRouter()


@router.post("/search", response_model=list[Hotel])
async def search_hotels(req: HotelSearch, store: MemStorage = Depends(get_store)):
    """Search hotels by destination."""
    return search_service.search_hotels(store, req)


@router.get("/{hotel_id}", response_model=Hotel)
async def get_hotel(hotel_id: int, store: MemStorage = Depends(get_store)):
    hotel = store.get_hotel(hotel_id)
    if not hotel:
        raise HTTPException(status_code=404, detail="Hotel not found")
    return hotel
