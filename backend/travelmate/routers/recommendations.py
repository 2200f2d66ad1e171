from fastapi import APIRouter, Depends

from travelmate.dependencies import get_store
from travelmate.models import Trip
from travelmate.services.recommendation_service import recommendation_service
from travelmate.services.storage import MemStorage

router = APIRouter()


@router.get("/user/{user_id}", response_model=list[Trip])
async def get_recommendations(user_id: int, store: MemStorage = Depends(get_store)):
    """Trips from other travellers the user might like."""
    return recommendation_service.get_recommendations(store, user_id)
