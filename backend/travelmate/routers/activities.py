from fastapi import APIRouter, Depends, HTTPException

from travelmate.dependencies import get_store
from travelmate.models import Activity
from travelmate.schemas.search import ActivitySearch
from travelmate.services.search_service import search_service
from travelmate.services.storage import MemStorage

router = APIRouter()


@router.post("/search", response_model=list[Activity])
async def search_activities(req: ActivitySearch, store: MemStorage = Depends(get_store)):
    """Search activities by destination, optionally narrowed by activity type."""
    return search_service.search_activities(store, req)


@router.get("/{activity_id}", response_model=Activity)
async def get_activity(activity_id: int, store: MemStorage = Depends(get_store)):
    activity = store.get_activity(activity_id)
    if not activity:
        raise HTTPException(status_code=404, detail="Activity not found")
    return activity
