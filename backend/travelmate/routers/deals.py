from fastapi import APIRouter, Depends, HTTPException, Query

from travelmate.dependencies import get_store
from travelmate.models import Deal
from travelmate.services.search_service import search_service
from travelmate.services.storage import MemStorage

router = APIRouter()


@router.get("", response_model=list[Deal])
async def list_deals(
    deal_type: str | None = Query(None, alias="type"),
    store: MemStorage = Depends(get_store),
):
    """List current deals, optionally for one type (flights, hotels, activities, packages)."""
    return search_service.list_deals(store, deal_type)


@router.get("/{deal_id}", response_model=Deal)
async def get_deal(deal_id: int, store: MemStorage = Depends(get_store)):
    deal = store.get_deal(deal_id)
    if not deal:
        raise HTTPException(status_code=404, detail="Deal not found")
    return deal
