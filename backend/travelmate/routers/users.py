from fastapi import APIRouter, Depends, HTTPException

from travelmate.dependencies import get_store
from travelmate.models import User
from travelmate.schemas.user import CreateUserRequest, UpdatePreferencesRequest
from travelmate.services.storage import MemStorage

router = APIRouter()


@router.post("", status_code=201, response_model=User)
async def create_user(
    req: CreateUserRequest,
    store: MemStorage = Depends(get_store),
):
    try:
        return store.create_user(**req.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: int, store: MemStorage = Depends(get_store)):
    user = store.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.put("/{user_id}/preferences", response_model=User)
async def update_preferences(
    user_id: int,
    req: UpdatePreferencesRequest,
    store: MemStorage = Depends(get_store),
):
    """Replace the user's travel preferences. Omitted keys fall back to defaults."""
    user = store.update_user_preferences(user_id, req.preferences)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
