from pydantic import BaseModel, EmailStr, Field

from travelmate.models import UserPreferences


class CreateUserRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    preferences: UserPreferences | None = None


class UpdatePreferencesRequest(BaseModel):
    preferences: UserPreferences
