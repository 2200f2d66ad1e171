from pydantic import AliasChoices, BaseModel, Field


class UserPreferences(BaseModel):
    budget: str | None = None
    # the preferences form sends this list as "travelStyle"
    style: list[str] = Field([], validation_alias=AliasChoices("style", "travelStyle"))
    destinations: list[str] = []
    accommodation: str | None = None
    alerts: list[str] = []

    model_config = {"extra": "forbid"}


class User(BaseModel):
    id: int
    name: str
    email: str
    preferences: UserPreferences | None = None
