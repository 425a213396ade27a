from pydantic import AliasChoices, BaseModel, Field

from app.schemas.base import CamelModel


class UserCreate(BaseModel):
    phone_number: str | None = Field(
        default=None,
        validation_alias=AliasChoices("phone_number", "phoneNumber"),
    )
    name: str | None = None


class UserResponse(CamelModel):
    id: int
    phone_number: str
    name: str | None = None
    created_at: str
    updated_at: str
