from app.schemas.base import CamelModel


class AddressCreate(CamelModel):
    user_id: int | str | None = None
    apartment_building: str | None = None
    street_area: str | None = None
    city: str | None = None
    state: str | None = None
    pincode: str | None = None
    is_default: bool = False


class AddressUpdate(CamelModel):
    apartment_building: str | None = None
    street_area: str | None = None
    city: str | None = None
    state: str | None = None
    pincode: str | None = None
    is_default: bool | None = None


class AddressResponse(CamelModel):
    id: int
    user_id: int
    apartment_building: str | None = None
    street_area: str | None = None
    city: str | None = None
    state: str | None = None
    pincode: str | None = None
    is_default: bool
    created_at: str
