from app.schemas.base import CamelModel


class BookingCreate(CamelModel):
    user_id: int | str | None = None
    address_id: int | str | None = None
    service_type: str | None = None
    sub_service: str | None = None
    work_description: str | None = None
    photo_url: str | None = None
    booking_date: str | None = None


class BookingUpdate(CamelModel):
    status: str | None = None
    professional_name: str | None = None
    professional_contact: str | None = None
    completion_date: str | None = None
    service_type: str | None = None
    sub_service: str | None = None
    work_description: str | None = None
    photo_url: str | None = None
    booking_date: str | None = None


class BookingResponse(CamelModel):
    id: int
    user_id: int
    address_id: int
    service_type: str
    sub_service: str | None = None
    work_description: str | None = None
    photo_url: str | None = None
    status: str
    professional_name: str | None = None
    professional_contact: str | None = None
    booking_date: str
    completion_date: str | None = None
    created_at: str


class AssignmentCreate(CamelModel):
    booking_id: int | str | None = None
    employee_id: int | str | None = None


class AssignmentUpdate(CamelModel):
    status: str | None = None


class AssignmentResponse(CamelModel):
    id: int
    booking_id: int
    employee_id: int
    status: str
    assigned_at: str
    updated_at: str
