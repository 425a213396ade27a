from app.schemas.base import CamelModel


class EmployeeCreate(CamelModel):
    phone_number: str | None = None
    name: str | None = None
    specialization: str | None = None


class EmployeeUpdate(CamelModel):
    name: str | None = None
    email: str | None = None
    specialization: str | None = None
    status: str | None = None


class EmployeeResponse(CamelModel):
    id: int
    phone_number: str
    name: str
    email: str | None = None
    specialization: str
    status: str
    created_at: str
    updated_at: str
