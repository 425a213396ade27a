from app.schemas.base import CamelModel


class UserSessionPayload(CamelModel):
    user_id: int
    phone_number: str
    name: str | None = None


class EmployeeSessionPayload(CamelModel):
    employee_id: int
    phone_number: str
    name: str | None = None
