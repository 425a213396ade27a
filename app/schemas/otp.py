from app.schemas.base import CamelModel


class OtpRequest(CamelModel):
    phone_number: str | None = None
    action: str = "generate"
    otp_code: str | int | None = None
