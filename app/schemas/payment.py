from app.schemas.base import CamelModel


class PaymentRequest(CamelModel):
    booking_id: int | str | None = None
    amount: float | None = None
    card_number: str | None = None
    expiry_date: str | None = None
    cvv: str | None = None
