import logging
import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.models.booking import Booking
from app.schemas.payment import PaymentRequest
from app.utils.params import is_blank, parse_int
from app.utils.response import bad_request, create_response, handle_exception, not_found

router = APIRouter(prefix="/payments", tags=["Payments"])
logger = logging.getLogger(__name__)


@router.post("")
def mock_payment(body: PaymentRequest, db: Session = Depends(get_db)):
    """Simulated card payment: no gateway is contacted and nothing is stored."""
    try:
        if is_blank(body.booking_id):
            raise bad_request("bookingId is required", "MISSING_BOOKING_ID")
        if is_blank(body.card_number) or is_blank(body.expiry_date) or is_blank(body.cvv):
            raise bad_request("Card number, expiry date and CVV are required", "MISSING_FIELDS")

        booking_id = parse_int(body.booking_id, "bookingId must be a valid integer", "INVALID_BOOKING_ID")
        amount = body.amount if body.amount is not None else settings.BOOKING_BASE_AMOUNT
        if amount <= 0:
            raise bad_request("amount must be positive", "INVALID_AMOUNT")

        booking = db.query(Booking).filter(Booking.id == booking_id).first()
        if not booking:
            raise not_found("Booking not found", "BOOKING_NOT_FOUND")

        transaction_id = f"txn_{uuid.uuid4().hex[:16]}"
        logger.info("Mock payment %s for booking %s amount=%s", transaction_id, booking_id, amount)
        return create_response(
            {
                "status": "success",
                "transactionId": transaction_id,
                "bookingId": booking_id,
                "amount": amount,
            }
        )
    except Exception as exc:
        return handle_exception(exc)
