import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.feedback import Feedback
from app.schemas.feedback import FeedbackCreate, FeedbackResponse
from app.utils.params import clean_text, is_blank, parse_int, parse_rating
from app.utils.response import bad_request, create_response, handle_exception, not_found

router = APIRouter(prefix="/feedback", tags=["Feedback"])
logger = logging.getLogger(__name__)

DUPLICATE_FEEDBACK_MESSAGE = "Feedback already submitted for this booking"


@router.get("")
def get_feedback(
    booking_id: str | None = Query(None, alias="bookingId"),
    db: Session = Depends(get_db),
):
    try:
        if not booking_id:
            raise bad_request("Valid bookingId is required", "INVALID_BOOKING_ID")
        target_id = parse_int(booking_id, "Valid bookingId is required", "INVALID_BOOKING_ID")

        entry = db.query(Feedback).filter(Feedback.booking_id == target_id).first()
        if not entry:
            raise not_found("Feedback not found for this booking", "FEEDBACK_NOT_FOUND")
        return create_response(FeedbackResponse.model_validate(entry).to_payload())
    except Exception as exc:
        return handle_exception(exc)


@router.post("")
def submit_feedback(body: FeedbackCreate, db: Session = Depends(get_db)):
    try:
        if is_blank(body.booking_id):
            raise bad_request("bookingId is required", "MISSING_BOOKING_ID")
        if is_blank(body.user_id):
            raise bad_request("userId is required", "MISSING_USER_ID")
        if is_blank(body.rating) or body.rating == 0:
            raise bad_request("rating is required", "MISSING_RATING")

        booking_id = parse_int(body.booking_id, "bookingId must be a valid integer", "INVALID_BOOKING_ID")
        user_id = parse_int(body.user_id, "userId must be a valid integer", "INVALID_USER_ID")
        rating = parse_rating(body.rating)

        existing = db.query(Feedback).filter(Feedback.booking_id == booking_id).first()
        if existing:
            raise bad_request(DUPLICATE_FEEDBACK_MESSAGE, "DUPLICATE_FEEDBACK")

        entry = Feedback(
            booking_id=booking_id,
            user_id=user_id,
            rating=rating,
            comments=clean_text(body.comments),
        )
        db.add(entry)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise bad_request(DUPLICATE_FEEDBACK_MESSAGE, "DUPLICATE_FEEDBACK")

        db.refresh(entry)
        logger.info("Stored feedback id=%s booking=%s rating=%s", entry.id, booking_id, rating)
        return create_response(FeedbackResponse.model_validate(entry).to_payload(), status.HTTP_201_CREATED)
    except Exception as exc:
        return handle_exception(exc)
