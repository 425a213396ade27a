import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.booking import BOOKING_STATUSES, SERVICE_TYPES, Booking
from app.schemas.booking import BookingCreate, BookingResponse, BookingUpdate
from app.utils.params import is_blank, parse_int
from app.utils.response import bad_request, create_response, handle_exception, not_found
from app.utils.timestamps import iso_now

router = APIRouter(prefix="/bookings", tags=["Bookings"])
logger = logging.getLogger(__name__)

SERVICE_TYPE_ERROR = f"serviceType must be one of: {', '.join(SERVICE_TYPES)}"
STATUS_ERROR = f"status must be one of: {', '.join(BOOKING_STATUSES)}"


def booking_payload(booking: Booking) -> dict:
    return BookingResponse.model_validate(booking).to_payload()


def normalize_service_type(value: str) -> str:
    normalized = value.strip().lower()
    if normalized not in SERVICE_TYPES:
        raise bad_request(SERVICE_TYPE_ERROR, "INVALID_SERVICE_TYPE")
    return normalized


def normalize_status(value: str) -> str:
    normalized = value.strip().lower()
    if normalized not in BOOKING_STATUSES:
        raise bad_request(STATUS_ERROR, "INVALID_STATUS")
    return normalized


@router.get("")
def get_bookings(
    booking_id: str | None = Query(None, alias="id"),
    user_id: str | None = Query(None, alias="userId"),
    db: Session = Depends(get_db),
):
    try:
        if booking_id:
            target_id = parse_int(booking_id, "Valid ID is required", "INVALID_ID")
            booking = db.query(Booking).filter(Booking.id == target_id).first()
            if not booking:
                raise not_found("Booking not found", "BOOKING_NOT_FOUND")
            return create_response(booking_payload(booking))

        if user_id:
            owner_id = parse_int(user_id, "Valid userId is required", "INVALID_USER_ID")
            bookings = (
                db.query(Booking)
                .filter(Booking.user_id == owner_id)
                .order_by(Booking.created_at.desc(), Booking.id.desc())
                .all()
            )
            return create_response([booking_payload(booking) for booking in bookings])

        raise bad_request("Either id or userId parameter is required", "MISSING_PARAMETER")
    except Exception as exc:
        return handle_exception(exc)


@router.post("")
def create_booking(body: BookingCreate, db: Session = Depends(get_db)):
    try:
        if is_blank(body.user_id):
            raise bad_request("userId is required", "MISSING_USER_ID")
        if is_blank(body.address_id):
            raise bad_request("addressId is required", "MISSING_ADDRESS_ID")
        if is_blank(body.service_type):
            raise bad_request("serviceType is required", "MISSING_SERVICE_TYPE")

        owner_id = parse_int(body.user_id, "userId must be a valid integer", "INVALID_USER_ID")
        address_id = parse_int(body.address_id, "addressId must be a valid integer", "INVALID_ADDRESS_ID")
        service_type = normalize_service_type(body.service_type)

        now = iso_now()
        booking = Booking(
            user_id=owner_id,
            address_id=address_id,
            service_type=service_type,
            sub_service=body.sub_service or None,
            work_description=body.work_description or None,
            photo_url=body.photo_url or None,
            status="pending",
            professional_name=None,
            professional_contact=None,
            booking_date=body.booking_date or now,
            completion_date=None,
            created_at=now,
        )
        db.add(booking)
        db.commit()
        db.refresh(booking)
        logger.info("Created booking id=%s user=%s service=%s", booking.id, owner_id, service_type)
        return create_response(booking_payload(booking), status.HTTP_201_CREATED)
    except Exception as exc:
        return handle_exception(exc)


@router.put("")
def update_booking(
    body: BookingUpdate,
    booking_id: str | None = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    """Overwrite any subset of fields; statuses may move in any direction."""
    try:
        if not booking_id:
            raise bad_request("Valid ID is required", "INVALID_ID")
        target_id = parse_int(booking_id, "Valid ID is required", "INVALID_ID")

        booking = db.query(Booking).filter(Booking.id == target_id).first()
        if not booking:
            raise not_found("Booking not found", "BOOKING_NOT_FOUND")

        update_data = body.model_dump(exclude_unset=True)
        if update_data.get("status"):
            update_data["status"] = normalize_status(update_data["status"])
        if update_data.get("service_type"):
            update_data["service_type"] = normalize_service_type(update_data["service_type"])

        for field, value in update_data.items():
            if field in ("status", "service_type", "booking_date") and not value:
                # non-nullable columns keep their value
                continue
            setattr(booking, field, value)

        db.commit()
        db.refresh(booking)
        if "status" in update_data:
            logger.info("Booking %s status set to %s", booking.id, booking.status)
        return create_response(booking_payload(booking))
    except Exception as exc:
        return handle_exception(exc)
