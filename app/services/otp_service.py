import logging
import random

from sqlalchemy.orm import Session

from app.config import settings
from app.models.otp import OtpColumnsMixin
from app.utils.response import bad_request
from app.utils.timestamps import iso_in, parse_iso, utc_now

logger = logging.getLogger(__name__)


def generate_otp_code() -> str:
    return str(random.randint(100000, 999999))


def issue_otp(db: Session, model: type[OtpColumnsMixin], phone_number: str) -> OtpColumnsMixin:
    """Store a fresh unverified code for ``phone_number``; nothing is sent over SMS."""
    record = model(
        phone_number=phone_number,
        otp_code=generate_otp_code(),
        expires_at=iso_in(settings.OTP_EXPIRY_MINUTES),
        is_verified=False,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("Issued OTP id=%s table=%s", record.id, model.__tablename__)
    logger.debug("OTP for %s is %s", phone_number, record.otp_code)
    return record


def latest_unverified_otp(db: Session, model: type[OtpColumnsMixin], phone_number: str):
    return (
        db.query(model)
        .filter(model.phone_number == phone_number, model.is_verified == False)
        .order_by(model.created_at.desc(), model.id.desc())
        .first()
    )


def verify_otp(db: Session, model: type[OtpColumnsMixin], phone_number: str, otp_code: str) -> OtpColumnsMixin:
    record = latest_unverified_otp(db, model, phone_number)
    if not record:
        raise bad_request("No valid OTP found for this phone number", "OTP_NOT_FOUND")

    if record.otp_code != otp_code:
        raise bad_request("Invalid OTP code", "INVALID_OTP")

    if utc_now() > parse_iso(record.expires_at):
        raise bad_request("OTP has expired", "OTP_EXPIRED")

    record.is_verified = True
    db.commit()
    logger.info("Verified OTP id=%s table=%s", record.id, model.__tablename__)
    return record
