from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.otp import EmployeeOtpVerification, OtpVerification
from app.schemas.otp import OtpRequest
from app.services.otp_service import issue_otp, verify_otp
from app.utils.params import is_blank
from app.utils.response import bad_request, create_response, handle_exception

router = APIRouter(tags=["OTP"])


def _handle_otp(body: OtpRequest, db: Session, model):
    if not isinstance(body.phone_number, str) or is_blank(body.phone_number):
        raise bad_request("Phone number is required", "MISSING_PHONE_NUMBER")

    phone_number = body.phone_number.strip()

    if body.action == "generate":
        record = issue_otp(db, model, phone_number)
        return create_response(
            {"message": "OTP sent successfully", "otpCode": record.otp_code},
            status.HTTP_201_CREATED,
        )

    if body.action == "verify":
        if body.otp_code is None or is_blank(str(body.otp_code)):
            raise bad_request("OTP code is required for verification", "MISSING_OTP_CODE")
        verify_otp(db, model, phone_number, str(body.otp_code).strip())
        return create_response({"message": "OTP verified successfully"}, status.HTTP_200_OK)

    raise bad_request('Invalid action. Must be "generate" or "verify"', "INVALID_ACTION")


@router.post("/otp")
def user_otp(body: OtpRequest, db: Session = Depends(get_db)):
    try:
        return _handle_otp(body, db, OtpVerification)
    except Exception as exc:
        return handle_exception(exc)


@router.post("/employee/otp")
def employee_otp(body: OtpRequest, db: Session = Depends(get_db)):
    try:
        return _handle_otp(body, db, EmployeeOtpVerification)
    except Exception as exc:
        return handle_exception(exc)
