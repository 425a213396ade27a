from sqlalchemy import Boolean, Column, Integer, String

from app.database import Base
from app.utils.timestamps import iso_now


class OtpColumnsMixin:
    id = Column(Integer, primary_key=True, index=True)
    phone_number = Column(String, nullable=False, index=True)
    otp_code = Column(String, nullable=False)
    expires_at = Column(String, nullable=False)
    is_verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(String, default=iso_now, nullable=False)


class OtpVerification(OtpColumnsMixin, Base):
    __tablename__ = "otp_verifications"


class EmployeeOtpVerification(OtpColumnsMixin, Base):
    __tablename__ = "employee_otp_verifications"
