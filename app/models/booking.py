from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.database import Base
from app.utils.timestamps import iso_now

SERVICE_TYPES = ("plumber", "electrician", "carpenter", "painter", "househelp")
BOOKING_STATUSES = ("pending", "confirmed", "in_progress", "completed", "cancelled")


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    address_id = Column(Integer, ForeignKey("addresses.id"), nullable=False)
    service_type = Column(String, nullable=False)
    sub_service = Column(String, nullable=True)
    work_description = Column(Text, nullable=True)
    photo_url = Column(String, nullable=True)
    status = Column(String, default="pending", nullable=False)
    professional_name = Column(String, nullable=True)
    professional_contact = Column(String, nullable=True)
    booking_date = Column(String, default=iso_now, nullable=False)
    completion_date = Column(String, nullable=True)
    created_at = Column(String, default=iso_now, nullable=False)

    user = relationship("User", backref="bookings")
    address = relationship("Address")


class BookingAssignment(Base):
    __tablename__ = "booking_assignments"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=False, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    status = Column(String, default="assigned", nullable=False)
    assigned_at = Column(String, default=iso_now, nullable=False)
    updated_at = Column(String, default=iso_now, onupdate=iso_now, nullable=False)

    booking = relationship("Booking", backref="assignments")
    employee = relationship("Employee", backref="assignments")
