import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.booking import Booking, BookingAssignment
from app.models.employee import Employee
from app.schemas.booking import AssignmentCreate, AssignmentResponse, AssignmentUpdate
from app.utils.params import is_blank, parse_int
from app.utils.response import bad_request, create_response, handle_exception, not_found

router = APIRouter(prefix="/bookings/assignments", tags=["Booking Assignments"])
logger = logging.getLogger(__name__)

ASSIGNMENT_STATUSES = ("assigned", "accepted", "rejected", "completed")


def _assignment_payload(assignment: BookingAssignment) -> dict:
    return AssignmentResponse.model_validate(assignment).to_payload()


@router.get("")
def list_assignments(
    booking_id: str | None = Query(None, alias="bookingId"),
    employee_id: str | None = Query(None, alias="employeeId"),
    db: Session = Depends(get_db),
):
    try:
        query = db.query(BookingAssignment)
        if booking_id:
            target = parse_int(booking_id, "Valid bookingId is required", "INVALID_BOOKING_ID")
            query = query.filter(BookingAssignment.booking_id == target)
        elif employee_id:
            target = parse_int(employee_id, "Valid employeeId is required", "INVALID_EMPLOYEE_ID")
            query = query.filter(BookingAssignment.employee_id == target)
        else:
            raise bad_request("Either bookingId or employeeId parameter is required", "MISSING_PARAMETER")

        assignments = query.order_by(BookingAssignment.assigned_at.desc(), BookingAssignment.id.desc()).all()
        return create_response([_assignment_payload(item) for item in assignments])
    except Exception as exc:
        return handle_exception(exc)


@router.post("")
def assign_professional(body: AssignmentCreate, db: Session = Depends(get_db)):
    """Attach an employee to a booking and copy their details onto the booking."""
    try:
        if is_blank(body.booking_id) or is_blank(body.employee_id):
            raise bad_request("bookingId and employeeId are required", "MISSING_FIELDS")
        booking_id = parse_int(body.booking_id, "bookingId must be a valid integer", "INVALID_BOOKING_ID")
        employee_id = parse_int(body.employee_id, "employeeId must be a valid integer", "INVALID_EMPLOYEE_ID")

        booking = db.query(Booking).filter(Booking.id == booking_id).first()
        if not booking:
            raise not_found("Booking not found", "BOOKING_NOT_FOUND")
        employee = db.query(Employee).filter(Employee.id == employee_id).first()
        if not employee:
            raise not_found("Employee not found", "EMPLOYEE_NOT_FOUND")

        assignment = BookingAssignment(booking_id=booking_id, employee_id=employee_id, status="assigned")
        booking.professional_name = employee.name
        booking.professional_contact = employee.phone_number
        booking.status = "confirmed"
        db.add(assignment)
        db.commit()
        db.refresh(assignment)
        logger.info("Assigned employee %s to booking %s", employee_id, booking_id)
        return create_response(_assignment_payload(assignment), status.HTTP_201_CREATED)
    except Exception as exc:
        return handle_exception(exc)


@router.put("")
def update_assignment(
    body: AssignmentUpdate,
    assignment_id: str | None = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    try:
        if not assignment_id:
            raise bad_request("Valid ID is required", "INVALID_ID")
        target_id = parse_int(assignment_id, "Valid ID is required", "INVALID_ID")
        assignment = db.query(BookingAssignment).filter(BookingAssignment.id == target_id).first()
        if not assignment:
            raise not_found("Assignment not found", "ASSIGNMENT_NOT_FOUND")

        if body.status:
            normalized = body.status.strip().lower()
            if normalized not in ASSIGNMENT_STATUSES:
                raise bad_request(
                    f"status must be one of: {', '.join(ASSIGNMENT_STATUSES)}", "INVALID_STATUS"
                )
            assignment.status = normalized

        db.commit()
        db.refresh(assignment)
        return create_response(_assignment_payload(assignment))
    except Exception as exc:
        return handle_exception(exc)
