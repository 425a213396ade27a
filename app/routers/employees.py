import logging
import re

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.employee import Employee
from app.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from app.utils.params import is_blank, parse_int
from app.utils.response import bad_request, conflict, create_response, handle_exception, not_found
from app.utils.timestamps import iso_now

router = APIRouter(prefix="/employee/profile", tags=["Employees"])
logger = logging.getLogger(__name__)

PHONE_PATTERN = re.compile(r"\d{10}")
EMPLOYEE_EXISTS_MESSAGE = "Employee with this phone number already exists"


def employee_payload(employee: Employee) -> dict:
    return EmployeeResponse.model_validate(employee).to_payload()


def _strip(value):
    return value.strip() if isinstance(value, str) else value


@router.get("")
def get_employee(
    phone: str | None = Query(None),
    employee_id: str | None = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    try:
        if not phone and not employee_id:
            raise bad_request("Either phone number or id parameter is required", "MISSING_PARAMETER")

        target_id = None
        if employee_id:
            target_id = parse_int(employee_id, "Valid ID is required", "INVALID_ID")

        if target_id is not None and phone:
            condition = or_(Employee.id == target_id, Employee.phone_number == phone)
        elif target_id is not None:
            condition = Employee.id == target_id
        else:
            condition = Employee.phone_number == phone

        employee = db.query(Employee).filter(condition).first()
        if not employee:
            raise not_found("Employee not found", "EMPLOYEE_NOT_FOUND")
        return create_response(employee_payload(employee))
    except Exception as exc:
        return handle_exception(exc)


@router.post("")
def register_employee(body: EmployeeCreate, db: Session = Depends(get_db)):
    try:
        if is_blank(body.phone_number) or is_blank(body.name) or is_blank(body.specialization):
            raise bad_request("Phone number, name, and specialization are required", "MISSING_FIELDS")

        if not PHONE_PATTERN.fullmatch(body.phone_number):
            raise bad_request("Invalid phone number format. Must be 10 digits", "INVALID_PHONE")

        existing = db.query(Employee).filter(Employee.phone_number == body.phone_number).first()
        if existing:
            raise conflict(EMPLOYEE_EXISTS_MESSAGE, "EMPLOYEE_EXISTS")

        employee = Employee(
            phone_number=body.phone_number,
            name=body.name.strip(),
            specialization=body.specialization.strip(),
            status="available",
        )
        db.add(employee)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise conflict(EMPLOYEE_EXISTS_MESSAGE, "EMPLOYEE_EXISTS")

        db.refresh(employee)
        logger.info("Registered employee id=%s specialization=%s", employee.id, employee.specialization)
        return create_response(employee_payload(employee), status.HTTP_201_CREATED)
    except Exception as exc:
        return handle_exception(exc)


@router.put("")
def update_employee(
    body: EmployeeUpdate,
    employee_id: str | None = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    try:
        if not employee_id:
            raise bad_request("ID parameter is required", "MISSING_PARAMETER")
        target_id = parse_int(employee_id, "Valid ID is required", "INVALID_ID")

        employee = db.query(Employee).filter(Employee.id == target_id).first()
        if not employee:
            raise not_found("Employee not found", "EMPLOYEE_NOT_FOUND")

        update_data = body.model_dump(exclude_unset=True)
        if "email" in update_data and isinstance(update_data["email"], str):
            update_data["email"] = update_data["email"].strip().lower()
        for field in ("name", "specialization"):
            if field in update_data:
                update_data[field] = _strip(update_data[field])

        for field, value in update_data.items():
            if field in ("name", "specialization", "status") and value is None:
                continue
            setattr(employee, field, value)

        # onupdate only fires when a column changes, so stamp explicitly
        employee.updated_at = iso_now()
        db.commit()
        db.refresh(employee)
        return create_response(employee_payload(employee))
    except Exception as exc:
        return handle_exception(exc)
