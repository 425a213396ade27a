from fastapi import APIRouter, Request

from app.schemas.session import EmployeeSessionPayload, UserSessionPayload
from app.services.session import (
    clear_employee_session,
    clear_user_session,
    get_employee_session,
    get_user_session,
    is_authenticated,
    set_employee_session,
    set_user_session,
)
from app.utils.response import create_response, handle_exception, not_found

router = APIRouter(tags=["Session"])


@router.get("/session")
def read_session(request: Request):
    try:
        if not is_authenticated(request):
            raise not_found("No active session", "SESSION_NOT_FOUND")
        return create_response(get_user_session(request).to_payload())
    except Exception as exc:
        return handle_exception(exc)


@router.post("/session")
def store_session(body: UserSessionPayload, request: Request):
    try:
        set_user_session(request, body)
        return create_response(body.to_payload())
    except Exception as exc:
        return handle_exception(exc)


@router.delete("/session")
def end_session(request: Request):
    try:
        clear_user_session(request)
        return create_response({"message": "Session cleared"})
    except Exception as exc:
        return handle_exception(exc)


@router.get("/employee/session")
def read_employee_session(request: Request):
    try:
        session = get_employee_session(request)
        if session is None:
            raise not_found("No active session", "SESSION_NOT_FOUND")
        return create_response(session.to_payload())
    except Exception as exc:
        return handle_exception(exc)


@router.post("/employee/session")
def store_employee_session(body: EmployeeSessionPayload, request: Request):
    try:
        set_employee_session(request, body)
        return create_response(body.to_payload())
    except Exception as exc:
        return handle_exception(exc)


@router.delete("/employee/session")
def end_employee_session(request: Request):
    try:
        clear_employee_session(request)
        return create_response({"message": "Session cleared"})
    except Exception as exc:
        return handle_exception(exc)
