"""Client-held session objects.

The session lives in the signed cookie managed by Starlette's
``SessionMiddleware``; the server keeps no session state of its own.
"""
from fastapi import Request
from pydantic import ValidationError

from app.schemas.session import EmployeeSessionPayload, UserSessionPayload

USER_SESSION_KEY = "snapfix_session"
EMPLOYEE_SESSION_KEY = "snapfix_employee_session"


def set_user_session(request: Request, session: UserSessionPayload) -> None:
    request.session[USER_SESSION_KEY] = session.to_payload()


def get_user_session(request: Request) -> UserSessionPayload | None:
    raw = request.session.get(USER_SESSION_KEY)
    if not raw:
        return None
    try:
        return UserSessionPayload.model_validate(raw)
    except ValidationError:
        return None


def clear_user_session(request: Request) -> None:
    request.session.pop(USER_SESSION_KEY, None)


def is_authenticated(request: Request) -> bool:
    return get_user_session(request) is not None


def set_employee_session(request: Request, session: EmployeeSessionPayload) -> None:
    request.session[EMPLOYEE_SESSION_KEY] = session.to_payload()


def get_employee_session(request: Request) -> EmployeeSessionPayload | None:
    raw = request.session.get(EMPLOYEE_SESSION_KEY)
    if not raw:
        return None
    try:
        return EmployeeSessionPayload.model_validate(raw)
    except ValidationError:
        return None


def clear_employee_session(request: Request) -> None:
    request.session.pop(EMPLOYEE_SESSION_KEY, None)
