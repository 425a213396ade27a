import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.schemas.user import UserCreate, UserResponse
from app.utils.params import clean_text, is_blank, parse_int
from app.utils.response import bad_request, create_response, handle_exception, not_found

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


def _user_payload(user: User) -> dict:
    return UserResponse.model_validate(user).to_payload()


@router.get("")
def get_user(
    user_id: str | None = Query(None, alias="id"),
    phone: str | None = Query(None),
    db: Session = Depends(get_db),
):
    try:
        if not user_id and not phone:
            raise bad_request("Either ID or phone number parameter is required", "MISSING_PARAMETER")

        if user_id:
            user_id = parse_int(user_id, "Valid ID is required", "INVALID_ID")
            user = db.query(User).filter(User.id == user_id).first()
        else:
            user = db.query(User).filter(User.phone_number == phone).first()

        if not user:
            raise not_found("User not found")

        return create_response(_user_payload(user))
    except Exception as exc:
        return handle_exception(exc)


@router.post("")
def login_or_register(body: UserCreate, db: Session = Depends(get_db)):
    """Get-or-create by phone number: 200 for a returning user, 201 for a new one."""
    try:
        if is_blank(body.phone_number):
            raise bad_request("Phone number is required", "PHONE_NUMBER_REQUIRED")

        phone_number = body.phone_number.strip()
        existing = db.query(User).filter(User.phone_number == phone_number).first()
        if existing:
            return create_response(_user_payload(existing), status.HTTP_200_OK)

        user = User(phone_number=phone_number, name=clean_text(body.name))
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same phone
            db.rollback()
            winner = db.query(User).filter(User.phone_number == phone_number).first()
            if not winner:
                raise
            return create_response(_user_payload(winner), status.HTTP_200_OK)

        db.refresh(user)
        logger.info("Created user id=%s", user.id)
        return create_response(_user_payload(user), status.HTTP_201_CREATED)
    except Exception as exc:
        return handle_exception(exc)
