import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.address import Address
from app.schemas.address import AddressCreate, AddressResponse, AddressUpdate
from app.utils.params import clean_text, parse_int
from app.utils.response import bad_request, create_response, handle_exception, not_found

router = APIRouter(prefix="/addresses", tags=["Addresses"])
logger = logging.getLogger(__name__)

TEXT_FIELDS = ("apartment_building", "street_area", "city", "state", "pincode")


def _address_payload(address: Address) -> dict:
    return AddressResponse.model_validate(address).to_payload()


def _clear_default(db: Session, user_id: int) -> None:
    """Unset the default flag on every address of the user, inside the caller's transaction."""
    db.query(Address).filter(Address.user_id == user_id).update({Address.is_default: False})


@router.get("")
def list_addresses(
    user_id: str | None = Query(None, alias="userId"),
    db: Session = Depends(get_db),
):
    try:
        if not user_id:
            raise bad_request("Valid userId is required", "INVALID_USER_ID")
        owner_id = parse_int(user_id, "Valid userId is required", "INVALID_USER_ID")

        addresses = (
            db.query(Address)
            .filter(Address.user_id == owner_id)
            .order_by(Address.is_default.desc(), Address.created_at.desc(), Address.id.desc())
            .all()
        )
        return create_response([_address_payload(address) for address in addresses])
    except Exception as exc:
        return handle_exception(exc)


@router.post("")
def create_address(body: AddressCreate, db: Session = Depends(get_db)):
    try:
        if body.user_id is None or body.user_id == "":
            raise bad_request("userId is required", "MISSING_USER_ID")
        owner_id = parse_int(body.user_id, "userId must be a valid number", "INVALID_USER_ID")

        if body.is_default:
            _clear_default(db, owner_id)

        address = Address(
            user_id=owner_id,
            is_default=body.is_default,
            **{field: clean_text(getattr(body, field)) for field in TEXT_FIELDS},
        )
        db.add(address)
        db.commit()
        db.refresh(address)
        logger.info("Created address id=%s for user %s default=%s", address.id, owner_id, address.is_default)
        return create_response(_address_payload(address), status.HTTP_201_CREATED)
    except Exception as exc:
        return handle_exception(exc)


@router.put("")
def update_address(
    body: AddressUpdate,
    address_id: str | None = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    try:
        if not address_id:
            raise bad_request("Valid ID is required", "INVALID_ID")
        target_id = parse_int(address_id, "Valid ID is required", "INVALID_ID")

        address = db.query(Address).filter(Address.id == target_id).first()
        if not address:
            raise not_found("Address not found", "ADDRESS_NOT_FOUND")

        update_data = body.model_dump(exclude_unset=True)
        if update_data.get("is_default") is True:
            _clear_default(db, address.user_id)

        for field, value in update_data.items():
            if field in TEXT_FIELDS:
                value = clean_text(value)
            elif field == "is_default" and value is None:
                value = False
            setattr(address, field, value)

        db.commit()
        refreshed = db.query(Address).filter(Address.id == target_id).first()
        if not refreshed:
            raise not_found("Address not found", "ADDRESS_NOT_FOUND")
        return create_response(_address_payload(refreshed))
    except Exception as exc:
        return handle_exception(exc)
