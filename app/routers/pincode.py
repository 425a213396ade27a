from fastapi import APIRouter

from app.services.pincode_lookup import lookup_pincode, normalize_pincode
from app.utils.response import bad_request, create_response, handle_exception, not_found

router = APIRouter(prefix="/pincode", tags=["Pincode"])


@router.get("/{pincode}")
async def resolve_pincode(pincode: str):
    """Resolve a 6-digit postal code to city/state for address autofill."""
    try:
        if normalize_pincode(pincode) is None:
            raise bad_request("Pincode must be exactly 6 digits", "INVALID_PINCODE")

        result = await lookup_pincode(pincode)
        if result is None:
            raise not_found("Pincode not found", "PINCODE_NOT_FOUND")
        return create_response(result.model_dump())
    except Exception as exc:
        return handle_exception(exc)
