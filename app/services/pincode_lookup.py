import logging
import re

import httpx

from app.config import settings
from app.schemas.pincode import PincodeData

logger = logging.getLogger(__name__)

PINCODE_PATTERN = re.compile(r"^\d{6}$")

# Common pincodes resolved without a network round-trip
LOCAL_PINCODES: dict[str, PincodeData] = {
    entry.pincode: entry
    for entry in (
        PincodeData(pincode="110001", city="New Delhi", state="Delhi", district="Central Delhi"),
        PincodeData(pincode="400001", city="Mumbai", state="Maharashtra", district="Mumbai"),
        PincodeData(pincode="560001", city="Bangalore", state="Karnataka", district="Bangalore"),
        PincodeData(pincode="600001", city="Chennai", state="Tamil Nadu", district="Chennai"),
        PincodeData(pincode="700001", city="Kolkata", state="West Bengal", district="Kolkata"),
        PincodeData(pincode="500001", city="Hyderabad", state="Telangana", district="Hyderabad"),
        PincodeData(pincode="411001", city="Pune", state="Maharashtra", district="Pune"),
        PincodeData(pincode="380001", city="Ahmedabad", state="Gujarat", district="Ahmedabad"),
        PincodeData(pincode="302001", city="Jaipur", state="Rajasthan", district="Jaipur"),
        PincodeData(pincode="226001", city="Lucknow", state="Uttar Pradesh", district="Lucknow"),
        PincodeData(pincode="160001", city="Chandigarh", state="Chandigarh", district="Chandigarh"),
        PincodeData(pincode="201301", city="Noida", state="Uttar Pradesh", district="Gautam Buddha Nagar"),
        PincodeData(pincode="122001", city="Gurgaon", state="Haryana", district="Gurgaon"),
        PincodeData(pincode="560076", city="Bangalore", state="Karnataka", district="Bangalore"),
        PincodeData(pincode="400070", city="Mumbai", state="Maharashtra", district="Mumbai Suburban"),
    )
}


def normalize_pincode(pincode: str) -> str | None:
    """Strip whitespace and return the pincode only when it is exactly six digits."""
    cleaned = re.sub(r"\s", "", pincode or "")
    if not PINCODE_PATTERN.match(cleaned):
        return None
    return cleaned


def map_post_office(pincode: str, payload) -> PincodeData | None:
    if not isinstance(payload, list) or not payload:
        return None
    entry = payload[0]
    if not isinstance(entry, dict) or entry.get("Status") != "Success":
        return None
    offices = entry.get("PostOffice")
    if not isinstance(offices, list) or not offices or not isinstance(offices[0], dict):
        return None
    office = offices[0]
    return PincodeData(
        pincode=pincode,
        city=office.get("District") or office.get("Block") or "",
        state=office.get("State") or "",
        district=office.get("District") or "",
    )


async def fetch_remote_pincode(pincode: str) -> PincodeData | None:
    headers = {"User-Agent": "SnapfixBackend/1.0"}
    async with httpx.AsyncClient(timeout=settings.PINCODE_LOOKUP_TIMEOUT) as client:
        response = await client.get(settings.PINCODE_API_URL.format(pincode=pincode), headers=headers)
        response.raise_for_status()
        payload = response.json()
    return map_post_office(pincode, payload)


async def lookup_pincode(pincode: str) -> PincodeData | None:
    cleaned = normalize_pincode(pincode)
    if cleaned is None:
        return None

    if cleaned in LOCAL_PINCODES:
        return LOCAL_PINCODES[cleaned]

    if not settings.PINCODE_REMOTE_LOOKUP_ENABLED:
        return None

    try:
        return await fetch_remote_pincode(cleaned)
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("Pincode lookup failed for %s: %s", cleaned, exc)
        return None
