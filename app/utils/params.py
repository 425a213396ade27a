from app.utils.response import bad_request


def is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def parse_int(value, detail: str, code: str) -> int:
    """Parse a query/body identifier, raising a 400 with ``code`` when it is not an integer."""
    if isinstance(value, bool):
        raise bad_request(detail, code)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise bad_request(detail, code)


def clean_text(value: str | None) -> str | None:
    """Trim a free-text field; blank values are stored as null."""
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def parse_rating(value) -> int:
    """Validate a 1-5 star rating supplied as an int or numeric string."""
    if is_blank(value) or value == 0:
        raise bad_request("rating is required", "MISSING_RATING")
    rating = parse_int(value, "rating must be a valid integer", "INVALID_RATING")
    if rating < 1 or rating > 5:
        raise bad_request("rating must be between 1 and 5", "INVALID_RATING_RANGE")
    return rating
