from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    """Render an aware datetime as a UTC ISO-8601 string with a trailing Z."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def iso_now() -> str:
    return to_iso(utc_now())


def iso_in(minutes: int) -> str:
    return to_iso(utc_now() + timedelta(minutes=minutes))


def iso_days_ago(days: int) -> str:
    return to_iso(utc_now() - timedelta(days=days))


def parse_iso(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
