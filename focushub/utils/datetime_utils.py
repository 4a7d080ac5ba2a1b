from datetime import datetime
from typing import Optional
import pytz

DATE_KEY_FORMAT = "%Y-%m-%d"


def get_utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(pytz.UTC)


def ensure_utc(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if dt.tzinfo is None:
        return pytz.UTC.localize(dt)
    return dt.astimezone(pytz.UTC)


def to_date_key(dt: Optional[datetime]) -> str:
    """Return the YYYY-MM-DD day key of a datetime, in UTC."""
    if dt is None:
        return ""
    return ensure_utc(dt).strftime(DATE_KEY_FORMAT)


def today_key() -> str:
    """Return today's YYYY-MM-DD day key, in UTC."""
    return get_utc_now().strftime(DATE_KEY_FORMAT)
