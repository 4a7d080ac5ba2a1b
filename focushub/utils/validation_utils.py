from typing import Optional
from datetime import datetime
import re

HEX_COLOR_PATTERN = re.compile(r'^#(?:[0-9a-fA-F]{3}){1,2}$')


def validate_date_format(date_str: str, format: str = "%Y-%m-%d") -> bool:
    """Validate if a string matches the specified date format."""
    try:
        datetime.strptime(date_str, format)
        return True
    except (TypeError, ValueError):
        return False


def validate_date_key(value: Optional[str]) -> Optional[str]:
    """Pydantic-friendly check for YYYY-MM-DD day keys."""
    if value is None:
        return value
    if len(value) != 10 or not validate_date_format(value):
        raise ValueError("date must use the YYYY-MM-DD format")
    return value


def validate_hex_color(value: Optional[str]) -> Optional[str]:
    """Pydantic-friendly check for #rgb / #rrggbb colors."""
    if value is None:
        return value
    if not HEX_COLOR_PATTERN.match(value):
        raise ValueError("color must be a hex value such as #4CAF50")
    return value
