"""Display formatting helpers for dates and phone numbers."""

import re
from datetime import date, datetime

_NON_DIGITS = re.compile(r"\D")


def format_date(value: date | datetime | str) -> str:
    """Format a date, datetime or ISO string as ``YYYY-MM-DD``."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return value.isoformat()[:10]


def format_mobile(value: str | int) -> str:
    """Group up to ten digits as ``xxx-xxx-xxxx``, tolerating partial input.

    Non-digit characters are dropped first, so ``"(555) 123 4567"`` and
    ``5551234567`` both format to ``"555-123-4567"``. Digits beyond the tenth
    are ignored.
    """
    digits = _NON_DIGITS.sub("", str(value))
    area, prefix, line = digits[:3], digits[3:6], digits[6:10]
    if not prefix:
        return area
    return f"{area}-{prefix}" + (f"-{line}" if line else "")
