from __future__ import annotations

from datetime import date, datetime
from typing import Any

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_date(value: Any, field_name: str) -> date:
    """Coerce a JSON or MySQL value into a date.

    Accepts `date`, `datetime`, `YYYY-MM-DD` and full ISO datetime strings
    (a trailing `Z` is read as UTC).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        v = value.strip()
        try:
            return parse_iso_date(v)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(v.replace("Z", "+00:00")).date()
        except ValueError:
            raise ValidationError(f"Invalid date for {field_name}: {value!r}")
    raise ValidationError(f"Invalid date for {field_name}: {value!r}")


def iso_or_none(value: Any) -> Any:
    """Render dates as ISO strings for JSON; pass everything else through."""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value
