from __future__ import annotations

import math
from datetime import date, datetime, time
from typing import Union

DateLike = Union[date, datetime]

_SECONDS_PER_DAY = 24 * 60 * 60


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def calculate_duration(start: DateLike, end: DateLike) -> int:
    """Number of leave days, counting both the first and the last day.

    Monday to Wednesday is 3. A range that ends before it starts is 0, never
    negative.
    """
    delta = _as_datetime(end) - _as_datetime(start)
    days = math.ceil(delta.total_seconds() / _SECONDS_PER_DAY) + 1
    return days if days > 0 else 0
