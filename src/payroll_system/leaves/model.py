from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import iso_or_none


@dataclass(frozen=True)
class Leave:
    """A time-off request owned by one employee."""

    id: int
    employee_id: int
    start_date: date
    end_date: date
    duration: int
    status: str
    reason: Optional[str] = None
    leave_type: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "start_date": iso_or_none(self.start_date),
            "end_date": iso_or_none(self.end_date),
            "duration": self.duration,
            "status": self.status,
            "reason": self.reason,
            "leave_type": self.leave_type,
        }
