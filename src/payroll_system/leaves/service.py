from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import to_date
from ..common.validators import apply_defaults, require_fields
from ..core.constants import LEAVE_DEFAULTS
from ..core.exceptions import NotFoundError, ValidationError
from .duration import calculate_duration
from .model import Leave
from .repository import LeaveRepository

REQUIRED_LEAVE_FIELDS = ("employee_id", "start_date", "end_date", "leave_type")


def _employee_id(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid employee_id: {value!r}")


class LeaveService:
    """Use cases for leave requests.

    Duration is always derived from the dates that end up stored; any
    `duration` sent by the client is ignored.
    """

    def __init__(self, leaves: LeaveRepository):
        self._leaves = leaves

    @staticmethod
    def validate(payload: Mapping[str, Any]) -> None:
        require_fields(payload, REQUIRED_LEAVE_FIELDS)

    @staticmethod
    def _status_and_reason(payload: Mapping[str, Any]) -> dict:
        return apply_defaults(
            {"status": payload.get("status"), "reason": payload.get("reason")},
            LEAVE_DEFAULTS,
        )

    def create(self, payload: Mapping[str, Any]) -> int:
        self.validate(payload)

        start = to_date(payload["start_date"], "start_date")
        end = to_date(payload["end_date"], "end_date")
        extra = self._status_and_reason(payload)

        return self._leaves.create(
            employee_id=_employee_id(payload["employee_id"]),
            start_date=start,
            end_date=end,
            status=extra["status"],
            reason=extra["reason"],
            leave_type=payload["leave_type"],
            duration=calculate_duration(start, end),
        )

    def list_all(self) -> Sequence[Leave]:
        return self._leaves.list_all()

    def list_for_employee(self, employee_id: int) -> Sequence[Leave]:
        return self._leaves.list_for_employee(int(employee_id))

    def update(self, leave_id: int, payload: Mapping[str, Any]) -> None:
        """Update a leave, backfilling omitted dates from the stored row.

        With both dates supplied the request replaces the row outright.
        Otherwise the current row is read first and each missing date (and a
        missing `leave_type`) is taken from it. `status` and `reason` are never
        backfilled; when omitted they fall back to their defaults.

        The read and the write are separate statements, so two concurrent
        partial updates of one leave can each see the other's stale dates.
        """
        raw_start = payload.get("start_date")
        raw_end = payload.get("end_date")
        leave_type: Optional[str] = payload.get("leave_type")

        start: Optional[date] = to_date(raw_start, "start_date") if raw_start else None
        end: Optional[date] = to_date(raw_end, "end_date") if raw_end else None

        if start is None or end is None:
            current = self._leaves.get_by_id(int(leave_id))
            if not current:
                raise NotFoundError("Leave not found")
            start = start or to_date(current.start_date, "start_date")
            end = end or to_date(current.end_date, "end_date")
            leave_type = leave_type or current.leave_type

        extra = self._status_and_reason(payload)
        ok = self._leaves.update(
            int(leave_id),
            start_date=start,
            end_date=end,
            status=extra["status"],
            reason=extra["reason"],
            leave_type=leave_type,
            duration=calculate_duration(start, end),
        )
        if not ok:
            raise NotFoundError("Leave not found")

    def delete(self, leave_id: int) -> None:
        if not self._leaves.delete_by_id(int(leave_id)):
            raise NotFoundError("Leave not found")
