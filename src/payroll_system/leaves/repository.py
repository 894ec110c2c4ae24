from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Leave


class LeaveRepository(Protocol):
    def create(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        status: str,
        reason: Optional[str],
        leave_type: Optional[str],
        duration: int,
    ) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[Leave]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[Leave]:
        raise NotImplementedError

    def get_by_id(self, leave_id: int) -> Optional[Leave]:
        raise NotImplementedError

    def update(
        self,
        leave_id: int,
        *,
        start_date: date,
        end_date: date,
        status: str,
        reason: Optional[str],
        leave_type: Optional[str],
        duration: int,
    ) -> bool:
        """Overwrite every column. Returns False when no row has this id."""

        raise NotImplementedError

    def delete_by_id(self, leave_id: int) -> bool:
        raise NotImplementedError
