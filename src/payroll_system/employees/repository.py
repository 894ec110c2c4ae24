from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Records are keyed by column name (see `EMPLOYEE_COLUMNS`)."""

    def create(self, record: Mapping[str, object]) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def replace(self, employee_id: int, record: Mapping[str, object]) -> bool:
        """Overwrite every column. Returns False when no row has this id."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError
