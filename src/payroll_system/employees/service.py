from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.datetime_utils import to_date
from ..common.validators import apply_defaults, first_present, require_fields
from ..core.constants import EMPLOYEE_DEFAULTS
from ..core.exceptions import NotFoundError
from .model import EMPLOYEE_COLUMNS, Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: manage employee records.

    Updates are full-replace: the caller resupplies every field and anything
    omitted is written as null (or its default), never kept from the old row.
    """

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    @staticmethod
    def _to_record(payload: Mapping[str, Any]) -> dict:
        record = {column: payload.get(column) for column in EMPLOYEE_COLUMNS}
        first = first_present(payload, "firstname", "firstName")
        last = first_present(payload, "lastName", "lastname")
        record["firstname"] = first
        record["lastName"] = last

        if not record["name"]:
            record["name"] = " ".join(str(p) for p in (first, last) if p) or None
        if record["joiningDate"]:
            record["joiningDate"] = to_date(record["joiningDate"], "joiningDate")

        if not record["departmentId"]:
            # 0 is not a department id
            record["departmentId"] = None
        record = apply_defaults(record, EMPLOYEE_DEFAULTS)
        record["inviteEmail"] = bool(record["inviteEmail"])
        return record

    def create(self, payload: Mapping[str, Any]) -> int:
        record = self._to_record(payload)
        require_fields(record, ("firstname", "lastName", "email"))
        return self._employees.create(record)

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def update(self, employee_id: int, payload: Mapping[str, Any]) -> None:
        if not self._employees.replace(int(employee_id), self._to_record(payload)):
            raise NotFoundError("Employee not found")

    def delete(self, employee_id: int) -> None:
        if not self._employees.delete_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")
