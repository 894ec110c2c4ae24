from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.validators import apply_defaults, require_fields
from ..core.constants import DEPARTMENT_DEFAULTS
from ..core.exceptions import NotFoundError
from .model import Department
from .repository import DepartmentRepository


class DepartmentService:
    """Use case: manage departments. Updates are full-replace, like employees."""

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    @staticmethod
    def _to_record(payload: Mapping[str, Any]) -> dict:
        record = {
            "name": payload.get("name"),
            "status": payload.get("status"),
            "description": payload.get("description"),
        }
        require_fields(record, ("name",))
        return apply_defaults(record, DEPARTMENT_DEFAULTS)

    def create(self, payload: Mapping[str, Any]) -> int:
        return self._departments.create(**self._to_record(payload))

    def list_all(self) -> Sequence[Department]:
        return self._departments.list_all()

    def get(self, department_id: int) -> Department:
        department = self._departments.get_by_id(int(department_id))
        if not department:
            raise NotFoundError("Department not found")
        return department

    def update(self, department_id: int, payload: Mapping[str, Any]) -> None:
        if not self._departments.replace(int(department_id), **self._to_record(payload)):
            raise NotFoundError("Department not found")

    def delete(self, department_id: int) -> None:
        if not self._departments.delete_by_id(int(department_id)):
            raise NotFoundError("Department not found")
