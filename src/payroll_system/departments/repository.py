from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def create(self, *, name: str, status: str, description: Optional[str]) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def get_by_id(self, department_id: int) -> Optional[Department]:
        raise NotImplementedError

    def replace(self, department_id: int, *, name: str, status: str, description: Optional[str]) -> bool:
        raise NotImplementedError

    def delete_by_id(self, department_id: int) -> bool:
        raise NotImplementedError
