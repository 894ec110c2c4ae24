from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Department
from .repository import DepartmentRepository


def _to_department(row: dict) -> Department:
    return Department(
        id=int(row["id"]),
        name=row["name"],
        status=row["status"],
        description=row.get("description"),
    )


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, name: str, status: str, description: Optional[str]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO department (name, status, description) VALUES (%s, %s, %s)",
                (name, status, description),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, status, description FROM department ORDER BY id")
            return [_to_department(r) for r in fetchall(cur)]

    def get_by_id(self, department_id: int) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, status, description FROM department WHERE id=%s",
                (int(department_id),),
            )
            row = fetchone(cur)
            return _to_department(row) if row else None

    def replace(self, department_id: int, *, name: str, status: str, description: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE department SET name=%s, status=%s, description=%s WHERE id=%s",
                (name, status, description, int(department_id)),
            )
            return cur.rowcount > 0

    def delete_by_id(self, department_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM department WHERE id=%s", (int(department_id),))
            return cur.rowcount > 0
