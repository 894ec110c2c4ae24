from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import EMPLOYEE_COLUMNS, Employee
from .repository import EmployeeRepository

_FIELDS = tuple(EMPLOYEE_COLUMNS)
_SELECT = "SELECT id, " + ", ".join(_FIELDS) + " FROM employees"


def _values(record: Mapping[str, object]) -> tuple:
    return tuple(record.get(f) for f in _FIELDS)


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, record: Mapping[str, object]) -> int:
        placeholders = ", ".join(["%s"] * len(_FIELDS))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO employees ({', '.join(_FIELDS)}) VALUES ({placeholders})",
                _values(record),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY id")
            return [Employee.from_record(r["id"], r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (int(employee_id),))
            row = fetchone(cur)
            return Employee.from_record(row["id"], row) if row else None

    def replace(self, employee_id: int, record: Mapping[str, object]) -> bool:
        assignments = ", ".join(f"{f}=%s" for f in _FIELDS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE employees SET {assignments} WHERE id=%s",
                _values(record) + (int(employee_id),),
            )
            return cur.rowcount > 0

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0
