from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Leave
from .repository import LeaveRepository

_COLUMNS = "id, employee_id, start_date, end_date, duration, status, reason, leave_type"


def _to_leave(row: dict) -> Leave:
    return Leave(
        id=int(row["id"]),
        employee_id=int(row["employee_id"]),
        start_date=row["start_date"],
        end_date=row["end_date"],
        duration=int(row["duration"] or 0),
        status=row["status"],
        reason=row.get("reason"),
        leave_type=row.get("leave_type"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leaves (employee_id, start_date, end_date, status, reason, leave_type, duration)
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                """,
                (int(employee_id), start_date, end_date, status, reason, leave_type, int(duration)),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[Leave]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM leaves ORDER BY id")
            return [_to_leave(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_id: int) -> Sequence[Leave]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM leaves WHERE employee_id=%s ORDER BY start_date",
                (int(employee_id),),
            )
            return [_to_leave(r) for r in fetchall(cur)]

    def get_by_id(self, leave_id: int) -> Optional[Leave]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM leaves WHERE id=%s", (int(leave_id),))
            row = fetchone(cur)
            return _to_leave(row) if row else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leaves
                SET start_date=%s, end_date=%s, status=%s, reason=%s, leave_type=%s, duration=%s
                WHERE id=%s
                """,
                (start_date, end_date, status, reason, leave_type, int(duration), int(leave_id)),
            )
            return cur.rowcount > 0

    def delete_by_id(self, leave_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM leaves WHERE id=%s", (int(leave_id),))
            return cur.rowcount > 0
