from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, username, email, password FROM users WHERE email=%s", (email,))
            row = fetchone(cur)
            if not row:
                return None
            return User(
                id=int(row["id"]),
                username=row["username"],
                email=row["email"],
                password_hash=row["password"],
            )

    def create_user(self, *, username: str, email: str, password_hash: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO users (username, email, password) VALUES (%s, %s, %s)",
                (username, email, password_hash),
            )
            return int(cur.lastrowid)
