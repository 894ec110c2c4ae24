from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import ConflictError, StoreError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


def _rollback(conn) -> None:
    # A dead connection cannot roll back; the original error is what matters.
    try:
        conn.rollback()
    except mysql.connector.Error as e:
        logger.warning("Rollback failed: %s", e)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Borrow a pooled connection and yield `(conn, cursor)`.

    Commits on success, rolls back on error. Driver errors leave as
    `StoreError`, or `ConflictError` for duplicate keys.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("Database connection failed: %s", e)
        raise StoreError(str(e)) from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        _rollback(conn)
        if getattr(e, "errno", None) == errorcode.ER_DUP_ENTRY:
            raise ConflictError(str(e)) from e
        raise StoreError(str(e)) from e
    except Exception:
        _rollback(conn)
        raise
    finally:
        conn_factory.release(conn)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
