from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

import mysql.connector
from mysql.connector import pooling
from mysql.connector.constants import ClientFlag
from mysql.connector.errors import PoolError

from ..core.constants import DEFAULT_POOL_SIZE

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_name: str = "payroll_pool"
    pool_size: int = DEFAULT_POOL_SIZE
    # Seconds to wait for a free connection; None waits indefinitely.
    pool_timeout: Optional[float] = None


class DatabaseConnection:
    """Bounded connection pool handle.

    Built once by the container and passed to every repository. The pool is
    opened lazily so an app can be created before MySQL is reachable.
    When every connection is borrowed, `connect()` blocks until one is
    handed back through `release()`.
    """

    def __init__(self, config: DBConfig, *, pool=None):
        self._config = config
        self._pool = pool
        self._lock = threading.Lock()
        self._slots = threading.BoundedSemaphore(int(config.pool_size))

    def _get_pool(self):
        with self._lock:
            if self._pool is None:
                self._pool = pooling.MySQLConnectionPool(
                    pool_name=self._config.pool_name,
                    pool_size=int(self._config.pool_size),
                    host=self._config.host,
                    port=int(self._config.port),
                    user=self._config.user,
                    password=self._config.password,
                    database=self._config.database,
                    # rowcount reports matched rows, so an UPDATE that changes
                    # nothing on an existing row is not mistaken for a miss.
                    client_flags=[ClientFlag.FOUND_ROWS],
                )
            return self._pool

    def connect(self):
        if not self._slots.acquire(timeout=self._config.pool_timeout):
            raise PoolError("Failed getting connection; pool exhausted")
        try:
            return self._get_pool().get_connection()
        except Exception:
            self._slots.release()
            raise

    def release(self, conn) -> None:
        """Return a borrowed connection to the pool and free its slot."""
        try:
            conn.close()
        except mysql.connector.Error as e:
            logger.warning("Returning connection to pool failed: %s", e)
        finally:
            self._slots.release()
