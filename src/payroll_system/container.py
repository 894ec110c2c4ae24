from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .core.constants import DEFAULT_MAX_UPLOAD_BYTES, DEFAULT_POOL_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .uploads.service import UploadService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService
from .users.session_store import InMemorySessionStore


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection | None

    employees_repo: EmployeeRepository
    leaves_repo: LeaveRepository
    departments_repo: DepartmentRepository
    users_repo: UserRepository
    sessions: InMemorySessionStore

    employee_service: EmployeeService
    leave_service: LeaveService
    department_service: DepartmentService
    auth_service: AuthService
    upload_service: UploadService


def assemble(
    *,
    employees_repo: EmployeeRepository,
    leaves_repo: LeaveRepository,
    departments_repo: DepartmentRepository,
    users_repo: UserRepository,
    upload_dir: str | Path,
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
    password_hash_method: str = "scrypt",
    sessions: InMemorySessionStore | None = None,
    conn: DatabaseConnection | None = None,
) -> Container:
    """Wire services around the given repositories (MySQL or in-memory)."""
    sessions = sessions or InMemorySessionStore()
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        leaves_repo=leaves_repo,
        departments_repo=departments_repo,
        users_repo=users_repo,
        sessions=sessions,
        employee_service=EmployeeService(employees_repo),
        leave_service=LeaveService(leaves_repo),
        department_service=DepartmentService(departments_repo),
        auth_service=AuthService(users_repo, sessions, hash_method=password_hash_method),
        upload_service=UploadService(upload_dir, max_bytes=max_upload_bytes),
    )


def build_container(
    *,
    db_config: dict,
    upload_dir: str | Path,
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
    password_hash_method: str = "scrypt",
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
        pool_timeout=db_config.get("pool_timeout"),
    )
    conn = DatabaseConnection(config)

    return assemble(
        employees_repo=MySQLEmployeeRepository(conn),
        leaves_repo=MySQLLeaveRepository(conn),
        departments_repo=MySQLDepartmentRepository(conn),
        users_repo=MySQLUserRepository(conn),
        upload_dir=upload_dir,
        max_upload_bytes=max_upload_bytes,
        password_hash_method=password_hash_method,
        conn=conn,
    )
