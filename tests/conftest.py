from __future__ import annotations

from dataclasses import replace
from typing import Optional

import pytest

from payroll_system.container import assemble
from payroll_system.core.exceptions import ConflictError
from payroll_system.departments.model import Department
from payroll_system.employees.model import Employee
from payroll_system.leaves.model import Leave
from payroll_system.main import create_app
from payroll_system.users.model import User


class InMemoryLeaves:
    def __init__(self):
        self.rows: dict[int, Leave] = {}
        self._next_id = 1
        self.reads = 0

    def create(self, *, employee_id, start_date, end_date, status, reason, leave_type, duration):
        lid = self._next_id
        self._next_id += 1
        self.rows[lid] = Leave(
            id=lid,
            employee_id=int(employee_id),
            start_date=start_date,
            end_date=end_date,
            duration=duration,
            status=status,
            reason=reason,
            leave_type=leave_type,
        )
        return lid

    def list_all(self):
        return list(self.rows.values())

    def list_for_employee(self, employee_id):
        return [r for r in self.rows.values() if r.employee_id == int(employee_id)]

    def get_by_id(self, leave_id) -> Optional[Leave]:
        self.reads += 1
        return self.rows.get(int(leave_id))

    def update(self, leave_id, *, start_date, end_date, status, reason, leave_type, duration):
        current = self.rows.get(int(leave_id))
        if not current:
            return False
        self.rows[int(leave_id)] = replace(
            current,
            start_date=start_date,
            end_date=end_date,
            status=status,
            reason=reason,
            leave_type=leave_type,
            duration=duration,
        )
        return True

    def delete_by_id(self, leave_id):
        return self.rows.pop(int(leave_id), None) is not None


class InMemoryEmployees:
    def __init__(self):
        self.records: dict[int, dict] = {}
        self._next_id = 1

    def create(self, record):
        eid = self._next_id
        self._next_id += 1
        self.records[eid] = dict(record)
        return eid

    def list_all(self):
        return [Employee.from_record(eid, r) for eid, r in self.records.items()]

    def get_by_id(self, employee_id):
        r = self.records.get(int(employee_id))
        return Employee.from_record(int(employee_id), r) if r is not None else None

    def replace(self, employee_id, record):
        if int(employee_id) not in self.records:
            return False
        self.records[int(employee_id)] = dict(record)
        return True

    def delete_by_id(self, employee_id):
        return self.records.pop(int(employee_id), None) is not None


class InMemoryDepartments:
    def __init__(self):
        self.rows: dict[int, Department] = {}
        self._next_id = 1

    def create(self, *, name, status, description):
        did = self._next_id
        self._next_id += 1
        self.rows[did] = Department(id=did, name=name, status=status, description=description)
        return did

    def list_all(self):
        return list(self.rows.values())

    def get_by_id(self, department_id):
        return self.rows.get(int(department_id))

    def replace(self, department_id, *, name, status, description):
        if int(department_id) not in self.rows:
            return False
        self.rows[int(department_id)] = Department(
            id=int(department_id), name=name, status=status, description=description
        )
        return True

    def delete_by_id(self, department_id):
        return self.rows.pop(int(department_id), None) is not None


class InMemoryUsers:
    def __init__(self):
        self.by_email: dict[str, User] = {}
        self._next_id = 1

    def get_by_email(self, email):
        return self.by_email.get(email)

    def create_user(self, *, username, email, password_hash):
        if email in self.by_email:
            raise ConflictError(f"Duplicate entry '{email}' for key 'email'")
        uid = self._next_id
        self._next_id += 1
        self.by_email[email] = User(id=uid, username=username, email=email, password_hash=password_hash)
        return uid


@pytest.fixture
def leaves_repo():
    return InMemoryLeaves()


@pytest.fixture
def employees_repo():
    return InMemoryEmployees()


@pytest.fixture
def departments_repo():
    return InMemoryDepartments()


@pytest.fixture
def users_repo():
    return InMemoryUsers()


@pytest.fixture
def container(tmp_path, leaves_repo, employees_repo, departments_repo, users_repo):
    return assemble(
        employees_repo=employees_repo,
        leaves_repo=leaves_repo,
        departments_repo=departments_repo,
        users_repo=users_repo,
        upload_dir=tmp_path / "uploads",
        max_upload_bytes=1024,
        password_hash_method="pbkdf2:sha256:1000",
    )


@pytest.fixture
def client(container):
    app = create_app("config.testing", container=container)
    return app.test_client()
