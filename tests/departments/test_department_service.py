from __future__ import annotations

import pytest

from payroll_system.core.exceptions import NotFoundError, ValidationError
from payroll_system.departments.service import DepartmentService


def test_create_defaults_status_to_active(departments_repo):
    svc = DepartmentService(departments_repo)
    did = svc.create({"name": "Finance"})

    dept = svc.get(did)
    assert dept.status == "active"
    assert dept.description is None


def test_create_requires_name(departments_repo):
    svc = DepartmentService(departments_repo)
    with pytest.raises(ValidationError):
        svc.create({"status": "active"})


def test_update_replaces_description(departments_repo):
    svc = DepartmentService(departments_repo)
    did = svc.create({"name": "Finance", "description": "Money"})

    svc.update(did, {"name": "Finance & Ops", "status": "inactive"})

    dept = svc.get(did)
    assert dept.name == "Finance & Ops"
    assert dept.status == "inactive"
    assert dept.description is None


def test_missing_department_is_not_found(departments_repo):
    svc = DepartmentService(departments_repo)
    with pytest.raises(NotFoundError):
        svc.get(1)
    with pytest.raises(NotFoundError):
        svc.update(1, {"name": "x"})
    with pytest.raises(NotFoundError):
        svc.delete(1)
