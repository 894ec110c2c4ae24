from __future__ import annotations

from enum import Enum


class LeaveStatus(str, Enum):
    """Approval state of a leave request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class DepartmentStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
