"""Constants and defaults.

Note: every per-entity default lives in one table here and is applied by the
owning service on both create and update, so the two paths cannot drift.
"""

from .enums import DepartmentStatus, LeaveStatus

DEFAULT_DEPARTMENT_ID = 1

EMPLOYEE_DEFAULTS = {
    "departmentId": DEFAULT_DEPARTMENT_ID,
    "inviteEmail": False,
}

LEAVE_DEFAULTS = {
    "status": LeaveStatus.PENDING.value,
    "reason": None,
}

DEPARTMENT_DEFAULTS = {
    "status": DepartmentStatus.ACTIVE.value,
    "description": None,
}

ALLOWED_UPLOAD_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png"})
DEFAULT_MAX_UPLOAD_BYTES = 50 * 1024 * 1024
DEFAULT_POOL_SIZE = 10
