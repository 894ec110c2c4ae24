from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from ..common.datetime_utils import iso_or_none

# JSON key / column name -> dataclass attribute.
EMPLOYEE_COLUMNS = {
    "name": "name",
    "office": "office",
    "email": "email",
    "salary": "salary",
    "role": "role",
    "status": "status",
    "firstname": "firstname",
    "lastName": "last_name",
    "position": "position",
    "team": "team",
    "departmentId": "department_id",
    "joiningDate": "joining_date",
    "inviteEmail": "invite_email",
    "employmentType": "employment_type",
    "countryOfEmployment": "country_of_employment",
    "lineManager": "line_manager",
    "currency": "currency",
    "frequency": "frequency",
}


@dataclass(frozen=True)
class Employee:
    id: int
    name: Optional[str] = None
    office: Optional[str] = None
    email: Optional[str] = None
    salary: Optional[Union[Decimal, float]] = None
    role: Optional[str] = None
    status: Optional[str] = None
    firstname: Optional[str] = None
    last_name: Optional[str] = None
    position: Optional[str] = None
    team: Optional[str] = None
    department_id: Optional[int] = None
    joining_date: Optional[date] = None
    invite_email: bool = False
    employment_type: Optional[str] = None
    country_of_employment: Optional[str] = None
    line_manager: Optional[str] = None
    currency: Optional[str] = None
    frequency: Optional[str] = None

    @classmethod
    def from_record(cls, employee_id: int, record: dict) -> "Employee":
        kwargs = {attr: record.get(column) for column, attr in EMPLOYEE_COLUMNS.items()}
        kwargs["invite_email"] = bool(kwargs["invite_email"])
        return cls(id=int(employee_id), **kwargs)

    def to_dict(self) -> dict:
        out = {"id": self.id}
        for column, attr in EMPLOYEE_COLUMNS.items():
            out[column] = iso_or_none(getattr(self, attr))
        return out
