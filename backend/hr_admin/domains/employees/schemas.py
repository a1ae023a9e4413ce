from datetime import date, datetime
from typing import Literal, Optional

from pydantic import Field, field_validator

from hr_admin.domains.common import CamelModel, OptionalMoney, OptionalText, PatchModel

EmployeeStatus = Literal["active", "on-leave", "inactive"]


def _normalize_email(value: str) -> str:
    email = value.strip().lower()
    if "@" not in email:
        raise ValueError("Invalid email format")
    return email


class EmployeeCreate(CamelModel):
    # Accepted for compatibility; always replaced by a generated id
    employee_id: Optional[str] = None
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=255)
    phone: OptionalText = None
    address: OptionalText = None
    department: str = Field(..., min_length=1, max_length=100)
    position: str = Field(..., min_length=1, max_length=100)
    start_date: date
    salary: OptionalMoney = None
    employment_type: str = Field(..., min_length=1, max_length=20)
    status: EmployeeStatus = "active"

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _normalize_email(value)


class EmployeeUpdate(PatchModel):
    non_nullable = frozenset(
        {
            "first_name",
            "last_name",
            "email",
            "department",
            "position",
            "start_date",
            "employment_type",
            "status",
        }
    )

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    phone: OptionalText = None
    address: OptionalText = None
    department: Optional[str] = Field(None, min_length=1, max_length=100)
    position: Optional[str] = Field(None, min_length=1, max_length=100)
    start_date: Optional[date] = None
    salary: OptionalMoney = None
    employment_type: Optional[str] = Field(None, min_length=1, max_length=20)
    status: Optional[EmployeeStatus] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _normalize_email(value)


class EmployeeOut(EmployeeCreate):
    id: int
    employee_id: str
    created_at: Optional[datetime] = None
