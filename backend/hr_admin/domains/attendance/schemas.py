import datetime as dt
from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field, field_validator

from hr_admin.domains.common import CamelModel, OptionalMoney, OptionalText, PatchModel

AttendanceStatus = Literal["present", "absent", "late"]

MAX_DAILY_HOURS = Decimal("24")


def _check_hours(value: Optional[Decimal]) -> Optional[Decimal]:
    if value is not None and not (0 <= value <= MAX_DAILY_HOURS):
        raise ValueError("must be between 0 and 24")
    return value


class AttendanceCreate(CamelModel):
    employee_id: str = Field(..., min_length=1, max_length=32)
    date: dt.date
    clock_in: OptionalText = Field(None, max_length=20)
    clock_out: OptionalText = Field(None, max_length=20)
    status: AttendanceStatus
    hours_worked: OptionalMoney = None
    quick_mark: bool = False

    @field_validator("hours_worked")
    @classmethod
    def validate_hours(cls, value: Optional[Decimal]) -> Optional[Decimal]:
        return _check_hours(value)


class AttendanceUpdate(PatchModel):
    non_nullable = frozenset({"employee_id", "date", "status"})

    employee_id: Optional[str] = Field(None, min_length=1, max_length=32)
    date: Optional[dt.date] = None
    clock_in: OptionalText = Field(None, max_length=20)
    clock_out: OptionalText = Field(None, max_length=20)
    status: Optional[AttendanceStatus] = None
    hours_worked: OptionalMoney = None

    @field_validator("hours_worked")
    @classmethod
    def validate_hours(cls, value: Optional[Decimal]) -> Optional[Decimal]:
        return _check_hours(value)


class AttendanceOut(CamelModel):
    id: int
    employee_id: str
    date: dt.date
    clock_in: Optional[str] = None
    clock_out: Optional[str] = None
    status: AttendanceStatus
    hours_worked: Optional[Decimal] = None
    created_at: Optional[dt.datetime] = None
