from datetime import date, datetime
from typing import Literal, Optional

from pydantic import Field, ValidationInfo, field_validator

from hr_admin.domains.common import CamelModel, OptionalText, PatchModel

LeaveType = Literal["vacation", "sick", "personal", "maternity", "paternity", "emergency"]
LeaveStatus = Literal["pending", "approved", "rejected"]


class LeaveRequestCreate(CamelModel):
    employee_id: str = Field(..., min_length=1, max_length=32)
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: OptionalText = None
    # Accepted and ignored: new requests always start pending
    status: Optional[str] = None

    @field_validator("end_date")
    @classmethod
    def check_date_range(cls, value: date, info: ValidationInfo) -> date:
        start = info.data.get("start_date")
        if start is not None and value < start:
            raise ValueError("endDate must not be before startDate")
        return value


class LeaveRequestUpdate(PatchModel):
    non_nullable = frozenset({"employee_id", "leave_type", "start_date", "end_date", "status"})

    employee_id: Optional[str] = Field(None, min_length=1, max_length=32)
    leave_type: Optional[LeaveType] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    reason: OptionalText = None
    status: Optional[LeaveStatus] = None


class LeaveRequestOut(CamelModel):
    id: int
    employee_id: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: Optional[str] = None
    status: LeaveStatus
    applied_at: Optional[datetime] = None
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[str] = None
