"""Attendance submission paths and the hours-worked derivation."""

from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Optional

from pydantic.alias_generators import to_camel

from hr_admin.core import clock
from hr_admin.core.errors import NotFoundError, ValidationError
from hr_admin.core.logging import get_logger
from hr_admin.core.observability import RECORDS_CREATED
from hr_admin.domains.common import quantize_money
from hr_admin.models import AttendanceRecord
from hr_admin.storage.base import AttendanceRepository, Storage

from .schemas import AttendanceCreate, AttendanceUpdate

logger = get_logger(__name__)

TIME_FORMATS = ("%H:%M", "%H:%M:%S", "%I:%M %p", "%I:%M:%S %p")
FULL_DAY_HOURS = Decimal("8.00")
NO_HOURS = Decimal("0.00")
SECONDS_PER_HOUR = Decimal(3600)


def parse_clock_time(value: str) -> time:
    cleaned = " ".join(value.upper().split())
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Unrecognised time of day: {value!r}")


def hours_between(work_date: date, clock_in: str, clock_out: str) -> Decimal:
    """Hours from clock-in to clock-out on ``work_date``, clamped at zero."""
    started = datetime.combine(work_date, parse_clock_time(clock_in))
    finished = datetime.combine(work_date, parse_clock_time(clock_out))
    hours = Decimal(int((finished - started).total_seconds())) / SECONDS_PER_HOUR
    return quantize_money(max(NO_HOURS, hours))


def derive_hours_worked(data: dict[str, Any]) -> dict[str, Any]:
    """Full-form path: clock times, when both present, override hours_worked."""
    if not (data.get("clock_in") and data.get("clock_out")):
        return data
    for field in ("clock_in", "clock_out"):
        try:
            parse_clock_time(data[field])
        except ValueError as exc:
            raise ValidationError.for_field(to_camel(field), str(exc)) from exc
    data["hours_worked"] = hours_between(data["date"], data["clock_in"], data["clock_out"])
    return data


def apply_quick_mark(data: dict[str, Any], now: str) -> dict[str, Any]:
    """Quick-mark path: a present mark is a full day starting now."""
    present = data["status"] == "present"
    data["hours_worked"] = FULL_DAY_HOURS if present else NO_HOURS
    data["clock_in"] = now if present else None
    data["clock_out"] = None
    return data


def _ensure_single_record(
    attendance: AttendanceRepository,
    employee_id: str,
    work_date: date,
    current_id: Optional[int] = None,
) -> None:
    for record in attendance.list_by_employee(employee_id):
        if record.date == work_date and record.id != current_id:
            raise ValidationError.for_field(
                "date", f"Attendance for {employee_id} on {work_date.isoformat()} already recorded"
            )


def list_attendance(
    storage: Storage, employee_id: Optional[str] = None, work_date: Optional[date] = None
) -> list[AttendanceRecord]:
    if employee_id:
        return list(storage.attendance.list_by_employee(employee_id))
    if work_date:
        return list(storage.attendance.list_by_date(work_date))
    return list(storage.attendance.list())


def get_attendance(storage: Storage, record_id: int) -> AttendanceRecord:
    record = storage.attendance.get(record_id)
    if record is None:
        raise NotFoundError("Attendance record not found")
    return record


def create_attendance(storage: Storage, payload: AttendanceCreate) -> AttendanceRecord:
    data = payload.model_dump(exclude={"quick_mark"})
    if payload.quick_mark:
        apply_quick_mark(data, clock.time_of_day())
    else:
        derive_hours_worked(data)

    _ensure_single_record(storage.attendance, data["employee_id"], data["date"])
    record = storage.attendance.create(data)

    RECORDS_CREATED.add(1, {"record_type": "attendance"})
    logger.info(
        "attendance_recorded",
        id=record.id,
        employee_id=record.employee_id,
        date=record.date.isoformat(),
        status=record.status,
        quick_mark=payload.quick_mark,
    )
    return record


def update_attendance(
    storage: Storage, record_id: int, payload: AttendanceUpdate
) -> AttendanceRecord:
    existing = get_attendance(storage, record_id)
    changes = payload.changes()
    if "employee_id" in changes or "date" in changes:
        _ensure_single_record(
            storage.attendance,
            changes.get("employee_id", existing.employee_id),
            changes.get("date", existing.date),
            current_id=record_id,
        )

    record = storage.attendance.update(record_id, changes)
    if record is None:
        raise NotFoundError("Attendance record not found")
    logger.info("attendance_updated", id=record_id, fields=sorted(changes))
    return record
