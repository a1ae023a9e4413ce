from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from hr_admin.api.dependencies import StorageDep

from . import service
from .schemas import AttendanceCreate, AttendanceOut, AttendanceUpdate

router = APIRouter(prefix="/api/attendance", tags=["attendance"])


@router.get("", response_model=list[AttendanceOut])
def list_attendance(
    storage: StorageDep,
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    work_date: Optional[date] = Query(None, alias="date"),
):
    return service.list_attendance(storage, employee_id=employee_id, work_date=work_date)


@router.get("/{record_id}", response_model=AttendanceOut)
def get_attendance(record_id: int, storage: StorageDep):
    return service.get_attendance(storage, record_id)


@router.post("", response_model=AttendanceOut, status_code=201)
def create_attendance(payload: AttendanceCreate, storage: StorageDep):
    return service.create_attendance(storage, payload)


@router.put("/{record_id}", response_model=AttendanceOut)
def update_attendance(record_id: int, payload: AttendanceUpdate, storage: StorageDep):
    return service.update_attendance(storage, record_id, payload)
