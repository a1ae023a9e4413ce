from typing import Optional

from fastapi import APIRouter, Query

from hr_admin.api.dependencies import StorageDep
from hr_admin.core.config import settings

from . import service
from .schemas import LeaveRequestCreate, LeaveRequestOut, LeaveRequestUpdate

router = APIRouter(prefix="/api/leave-requests", tags=["leave-requests"])


@router.get("", response_model=list[LeaveRequestOut])
def list_leave_requests(
    storage: StorageDep, employee_id: Optional[str] = Query(None, alias="employeeId")
):
    return service.list_leave_requests(storage, employee_id=employee_id)


@router.get("/{request_id}", response_model=LeaveRequestOut)
def get_leave_request(request_id: int, storage: StorageDep):
    return service.get_leave_request(storage, request_id)


@router.post("", response_model=LeaveRequestOut, status_code=201)
def create_leave_request(payload: LeaveRequestCreate, storage: StorageDep):
    return service.create_leave_request(storage, payload)


@router.put("/{request_id}", response_model=LeaveRequestOut)
def update_leave_request(request_id: int, payload: LeaveRequestUpdate, storage: StorageDep):
    # No authenticated actor yet; decisions are attributed to the configured reviewer
    return service.update_leave_request(
        storage, request_id, payload, reviewer=settings.reviewer_name
    )
