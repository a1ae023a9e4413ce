from typing import Optional

from fastapi import APIRouter, Query

from hr_admin.api.dependencies import StorageDep

from . import service
from .schemas import PayrollCreate, PayrollOut, PayrollUpdate

router = APIRouter(prefix="/api/payroll", tags=["payroll"])


@router.get("", response_model=list[PayrollOut])
def list_payroll(storage: StorageDep, employee_id: Optional[str] = Query(None, alias="employeeId")):
    return service.list_payroll(storage, employee_id=employee_id)


@router.get("/{record_id}", response_model=PayrollOut)
def get_payroll(record_id: int, storage: StorageDep):
    return service.get_payroll(storage, record_id)


@router.post("", response_model=PayrollOut, status_code=201)
def create_payroll(payload: PayrollCreate, storage: StorageDep):
    return service.create_payroll(storage, payload)


@router.put("/{record_id}", response_model=PayrollOut)
def update_payroll(record_id: int, payload: PayrollUpdate, storage: StorageDep):
    return service.update_payroll(storage, record_id, payload)
