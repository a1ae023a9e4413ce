from fastapi import APIRouter

from hr_admin.api.dependencies import StorageDep

from . import service
from .schemas import EmployeeCreate, EmployeeOut, EmployeeUpdate

router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeOut])
def list_employees(storage: StorageDep):
    return service.list_employees(storage)


@router.get("/{record_id}", response_model=EmployeeOut)
def get_employee(record_id: int, storage: StorageDep):
    return service.get_employee(storage, record_id)


@router.post("", response_model=EmployeeOut, status_code=201)
def create_employee(payload: EmployeeCreate, storage: StorageDep):
    return service.create_employee(storage, payload)


@router.put("/{record_id}", response_model=EmployeeOut)
def update_employee(record_id: int, payload: EmployeeUpdate, storage: StorageDep):
    return service.update_employee(storage, record_id, payload)


@router.delete("/{record_id}")
def delete_employee(record_id: int, storage: StorageDep) -> dict[str, str]:
    service.delete_employee(storage, record_id)
    return {"message": "Employee deleted successfully"}
