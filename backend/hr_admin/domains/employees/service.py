from __future__ import annotations

import secrets
from typing import Optional

from hr_admin.core.errors import NotFoundError, ValidationError
from hr_admin.core.logging import get_logger
from hr_admin.core.observability import RECORDS_CREATED
from hr_admin.models import Employee
from hr_admin.storage.base import EmployeeRepository, Storage

from .schemas import EmployeeCreate, EmployeeUpdate

logger = get_logger(__name__)


def generate_employee_id() -> str:
    return f"EMP{secrets.token_hex(5).upper()}"


def unique_employee_id(employees: EmployeeRepository, supplied: Optional[str] = None) -> str:
    while True:
        candidate = generate_employee_id()
        if candidate != supplied and employees.get_by_employee_id(candidate) is None:
            return candidate


def _ensure_email_available(
    employees: EmployeeRepository, email: str, current_id: Optional[int] = None
) -> None:
    existing = employees.get_by_email(email)
    if existing is not None and existing.id != current_id:
        raise ValidationError.for_field("email", "Email is already used by another employee")


def list_employees(storage: Storage) -> list[Employee]:
    return list(storage.employees.list())


def get_employee(storage: Storage, record_id: int) -> Employee:
    employee = storage.employees.get(record_id)
    if employee is None:
        raise NotFoundError("Employee not found")
    return employee


def create_employee(storage: Storage, payload: EmployeeCreate) -> Employee:
    _ensure_email_available(storage.employees, payload.email)

    data = payload.model_dump()
    data["employee_id"] = unique_employee_id(storage.employees, payload.employee_id)
    employee = storage.employees.create(data)

    RECORDS_CREATED.add(1, {"record_type": "employee"})
    logger.info("employee_created", id=employee.id, employee_id=employee.employee_id)
    return employee


def update_employee(storage: Storage, record_id: int, payload: EmployeeUpdate) -> Employee:
    get_employee(storage, record_id)
    changes = payload.changes()
    if "email" in changes:
        _ensure_email_available(storage.employees, changes["email"], record_id)

    employee = storage.employees.update(record_id, changes)
    if employee is None:
        raise NotFoundError("Employee not found")
    logger.info("employee_updated", id=record_id, fields=sorted(changes))
    return employee


def delete_employee(storage: Storage, record_id: int) -> None:
    if not storage.employees.delete(record_id):
        raise NotFoundError("Employee not found")
    logger.info("employee_deleted", id=record_id)
