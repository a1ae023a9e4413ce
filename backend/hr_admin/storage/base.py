"""Storage interfaces shared by the in-memory and database backends.

A storage exposes one repository per record type. Repositories take and
return plain ``dict`` payloads keyed by model attribute names on the way in
and ORM model instances on the way out, so routers can serialize either
backend the same way.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol, Sequence

from hr_admin.models import AttendanceRecord, Employee, LeaveRequest, PayrollRecord


class Repository(Protocol):
    def list(self) -> Sequence[Any]:
        raise NotImplementedError

    def get(self, record_id: int) -> Optional[Any]:
        raise NotImplementedError

    def create(self, data: Mapping[str, Any]) -> Any:
        raise NotImplementedError

    def update(self, record_id: int, data: Mapping[str, Any]) -> Optional[Any]:
        raise NotImplementedError

    def find_by(self, **criteria: Any) -> Sequence[Any]:
        raise NotImplementedError


class EmployeeRepository(Repository, Protocol):
    def delete(self, record_id: int) -> bool:
        raise NotImplementedError

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError


class AttendanceRepository(Repository, Protocol):
    def list_by_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError


class LeaveRequestRepository(Repository, Protocol):
    def list_by_employee(self, employee_id: str) -> Sequence[LeaveRequest]:
        raise NotImplementedError


class PayrollRepository(Repository, Protocol):
    def list_by_employee(self, employee_id: str) -> Sequence[PayrollRecord]:
        raise NotImplementedError


class Storage(Protocol):
    employees: EmployeeRepository
    attendance: AttendanceRepository
    leave_requests: LeaveRequestRepository
    payroll: PayrollRepository


class EmployeeLookups:
    """Natural-key reads built on ``find_by``; mixed into both backends."""

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        matches = self.find_by(employee_id=employee_id)
        return matches[0] if matches else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        matches = self.find_by(email=email)
        return matches[0] if matches else None


class EmployeeScopedReads:
    def list_by_employee(self, employee_id: str) -> Sequence[Any]:
        return self.find_by(employee_id=employee_id)


class AttendanceReads(EmployeeScopedReads):
    def list_by_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        return self.find_by(date=work_date)
