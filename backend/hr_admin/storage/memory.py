from __future__ import annotations

from itertools import count
from typing import Any, Mapping, Optional

from hr_admin.models import AttendanceRecord, Employee, LeaveRequest, PayrollRecord

from .base import AttendanceReads, EmployeeLookups, EmployeeScopedReads


class MemoryRepository:
    """Dict-backed repository holding transient model instances keyed by id."""

    def __init__(self, model: type) -> None:
        self.model = model
        self._rows: dict[int, Any] = {}
        self._ids = count(1)

    def _column_defaults(self) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for column in self.model.__table__.columns:
            default = column.default
            if default is None:
                values[column.key] = None
            elif default.is_callable:
                values[column.key] = default.arg(None)
            else:
                values[column.key] = default.arg
        return values

    def list(self) -> list[Any]:
        return [self._rows[key] for key in sorted(self._rows)]

    def get(self, record_id: int) -> Optional[Any]:
        return self._rows.get(record_id)

    def create(self, data: Mapping[str, Any]) -> Any:
        values = self._column_defaults()
        values.update(data)
        values["id"] = next(self._ids)
        row = self.model(**values)
        self._rows[row.id] = row
        return row

    def update(self, record_id: int, data: Mapping[str, Any]) -> Optional[Any]:
        row = self._rows.get(record_id)
        if row is None:
            return None
        for key, value in data.items():
            setattr(row, key, value)
        return row

    def delete(self, record_id: int) -> bool:
        return self._rows.pop(record_id, None) is not None

    def find_by(self, **criteria: Any) -> list[Any]:
        return [
            row
            for row in self.list()
            if all(getattr(row, key) == value for key, value in criteria.items())
        ]


class MemoryEmployeeRepository(EmployeeLookups, MemoryRepository):
    def __init__(self) -> None:
        super().__init__(Employee)


class MemoryAttendanceRepository(AttendanceReads, MemoryRepository):
    def __init__(self) -> None:
        super().__init__(AttendanceRecord)


class MemoryLeaveRequestRepository(EmployeeScopedReads, MemoryRepository):
    def __init__(self) -> None:
        super().__init__(LeaveRequest)


class MemoryPayrollRepository(EmployeeScopedReads, MemoryRepository):
    def __init__(self) -> None:
        super().__init__(PayrollRecord)


class MemoryStorage:
    """Process-local storage; build one per test or per app instance."""

    def __init__(self) -> None:
        self.employees = MemoryEmployeeRepository()
        self.attendance = MemoryAttendanceRepository()
        self.leave_requests = MemoryLeaveRequestRepository()
        self.payroll = MemoryPayrollRepository()
