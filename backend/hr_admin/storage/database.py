from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hr_admin.core.errors import UnexpectedError
from hr_admin.core.logging import get_logger
from hr_admin.models import AttendanceRecord, Employee, LeaveRequest, PayrollRecord

from .base import AttendanceReads, EmployeeLookups, EmployeeScopedReads

logger = get_logger(__name__)


class DatabaseRepository:
    """SQLAlchemy repository; every write commits before returning."""

    label = "record"

    def __init__(self, session: Session, model: type) -> None:
        self.session = session
        self.model = model

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("storage_failure", table=self.model.__tablename__, action=action, exc_info=exc)
            raise UnexpectedError(f"Failed to {action} {self.label}") from exc

    def list(self) -> list[Any]:
        with self._guard("fetch"):
            return self.session.query(self.model).order_by(self.model.id.asc()).all()

    def get(self, record_id: int) -> Optional[Any]:
        with self._guard("fetch"):
            return self.session.get(self.model, record_id)

    def create(self, data: Mapping[str, Any]) -> Any:
        with self._guard("create"):
            row = self.model(**data)
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
            return row

    def update(self, record_id: int, data: Mapping[str, Any]) -> Optional[Any]:
        with self._guard("update"):
            row = self.session.get(self.model, record_id)
            if row is None:
                return None
            for key, value in data.items():
                setattr(row, key, value)
            self.session.commit()
            self.session.refresh(row)
            return row

    def delete(self, record_id: int) -> bool:
        with self._guard("delete"):
            row = self.session.get(self.model, record_id)
            if row is None:
                return False
            self.session.delete(row)
            self.session.commit()
            return True

    def find_by(self, **criteria: Any) -> list[Any]:
        with self._guard("fetch"):
            return (
                self.session.query(self.model)
                .filter_by(**criteria)
                .order_by(self.model.id.asc())
                .all()
            )


class DatabaseEmployeeRepository(EmployeeLookups, DatabaseRepository):
    label = "employee"

    def __init__(self, session: Session) -> None:
        super().__init__(session, Employee)


class DatabaseAttendanceRepository(AttendanceReads, DatabaseRepository):
    label = "attendance record"

    def __init__(self, session: Session) -> None:
        super().__init__(session, AttendanceRecord)


class DatabaseLeaveRequestRepository(EmployeeScopedReads, DatabaseRepository):
    label = "leave request"

    def __init__(self, session: Session) -> None:
        super().__init__(session, LeaveRequest)


class DatabasePayrollRepository(EmployeeScopedReads, DatabaseRepository):
    label = "payroll record"

    def __init__(self, session: Session) -> None:
        super().__init__(session, PayrollRecord)


class DatabaseStorage:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.employees = DatabaseEmployeeRepository(session)
        self.attendance = DatabaseAttendanceRepository(session)
        self.leave_requests = DatabaseLeaveRequestRepository(session)
        self.payroll = DatabasePayrollRepository(session)
