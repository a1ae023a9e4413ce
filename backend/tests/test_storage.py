from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from hr_admin.api.dependencies import get_storage
from hr_admin.core.errors import UnexpectedError
from hr_admin.db.session import Base
from hr_admin.main import app
from hr_admin.storage.database import DatabaseStorage


def _employee(**overrides):
    data = {
        "employee_id": "EMP1",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "department": "Engineering",
        "position": "Engineer",
        "start_date": date(2024, 1, 1),
        "salary": Decimal("1000.00"),
        "employment_type": "full-time",
    }
    data.update(overrides)
    return data


def test_create_assigns_id_and_system_fields(storage):
    employee = storage.employees.create(_employee())

    assert employee.id == 1
    assert employee.status == "active"
    assert employee.created_at is not None
    assert employee.phone is None


def test_leave_request_defaults_to_pending(storage):
    request = storage.leave_requests.create(
        {
            "employee_id": "EMP1",
            "leave_type": "sick",
            "start_date": date(2024, 1, 1),
            "end_date": date(2024, 1, 2),
        }
    )

    assert request.status == "pending"
    assert request.applied_at is not None
    assert request.reviewed_at is None


def test_update_merges_and_reports_missing(storage):
    employee = storage.employees.create(_employee())

    updated = storage.employees.update(employee.id, {"position": "Lead"})

    assert updated.position == "Lead"
    assert updated.first_name == "Ada"
    assert storage.employees.update(999, {"position": "Lead"}) is None


def test_delete_reports_whether_a_row_existed(storage):
    employee = storage.employees.create(_employee())

    assert storage.employees.delete(employee.id) is True
    assert storage.employees.delete(employee.id) is False
    assert storage.employees.get(employee.id) is None


def test_lookups_by_natural_key(storage):
    storage.employees.create(_employee())
    storage.employees.create(_employee(employee_id="EMP2", email="grace@example.com"))

    assert storage.employees.get_by_employee_id("EMP2").email == "grace@example.com"
    assert storage.employees.get_by_email("ada@example.com").employee_id == "EMP1"
    assert storage.employees.get_by_employee_id("EMP404") is None


def test_scoped_reads(storage):
    for employee_id, day in [("EMP1", 1), ("EMP1", 2), ("EMP2", 1)]:
        storage.attendance.create(
            {"employee_id": employee_id, "date": date(2024, 1, day), "status": "present"}
        )
    storage.payroll.create(
        {
            "employee_id": "EMP2",
            "pay_period": "2024-01",
            "basic_salary": Decimal("10"),
            "gross_pay": Decimal("10"),
            "net_pay": Decimal("10"),
        }
    )

    assert [r.date.day for r in storage.attendance.list_by_employee("EMP1")] == [1, 2]
    assert [r.employee_id for r in storage.attendance.list_by_date(date(2024, 1, 1))] == ["EMP1", "EMP2"]
    assert [r.pay_period for r in storage.payroll.list_by_employee("EMP2")] == ["2024-01"]
    assert storage.payroll.list()[0].overtime == Decimal("0")
    assert storage.leave_requests.list_by_employee("EMP1") == []


def test_list_is_ordered_by_id(storage):
    ids = [storage.employees.create(_employee(employee_id=f"EMP{i}", email=f"{i}@example.com")).id for i in range(3)]

    assert [employee.id for employee in storage.employees.list()] == ids


def test_database_failures_become_unexpected_errors(db_session):
    storage = DatabaseStorage(db_session)
    storage.employees.create(_employee())

    with pytest.raises(UnexpectedError) as excinfo:
        storage.employees.create(_employee(employee_id="EMP2"))

    assert excinfo.value.message == "Failed to create employee"
    # Session is usable again after the rollback
    assert len(storage.employees.list()) == 1


def test_storage_failure_returns_generic_500(db_session):
    storage = DatabaseStorage(db_session)
    app.dependency_overrides[get_storage] = lambda: storage
    Base.metadata.drop_all(bind=db_session.get_bind())
    try:
        with TestClient(app) as client:
            response = client.get("/api/employees")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to fetch employee"}
