from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal

import pytest

from hr_admin.core import clock
from hr_admin.core.errors import ValidationError
from hr_admin.domains.attendance.service import (
    apply_quick_mark,
    derive_hours_worked,
    hours_between,
    parse_clock_time,
)
from hr_admin.domains.employees.service import generate_employee_id, unique_employee_id
from hr_admin.domains.leave_requests.service import stamp_review
from hr_admin.domains.payroll.service import compute_totals
from hr_admin.storage.memory import MemoryStorage


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("09:00", time(9, 0)),
        ("17:30:15", time(17, 30, 15)),
        ("9:05 am", time(9, 5)),
        ("4:45:30 PM", time(16, 45, 30)),
    ],
)
def test_parse_clock_time_formats(raw, expected):
    assert parse_clock_time(raw) == expected


def test_parse_clock_time_rejects_garbage():
    with pytest.raises(ValueError):
        parse_clock_time("after lunch")


def test_hours_between():
    assert hours_between(date(2024, 1, 1), "09:00", "17:30") == Decimal("8.50")
    assert hours_between(date(2024, 1, 1), "09:00", "08:00") == Decimal("0")
    assert hours_between(date(2024, 1, 1), "09:00", "09:20") == Decimal("0.33")


def test_derive_hours_needs_both_clock_times():
    data = {"date": date(2024, 1, 1), "clock_in": "09:00", "clock_out": None, "hours_worked": Decimal("4")}

    assert derive_hours_worked(data)["hours_worked"] == Decimal("4")


def test_derive_hours_reports_bad_clock_out():
    data = {"date": date(2024, 1, 1), "clock_in": "09:00", "clock_out": "late", "hours_worked": None}

    with pytest.raises(ValidationError) as excinfo:
        derive_hours_worked(data)

    assert excinfo.value.errors[0].field == "clockOut"


def test_apply_quick_mark():
    present = apply_quick_mark({"status": "present", "clock_in": None, "clock_out": "18:00"}, "08:00:00")
    absent = apply_quick_mark({"status": "absent", "clock_in": "08:00", "clock_out": None}, "08:00:00")

    assert present == {"status": "present", "clock_in": "08:00:00", "clock_out": None, "hours_worked": Decimal("8.00")}
    assert absent["clock_in"] is None
    assert absent["hours_worked"] == Decimal("0")


def test_compute_totals():
    gross, net = compute_totals(Decimal("5000"), Decimal("200"), Decimal("300"), Decimal("150"))

    assert gross == Decimal("5500.00")
    assert net == Decimal("5350.00")


def test_net_pay_may_go_negative():
    assert compute_totals(Decimal("100"), Decimal("0"), Decimal("0"), Decimal("250"))[1] == Decimal("-150.00")


def test_stamp_review(monkeypatch):
    monkeypatch.setattr(clock, "utcnow", lambda: datetime(2024, 1, 2, 3, 4))

    approved = stamp_review({"status": "approved"}, "Reviewer")
    pending = stamp_review({"status": "pending"}, "Reviewer")
    untouched = stamp_review({"reason": "x"}, "Reviewer")

    assert approved["reviewed_at"] == datetime(2024, 1, 2, 3, 4)
    assert approved["reviewed_by"] == "Reviewer"
    assert "reviewed_at" not in pending
    assert "reviewed_by" not in untouched


def test_generated_employee_ids_have_prefix():
    assert generate_employee_id().startswith("EMP")
    assert generate_employee_id() != generate_employee_id()


def test_unique_employee_id_skips_taken_and_supplied(monkeypatch):
    storage = MemoryStorage()
    storage.employees.create({"employee_id": "EMPTAKEN", "email": "x@example.com"})
    candidates = iter(["EMPTAKEN", "EMPCALLER", "EMPFRESH"])
    monkeypatch.setattr(
        "hr_admin.domains.employees.service.generate_employee_id", lambda: next(candidates)
    )

    assert unique_employee_id(storage.employees, supplied="EMPCALLER") == "EMPFRESH"
