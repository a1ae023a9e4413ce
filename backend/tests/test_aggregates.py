from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from hr_admin.domains.reporting import aggregates


@dataclass
class Emp:
    department: str
    salary: Optional[Decimal] = None
    employment_type: str = "full-time"


@dataclass
class Att:
    date: date
    status: str


@dataclass
class Leave:
    status: str
    leave_type: str = "vacation"


@dataclass
class Pay:
    gross_pay: Decimal
    net_pay: Decimal
    deductions: Decimal
    pay_period: str = "2024-01"
    employee_id: str = "EMP1"


def test_group_count_by():
    counts = aggregates.group_count_by([Emp("Ops"), Emp("Ops"), Emp("HR")], lambda e: e.department)

    assert counts == {"Ops": 2, "HR": 1}


def test_sum_by_treats_missing_as_zero():
    total = aggregates.sum_by([Emp("Ops", Decimal("10.50")), Emp("Ops")], lambda e: e.salary)

    assert total == Decimal("10.50")


def test_rate_guards_zero_whole():
    assert aggregates.rate(3, 0) == Decimal("0")
    assert aggregates.rate(1, 3) == Decimal("33.33")
    assert aggregates.rate(2, 2) == Decimal("100")


def test_average_salary_without_employees_is_zero():
    assert aggregates.average_salary([]) == Decimal("0")


def test_average_salary_counts_missing_salary_as_zero():
    employees = [Emp("Ops", Decimal("3000")), Emp("Ops"), Emp("HR", Decimal("0"))]

    assert aggregates.average_salary(employees) == Decimal("1000")


def test_department_percentages_sum_to_hundred():
    employees = [Emp("Ops"), Emp("HR"), Emp("Sales"), Emp("Ops"), Emp("HR"), Emp("Legal"), Emp("Ops")]

    entries = aggregates.distribution(employees, lambda e: e.department)

    assert abs(sum(entry["percentage"] for entry in entries) - Decimal("100")) <= Decimal("0.05")
    assert entries[0] == {"key": "Ops", "count": 3, "percentage": Decimal("42.86")}
    assert sum(entry["count"] for entry in entries) == len(employees)


def test_distribution_of_nothing_is_empty():
    assert aggregates.distribution([], lambda e: e.department) == []


def test_payroll_summary():
    records = [
        Pay(Decimal("5500"), Decimal("5350"), Decimal("150")),
        Pay(Decimal("4500"), Decimal("4000"), Decimal("500")),
    ]

    summary = aggregates.payroll_summary(records)

    assert summary == {
        "count": 2,
        "total_gross": Decimal("10000"),
        "total_net": Decimal("9350"),
        "total_deductions": Decimal("650"),
        "average_gross": Decimal("5000"),
    }


def test_payroll_summary_of_nothing():
    summary = aggregates.payroll_summary([])

    assert summary["count"] == 0
    assert summary["average_gross"] == Decimal("0")


def test_filter_payroll():
    records = [Pay(1, 1, 0, "2024-01", "A"), Pay(1, 1, 0, "2024-02", "A"), Pay(1, 1, 0, "2024-02", "B")]

    assert len(aggregates.filter_payroll(records, period="2024-02")) == 2
    assert len(aggregates.filter_payroll(records, period="2024-02", employee_id="A")) == 1
    assert len(aggregates.filter_payroll(records)) == 3


def test_dashboard_stats_rounds_average_half_up():
    today = date(2024, 2, 1)
    stats = aggregates.dashboard_stats(
        [Emp("Ops", Decimal("1000.50")), Emp("Ops", Decimal("1000.50"))],
        [Att(today, "present"), Att(today, "late"), Att(date(2024, 1, 31), "present")],
        [Leave("pending"), Leave("approved"), Leave("pending")],
        today=today,
    )

    assert stats == {
        "total_employees": 2,
        "present_today": 1,
        "leave_requests": 2,
        "avg_salary": 1001,
    }
