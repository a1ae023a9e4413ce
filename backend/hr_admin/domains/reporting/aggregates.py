"""Read-side projections over already-fetched record collections.

Everything here is a pure function of its inputs; nothing is persisted. Money
stays in ``Decimal``; percentages are on a 0-100 scale rounded to 2 places.
"""

from __future__ import annotations

from collections import Counter
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Hashable, Iterable, Optional, Sequence

ZERO = Decimal("0")
HUNDRED = Decimal("100")
TWO_PLACES = Decimal("0.01")


def _as_decimal(value: Any) -> Decimal:
    if value is None or value == "":
        return ZERO
    return value if isinstance(value, Decimal) else Decimal(str(value))


def group_count_by(records: Iterable[Any], key_fn: Callable[[Any], Hashable]) -> dict[Hashable, int]:
    return dict(Counter(key_fn(record) for record in records))


def sum_by(records: Iterable[Any], field_fn: Callable[[Any], Any]) -> Decimal:
    return sum((_as_decimal(field_fn(record)) for record in records), ZERO)


def rate(part: Any, whole: Any) -> Decimal:
    """``part`` as a percentage of ``whole``; 0 when there is nothing to divide by."""
    whole = _as_decimal(whole)
    if whole == 0:
        return ZERO.quantize(TWO_PLACES)
    return (_as_decimal(part) * HUNDRED / whole).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def average(values: Sequence[Any]) -> Decimal:
    if not values:
        return ZERO.quantize(TWO_PLACES)
    total = sum((_as_decimal(value) for value in values), ZERO)
    return (total / len(values)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def distribution(records: Sequence[Any], key_fn: Callable[[Any], Hashable]) -> list[dict[str, Any]]:
    counts = group_count_by(records, key_fn)
    total = len(records)
    ordered = sorted(counts.items(), key=lambda item: (-item[1], str(item[0])))
    return [
        {"key": key, "count": count, "percentage": rate(count, total)} for key, count in ordered
    ]


def average_salary(employees: Sequence[Any]) -> Decimal:
    # Missing salaries count as 0 so the average is over the whole headcount
    return average([employee.salary for employee in employees])


def payroll_summary(records: Sequence[Any]) -> dict[str, Any]:
    total_gross = sum_by(records, lambda record: record.gross_pay)
    return {
        "count": len(records),
        "total_gross": total_gross,
        "total_net": sum_by(records, lambda record: record.net_pay),
        "total_deductions": sum_by(records, lambda record: record.deductions),
        "average_gross": average([record.gross_pay for record in records]),
    }


def filter_payroll(
    records: Iterable[Any], period: Optional[str] = None, employee_id: Optional[str] = None
) -> list[Any]:
    return [
        record
        for record in records
        if (period is None or record.pay_period == period)
        and (employee_id is None or record.employee_id == employee_id)
    ]


def in_month(value: date, period: str) -> bool:
    return value.strftime("%Y-%m") == period


def dashboard_stats(
    employees: Sequence[Any],
    attendance: Iterable[Any],
    leave_requests: Iterable[Any],
    today: date,
) -> dict[str, Any]:
    present_today = sum(
        1 for record in attendance if record.date == today and record.status == "present"
    )
    pending = sum(1 for request in leave_requests if request.status == "pending")
    avg_salary = average_salary(employees).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return {
        "total_employees": len(employees),
        "present_today": present_today,
        "leave_requests": pending,
        "avg_salary": int(avg_salary),
    }


def overview_report(
    employees: Sequence[Any],
    attendance: Sequence[Any],
    leave_requests: Sequence[Any],
    payroll: Sequence[Any],
    period: str,
) -> dict[str, Any]:
    month_attendance = [record for record in attendance if in_month(record.date, period)]
    present = sum(1 for record in month_attendance if record.status == "present")
    leave_status = group_count_by(leave_requests, lambda request: request.status)
    return {
        "period": period,
        "total_employees": len(employees),
        "average_salary": average_salary(employees),
        "department_distribution": distribution(employees, lambda e: e.department),
        "employment_type_distribution": distribution(employees, lambda e: e.employment_type),
        "attendance_rate": rate(present, len(month_attendance)),
        "leave_status": {
            status: leave_status.get(status, 0) for status in ("pending", "approved", "rejected")
        },
        "leave_type_distribution": distribution(leave_requests, lambda r: r.leave_type),
        "payroll": payroll_summary(filter_payroll(payroll, period=period)),
    }
