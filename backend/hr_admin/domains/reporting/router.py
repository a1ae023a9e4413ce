from typing import Optional

from fastapi import APIRouter, Query

from hr_admin.api.dependencies import StorageDep
from hr_admin.core import clock
from hr_admin.domains.payroll.schemas import PAY_PERIOD_PATTERN

from . import aggregates
from .schemas import OverviewReportOut, PayrollSummaryOut, StatsOut

router = APIRouter(prefix="/api", tags=["reporting"])


def _current_period() -> str:
    return clock.today().strftime("%Y-%m")


@router.get("/stats", response_model=StatsOut)
def dashboard_stats(storage: StorageDep):
    today = clock.today()
    return aggregates.dashboard_stats(
        storage.employees.list(),
        storage.attendance.list_by_date(today),
        storage.leave_requests.list(),
        today=today,
    )


@router.get("/reports/overview", response_model=OverviewReportOut)
def overview_report(
    storage: StorageDep, period: Optional[str] = Query(None, pattern=PAY_PERIOD_PATTERN)
):
    return aggregates.overview_report(
        storage.employees.list(),
        storage.attendance.list(),
        storage.leave_requests.list(),
        storage.payroll.list(),
        period=period or _current_period(),
    )


@router.get("/reports/payroll", response_model=PayrollSummaryOut)
def payroll_report(
    storage: StorageDep,
    period: Optional[str] = Query(None, pattern=PAY_PERIOD_PATTERN),
    employee_id: Optional[str] = Query(None, alias="employeeId"),
):
    records = aggregates.filter_payroll(storage.payroll.list(), period=period, employee_id=employee_id)
    return aggregates.payroll_summary(records)
