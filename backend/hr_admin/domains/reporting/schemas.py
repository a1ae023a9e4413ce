from decimal import Decimal

from hr_admin.domains.common import CamelModel


class StatsOut(CamelModel):
    total_employees: int
    present_today: int
    leave_requests: int
    avg_salary: int


class DistributionEntry(CamelModel):
    key: str
    count: int
    percentage: float


class PayrollSummaryOut(CamelModel):
    count: int
    total_gross: Decimal
    total_net: Decimal
    total_deductions: Decimal
    average_gross: Decimal


class LeaveStatusCounts(CamelModel):
    pending: int
    approved: int
    rejected: int


class OverviewReportOut(CamelModel):
    period: str
    total_employees: int
    average_salary: Decimal
    department_distribution: list[DistributionEntry]
    employment_type_distribution: list[DistributionEntry]
    attendance_rate: float
    leave_status: LeaveStatusCounts
    leave_type_distribution: list[DistributionEntry]
    payroll: PayrollSummaryOut
