"""Load a small demo data set through the storage interface.

Run against the configured database with ``python -m hr_admin.seed.seed_data``.
"""

from datetime import date

from hr_admin.core.logging import configure_logging, get_logger
from hr_admin.domains.attendance.schemas import AttendanceCreate
from hr_admin.domains.attendance.service import create_attendance
from hr_admin.domains.employees.schemas import EmployeeCreate
from hr_admin.domains.employees.service import create_employee
from hr_admin.domains.leave_requests.schemas import LeaveRequestCreate, LeaveRequestUpdate
from hr_admin.domains.leave_requests.service import create_leave_request, update_leave_request
from hr_admin.domains.payroll.schemas import PayrollCreate
from hr_admin.domains.payroll.service import create_payroll
from hr_admin.storage.base import Storage

logger = get_logger(__name__)

EMPLOYEES = [
    {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada.lovelace@example.com",
        "department": "Engineering",
        "position": "Staff Engineer",
        "startDate": "2020-01-06",
        "salary": "120000",
        "employmentType": "full-time",
    },
    {
        "firstName": "Grace",
        "lastName": "Hopper",
        "email": "grace.hopper@example.com",
        "department": "Engineering",
        "position": "Engineering Manager",
        "startDate": "2019-03-18",
        "salary": 135000,
        "employmentType": "full-time",
    },
    {
        "firstName": "Katherine",
        "lastName": "Johnson",
        "email": "katherine.johnson@example.com",
        "department": "Finance",
        "position": "Payroll Analyst",
        "startDate": "2022-09-01",
        "salary": "68000",
        "employmentType": "part-time",
    },
]


def seed(storage: Storage, work_date: date, reviewer: str = "HR Manager") -> None:
    employees = [create_employee(storage, EmployeeCreate(**row)) for row in EMPLOYEES]
    ada, grace, katherine = employees

    create_attendance(
        storage,
        AttendanceCreate(
            employeeId=ada.employee_id, date=work_date, clockIn="09:00", clockOut="17:30", status="present"
        ),
    )
    create_attendance(
        storage,
        AttendanceCreate(
            employeeId=grace.employee_id, date=work_date, clockIn="09:45", clockOut="18:00", status="late"
        ),
    )
    create_attendance(
        storage, AttendanceCreate(employeeId=katherine.employee_id, date=work_date, status="absent")
    )

    vacation = create_leave_request(
        storage,
        LeaveRequestCreate(
            employeeId=katherine.employee_id,
            leaveType="vacation",
            startDate=work_date,
            endDate=work_date,
            reason="Family trip",
        ),
    )
    update_leave_request(storage, vacation.id, LeaveRequestUpdate(status="approved"), reviewer)
    create_leave_request(
        storage,
        LeaveRequestCreate(
            employeeId=ada.employee_id,
            leaveType="personal",
            startDate=work_date,
            endDate=work_date,
        ),
    )

    period = work_date.strftime("%Y-%m")
    for employee in employees:
        monthly = employee.salary / 12
        create_payroll(
            storage,
            PayrollCreate(
                employeeId=employee.employee_id,
                payPeriod=period,
                basicSalary=monthly,
                deductions=monthly / 5,
            ),
        )

    logger.info("seed_complete", employees=len(employees), period=period)


if __name__ == "__main__":
    from hr_admin.core import clock
    from hr_admin.core.config import settings
    from hr_admin.db.session import Base, engine, session_scope
    from hr_admin.storage.database import DatabaseStorage

    configure_logging(settings.log_level)
    Base.metadata.create_all(bind=engine)
    with session_scope() as session:
        seed(DatabaseStorage(session), clock.today(), settings.reviewer_name)
