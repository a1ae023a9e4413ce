from .attendance import AttendanceRecord
from .employee import Employee
from .leave_request import LeaveRequest
from .payroll import PayrollRecord

__all__ = ["Employee", "AttendanceRecord", "LeaveRequest", "PayrollRecord"]
