from sqlalchemy import Column, Date, DateTime, Integer, Numeric, String, UniqueConstraint

from hr_admin.core import clock
from hr_admin.db.session import Base


class AttendanceRecord(Base):
    __tablename__ = "attendance"
    __table_args__ = (UniqueConstraint("employee_id", "date", name="uq_attendance_employee_date"),)

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(String(32), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)

    # Free-form time of day as entered (09:00, 9:05:12 AM, ...)
    clock_in = Column(String(20), nullable=True)
    clock_out = Column(String(20), nullable=True)

    status = Column(String(20), nullable=False)  # present|absent|late
    hours_worked = Column(Numeric(4, 2), nullable=True)
    created_at = Column(DateTime, default=clock.utcnow)
