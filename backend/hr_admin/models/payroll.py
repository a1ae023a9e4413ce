from sqlalchemy import Column, DateTime, Integer, Numeric, String

from hr_admin.core import clock
from hr_admin.db.session import Base


class PayrollRecord(Base):
    __tablename__ = "payroll"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(String(32), nullable=False, index=True)
    pay_period = Column(String(7), nullable=False, index=True)  # YYYY-MM
    basic_salary = Column(Numeric(10, 2), nullable=False)
    overtime = Column(Numeric(10, 2), nullable=False, default=0)
    bonuses = Column(Numeric(10, 2), nullable=False, default=0)
    deductions = Column(Numeric(10, 2), nullable=False, default=0)
    gross_pay = Column(Numeric(10, 2), nullable=False)
    net_pay = Column(Numeric(10, 2), nullable=False)
    processed_at = Column(DateTime, default=clock.utcnow)
