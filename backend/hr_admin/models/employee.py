from sqlalchemy import Column, Date, DateTime, Integer, Numeric, String, Text

from hr_admin.core import clock
from hr_admin.db.session import Base


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)

    # Business id shown to HR staff (EMP...); generated by the service layer
    employee_id = Column(String(32), nullable=False, unique=True, index=True)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)

    department = Column(String(100), nullable=False)
    position = Column(String(100), nullable=False)
    start_date = Column(Date, nullable=False)
    salary = Column(Numeric(10, 2), nullable=True)
    employment_type = Column(String(20), nullable=False)     # full-time|part-time|contract|intern
    status = Column(String(20), nullable=False, default="active")  # active|on-leave|inactive

    created_at = Column(DateTime, default=clock.utcnow)
