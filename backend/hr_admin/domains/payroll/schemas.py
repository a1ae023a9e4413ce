from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from hr_admin.domains.common import CamelModel, Money, MoneyOrZero, OptionalMoney, PatchModel

PAY_PERIOD_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


class PayrollCreate(CamelModel):
    employee_id: str = Field(..., min_length=1, max_length=32)
    pay_period: str = Field(..., pattern=PAY_PERIOD_PATTERN)
    basic_salary: Money
    overtime: MoneyOrZero = Decimal("0.00")
    bonuses: MoneyOrZero = Decimal("0.00")
    deductions: MoneyOrZero = Decimal("0.00")
    # Accepted and ignored: totals are always recomputed
    gross_pay: OptionalMoney = None
    net_pay: OptionalMoney = None


class PayrollUpdate(PatchModel):
    non_nullable = frozenset({"employee_id", "pay_period", "basic_salary"})

    employee_id: Optional[str] = Field(None, min_length=1, max_length=32)
    pay_period: Optional[str] = Field(None, pattern=PAY_PERIOD_PATTERN)
    basic_salary: OptionalMoney = None
    overtime: MoneyOrZero = Decimal("0.00")
    bonuses: MoneyOrZero = Decimal("0.00")
    deductions: MoneyOrZero = Decimal("0.00")
    gross_pay: OptionalMoney = None
    net_pay: OptionalMoney = None


class PayrollOut(CamelModel):
    id: int
    employee_id: str
    pay_period: str
    basic_salary: Decimal
    overtime: Decimal
    bonuses: Decimal
    deductions: Decimal
    gross_pay: Decimal
    net_pay: Decimal
    processed_at: Optional[datetime] = None
