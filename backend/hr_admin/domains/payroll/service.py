from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from hr_admin.core.errors import NotFoundError
from hr_admin.core.logging import get_logger
from hr_admin.core.observability import RECORDS_CREATED
from hr_admin.domains.common import quantize_money
from hr_admin.models import PayrollRecord
from hr_admin.storage.base import Storage

from .schemas import PayrollCreate, PayrollUpdate

logger = get_logger(__name__)

COMPONENTS = ("basic_salary", "overtime", "bonuses", "deductions")


def compute_totals(
    basic_salary: Decimal, overtime: Decimal, bonuses: Decimal, deductions: Decimal
) -> tuple[Decimal, Decimal]:
    """Return (gross_pay, net_pay) for one pay period."""
    gross_pay = quantize_money(basic_salary + overtime + bonuses)
    net_pay = quantize_money(gross_pay - deductions)
    return gross_pay, net_pay


def apply_totals(data: dict[str, Any]) -> dict[str, Any]:
    data["gross_pay"], data["net_pay"] = compute_totals(*(data[name] for name in COMPONENTS))
    return data


def list_payroll(storage: Storage, employee_id: Optional[str] = None) -> list[PayrollRecord]:
    if employee_id:
        return list(storage.payroll.list_by_employee(employee_id))
    return list(storage.payroll.list())


def get_payroll(storage: Storage, record_id: int) -> PayrollRecord:
    record = storage.payroll.get(record_id)
    if record is None:
        raise NotFoundError("Payroll record not found")
    return record


def create_payroll(storage: Storage, payload: PayrollCreate) -> PayrollRecord:
    data = apply_totals(payload.model_dump())
    record = storage.payroll.create(data)

    RECORDS_CREATED.add(1, {"record_type": "payroll"})
    logger.info(
        "payroll_processed",
        id=record.id,
        employee_id=record.employee_id,
        pay_period=record.pay_period,
        net_pay=str(record.net_pay),
    )
    return record


def update_payroll(storage: Storage, record_id: int, payload: PayrollUpdate) -> PayrollRecord:
    existing = get_payroll(storage, record_id)
    changes = payload.changes()

    # Component edits keep the totals consistent; bare total edits are stored as sent
    if any(name in changes for name in COMPONENTS):
        merged = {name: changes.get(name, getattr(existing, name)) for name in COMPONENTS}
        changes.update(apply_totals(merged))

    record = storage.payroll.update(record_id, changes)
    if record is None:
        raise NotFoundError("Payroll record not found")
    logger.info("payroll_updated", id=record_id, fields=sorted(changes))
    return record
