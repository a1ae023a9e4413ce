"""Leave request submission and the pending -> approved/rejected review."""

from __future__ import annotations

from typing import Any, Optional

from hr_admin.core import clock
from hr_admin.core.errors import ConflictError, NotFoundError, ValidationError
from hr_admin.core.logging import get_logger
from hr_admin.core.observability import RECORDS_CREATED
from hr_admin.models import LeaveRequest
from hr_admin.storage.base import Storage

from .schemas import LeaveRequestCreate, LeaveRequestUpdate

logger = get_logger(__name__)

PENDING = "pending"


def stamp_review(changes: dict[str, Any], reviewer: str) -> dict[str, Any]:
    """Add reviewed_at/reviewed_by when the change decides the request."""
    status = changes.get("status")
    if status is not None and status != PENDING:
        changes["reviewed_at"] = clock.utcnow()
        changes["reviewed_by"] = reviewer
    return changes


def list_leave_requests(storage: Storage, employee_id: Optional[str] = None) -> list[LeaveRequest]:
    if employee_id:
        return list(storage.leave_requests.list_by_employee(employee_id))
    return list(storage.leave_requests.list())


def get_leave_request(storage: Storage, record_id: int) -> LeaveRequest:
    request = storage.leave_requests.get(record_id)
    if request is None:
        raise NotFoundError("Leave request not found")
    return request


def create_leave_request(storage: Storage, payload: LeaveRequestCreate) -> LeaveRequest:
    data = payload.model_dump(exclude={"status"})
    data.update(status=PENDING, reviewed_at=None, reviewed_by=None)
    request = storage.leave_requests.create(data)

    RECORDS_CREATED.add(1, {"record_type": "leave_request"})
    logger.info(
        "leave_request_created",
        id=request.id,
        employee_id=request.employee_id,
        leave_type=request.leave_type,
    )
    return request


def update_leave_request(
    storage: Storage, record_id: int, payload: LeaveRequestUpdate, reviewer: str
) -> LeaveRequest:
    existing = get_leave_request(storage, record_id)
    changes = payload.changes()

    if "status" in changes and existing.status != PENDING:
        if changes["status"] != existing.status:
            raise ConflictError(f"Leave request already {existing.status}")
        # Repeating the current decision is a no-op, not a re-review
        del changes["status"]

    start = changes.get("start_date", existing.start_date)
    end = changes.get("end_date", existing.end_date)
    if end < start:
        raise ValidationError.for_field("endDate", "endDate must not be before startDate")

    stamp_review(changes, reviewer)
    request = storage.leave_requests.update(record_id, changes)
    if request is None:
        raise NotFoundError("Leave request not found")

    if "reviewed_at" in changes:
        logger.info(
            "leave_request_reviewed", id=record_id, status=request.status, reviewed_by=reviewer
        )
    else:
        logger.info("leave_request_updated", id=record_id, fields=sorted(changes))
    return request
