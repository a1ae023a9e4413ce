"""Exception taxonomy shared by the service, storage and API layers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class HRAdminError(Exception):
    """Base exception for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(HRAdminError):
    """Raised when a request body is malformed or violates a record rule."""

    status_code = 400

    def __init__(self, errors: list[FieldError], message: str = "Invalid data") -> None:
        super().__init__(message)
        self.errors = errors

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls([FieldError(field, message)])


class NotFoundError(HRAdminError):
    status_code = 404


class ConflictError(HRAdminError):
    """Raised when a state transition is not allowed from the current state."""

    status_code = 409


class UnexpectedError(HRAdminError):
    """Storage or infrastructure failure; the message is safe to show callers."""

    status_code = 500
