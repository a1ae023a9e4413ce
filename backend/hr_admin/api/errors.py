"""Translate exceptions into the API's JSON error bodies."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hr_admin.core.errors import HRAdminError, ValidationError
from hr_admin.core.logging import get_logger

logger = get_logger(__name__)


def _field_name(loc: tuple) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def _message(error: dict) -> str:
    return error["msg"].removeprefix("Value error, ")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [{"field": _field_name(e["loc"]), "message": _message(e)} for e in exc.errors()]
    logger.info("request_rejected", path=request.url.path, errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid data", "errors": errors},
    )


async def domain_error_handler(request: Request, exc: HRAdminError) -> JSONResponse:
    content: dict = {"message": exc.message}
    if isinstance(exc, ValidationError):
        content["errors"] = [error.as_dict() for error in exc.errors]
        logger.info("request_rejected", path=request.url.path, errors=content["errors"])
    elif exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=content)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error", path=request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "An unexpected error occurred"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(HRAdminError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
