"""
Transport-level error mapping.

Each application error kind maps to exactly one HTTP status and wire code.
Responses always use the envelope ``{"error": {"code": ..., "message": ...}}``.
"""
# Standard library imports
from typing import Dict, Tuple

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..application.dto.error_dto import ErrorBody, ErrorResponse
from ..application.errors import AppError, AppErrorKind


VALIDATION_ERROR = "VALIDATION_ERROR"
DATABASE_ERROR = "DATABASE_ERROR"
NOT_FOUND = "NOT_FOUND"

DATABASE_ERROR_MESSAGE = "A database error occurred."
NOT_FOUND_MESSAGE = "Resource not found."

ERROR_STATUS: Dict[AppErrorKind, Tuple[int, str]] = {
    AppErrorKind.DOMAIN: (status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR),
    AppErrorKind.DATABASE: (status.HTTP_500_INTERNAL_SERVER_ERROR, DATABASE_ERROR),
    AppErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, NOT_FOUND),
}


def to_http_error(error: AppError) -> Tuple[int, str, str]:
    """
    Map an application error to (status code, wire code, message)
    
    Storage failures get a fixed message so engine details never reach
    the caller.
    """
    status_code, code = ERROR_STATUS[error.kind]
    if error.kind is AppErrorKind.DOMAIN:
        message = error.message
    elif error.kind is AppErrorKind.DATABASE:
        message = DATABASE_ERROR_MESSAGE
    else:
        message = NOT_FOUND_MESSAGE
    return status_code, code, message


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=ErrorBody(code=code, message=message))
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Convert AppError to the JSON error envelope."""
    status_code, code, message = to_http_error(exc)
    return error_response(status_code, code, message)


async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies and path parameters.
    
    Reports the first problem as "<location>: <reason>".
    """
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'Invalid value')}"
    else:
        message = "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR, message)


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(AppError, app_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)
