"""
Global exception handlers for the FastAPI application.
Serializes exceptions into structured logs and JSON error bodies.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import math
from typing import Any, Optional

from textile_billing.core.integrations.observability import record_exception


logger = logging.getLogger(__name__)


class AppException(Exception):
    """Base application exception."""
    def __init__(self, message: str, status_code: int = 500, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ReferenceNotFoundError(AppException):
    """
    A bill names a buyer, dalal, material, dhara or tax that does not exist.
    
    ``reference`` is the name of the missing reference so callers can attach
    the message to the right form field.
    """
    def __init__(self, reference: str, reference_id: Optional[int] = None):
        self.reference = reference
        self.reference_id = reference_id
        super().__init__(
            f"Referenced {reference} not found",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details={"reference": reference, "id": reference_id},
        )


class ReferenceInUseError(AppException):
    """A reference record cannot be deleted while bills point at it."""
    def __init__(self, entity: str, entity_id: Any, bill_count: int):
        super().__init__(
            f"{entity} is used by {bill_count} bill(s) and cannot be deleted",
            status_code=status.HTTP_409_CONFLICT,
            details={"id": entity_id, "bill_count": bill_count},
        )


class DueDateOutOfRangeError(AppException):
    """Bill date plus payment term days falls outside the supported calendar."""
    def __init__(self, bill_date: Any, term_days: int):
        super().__init__(
            "Due date is out of range",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details={"date": str(bill_date), "days": term_days},
        )


class BillAlreadyPaidError(AppException):
    """Payment can only be marked received once."""
    def __init__(self, bill_id: int):
        super().__init__(
            "Bill is already marked as paid",
            status_code=status.HTTP_409_CONFLICT,
            details={"id": bill_id},
        )


def _error_response(request: Request, status_code: int, message: Any, details: Any = None) -> JSONResponse:
    """Build the JSON error envelope shared by every handler."""
    error = {"message": message, "path": request.url.path}
    if details is not None:
        error["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error})


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions."""
    level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
    logger.log(
        level,
        f"Application exception: {exc.message}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "details": exc.details,
        },
    )
    
    # Client errors are expected outcomes, only server faults get recorded
    if exc.status_code >= 500:
        record_exception(exc, request)
    
    return _error_response(request, exc.status_code, exc.message, exc.details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions raised by routing or endpoints."""
    logger.warning(
        f"HTTP exception: {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
        },
    )
    return _error_response(request, exc.status_code, exc.detail)


def _jsonable(value: Any) -> Any:
    """Make pydantic error payloads JSON-safe (ctx may carry exception objects, input may be non-finite)."""
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, Exception):
        return str(value)
    if isinstance(value, float) and not math.isfinite(value):
        # Rejected inputs such as 1e999 echo back as inf, which JSON cannot carry
        return str(value)
    return value


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors (bad numbers, missing fields, negative rates)."""
    errors = _jsonable(exc.errors())
    
    logger.warning(
        "Validation error",
        extra={
            "path": request.url.path,
            "errors": errors,
        },
    )
    return _error_response(request, status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation error", errors)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(
        f"Unhandled exception: {str(exc)}",
        extra={
            "path": request.url.path,
            "exception_type": type(exc).__name__,
        },
    )
    record_exception(exc, request)
    return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
