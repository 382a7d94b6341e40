"""RFC 7807 Problem Details error responses and exception handlers"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.api.responses import UTF8JSONResponse
from taskboard.errors import (
    InternalError,
    NotFoundError,
    UniquenessViolationError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ERROR_TYPE_BASE = "https://taskboard.local/errors"


class ValidationErrorDetail(BaseModel):
    """Validation error detail for a specific field"""
    field: str
    message: str


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs"""
    type: str = Field(..., description="URI reference identifying the problem type")
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Human-readable explanation")
    instance: Optional[str] = Field(None, description="URI reference identifying the specific occurrence")
    errors: Optional[List[ValidationErrorDetail]] = Field(None, description="Validation errors")


def create_error_response(
    status_code: int,
    title: str,
    detail: str,
    error_type: Optional[str] = None,
    instance: Optional[str] = None,
    errors: Optional[List[Dict[str, str]]] = None
) -> JSONResponse:
    """
    Create an RFC 7807 compliant error response

    Args:
        status_code: HTTP status code
        title: Short error title
        detail: Detailed error message
        error_type: Error type slug (defaults to one derived from the status code)
        instance: Request path or identifier
        errors: List of validation errors with field and message

    Returns:
        JSONResponse with problem details
    """
    error_type_map = {
        400: "validation_error",
        404: "not_found",
        405: "method_not_allowed",
        409: "conflict",
        500: "internal_server_error",
    }

    if not error_type:
        error_type = error_type_map.get(status_code, "error")

    problem = ProblemDetail(
        type=f"{ERROR_TYPE_BASE}/{error_type}",
        title=title,
        status=status_code,
        detail=detail,
        instance=instance or None,
        errors=errors or None,
    )

    return UTF8JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True)
    )


def not_found_error(detail: str = "Resource not found", instance: Optional[str] = None) -> JSONResponse:
    """Create a 404 Not Found error response"""
    return create_error_response(
        status_code=status.HTTP_404_NOT_FOUND,
        title="Not Found",
        detail=detail,
        instance=instance
    )


def validation_error(
    detail: str = "Validation failed",
    errors: Optional[List[Dict[str, str]]] = None,
    instance: Optional[str] = None
) -> JSONResponse:
    """Create a 400 Validation Error response"""
    return create_error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        title="Validation Error",
        detail=detail,
        errors=errors,
        instance=instance
    )


def conflict_error(detail: str = "Resource conflict", instance: Optional[str] = None) -> JSONResponse:
    """Create a 409 Conflict error response"""
    return create_error_response(
        status_code=status.HTTP_409_CONFLICT,
        title="Conflict",
        detail=detail,
        instance=instance
    )


def internal_server_error(
    detail: str = "An internal server error occurred",
    instance: Optional[str] = None
) -> JSONResponse:
    """Create a 500 Internal Server Error response"""
    return create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        title="Internal Server Error",
        detail=detail,
        instance=instance
    )


def _field_name(location: Any) -> str:
    # ("body", "name") -> "name"; ("path", "project_id") -> "project_id"
    parts = [str(part) for part in location if part not in ("body", "query", "path")]
    return ".".join(parts) or "body"


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return not_found_error(detail=exc.message, instance=request.url.path)


async def handle_uniqueness_violation(request: Request, exc: UniquenessViolationError) -> JSONResponse:
    return conflict_error(detail=exc.message, instance=request.url.path)


async def handle_validation(request: Request, exc: ValidationError) -> JSONResponse:
    return validation_error(
        detail=exc.message,
        errors=[{"field": exc.field, "message": exc.message}],
        instance=request.url.path,
    )


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON and schema mismatches are reported as 400, not 422"""
    errors = [
        {"field": _field_name(error.get("loc", ())), "message": error.get("msg", "")}
        for error in exc.errors()
    ]
    return validation_error(
        detail="Request body or parameters are invalid",
        errors=errors,
        instance=request.url.path,
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return create_error_response(
        status_code=exc.status_code,
        title=str(exc.detail) if exc.status_code < 500 else "Internal Server Error",
        detail=str(exc.detail),
        instance=request.url.path,
    )


async def handle_internal(request: Request, exc: Exception) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error(f"Internal error on {request.method} {request.url.path}: {exc.message}")
        detail = exc.message
    else:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        detail = "An internal server error occurred"
    return internal_server_error(detail=detail, instance=request.url.path)


def register_exception_handlers(app: FastAPI) -> None:
    """Translate domain errors into problem-details responses"""
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(UniquenessViolationError, handle_uniqueness_violation)
    app.add_exception_handler(ValidationError, handle_validation)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(InternalError, handle_internal)
    app.add_exception_handler(Exception, handle_internal)
