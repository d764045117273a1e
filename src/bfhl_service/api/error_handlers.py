"""
FastAPI exception handlers for structured error responses.

Every error body uses the {"is_success": false, "error": ...} envelope.
Validation failures are itemized; server-side failures never leak details.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bfhl_service.api.models import ErrorResponse, ValidationErrorDetail
from bfhl_service.api.routes import BFHL_ALLOWED_METHODS, BFHL_PATH
from bfhl_service.models.input_models import MAX_ITEM_LENGTH, MAX_ITEMS
from bfhl_service.monitoring.metrics import bfhl_requests_total
from bfhl_service.processing.exceptions import ProcessingError

logger = logging.getLogger(__name__)

# pydantic error type -> client-facing message
VALIDATION_MESSAGES = {
    "list_type": "Data must be an array",
    "too_short": "Data array must contain at least one element",
    "too_long": f"Data array cannot exceed {MAX_ITEMS} elements",
    "string_type": "Each element must be a string",
    "string_too_short": "Each element must be at least 1 character long",
    "string_too_long": f"Each element cannot exceed {MAX_ITEM_LENGTH} characters",
}


def _error_response(status_code: int, **content: Any) -> JSONResponse:
    body = ErrorResponse(**content).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


def format_validation_errors(errors: list[dict[str, Any]]) -> list[ValidationErrorDetail]:
    """
    Convert pydantic/FastAPI errors into field + message pairs.

    The leading "body" location segment is dropped, so an oversized third
    element is reported as field "data.2".

    Args:
        errors: RequestValidationError.errors()

    Returns:
        One ValidationErrorDetail per error, in the order pydantic reported them
    """
    details = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        field = ".".join(str(part) for part in loc)

        error_type = error.get("type", "")
        # an empty body is reported as a missing "body", with no field path
        if error_type == "missing" and field in ("data", ""):
            message = "Data field is required"
        else:
            message = VALIDATION_MESSAGES.get(error_type, error.get("msg", "Invalid value"))

        details.append(ValidationErrorDetail(field=field, message=message))
    return details


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body validation errors.

    Maps to 400 Bad Request (client error).

    Args:
        request: FastAPI request
        exc: RequestValidationError instance

    Returns:
        JSON error response
    """
    errors = exc.errors()
    details = format_validation_errors(errors)
    is_json_error = any(error.get("type") == "json_invalid" for error in errors)

    logger.warning(
        "Invalid request format",
        extra={"errors": [detail.model_dump() for detail in details]},
    )
    bfhl_requests_total.labels(method=request.method, status="validation_error").inc()

    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        error="Invalid JSON format" if is_json_error else "Validation failed",
        details=details,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle routing-level HTTP errors (404, 405) in the common envelope.

    Args:
        request: FastAPI request
        exc: Starlette HTTPException instance

    Returns:
        JSON error response
    """
    headers = dict(exc.headers or {})

    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        if request.url.path == BFHL_PATH:
            allowed_methods = BFHL_ALLOWED_METHODS
        else:
            allowed_methods = [m.strip() for m in headers.get("Allow", "").split(",") if m.strip()]
        headers["Allow"] = ", ".join(allowed_methods)

        logger.warning(
            "Method not allowed",
            extra={"method": request.method, "path": request.url.path},
        )
        response = _error_response(
            exc.status_code,
            error="Method not allowed",
            allowed_methods=allowed_methods,
        )
    elif exc.status_code == status.HTTP_404_NOT_FOUND:
        response = _error_response(exc.status_code, error="Not found")
    else:
        response = _error_response(exc.status_code, error=str(exc.detail))

    response.headers.update(headers)
    return response


async def processing_error_handler(request: Request, exc: ProcessingError) -> JSONResponse:
    """
    Handle classification core errors.

    Maps to 500 Internal Server Error. The details go to the log only.

    Args:
        request: FastAPI request
        exc: ProcessingError instance

    Returns:
        JSON error response
    """
    logger.error(
        "Processing error",
        extra={
            "error_type": type(exc).__name__,
            "details": exc.details,
        },
        exc_info=True,
    )

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        error="Internal server error",
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.

    Maps to 500 Internal Server Error.

    Args:
        request: FastAPI request
        exc: Exception instance

    Returns:
        JSON error response
    """
    logger.exception(
        "Unexpected error",
        extra={"error_type": type(exc).__name__},
    )

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        error="Internal server error",
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    RequestValidationError: request_validation_error_handler,
    StarletteHTTPException: http_exception_handler,
    ProcessingError: processing_error_handler,
    Exception: generic_error_handler,
}
