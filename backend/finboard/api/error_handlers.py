"""Error Handlers — map Finboard failures to the JSON error envelope.

Invariants:
    - FinboardError → exc.to_response() at exc.http_status, logged with the
      operation and invoice_id carried in its context
    - StorageError detail (context.debug_info) reaches the logs, never the body
    - RequestValidationError → 400 with the same field_errors shape the invoice
      form uses, keyed by the parameter name ("page", "query")
    - Exception (catch-all) → opaque 500

Design Decisions:
    - Log level follows ErrorSeverity: rejected sign-ins are warnings, storage
      failures are errors
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from finboard.core.errors import (
    ErrorCategory, ErrorSeverity, FinboardError,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FinboardError, finboard_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def finboard_error_handler(request: Request, exc: FinboardError):
    ctx = exc.context
    detail = (ctx.debug_info or {}).get("detail")
    logger.log(
        _LOG_LEVELS[exc.severity],
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}"
        + (f" ({detail})" if detail else ""),
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "operation": ctx.operation,
            "invoice_id": ctx.invoice_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def request_validation_handler(
    request: Request, exc: RequestValidationError,
):
    field_errors = query_field_errors(exc.errors())
    logger.warning(
        f"Rejected parameters on {request.url.path}: {sorted(field_errors)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request parameters.",
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.ERROR.value,
                "field_errors": field_errors,
            },
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )


def query_field_errors(errors) -> dict[str, list[str]]:
    """Pydantic error list -> {parameter: [messages]}, dropping the "query"/"path" prefix."""
    field_errors: dict[str, list[str]] = {}
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if len(loc) > 1 and loc[0] in ("query", "path", "body", "header"):
            loc = loc[1:]
        name = ".".join(loc) or "request"
        field_errors.setdefault(name, []).append(err["msg"])
    return field_errors
