"""Global exception handlers for FastAPI application.

Convert exceptions into RFC 7807 Problem Details responses.

Handlers:
    http_exception_handler: HTTPException (401 from auth, 403 from guards)
    validation_exception_handler: RequestValidationError (422)
    generic_exception_handler: Any unhandled exception (500)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_UNPROCESSABLE = 422

# HTTP status code to (title, slug) mapping
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
}


def _status_info(status_code: int) -> tuple[str, str]:
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to Problem Details.

    Example:
        >>> raise HTTPException(
        ...     status_code=403,
        ...     detail="Access denied: Missing required role Super Administrator",
        ... )
        >>> # {
        >>> #   "type": "http://localhost:8000/errors/forbidden",
        >>> #   "title": "Access Denied",
        >>> #   "status": 403,
        >>> #   "detail": "Access denied: Missing required role Super Administrator",
        >>> #   "instance": "/api/v1/admin/system",
        >>> #   "trace_id": "..."
        >>> # }
    """
    # Type narrowing: FastAPI registers this handler only for HTTPException
    assert isinstance(exc, HTTPException)

    title, error_slug = _status_info(exc.status_code)

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{error_slug}",
        title=title,
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        errors=None,
        trace_id=get_trace_id(),
    )

    # Preserve any headers from HTTPException (e.g., WWW-Authenticate)
    headers = getattr(exc, "headers", None)

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert RequestValidationError to Problem Details with field errors."""
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["path", "user_id"] -> "user_id"
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p not in ("body", "path", "query")]
        field_name = ".".join(field_parts) if field_parts else "unknown"

        field_errors.append(
            ErrorDetail(
                field=field_name,
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/validation-failed",
        title="Validation Failed",
        status=_UNPROCESSABLE,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors if field_errors else None,
        trace_id=get_trace_id(),
    )

    return JSONResponse(
        status_code=_UNPROCESSABLE,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking internals."""
    trace_id = get_trace_id()

    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application."""
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
