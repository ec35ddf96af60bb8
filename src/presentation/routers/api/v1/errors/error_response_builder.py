"""Error response builder for RFC 7807 Problem Details.

Builds RFC 7807 responses from domain errors carried in ``Failure``.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# error code -> (HTTP status, title)
_ERROR_STATUS: dict[ErrorCode, tuple[int, str]] = {
    ErrorCode.INVALID_PERMISSION: (status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    ErrorCode.INVALID_ROLE: (status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    ErrorCode.VALIDATION_FAILED: (status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    ErrorCode.USER_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ErrorCode.ROLE_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ErrorCode.RESOURCE_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ErrorCode.TOKEN_EXPIRED: (
        status.HTTP_401_UNAUTHORIZED,
        "Authentication Required",
    ),
    ErrorCode.TOKEN_INVALID: (
        status.HTTP_401_UNAUTHORIZED,
        "Authentication Required",
    ),
    ErrorCode.AUTHENTICATION_FAILED: (
        status.HTTP_401_UNAUTHORIZED,
        "Authentication Required",
    ),
    ErrorCode.PERMISSION_DENIED: (status.HTTP_403_FORBIDDEN, "Access Denied"),
    ErrorCode.ROLE_REQUIRED: (status.HTTP_403_FORBIDDEN, "Access Denied"),
    ErrorCode.ADMIN_REQUIRED: (status.HTTP_403_FORBIDDEN, "Access Denied"),
    ErrorCode.RESOURCE_NOT_OWNED: (status.HTTP_403_FORBIDDEN, "Access Denied"),
}


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> match parse_permission(name):
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(error, request)
    """

    @staticmethod
    def from_domain_error(error: DomainError, request: Request) -> JSONResponse:
        """Convert a DomainError to an RFC 7807 JSON response.

        Args:
            error: Domain error to convert.
            request: FastAPI Request object (for instance URL).

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code, title = ErrorResponseBuilder.status_for(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=title,
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=get_trace_id(),
        )

        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def status_for(code: ErrorCode) -> tuple[int, str]:
        """Map a domain error code to (HTTP status, title).

        Unmapped codes become 500 Internal Server Error.
        """
        return _ERROR_STATUS.get(
            code, (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")
        )
