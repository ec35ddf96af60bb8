"""RFC 7807 Problem Details for HTTP APIs.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> error = ErrorDetail(
        ...     field="permission",
        ...     code="invalid_permission",
        ...     message="Unknown permission: NEWS_ARCHIVE",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors (for validation failures)
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/forbidden",
        ...     title="Access Denied",
        ...     status=403,
        ...     detail="Access denied: Administrative privileges required",
        ...     instance="/api/v1/admin/stats",
        ...     trace_id="0190b6e4-9c3d-7f2a-8b1e-5d4c3b2a1f0e",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/forbidden"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Access Denied"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[403],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Access denied: Administrative privileges required"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/admin/stats"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
