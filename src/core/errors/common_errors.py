"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures (unknown role/permission names)
- NotFoundError: Resource not found
- AuthenticationError: Missing or invalid credentials
- AuthorizationError: Access denied (missing permission, role, or admin rights)

Usage:
    from src.core.enums import ErrorCode
    from src.core.errors import AuthorizationError
    from src.core.result import Failure

    return Failure(error=AuthorizationError(
        code=ErrorCode.PERMISSION_DENIED,
        message="Access denied: Missing required permission Create new users",
        required_permission="PERMISSION_USER_CREATE",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Role, User, ...).
        resource_id: Identifier that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (no principal, invalid token)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (access denied).

    Distinguishable from every other error so the presentation layer can map
    it to 403 Forbidden.

    Attributes:
        required_permission: Authority string of the permission that was
            required, when a single permission was checked.
        required_role: Authority string of the role that was required.
    """

    required_permission: str | None = None
    required_role: str | None = None
