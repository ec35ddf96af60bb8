"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Authentication errors (TOKEN_*, AUTHENTICATION_*)
- Authorization errors (PERMISSION_*, ROLE_*, ADMIN_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_PERMISSION = "invalid_permission"
    INVALID_ROLE = "invalid_role"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    ROLE_NOT_FOUND = "role_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Authentication errors
    TOKEN_EXPIRED = "token_expired"
    TOKEN_INVALID = "token_invalid"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    ROLE_REQUIRED = "role_required"
    ADMIN_REQUIRED = "admin_required"
    RESOURCE_NOT_OWNED = "resource_not_owned"
