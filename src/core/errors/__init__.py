"""Core errors package.

Usage:
    from src.core.errors import AuthorizationError, DomainError, ValidationError
"""

from src.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "AuthenticationError",
    "AuthorizationError",
]
