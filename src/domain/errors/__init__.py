"""Domain error constants."""

from src.domain.errors.authentication_error import AuthenticationError

__all__ = [
    "AuthenticationError",
]
