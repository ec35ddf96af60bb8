"""Authentication domain errors.

Error value constants for bearer token validation. They travel inside
Result types and are never raised.

Usage:
    from src.domain.errors import AuthenticationError

    match token_service.validate_access_token(token):
        case Failure(error=AuthenticationError.EXPIRED_TOKEN):
            ...
"""


class AuthenticationError:
    """Authentication error constants.

    Used in Result types for token failures. These are NOT exceptions.
    """

    # Token validation errors
    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token expired"

    # Principal errors
    MISSING_CREDENTIALS = "Not authenticated"
