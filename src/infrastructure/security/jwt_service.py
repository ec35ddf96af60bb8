"""JWT token service (adapter).

Implements TokenGenerationProtocol with PyJWT. Tokens carry the principal's
identity and role identifiers; the presentation layer turns a validated
payload into a User.

Security:
    - HMAC signing (HS256 by default)
    - 256-bit secret key minimum
    - Short expiration (15 minutes by default)
    - Unique JWT ID (jti) per token
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.protocols import TokenPayload

_REQUIRED_CLAIMS = ["sub", "exp", "iat"]


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(
            user_id=user.id,
            username=user.username,
            email=user.email,
            roles=["EDITOR"],
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        expiration_minutes: int = 15,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Signing key. MUST be at least 32 bytes.
            expiration_minutes: Token lifetime in minutes.
            algorithm: HMAC algorithm name understood by PyJWT.

        Raises:
            ValueError: If secret_key is shorter than 32 bytes.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = algorithm

    def generate_access_token(
        self,
        user_id: UUID,
        username: str,
        email: str,
        roles: list[str],
    ) -> str:
        """Generate signed access token.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(
            ...     user_id=uuid7(),
            ...     username="editor",
            ...     email="editor@example.com",
            ...     roles=["EDITOR"],
            ... )
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(user_id),
            "username": username,
            "email": email,
            "roles": roles,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[TokenPayload, str]:
        """Validate access token and extract payload.

        Signature, expiration and required claims are checked by PyJWT.

        Returns:
            Success(payload), Failure(AuthenticationError.EXPIRED_TOKEN) for
            expired tokens, Failure(AuthenticationError.INVALID_TOKEN) for
            anything else.
        """
        try:
            payload: TokenPayload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
            return Success(value=payload)

        except ExpiredSignatureError:
            return Failure(error=AuthenticationError.EXPIRED_TOKEN)
        except InvalidTokenError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)
