"""Token generation protocol for domain layer.

Port for issuing and validating the bearer tokens that carry a principal's
identity and roles. Infrastructure provides the concrete adapter
(JWTService).

Token Strategy:
    - Short-lived access tokens (15 minutes by default)
    - Roles travel as identifiers in the ``roles`` claim
    - Stateless validation (no database lookup)
"""

from typing import Protocol, TypeAlias
from uuid import UUID

from src.core.result import Result

TokenPayload: TypeAlias = dict[str, str | int | list[str]]


class TokenGenerationProtocol(Protocol):
    """Access token generation and validation interface.

    Usage:
        token = token_service.generate_access_token(
            user_id=user.id,
            username=user.username,
            email=user.email,
            roles=[role.value for role in user.roles],
        )

        match token_service.validate_access_token(token):
            case Success(value=payload):
                user_id = UUID(payload["sub"])
            case Failure(error=error):
                ...  # 401
    """

    def generate_access_token(
        self,
        user_id: UUID,
        username: str,
        email: str,
        roles: list[str],
    ) -> str:
        """Generate signed access token.

        Args:
            user_id: Principal identifier (stored in 'sub' claim).
            username: Login name.
            email: User's email address.
            roles: Role identifiers (e.g. ["EDITOR"]).

        Returns:
            Encoded token string.
        """
        ...

    def validate_access_token(self, token: str) -> Result[TokenPayload, str]:
        """Validate access token and extract payload.

        Payload structure:
            {
                "sub": "user_id_uuid",
                "username": "editor",
                "email": "editor@example.com",
                "roles": ["EDITOR"],
                "iat": 1700000000,
                "exp": 1700000900,
                "jti": "unique_jwt_id"
            }

        Returns:
            Success with payload, or Failure with an AuthenticationError
            constant. Never raises for bad tokens.
        """
        ...
