"""JWT authentication dependencies.

FastAPI dependencies that turn a bearer token into the User principal the
authorization gate evaluates.

Usage:
    # Protected route (requires auth)
    @router.get("/protected")
    async def protected_route(
        current_user: User = Depends(get_current_user),
    ):
        return {"user_id": str(current_user.id)}

    # Optional auth route (anonymous callers get None)
    @router.get("/optional")
    async def optional_route(
        current_user: User | None = Depends(get_current_user_optional),
    ):
        ...
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_logger, get_token_service
from src.core.result import Failure, Success
from src.domain.entities import User
from src.domain.enums import UserRole
from src.domain.errors import AuthenticationError
from src.domain.protocols import LoggerProtocol, TokenPayload
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# HTTP Bearer token extractor
# auto_error=False so missing tokens surface as our own 401 / anonymous None
bearer_scheme_optional = HTTPBearer(auto_error=False)


def user_from_payload(payload: TokenPayload, logger: LoggerProtocol) -> User:
    """Build the principal from a validated token payload.

    Role identifiers the catalog does not know are dropped and logged,
    never mapped to a default role.

    Raises:
        KeyError: If a required claim is missing.
        ValueError: If 'sub' is not a UUID.
    """
    user_id = UUID(str(payload["sub"]))
    roles_raw = payload.get("roles", [])
    roles_claim = roles_raw if isinstance(roles_raw, list) else []

    roles: set[UserRole] = set()
    for value in roles_claim:
        if UserRole.is_valid(value):
            roles.add(UserRole(value))
        else:
            logger.warning("unknown_role_in_token", user_id=str(user_id), role=value)

    return User(
        id=user_id,
        username=str(payload.get("username", "")),
        email=str(payload.get("email", "")),
        roles=frozenset(roles),
    )


async def get_current_user_optional(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme_optional)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
    logger: Annotated[LoggerProtocol, Depends(get_logger)],
) -> User | None:
    """Get current user if authenticated, None otherwise.

    Does not raise for missing or invalid tokens; an anonymous caller is
    simply a missing principal.
    """
    if credentials is None:
        return None

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=payload):
            try:
                return user_from_payload(payload, logger)
            except (KeyError, ValueError):
                logger.warning("authentication_failed", reason="invalid_payload")
                return None
        case Failure(error=error):
            logger.warning("authentication_failed", reason=error)
            return None

    return None  # Explicit return for exhaustiveness


async def get_current_user(
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
) -> User:
    """Get current authenticated user.

    Returns:
        User principal from a valid token.

    Raises:
        HTTPException 401: If token is missing, invalid, or expired.
    """
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=AuthenticationError.MISSING_CREDENTIALS,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user
