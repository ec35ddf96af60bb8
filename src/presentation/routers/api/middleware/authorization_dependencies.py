"""Authorization dependencies.

FastAPI dependency factories that guard routes with the authorization gate.
Use these in addition to JWT authentication.

Architecture:
    - JWT Authentication (auth_dependencies.py): Resolves the principal
    - Authorization (this file): Consults AuthorizationService (or the
      Casbin authority enforcer) and maps a denial to 403 Forbidden

Usage:
    @router.get("/admin/stats")
    async def stats(
        current_user: User = Depends(get_current_user),
        _: None = Depends(require_admin()),
    ):
        ...

    @router.delete("/news/{news_id}")
    async def delete_news(
        _: None = Depends(require_permission(Permission.NEWS_DELETE)),
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated, Any, TypeAlias

from fastapi import Depends, HTTPException, status

from src.application.services.authorization_service import AuthorizationService
from src.core.container import (
    get_authority_enforcer,
    get_authorization_service,
    get_logger,
)
from src.core.errors import AuthorizationError
from src.core.result import Failure, Result
from src.domain.entities import User
from src.domain.enums import Permission, UserRole
from src.domain.protocols import AuthorityEnforcerProtocol, LoggerProtocol
from src.presentation.routers.api.middleware.auth_dependencies import get_current_user

Guard: TypeAlias = Callable[..., Awaitable[None]]


def _raise_if_denied(
    result: Result[None, AuthorizationError],
    user: User,
    logger: LoggerProtocol,
) -> None:
    """Translate a denial into 403, logging it first."""
    if isinstance(result, Failure):
        error = result.error
        context: dict[str, Any] = {"user_id": str(user.id), "code": error.code.value}
        if error.required_permission:
            context["required_permission"] = error.required_permission
        if error.required_role:
            context["required_role"] = error.required_role
        logger.warning("authorization_denied", **context)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=error.message,
        )


def require_permission(permission: Permission) -> Guard:
    """Create a dependency that requires one permission.

    Raises:
        HTTPException 403: If the user lacks the permission.
    """

    async def permission_checker(
        current_user: Annotated[User, Depends(get_current_user)],
        service: Annotated[AuthorizationService, Depends(get_authorization_service)],
        logger: Annotated[LoggerProtocol, Depends(get_logger)],
    ) -> None:
        _raise_if_denied(
            service.require_permission(current_user, permission), current_user, logger
        )

    return permission_checker


def require_any_permission(*permissions: Permission) -> Guard:
    """Create a dependency that requires at least one of the permissions."""

    async def permission_checker(
        current_user: Annotated[User, Depends(get_current_user)],
        service: Annotated[AuthorizationService, Depends(get_authorization_service)],
        logger: Annotated[LoggerProtocol, Depends(get_logger)],
    ) -> None:
        _raise_if_denied(
            service.require_any_permission(current_user, *permissions),
            current_user,
            logger,
        )

    return permission_checker


def require_all_permissions(*permissions: Permission) -> Guard:
    """Create a dependency that requires every one of the permissions."""

    async def permission_checker(
        current_user: Annotated[User, Depends(get_current_user)],
        service: Annotated[AuthorizationService, Depends(get_authorization_service)],
        logger: Annotated[LoggerProtocol, Depends(get_logger)],
    ) -> None:
        _raise_if_denied(
            service.require_all_permissions(current_user, *permissions),
            current_user,
            logger,
        )

    return permission_checker


def require_role(role: UserRole) -> Guard:
    """Create a dependency that requires a specific role.

    Only the exact role counts; a higher-ranked role does not satisfy it.
    """

    async def role_checker(
        current_user: Annotated[User, Depends(get_current_user)],
        service: Annotated[AuthorizationService, Depends(get_authorization_service)],
        logger: Annotated[LoggerProtocol, Depends(get_logger)],
    ) -> None:
        _raise_if_denied(service.require_role(current_user, role), current_user, logger)

    return role_checker


def require_admin() -> Guard:
    """Create a dependency that requires SUPER_ADMIN or ADMIN."""

    async def admin_checker(
        current_user: Annotated[User, Depends(get_current_user)],
        service: Annotated[AuthorizationService, Depends(get_authorization_service)],
        logger: Annotated[LoggerProtocol, Depends(get_logger)],
    ) -> None:
        _raise_if_denied(service.require_admin(current_user), current_user, logger)

    return admin_checker


def require_authority(authority: str) -> Guard:
    """Create a dependency that requires an authority string.

    Checked through the Casbin enforcer, so either a ``PERMISSION_...`` or a
    ``ROLE_...`` token may be given.

    Args:
        authority: Authority string such as ``PERMISSION_USER_READ``.

    Raises:
        HTTPException 403: If no held role grants the authority.
    """

    async def authority_checker(
        current_user: Annotated[User, Depends(get_current_user)],
        enforcer: Annotated[
            AuthorityEnforcerProtocol, Depends(get_authority_enforcer)
        ],
        logger: Annotated[LoggerProtocol, Depends(get_logger)],
    ) -> None:
        if not enforcer.is_granted(current_user.roles, authority):
            logger.warning(
                "authorization_denied",
                user_id=str(current_user.id),
                required_authority=authority,
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied: Missing required authority {authority}",
            )

    return authority_checker
