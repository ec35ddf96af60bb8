"""Users resource handlers.

Handler functions for the current principal and authorization checks.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    get_me               - Current principal with permissions
    get_user_permissions - Effective permissions for a user resource
    check_permission     - Does the caller hold a permission?
    check_role           - Does the caller hold a role?
    check_action         - May the caller act on a resource type?
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from src.application.services.authorization_service import AuthorizationService
from src.core.container import (
    get_authority_enforcer,
    get_authorization_service,
    get_logger,
)
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.enums import Permission, UserRole
from src.domain.protocols import AuthorityEnforcerProtocol, LoggerProtocol
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_user,
    get_current_user_optional,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.authorization_schemas import (
    ActionCheckResponse,
    CurrentUserResponse,
    PermissionCheckResponse,
    RoleCheckResponse,
    UserPermissionsResponse,
)


def parse_permission(value: str) -> Result[Permission, ValidationError]:
    """Resolve a path value (case-insensitive) to a permission."""
    identifier = value.upper()
    if identifier not in Permission.values():
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_PERMISSION,
                message=f"Unknown permission: {value}",
                field="permission",
            )
        )
    return Success(value=Permission(identifier))


def parse_role(value: str) -> Result[UserRole, ValidationError]:
    """Resolve a path value (case-insensitive) to a role."""
    identifier = value.upper()
    if not UserRole.is_valid(identifier):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_ROLE,
                message=f"Unknown role: {value}",
                field="role",
            )
        )
    return Success(value=UserRole(identifier))


async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
) -> CurrentUserResponse:
    """Get the current principal.

    GET /api/v1/users/me → 200 OK (401 without a valid token)
    """
    return CurrentUserResponse.from_user(current_user)


async def get_user_permissions(
    user_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AuthorizationService, Depends(get_authorization_service)],
    enforcer: Annotated[AuthorityEnforcerProtocol, Depends(get_authority_enforcer)],
    logger: Annotated[LoggerProtocol, Depends(get_logger)],
) -> UserPermissionsResponse:
    """Get effective permissions for a user resource.

    GET /api/v1/users/{user_id}/permissions → 200 OK

    Allowed for holders of PERMISSION_USER_READ or anyone who may access the
    user's resources (admins, the user themselves). The caller's own
    effective permissions are returned; no user store backs other ids.

    Raises:
        HTTPException 403: If neither condition holds.
    """
    allowed = enforcer.is_granted(
        current_user.roles, Permission.USER_READ.authority
    ) or service.can_access_user_resource(current_user, user_id)

    if not allowed:
        logger.warning(
            "authorization_denied",
            user_id=str(current_user.id),
            target_user_id=str(user_id),
            required_permission=Permission.USER_READ.authority,
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=(
                "Access denied: Missing required permission "
                f"{Permission.USER_READ.display_name}"
            ),
        )

    return UserPermissionsResponse(
        user_id=user_id,
        permissions=sorted(
            p.value for p in service.get_all_permissions(current_user)
        ),
    )


async def check_permission(
    request: Request,
    permission: str,
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
    service: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> PermissionCheckResponse | JSONResponse:
    """Check whether the caller holds a permission.

    GET /api/v1/users/check-permission/{permission} → 200 OK

    Anonymous callers get ``false``. Unknown permission → 400.
    """
    match parse_permission(permission):
        case Success(value=parsed):
            return PermissionCheckResponse(
                has_permission=service.has_permission(current_user, parsed)
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


async def check_role(
    request: Request,
    role: str,
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
    service: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> RoleCheckResponse | JSONResponse:
    """Check whether the caller holds a role.

    GET /api/v1/users/check-role/{role} → 200 OK

    Anonymous callers get ``false``. Unknown role → 400.
    """
    match parse_role(role):
        case Success(value=parsed):
            return RoleCheckResponse(has_role=service.has_role(current_user, parsed))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


async def check_action(
    resource_type: str,
    action: str,
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
    service: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> ActionCheckResponse:
    """Check whether the caller may perform an action on a resource type.

    GET /api/v1/users/check-action/{resource_type}/{action} → 200 OK

    Unknown resource types or actions answer ``false``.
    """
    return ActionCheckResponse(
        resource_type=resource_type,
        action=action,
        allowed=service.can_perform_action(current_user, resource_type, action),
    )
