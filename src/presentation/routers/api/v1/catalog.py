"""Permission and role catalog handlers.

Public, read-only views of the static authorization catalog.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_permissions - Every permission in declaration order
    list_roles       - Every role, highest rank first
    get_role         - One role by identifier
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.domain.enums import Permission, UserRole
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.authorization_schemas import (
    PermissionListResponse,
    PermissionResponse,
    RoleListResponse,
    RoleResponse,
)


async def list_permissions() -> PermissionListResponse:
    """List the permission catalog.

    GET /api/v1/permissions → 200 OK
    """
    permissions = [PermissionResponse.from_permission(p) for p in Permission.all()]
    return PermissionListResponse(
        permissions=permissions,
        total_count=len(permissions),
    )


async def list_roles() -> RoleListResponse:
    """List the role catalog.

    GET /api/v1/roles → 200 OK
    """
    roles = sorted(UserRole, key=lambda r: r.hierarchy_level, reverse=True)
    return RoleListResponse(roles=[RoleResponse.from_role(r) for r in roles])


async def get_role(request: Request, role: str) -> RoleResponse | JSONResponse:
    """Get one role by identifier (case-insensitive).

    GET /api/v1/roles/{role} → 200 OK, 404 if unknown
    """
    identifier = role.upper()
    if not UserRole.is_valid(identifier):
        error = NotFoundError(
            code=ErrorCode.ROLE_NOT_FOUND,
            message=f"Role '{role}' does not exist",
            resource_type="Role",
            resource_id=role,
        )
        return ErrorResponseBuilder.from_domain_error(error, request)
    return RoleResponse.from_role(UserRole(identifier))
