"""API Route Registry - Single Source of Truth for all routes.

ROUTE_REGISTRY is the authoritative list of API v1 endpoints. Each entry
declares its handler, response model and auth policy; the generator turns
the policy into the matching authorization guard.

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import (
        register_routes_from_registry,
    )

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.domain.enums import UserRole
from src.presentation.routers.api.v1.admin import get_admin_stats, get_system_info
from src.presentation.routers.api.v1.catalog import (
    get_role,
    list_permissions,
    list_roles,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)
from src.presentation.routers.api.v1.users import (
    check_action,
    check_permission,
    check_role,
    get_me,
    get_user_permissions,
)
from src.schemas.authorization_schemas import (
    ActionCheckResponse,
    AdminStatsResponse,
    CurrentUserResponse,
    PermissionCheckResponse,
    PermissionListResponse,
    RoleCheckResponse,
    RoleListResponse,
    RoleResponse,
    SystemInfoResponse,
    UserPermissionsResponse,
)

_UNAUTHORIZED = ErrorSpec(status=401, description="Missing or invalid token")

# =============================================================================
# ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Catalog (3 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/permissions",
        handler=list_permissions,
        resource="permissions",
        tags=["Catalog"],
        summary="List permissions",
        operation_id="list_permissions",
        response_model=PermissionListResponse,
        auth_policy=AuthPolicy(level=AuthLevel.PUBLIC),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/roles",
        handler=list_roles,
        resource="roles",
        tags=["Catalog"],
        summary="List roles",
        operation_id="list_roles",
        response_model=RoleListResponse,
        auth_policy=AuthPolicy(level=AuthLevel.PUBLIC),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/roles/{role}",
        handler=get_role,
        resource="roles",
        tags=["Catalog"],
        summary="Get role",
        operation_id="get_role",
        response_model=RoleResponse,
        errors=[ErrorSpec(status=404, description="Role not found")],
        auth_policy=AuthPolicy(level=AuthLevel.PUBLIC),
    ),
    # =========================================================================
    # Users Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/me",
        handler=get_me,
        resource="users",
        tags=["Users"],
        summary="Get current user",
        description="Current principal with roles, permissions and authorities.",
        operation_id="get_current_user",
        response_model=CurrentUserResponse,
        errors=[_UNAUTHORIZED],
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/check-permission/{permission}",
        handler=check_permission,
        resource="users",
        tags=["Users"],
        summary="Check permission",
        operation_id="check_permission",
        response_model=PermissionCheckResponse,
        errors=[ErrorSpec(status=400, description="Unknown permission")],
        auth_policy=AuthPolicy(level=AuthLevel.PUBLIC),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/check-role/{role}",
        handler=check_role,
        resource="users",
        tags=["Users"],
        summary="Check role",
        operation_id="check_role",
        response_model=RoleCheckResponse,
        errors=[ErrorSpec(status=400, description="Unknown role")],
        auth_policy=AuthPolicy(level=AuthLevel.PUBLIC),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/check-action/{resource_type}/{action}",
        handler=check_action,
        resource="users",
        tags=["Users"],
        summary="Check action",
        operation_id="check_action",
        response_model=ActionCheckResponse,
        auth_policy=AuthPolicy(level=AuthLevel.PUBLIC),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/{user_id}/permissions",
        handler=get_user_permissions,
        resource="users",
        tags=["Users"],
        summary="Get user permissions",
        operation_id="get_user_permissions",
        response_model=UserPermissionsResponse,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=403, description="Missing PERMISSION_USER_READ"),
        ],
        auth_policy=AuthPolicy(
            level=AuthLevel.MANUAL_AUTH,
            rationale="PERMISSION_USER_READ or access to the user's own resources",
        ),
    ),
    # =========================================================================
    # Admin (2 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/admin/stats",
        handler=get_admin_stats,
        resource="admin",
        tags=["Admin"],
        summary="Authorization statistics",
        operation_id="get_admin_stats",
        response_model=AdminStatsResponse,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=403, description="Administrative privileges required"),
        ],
        auth_policy=AuthPolicy(level=AuthLevel.ADMIN),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/admin/system",
        handler=get_system_info,
        resource="admin",
        tags=["Admin"],
        summary="System information",
        operation_id="get_system_info",
        response_model=SystemInfoResponse,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=403, description="Super Administrator role required"),
        ],
        auth_policy=AuthPolicy(level=AuthLevel.ROLE, role=UserRole.SUPER_ADMIN),
    ),
]
