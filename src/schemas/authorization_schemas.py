"""Authorization request/response schemas.

Pydantic models for response serialization. Kept separate from domain
enums and entities - these are HTTP-layer concerns.

Endpoints:
    GET /api/v1/permissions                               - Permission catalog
    GET /api/v1/roles                                     - Role catalog
    GET /api/v1/roles/{role}                              - One role
    GET /api/v1/users/me                                  - Current principal
    GET /api/v1/users/{user_id}/permissions               - Effective permissions
    GET /api/v1/users/check-permission/{permission}       - Permission check
    GET /api/v1/users/check-role/{role}                   - Role check
    GET /api/v1/users/check-action/{resource_type}/{action} - Action check
    GET /api/v1/admin/stats                               - Admin statistics
    GET /api/v1/admin/system                              - System information
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import User
from src.domain.enums import Permission, UserRole


def _sorted_values(items: frozenset[Permission] | frozenset[UserRole]) -> list[str]:
    return sorted(item.value for item in items)


# =============================================================================
# Catalog
# =============================================================================


class PermissionResponse(BaseModel):
    """One permission of the catalog."""

    identifier: str = Field(..., examples=["NEWS_CREATE"])
    authority: str = Field(..., examples=["PERMISSION_NEWS_CREATE"])
    display_name: str = Field(..., examples=["Create news"])
    description: str = Field(..., examples=["Ability to create news articles"])
    group: str = Field(..., examples=["news"])

    @classmethod
    def from_permission(cls, permission: Permission) -> "PermissionResponse":
        return cls(
            identifier=permission.value,
            authority=permission.authority,
            display_name=permission.display_name,
            description=permission.description,
            group=permission.group.value,
        )


class PermissionListResponse(BaseModel):
    """Permission catalog in declaration order."""

    permissions: list[PermissionResponse]
    total_count: int


class RoleResponse(BaseModel):
    """One role with its derived permission identifiers."""

    identifier: str = Field(..., examples=["EDITOR"])
    authority: str = Field(..., examples=["ROLE_EDITOR"])
    display_name: str = Field(..., examples=["Editor"])
    description: str = Field(..., examples=["Content creation and editing"])
    hierarchy_level: int = Field(..., ge=1, le=5, examples=[3])
    is_admin: bool
    can_manage_content: bool
    can_moderate: bool
    permissions: list[str] = Field(..., description="Sorted permission identifiers")

    @classmethod
    def from_role(cls, role: UserRole) -> "RoleResponse":
        return cls(
            identifier=role.value,
            authority=role.authority,
            display_name=role.display_name,
            description=role.description,
            hierarchy_level=role.hierarchy_level,
            is_admin=role.is_admin,
            can_manage_content=role.can_manage_content,
            can_moderate=role.can_moderate,
            permissions=_sorted_values(role.permissions),
        )


class RoleListResponse(BaseModel):
    """Role catalog, highest rank first."""

    roles: list[RoleResponse]


# =============================================================================
# Users
# =============================================================================


class CurrentUserResponse(BaseModel):
    """Current principal with effective permissions and authorities."""

    id: UUID
    username: str
    email: str
    roles: list[str]
    permissions: list[str]
    authorities: list[str]
    is_admin: bool

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "0190b6e4-9c3d-7f2a-8b1e-5d4c3b2a1f0e",
                "username": "moderator",
                "email": "moderator@example.com",
                "roles": ["MODERATOR"],
                "permissions": ["CONTENT_APPROVE", "NEWS_MODERATE"],
                "authorities": ["PERMISSION_CONTENT_APPROVE", "ROLE_MODERATOR"],
                "is_admin": False,
            }
        }
    )

    @classmethod
    def from_user(cls, user: User) -> "CurrentUserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            roles=_sorted_values(user.roles),
            permissions=_sorted_values(user.permissions),
            authorities=sorted(user.authorities),
            is_admin=user.is_admin(),
        )


class UserPermissionsResponse(BaseModel):
    """Effective permissions returned for a user resource."""

    user_id: UUID
    permissions: list[str]


class PermissionCheckResponse(BaseModel):
    has_permission: bool


class RoleCheckResponse(BaseModel):
    has_role: bool


class ActionCheckResponse(BaseModel):
    resource_type: str
    action: str
    allowed: bool


# =============================================================================
# Admin
# =============================================================================


class AdminStatsResponse(BaseModel):
    """Authorization catalog statistics (admin only)."""

    total_permissions: int
    total_roles: int
    policy_count: int
    permissions_per_role: dict[str, int]


class SystemInfoResponse(BaseModel):
    """System information (super admin only)."""

    app_name: str
    app_version: str
    environment: str
    token_lifetime_minutes: int
