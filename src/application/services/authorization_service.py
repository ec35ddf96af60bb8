"""Authorization service (gate) for permission and role checks.

Single entry point the rest of the application consults before acting on
behalf of a principal. Every method takes the principal explicitly; a
missing principal (``None``) holds no roles and no permissions, so every
check against it is denied without raising.

Architecture:
    - Application service (stateless, no I/O, no logging)
    - Boolean queries never fail
    - ``require_*`` methods return ``Result[None, AuthorizationError]``;
      the presentation layer maps a Failure to 403 Forbidden

Usage:
    service = AuthorizationService()

    if service.can_perform_action(user, "news", "publish"):
        ...

    match service.require_admin(user):
        case Success():
            ...
        case Failure(error=error):
            raise HTTPException(status_code=403, detail=error.message)
"""

from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.enums import Permission, UserRole

# resource type -> action -> required permission
_RESOURCE_ACTIONS: dict[str, dict[str, Permission]] = {
    "member": {
        "create": Permission.MEMBER_CREATE,
        "read": Permission.MEMBER_READ,
        "update": Permission.MEMBER_UPDATE,
        "delete": Permission.MEMBER_DELETE,
        "manage_hierarchy": Permission.MEMBER_MANAGE_HIERARCHY,
    },
    "player": {
        "create": Permission.PLAYER_CREATE,
        "read": Permission.PLAYER_READ,
        "update": Permission.PLAYER_UPDATE,
        "delete": Permission.PLAYER_DELETE,
        "manage_statistics": Permission.PLAYER_MANAGE_STATISTICS,
        "manage_achievements": Permission.PLAYER_MANAGE_ACHIEVEMENTS,
    },
    "tournament": {
        "create": Permission.TOURNAMENT_CREATE,
        "read": Permission.TOURNAMENT_READ,
        "update": Permission.TOURNAMENT_UPDATE,
        "delete": Permission.TOURNAMENT_DELETE,
        "manage_registration": Permission.TOURNAMENT_MANAGE_REGISTRATION,
        "manage_results": Permission.TOURNAMENT_MANAGE_RESULTS,
    },
    "news": {
        "create": Permission.NEWS_CREATE,
        "read": Permission.NEWS_READ,
        "update": Permission.NEWS_UPDATE,
        "delete": Permission.NEWS_DELETE,
        "publish": Permission.NEWS_PUBLISH,
        "moderate": Permission.NEWS_MODERATE,
    },
    "media": {
        "create": Permission.MEDIA_CREATE,
        "read": Permission.MEDIA_READ,
        "update": Permission.MEDIA_UPDATE,
        "delete": Permission.MEDIA_DELETE,
        "manage_galleries": Permission.MEDIA_MANAGE_GALLERIES,
    },
    "district": {
        "create": Permission.DISTRICT_CREATE,
        "read": Permission.DISTRICT_READ,
        "update": Permission.DISTRICT_UPDATE,
        "delete": Permission.DISTRICT_DELETE,
        "manage_statistics": Permission.DISTRICT_MANAGE_STATISTICS,
    },
    "user": {
        "create": Permission.USER_CREATE,
        "read": Permission.USER_READ,
        "update": Permission.USER_UPDATE,
        "delete": Permission.USER_DELETE,
        "manage_roles": Permission.USER_MANAGE_ROLES,
    },
}


class AuthorizationService:
    """Stateless authorization gate.

    Safe to share across requests; holds no state.
    """

    def has_permission(self, principal: User | None, permission: Permission) -> bool:
        return principal is not None and principal.has_permission(permission)

    def has_any_permission(
        self, principal: User | None, *permissions: Permission
    ) -> bool:
        return principal is not None and principal.has_any_permission(*permissions)

    def has_all_permissions(
        self, principal: User | None, *permissions: Permission
    ) -> bool:
        """True if the principal holds every given permission.

        With no permissions given the answer is vacuously True for any
        present principal and False for a missing one.
        """
        return principal is not None and principal.has_all_permissions(*permissions)

    def has_role(self, principal: User | None, role: UserRole) -> bool:
        return principal is not None and principal.has_role(role)

    def has_any_role(self, principal: User | None, *roles: UserRole) -> bool:
        return principal is not None and principal.has_any_role(*roles)

    def is_admin(self, principal: User | None) -> bool:
        return principal is not None and principal.is_admin()

    def get_all_permissions(self, principal: User | None) -> frozenset[Permission]:
        """Effective permissions of the principal (empty when missing)."""
        if principal is None:
            return frozenset()
        return principal.get_all_permissions()

    def can_manage_user(
        self, principal: User | None, target: User | UUID | None
    ) -> bool:
        """Check whether the principal may manage another user.

        Args:
            principal: Acting user, or None.
            target: Target user, or only its identifier when the user record
                is not at hand. None is never manageable.

        Returns:
            bool: SUPER_ADMIN and ADMIN manage anyone, including other
                administrators. Everyone else manages only themselves.
        """
        if principal is None or target is None:
            return False
        if isinstance(target, User):
            return principal.can_manage_user(target)
        if principal.has_any_role(UserRole.SUPER_ADMIN, UserRole.ADMIN):
            return True
        return principal.id == target

    def can_access_user_resource(
        self, principal: User | None, resource_owner_id: UUID
    ) -> bool:
        """Admins access any resource; others only their own."""
        if principal is None:
            return False
        if principal.is_admin():
            return True
        return principal.id == resource_owner_id

    def can_perform_action(
        self, principal: User | None, resource_type: str, action: str
    ) -> bool:
        """Check a (resource type, action) pair against the action table.

        Both strings are matched case-insensitively. Unknown resource types
        or actions are denied.

        Args:
            principal: Acting user, or None.
            resource_type: member, player, tournament, news, media,
                district or user.
            action: create, read, update, delete, or a resource-specific
                action such as publish or manage_results.

        Returns:
            bool: True if the principal holds the mapped permission.
        """
        permission = _RESOURCE_ACTIONS.get(resource_type.lower(), {}).get(
            action.lower()
        )
        if permission is None:
            return False
        return self.has_permission(principal, permission)

    def require_permission(
        self, principal: User | None, permission: Permission
    ) -> Result[None, AuthorizationError]:
        if self.has_permission(principal, permission):
            return Success(value=None)
        return Failure(
            error=AuthorizationError(
                code=ErrorCode.PERMISSION_DENIED,
                message=(
                    "Access denied: Missing required permission "
                    f"{permission.display_name}"
                ),
                required_permission=permission.authority,
            )
        )

    def require_any_permission(
        self, principal: User | None, *permissions: Permission
    ) -> Result[None, AuthorizationError]:
        if self.has_any_permission(principal, *permissions):
            return Success(value=None)
        return Failure(error=_missing_permissions(permissions))

    def require_all_permissions(
        self, principal: User | None, *permissions: Permission
    ) -> Result[None, AuthorizationError]:
        if self.has_all_permissions(principal, *permissions):
            return Success(value=None)
        return Failure(error=_missing_permissions(permissions))

    def require_role(
        self, principal: User | None, role: UserRole
    ) -> Result[None, AuthorizationError]:
        if self.has_role(principal, role):
            return Success(value=None)
        return Failure(
            error=AuthorizationError(
                code=ErrorCode.ROLE_REQUIRED,
                message=f"Access denied: Missing required role {role.display_name}",
                required_role=role.authority,
            )
        )

    def require_admin(self, principal: User | None) -> Result[None, AuthorizationError]:
        if self.is_admin(principal):
            return Success(value=None)
        return Failure(
            error=AuthorizationError(
                code=ErrorCode.ADMIN_REQUIRED,
                message="Access denied: Administrative privileges required",
            )
        )


def _missing_permissions(permissions: tuple[Permission, ...]) -> AuthorizationError:
    return AuthorizationError(
        code=ErrorCode.PERMISSION_DENIED,
        message="Access denied: Missing required permissions",
        details={"required_permissions": ",".join(p.authority for p in permissions)},
    )
