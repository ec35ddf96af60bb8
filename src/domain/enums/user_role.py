"""User roles for RBAC authorization.

This enum defines the privilege tiers of the association backend. Each
role bundles a fixed set of permissions derived from the permission groups.

Role Hierarchy:
    SUPER_ADMIN (5) > ADMIN (4) > EDITOR (3) > MODERATOR (2) > USER (1)

    - SUPER_ADMIN: Every permission in the catalog
    - ADMIN: All management groups plus system monitoring and audit
    - EDITOR: Content creation and editing
    - MODERATOR: Read access plus content review
    - USER: Read access and file download

Note:
    EDITOR carries NEWS_DELETE through the full news group while lacking
    MEMBER_DELETE, PLAYER_DELETE and TOURNAMENT_DELETE. Keep it that way.

Usage:
    from src.domain.enums import Permission, UserRole

    UserRole.EDITOR.has_permission(Permission.NEWS_CREATE)   # True
    UserRole.ADMIN.has_privilege_over(UserRole.EDITOR)       # True
    UserRole.MODERATOR.authority                             # "ROLE_MODERATOR"
"""

from enum import Enum
from functools import cache

from src.domain.enums.permission import Permission

AUTHORITY_PREFIX = "ROLE_"


class UserRole(str, Enum):
    """User roles for RBAC authorization.

    String Enum:
        Values equal member names so role identifiers round-trip through
        token claims and Casbin policies unchanged.
    """

    SUPER_ADMIN = "SUPER_ADMIN"
    """Full system access and management."""

    ADMIN = "ADMIN"
    """Content management and user administration."""

    EDITOR = "EDITOR"
    """Content creation and editing."""

    MODERATOR = "MODERATOR"
    """Content review and moderation."""

    USER = "USER"
    """Basic user access."""

    @property
    def display_name(self) -> str:
        return _ROLE_DETAILS[self][0]

    @property
    def description(self) -> str:
        return _ROLE_DETAILS[self][1]

    @property
    def hierarchy_level(self) -> int:
        """Rank in the hierarchy (higher number = more privileges)."""
        return _HIERARCHY_LEVELS[self]

    @property
    def authority(self) -> str:
        """Authority string, ``ROLE_`` followed by the identifier."""
        return f"{AUTHORITY_PREFIX}{self.value}"

    @property
    def permissions(self) -> frozenset[Permission]:
        """Permissions granted by this role.

        Derived once per role and shared afterwards; the returned set is
        immutable.
        """
        return role_permissions(self)

    @property
    def is_admin(self) -> bool:
        """True for SUPER_ADMIN and ADMIN."""
        return self in (UserRole.SUPER_ADMIN, UserRole.ADMIN)

    @property
    def can_manage_content(self) -> bool:
        """True for SUPER_ADMIN, ADMIN and EDITOR."""
        return self in (UserRole.SUPER_ADMIN, UserRole.ADMIN, UserRole.EDITOR)

    @property
    def can_moderate(self) -> bool:
        """True for SUPER_ADMIN, ADMIN and MODERATOR."""
        return self in (UserRole.SUPER_ADMIN, UserRole.ADMIN, UserRole.MODERATOR)

    def has_permission(self, permission: Permission) -> bool:
        return permission in self.permissions

    def has_privilege_over(self, other: "UserRole") -> bool:
        """Check if this role ranks at or above another.

        Equal ranks count, so every role has privilege over itself.

        Args:
            other: Role to compare against.

        Returns:
            bool: True if this role's level is greater than or equal.
        """
        return self.hierarchy_level >= other.hierarchy_level

    @classmethod
    def values(cls) -> list[str]:
        """Get all role identifiers as strings.

        Returns:
            list[str]: List of role identifiers.
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role identifier.

        Args:
            value: String to check.

        Returns:
            bool: True if value names a role.
        """
        return value in cls.values()

    @classmethod
    def from_authority(cls, authority: str) -> "UserRole":
        """Resolve a ``ROLE_<NAME>`` token back to its role.

        Raises:
            ValueError: If the token does not name a known role.
        """
        if not authority.startswith(AUTHORITY_PREFIX):
            raise ValueError(f"{authority!r} is not a role authority")
        return cls(authority.removeprefix(AUTHORITY_PREFIX))


_ROLE_DETAILS: dict[UserRole, tuple[str, str]] = {
    UserRole.SUPER_ADMIN: ("Super Administrator", "Full system access and management"),
    UserRole.ADMIN: ("Administrator", "Content management and user administration"),
    UserRole.EDITOR: ("Editor", "Content creation and editing"),
    UserRole.MODERATOR: ("Moderator", "Content review and moderation"),
    UserRole.USER: ("User", "Basic user access"),
}

_HIERARCHY_LEVELS: dict[UserRole, int] = {
    UserRole.SUPER_ADMIN: 5,
    UserRole.ADMIN: 4,
    UserRole.EDITOR: 3,
    UserRole.MODERATOR: 2,
    UserRole.USER: 1,
}


@cache
def role_permissions(role: UserRole) -> frozenset[Permission]:
    """Derive the permission set of a role.

    Pure function of the role; cached so each set is built at most once.

    Args:
        role: Role to derive permissions for.

    Returns:
        frozenset[Permission]: Permissions granted by the role.
    """
    match role:
        case UserRole.SUPER_ADMIN:
            return frozenset(Permission.all())
        case UserRole.ADMIN:
            return frozenset(
                (
                    *Permission.user_management(),
                    *Permission.member_management(),
                    *Permission.player_management(),
                    *Permission.tournament_management(),
                    *Permission.news_management(),
                    *Permission.media_management(),
                    *Permission.district_management(),
                    *Permission.content_moderation(),
                    *Permission.file_management(),
                    Permission.SYSTEM_MONITOR,
                    Permission.SYSTEM_AUDIT,
                )
            )
        case UserRole.EDITOR:
            return frozenset(
                (
                    Permission.MEMBER_READ,
                    Permission.MEMBER_UPDATE,
                    Permission.PLAYER_READ,
                    Permission.PLAYER_UPDATE,
                    Permission.PLAYER_MANAGE_STATISTICS,
                    Permission.PLAYER_MANAGE_ACHIEVEMENTS,
                    Permission.TOURNAMENT_READ,
                    Permission.TOURNAMENT_UPDATE,
                    Permission.TOURNAMENT_MANAGE_REGISTRATION,
                    *Permission.news_management(),
                    *Permission.media_management(),
                    Permission.DISTRICT_READ,
                    Permission.DISTRICT_UPDATE,
                    Permission.FILE_UPLOAD,
                    Permission.FILE_DOWNLOAD,
                    Permission.FILE_MANAGE,
                )
            )
        case UserRole.MODERATOR:
            return frozenset(
                (
                    Permission.MEMBER_READ,
                    Permission.PLAYER_READ,
                    Permission.TOURNAMENT_READ,
                    Permission.NEWS_READ,
                    Permission.NEWS_MODERATE,
                    Permission.MEDIA_READ,
                    Permission.DISTRICT_READ,
                    *Permission.content_moderation(),
                    Permission.FILE_DOWNLOAD,
                )
            )
        case UserRole.USER:
            return frozenset(
                (
                    Permission.MEMBER_READ,
                    Permission.PLAYER_READ,
                    Permission.TOURNAMENT_READ,
                    Permission.NEWS_READ,
                    Permission.MEDIA_READ,
                    Permission.DISTRICT_READ,
                    Permission.FILE_DOWNLOAD,
                )
            )
