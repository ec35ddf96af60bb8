"""Permission catalog for RBAC authorization.

This module defines every fine-grained capability in the association
backend as a closed string enum, plus the static groupings used to bundle
permissions into roles.

Authority Strings:
    Each permission maps to ``PERMISSION_<IDENTIFIER>`` (e.g.
    ``PERMISSION_MEMBER_DELETE``). Enforcement layers (Casbin policies,
    token claims) match granted against required capabilities using exactly
    this token.

Groups:
    user, member, player, tournament, news, media, district, system,
    content, file. Grouping is presentation/bundling only; it is a static
    lookup table, not stored state.

Usage:
    from src.domain.enums import Permission, PermissionGroup

    Permission.NEWS_CREATE.authority          # "PERMISSION_NEWS_CREATE"
    Permission.NEWS_CREATE.display_name       # "Create news"
    Permission.news_management()              # (NEWS_CREATE, ..., NEWS_MODERATE)
    Permission.for_group(PermissionGroup.FILE)
"""

from enum import Enum

AUTHORITY_PREFIX = "PERMISSION_"


class PermissionGroup(str, Enum):
    """Entity category a permission governs."""

    USER = "user"
    MEMBER = "member"
    PLAYER = "player"
    TOURNAMENT = "tournament"
    NEWS = "news"
    MEDIA = "media"
    DISTRICT = "district"
    SYSTEM = "system"
    CONTENT = "content"
    FILE = "file"


class Permission(str, Enum):
    """Fine-grained capabilities that roles bundle.

    String Enum:
        Values equal member names (``USER_CREATE``) so the identifier is
        stable across serialization, token claims and policy storage.
        Declaration order is the catalog order returned by ``all()``.
    """

    # User management
    USER_CREATE = "USER_CREATE"
    USER_READ = "USER_READ"
    USER_UPDATE = "USER_UPDATE"
    USER_DELETE = "USER_DELETE"
    USER_MANAGE_ROLES = "USER_MANAGE_ROLES"

    # Member management
    MEMBER_CREATE = "MEMBER_CREATE"
    MEMBER_READ = "MEMBER_READ"
    MEMBER_UPDATE = "MEMBER_UPDATE"
    MEMBER_DELETE = "MEMBER_DELETE"
    MEMBER_MANAGE_HIERARCHY = "MEMBER_MANAGE_HIERARCHY"

    # Player management
    PLAYER_CREATE = "PLAYER_CREATE"
    PLAYER_READ = "PLAYER_READ"
    PLAYER_UPDATE = "PLAYER_UPDATE"
    PLAYER_DELETE = "PLAYER_DELETE"
    PLAYER_MANAGE_STATISTICS = "PLAYER_MANAGE_STATISTICS"
    PLAYER_MANAGE_ACHIEVEMENTS = "PLAYER_MANAGE_ACHIEVEMENTS"

    # Tournament management
    TOURNAMENT_CREATE = "TOURNAMENT_CREATE"
    TOURNAMENT_READ = "TOURNAMENT_READ"
    TOURNAMENT_UPDATE = "TOURNAMENT_UPDATE"
    TOURNAMENT_DELETE = "TOURNAMENT_DELETE"
    TOURNAMENT_MANAGE_REGISTRATION = "TOURNAMENT_MANAGE_REGISTRATION"
    TOURNAMENT_MANAGE_RESULTS = "TOURNAMENT_MANAGE_RESULTS"

    # News and content management
    NEWS_CREATE = "NEWS_CREATE"
    NEWS_READ = "NEWS_READ"
    NEWS_UPDATE = "NEWS_UPDATE"
    NEWS_DELETE = "NEWS_DELETE"
    NEWS_PUBLISH = "NEWS_PUBLISH"
    NEWS_MODERATE = "NEWS_MODERATE"

    # Media management
    MEDIA_CREATE = "MEDIA_CREATE"
    MEDIA_READ = "MEDIA_READ"
    MEDIA_UPDATE = "MEDIA_UPDATE"
    MEDIA_DELETE = "MEDIA_DELETE"
    MEDIA_MANAGE_GALLERIES = "MEDIA_MANAGE_GALLERIES"

    # District management
    DISTRICT_CREATE = "DISTRICT_CREATE"
    DISTRICT_READ = "DISTRICT_READ"
    DISTRICT_UPDATE = "DISTRICT_UPDATE"
    DISTRICT_DELETE = "DISTRICT_DELETE"
    DISTRICT_MANAGE_STATISTICS = "DISTRICT_MANAGE_STATISTICS"

    # System administration
    SYSTEM_ADMIN = "SYSTEM_ADMIN"
    SYSTEM_BACKUP = "SYSTEM_BACKUP"
    SYSTEM_RESTORE = "SYSTEM_RESTORE"
    SYSTEM_MONITOR = "SYSTEM_MONITOR"
    SYSTEM_AUDIT = "SYSTEM_AUDIT"

    # Content moderation
    CONTENT_MODERATE = "CONTENT_MODERATE"
    CONTENT_APPROVE = "CONTENT_APPROVE"
    CONTENT_REJECT = "CONTENT_REJECT"

    # File management
    FILE_UPLOAD = "FILE_UPLOAD"
    FILE_DOWNLOAD = "FILE_DOWNLOAD"
    FILE_DELETE = "FILE_DELETE"
    FILE_MANAGE = "FILE_MANAGE"

    @property
    def display_name(self) -> str:
        """Human-readable label (e.g. "Create news")."""
        return _PERMISSION_DETAILS[self][0]

    @property
    def description(self) -> str:
        """Human-readable description of the capability."""
        return _PERMISSION_DETAILS[self][1]

    @property
    def authority(self) -> str:
        """Authority string consumed by enforcement layers.

        Returns:
            str: ``PERMISSION_`` followed by the identifier.
        """
        return f"{AUTHORITY_PREFIX}{self.value}"

    @property
    def group(self) -> PermissionGroup:
        """Entity category this permission belongs to."""
        return _GROUP_OF[self]

    @classmethod
    def all(cls) -> tuple["Permission", ...]:
        """Every permission, in declaration order."""
        return tuple(cls)

    @classmethod
    def values(cls) -> list[str]:
        """Get all permission identifiers as strings.

        Returns:
            list[str]: List of permission identifiers.
        """
        return [permission.value for permission in cls]

    @classmethod
    def from_authority(cls, authority: str) -> "Permission":
        """Resolve an authority string back to its permission.

        Args:
            authority: Token such as ``PERMISSION_NEWS_CREATE``.

        Returns:
            Permission: The matching permission.

        Raises:
            ValueError: If the token does not name a known permission.
        """
        if not authority.startswith(AUTHORITY_PREFIX):
            raise ValueError(f"{authority!r} is not a permission authority")
        return cls(authority.removeprefix(AUTHORITY_PREFIX))

    @classmethod
    def for_group(cls, group: PermissionGroup) -> tuple["Permission", ...]:
        """Fixed subset of permissions governing one entity category."""
        return _GROUPS[group]

    @classmethod
    def user_management(cls) -> tuple["Permission", ...]:
        return _GROUPS[PermissionGroup.USER]

    @classmethod
    def member_management(cls) -> tuple["Permission", ...]:
        return _GROUPS[PermissionGroup.MEMBER]

    @classmethod
    def player_management(cls) -> tuple["Permission", ...]:
        return _GROUPS[PermissionGroup.PLAYER]

    @classmethod
    def tournament_management(cls) -> tuple["Permission", ...]:
        return _GROUPS[PermissionGroup.TOURNAMENT]

    @classmethod
    def news_management(cls) -> tuple["Permission", ...]:
        return _GROUPS[PermissionGroup.NEWS]

    @classmethod
    def media_management(cls) -> tuple["Permission", ...]:
        return _GROUPS[PermissionGroup.MEDIA]

    @classmethod
    def district_management(cls) -> tuple["Permission", ...]:
        return _GROUPS[PermissionGroup.DISTRICT]

    @classmethod
    def system_administration(cls) -> tuple["Permission", ...]:
        return _GROUPS[PermissionGroup.SYSTEM]

    @classmethod
    def content_moderation(cls) -> tuple["Permission", ...]:
        return _GROUPS[PermissionGroup.CONTENT]

    @classmethod
    def file_management(cls) -> tuple["Permission", ...]:
        return _GROUPS[PermissionGroup.FILE]


_PERMISSION_DETAILS: dict[Permission, tuple[str, str]] = {
    Permission.USER_CREATE: ("Create new users", "Ability to create new user accounts"),
    Permission.USER_READ: ("View users", "Ability to view user information"),
    Permission.USER_UPDATE: ("Update users", "Ability to update user information"),
    Permission.USER_DELETE: ("Delete users", "Ability to delete user accounts"),
    Permission.USER_MANAGE_ROLES: (
        "Manage user roles",
        "Ability to assign and remove user roles",
    ),
    Permission.MEMBER_CREATE: (
        "Create members",
        "Ability to create new association members",
    ),
    Permission.MEMBER_READ: ("View members", "Ability to view member information"),
    Permission.MEMBER_UPDATE: (
        "Update members",
        "Ability to update member information",
    ),
    Permission.MEMBER_DELETE: ("Delete members", "Ability to delete member records"),
    Permission.MEMBER_MANAGE_HIERARCHY: (
        "Manage member hierarchy",
        "Ability to manage organizational hierarchy",
    ),
    Permission.PLAYER_CREATE: (
        "Create players",
        "Ability to create new player profiles",
    ),
    Permission.PLAYER_READ: ("View players", "Ability to view player information"),
    Permission.PLAYER_UPDATE: (
        "Update players",
        "Ability to update player information",
    ),
    Permission.PLAYER_DELETE: ("Delete players", "Ability to delete player records"),
    Permission.PLAYER_MANAGE_STATISTICS: (
        "Manage player statistics",
        "Ability to update player statistics",
    ),
    Permission.PLAYER_MANAGE_ACHIEVEMENTS: (
        "Manage player achievements",
        "Ability to manage player achievements",
    ),
    Permission.TOURNAMENT_CREATE: (
        "Create tournaments",
        "Ability to create new tournaments",
    ),
    Permission.TOURNAMENT_READ: (
        "View tournaments",
        "Ability to view tournament information",
    ),
    Permission.TOURNAMENT_UPDATE: (
        "Update tournaments",
        "Ability to update tournament information",
    ),
    Permission.TOURNAMENT_DELETE: (
        "Delete tournaments",
        "Ability to delete tournament records",
    ),
    Permission.TOURNAMENT_MANAGE_REGISTRATION: (
        "Manage tournament registration",
        "Ability to manage tournament registrations",
    ),
    Permission.TOURNAMENT_MANAGE_RESULTS: (
        "Manage tournament results",
        "Ability to update tournament results",
    ),
    Permission.NEWS_CREATE: ("Create news", "Ability to create news articles"),
    Permission.NEWS_READ: ("View news", "Ability to view news articles"),
    Permission.NEWS_UPDATE: ("Update news", "Ability to update news articles"),
    Permission.NEWS_DELETE: ("Delete news", "Ability to delete news articles"),
    Permission.NEWS_PUBLISH: ("Publish news", "Ability to publish news articles"),
    Permission.NEWS_MODERATE: (
        "Moderate news",
        "Ability to moderate and approve news content",
    ),
    Permission.MEDIA_CREATE: ("Upload media", "Ability to upload media files"),
    Permission.MEDIA_READ: ("View media", "Ability to view media galleries"),
    Permission.MEDIA_UPDATE: ("Update media", "Ability to update media information"),
    Permission.MEDIA_DELETE: ("Delete media", "Ability to delete media files"),
    Permission.MEDIA_MANAGE_GALLERIES: (
        "Manage media galleries",
        "Ability to organize media galleries",
    ),
    Permission.DISTRICT_CREATE: (
        "Create districts",
        "Ability to create district information",
    ),
    Permission.DISTRICT_READ: (
        "View districts",
        "Ability to view district information",
    ),
    Permission.DISTRICT_UPDATE: (
        "Update districts",
        "Ability to update district information",
    ),
    Permission.DISTRICT_DELETE: (
        "Delete districts",
        "Ability to delete district records",
    ),
    Permission.DISTRICT_MANAGE_STATISTICS: (
        "Manage district statistics",
        "Ability to update district statistics",
    ),
    Permission.SYSTEM_ADMIN: (
        "System administration",
        "Full system administration access",
    ),
    Permission.SYSTEM_BACKUP: ("System backup", "Ability to perform system backups"),
    Permission.SYSTEM_RESTORE: (
        "System restore",
        "Ability to restore system from backups",
    ),
    Permission.SYSTEM_MONITOR: (
        "System monitoring",
        "Ability to monitor system health and performance",
    ),
    Permission.SYSTEM_AUDIT: ("System audit", "Ability to view system audit logs"),
    Permission.CONTENT_MODERATE: (
        "Moderate content",
        "Ability to moderate user-generated content",
    ),
    Permission.CONTENT_APPROVE: (
        "Approve content",
        "Ability to approve content for publication",
    ),
    Permission.CONTENT_REJECT: (
        "Reject content",
        "Ability to reject content submissions",
    ),
    Permission.FILE_UPLOAD: ("Upload files", "Ability to upload files to the system"),
    Permission.FILE_DOWNLOAD: (
        "Download files",
        "Ability to download files from the system",
    ),
    Permission.FILE_DELETE: ("Delete files", "Ability to delete files from the system"),
    Permission.FILE_MANAGE: (
        "Manage files",
        "Ability to organize and manage file structure",
    ),
}

_GROUPS: dict[PermissionGroup, tuple[Permission, ...]] = {
    PermissionGroup.USER: (
        Permission.USER_CREATE,
        Permission.USER_READ,
        Permission.USER_UPDATE,
        Permission.USER_DELETE,
        Permission.USER_MANAGE_ROLES,
    ),
    PermissionGroup.MEMBER: (
        Permission.MEMBER_CREATE,
        Permission.MEMBER_READ,
        Permission.MEMBER_UPDATE,
        Permission.MEMBER_DELETE,
        Permission.MEMBER_MANAGE_HIERARCHY,
    ),
    PermissionGroup.PLAYER: (
        Permission.PLAYER_CREATE,
        Permission.PLAYER_READ,
        Permission.PLAYER_UPDATE,
        Permission.PLAYER_DELETE,
        Permission.PLAYER_MANAGE_STATISTICS,
        Permission.PLAYER_MANAGE_ACHIEVEMENTS,
    ),
    PermissionGroup.TOURNAMENT: (
        Permission.TOURNAMENT_CREATE,
        Permission.TOURNAMENT_READ,
        Permission.TOURNAMENT_UPDATE,
        Permission.TOURNAMENT_DELETE,
        Permission.TOURNAMENT_MANAGE_REGISTRATION,
        Permission.TOURNAMENT_MANAGE_RESULTS,
    ),
    PermissionGroup.NEWS: (
        Permission.NEWS_CREATE,
        Permission.NEWS_READ,
        Permission.NEWS_UPDATE,
        Permission.NEWS_DELETE,
        Permission.NEWS_PUBLISH,
        Permission.NEWS_MODERATE,
    ),
    PermissionGroup.MEDIA: (
        Permission.MEDIA_CREATE,
        Permission.MEDIA_READ,
        Permission.MEDIA_UPDATE,
        Permission.MEDIA_DELETE,
        Permission.MEDIA_MANAGE_GALLERIES,
    ),
    PermissionGroup.DISTRICT: (
        Permission.DISTRICT_CREATE,
        Permission.DISTRICT_READ,
        Permission.DISTRICT_UPDATE,
        Permission.DISTRICT_DELETE,
        Permission.DISTRICT_MANAGE_STATISTICS,
    ),
    PermissionGroup.SYSTEM: (
        Permission.SYSTEM_ADMIN,
        Permission.SYSTEM_BACKUP,
        Permission.SYSTEM_RESTORE,
        Permission.SYSTEM_MONITOR,
        Permission.SYSTEM_AUDIT,
    ),
    PermissionGroup.CONTENT: (
        Permission.CONTENT_MODERATE,
        Permission.CONTENT_APPROVE,
        Permission.CONTENT_REJECT,
    ),
    PermissionGroup.FILE: (
        Permission.FILE_UPLOAD,
        Permission.FILE_DOWNLOAD,
        Permission.FILE_DELETE,
        Permission.FILE_MANAGE,
    ),
}

_GROUP_OF: dict[Permission, PermissionGroup] = {
    permission: group
    for group, permissions in _GROUPS.items()
    for permission in permissions
}
