"""User domain entity for authorization.

Pure business logic, no framework dependencies.

A user is the principal evaluated by the authorization gate: an identity
plus the set of roles it holds. Effective permissions are the union of the
permissions of every held role and are never stored on the entity.
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.enums import Permission, UserRole


@dataclass(frozen=True)
class User:
    """User domain entity with role-based authorization rules.

    Business Rules:
        - A user may hold zero or more roles
        - Effective permissions are the union over held roles
        - A user without roles has no permissions
        - SUPER_ADMIN and ADMIN manage anyone, including other
          administrators; everyone else manages only themselves
        - Roles are fixed once the user is created

    Attributes:
        id: Unique user identifier
        username: Login name
        email: User email address
        roles: Roles held by the user
        is_active: Account active status

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     username="editor",
        ...     email="editor@example.com",
        ...     roles=frozenset({UserRole.EDITOR}),
        ... )
        >>> user.has_permission(Permission.NEWS_CREATE)
        True
    """

    id: UUID
    username: str
    email: str
    roles: frozenset[UserRole] = field(default_factory=frozenset)
    is_active: bool = True

    def __post_init__(self) -> None:
        # Accept any iterable of roles, store it immutably.
        object.__setattr__(self, "roles", frozenset(self.roles))

    @property
    def permissions(self) -> frozenset[Permission]:
        """Union of the permissions of every held role."""
        return frozenset().union(*(role.permissions for role in self.roles))

    def get_all_permissions(self) -> frozenset[Permission]:
        return self.permissions

    def has_permission(self, permission: Permission) -> bool:
        return any(role.has_permission(permission) for role in self.roles)

    def has_any_permission(self, *permissions: Permission) -> bool:
        """True if at least one of the given permissions is held.

        An empty argument list yields False.
        """
        return any(self.has_permission(p) for p in permissions)

    def has_all_permissions(self, *permissions: Permission) -> bool:
        """True if every given permission is held.

        An empty argument list yields True.
        """
        return all(self.has_permission(p) for p in permissions)

    def has_role(self, role: UserRole) -> bool:
        return role in self.roles

    def has_any_role(self, *roles: UserRole) -> bool:
        return any(role in self.roles for role in roles)

    def is_admin(self) -> bool:
        """True if any held role is SUPER_ADMIN or ADMIN."""
        return any(role.is_admin for role in self.roles)

    def can_manage_user(self, target: "User | None") -> bool:
        """Check whether this user may manage another user.

        Args:
            target: User to be managed, or None.

        Returns:
            bool: True if managing target is allowed; False for no target.
        """
        if target is None:
            return False
        if self.has_any_role(UserRole.SUPER_ADMIN, UserRole.ADMIN):
            return True
        return self.id == target.id

    @property
    def authorities(self) -> frozenset[str]:
        """Authority strings granted to this user.

        Role authorities of every held role plus permission authorities of
        every effective permission.
        """
        return frozenset(
            [role.authority for role in self.roles]
            + [permission.authority for permission in self.permissions]
        )
