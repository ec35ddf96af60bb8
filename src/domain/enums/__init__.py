"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.
Enums are centralized here for discoverability and maintainability.

Available Enums:
    - Permission: Fine-grained capabilities (50 entries)
    - PermissionGroup: Entity category a permission governs
    - UserRole: RBAC roles (SUPER_ADMIN, ADMIN, EDITOR, MODERATOR, USER)
"""

from src.domain.enums.permission import Permission, PermissionGroup
from src.domain.enums.user_role import UserRole, role_permissions

__all__ = [
    "Permission",
    "PermissionGroup",
    "UserRole",
    "role_permissions",
]
